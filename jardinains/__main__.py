import logging
import time

import click
import pygame

from .difficulty import Difficulty
from .entities import FIELD_HEIGHT, FIELD_WIDTH
from .input_adapter import InputEvent
from .render import Renderer
from .session import DEFAULT_TICK_MS, create_session

logger = logging.getLogger(__name__)

KEY_DOWN_EVENTS = {
    pygame.K_LEFT: InputEvent.LEFT_DOWN,
    pygame.K_RIGHT: InputEvent.RIGHT_DOWN,
    pygame.K_SPACE: InputEvent.LAUNCH_PRESSED,
}
KEY_UP_EVENTS = {
    pygame.K_LEFT: InputEvent.LEFT_UP,
    pygame.K_RIGHT: InputEvent.RIGHT_UP,
}


def translate_key_event(event):
    """Map a pygame KEYDOWN/KEYUP event to an InputEvent, or None."""
    if event.type == pygame.KEYDOWN:
        return KEY_DOWN_EVENTS.get(event.key)
    if event.type == pygame.KEYUP:
        return KEY_UP_EVENTS.get(event.key)
    return None


def run_window(difficulty, tick_ms, seed=None):
    pygame.init()
    pygame.display.set_caption("Jardinains")
    window = pygame.display.set_mode((FIELD_WIDTH, FIELD_HEIGHT))
    renderer = Renderer(window)
    clock = pygame.time.Clock()

    session = create_session(difficulty, seed=seed)
    pending_ms = 0
    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                running = False
            else:
                input_event = translate_key_event(event)
                if input_event is not None:
                    session.apply_input(input_event)

        # Fixed-step driver: run as many ticks as the elapsed time covers.
        pending_ms += clock.tick(60)
        while pending_ms >= tick_ms:
            pending_ms -= tick_ms
            if not session.finished:
                session.advance()

        renderer.draw(session.snapshot())
        pygame.display.flip()

    pygame.quit()
    return session


def run_autoplay(difficulty, seed=None, max_steps=200_000):
    from .env import GameEnv
    from .policy import policy

    env = GameEnv(difficulty=difficulty)
    obs, info = env.reset(seed=seed)
    start_time = time.time()
    done = False
    steps = 0
    while not done and steps < max_steps:
        obs, reward, terminated, truncated, info = env.step(policy(env))
        done = terminated or truncated
        steps += 1

    duration = time.time() - start_time
    print(f"\nFinal State: {info['state']}")
    print(f"Final Score: {info['score']}")
    print(f"Lives Left: {info['lives']}")
    print(f"Total Ticks: {info['ticks']}")
    print(f"Avg FPS: {steps / duration if duration > 0 else 0:.2f}")
    env.close()
    return info


@click.command()
@click.option(
    "--difficulty",
    type=click.Choice([d.value for d in Difficulty], case_sensitive=False),
    default=Difficulty.MEDIUM.value,
    show_default=True,
)
@click.option("--tick-ms", type=click.IntRange(min=1), default=DEFAULT_TICK_MS, show_default=True,
              help="Milliseconds of host clock per game tick.")
@click.option("--seed", type=int, default=None, help="Seed for ball direction and trick bounces.")
@click.option("--autoplay", is_flag=True, help="Play headless with the scripted policy.")
@click.option("--log-level", type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"]), default="WARNING")
def main(difficulty, tick_ms, seed, autoplay, log_level):
    """Play Jardinains."""
    logging.basicConfig(level=log_level, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    logger.info("Starting %s game (tick %d ms)", difficulty, tick_ms)
    if autoplay:
        run_autoplay(difficulty, seed=seed)
    else:
        run_window(difficulty, tick_ms, seed=seed)


if __name__ == "__main__":
    main()
