import pygame
import pygame.gfxdraw

from .session import GameState

# --- Colors ---
COLOR_BG = (238, 238, 238)
COLOR_PADDLE = (0, 0, 255)
COLOR_BALL = (255, 0, 0)
COLOR_BRICK = (0, 255, 0)
COLOR_GNOME = (0, 0, 0)
COLOR_TEXT = (0, 0, 0)

GNOME_SIZE = 10


class Renderer:
    """Draws session snapshots onto a pygame surface.

    Only reads the snapshot; never touches the session itself.
    """

    def __init__(self, surface):
        pygame.font.init()
        self.surface = surface
        self.font = pygame.font.Font(None, 22)

    def draw(self, snap):
        self.surface.fill(COLOR_BG)
        if snap.state is not GameState.LOST:
            self._render_game(snap)
            self._render_hud(snap)
        else:
            self._text_at("Game Over", (350, 300))
        if snap.state is GameState.WON:
            self._text_at("You Win!", (350, 300))
        return self.surface

    def _render_game(self, snap):
        pygame.draw.rect(self.surface, COLOR_PADDLE, pygame.Rect(snap.paddle))

        for x, y, w, h in snap.bricks:
            pygame.draw.rect(self.surface, COLOR_BRICK, (x, y, w, h))
            # Gnome head sitting on the brick
            r = GNOME_SIZE // 2
            pygame.gfxdraw.filled_circle(self.surface, x + w // 2, y, r, COLOR_GNOME)

        bx, by, bw, bh = snap.ball
        pygame.draw.ellipse(self.surface, COLOR_BALL, (bx, by, bw, bh))

    def _render_hud(self, snap):
        self._text_at(f"Lives: {snap.lives}", (10, 20))
        self._text_at(f"Score: {snap.score}", (700, 20))
        if snap.state is GameState.IDLE:
            self._text_at("Press SPACE to launch the ball", (280, 300))

    def _text_at(self, message, baseline_pos):
        text = self.font.render(message, True, COLOR_TEXT)
        x, y = baseline_pos
        # Positions are text baselines, not top-left corners.
        self.surface.blit(text, (x, y - self.font.get_ascent()))
