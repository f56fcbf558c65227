"""Drawing the grid and its statistics in a window."""

from __future__ import annotations

import random

import pygame

from .cell import CellState
from .grid import Grid

GRID_WIDTH = 32
GRID_HEIGHT = 32
CELL_SIZE = 20
FONT_PATH: str | None = "graphics/fonts/arial.ttf"
FONT_SIZE = 16
STATISTICS_WIDTH = 200

Color = tuple[int, int, int, int]

BLUE: Color = (0, 0, 255, 255)
YELLOW: Color = (255, 255, 0, 255)
RED: Color = (255, 0, 0, 255)
GREEN: Color = (0, 255, 0, 255)
GRAY: Color = (100, 100, 100, 255)
WHITE: Color = (255, 255, 255, 255)
BLACK: Color = (0, 0, 0, 255)

_STATE_COLORS = {
    CellState.SUSCEPTIBLE: BLUE,
    CellState.EXPOSED: YELLOW,
    CellState.INFECTIOUS: RED,
    CellState.RECOVERED: GREEN,
}

_DEMO_PALETTE = (BLUE, YELLOW, RED, GREEN)


def color_for_state(state: int) -> Color:
    """Colour for a cell state; grey for anything unknown."""
    try:
        return _STATE_COLORS[CellState(state)]
    except ValueError:
        return GRAY


def _load_font() -> pygame.font.Font:
    try:
        font = pygame.font.Font(FONT_PATH, FONT_SIZE)
    except (OSError, pygame.error) as exc:
        raise RuntimeError(f"failed to load font: {exc}") from exc
    print("Font loaded successfully.")
    return font


class Renderer:
    """A window showing the grid with a statistics panel on its right."""

    def __init__(self, title: str, width: int, height: int) -> None:
        try:
            pygame.display.init()
            pygame.font.init()
            self.surface = pygame.display.set_mode((width, height))
            pygame.display.set_caption(title)
            self.font = _load_font()
        except (pygame.error, RuntimeError) as exc:
            pygame.quit()
            if isinstance(exc, RuntimeError):
                raise
            raise RuntimeError(f"could not initialise display: {exc}") from exc
        self._closed = False

    def draw_grid(self, grid: Grid) -> None:
        """Paint every cell in its state's colour and show the frame."""
        pygame.event.pump()
        for cell in grid.cells():
            rect = (cell.x * CELL_SIZE, cell.y * CELL_SIZE, CELL_SIZE, CELL_SIZE)
            self.surface.fill(color_for_state(cell.state), rect)
        pygame.display.flip()

    def draw_statistics(
        self,
        total_moved: int,
        total_infections: int,
        total_exposures: int,
        iteration: int,
    ) -> list[str]:
        """Write the running totals in the side panel; returns the lines drawn."""
        lines = [
            f"Iteration: {iteration}",
            f"Total Grid Moves: {total_moved}",
            f"Total Infections: {total_infections}",
            f"Total Exposures: {total_exposures}",
        ]
        x = GRID_WIDTH * CELL_SIZE + 10
        for offset, line in enumerate(lines):
            self.draw_text_line(line, x, 10 + 25 * offset, WHITE)
        return lines

    def draw_text_line(self, text: str, x: int, y: int, color: Color) -> pygame.Rect:
        """Draw ``text`` on a black box at (x, y); returns the box."""
        text_surface = self.font.render(text, False, color)
        dest = pygame.Rect(x, y, text_surface.get_width(), text_surface.get_height())
        self.surface.fill(BLACK, dest)
        self.surface.blit(text_surface, dest)
        return dest

    def close(self) -> None:
        if not self._closed:
            self._closed = True
            pygame.quit()

    def __enter__(self) -> Renderer:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def run_demo(rng: random.Random) -> list[list[int]]:
    """Show a grid of random states until the window is closed.

    Returns the states that were shown.
    """
    try:
        pygame.display.init()
        surface = pygame.display.set_mode(
            (GRID_WIDTH * CELL_SIZE, GRID_HEIGHT * CELL_SIZE)
        )
        pygame.display.set_caption("SEIR Grid")
    except pygame.error as exc:
        pygame.quit()
        raise RuntimeError(f"could not initialise display: {exc}") from exc

    states = [
        [rng.randrange(len(_DEMO_PALETTE)) for _ in range(GRID_WIDTH)]
        for _ in range(GRID_HEIGHT)
    ]
    try:
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
            surface.fill(BLACK)
            for y, row in enumerate(states):
                for x, state in enumerate(row):
                    rect = (x * CELL_SIZE, y * CELL_SIZE, CELL_SIZE - 1, CELL_SIZE - 1)
                    surface.fill(_DEMO_PALETTE[state], rect)
            pygame.display.flip()
            pygame.time.delay(100)
    finally:
        pygame.quit()
    return states