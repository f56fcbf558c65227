import pygame
import pytest

from seirgrid import render
from seirgrid.cell import CellState
from seirgrid.grid import Grid
from seirgrid.render import (
    CELL_SIZE,
    GRID_HEIGHT,
    GRID_WIDTH,
    STATISTICS_WIDTH,
    Renderer,
    color_for_state,
)


@pytest.fixture
def renderer(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setattr(render, "FONT_PATH", None)
    r = Renderer(
        "test", GRID_WIDTH * CELL_SIZE + STATISTICS_WIDTH, GRID_HEIGHT * CELL_SIZE
    )
    yield r
    r.close()


def test_state_colors():
    assert color_for_state(CellState.SUSCEPTIBLE) == (0, 0, 255, 255)
    assert color_for_state(CellState.EXPOSED) == (255, 255, 0, 255)
    assert color_for_state(CellState.INFECTIOUS) == (255, 0, 0, 255)
    assert color_for_state(CellState.RECOVERED) == (0, 255, 0, 255)


def test_unknown_state_is_gray():
    assert color_for_state(42) == (100, 100, 100, 255)


def test_colors_are_distinct():
    colors = {color_for_state(state) for state in CellState}
    assert len(colors) == len(CellState)


def test_draw_grid_paints_cells(renderer):
    grid = Grid(4, 3)
    grid.update_cell(1, 0, CellState.INFECTIOUS)
    grid.update_cell(3, 2, CellState.EXPOSED)
    grid.update_cell(0, 2, CellState.RECOVERED)
    renderer.draw_grid(grid)
    for cell in grid.cells():
        for px, py in ((0, 0), (CELL_SIZE - 1, CELL_SIZE - 1)):
            pixel = renderer.surface.get_at(
                (cell.x * CELL_SIZE + px, cell.y * CELL_SIZE + py)
            )
            assert tuple(pixel) == color_for_state(cell.state)


def test_draw_statistics_lines(renderer):
    lines = renderer.draw_statistics(3, 4, 6, 5)
    assert lines == [
        "Iteration: 5",
        "Total Grid Moves: 3",
        "Total Infections: 4",
        "Total Exposures: 6",
    ]


def test_draw_text_line_places_box(renderer):
    x = GRID_WIDTH * CELL_SIZE + 10
    rect = renderer.draw_text_line("Iteration: 1", x, 10, render.WHITE)
    assert rect.topleft == (x, 10)
    assert rect.width > 0 and rect.height > 0
    pixels = {
        tuple(renderer.surface.get_at((px, py)))
        for px in range(rect.left, rect.right)
        for py in range(rect.top, rect.bottom)
    }
    assert render.WHITE in pixels
    assert pixels <= {render.WHITE, render.BLACK}


def test_missing_font_raises(monkeypatch, tmp_path):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setattr(render, "FONT_PATH", str(tmp_path / "missing.ttf"))
    with pytest.raises(RuntimeError):
        Renderer("test", 100, 100)
    assert not pygame.display.get_init()


def test_context_manager_closes(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setattr(render, "FONT_PATH", None)
    with Renderer("test", 100, 100) as r:
        assert r.surface.get_size() == (100, 100)
    assert not pygame.display.get_init()
    r.close()
    assert not pygame.display.get_init()