import pytest

from wander.knowledge import VisibilityField
from wander.navigator import Navigator
from wander.viz import draw_run_png, type_color, OPEN_COLOR, WALL_COLOR

from conftest import uniform_grid


def test_type_colors():
    assert type_color(0) == OPEN_COLOR
    assert type_color(1) == WALL_COLOR
    assert type_color(2) != type_color(3)


def test_draw_run_png(tmp_path):
    Image = pytest.importorskip("PIL.Image")
    g = uniform_grid(4, 5, types={(1, 1): 1, (2, 2): 3})
    nav = Navigator(g, 1, (0, 0))
    nav.travel_to((3, 4))
    out = tmp_path / "img" / "run.png"
    assert draw_run_png(g, nav.visibility, nav.stats.path_taken, str(out), cell=6)
    with Image.open(out) as img:
        assert img.size == (5 * 6, 4 * 6)
        # start cell is painted green
        assert img.getpixel((1, 1)) == (100, 220, 120)


def test_draw_without_trail(tmp_path):
    pytest.importorskip("PIL")
    g = uniform_grid(2, 2)
    out = tmp_path / "plain.png"
    assert draw_run_png(g, VisibilityField(2, 2), None, str(out))
    assert out.exists()
