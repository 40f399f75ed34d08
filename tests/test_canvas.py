import pytest

pygame = pytest.importorskip("pygame")

from gravity.canvas import PygameCanvas  # noqa: E402
from gravity.data_models import Body  # noqa: E402
from gravity.simulation import Simulation  # noqa: E402
from gravity.vector_utils import Vector2  # noqa: E402


@pytest.fixture
def canvas():
    return PygameCanvas(pygame.Surface((200, 100)))


def test_clear_fills_surface(canvas):
    canvas.clear((10, 20, 30))
    assert canvas.surface.get_at((150, 80))[:3] == (10, 20, 30)


def test_fill_circle_paints_center(canvas):
    canvas.clear((0, 0, 0))
    canvas.fill_circle(Vector2(50, 50), 10, (255, 0, 0), (68, 68, 0))
    assert canvas.surface.get_at((50, 50))[:3] == (255, 0, 0)
    assert canvas.surface.get_at((90, 50))[:3] == (0, 0, 0)


def test_degenerate_shapes_are_skipped(canvas):
    canvas.clear((0, 0, 0))
    canvas.fill_circle(Vector2(50, 50), 0, (255, 0, 0), (255, 0, 0))
    canvas.fill_circle(Vector2(float("nan"), 5), 5, (255, 0, 0), (255, 0, 0))
    canvas.fill_circle(Vector2(1e9, 5), 5, (255, 0, 0), (255, 0, 0))
    canvas.line(Vector2(float("inf"), 0), Vector2(5, 5), (255, 0, 0))
    assert canvas.surface.get_at((50, 50))[:3] == (0, 0, 0)


def test_simulation_renders_on_pygame_surface(canvas):
    sim = Simulation([Body(100, 50, 20)])
    sim.render(canvas)
    assert canvas.surface.get_at((100, 50))[:3] == (255, 240, 0)
    assert canvas.surface.get_at((5, 5))[:3] == (0, 0, 0)
