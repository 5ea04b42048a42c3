"""Smoke tests for the Pygame viewer, run against SDL's dummy video driver."""

import pytest

from antrivals.simulation.engine import SimulationEngine

pygame = pytest.importorskip("pygame")


@pytest.fixture
def renderer(empty_engine: SimulationEngine, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    from antrivals.ui.pygame_client import PygameRenderer

    view = PygameRenderer(empty_engine)
    yield view
    pygame.quit()


def _press(key: int) -> None:
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=key))


class TestPygameRenderer:
    """Tests for input handling and drawing."""

    def test_window_matches_world(self, renderer) -> None:
        assert renderer.screen.get_size() == (200, 120)

    def test_space_toggles_pause(self, renderer) -> None:
        _press(pygame.K_SPACE)
        renderer._handle_events()
        assert renderer.engine.controls.paused

    def test_speed_keys(self, renderer) -> None:
        for _ in range(15):
            _press(pygame.K_PLUS)
        renderer._handle_events()
        assert renderer.engine.controls.steps_per_frame == 10

        _press(pygame.K_MINUS)
        renderer._handle_events()
        assert renderer.engine.controls.steps_per_frame == 9

    def test_reset_key_requests_reset(self, renderer) -> None:
        _press(pygame.K_r)
        renderer._handle_events()
        assert renderer.engine.controls.reset_requested

    def test_escape_stops(self, renderer) -> None:
        _press(pygame.K_ESCAPE)
        renderer._handle_events()
        assert not renderer.running

    def test_draws_a_frame(self, renderer) -> None:
        engine = renderer.engine
        engine.colonies[0].food_stock = 8
        engine.controls.leaf_spawn_probability = 5.0
        engine.run(3)
        renderer._draw(engine.snapshot())
