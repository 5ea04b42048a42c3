"""Pygame viewer for the two-colony simulation.

A thin host loop: each frame it applies keyboard input to the engine's
frame controls, calls ``advance_frame`` with the real frame time, and
draws the resulting snapshot (nests, leaves, ants and a stats panel).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pygame

if TYPE_CHECKING:
    from antrivals.simulation.engine import SimulationEngine
    from antrivals.simulation.snapshot import SimulationSnapshot

# Colour palette
_BG = (24, 18, 12)
_MARGIN = (12, 12, 16)
_SURFACE_LINE = (90, 70, 40)
_LEAF = (60, 170, 40)
_TEXT = (200, 200, 200)

# Per colony: (normal, carrying)
_ANT_COLOURS: dict[int, tuple[tuple[int, int, int], tuple[int, int, int]]] = {
    0: ((30, 80, 200), (100, 200, 255)),
    1: ((200, 30, 30), (255, 150, 150)),
}

_MAX_STEPS_PER_FRAME = 10


class PygameRenderer:
    """Renders a SimulationEngine into a Pygame window.

    Attributes:
        engine: The simulation engine to drive and display.
        screen: The Pygame display surface.
    """

    def __init__(self, engine: SimulationEngine) -> None:
        """Open a window the size of the world.

        Args:
            engine: The simulation engine to render.
        """
        self.engine = engine
        pygame.init()
        self.screen = pygame.display.set_mode(
            (engine.world.width, engine.world.height),
        )
        pygame.display.set_caption("Ant Rivals")
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("monospace", 14)
        self.running = True

    def run(self, fps: int = 60) -> None:
        """Main loop: handle events, step sim, render.

        Args:
            fps: Target frames per second.
        """
        while self.running:
            dt = self.clock.tick(fps) / 1000.0
            self._handle_events()
            self.engine.advance_frame(dt)
            self._draw(self.engine.snapshot())

        pygame.quit()

    def _handle_events(self) -> None:
        """Translate key presses into frame controls."""
        controls = self.engine.controls
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                elif event.key == pygame.K_SPACE:
                    controls.paused = not controls.paused
                elif event.key == pygame.K_r:
                    controls.reset_requested = True
                elif event.key in (pygame.K_PLUS, pygame.K_EQUALS):
                    controls.steps_per_frame = min(
                        _MAX_STEPS_PER_FRAME,
                        controls.steps_per_frame + 1,
                    )
                elif event.key == pygame.K_MINUS:
                    controls.steps_per_frame = max(1, controls.steps_per_frame - 1)

    def _draw(self, snap: SimulationSnapshot) -> None:
        """Render one frame."""
        world = self.engine.world
        self.screen.fill(_BG)
        pygame.draw.rect(self.screen, _MARGIN, (0, 0, world.left_margin, world.height))
        pygame.draw.rect(
            self.screen,
            _MARGIN,
            (world.play_right, 0, world.right_margin, world.height),
        )
        surface = int(world.surface_y)
        pygame.draw.line(
            self.screen,
            _SURFACE_LINE,
            (world.play_left, surface),
            (world.play_right, surface),
        )

        for colony in self.engine.colonies:
            colour = _ANT_COLOURS[colony.colony_id][0]
            centre = (int(colony.nest.x), int(colony.nest.y))
            pygame.draw.circle(self.screen, colour, centre, 12, width=2)

        for leaf in snap.leaves:
            size = 3 + int(4 * max(0.0, leaf.amount) / 250.0)
            pygame.draw.circle(self.screen, _LEAF, (int(leaf.x), int(leaf.y)), size)

        for ant in snap.ants:
            normal, carrying = _ANT_COLOURS[ant.colony_id]
            colour = carrying if ant.has_food else normal
            pygame.draw.circle(self.screen, colour, (int(ant.x), int(ant.y)), 3)

        self._draw_info_panel(snap)
        pygame.display.flip()

    def _draw_info_panel(self, snap: SimulationSnapshot) -> None:
        """Draw clock, colony counters and key help in the left margin."""
        clock = snap.clock
        controls = self.engine.controls
        lines = [
            f"Day {clock.day} {clock.hour:02d}:{clock.minute:02d}",
            f"{clock.season_name} ({clock.season_progress:.0%})",
            f"Speed: x{controls.steps_per_frame}",
            "PAUSED" if controls.paused else "RUNNING",
            "",
        ]
        for colony in snap.colonies:
            prev = colony.previous_day
            lines += [
                f"--- Colony {'AB'[colony.colony_id]} ---",
                f"Ants: {colony.population}",
                f"Stock: {colony.food_stock}",
                f"Yesterday: food {prev.food}",
                f"  births {prev.births} deaths {prev.deaths}",
                "",
            ]
        lines += [
            "SPACE: pause",
            "+/-: speed",
            "R: reset",
            "ESC: quit",
        ]

        y = 10
        for line in lines:
            surf = self.font.render(line, True, _TEXT)
            self.screen.blit(surf, (10, y))
            y += 18
