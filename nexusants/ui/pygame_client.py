"""Pygame window that stands in for the colony's pixel display.

Acts as a ``FrameSink``: the engine lights pixels into it and flushes
once per rendered frame.  The window also owns the pacing loop: the
simulation steps at a configurable tick rate while the display refreshes
at the Pygame frame rate.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

import numpy as np
import pygame

if TYPE_CHECKING:
    from nexusants.simulation.engine import SimulationEngine

# Colour palette
_BG = (10, 10, 10)
_PIXEL_ON = (255, 190, 60)
_PANEL_TEXT = (200, 200, 200)


class PygameDisplay:
    """Renders SimulationEngine frames into a Pygame window.

    Attributes:
        engine: The simulation engine to visualise.
        cell_size: Screen pixels per simulated pixel.
        width: Frame columns (matches the simulation grid).
        height: Frame rows (matches the simulation grid).
        screen: The Pygame display surface.
    """

    # Speed presets: ticks per second
    _SPEED_STEPS: ClassVar[list[float]] = [
        1.0,
        5.0,
        10.0,
        30.0,
        60.0,
        120.0,
        300.0,
    ]

    def __init__(
        self,
        engine: SimulationEngine,
        cell_size: int = 3,
        ticks_per_second: float = 30.0,
    ) -> None:
        """Initialise the window.

        Args:
            engine: The simulation engine to render.
            cell_size: Screen pixels per simulated pixel.
            ticks_per_second: Simulation ticks per real-time second.
        """
        self.engine = engine
        self.cell_size = cell_size
        self.width = engine.config.world_width
        self.height = engine.config.world_height
        self.ticks_per_second = ticks_per_second
        self._speed_index = self._nearest_speed(ticks_per_second)
        self._tick_accumulator = 0.0
        self._pixels = np.zeros((self.height, self.width), dtype=np.bool_)

        self._panel_height = 60
        self._win_w = self.width * cell_size
        self._win_h = self.height * cell_size + self._panel_height

        pygame.init()
        self.screen = pygame.display.set_mode((self._win_w, self._win_h))
        pygame.display.set_caption("nexusants")
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("monospace", 14)
        self.running = True
        self.paused = False

    # -- FrameSink --

    def set_pixel(self, x: int, y: int) -> None:
        if 0 <= x < self.width and 0 <= y < self.height:
            self._pixels[y, x] = True

    def flush(self) -> None:
        """Draw the collected pixels, then clear them for the next frame."""
        self.screen.fill(_BG)
        cs = self.cell_size
        ys, xs = np.nonzero(self._pixels)
        for x, y in zip(xs.tolist(), ys.tolist(), strict=True):
            pygame.draw.rect(self.screen, _PIXEL_ON, (x * cs, y * cs, cs, cs))
        self._pixels[:] = False
        self._draw_info_panel()
        pygame.display.flip()

    # -- Pacing loop --

    def _nearest_speed(self, tps: float) -> int:
        """Return the index of the closest speed preset."""
        best = 0
        best_diff = abs(self._SPEED_STEPS[0] - tps)
        for i, s in enumerate(self._SPEED_STEPS):
            diff = abs(s - tps)
            if diff < best_diff:
                best, best_diff = i, diff
        return best

    def run(self, fps: int = 30) -> None:
        """Main loop: handle events, step sim, render.

        Args:
            fps: Target frames per second.
        """
        while self.running:
            dt = self.clock.tick(fps) / 1000.0  # seconds elapsed
            self._handle_events()
            if not self.paused:
                self._tick_accumulator += self.ticks_per_second * dt
                steps = int(self._tick_accumulator)
                self._tick_accumulator -= steps
                for _ in range(steps):
                    self.engine.step()
            self.engine.render(self)

        pygame.quit()

    def _handle_events(self) -> None:
        """Process Pygame input events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                elif event.key == pygame.K_SPACE:
                    self.paused = not self.paused
                elif event.key in (pygame.K_PLUS, pygame.K_EQUALS):
                    self._speed_index = min(
                        len(self._SPEED_STEPS) - 1,
                        self._speed_index + 1,
                    )
                    self.ticks_per_second = self._SPEED_STEPS[self._speed_index]
                elif event.key == pygame.K_MINUS:
                    self._speed_index = max(0, self._speed_index - 1)
                    self.ticks_per_second = self._SPEED_STEPS[self._speed_index]

    def _draw_info_panel(self) -> None:
        """Draw a stats strip under the frame."""
        y = self.height * self.cell_size + 6
        colony = self.engine.colony
        counts = colony.state_counts()
        lines = [
            f"Tick: {self.engine.tick}  "
            f"Speed: {self.ticks_per_second:.0f} t/s  "
            f"{'PAUSED' if self.paused else 'RUNNING'}  "
            f"Nexus food: {colony.nexus.food}",
            "  ".join(f"{k.name}: {v}" for k, v in counts.items()),
            "SPACE: pause  +/-: speed  ESC: quit",
        ]
        for line in lines:
            surf = self.font.render(line, True, _PANEL_TEXT)
            self.screen.blit(surf, (6, y))
            y += 16
