"""
Fireworks animation shown when somebody wins.

Pure particle model - no Tkinter in here, the UI just draws
whatever `particles()` returns on its canvas each frame.
"""

from typing import List, Optional, Tuple

import numpy as np

from .config import GameConfig


class Fireworks:
    """
    A simple particle system.

    Every burst spawns FIREWORK_PARTICLES particles at a random point in
    the top half of the canvas, spread evenly around a circle. Particles
    fall with gravity and fade out as their life drops to 0.
    """

    def __init__(
        self,
        width: int = GameConfig.CANVAS_WIDTH,
        height: int = GameConfig.CANVAS_HEIGHT,
        rng: Optional[np.random.Generator] = None
    ):
        self.width = width
        self.height = height
        self.rng = rng if rng is not None else np.random.default_rng()
        self.is_running = False

        # One row per particle
        self.positions = np.zeros((0, 2))
        self.velocities = np.zeros((0, 2))
        self.life = np.zeros(0)
        self.colors: List[str] = []

    def __len__(self) -> int:
        return len(self.life)

    def start(self):
        """Clear the sky and start animating."""
        self.clear()
        self.is_running = True

    def stop(self):
        """Stop animating and drop all particles."""
        self.is_running = False
        self.clear()

    def clear(self):
        self.positions = np.zeros((0, 2))
        self.velocities = np.zeros((0, 2))
        self.life = np.zeros(0)
        self.colors = []

    def burst(self, x: Optional[float] = None, y: Optional[float] = None):
        """
        Add one firework.

        Args:
            x, y: Where it explodes. Random (top half of the canvas) if omitted.
        """
        n = GameConfig.FIREWORK_PARTICLES
        if x is None:
            x = self.rng.random() * self.width
        if y is None:
            y = self.rng.random() * (self.height * 0.5)

        angles = 2 * np.pi * np.arange(n) / n
        speeds = GameConfig.FIREWORK_MIN_SPEED + self.rng.random(n) * GameConfig.FIREWORK_SPEED_RANGE
        velocities = np.column_stack((np.cos(angles) * speeds, np.sin(angles) * speeds))
        positions = np.tile([x, y], (n, 1))

        palette = GameConfig.FIREWORK_COLORS
        colors = [palette[i] for i in self.rng.integers(0, len(palette), size=n)]

        self.positions = np.vstack((self.positions, positions))
        self.velocities = np.vstack((self.velocities, velocities))
        self.life = np.concatenate((self.life, np.ones(n)))
        self.colors.extend(colors)

    def step(self):
        """Advance the animation by one frame."""
        if not self.is_running:
            return

        self.positions += self.velocities
        self.velocities[:, 1] += GameConfig.FIREWORK_GRAVITY
        self.life -= GameConfig.FIREWORK_DECAY

        # Drop dead particles
        alive = self.life > 0
        self.positions = self.positions[alive]
        self.velocities = self.velocities[alive]
        self.life = self.life[alive]
        self.colors = [color for color, keep in zip(self.colors, alive) if keep]

        if self.rng.random() < GameConfig.FIREWORK_SPAWN_CHANCE:
            self.burst()

    def particles(self) -> List[Tuple[float, float, float, str]]:
        """(x, y, life, color) for every live particle."""
        return [
            (float(x), float(y), float(life), color)
            for (x, y), life, color in zip(self.positions, self.life, self.colors)
        ]
