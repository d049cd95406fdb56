"""Game objects for the asteroid shooter: the ship, asteroids and blasts."""

from __future__ import annotations

import enum
import math
import random
from dataclasses import dataclass, field
from typing import Iterable

import pygame

SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600
FULL_TURN = 2 * math.pi

Color = tuple[int, int, int]
Point = tuple[float, float]
Segment = tuple[Point, Point]

GREY: Color = (150, 150, 150)

SHIP_LINE_WIDTH = 3
ASTEROID_LINE_WIDTH = 2

# Ship outline, relative to the ship's position.
_SHIP_SEGMENTS: tuple[Segment, ...] = (
    ((-8.0, 9.0), (0.0, -11.0)),
    ((0.0, -11.0), (8.0, 9.0)),
    ((-6.0, 4.0), (-1.0, 4.0)),
    ((6.0, 4.0), (1.0, 4.0)),
)

# Asteroid outline in model space, before twist, scale and position apply.
_ASTEROID_SEGMENTS: tuple[Segment, ...] = (
    ((-20.0, 20.0), (-25.0, 5.0)),
)


class Key(enum.Enum):
    """Controls the ship responds to."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    ROTATE_CCW = "rotate_ccw"
    ROTATE_CW = "rotate_cw"


def _draw_segments(
    surface: pygame.Surface, segments: Iterable[Segment], color: Color, width: int
) -> None:
    for start, end in segments:
        pygame.draw.line(surface, color, start, end, width)


@dataclass
class Spaceship:
    """The player's ship."""

    sx: float = SCREEN_WIDTH / 2
    sy: float = SCREEN_HEIGHT / 2
    heading: float = math.pi / 2
    rotation_speed: float = math.pi / 100
    speed: float = 2.0
    gone: bool = False
    color: Color = GREY

    def update(self, keys: Iterable[Key]) -> None:
        """Move and turn the ship according to the keys held this frame."""
        held = set(keys)
        if Key.UP in held:
            self.sy -= self.speed
        if Key.DOWN in held:
            self.sy += self.speed
        if Key.LEFT in held:
            self.sx -= self.speed
        if Key.RIGHT in held:
            self.sx += self.speed
        if Key.ROTATE_CCW in held:
            self.heading = math.fmod(self.heading + self.rotation_speed, FULL_TURN)
        if Key.ROTATE_CW in held:
            self.heading = math.fmod(self.heading - self.rotation_speed, FULL_TURN)
            if self.heading < 0:
                self.heading += FULL_TURN

    def outline(self) -> list[Segment]:
        """Return the line segments that make up the ship on screen."""
        return [
            ((self.sx + x1, self.sy + y1), (self.sx + x2, self.sy + y2))
            for (x1, y1), (x2, y2) in _SHIP_SEGMENTS
        ]

    def draw(self, surface: pygame.Surface) -> None:
        """Render the ship onto ``surface``."""
        _draw_segments(surface, self.outline(), self.color, SHIP_LINE_WIDTH)


@dataclass
class Asteroid:
    """A drifting, spinning rock."""

    sx: float
    sy: float
    heading: float = math.pi / 2
    twist: float = 0.0
    speed: float = 2.0
    rot_velocity: float = math.pi / 100
    scale: float = 0.2
    gone: bool = False
    color: Color = GREY

    @classmethod
    def spawn(cls, rng: random.Random | None = None) -> "Asteroid":
        """Create an asteroid at a random place on the screen."""
        rng = rng if rng is not None else random.Random()
        return cls(sx=rng.uniform(0, SCREEN_WIDTH), sy=rng.uniform(0, SCREEN_HEIGHT))

    def _to_screen(self, point: Point) -> Point:
        x, y = point
        cos_t, sin_t = math.cos(self.twist), math.sin(self.twist)
        rx = (x * cos_t - y * sin_t) * self.scale
        ry = (x * sin_t + y * cos_t) * self.scale
        return (self.sx + rx, self.sy + ry)

    def outline(self) -> list[Segment]:
        """Return the asteroid's line segments, twisted, scaled and placed."""
        return [(self._to_screen(a), self._to_screen(b)) for a, b in _ASTEROID_SEGMENTS]

    def draw(self, surface: pygame.Surface) -> None:
        """Render the asteroid onto ``surface``."""
        _draw_segments(surface, self.outline(), self.color, ASTEROID_LINE_WIDTH)


@dataclass
class Blast:
    """A shot fired from the ship."""

    sx: float
    sy: float
    heading: float
    speed: float
    gone: bool = False
    color: Color = field(default=GREY)