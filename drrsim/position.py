"""Spatial position, user mobility and base station placement."""

from __future__ import annotations

import math
from dataclasses import dataclass, field


@dataclass
class Position:
    """Point in space, coordinates in metres."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def distance_2d(self, other: Position) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def distance_3d(self, other: Position) -> float:
        return math.hypot(self.distance_2d(other), self.z - other.z)

    def __str__(self) -> str:
        return f"Position: ({self.x:g}, {self.y:g}, {self.z:g})"


@dataclass
class Mobility:
    """Movement of a user: speed in km/h and direction name."""

    speed: float = 0.0
    direction: str = ""


@dataclass
class BaseStation:
    position: Position = field(default_factory=Position)