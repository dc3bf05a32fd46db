"""User equipment: channel quality, mobility, PF throughput history, DRR deficit."""

from __future__ import annotations

import math
from dataclasses import replace
from typing import ClassVar

from drrsim.generators import UserGenerator
from drrsim.position import Mobility, Position
from drrsim.standards import (
    BS_TO_UE_DISTANCE_MAX,
    BS_TO_UE_DISTANCE_MIN,
    EPSILON,
    THROUGHPUT_MIN,
    StandardManager,
)

# direction -> (moving axis, sign)
_MOVES = {
    "forward": ("y", 1.0),
    "backward": ("y", -1.0),
    "right": ("x", 1.0),
    "left": ("x", -1.0),
}


def _sqrt_or_nan(value: float) -> float:
    return math.sqrt(value) if value >= 0 else math.nan


class User:
    """A connected user with an automatically assigned sequential id."""

    _last_id: ClassVar[int] = 0

    def __init__(self, cqi: int, position: Position, mobility: Mobility,
                 throughput_history_size: int, quant: float,
                 standard: StandardManager | None = None,
                 user_generator: UserGenerator | None = None) -> None:
        User._last_id += 1
        self.id = User._last_id
        self.cqi = cqi
        self.time_from_last_channel_sync = 0.0
        self.position = replace(position)
        self.mobility = replace(mobility)
        self.priority = 0.0
        self.current_throughput = 0.0
        self.average_throughput = THROUGHPUT_MIN
        self.throughput_history_size = throughput_history_size
        self.resource_candidate = False
        self.quant = quant
        self.deficit = 0.0
        self.standard = standard if standard is not None else StandardManager()
        self.user_generator = user_generator if user_generator is not None else UserGenerator()
        self.initialize_throughput_history(throughput_history_size)

    @classmethod
    def reset_last_id(cls) -> None:
        """Restart id numbering so the next user gets id 1."""
        User._last_id = 0

    def increment_current_throughput(self, rb_count: int) -> None:
        bytes_per_rb = self.standard.resource_block_effective_data_size(self.cqi)
        self.current_throughput += bytes_per_rb * rb_count

    def initialize_throughput_history(self, throughput_history_size: int) -> None:
        self.average_throughput = THROUGHPUT_MIN
        self.throughput_history_size = throughput_history_size

    def update_throughput_history(self) -> None:
        """Exponential moving average with alpha = 2 / (N + 1)."""
        alpha = 2.0 / (self.throughput_history_size + 1)
        self.average_throughput = (
            (1 - alpha) * self.average_throughput + alpha * self.current_throughput
        )

    def move(self, time_in_seconds: float) -> None:
        """Move the user along its direction, keeping it within the cell limits."""
        speed = self.mobility.speed
        if speed <= EPSILON:
            return

        # km/h -> m/ms, seconds -> ms
        move_delta = speed / (3.6 * 1000) * (time_in_seconds * 1000)

        direction = self.mobility.direction
        if direction == "random":
            direction = self.random_move_direction()
        if direction not in _MOVES:
            return

        axis, sign = _MOVES[direction]
        other = self.position.x if axis == "y" else self.position.y
        value = getattr(self.position, axis) + sign * move_delta

        max_allowed = _sqrt_or_nan(BS_TO_UE_DISTANCE_MAX ** 2 - other * other)
        min_allowed = _sqrt_or_nan(BS_TO_UE_DISTANCE_MIN ** 2 - other * other)

        if value > max_allowed + EPSILON:
            value = max_allowed
        elif value < -min_allowed - EPSILON:
            value = -min_allowed

        setattr(self.position, axis, value)

    def random_move_direction(self) -> str:
        direction_id = self.user_generator.generate_user_move_direction()
        return self.standard.mobility_direction(direction_id)


def pf_sort_key(user: User) -> tuple[float, float]:
    """Sort key: higher priority first, then lower average throughput."""
    return (-user.priority, user.average_throughput)