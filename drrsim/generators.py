"""Random generators for packet arrival times and user selection/movement."""

from __future__ import annotations

import random


class TimeGenerator:
    """Produces packet arrival times with exponentially distributed gaps."""

    def __init__(self, rate: float = 1.0, seed: int | None = None) -> None:
        self._rng = random.Random(seed)
        self.rate = 1.0
        self.set_rate(rate)
        self.initial_time = 0.0
        self.last_scheduling_time = self.initial_time

    def reset_time(self) -> None:
        """Restart arrival times from the initial time for a new simulation run."""
        self.last_scheduling_time = self.initial_time

    def generate_time(self) -> float:
        """Return the next arrival time."""
        self.last_scheduling_time += self._rng.expovariate(self.rate)
        return self.last_scheduling_time

    def set_rate(self, rate: float) -> None:
        if not rate > 0:
            raise ValueError(f"Rate must be positive, got {rate!r}")
        self.rate = rate


class UserGenerator:
    """Draws user ids and movement directions uniformly from integer ranges."""

    def __init__(self, user_count: int = 1, direction_count: int = 4,
                 seed: int | None = None) -> None:
        master = random.Random(seed)
        self._user_id_rng = random.Random(master.getrandbits(64))
        self._direction_rng = random.Random(master.getrandbits(64))
        self.user_id_range = (1, 1)
        self.move_direction_range = (1, 1)
        self.set_user_id_range(1, user_count)
        self.set_move_direction_range(1, direction_count)

    @staticmethod
    def _checked(low: int, high: int) -> tuple[int, int]:
        if low > high:
            raise ValueError(f"Empty range [{low}, {high}]")
        return low, high

    def set_user_id_range(self, low: int, high: int) -> None:
        self.user_id_range = self._checked(low, high)

    def set_move_direction_range(self, low: int, high: int) -> None:
        self.move_direction_range = self._checked(low, high)

    def generate_user_id(self) -> int:
        return self._user_id_rng.randint(*self.user_id_range)

    def generate_user_move_direction(self) -> int:
        return self._direction_rng.randint(*self.move_direction_range)