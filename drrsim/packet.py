"""Packets and the priority queues that hold them while they wait for service."""

from __future__ import annotations

import heapq
import itertools
import sys
from dataclasses import dataclass
from typing import TextIO

from drrsim.generators import TimeGenerator
from drrsim.standards import EPSILON
from drrsim.user import User

DEFICIT_MAX = 1000000.0


@dataclass
class Packet:
    """A packet of ``size`` bytes that arrived in ``queue`` from ``user``."""

    queue: int
    size: int
    user: User
    scheduled_at: float = 0.0  # arrival time in seconds


def _write_packets(packets, file: TextIO | None) -> None:
    out = sys.stdout if file is None else file
    for index, packet in enumerate(packets):
        out.write(
            f"PACKET = {index}\n"
            f"SCHEDULE TIME = {packet.scheduled_at:g}\n"
            f"USER = {packet.user.id}\n\n"
        )


class PacketQueue:
    """Packets ordered by arrival time, with a DRR quant and deficit in RBs."""

    def __init__(self, quant: float = 0.0, limit: int = 1,
                 time_generator: TimeGenerator | None = None) -> None:
        self.quant = quant
        self.limit = limit
        self.time_generator = time_generator if time_generator is not None else TimeGenerator()
        self._deficit = 0.0
        self._heap: list[tuple[float, int, Packet]] = []
        self._counter = itertools.count()

    @property
    def deficit(self) -> float:
        return self._deficit

    @deficit.setter
    def deficit(self, value: float) -> None:
        # Values above the cap are ignored.
        if value <= DEFICIT_MAX:
            self._deficit = value

    def schedule_packet(self, packet: Packet) -> None:
        """Give the packet the next arrival time and enqueue it, unless the queue is full."""
        if len(self._heap) < self.limit:
            packet.scheduled_at = self.time_generator.generate_time()
            self.push(packet)

    def front(self) -> Packet:
        if not self._heap:
            raise IndexError("front from an empty packet queue")
        return self._heap[0][2]

    def pop(self) -> Packet:
        if not self._heap:
            raise IndexError("pop from an empty packet queue")
        return heapq.heappop(self._heap)[2]

    def push(self, packet: Packet) -> None:
        heapq.heappush(self._heap, (packet.scheduled_at, next(self._counter), packet))

    def __len__(self) -> int:
        return len(self._heap)

    def dump(self, file: TextIO | None = None) -> None:
        """Write the packets in service order without changing the queue."""
        _write_packets((entry[2] for entry in sorted(self._heap)), file)


class _RelevantEntry:
    """Heap entry: higher user priority first, near-equal priorities by arrival time."""

    __slots__ = ("packet", "seq")

    def __init__(self, packet: Packet, seq: int) -> None:
        self.packet = packet
        self.seq = seq

    def __lt__(self, other: _RelevantEntry) -> bool:
        mine = self.packet.user.priority
        theirs = other.packet.user.priority
        if abs(mine - theirs) < EPSILON:
            if self.packet.scheduled_at != other.packet.scheduled_at:
                return self.packet.scheduled_at < other.packet.scheduled_at
            return self.seq < other.seq
        return mine > theirs


class RelevantPacketQueue:
    """Packets ready for service, ordered by their user's PF priority, then arrival time."""

    def __init__(self) -> None:
        self._heap: list[_RelevantEntry] = []
        self._counter = itertools.count()

    def front(self) -> Packet:
        if not self._heap:
            raise IndexError("front from an empty relevant packet queue")
        return self._heap[0].packet

    def pop(self) -> Packet:
        if not self._heap:
            raise IndexError("pop from an empty relevant packet queue")
        return heapq.heappop(self._heap).packet

    def push(self, packet: Packet) -> None:
        heapq.heappush(self._heap, _RelevantEntry(packet, next(self._counter)))

    def __len__(self) -> int:
        return len(self._heap)

    def dump(self, file: TextIO | None = None) -> None:
        """Write the packets in service order without changing the queue."""
        _write_packets((entry.packet for entry in sorted(self._heap)), file)