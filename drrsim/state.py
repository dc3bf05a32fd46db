"""States of packet queues and of the scheduler within one TTI."""

from __future__ import annotations

from enum import IntEnum
from typing import TypeVar


class PacketQueueState(IntEnum):
    UNDEFINED = 0
    WAIT = 1
    IDLE = 2
    PROCESSING = 3


class SchedulerState(IntEnum):
    UNDEFINED = 0
    WAIT = 1
    IDLE = 2
    PROCESSING = 3


_State = TypeVar("_State", PacketQueueState, SchedulerState)


def _transition(previous_state: _State, target_name: str) -> _State:
    if isinstance(previous_state, PacketQueueState):
        # A queue keeps the first state it was given during a TTI.
        if previous_state is PacketQueueState.UNDEFINED:
            return PacketQueueState[target_name]
        return previous_state
    if isinstance(previous_state, SchedulerState):
        # The scheduler state only escalates towards PROCESSING.
        target = SchedulerState[target_name]
        return target if previous_state < target else previous_state
    raise TypeError(f"Unsupported state: {previous_state!r}")


def set_wait(previous_state: _State) -> _State:
    return _transition(previous_state, "WAIT")


def set_idle(previous_state: _State) -> _State:
    return _transition(previous_state, "IDLE")


def set_processing(previous_state: _State) -> _State:
    return _transition(previous_state, "PROCESSING")