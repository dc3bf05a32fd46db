"""Checks that simulation settings are consistent with the selected standard."""

from __future__ import annotations

import math

from drrsim.settings import Settings
from drrsim.standards import (
    BS_TO_UE_DISTANCE_MAX,
    BS_TO_UE_DISTANCE_MIN,
    EPSILON,
    StandardInfo,
    StandardManager,
    UnknownParameterError,
)

_ALLOWED_DIRECTIONS = ("forward", "backward", "left", "right", "random")
_ALLOWED_BS_POWERS = (43, 46, 49)
_RR_BASED_SCHEDULERS = (
    "DefaultRRScheduler",
    "FixedDRRScheduler",
    "FixedDRRSchedulerWithUserQuant",
    "CyclicDRRScheduler",
    "CyclicDRRSchedulerWithUserQuant",
    "DefaultDRRScheduler",
    "DefaultDRRSchedulerWithUserQuant",
)


def _require(lookup, message: str) -> None:
    try:
        lookup()
    except UnknownParameterError:
        raise ValueError(message) from None


def _validate_users(settings: Settings) -> None:
    for user_id, user in enumerate(settings.user_configs):
        distance_2d = math.hypot(user.x, user.y)
        if (distance_2d > BS_TO_UE_DISTANCE_MAX + EPSILON
                or distance_2d < BS_TO_UE_DISTANCE_MIN - EPSILON
                or user.z < 1.5 or user.z > 22.5):
            raise ValueError(
                f"User #{user_id} is out of bounds: "
                f"({user.x:.6f}, {user.y:.6f}, {user.z:.6f}). "
                "\nExpected range: 2D distance ∈ [1000, 20000] m, z ≈ 25 m"
            )

        if user.speed < -EPSILON:
            raise ValueError(
                f"User #{user_id} has invalid speed {user.speed:.6f}"
                "\nExpected range: speed ∈ [0, 100] km/h"
            )

        if user.direction not in _ALLOWED_DIRECTIONS:
            raise ValueError(
                f"User #{user_id} has invalid mobility direction: {user.direction} \n"
                'Expected direction: "forward", "backward", "left", "right", "random"'
            )

        if user.quant <= EPSILON:
            raise ValueError(
                f"User #{user_id} has invalid quant: {user.quant:.6f} \n"
                "Expected quant: (0, +inf)"
            )


def validate_settings(settings: Settings,
                      standard: StandardManager | None = None) -> StandardInfo:
    """Raise ValueError if the settings are invalid; return the standard they match."""
    manager = standard if standard is not None else StandardManager()

    if settings.launches < 1:
        raise ValueError("Launches should be greater than or equal to 1.")

    try:
        info = manager.get_standard_info(settings.standard_type)
    except UnknownParameterError:
        raise ValueError("Invalid standard.") from None

    if settings.scheduler_type not in info.schedulers:
        raise ValueError("Invalid scheduler type.")

    _require(lambda: manager.tti(settings.tti_duration), "Invalid TTI.")
    _require(lambda: manager.channel_sync_interval(settings.channel_sync_interval),
             "Invalid channel sync interval.")
    _require(lambda: manager.cqi_efficiency(settings.base_cqi), "Invalid CQI.")
    _require(lambda: manager.rb_number_from_bandwidth(settings.bandwidth),
             "Bandwidth should be one of [1.4, 3, 5, 10, 15, 20] MHz.")

    if settings.packet_count < 1:
        raise ValueError("Packet count should be greater than or equal to 1.")

    size_limit = settings.packet_size_limit(manager)
    if settings.packet_size < 1 or settings.packet_size > size_limit:
        raise ValueError(
            f"Invalid packet size (current range [1, {size_limit}] bytes)."
            "Maximum defined by current bandwidth."
        )

    if settings.queue_count < 1:
        raise ValueError("Queue count should be greater than or equal to 1.")

    if settings.queue_quant + EPSILON < 0:
        raise ValueError("Queue quant should be greater than or equal to 0.")

    if settings.time_lambda + EPSILON <= 0:
        raise ValueError("Time lambda should be greater than 0.")

    bs = settings.bs_config
    if abs(bs.x) > EPSILON or abs(bs.y) > EPSILON or abs(bs.z - 25) > EPSILON:
        raise ValueError("Base station should be place in {0, 0, 25}.")

    _validate_users(settings)

    if not 0 <= settings.throughput_history_size <= 10000:
        raise ValueError("Invalid throughput history size. Allowed [0, 10000]")

    if settings.area_type not in info.area_types:
        raise ValueError("Invalid area type.")

    if settings.carrier_frequency < 700 or settings.carrier_frequency > 3000:
        raise ValueError("Carrier frequency should be in range [700, 3000] MHz.")

    if settings.bs_transmission_power not in _ALLOWED_BS_POWERS:
        raise ValueError("BS transmission power should be in range (43, 46, 49) dB.")

    if settings.users_per_tti_limit not in info.users_per_tti_limits:
        raise ValueError("Invalid users limit, allowed (4, 8).")

    return info


def validate_scheduler_specific_parameters(settings: Settings) -> None:
    """Raise ValueError if parameters do not suit the chosen scheduler."""
    if settings.scheduler_type == "DefaultPFScheduler":
        if settings.base_cqi != 1:
            raise ValueError("Allowed base CQI value for PF scheduler is 1.")
        if settings.queue_count != 1:
            raise ValueError("Allowed queue count for PF scheduler is 1.")

    if settings.scheduler_type in _RR_BASED_SCHEDULERS:
        if settings.base_cqi < 1 or settings.base_cqi > 15:
            raise ValueError("Allowed base CQI value for RR-based scheduler is [1, 15].")