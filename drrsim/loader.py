"""Loading simulation settings from YAML scenario files."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

import yaml

from drrsim.settings import BSConfig, Settings, UserConfig

DEFAULT_SCENARIO_DIR = "./scenarios/yaml/"


def _value(node, key: str):
    if not isinstance(node, Mapping) or key not in node:
        raise ValueError(f"Missing key in settings file: {key}")
    return node[key]


def _as_int(node, key: str) -> int:
    value = _value(node, key)
    if isinstance(value, bool):
        raise ValueError(f"Key {key} must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    raise ValueError(f"Key {key} must be an integer, got {value!r}")


def _as_float(node, key: str) -> float:
    value = _value(node, key)
    if isinstance(value, bool):
        raise ValueError(f"Key {key} must be a number, got {value!r}")
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            pass
    raise ValueError(f"Key {key} must be a number, got {value!r}")


def _as_str(node, key: str) -> str:
    value = _value(node, key)
    if value is None or isinstance(value, (Mapping, list)):
        raise ValueError(f"Key {key} must be a scalar, got {value!r}")
    return str(value)


def load_settings_from_yaml(filename: str,
                            scenario_dir: str | Path = DEFAULT_SCENARIO_DIR) -> Settings:
    """Read a scenario file from ``scenario_dir`` and build Settings from it."""
    path = Path(scenario_dir) / filename
    with path.open(encoding="utf-8") as stream:
        config = yaml.safe_load(stream)

    if not isinstance(config, Mapping):
        raise ValueError(f"Settings file {path} does not hold a mapping")

    bs_node = _value(config, "bs_config")
    bs_config = BSConfig(
        x=_as_float(bs_node, "x"),
        y=_as_float(bs_node, "y"),
        z=_as_float(bs_node, "z"),
    )

    users_node = config.get("user_configs")
    if users_node is None:
        users_node = []
    if not isinstance(users_node, list):
        raise ValueError("Key user_configs must be a list")
    user_configs = [
        UserConfig(
            x=_as_float(user, "x"),
            y=_as_float(user, "y"),
            z=_as_float(user, "z"),
            speed=_as_float(user, "speed"),
            direction=_as_str(user, "direction"),
            quant=_as_float(user, "quant"),
        )
        for user in users_node
    ]

    return Settings(
        launches=_as_int(config, "launches"),
        standard_type=_as_str(config, "standard_type"),
        base_cqi=_as_int(config, "base_cqi"),
        tti_duration=_as_str(config, "tti_duration"),
        channel_sync_interval=_as_str(config, "channel_sync_interval"),
        scheduler_type=_as_str(config, "scheduler_type"),
        bandwidth=_as_float(config, "bandwidth"),
        packet_count=_as_int(config, "packet_count"),
        packet_size=_as_int(config, "packet_size"),
        queue_count=_as_int(config, "queue_count"),
        queue_quant=_as_float(config, "queue_quant"),
        queue_limit=_as_int(config, "queue_limit"),
        time_lambda=_as_float(config, "time_lambda"),
        user_configs=user_configs,
        bs_config=bs_config,
        carrier_frequency=_as_float(config, "carrier_frequency"),
        bs_transmission_power=_as_int(config, "bs_transmission_power"),
        area_type=_as_str(config, "area_type"),
        users_per_tti_limit=_as_int(config, "users_per_tti_limit"),
        throughput_history_size=_as_int(config, "throughput_history_size"),
    )