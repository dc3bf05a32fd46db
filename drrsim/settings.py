"""Simulation settings: base station, users and scheduler parameters."""

from __future__ import annotations

from dataclasses import dataclass, field

from drrsim.standards import StandardManager


@dataclass
class BSConfig:
    """Base station coordinates in metres."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass
class UserConfig:
    """Initial user placement (metres), speed (km/h), direction and quant (RB/ms)."""

    x: float
    y: float
    z: float
    speed: float
    direction: str
    quant: float


def _manager(standard: StandardManager | None) -> StandardManager:
    return standard if standard is not None else StandardManager()


@dataclass
class Settings:
    """Parameters of one simulation scenario."""

    launches: int
    standard_type: str
    base_cqi: int
    tti_duration: str
    channel_sync_interval: str
    scheduler_type: str
    bandwidth: float  # MHz
    packet_count: int
    packet_size: int  # bytes
    queue_count: int
    queue_quant: float
    queue_limit: int
    time_lambda: float
    user_configs: list[UserConfig] = field(default_factory=list)
    bs_config: BSConfig = field(default_factory=BSConfig)
    carrier_frequency: float = 2000.0
    bs_transmission_power: int = 46
    area_type: str = "Dense Urban"
    users_per_tti_limit: int = 4
    throughput_history_size: int = 0

    def __post_init__(self) -> None:
        self.user_configs = list(self.user_configs)
        self.throughput_history_size = int(self.throughput_history_size)

    @property
    def user_count(self) -> int:
        return len(self.user_configs)

    def tti_value(self, standard: StandardManager | None = None) -> float:
        """TTI duration in seconds."""
        return _manager(standard).tti(self.tti_duration)

    def channel_sync_interval_value(self, standard: StandardManager | None = None) -> float:
        """Channel sync interval in seconds."""
        return _manager(standard).channel_sync_interval(self.channel_sync_interval)

    def resource_block_per_tti_limit(self, standard: StandardManager | None = None) -> int:
        return int(_manager(standard).rb_number_from_bandwidth(self.bandwidth))

    def packet_size_limit(self, standard: StandardManager | None = None) -> int:
        """Largest packet (bytes) that fits into one TTI at the base CQI."""
        manager = _manager(standard)
        rb_per_tti = self.resource_block_per_tti_limit(manager)
        bits_per_re = manager.cqi_efficiency(self.base_cqi)
        re_per_rb = manager.resource_elements_in_resource_block()
        return int(rb_per_tti * bits_per_re * re_per_rb / 8)