"""Radio standard reference data and lookups (TTI, CQI/MCS, bandwidth, SINR)."""

from __future__ import annotations

from bisect import bisect_left
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

# Resource block bandwidth in MHz.
RB_BANDWIDTH = 0.180
# Distance limits between base station and user for the COST231 model (metres).
BS_TO_UE_DISTANCE_MAX = 20000
BS_TO_UE_DISTANCE_MIN = 1000

THROUGHPUT_MIN = 0.001

CARRIER_FREQUENCY = 2000  # MHz
EPSILON = 1e-9


class UnknownParameterError(LookupError):
    """Raised when a parameter is not defined by the selected standard."""


@dataclass(frozen=True)
class StandardInfo:
    """Reference parameters of one data transmission standard."""

    name: str
    description: str
    ttis: Mapping[str, float]
    channel_sync_intervals: Mapping[str, float]
    cqi_to_mcs: Mapping[int, tuple[str, float]]
    modulation_schemes: Mapping[str, int]
    sinr_to_cqi: Mapping[float, int]
    bandwidth_to_rb: Mapping[float, int]
    schedulers: tuple[str, ...]
    mobility_directions: Mapping[int, str]
    area_types: tuple[str, ...]
    users_per_tti_limits: tuple[int, ...]
    resource_elements: int
    _sinr_keys: tuple[float, ...] = field(init=False, repr=False, compare=False)
    _bandwidth_keys: tuple[float, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_sinr_keys", tuple(sorted(self.sinr_to_cqi)))
        object.__setattr__(self, "_bandwidth_keys", tuple(sorted(self.bandwidth_to_rb)))


def _lte() -> StandardInfo:
    return StandardInfo(
        name="LTE",
        description="Long-Term Evolution",
        ttis=MappingProxyType({"1ms": 0.001}),
        channel_sync_intervals=MappingProxyType({"10ms": 0.010}),
        # 3GPP Table 7.2.3-1
        cqi_to_mcs=MappingProxyType({
            1: ("QPSK", 0.1523), 2: ("QPSK", 0.2344), 3: ("QPSK", 0.3770),
            4: ("QPSK", 0.6016), 5: ("QPSK", 0.8770), 6: ("QPSK", 1.1758),
            7: ("16-QAM", 1.4766), 8: ("16-QAM", 1.9141), 9: ("16-QAM", 2.4063),
            10: ("64-QAM", 2.7305), 11: ("64-QAM", 3.3223), 12: ("64-QAM", 3.9023),
            13: ("64-QAM", 4.5234), 14: ("64-QAM", 5.1152), 15: ("64-QAM", 5.5547),
        }),
        modulation_schemes=MappingProxyType({"QPSK": 2, "16-QAM": 4, "64-QAM": 8}),
        sinr_to_cqi=MappingProxyType({
            -6.9390: 1, -5.1470: 2, -3.1800: 3, -1.2530: 4, 0.7610: 5,
            2.6990: 6, 4.6930: 7, 6.5250: 8, 8.5730: 9, 10.3660: 10,
            12.2890: 11, 14.1730: 12, 15.8880: 13, 17.8140: 14, 19.8290: 15,
        }),
        bandwidth_to_rb=MappingProxyType({1.4: 6, 3: 15, 5: 25, 10: 50, 15: 75, 20: 100}),
        schedulers=(
            "DefaultRRScheduler",
            "FixedDRRScheduler", "FixedDRRSchedulerWithUserQuant",
            "CyclicDRRScheduler", "CyclicDRRSchedulerWithUserQuant",
            "DefaultDRRScheduler", "DefaultDRRSchedulerWithUserQuant",
            "DefaultPFScheduler",
        ),
        mobility_directions=MappingProxyType(
            {0: "random", 1: "forward", 2: "backward", 3: "left", 4: "right"}
        ),
        area_types=("Dense Urban", "Urban", "Suburban"),
        users_per_tti_limits=(4, 8),
        # 12 subcarriers * 7 OFDMA symbols * 2 slots per subframe
        resource_elements=12 * 7 * 2,
    )


def default_standards() -> dict[str, StandardInfo]:
    """Return the built-in standards keyed by name."""
    return {"LTE": _lte()}


def _lookup(mapping: Mapping, key, what: str):
    try:
        return mapping[key]
    except KeyError:
        raise UnknownParameterError(f"Unknown {what}: {key!r}") from None


class StandardManager:
    """Looks up standard-specific parameters for the currently selected standard."""

    def __init__(self, standards: Mapping[str, StandardInfo] | None = None,
                 current: str = "LTE") -> None:
        self.standards = dict(default_standards() if standards is None else standards)
        self.current_standard_name = ""
        self.set_current_standard(current)

    def get_standard_info(self, standard_name: str) -> StandardInfo:
        return _lookup(self.standards, standard_name, "standard")

    def set_current_standard(self, standard_name: str) -> None:
        self.get_standard_info(standard_name)
        self.current_standard_name = standard_name

    @property
    def current(self) -> StandardInfo:
        return self.get_standard_info(self.current_standard_name)

    def tti(self, tti_name: str) -> float:
        """TTI duration in seconds for the given name."""
        return _lookup(self.current.ttis, tti_name, "TTI")

    def cqi_efficiency(self, cqi: int) -> float:
        """Useful bits per resource element for the given CQI."""
        info = self.current
        modulation_scheme, code_rate = _lookup(info.cqi_to_mcs, cqi, "CQI")
        bits_per_re = _lookup(info.modulation_schemes, modulation_scheme, "modulation scheme")
        return bits_per_re * code_rate

    def rb_number_from_bandwidth(self, bandwidth: float) -> int:
        """Maximum number of resource blocks in the given bandwidth (MHz)."""
        info = self.current
        keys = info._bandwidth_keys
        index = bisect_left(keys, bandwidth)
        if index < len(keys) and abs(keys[index] - bandwidth) < EPSILON:
            return info.bandwidth_to_rb[keys[index]]
        raise UnknownParameterError(f"Invalid {info.name} bandwidth: {bandwidth!r}")

    def cqi_from_sinr(self, sinr: float) -> int:
        """CQI of the first SINR threshold not below the given SINR, clamped to the table."""
        info = self.current
        keys = info._sinr_keys
        index = bisect_left(keys, sinr)
        if index == len(keys):
            index -= 1
        return info.sinr_to_cqi[keys[index]]

    def resource_elements_in_resource_block(self) -> int:
        return self.current.resource_elements

    def resource_block_effective_data_size(self, cqi: int) -> int:
        """Useful bytes carried by one resource block for the given CQI."""
        bits_per_re = int(self.cqi_efficiency(cqi))
        bits_per_rb = bits_per_re * self.resource_elements_in_resource_block()
        return bits_per_rb // 8

    def channel_sync_interval(self, channel_sync_interval_name: str) -> float:
        return _lookup(
            self.current.channel_sync_intervals,
            channel_sync_interval_name,
            "channel sync interval",
        )

    def mobility_direction(self, mobility_direction_id: int) -> str:
        return _lookup(
            self.current.mobility_directions, mobility_direction_id, "mobility direction"
        )