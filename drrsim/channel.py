"""Radio channel model: COST231 path loss, received power, noise and SINR."""

from __future__ import annotations

import math

# Constant offset C_m of the COST231 model in dB for fixed area types.
_FIXED_AREA_OFFSETS = {
    "Dense Urban": 3.0,
    "Urban": 0.0,
}

_BOLTZMANN = 1.380649e-23  # J/K
_NOISE_TEMPERATURE = 290.0  # K
_NOISE_BANDWIDTH = 20e6  # Hz


def _constant_offset(carrier_frequency: float, area_type: str) -> float:
    if area_type in _FIXED_AREA_OFFSETS:
        return _FIXED_AREA_OFFSETS[area_type]
    if area_type == "Suburban":
        log_frequency = math.log10(carrier_frequency / 28)
        return -(2 * log_frequency * log_frequency + 5.4)
    raise ValueError(f"Unknown area type: {area_type!r}")


class Channel:
    """Radio channel between the base station and a user."""

    def __init__(self, carrier_frequency: float = 0.0, power_bs_transmitted: int = 0,
                 area_type: str = "Urban") -> None:
        self.carrier_frequency = carrier_frequency  # MHz
        self.power_bs_transmitted = power_bs_transmitted  # dB
        self.area_type = area_type
        self.constant_offset = _constant_offset(carrier_frequency, area_type)

    def path_loss(self, user_distance: float, bs_height: float, user_height: float) -> float:
        """Path loss in dB according to the COST231 model."""
        log_freq = math.log10(self.carrier_frequency)
        log_height_bs = math.log10(bs_height)
        log_distance = math.log10(user_distance)

        a_height_user = (1.1 * log_freq - 0.7) * user_height - (1.56 * log_freq - 0.8)

        return (
            46.3 + 33.9 * log_freq - 13.82 * log_height_bs
            - a_height_user
            + (44.9 - 6.55 * log_height_bs) * log_distance
            + self.constant_offset
        )

    def sinr(self, received_signal_power: float, noise_power: float,
             interference_power: float) -> float:
        return received_signal_power - noise_power - interference_power

    def received_signal_power(self, path_loss: float) -> float:
        return self.power_bs_transmitted - path_loss

    def noise_power(self) -> float:
        """Thermal noise power over a 20 MHz band."""
        return 10 * math.log10(_BOLTZMANN * _NOISE_TEMPERATURE * _NOISE_BANDWIDTH)

    def interference_power(self) -> float:
        return 0.0