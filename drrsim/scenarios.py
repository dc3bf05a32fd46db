"""Built-in simulation scenarios."""

from __future__ import annotations

from drrsim.settings import BSConfig, Settings, UserConfig


def basic_scenario_settings() -> Settings:
    """One user served by the PF scheduler in a dense urban LTE cell."""
    return Settings(
        launches=1,
        standard_type="LTE",
        base_cqi=1,
        tti_duration="1ms",
        channel_sync_interval="10ms",
        scheduler_type="DefaultPFScheduler",
        bandwidth=5,
        packet_count=10,
        packet_size=159,
        queue_count=1,
        queue_quant=100,
        queue_limit=10000,
        time_lambda=1500,
        user_configs=[UserConfig(8000, 8000, 1.5, 0, "random", 10)],
        bs_config=BSConfig(0, 0, 25),
        carrier_frequency=2000,
        bs_transmission_power=46,
        area_type="Dense Urban",
        users_per_tti_limit=4,
        throughput_history_size=2000,
    )