"""Building blocks for LTE downlink scheduler simulation: standard tables, channel, users, packet queues and settings."""

__version__ = "0.1.0"

__all__ = [
    "channel",
    "generators",
    "loader",
    "packet",
    "position",
    "scenarios",
    "settings",
    "standards",
    "state",
    "user",
    "validation",
]