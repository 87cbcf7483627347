"""Configuration loading utilities."""
from .loader import DEFAULT_CONFIG_PATH, load_config
from .schema import LoggingConfig, OutputConfig, Profile, RegionConfig, SamplingConfig

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "load_config",
    "LoggingConfig",
    "OutputConfig",
    "Profile",
    "RegionConfig",
    "SamplingConfig",
]
