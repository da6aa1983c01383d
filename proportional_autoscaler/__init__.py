"""Cluster proportional autoscaler: startup options and validation."""

__version__ = "1.8.0"
__author__ = "Cloud Project Team"

from .options import AutoScalerConfig, ConfigMapData, is_target_format_valid

__all__ = [
    "AutoScalerConfig",
    "ConfigMapData",
    "is_target_format_valid",
]
