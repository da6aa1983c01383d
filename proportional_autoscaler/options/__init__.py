"""Startup options for the autoscaler."""

from .config import AutoScalerConfig, Violation
from .errors import OptionsError, ParseError, ValidationError
from .loader import load_config
from .params import TYPE_NAME, ConfigMapData, parse_default_params
from .target import TargetReference, check_target_format, is_target_format_valid, split_target

__all__ = [
    "AutoScalerConfig",
    "Violation",
    "OptionsError",
    "ParseError",
    "ValidationError",
    "load_config",
    "ConfigMapData",
    "TYPE_NAME",
    "parse_default_params",
    "TargetReference",
    "check_target_format",
    "is_target_format_valid",
    "split_target",
]
