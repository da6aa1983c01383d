"""Load autoscaler flag values from a YAML file."""

from pathlib import Path
from typing import Any, Dict, Union

import yaml
from loguru import logger

from .config import FLAG_FIELDS
from .params import ConfigMapData


# --version only makes sense on the command line
FILE_FLAGS = [flag for flag in FLAG_FIELDS if flag != "version"]


def load_config(config_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load flag values from a YAML file.

    Keys are long flag names without the leading dashes, e.g.
    ``poll-period-seconds``. ``default-params`` may be a mapping or a JSON
    string.

    Args:
        config_path: Path to YAML config file

    Returns:
        Values keyed by AutoScalerConfig field name

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If YAML parsing fails or the file contains unknown keys
    """
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with open(path, 'r') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Failed to parse YAML config file: {e}")

    if data is None:
        raise ValueError(f"Config file is empty: {config_path}")
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {config_path}")

    values = {}
    for flag, value in data.items():
        if flag not in FILE_FLAGS:
            raise ValueError(f"Unknown key '{flag}' in config. Must be one of {FILE_FLAGS}")
        if flag == "default-params":
            value = _load_default_params(value)
        values[FLAG_FIELDS[flag]] = value

    logger.info(f"Loaded {len(values)} flag values from {path}")
    return values


def _load_default_params(value: Any) -> ConfigMapData:
    if isinstance(value, str):
        return ConfigMapData.from_raw(value)
    if isinstance(value, dict):
        return ConfigMapData.from_mapping(value)
    raise ValueError("default-params must be a mapping or a JSON string")
