"""JSON default parameters for the autoscaler ConfigMap.

``--default-params`` takes a JSON object. Each top-level value is re-encoded
as its own JSON document so the result can be written to a ConfigMap as one
entry per key.
"""

import json
from typing import Any, Dict

from loguru import logger

from .errors import ParseError


TYPE_NAME = "configMapData"


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON constant {name}")


def encode_param(value: Any) -> str:
    """Encode a single parameter value as compact JSON."""
    return json.dumps(value, separators=(",", ":"), sort_keys=True, allow_nan=False)


def parse_default_params(raw: str) -> Dict[str, str]:
    """
    Decode a JSON object and re-encode each of its values as JSON text.

    Args:
        raw: JSON object text, e.g. '{"coresPerReplica": 2, "min": 1}'

    Returns:
        New mapping of key to JSON-encoded value

    Raises:
        ParseError: If raw is not a JSON object or a value cannot be encoded
    """
    try:
        raw_data = json.loads(raw, parse_constant=_reject_constant)
    except ValueError as e:
        raise ParseError(f"invalid default params: {e}") from e

    # null decodes to an empty mapping
    if raw_data is None:
        return {}
    if not isinstance(raw_data, dict):
        raise ParseError(
            f"invalid default params: expected a JSON object, got {type(raw_data).__name__}"
        )

    data = {}
    for key, param in raw_data.items():
        try:
            data[key] = encode_param(param)
        except (TypeError, ValueError) as e:
            raise ParseError(f"invalid default param {key!r}: {e}") from e
    return data


class ConfigMapData(dict):
    """Mapping of parameter name to JSON-encoded parameter value."""

    def set(self, raw: str) -> None:
        """Replace the whole mapping with the parameters decoded from raw.

        The previous content is kept if raw cannot be parsed.
        """
        data = parse_default_params(raw)
        self.clear()
        self.update(data)
        logger.debug(f"Default params set: {len(self)} entries")

    def render(self) -> str:
        return f"{dict(self)}"

    def type_name(self) -> str:
        return TYPE_NAME

    def __str__(self) -> str:
        return self.render()

    @classmethod
    def from_raw(cls, raw: str) -> "ConfigMapData":
        data = cls()
        data.set(raw)
        return data

    @classmethod
    def from_mapping(cls, mapping: Dict[str, Any]) -> "ConfigMapData":
        """Build from already decoded values, e.g. a YAML section."""
        try:
            raw = json.dumps(mapping, allow_nan=False)
        except (TypeError, ValueError) as e:
            raise ParseError(f"invalid default params: {e}") from e
        return cls.from_raw(raw)

