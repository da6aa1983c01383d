"""Autoscaler startup configuration."""

import os
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, InstanceOf

from .errors import ValidationError
from .params import ConfigMapData
from .target import TargetReference, check_target_format, split_target


NAMESPACE_ENV = "MY_POD_NAMESPACE"
DEFAULT_POLL_PERIOD_SECONDS = 10

# Long flag name -> AutoScalerConfig field
FLAG_FIELDS = {
    "target": "target",
    "configmap": "configmap",
    "namespace": "namespace",
    "default-params": "default_params",
    "poll-period-seconds": "poll_period_seconds",
    "version": "print_ver",
    "nodelabels": "node_labels",
    "max-sync-failures": "max_sync_failures",
}


@dataclass
class Violation:
    """A single invalid parameter."""
    flag: str
    message: str


class AutoScalerConfig(BaseModel):
    """Configures and runs an autoscaler server."""

    model_config = ConfigDict(validate_assignment=True)

    target: str = ""
    configmap: str = ""
    namespace: str = ""
    default_params: InstanceOf[ConfigMapData] = Field(default_factory=ConfigMapData)
    poll_period_seconds: int = DEFAULT_POLL_PERIOD_SECONDS
    print_ver: bool = False
    # Comma separated key=value label selectors, passed through as is
    node_labels: str = ""
    # 0 allows unlimited consecutive failures
    max_sync_failures: int = 0

    @classmethod
    def from_environ(cls, environ: Optional[Mapping[str, str]] = None, **values: Any) -> "AutoScalerConfig":
        """
        Create a config with defaults, falling back to the pod namespace.

        Args:
            environ: Environment to read MY_POD_NAMESPACE from (default: os.environ)
            **values: Explicit field values, applied over the defaults

        Returns:
            New AutoScalerConfig
        """
        if environ is None:
            environ = os.environ
        config = cls(namespace=environ.get(NAMESPACE_ENV, ""))
        config.apply_overrides(values)
        return config

    def apply_overrides(self, values: Mapping[str, Any]) -> None:
        """Set every field in values that is not None."""
        for field, value in values.items():
            if field not in type(self).model_fields:
                raise ValueError(f"Unknown config field: '{field}'")
            if value is None:
                continue
            setattr(self, field, value)

    def collect_violations(self) -> List[Violation]:
        """
        Check all parameters and return every violation found.

        The target is lowercased first. All checks run regardless of earlier
        failures.
        """
        violations = []
        self.target = self.target.lower()

        problem = check_target_format(self.target)
        if problem is not None:
            violations.append(Violation("--target", problem))
        if self.configmap == "":
            violations.append(Violation("--configmap", "--configmap parameter cannot be empty"))
        if self.namespace == "":
            violations.append(
                Violation("--namespace", "--namespace parameter not set and failed to fallback")
            )
        if self.poll_period_seconds < 1:
            violations.append(
                Violation("--poll-period-seconds", "--poll-period-seconds cannot be less than 1")
            )
        return violations

    def validate_flags(self) -> None:
        """Log every invalid parameter, then raise a single ValidationError."""
        violations = self.collect_violations()
        for violation in violations:
            logger.error(violation.message)

        # Log all sanity check errors before raising a single error
        if violations:
            raise ValidationError("failed to validate all input parameters", violations)
        logger.debug(f"Flags validated for target {self.target}")

    @property
    def target_reference(self) -> TargetReference:
        return split_target(self.target)

    def to_flags(self) -> Dict[str, Any]:
        """Current values keyed by long flag name."""
        return {flag: getattr(self, field) for flag, field in FLAG_FIELDS.items()}
