"""Scale target reference parsing.

A target names the single workload the autoscaler controls, either by a
well-known kind (``deployment/my-app``) or by a fully qualified resource
(``resource.group/my-app`` or ``resource.version.group/my-app``).
"""

from dataclasses import dataclass
from typing import Optional

from loguru import logger


KNOWN_KIND_PREFIXES = (
    "deployment",
    "replicaset",
    "statefulset",
    "replicationcontroller",
)


@dataclass(frozen=True)
class TargetReference:
    """A target split into its resource part and name part."""
    resource: str
    name: str

    @property
    def kind(self) -> str:
        """First dot segment of the resource part."""
        return self.resource.split(".")[0]

    @property
    def group(self) -> str:
        """API group of a qualified resource, empty for bare kinds."""
        segments = self.resource.split(".")
        if len(segments) == 3:
            return segments[2]
        if len(segments) == 2:
            return segments[1]
        return ""

    def __str__(self) -> str:
        return f"{self.resource}/{self.name}"


def check_target_format(target: str) -> Optional[str]:
    """
    Check the syntax of a scale target.

    This is a permissive pre-check, not a schema lookup: any resource part
    with two or three dot segments is accepted, as is anything that merely
    starts with a known workload kind. The name part is not inspected.

    Args:
        target: Target string, expected to be lowercased already

    Returns:
        None if the target is acceptable, otherwise the diagnostic message
    """
    if target == "":
        return "--target parameter cannot be empty"

    splits = target.split("/")
    if len(splits) != 2:
        return "--target must include resource and name"

    resource = splits[0]
    resource_splits = resource.split(".")
    if len(resource_splits) in (2, 3) or resource.startswith(KNOWN_KIND_PREFIXES):
        return None

    return f"--target must include valid resource {resource_splits!r}"


def is_target_format_valid(target: str) -> bool:
    """Return whether target is valid, logging the reason when it is not."""
    problem = check_target_format(target)
    if problem is not None:
        logger.error(problem)
        return False
    return True


def split_target(target: str) -> TargetReference:
    """Split a valid target into a TargetReference."""
    problem = check_target_format(target)
    if problem is not None:
        raise ValueError(problem)
    resource, name = target.split("/")
    return TargetReference(resource=resource, name=name)
