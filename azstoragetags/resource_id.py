"""Parsing of Azure Resource Manager resource identifiers."""

from __future__ import annotations

from dataclasses import dataclass

_MIN_SEGMENTS = 9


@dataclass(frozen=True)
class ResourceId:
    """Components of an ARM resource ID of the form
    ``/subscriptions/{sub}/resourceGroups/{rg}/providers/{ns}/{type}/{name}``.
    """

    subscription_id: str
    resource_group_name: str
    provider_namespace: str
    resource_type: str
    resource_name: str

    def __str__(self) -> str:
        return (
            f"/subscriptions/{self.subscription_id}"
            f"/resourceGroups/{self.resource_group_name}"
            f"/providers/{self.provider_namespace}"
            f"/{self.resource_type}/{self.resource_name}"
        )


def parse_resource_id(resource_id: str) -> ResourceId:
    """Split a resource ID into its parts.

    Raises ValueError when the ID has too few path segments.
    """
    parts = resource_id.split("/")
    if len(parts) < _MIN_SEGMENTS:
        raise ValueError("invalid resource ID format")
    return ResourceId(
        subscription_id=parts[2],
        resource_group_name=parts[4],
        provider_namespace=parts[6],
        resource_type=parts[7],
        resource_name=parts[8],
    )