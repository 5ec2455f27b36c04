"""Finding storage accounts and reading their properties."""

from __future__ import annotations

from typing import Any, Iterator

from .arm import STORAGE_ACCOUNT_TYPE, ArmClient, Resource
from .resource_id import parse_resource_id


def iter_storage_accounts(client: ArmClient) -> Iterator[Resource]:
    """Yield the storage accounts among the subscription's resources."""
    for resource in client.list_resources():
        if resource.type == STORAGE_ACCOUNT_TYPE:
            yield resource


def storage_account_properties(client: ArmClient, resource_id: str) -> dict[str, Any]:
    """Fetch a storage account's properties given its full resource ID.

    Raises ValueError if the resource ID cannot be parsed.
    """
    parsed = parse_resource_id(resource_id)
    return client.get_storage_account_properties(
        parsed.resource_group_name, parsed.resource_name
    )