"""Reading and editing the tags applied to a resource."""

from __future__ import annotations

from .arm import ArmClient


def get_resource_tags(client: ArmClient, resource_id: str) -> dict[str, str]:
    """Return the tags currently applied to a resource."""
    return dict(client.get_tags_at_scope(resource_id))


def create_resource_tag(
    client: ArmClient, resource_id: str, key: str, value: str
) -> dict[str, str]:
    """Add or overwrite one tag, keeping all others, and return the resulting tags."""
    if not key:
        raise ValueError("tag key must not be empty")
    tags = get_resource_tags(client, resource_id)
    tags[key] = value
    return client.create_or_update_tags_at_scope(resource_id, tags)


def delete_resource_tag(client: ArmClient, resource_id: str, key: str) -> dict[str, str]:
    """Remove one tag, keeping all others, and return the resulting tags.

    Removing a key that is not present leaves the tags unchanged.
    """
    if not key:
        raise ValueError("tag key must not be empty")
    tags = get_resource_tags(client, resource_id)
    tags.pop(key, None)
    return client.create_or_update_tags_at_scope(resource_id, tags)