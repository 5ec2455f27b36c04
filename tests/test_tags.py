import pytest

from azstoragetags.tags import create_resource_tag, delete_resource_tag, get_resource_tags

ACCOUNT_ID = "/subscriptions/sub/resourceGroups/rg/providers/Microsoft.Storage/storageAccounts/acct"


class FakeTagsClient:
    def __init__(self, tags):
        self.stored = {ACCOUNT_ID: dict(tags)}
        self.writes = []

    def get_tags_at_scope(self, scope):
        return dict(self.stored.get(scope, {}))

    def create_or_update_tags_at_scope(self, scope, tags):
        self.writes.append((scope, dict(tags)))
        self.stored[scope] = dict(tags)
        return dict(tags)


def test_get_resource_tags_returns_copy():
    client = FakeTagsClient({"env": "prod"})
    tags = get_resource_tags(client, ACCOUNT_ID)
    assert tags == {"env": "prod"}
    tags["other"] = "x"
    assert client.stored[ACCOUNT_ID] == {"env": "prod"}


def test_create_resource_tag_merges_with_existing():
    client = FakeTagsClient({"env": "prod"})
    result = create_resource_tag(client, ACCOUNT_ID, "CreateNewKey", "CreateNewValue")
    assert result == {"env": "prod", "CreateNewKey": "CreateNewValue"}
    assert client.writes == [(ACCOUNT_ID, result)]


def test_create_resource_tag_overwrites_value():
    client = FakeTagsClient({"env": "prod"})
    result = create_resource_tag(client, ACCOUNT_ID, "env", "dev")
    assert result == {"env": "dev"}


def test_create_on_untagged_resource():
    client = FakeTagsClient({})
    assert create_resource_tag(client, ACCOUNT_ID, "k", "v") == {"k": "v"}


def test_delete_resource_tag_removes_only_that_key():
    client = FakeTagsClient({"test": "1", "env": "prod"})
    result = delete_resource_tag(client, ACCOUNT_ID, "test")
    assert result == {"env": "prod"}
    assert client.stored[ACCOUNT_ID] == {"env": "prod"}


def test_delete_missing_key_keeps_tags():
    client = FakeTagsClient({"env": "prod"})
    assert delete_resource_tag(client, ACCOUNT_ID, "test") == {"env": "prod"}
    assert len(client.writes) == 1


def test_create_then_delete_round_trip():
    client = FakeTagsClient({"env": "prod"})
    create_resource_tag(client, ACCOUNT_ID, "k", "v")
    assert delete_resource_tag(client, ACCOUNT_ID, "k") == {"env": "prod"}


@pytest.mark.parametrize("func, args", [
    (create_resource_tag, ("", "v")),
    (delete_resource_tag, ("",)),
])
def test_empty_key_rejected(func, args):
    client = FakeTagsClient({"env": "prod"})
    with pytest.raises(ValueError):
        func(client, ACCOUNT_ID, *args)
    assert client.writes == []