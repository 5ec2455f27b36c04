import pytest

from azstoragetags.arm import STORAGE_ACCOUNT_TYPE, Resource
from azstoragetags.storage import iter_storage_accounts, storage_account_properties

ACCOUNT_ID = "/subscriptions/sub/resourceGroups/rg/providers/Microsoft.Storage/storageAccounts/acct"
VM_ID = "/subscriptions/sub/resourceGroups/rg/providers/Microsoft.Compute/virtualMachines/vm"


class FakeClient:
    def __init__(self, resources=()):
        self.resources = list(resources)
        self.property_calls = []

    def list_resources(self):
        yield from self.resources

    def get_storage_account_properties(self, resource_group, account_name):
        self.property_calls.append((resource_group, account_name))
        return {"name": account_name}


def test_iter_storage_accounts_filters_by_type():
    account = Resource(id=ACCOUNT_ID, name="acct", type=STORAGE_ACCOUNT_TYPE)
    vm = Resource(id=VM_ID, name="vm", type="Microsoft.Compute/virtualMachines")
    client = FakeClient([vm, account])
    assert list(iter_storage_accounts(client)) == [account]


def test_iter_storage_accounts_type_is_case_sensitive():
    other = Resource(id=ACCOUNT_ID, name="acct", type=STORAGE_ACCOUNT_TYPE.lower())
    assert list(iter_storage_accounts(FakeClient([other]))) == []


def test_iter_storage_accounts_preserves_order():
    accounts = [
        Resource(id=f"{ACCOUNT_ID}{n}", name=f"acct{n}", type=STORAGE_ACCOUNT_TYPE)
        for n in range(3)
    ]
    assert [a.name for a in iter_storage_accounts(FakeClient(accounts))] == [
        "acct0",
        "acct1",
        "acct2",
    ]


def test_storage_account_properties_uses_parsed_parts():
    client = FakeClient()
    props = storage_account_properties(client, ACCOUNT_ID)
    assert props == {"name": "acct"}
    assert client.property_calls == [("rg", "acct")]


def test_storage_account_properties_rejects_short_id():
    client = FakeClient()
    with pytest.raises(ValueError):
        storage_account_properties(client, "/subscriptions/sub/resourceGroups/rg")
    assert client.property_calls == []