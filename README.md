# azstoragetags

A small command-line tool and library for working with Azure storage
accounts through the Azure Resource Manager (ARM) REST API. It can:

- list the resources in a subscription and pick out the storage accounts
  (`Microsoft.Storage/storageAccounts`);
- fetch a storage account's properties;
- read the tags on any resource, add or overwrite a tag, or remove one;
- register a resource provider (for example `Microsoft.PolicyInsights`)
  with a subscription.

## Installation

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Credentials

Credentials are read from the environment:

- `AZURE_ACCESS_TOKEN` – a bearer token you already hold. If set, it is
  used as is.
- otherwise `AZURE_TENANT_ID`, `AZURE_CLIENT_ID` and `AZURE_CLIENT_SECRET`
  together – a service principal; tokens are fetched with the OAuth2
  client-credentials grant from `https://login.microsoftonline.com`.

If neither is configured, the command fails with an error naming the
missing variables.

## Command line

Installing the package provides the `azstoragetags` command:

```
azstoragetags --help
```

Global options (given before the action):

- `--subscription ID` – the subscription to work in; defaults to
  `$AZURE_SUBSCRIPTION_ID`. One of the two is required.
- `--endpoint URL` – the Resource Manager endpoint; defaults to
  `https://management.azure.com`.

Actions:

| Action | What it does |
| --- | --- |
| `list` | Prints every resource's ID, name and location, with an extra line for each storage account. |
| `tags` | For each storage account, prints its tags as `[Tags] Key: … Value: …`, sorted by key. |
| `properties` | For each storage account, prints its name, kind, SKU and location. |
| `add-tag KEY VALUE` | Adds (or overwrites) the tag `KEY` on **every** storage account, keeping their other tags, and prints the resulting tags. |
| `delete-tag KEY` | Removes the tag `KEY` from **every** storage account, keeping their other tags, and prints the remaining tags. |
| `register-provider [PROVIDER]` | Registers a resource provider namespace (default `Microsoft.PolicyInsights`) and prints its registration state. |

Example:

```
export AZURE_SUBSCRIPTION_ID=00000000-0000-0000-0000-000000000000
export AZURE_ACCESS_TOKEN=token
azstoragetags tags
azstoragetags add-tag environment test
```

For the per-account actions, an error on one account is reported on
standard error and the remaining accounts are still processed; the exit
status is then 1. Credential and request errors also give exit status 1.

## Library use

### Resource IDs

`azstoragetags.resource_id.parse_resource_id` splits a full ARM resource ID
into a frozen `ResourceId` with `subscription_id`, `resource_group_name`,
`provider_namespace`, `resource_type` and `resource_name`; `str()` on it
rebuilds the ID.

```python
from azstoragetags.resource_id import parse_resource_id

rid = parse_resource_id(
    "/subscriptions/00000000-0000-0000-0000-000000000000"
    "/resourceGroups/example-rg"
    "/providers/Microsoft.Storage/storageAccounts/examplestore"
)
print(rid.resource_group_name, rid.resource_name)  # example-rg examplestore
```

An ID with fewer than nine `/`-separated segments raises `ValueError`.

### Credentials

`azstoragetags.credentials` offers:

- `StaticTokenCredential(token, expires_on=inf)` – hands out a token you
  already hold;
- `ClientSecretCredential(tenant_id, client_id, client_secret, *, authority=..., session=None, timeout=30.0)`
  – fetches tokens for a service principal and caches them per scope,
  refreshing when less than five minutes remain;
- `default_credential(environ=None)` – picks one of the above from the
  given mapping (the process environment when omitted), as described
  under *Credentials*.

Each credential's `get_token(scope)` returns an `AccessToken` (`token`,
`expires_on`). Problems raise `CredentialError`.

### Talking to ARM

`azstoragetags.arm.ArmClient(subscription_id, credential, *, endpoint=..., session=None, timeout=30.0)`
wraps the ARM REST calls for one subscription:

- `get_subscription(subscription_id)` – the subscription's details as a dict;
- `list_resources()` – yields `Resource` entries (`id`, `name`, `type`,
  `location`, `tags`), following `nextLink` pages;
- `get_storage_account_properties(resource_group, account_name)` – a dict;
- `register_provider(provider)` – a dict;
- `get_tags_at_scope(scope)` – the tags at a scope as a dict;
- `create_or_update_tags_at_scope(scope, tags)` – replaces the tags at a
  scope with exactly `tags` and returns the tags now in place.

A non-success response raises `ArmError`, which carries `status_code`,
`code` and `message`.

### Storage accounts and tags

```python
from azstoragetags.arm import ArmClient
from azstoragetags.credentials import default_credential
from azstoragetags.storage import iter_storage_accounts, storage_account_properties
from azstoragetags.tags import create_resource_tag, delete_resource_tag, get_resource_tags

client = ArmClient("00000000-0000-0000-0000-000000000000", default_credential())

for account in iter_storage_accounts(client):
    print(account.id, account.name)
    print(get_resource_tags(client, account.id))
    print(storage_account_properties(client, account.id))

create_resource_tag(client, resource_id, "environment", "test")
delete_resource_tag(client, resource_id, "environment")
```

`create_resource_tag` merges the key into the resource's existing tags;
`delete_resource_tag` removes one key (a missing key is not an error) and
writes the remaining tags back. Both return the resulting tags and raise
`ValueError` for an empty key. `storage_account_properties` raises
`ValueError` if the resource ID cannot be parsed.

## What it does not do

- Credentials come only from the environment variables above; there is no
  Azure CLI login, managed identity, certificate or interactive sign-in.
- Tag changes from the command line always apply to every storage account
  in the subscription; there is no option to pick one account or resource
  group (use the library functions for that).
- It only reads storage account properties; it does not create, change or
  delete storage accounts.