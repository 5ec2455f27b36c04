"""Command-line interface for listing storage accounts and managing their tags."""

from __future__ import annotations

import argparse
import os
import sys
from typing import Callable, Sequence

import requests

from .arm import DEFAULT_ENDPOINT, STORAGE_ACCOUNT_TYPE, ArmClient, ArmError, Resource
from .credentials import CredentialError, default_credential
from .storage import iter_storage_accounts, storage_account_properties
from .tags import create_resource_tag, delete_resource_tag, get_resource_tags

DEFAULT_PROVIDER = "Microsoft.PolicyInsights"


def _print_account(account: Resource) -> None:
    print(f"StorageAccount. ID: {account.id}, Name: {account.name}")


def _print_tags(tags: dict[str, str]) -> None:
    for key in sorted(tags):
        print("[Tags] Key:", key, "Value:", tags[key])


def _cmd_list(client: ArmClient, args: argparse.Namespace) -> int:
    for resource in client.list_resources():
        print(
            f"ResourceID: {resource.id}, Name: {resource.name}, Location: {resource.location}"
        )
        if resource.type == STORAGE_ACCOUNT_TYPE:
            _print_account(resource)
    return 0


def _for_each_account(client: ArmClient, action: Callable[[Resource], None]) -> int:
    failures = 0
    for account in iter_storage_accounts(client):
        _print_account(account)
        try:
            action(account)
        except (ArmError, ValueError) as exc:
            print(f"error: {account.id}: {exc}", file=sys.stderr)
            failures += 1
    return 1 if failures else 0


def _cmd_tags(client: ArmClient, args: argparse.Namespace) -> int:
    return _for_each_account(
        client, lambda account: _print_tags(get_resource_tags(client, account.id))
    )


def _cmd_properties(client: ArmClient, args: argparse.Namespace) -> int:
    def show(account: Resource) -> None:
        props = storage_account_properties(client, account.id)
        sku = (props.get("sku") or {}).get("name", "")
        print(
            f"{props.get('name', account.name)}: kind={props.get('kind', '')}, "
            f"sku={sku}, location={props.get('location', '')}"
        )

    return _for_each_account(client, show)


def _cmd_add_tag(client: ArmClient, args: argparse.Namespace) -> int:
    return _for_each_account(
        client,
        lambda account: _print_tags(
            create_resource_tag(client, account.id, args.key, args.value)
        ),
    )


def _cmd_delete_tag(client: ArmClient, args: argparse.Namespace) -> int:
    return _for_each_account(
        client,
        lambda account: _print_tags(delete_resource_tag(client, account.id, args.key)),
    )


def _cmd_register(client: ArmClient, args: argparse.Namespace) -> int:
    result = client.register_provider(args.provider)
    print(f"{args.provider}: {result.get('registrationState', 'requested')}")
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="azstoragetags",
        description="List Azure storage accounts and manage their tags.",
    )
    parser.add_argument(
        "--subscription",
        default=os.environ.get("AZURE_SUBSCRIPTION_ID"),
        help="subscription ID (default: $AZURE_SUBSCRIPTION_ID)",
    )
    parser.add_argument("--endpoint", default=DEFAULT_ENDPOINT, help="Resource Manager endpoint")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="list all resources").set_defaults(func=_cmd_list)
    sub.add_parser("tags", help="print the tags of each storage account").set_defaults(
        func=_cmd_tags
    )
    sub.add_parser("properties", help="print storage account properties").set_defaults(
        func=_cmd_properties
    )

    add = sub.add_parser("add-tag", help="add a tag to every storage account")
    add.add_argument("key")
    add.add_argument("value")
    add.set_defaults(func=_cmd_add_tag)

    delete = sub.add_parser("delete-tag", help="remove a tag from every storage account")
    delete.add_argument("key")
    delete.set_defaults(func=_cmd_delete_tag)

    register = sub.add_parser("register-provider", help="register a resource provider")
    register.add_argument("provider", nargs="?", default=DEFAULT_PROVIDER)
    register.set_defaults(func=_cmd_register)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if not args.subscription:
        parser.error("a subscription ID is required (--subscription or AZURE_SUBSCRIPTION_ID)")
    try:
        credential = default_credential()
        client = ArmClient(args.subscription, credential, endpoint=args.endpoint)
        return args.func(client, args)
    except (CredentialError, ArmError, requests.RequestException) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())