"""A small client for the Azure Resource Manager REST API."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Mapping

import requests

from .credentials import TokenCredential

DEFAULT_ENDPOINT = "https://management.azure.com"
STORAGE_ACCOUNT_TYPE = "Microsoft.Storage/storageAccounts"

SUBSCRIPTIONS_API_VERSION = "2016-06-01"
RESOURCES_API_VERSION = "2021-04-01"
STORAGE_API_VERSION = "2023-05-01"


class ArmError(Exception):
    """An error response from Resource Manager."""

    def __init__(self, status_code: int, code: str, message: str) -> None:
        super().__init__(f"{status_code} {code}: {message}")
        self.status_code = status_code
        self.code = code
        self.message = message

    @classmethod
    def from_response(cls, response: requests.Response) -> "ArmError":
        try:
            body = response.json()
        except ValueError:
            body = {}
        error = body.get("error") if isinstance(body, dict) else None
        if isinstance(error, dict):
            return cls(
                response.status_code,
                error.get("code", ""),
                error.get("message", response.reason or ""),
            )
        return cls(response.status_code, "", response.reason or response.text)


@dataclass(frozen=True)
class Resource:
    """A generic resource as returned by the resource list."""

    id: str
    name: str
    type: str
    location: str = ""
    tags: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "Resource":
        return cls(
            id=data.get("id", ""),
            name=data.get("name", ""),
            type=data.get("type", ""),
            location=data.get("location", "") or "",
            tags=dict(data.get("tags") or {}),
        )


def _tags_path(scope: str) -> str:
    return f"/{scope.strip('/')}/providers/Microsoft.Resources/tags/default"


class ArmClient:
    """Issues authenticated Resource Manager requests for one subscription."""

    def __init__(
        self,
        subscription_id: str,
        credential: TokenCredential,
        *,
        endpoint: str = DEFAULT_ENDPOINT,
        session: requests.Session | None = None,
        timeout: float = 30.0,
    ) -> None:
        self.subscription_id = subscription_id
        self.endpoint = endpoint.rstrip("/")
        self._credential = credential
        self._scope = f"{self.endpoint}/.default"
        self._session = session or requests.Session()
        self._timeout = timeout

    def _request(
        self,
        method: str,
        target: str,
        api_version: str | None = None,
        body: Any = None,
    ) -> dict[str, Any]:
        url = target if target.startswith(("http://", "https://")) else self.endpoint + target
        params = {"api-version": api_version} if api_version else None
        token = self._credential.get_token(self._scope)
        response = self._session.request(
            method,
            url,
            params=params,
            json=body,
            headers={"Authorization": f"Bearer {token.token}"},
            timeout=self._timeout,
        )
        if not response.ok:
            raise ArmError.from_response(response)
        if not response.content:
            return {}
        return response.json()

    def get_subscription(self, subscription_id: str) -> dict[str, Any]:
        """Fetch a subscription's details."""
        return self._request("GET", f"/subscriptions/{subscription_id}", SUBSCRIPTIONS_API_VERSION)

    def list_resources(self) -> Iterator[Resource]:
        """Yield every resource in the subscription, following pagination."""
        target: str | None = f"/subscriptions/{self.subscription_id}/resources"
        version: str | None = RESOURCES_API_VERSION
        while target:
            page = self._request("GET", target, version)
            for item in page.get("value") or []:
                yield Resource.from_json(item)
            target = page.get("nextLink")
            version = None

    def get_storage_account_properties(
        self, resource_group: str, account_name: str
    ) -> dict[str, Any]:
        """Fetch the properties of a storage account."""
        path = (
            f"/subscriptions/{self.subscription_id}/resourceGroups/{resource_group}"
            f"/providers/{STORAGE_ACCOUNT_TYPE}/{account_name}"
        )
        return self._request("GET", path, STORAGE_API_VERSION)

    def register_provider(self, provider: str) -> dict[str, Any]:
        """Register a resource provider namespace with the subscription."""
        path = f"/subscriptions/{self.subscription_id}/providers/{provider}/register"
        return self._request("POST", path, RESOURCES_API_VERSION)

    def get_tags_at_scope(self, scope: str) -> dict[str, str]:
        """Return the tags applied at a scope such as a resource ID."""
        data = self._request("GET", _tags_path(scope), RESOURCES_API_VERSION)
        properties = data.get("properties") or {}
        return dict(properties.get("tags") or {})

    def create_or_update_tags_at_scope(
        self, scope: str, tags: Mapping[str, str]
    ) -> dict[str, str]:
        """Replace the tags at a scope and return the tags now in place."""
        body = {"properties": {"tags": dict(tags)}}
        data = self._request("PUT", _tags_path(scope), RESOURCES_API_VERSION, body)
        properties = data.get("properties") or {}
        return dict(properties.get("tags") or {})