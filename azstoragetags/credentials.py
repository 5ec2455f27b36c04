"""Bearer-token credentials for the Azure Resource Manager API."""

from __future__ import annotations

import os
import time
from dataclasses import dataclass
from typing import Mapping, Protocol

import requests

DEFAULT_AUTHORITY = "https://login.microsoftonline.com"
_REFRESH_MARGIN = 300.0


class CredentialError(Exception):
    """Raised when a token cannot be obtained."""


@dataclass(frozen=True)
class AccessToken:
    """A bearer token and the UNIX time at which it expires."""

    token: str
    expires_on: float

    def expires_within(self, seconds: float, now: float | None = None) -> bool:
        current = time.time() if now is None else now
        return self.expires_on - current <= seconds


class TokenCredential(Protocol):
    def get_token(self, scope: str) -> AccessToken: ...


class StaticTokenCredential:
    """Hands out a token that was obtained elsewhere."""

    def __init__(self, token: str, expires_on: float = float("inf")) -> None:
        if not token:
            raise CredentialError("access token is empty")
        self._token = AccessToken(token, expires_on)

    def get_token(self, scope: str) -> AccessToken:
        return self._token


class ClientSecretCredential:
    """Obtains tokens with the OAuth2 client-credentials grant."""

    def __init__(
        self,
        tenant_id: str,
        client_id: str,
        client_secret: str,
        *,
        authority: str = DEFAULT_AUTHORITY,
        session: requests.Session | None = None,
        timeout: float = 30.0,
    ) -> None:
        if not (tenant_id and client_id and client_secret):
            raise CredentialError("tenant ID, client ID and client secret are required")
        self.tenant_id = tenant_id
        self.client_id = client_id
        self._client_secret = client_secret
        self.token_url = f"{authority.rstrip('/')}/{tenant_id}/oauth2/v2.0/token"
        self._session = session or requests.Session()
        self._timeout = timeout
        self._cache: dict[str, AccessToken] = {}

    def get_token(self, scope: str) -> AccessToken:
        cached = self._cache.get(scope)
        if cached is not None and not cached.expires_within(_REFRESH_MARGIN):
            return cached
        token = self._request_token(scope)
        self._cache[scope] = token
        return token

    def _request_token(self, scope: str) -> AccessToken:
        form = {
            "grant_type": "client_credentials",
            "client_id": self.client_id,
            "client_secret": self._client_secret,
            "scope": scope,
        }
        try:
            response = self._session.post(self.token_url, data=form, timeout=self._timeout)
        except requests.RequestException as exc:
            raise CredentialError(f"token request failed: {exc}") from exc
        try:
            body = response.json()
        except ValueError:
            body = {}
        if not response.ok:
            detail = body.get("error_description") or body.get("error") or response.reason
            raise CredentialError(f"token request failed ({response.status_code}): {detail}")
        access = body.get("access_token")
        if not access:
            raise CredentialError("token response has no access_token")
        try:
            lifetime = float(body.get("expires_in", 3600))
        except (TypeError, ValueError) as exc:
            raise CredentialError("token response has an invalid expires_in") from exc
        return AccessToken(access, time.time() + lifetime)


_SECRET_VARS = ("AZURE_TENANT_ID", "AZURE_CLIENT_ID", "AZURE_CLIENT_SECRET")


def default_credential(environ: Mapping[str, str] | None = None) -> TokenCredential:
    """Build a credential from environment variables.

    AZURE_ACCESS_TOKEN takes precedence; otherwise AZURE_TENANT_ID,
    AZURE_CLIENT_ID and AZURE_CLIENT_SECRET are used together.
    """
    env = os.environ if environ is None else environ
    token = env.get("AZURE_ACCESS_TOKEN")
    if token:
        return StaticTokenCredential(token)
    values = {name: env.get(name, "") for name in _SECRET_VARS}
    missing = [name for name, value in values.items() if not value]
    if not missing:
        return ClientSecretCredential(
            values["AZURE_TENANT_ID"],
            values["AZURE_CLIENT_ID"],
            values["AZURE_CLIENT_SECRET"],
        )
    raise CredentialError(
        "no credential configured: set AZURE_ACCESS_TOKEN or "
        + ", ".join(_SECRET_VARS)
        + f" (missing: {', '.join(missing)})"
    )