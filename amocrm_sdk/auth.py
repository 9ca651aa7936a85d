"""OAuth2 authorisation against amoCRM: auth URLs, token exchange and refresh."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any
from urllib.parse import urlencode

import requests

from amocrm_sdk.client import DEFAULT_TIMEOUT, expect_status

_TOKEN_PATH = "/oauth2/access_token"


class TokenType(str, Enum):
    """Kind of authorisation token."""

    OAUTH = "oauth2"
    LONG_LIVED = "long_lived"


@dataclass
class AuthResponse:
    """Tokens returned by the OAuth server."""

    token_type: str = ""
    expires_in: int = 0
    access_token: str = ""
    refresh_token: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AuthResponse:
        return cls(
            token_type=data.get("token_type", ""),
            expires_in=data.get("expires_in", 0),
            access_token=data.get("access_token", ""),
            refresh_token=data.get("refresh_token", ""),
        )


def _request_token(base_url: str, **fields: str) -> AuthResponse:
    payload = {key: value for key, value in fields.items() if value}
    for required in ("client_id", "client_secret", "grant_type"):
        payload.setdefault(required, fields.get(required, ""))
    response = requests.post(
        base_url + _TOKEN_PATH,
        json=payload,
        headers={"Content-Type": "application/json"},
        timeout=DEFAULT_TIMEOUT,
    )
    expect_status(response)
    return AuthResponse.from_dict(response.json())


def get_access_token(
    base_url: str, client_id: str, client_secret: str, code: str, redirect_uri: str
) -> AuthResponse:
    """Exchange an authorisation code for tokens."""
    return _request_token(
        base_url,
        client_id=client_id,
        client_secret=client_secret,
        grant_type="authorization_code",
        code=code,
        redirect_uri=redirect_uri,
    )


def get_auth_url(base_url: str, client_id: str, redirect_uri: str, state: str, mode: str) -> str:
    """Build the URL the user is sent to in order to grant access."""
    params = sorted(
        {
            "client_id": client_id,
            "mode": mode,
            "redirect_uri": redirect_uri,
            "response_type": "code",
            "state": state,
        }.items()
    )
    return f"{base_url}{_TOKEN_PATH}?{urlencode(params)}"


def refresh_access_token(
    base_url: str, client_id: str, client_secret: str, refresh_token: str
) -> AuthResponse:
    """Obtain fresh tokens using a refresh token."""
    return _request_token(
        base_url,
        client_id=client_id,
        client_secret=client_secret,
        grant_type="refresh_token",
        refresh_token=refresh_token,
    )


def get_long_lived_token(base_url: str, client_id: str, client_secret: str) -> AuthResponse:
    """Obtain a long-lived token for server-side integrations."""
    return _request_token(
        base_url,
        client_id=client_id,
        client_secret=client_secret,
        grant_type="client_credentials",
    )