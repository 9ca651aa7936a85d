"""Operations on amoCRM access rights."""

from __future__ import annotations

import json
from collections.abc import Iterable
from http import HTTPStatus
from typing import Any

import requests

from amocrm_sdk.client import Client, expect_status
from amocrm_sdk.entities.access_right_types import (
    AccessEntityType,
    AccessRight,
    EntityRights,
    Requester,
    WithOption,
)

_BASE_PATH = "/api/v4/access_rights"


def _item_path(access_right_id: int) -> str:
    return f"{_BASE_PATH}/{access_right_id}"


def _full_url(requester: Requester, path: str) -> str:
    if isinstance(requester, Client) and requester.base_url:
        return requester.base_url + path
    return path


def _send(
    requester: Requester,
    method: str,
    path: str,
    payload: Any = None,
    expected: tuple[int, ...] = (HTTPStatus.OK,),
) -> requests.Response:
    headers: dict[str, str] = {}
    data = None
    if payload is not None:
        headers["Content-Type"] = "application/json"
        data = json.dumps(payload)
    request = requests.Request(method, _full_url(requester, path), data=data, headers=headers)
    response = requester.do_request(request)
    return expect_status(response, *expected)


def _send_for_right(
    requester: Requester,
    method: str,
    path: str,
    payload: Any = None,
    expected: tuple[int, ...] = (HTTPStatus.OK,),
) -> AccessRight:
    with _send(requester, method, path, payload, expected) as response:
        return AccessRight.from_dict(response.json())


def get_access_rights(
    requester: Requester, page: int, limit: int, *args: WithOption
) -> list[AccessRight]:
    """List access rights; ``args`` are options such as ``with_type`` or ``with_filter``."""
    params = {"page": str(page), "limit": str(limit)}
    for option in args:
        option(params)
    query = "&".join(f"{key}={value}" for key, value in params.items())
    with _send(requester, "GET", f"{_BASE_PATH}?{query}") as response:
        data = response.json() or {}
    embedded = data.get("_embedded") or {}
    return [AccessRight.from_dict(item) for item in embedded.get("access_rights") or []]


def get_access_right(requester: Requester, access_right_id: int) -> AccessRight:
    """Fetch one access right by its ID."""
    return _send_for_right(requester, "GET", _item_path(access_right_id))


def create_access_right(requester: Requester, access_right: AccessRight) -> AccessRight:
    """Create an access right and return it as stored by the server."""
    return _send_for_right(
        requester,
        "POST",
        _BASE_PATH,
        access_right.to_dict(),
        (HTTPStatus.OK, HTTPStatus.CREATED),
    )


def update_access_right(requester: Requester, access_right: AccessRight) -> AccessRight:
    """Update an existing access right; its ID must be set."""
    if not access_right.id:
        raise ValueError("access right ID must not be empty")
    return _send_for_right(
        requester, "PATCH", _item_path(access_right.id), access_right.to_dict()
    )


def delete_access_right(requester: Requester, access_right_id: int) -> None:
    """Delete an access right."""
    response = _send(
        requester,
        "DELETE",
        _item_path(access_right_id),
        expected=(HTTPStatus.NO_CONTENT, HTTPStatus.OK),
    )
    response.close()


def set_entity_rights(
    requester: Requester,
    access_right_id: int,
    entity_type: AccessEntityType | str,
    rights: EntityRights,
) -> AccessRight:
    """Replace the permissions an access right grants on one kind of entity."""
    key = str(getattr(entity_type, "value", entity_type))
    payload = {"rights": {key: rights.to_dict()}}
    return _send_for_right(requester, "PATCH", _item_path(access_right_id), payload)


def add_users_to_access_right(
    requester: Requester, access_right_id: int, user_ids: Iterable[int]
) -> AccessRight:
    """Add users to an access right, keeping existing members and skipping duplicates."""
    current = get_access_right(requester, access_right_id)
    members = list(current.user_ids)
    seen = set(members)
    for user_id in user_ids:
        if user_id not in seen:
            members.append(user_id)
            seen.add(user_id)
    return _send_for_right(
        requester, "PATCH", _item_path(access_right_id), {"user_ids": members}
    )


def remove_users_from_access_right(
    requester: Requester, access_right_id: int, user_ids: Iterable[int]
) -> AccessRight:
    """Remove users from an access right."""
    current = get_access_right(requester, access_right_id)
    removed = set(user_ids)
    members = [user_id for user_id in current.user_ids if user_id not in removed]
    return _send_for_right(
        requester, "PATCH", _item_path(access_right_id), {"user_ids": members}
    )