"""Data types and query options for amoCRM access rights."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Protocol, runtime_checkable

import requests

WithOption = Callable[[dict[str, str]], None]


@runtime_checkable
class Requester(Protocol):
    """Anything able to send an HTTP request to the API."""

    def do_request(self, request: requests.Request) -> requests.Response:
        """Send ``request`` and return the response."""
        ...


class AccessRightsType(str, Enum):
    """Kind of access right."""

    GROUP = "group"
    CUSTOM = "custom"


class AccessEntityType(str, Enum):
    """Entity that an access right applies to."""

    LEAD = "leads"
    CONTACT = "contacts"
    COMPANY = "companies"
    TASK = "tasks"
    CUSTOMER = "customers"
    CATALOG = "catalogs"
    UNSORTED = "unsorted"
    WIDGETS = "widgets"
    MAILS = "mail"
    CHAT_WIDGET = "chat_widget"


def _access_type(value: Any) -> AccessRightsType | str:
    if not value:
        return ""
    try:
        return AccessRightsType(value)
    except ValueError:
        return str(value)


@dataclass
class EntityRights:
    """Permissions on one kind of entity."""

    view: bool = False
    edit: bool = False
    add: bool = False
    delete: bool = False
    export: bool = False

    def to_dict(self) -> dict[str, Any]:
        flags = {
            "view": self.view,
            "edit": self.edit,
            "add": self.add,
            "delete": self.delete,
            "export": self.export,
        }
        return {key: True for key, value in flags.items() if value}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> EntityRights:
        data = data or {}
        return cls(
            view=bool(data.get("view", False)),
            edit=bool(data.get("edit", False)),
            add=bool(data.get("add", False)),
            delete=bool(data.get("delete", False)),
            export=bool(data.get("export", False)),
        )


@dataclass
class SettingsRights:
    """Permissions on account settings."""

    view: bool = False
    edit: bool = False

    def to_dict(self) -> dict[str, Any]:
        flags = {"view": self.view, "edit": self.edit}
        return {key: True for key, value in flags.items() if value}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> SettingsRights:
        data = data or {}
        return cls(view=bool(data.get("view", False)), edit=bool(data.get("edit", False)))


_ENTITY_FIELDS = (
    ("leads", "leads"),
    ("contacts", "contacts"),
    ("companies", "companies"),
    ("tasks", "tasks"),
    ("customers", "customers"),
    ("catalogs", "catalogs"),
    ("unsorted", "unsorted"),
    ("widgets", "widgets"),
    ("mail", "mail"),
    ("chat_widget", "chat_widget"),
)


@dataclass
class Rights:
    """Permissions on every kind of entity plus settings."""

    leads: EntityRights = field(default_factory=EntityRights)
    contacts: EntityRights = field(default_factory=EntityRights)
    companies: EntityRights = field(default_factory=EntityRights)
    tasks: EntityRights = field(default_factory=EntityRights)
    customers: EntityRights = field(default_factory=EntityRights)
    catalogs: EntityRights = field(default_factory=EntityRights)
    unsorted: EntityRights = field(default_factory=EntityRights)
    widgets: EntityRights = field(default_factory=EntityRights)
    mail: EntityRights = field(default_factory=EntityRights)
    chat_widget: EntityRights = field(default_factory=EntityRights)
    settings: SettingsRights = field(default_factory=SettingsRights)

    def to_dict(self) -> dict[str, Any]:
        result = {key: getattr(self, attr).to_dict() for attr, key in _ENTITY_FIELDS}
        result["settings"] = self.settings.to_dict()
        return result

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> Rights:
        data = data or {}
        entities = {attr: EntityRights.from_dict(data.get(key)) for attr, key in _ENTITY_FIELDS}
        return cls(settings=SettingsRights.from_dict(data.get("settings")), **entities)


@dataclass
class UserGroup:
    """A group of users."""

    id: int = 0
    name: str = ""
    user_ids: list[int] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if self.id:
            result["id"] = self.id
        if self.name:
            result["name"] = self.name
        if self.user_ids:
            result["user_ids"] = list(self.user_ids)
        return result

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> UserGroup:
        data = data or {}
        return cls(
            id=data.get("id", 0) or 0,
            name=data.get("name", "") or "",
            user_ids=list(data.get("user_ids") or []),
        )


_USER_GROUPS_KEY = "_embedded.user_groups"
_INT_FIELDS = ("created_by", "updated_by", "created_at", "updated_at", "account_id")


@dataclass
class AccessRight:
    """An access right with its permissions and members."""

    id: int = 0
    name: str = ""
    type: AccessRightsType | str = ""
    rights: Rights = field(default_factory=Rights)
    created_by: int = 0
    updated_by: int = 0
    created_at: int = 0
    updated_at: int = 0
    account_id: int = 0
    user_ids: list[int] = field(default_factory=list)
    user_groups: list[UserGroup] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if self.id:
            result["id"] = self.id
        if self.name:
            result["name"] = self.name
        if self.type:
            result["type"] = str(getattr(self.type, "value", self.type))
        result["rights"] = self.rights.to_dict()
        for name in _INT_FIELDS:
            value = getattr(self, name)
            if value:
                result[name] = value
        if self.user_ids:
            result["user_ids"] = list(self.user_ids)
        if self.user_groups:
            result[_USER_GROUPS_KEY] = [group.to_dict() for group in self.user_groups]
        return result

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> AccessRight:
        data = data or {}
        return cls(
            id=data.get("id", 0) or 0,
            name=data.get("name", "") or "",
            type=_access_type(data.get("type")),
            rights=Rights.from_dict(data.get("rights")),
            user_ids=list(data.get("user_ids") or []),
            user_groups=[UserGroup.from_dict(g) for g in data.get(_USER_GROUPS_KEY) or []],
            **{name: data.get(name, 0) or 0 for name in _INT_FIELDS},
        )


def with_filter(filter: Mapping[str, str]) -> WithOption:
    """Option that adds every key of ``filter`` to the query parameters."""
    items = dict(filter)

    def apply(params: dict[str, str]) -> None:
        params.update(items)

    return apply


def with_type(access_type: AccessRightsType | str) -> WithOption:
    """Option that filters access rights by type."""
    value = str(getattr(access_type, "value", access_type))

    def apply(params: dict[str, str]) -> None:
        params["filter[type]"] = value

    return apply