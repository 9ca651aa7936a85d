import pytest

from amocrm_sdk.entities.access_right_types import (
    AccessEntityType,
    AccessRight,
    AccessRightsType,
    EntityRights,
    Rights,
    SettingsRights,
    UserGroup,
    with_filter,
    with_type,
)


def test_with_filter():
    filter_values = {"filter[name]": "Тестовая группа", "filter[type]": "group"}
    params: dict[str, str] = {}
    with_filter(filter_values)(params)
    assert params["filter[name]"] == "Тестовая группа"
    assert params["filter[type]"] == "group"


def test_with_filter_keeps_existing_params():
    params = {"page": "1"}
    with_filter({"filter[id]": "5"})(params)
    assert params == {"page": "1", "filter[id]": "5"}


@pytest.mark.parametrize(
    "access_type, expected",
    [(AccessRightsType.GROUP, "group"), (AccessRightsType.CUSTOM, "custom")],
)
def test_with_type(access_type, expected):
    params: dict[str, str] = {}
    with_type(access_type)(params)
    assert params["filter[type]"] == expected


def test_entity_values_match_rights_keys():
    entity_keys = set(Rights().to_dict()) - {"settings"}
    assert entity_keys == {entity.value for entity in AccessEntityType}
    assert "mail" in entity_keys
    assert "chat_widget" in entity_keys


def test_entity_rights_omits_false_flags():
    assert EntityRights(view=True, add=True).to_dict() == {"view": True, "add": True}
    assert EntityRights().to_dict() == {}


def test_entity_rights_from_partial_dict():
    rights = EntityRights.from_dict({"view": True, "edit": True})
    assert rights == EntityRights(view=True, edit=True)


def test_settings_rights_round_trip():
    settings = SettingsRights(view=True)
    assert SettingsRights.from_dict(settings.to_dict()) == settings


def test_rights_always_lists_every_entity():
    data = Rights(leads=EntityRights(view=True)).to_dict()
    assert data["leads"] == {"view": True}
    assert data["contacts"] == {}
    assert data["settings"] == {}
    assert set(data) == {
        "leads", "contacts", "companies", "tasks", "customers", "catalogs",
        "unsorted", "widgets", "mail", "chat_widget", "settings",
    }


def test_access_right_from_dict():
    payload = {
        "id": 456,
        "name": "Администраторы",
        "type": "group",
        "rights": {
            "leads": {"view": True, "edit": True, "add": True, "delete": True, "export": True},
            "settings": {"view": True, "edit": True},
        },
        "created_by": 789,
        "created_at": 1609459200,
        "account_id": 12345,
        "user_ids": [201, 202],
    }
    right = AccessRight.from_dict(payload)
    assert right.id == 456
    assert right.name == "Администраторы"
    assert right.type == AccessRightsType.GROUP
    assert right.rights.leads.delete is True
    assert right.rights.settings.view is True
    assert right.rights.contacts == EntityRights()
    assert right.created_by == 789
    assert right.updated_by == 0
    assert right.user_ids == [201, 202]


def test_access_right_unknown_type_kept_as_text():
    assert AccessRight.from_dict({"type": "special"}).type == "special"


def test_access_right_to_dict_omits_empty_fields():
    data = AccessRight(name="Менеджеры продаж", type=AccessRightsType.GROUP).to_dict()
    assert data["name"] == "Менеджеры продаж"
    assert data["type"] == "group"
    assert "id" not in data
    assert "user_ids" not in data
    assert "rights" in data


def test_access_right_round_trip():
    right = AccessRight(
        id=123,
        name="Тестовое право",
        type=AccessRightsType.CUSTOM,
        rights=Rights(leads=EntityRights(view=True, edit=True)),
        user_ids=[101, 102],
        user_groups=[UserGroup(id=1, name="Отдел", user_ids=[101])],
    )
    assert AccessRight.from_dict(right.to_dict()) == right


def test_user_groups_key():
    data = AccessRight(user_groups=[UserGroup(id=7)]).to_dict()
    assert data["_embedded.user_groups"] == [{"id": 7}]