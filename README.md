# amocrm-sdk

A small Python client for the amoCRM REST API (v4). It covers:

- OAuth2 authorisation (`amocrm_sdk.auth`): building the authorisation URL,
  exchanging a code for tokens, refreshing tokens and obtaining long-lived
  tokens;
- an authorised HTTP client (`amocrm_sdk.client.Client`) that adds the
  bearer token to every request;
- access rights (`amocrm_sdk.entities.access_rights`): listing, reading,
  creating, updating and deleting, setting the permissions for one entity
  type, adding and removing users. The data types and query options live in
  `amocrm_sdk.entities.access_right_types`.

Any response with a status code other than the expected one raises
`amocrm_sdk.client.ApiError`, which carries the `status_code`. Updating an
access right without an ID raises `ValueError`.

## Installation

```
pip install amocrm-sdk
```

## Authorisation

```python
from amocrm_sdk.auth import get_auth_url, get_access_token, refresh_access_token

url = get_auth_url(
    "https://example.amocrm.ru", "client-id",
    "https://example.com/callback", "state", "popup",
)

tokens = get_access_token(
    "https://example.amocrm.ru", "client-id", "secret",
    "code", "https://example.com/callback",
)
tokens = refresh_access_token(
    "https://example.amocrm.ru", "client-id", "secret", tokens.refresh_token,
)
print(tokens.access_token, tokens.expires_in)
```

`get_long_lived_token(base_url, client_id, client_secret)` requests a token
with the `client_credentials` grant. All token functions return an
`AuthResponse` with `token_type`, `expires_in`, `access_token` and
`refresh_token`.

## Access rights

```python
from amocrm_sdk.client import Client
from amocrm_sdk.entities.access_rights import (
    get_access_rights,
    create_access_right,
    set_entity_rights,
    add_users_to_access_right,
    remove_users_from_access_right,
    delete_access_right,
)
from amocrm_sdk.entities.access_right_types import (
    AccessEntityType,
    AccessRight,
    AccessRightsType,
    EntityRights,
    Rights,
    with_filter,
    with_type,
)

client = Client("https://example.amocrm.ru", "token")

groups = get_access_rights(client, 1, 50, with_type(AccessRightsType.GROUP))
named = get_access_rights(client, 1, 50, with_filter({"filter[name]": "Sales"}))

created = create_access_right(client, AccessRight(
    name="Sales",
    type=AccessRightsType.GROUP,
    rights=Rights(leads=EntityRights(view=True, edit=True, add=True)),
    user_ids=[101, 102],
))

set_entity_rights(client, created.id, AccessEntityType.CONTACT, EntityRights(view=True))
add_users_to_access_right(client, created.id, [103])
remove_users_from_access_right(client, created.id, [101])
delete_access_right(client, created.id)
```

The access-right functions accept any object with a
`do_request(request)` method (the `Requester` protocol). When that object is
a `Client`, its `base_url` is put in front of the request path; otherwise the
path is sent as it is, which makes it easy to plug in a test double.

## What this package does not do

Only authorisation and access rights have helper functions. Other amoCRM
resources have no typed models or helpers here; they can still be reached by
building a `requests.Request` yourself and sending it with
`Client.do_request`. There is no command-line tool, no token storage and no
automatic token refresh.

## Running the tests

```
pip install -e .[test]
pytest
```