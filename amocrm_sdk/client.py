"""HTTP client for the amoCRM REST API."""

from __future__ import annotations

from http import HTTPStatus

import requests

DEFAULT_TIMEOUT = 30.0


class ApiError(Exception):
    """Raised when the API answers with a status code that was not expected."""

    def __init__(self, status_code: int, message: str | None = None) -> None:
        self.status_code = status_code
        super().__init__(message or f"unexpected status code: {status_code}")


def expect_status(response: requests.Response, *args: int) -> requests.Response:
    """Return ``response`` if its status is one of ``args`` (200 by default), else raise ApiError."""
    expected = args or (HTTPStatus.OK,)
    if response.status_code not in expected:
        raise ApiError(response.status_code)
    return response


class Client:
    """An authorised connection to one amoCRM account."""

    def __init__(self, base_url: str, api_key: str, timeout: float = DEFAULT_TIMEOUT) -> None:
        self.base_url = base_url
        self.api_key = api_key
        self.timeout = timeout
        self._session = requests.Session()

    def do_request(self, request: requests.Request) -> requests.Response:
        """Send ``request`` with the bearer token attached."""
        request.headers["Authorization"] = f"Bearer {self.api_key}"
        prepared = self._session.prepare_request(request)
        return self._session.send(prepared, timeout=self.timeout)