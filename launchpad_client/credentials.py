"""Credential strategies attached to outgoing requests."""

from collections.abc import Generator

import httpx
from loguru import logger

from launchpad_client.session import TokenStore

# Request extension carrying the store generation seen when the request left
SESSION_GENERATION = "launchpad.session_generation"


class BearerTokenAuth(httpx.Auth):
    """Attach the domain's stored token as a bearer credential, if any."""

    def __init__(self, store: TokenStore, legacy_password_param: bool = False):
        self._store = store
        self._legacy_password_param = legacy_password_param

    @property
    def store(self) -> TokenStore:
        return self._store

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        request.extensions[SESSION_GENERATION] = self._store.generation
        token = self._store.token
        if token:
            request.headers["Authorization"] = f"Bearer {token}"
            if self._legacy_password_param:
                request.url = request.url.copy_merge_params({"password": token})
        yield request


class SharedPasswordAuth(httpx.Auth):
    """Attach one shared password as a `password` query param.

    Used by the sales endpoints until per-user sales auth exists. Anyone
    holding the value has full sales access.
    """

    def __init__(self, password: str | None):
        self._password = password
        if not password:
            logger.warning("Sales shared password not configured; sales requests go out unauthenticated")

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        if self._password:
            request.url = request.url.copy_merge_params({"password": self._password})
        yield request
