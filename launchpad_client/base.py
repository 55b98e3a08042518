"""Base HTTP client bound to one auth domain."""

from collections.abc import Mapping
from typing import Any

import httpx
from loguru import logger

import settings
from launchpad_client.credentials import SESSION_GENERATION, BearerTokenAuth, SharedPasswordAuth
from launchpad_client.domains import AuthDomain, DomainConfig, get_domain
from launchpad_client.errors import ApiError, ConfigurationError, TransportError, UnauthorizedError
from launchpad_client.navigation import Navigator, RecordingNavigator
from launchpad_client.session import TokenStore

# Default settings
API_BASE_URL = settings.API_BASE_URL
API_TIMEOUT = settings.API_TIMEOUT


def set_api_config(base_url: str, timeout: int) -> None:
    """Set API configuration."""
    global API_BASE_URL, API_TIMEOUT
    API_BASE_URL = base_url
    API_TIMEOUT = timeout


def _drop_none(params: Mapping[str, Any] | None) -> dict[str, Any] | None:
    """Drop unset query params, the way axios skips undefined values."""
    if not params:
        return None
    return {k: v for k, v in params.items() if v is not None} or None


def _error_from(resp: httpx.Response) -> ApiError:
    """Build an ApiError carrying the backend body untouched."""
    try:
        payload = resp.json()
    except ValueError:
        payload = resp.text or None

    message = resp.reason_phrase or "API error"
    if isinstance(payload, dict):
        message = payload.get("detail") or payload.get("message") or payload.get("error") or message
        if not isinstance(message, str):
            message = resp.reason_phrase or "API error"

    if resp.status_code == 401:
        return UnauthorizedError(message, payload)
    return ApiError(resp.status_code, message, payload)


class BaseClient:
    """Async HTTP client for one auth domain.

    Subclasses set ``domain`` and add endpoint methods. Per-user domains
    need a ``TokenStore``; a 401 clears that store and redirects to the
    domain's login route before the error reaches the caller.
    """

    domain: AuthDomain = AuthDomain.ADMIN

    def __init__(
        self,
        store: TokenStore | None = None,
        navigator: Navigator | None = None,
        *,
        auth: httpx.Auth | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._config: DomainConfig = get_domain(self.domain)
        if store is not None and store.domain != self._config.domain:
            raise ConfigurationError(f"{self.__class__.__name__} needs a {self._config.domain} store, got {store.domain}")
        if self._config.has_sessions and store is None and auth is None:
            raise ConfigurationError(f"{self.__class__.__name__} needs a TokenStore for domain {self._config.domain}")

        self._store = store
        self._navigator = navigator or RecordingNavigator()
        self._auth = auth or self._default_auth()
        self._base_url = f"{(base_url or API_BASE_URL).rstrip('/')}/api/v1/{self._config.path_prefix}"
        self._timeout = timeout if timeout is not None else API_TIMEOUT
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        self._request_count = 0

    def _default_auth(self) -> httpx.Auth:
        if self._config.domain == AuthDomain.SALES:
            return SharedPasswordAuth(settings.SALES_SHARED_PASSWORD)
        legacy = self._config.domain == AuthDomain.ADMIN and settings.ADMIN_LEGACY_PASSWORD_PARAM
        return BearerTokenAuth(self._store, legacy_password_param=legacy)

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def store(self) -> TokenStore | None:
        return self._store

    @property
    def request_count(self) -> int:
        return self._request_count

    async def open(self) -> "BaseClient":
        """Create the underlying httpx client. Idempotent."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                headers={"Content-Type": "application/json"},
                timeout=self._timeout,
                auth=self._auth,
                transport=self._transport,
                event_hooks={"response": [self._on_response]},
            )
            logger.info("{}: {}", self.__class__.__name__, self._base_url)
        return self

    async def aclose(self) -> None:
        if self._client:
            logger.info("{}: total API requests: {}", self.__class__.__name__, self._request_count)
            await self._client.aclose()
            self._client = None

    async def __aenter__(self):
        return await self.open()

    async def __aexit__(self, *_):
        await self.aclose()

    async def _on_response(self, response: httpx.Response) -> None:
        """Clear the session and redirect on 401, once per stored session."""
        if response.status_code != 401 or self._store is None:
            return

        sent_generation = response.request.extensions.get(SESSION_GENERATION)
        if sent_generation is not None and sent_generation != self._store.generation:
            # Session already replaced or cleared by another request
            logger.debug("{}: stale 401 ignored", self._config.domain)
            return

        logger.info("{}: 401 from {}, clearing session", self._config.domain, response.request.url.path)
        self._store.clear()
        self._navigator.redirect(self._config.login_route)

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        json: Any = None,
    ) -> Any:
        """Issue a request and return the decoded JSON body."""
        if self._client is None:
            raise RuntimeError(f"{self.__class__.__name__} is not open; use 'async with' or await open()")

        self._request_count += 1
        try:
            resp = await self._client.request(method, path, params=_drop_none(params), json=json)
        except httpx.TransportError as e:
            logger.warning("{} {} failed: {}", method, path, e)
            raise TransportError(str(e) or e.__class__.__name__) from e

        if resp.is_error:
            raise _error_from(resp)
        if resp.status_code == 204 or not resp.content:
            return None
        return resp.json()

    async def _get(self, path: str, params: Mapping[str, Any] | None = None) -> Any:
        return await self._request("GET", path, params=params)

    async def _post(self, path: str, json: Any = None, params: Mapping[str, Any] | None = None) -> Any:
        return await self._request("POST", path, json=json, params=params)

    async def _put(self, path: str, json: Any = None) -> Any:
        return await self._request("PUT", path, json=json)

    async def _patch(self, path: str, json: Any = None) -> Any:
        return await self._request("PATCH", path, json=json)

    async def _delete(self, path: str) -> Any:
        return await self._request("DELETE", path)


async def safe_request(coro, default=None):
    """Execute coroutine, return default on API or transport failure."""
    try:
        return await coro
    except (ApiError, TransportError) as e:
        logger.warning("Request failed: {}", e)
        return default
