"""Token store - per-domain session persistence."""

import json

from loguru import logger
from pydantic import ValidationError

from launchpad_client.domains import AuthDomain, DomainConfig, get_domain
from launchpad_client.session.models import Session, SessionUser
from launchpad_client.session.storage import KeyValueStorage


class TokenStore:
    """Reads and writes one auth domain's token and user record.

    Keys are namespaced per domain, so stores for different domains sharing
    one storage never see each other's sessions. ``generation`` increases on
    every ``set`` and ``clear``; clients use it to tell whether a 401 belongs
    to the session that is still stored.
    """

    def __init__(self, storage: KeyValueStorage, domain: AuthDomain | str):
        config = get_domain(domain)
        if not config.has_sessions:
            raise ValueError(f"Domain {config.domain} has no per-user sessions")
        self._storage = storage
        self._config: DomainConfig = config
        self._generation = 0

    @property
    def domain(self) -> AuthDomain:
        return self._config.domain

    @property
    def login_route(self) -> str:
        return self._config.login_route

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def token(self) -> str | None:
        return self._storage.get_item(self._config.token_key) or None

    @property
    def user(self) -> SessionUser | None:
        """Stored user record, or None if missing or unparseable."""
        raw = self._storage.get_item(self._config.user_key)
        if not raw:
            return None
        try:
            return SessionUser.model_validate(json.loads(raw))
        except (json.JSONDecodeError, ValidationError, TypeError) as e:
            logger.debug("{}: ignoring unreadable user record ({})", self.domain, e)
            return None

    def get(self) -> Session | None:
        token = self.token
        user = self.user
        if token is None or user is None:
            return None
        return Session(token=token, user=user)

    def set(self, session: Session) -> None:
        self._storage.set_item(self._config.token_key, session.token)
        self._storage.set_item(self._config.user_key, session.user.model_dump_json(exclude_none=True))
        self._generation += 1
        logger.debug("{}: session stored for user {}", self.domain, session.user.id)

    def clear(self) -> None:
        self._storage.remove_item(self._config.token_key)
        self._storage.remove_item(self._config.user_key)
        self._generation += 1
        logger.debug("{}: session cleared", self.domain)

    def is_authenticated(self) -> bool:
        return self.get() is not None
