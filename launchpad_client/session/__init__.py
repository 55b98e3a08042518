"""Session persistence - token store and storage backends."""

from launchpad_client.session.models import Session, SessionUser
from launchpad_client.session.storage import DuckDBStorage, KeyValueStorage, MemoryStorage
from launchpad_client.session.store import TokenStore

__all__ = [
    "Session",
    "SessionUser",
    "KeyValueStorage",
    "MemoryStorage",
    "DuckDBStorage",
    "TokenStore",
]
