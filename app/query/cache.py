"""Query cache - keyed results, in-flight de-duplication, prefix invalidation."""

import asyncio
import time
from collections.abc import Awaitable, Callable, Hashable, Iterable, Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from loguru import logger
from pydantic import BaseModel

QueryKey = tuple[Hashable, ...]


def _freeze(value: Any) -> Hashable:
    """Turn filter objects into hashable, order-independent values."""
    if isinstance(value, BaseModel):
        value = value.model_dump(mode="json", exclude_none=True)
    if isinstance(value, Mapping):
        items = tuple(sorted((str(k), _freeze(v)) for k, v in value.items() if v is not None))
        return items or None
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(v) for v in value)
    if isinstance(value, (set, frozenset)):
        return tuple(sorted(_freeze(v) for v in value))
    return value


def make_key(*parts: Any) -> QueryKey:
    """Build a query key. Structurally equal parts give equal keys.

    Mappings and pydantic models become sorted ``(name, value)`` tuples with
    ``None`` members dropped; an empty filter object is the same as no filter.
    """
    return tuple(_freeze(p) for p in parts)


def key_startswith(key: QueryKey, prefix: QueryKey) -> bool:
    return key[: len(prefix)] == prefix


class QueryStatus(StrEnum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


@dataclass
class QueryResult:
    """Outcome of a read. Errors are captured, not raised."""

    status: QueryStatus
    data: Any = None
    error: Exception | None = None

    @property
    def is_idle(self) -> bool:
        return self.status == QueryStatus.IDLE

    @property
    def is_loading(self) -> bool:
        return self.status == QueryStatus.LOADING

    @property
    def is_success(self) -> bool:
        return self.status == QueryStatus.SUCCESS

    @property
    def is_error(self) -> bool:
        return self.status == QueryStatus.ERROR


@dataclass
class MutationResult:
    """Outcome of a write. Errors are captured, not raised."""

    data: Any = None
    error: Exception | None = None

    @property
    def is_success(self) -> bool:
        return self.error is None

    @property
    def is_error(self) -> bool:
        return self.error is not None


@dataclass
class _Entry:
    data: Any = None
    error: Exception | None = None
    updated_at: float | None = None
    invalidated: bool = False
    generation: int = 0
    task: asyncio.Task | None = field(default=None, repr=False)


class QueryClient:
    """Cache of query results keyed by ``QueryKey``.

    Concurrent ``fetch`` calls for one key share a single in-flight task.
    ``invalidate`` marks every entry under a key prefix stale so the next
    read refetches. Single event loop only; no locking.
    """

    def __init__(self, stale_time: float = 0.0, clock: Callable[[], float] = time.monotonic):
        self._stale_time = stale_time
        self._clock = clock
        self._entries: dict[QueryKey, _Entry] = {}
        logger.debug("QueryClient: stale_time={}s", stale_time)

    def __len__(self) -> int:
        return len(self._entries)

    def _is_fresh(self, entry: _Entry, stale_time: float) -> bool:
        if entry.updated_at is None or entry.invalidated or entry.error is not None:
            return False
        return self._clock() - entry.updated_at < stale_time

    async def fetch(
        self,
        key: Iterable[Any],
        fn: Callable[[], Awaitable[Any]],
        *,
        enabled: bool = True,
        stale_time: float | None = None,
    ) -> QueryResult:
        """Return fresh cached data, join an in-flight fetch, or start one."""
        if not enabled:
            return QueryResult(QueryStatus.IDLE)

        key = make_key(*key)
        stale_time = self._stale_time if stale_time is None else stale_time
        entry = self._entries.get(key)

        if entry is not None and entry.task is None and self._is_fresh(entry, stale_time):
            logger.debug("Cache hit: {}", key)
            return QueryResult(QueryStatus.SUCCESS, data=entry.data)

        if entry is None:
            entry = self._entries[key] = _Entry()

        if entry.task is None:
            logger.debug("Cache miss: {}", key)
            entry.task = asyncio.ensure_future(self._run(key, entry, fn, entry.generation))
        else:
            logger.debug("Joining in-flight fetch: {}", key)

        try:
            data = await asyncio.shield(entry.task)
        except Exception as e:
            return QueryResult(QueryStatus.ERROR, data=entry.data, error=e)
        return QueryResult(QueryStatus.SUCCESS, data=data)

    async def _run(self, key: QueryKey, entry: _Entry, fn: Callable[[], Awaitable[Any]], generation: int) -> Any:
        try:
            data = await fn()
        except Exception as e:
            entry.error = e
            logger.debug("Query failed: {} ({})", key, e)
            raise
        finally:
            entry.task = None

        entry.data = data
        entry.error = None
        entry.updated_at = self._clock()
        # Invalidated while in flight: deliver, but keep it stale
        if entry.generation == generation:
            entry.invalidated = False
        return data

    def invalidate(self, prefix: Iterable[Any]) -> int:
        """Mark every entry whose key starts with ``prefix`` stale."""
        prefix = make_key(*prefix)
        count = 0
        for key, entry in self._entries.items():
            if key_startswith(key, prefix):
                entry.invalidated = True
                entry.generation += 1
                count += 1
        logger.debug("Invalidated {} queries under {}", count, prefix)
        return count

    async def mutate(
        self,
        fn: Callable[..., Awaitable[Any]],
        *args: Any,
        invalidates: Iterable[Iterable[Any]] = (),
        **kwargs: Any,
    ) -> MutationResult:
        """Run a write; on success invalidate each prefix in ``invalidates``."""
        try:
            data = await fn(*args, **kwargs)
        except Exception as e:
            logger.warning("Mutation {} failed: {}", getattr(fn, "__name__", fn), e)
            return MutationResult(error=e)

        for prefix in invalidates:
            self.invalidate(prefix)
        return MutationResult(data=data)

    def get_query_data(self, key: Iterable[Any]) -> Any:
        entry = self._entries.get(make_key(*key))
        return entry.data if entry else None

    def set_query_data(self, key: Iterable[Any], data: Any) -> None:
        key = make_key(*key)
        entry = self._entries.setdefault(key, _Entry())
        entry.data = data
        entry.error = None
        entry.updated_at = self._clock()
        entry.invalidated = False

    def is_fetching(self, key: Iterable[Any]) -> bool:
        entry = self._entries.get(make_key(*key))
        return entry is not None and entry.task is not None

    def get_query_state(self, key: Iterable[Any]) -> QueryResult:
        """Current state of a key without fetching.

        LOADING while a fetch is in flight (with any previous data), then
        ERROR or SUCCESS from the last settled fetch. IDLE if never fetched.
        """
        entry = self._entries.get(make_key(*key))
        if entry is None:
            return QueryResult(QueryStatus.IDLE)
        if entry.task is not None:
            return QueryResult(QueryStatus.LOADING, data=entry.data)
        if entry.error is not None:
            return QueryResult(QueryStatus.ERROR, data=entry.data, error=entry.error)
        if entry.updated_at is not None:
            return QueryResult(QueryStatus.SUCCESS, data=entry.data)
        return QueryResult(QueryStatus.IDLE)

    def is_stale(self, key: Iterable[Any]) -> bool:
        """True if the key has no entry or its entry would be refetched."""
        entry = self._entries.get(make_key(*key))
        return entry is None or not self._is_fresh(entry, self._stale_time)

    def clear(self) -> None:
        """Drop every entry."""
        self._entries.clear()
        logger.debug("Query cache cleared")
