# === Pending step-1 state: keyed by session id, consumed once by step 2 ===
import logging
import threading
import time
from typing import Callable, Optional
from uuid import UUID

import redis

from srp_auth.core.provider import PendingAuthStore
from srp_auth.schemas.srp import PendingAuthentication

logger = logging.getLogger(__name__)

SessionId = UUID | str


class InMemoryPendingStore:
    """
    Thread-safe dict of pending authentications with TTL-based eviction.
    Expired entries are never returned by pop(); sweep() drops them for good.
    """

    def __init__(self, ttl_seconds: float = 300, clock: Callable[[], float] = time.monotonic):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._lock = threading.Lock()
        self._entries: dict[str, tuple[float, PendingAuthentication]] = {}
        self._sweeper: Optional[threading.Thread] = None
        self._stop = threading.Event()

    def _expired(self, stored_at: float, now: float) -> bool:
        return self.ttl_seconds is not None and now - stored_at >= self.ttl_seconds

    def put(self, session_id: SessionId, entry: PendingAuthentication) -> None:
        with self._lock:
            self._entries[str(session_id)] = (self._clock(), entry)

    def pop(self, session_id: SessionId) -> Optional[PendingAuthentication]:
        with self._lock:
            item = self._entries.pop(str(session_id), None)
        if item is None:
            return None

        stored_at, entry = item
        if self._expired(stored_at, self._clock()):
            logger.info(">Pending authentication %s expired before step 2.", session_id)
            return None
        return entry

    def sweep(self) -> int:
        now = self._clock()
        with self._lock:
            expired = [key for key, (stored_at, _) in self._entries.items() if self._expired(stored_at, now)]
            for key in expired:
                del self._entries[key]
        if expired:
            logger.info(">Evicted %d abandoned pending authentication(s).", len(expired))
        return len(expired)

    def start_sweeper(self, interval_seconds: float = 60) -> None:
        if self._sweeper is not None and self._sweeper.is_alive():
            return
        self._stop.clear()

        def run():
            while not self._stop.wait(interval_seconds):
                self.sweep()

        # background thread, same as the other long-running consumers
        self._sweeper = threading.Thread(target=run, name="srp-pending-sweeper", daemon=True)
        self._sweeper.start()

    def stop_sweeper(self) -> None:
        self._stop.set()
        if self._sweeper is not None:
            self._sweeper.join()
            self._sweeper = None

    def __contains__(self, session_id: SessionId) -> bool:
        with self._lock:
            return str(session_id) in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


class RedisPendingStore:
    """
    Redis-backed store: SETEX on put (Redis evicts abandoned attempts),
    GETDEL on pop so only one step-2 request can consume an entry.
    """

    def __init__(self, client: redis.Redis, ttl_seconds: int = 300, prefix: str = "srp:pending:"):
        self.client = client
        self.ttl_seconds = int(ttl_seconds)
        self.prefix = prefix

    def _key(self, session_id: SessionId) -> str:
        return f"{self.prefix}{session_id}"

    def put(self, session_id: SessionId, entry: PendingAuthentication) -> None:
        self.client.setex(self._key(session_id), self.ttl_seconds, entry.model_dump_json())

    def pop(self, session_id: SessionId) -> Optional[PendingAuthentication]:
        cached = self.client.getdel(self._key(session_id))
        if cached is None:
            return None
        return PendingAuthentication.model_validate_json(cached)

    def __len__(self) -> int:
        return sum(1 for _ in self.client.scan_iter(match=f"{self.prefix}*"))


def create_pending_store(settings) -> PendingAuthStore:
    if settings.redis_url:
        from srp_auth.infrastructure.cache import get_pending_redis

        logger.info(">Using Redis pending authentication store.")
        return RedisPendingStore(get_pending_redis(), ttl_seconds=settings.pending_ttl_seconds)

    logger.info(">Using in-memory pending authentication store.")
    store = InMemoryPendingStore(ttl_seconds=settings.pending_ttl_seconds)
    store.start_sweeper(settings.sweep_interval_seconds)
    return store
