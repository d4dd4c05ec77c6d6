"""In-memory dashboard registry keyed by client session id, with TTL and size bound."""

from __future__ import annotations

import time
from collections import OrderedDict
from threading import Lock
from typing import Callable, Generic, Optional, Tuple, TypeVar

from .config import get_config


T = TypeVar("T")


class MemoryDashboardStore(Generic[T]):
    def __init__(
        self,
        factory: Callable[[str], T],
        ttl_seconds: int,
        max_items: int,
    ) -> None:
        self._factory = factory
        self._ttl_seconds = max(1, int(ttl_seconds))
        self._max_items = max(1, int(max_items))
        self._items: "OrderedDict[str, Tuple[T, float]]" = OrderedDict()
        self._lock = Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def _purge_expired(self, now: float) -> None:
        expired = [key for key, (_, expires_at) in self._items.items() if expires_at <= now]
        for key in expired:
            self._items.pop(key, None)

    def get(self, client_id: str) -> Optional[T]:
        now = time.monotonic()
        with self._lock:
            item = self._items.get(client_id)
            if not item:
                return None
            value, expires_at = item
            if expires_at <= now:
                self._items.pop(client_id, None)
                return None
            self._items[client_id] = (value, now + self._ttl_seconds)
            self._items.move_to_end(client_id)
            return value

    def get_or_create(self, client_id: str) -> T:
        existing = self.get(client_id)
        if existing is not None:
            return existing
        value = self._factory(client_id)
        now = time.monotonic()
        with self._lock:
            self._purge_expired(now)
            current = self._items.get(client_id)
            if current is not None:
                return current[0]
            self._items[client_id] = (value, now + self._ttl_seconds)
            while len(self._items) > self._max_items:
                self._items.popitem(last=False)
        return value

    def delete(self, client_id: str) -> None:
        with self._lock:
            self._items.pop(client_id, None)


def build_dashboard_store(factory: Callable[[str], T]) -> MemoryDashboardStore[T]:
    cfg = get_config()
    return MemoryDashboardStore(
        factory,
        ttl_seconds=cfg.session_ttl_seconds,
        max_items=cfg.session_max_items,
    )
