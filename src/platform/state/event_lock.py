"""
Per-event mutation lock

Inventory mutations read the current state, check availability, then write.
Two mutations on the same event must not interleave between the check and the
write, so each event id maps to one anyio lock while anyone holds or waits
for it. The entry is dropped once the last user leaves.

This only serialises writers inside one process. Multi-instance deployments
rely on the conditional release at the store for blocks that are already
released.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

import anyio
import attrs

from src.platform.logging.loguru_io import Logger
from src.platform.metrics.inventory_metrics import metrics


@attrs.define
class _EventLockEntry:
    lock: anyio.Lock = attrs.field(factory=anyio.Lock)
    users: int = 0


class EventLockRegistry:
    def __init__(self) -> None:
        self._entries: dict[str, _EventLockEntry] = {}

    def _checkout(self, event_id: str) -> _EventLockEntry:
        entry = self._entries.get(event_id)
        if entry is None:
            entry = _EventLockEntry()
            self._entries[event_id] = entry
        entry.users += 1
        return entry

    def _checkin(self, event_id: str, entry: _EventLockEntry) -> None:
        entry.users -= 1
        if entry.users == 0 and self._entries.get(event_id) is entry:
            del self._entries[event_id]

    @asynccontextmanager
    async def hold(self, *, event_id: str) -> AsyncIterator[None]:
        # Checkout and checkin run without awaiting, so no other task sees a half-updated count
        entry = self._checkout(event_id)
        try:
            if entry.lock.locked():
                Logger.base.debug(f'⏳ [LOCK] Waiting for event lock: {event_id}')
            metrics.event_lock_waiters.inc()
            try:
                await entry.lock.acquire()
            finally:
                metrics.event_lock_waiters.dec()
            try:
                yield
            finally:
                entry.lock.release()
        finally:
            self._checkin(event_id, entry)

    def __len__(self) -> int:
        return len(self._entries)
