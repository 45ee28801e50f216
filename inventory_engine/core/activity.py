from __future__ import annotations

from collections import deque
from datetime import datetime
from typing import Callable, Deque, List, Optional

from ..config import get_config
from ..data.models import ActivityEntry
from .workflows import utc_now


class ActivityLog:
    """Bounded, newest-first audit trail of inventory operations."""

    def __init__(self, max_items: Optional[int] = None, clock: Callable[[], datetime] = utc_now) -> None:
        self.max_items = max_items if max_items is not None else get_config().max_activity_log_items
        self.clock = clock
        self._entries: Deque[ActivityEntry] = deque(maxlen=self.max_items)

    def record(self, type: str, message: str, details: Optional[str] = None, actor_id: Optional[str] = None) -> ActivityEntry:
        entry = ActivityEntry(type=type, message=message, details=details, actor_id=actor_id, timestamp=self.clock())
        self._entries.appendleft(entry)
        return entry

    def recent(self, limit: Optional[int] = None) -> List[ActivityEntry]:
        entries = list(self._entries)
        return entries if limit is None else entries[:limit]

    def for_actor(self, actor_id: str) -> List[ActivityEntry]:
        return [e for e in self._entries if e.actor_id == actor_id]

    def __len__(self) -> int:
        return len(self._entries)
