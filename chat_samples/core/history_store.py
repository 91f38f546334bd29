# Role: In-memory message history per chat space. Owns the lifecycle of each space's history:
# append messages, enforce bounded history, and cleanup spaces that went quiet.

from __future__ import annotations

import threading
from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional

from chat_samples.models.message import HistoryMessage


class HistoryStore:
    def __init__(self, max_messages: int = 50, ttl_minutes: int = 1440) -> None:
        self._spaces: Dict[str, List[HistoryMessage]] = {}
        self._updated_at: Dict[str, datetime] = {}
        self._max_messages = max_messages
        self._ttl = timedelta(minutes=ttl_minutes)
        # Sync route handlers run in a thread pool.
        self._lock = threading.Lock()

    def add_message(self, space: str, text: str, sender: Optional[str] = None) -> None:
        # 1) Append message
        # 2) Update last-seen timestamp
        # 3) Trim to last N messages (keeps prompts small + bounded memory)
        with self._lock:
            messages = self._spaces.setdefault(space, [])
            messages.append(HistoryMessage(text=text, sender=sender))
            self._updated_at[space] = datetime.now(timezone.utc)

            if len(messages) > self._max_messages:
                self._spaces[space] = messages[-self._max_messages :]

    def recent(self, space: str, limit: Optional[int] = None) -> List[HistoryMessage]:
        with self._lock:
            messages = list(self._spaces.get(space, []))
        if limit is None:
            return messages
        return messages[-limit:] if limit > 0 else []

    def cleanup_expired(self) -> int:
        # Role: drop inactive spaces to avoid unbounded growth (best for long-running servers).
        now = datetime.now(timezone.utc)
        with self._lock:
            to_delete = [s for s, ts in self._updated_at.items() if (now - ts) > self._ttl]
            for space in to_delete:
                del self._spaces[space]
                del self._updated_at[space]
        return len(to_delete)
