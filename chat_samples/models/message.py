# Role: Single remembered chat message for a space's history. Fed (text only) into the
# answer-from-history prompt. Pydantic makes it easy to serialize/debug.

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field


class HistoryMessage(BaseModel):
    text: str
    sender: Optional[str] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
