"""Seller entity: the user a sale is attributed to."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class Seller:

    id: int
    username: str
    full_name: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
