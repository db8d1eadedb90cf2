"""Customer entity: referenced by sales, never mutated by them."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class Customer:

    id: int
    name: str
    tax_id: str | None = None  # CPF/CNPJ, unique when present
    phone: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
