"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import logging

from sims.infrastructure.config import get_settings
from sims.infrastructure.persistence.json_unit_of_work import JsonUnitOfWork


def configure_logging() -> None:
    logging.basicConfig(
        level=get_settings().LOG_LEVEL.upper(),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )


def unit_of_work() -> JsonUnitOfWork:
    return JsonUnitOfWork(get_settings().DATA_FILE)
