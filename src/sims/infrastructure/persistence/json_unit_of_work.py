"""JSON-file-backed implementation of the unit of work.

On entry the data file is locked (against other threads and other
processes) and the whole document is loaded; repositories then work on
that in-memory copy.  ``commit`` writes the copy back in one atomic
replace, and anything not committed is simply dropped when the block
exits.
"""

from __future__ import annotations

import logging
from decimal import InvalidOperation
from pathlib import Path

from sims.application.unit_of_work import AbstractUnitOfWork
from sims.domain.exceptions import DomainException, PersistenceError
from sims.infrastructure.persistence.json_customer_repository import (
    JsonCustomerRepository,
)
from sims.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from sims.infrastructure.persistence.json_sale_repository import JsonSaleRepository
from sims.infrastructure.persistence.json_seller_repository import (
    JsonSellerRepository,
)
from sims.infrastructure.persistence.json_store import JsonDocumentStore

logger = logging.getLogger(__name__)

# What a hand-edited or truncated row raises while being mapped to an entity.
_ROW_ERRORS = (KeyError, TypeError, ValueError, InvalidOperation, DomainException)


class JsonUnitOfWork(AbstractUnitOfWork):

    def __init__(self, file_path: Path, lock_timeout: float = -1) -> None:
        self._store = JsonDocumentStore(file_path, lock_timeout=lock_timeout)
        self._document: dict[str, list[dict]] | None = None

    def __enter__(self) -> JsonUnitOfWork:
        self._store.acquire()
        try:
            self._document = self._store.load()
            self.products = JsonProductRepository(self._document["products"])
            self.customers = JsonCustomerRepository(self._document["customers"])
            self.sellers = JsonSellerRepository(self._document["sellers"])
            self.sales = JsonSaleRepository(self._document["sales"])
            self._check_rows()
        except BaseException:
            self._document = None
            self._store.release()
            raise
        super().__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        try:
            super().__exit__(exc_type, exc_val, exc_tb)
        finally:
            self._document = None
            self._store.release()

    def _check_rows(self) -> None:
        """Map every row once so a damaged file fails here, as a PersistenceError."""
        for table, repo in (
            ("products", self.products),
            ("customers", self.customers),
            ("sellers", self.sellers),
            ("sales", self.sales),
        ):
            try:
                repo.list_all()
            except _ROW_ERRORS as exc:
                raise PersistenceError(
                    f"Malformed row in table '{table}' of {self._store.file_path}: {exc!r}"
                ) from exc

    def _commit(self) -> None:
        self._store.write(self._document)
        logger.debug("Committed to %s", self._store.file_path)

    def rollback(self) -> None:
        logger.debug("Rolled back pending changes to %s", self._store.file_path)
