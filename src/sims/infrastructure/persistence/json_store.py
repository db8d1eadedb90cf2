"""JSON document file holding every table of the store.

All tables live in one file so a commit is a single atomic file
replacement: readers see either the old document or the new one.
"""

from __future__ import annotations

import json
import os
import tempfile
import threading
from pathlib import Path

from filelock import FileLock, Timeout

from sims.domain.exceptions import PersistenceError

TABLES = ("products", "customers", "sellers", "sales")

_locks: dict[Path, threading.RLock] = {}
_locks_guard = threading.Lock()


def _lock_for(path: Path) -> threading.RLock:
    with _locks_guard:
        return _locks.setdefault(path, threading.RLock())


class JsonDocumentStore:

    def __init__(self, file_path: Path, lock_timeout: float = -1) -> None:
        self._file_path = Path(file_path).resolve()
        # Threads of this process queue on the RLock; other processes on the
        # sibling ".lock" file.
        self.lock = _lock_for(self._file_path)
        self._file_lock = FileLock(
            str(self._file_path) + ".lock", timeout=lock_timeout, thread_local=False
        )

    @property
    def file_path(self) -> Path:
        return self._file_path

    def acquire(self) -> None:
        """Take exclusive access to the data file, across threads and processes."""
        self.lock.acquire()
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_lock.acquire()
        except Timeout as exc:
            self.lock.release()
            raise PersistenceError(f"Data file {self._file_path} is locked by another process") from exc
        except OSError as exc:
            self.lock.release()
            raise PersistenceError(f"Cannot lock data file {self._file_path}: {exc}") from exc
        except BaseException:
            self.lock.release()
            raise

    def release(self) -> None:
        try:
            self._file_lock.release()
        finally:
            self.lock.release()

    def load(self) -> dict[str, list[dict]]:
        if not self._file_path.exists():
            return {table: [] for table in TABLES}
        try:
            document = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise PersistenceError(f"Cannot read data file {self._file_path}: {exc}") from exc
        if not isinstance(document, dict):
            raise PersistenceError(f"Data file {self._file_path} is not a JSON object")
        for table in TABLES:
            rows = document.setdefault(table, [])
            if not isinstance(rows, list) or not all(isinstance(r, dict) for r in rows):
                raise PersistenceError(f"Table '{table}' in {self._file_path} is not a list of objects")
        return document

    def write(self, document: dict[str, list[dict]]) -> None:
        """Write to a temporary sibling, then atomically replace the file."""
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self._file_path.parent, prefix=self._file_path.name, suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    json.dump(document, fh, indent=2)
                    fh.write("\n")
                os.replace(tmp_name, self._file_path)
            except BaseException:
                os.unlink(tmp_name)
                raise
        except OSError as exc:
            raise PersistenceError(f"Cannot write data file {self._file_path}: {exc}") from exc
