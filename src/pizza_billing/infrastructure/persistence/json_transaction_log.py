"""JSON-file-backed implementation of TransactionLog."""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from pizza_billing.domain.exceptions import UnreachableError
from pizza_billing.domain.model.value_objects import ChargeResult
from pizza_billing.domain.port.transaction_log import TransactionLog

logger = logging.getLogger(__name__)

# One lock per audit file, shared by every instance pointing at it.
_FILE_LOCKS: dict[Path, threading.Lock] = {}
_FILE_LOCKS_GUARD = threading.Lock()


def _lock_for(file_path: Path) -> threading.Lock:
    with _FILE_LOCKS_GUARD:
        return _FILE_LOCKS.setdefault(file_path, threading.Lock())


class JsonTransactionLog(TransactionLog):
    """Appends one audit record per charge attempt to a JSON list on disk.

    Instances may be shared between threads, and several instances may point
    at the same file: the read-modify-write cycle is guarded by a lock per
    resolved path, and the file is replaced atomically so readers never see
    a partial write.
    """

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path.resolve()
        self._lock = _lock_for(self._file_path)
        self._ensure_file()

    # --- TransactionLog interface ---------------------------------------------

    def record_charge(self, result: ChargeResult) -> None:
        self._append(
            {
                "kind": "charge",
                "success": result.success,
                "decline_message": result.decline_message,
            }
        )
        logger.info(
            "Recorded charge (success=%s, decline_message=%r)",
            result.success,
            result.decline_message,
        )

    def record_connection_failure(self, error: UnreachableError) -> None:
        self._append({"kind": "connection_failure", "error": str(error)})
        logger.info("Recorded connection failure: %s", error)

    # --- Query ----------------------------------------------------------------

    def list_records(self) -> list[dict[str, Any]]:
        with self._lock:
            return self._load()

    # --- Serialization helpers ------------------------------------------------

    def _append(self, record: dict[str, Any]) -> None:
        record["recorded_at"] = datetime.now(timezone.utc).isoformat()
        with self._lock:
            records = self._load()
            records.append(record)
            self._persist(records)

    def _load(self) -> list[dict[str, Any]]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist(self, records: list[dict[str, Any]]) -> None:
        fd, tmp_name = tempfile.mkstemp(
            dir=self._file_path.parent, prefix=self._file_path.name, suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                tmp.write(json.dumps(records, indent=2) + "\n")
            os.replace(tmp_name, self._file_path)
        except Exception:
            os.unlink(tmp_name)
            raise

    def _ensure_file(self) -> None:
        with self._lock:
            if not self._file_path.exists():
                self._file_path.parent.mkdir(parents=True, exist_ok=True)
                self._persist([])
