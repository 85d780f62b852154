import json
import logging
import os
import tempfile
import threading
import time
from pathlib import Path
from typing import Dict, List, Optional, Any

from pydantic import ValidationError as RecordValidationError

from .errors import NotFoundError, StorageError, ValidationError
from .models import FeedbackRecord, FEEDBACK_STATUSES, REQUIRED_FIELDS, utc_timestamp

logger = logging.getLogger(__name__)


class FeedbackStore:
    """
    Flat-file feedback persistence.

    The whole collection lives in one pretty-printed JSON array. Every operation
    loads the full file, and every mutation rewrites it. Mutations hold
    `self._lock` for the entire read-modify-write cycle so concurrent requests
    in this process cannot overwrite each other's changes.
    """

    def __init__(self, path):
        self.path = Path(path)
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Public operations
    # ------------------------------------------------------------------

    def list(self) -> List[FeedbackRecord]:
        """All records in creation order. A missing or unreadable file is an empty store."""
        with self._lock:
            return self._read()

    def get(self, feedback_id: str) -> FeedbackRecord:
        with self._lock:
            records = self._read()
        for record in records:
            if record.id == feedback_id:
                return record
        raise NotFoundError("Feedback not found")

    def create(self, name: str, email: str, message: str, type: str) -> FeedbackRecord:
        fields = {"name": name, "email": email, "message": message, "type": type}
        missing = [key for key in REQUIRED_FIELDS if not isinstance(fields[key], str) or not fields[key]]
        if missing:
            raise ValidationError(f"Missing required fields: {', '.join(missing)}")

        with self._lock:
            records = self._read()
            record = FeedbackRecord(
                id=self._next_id(records),
                status="pending",
                createdAt=utc_timestamp(),
                **fields,
            )
            records.append(record)
            self._write(records)
        logger.info("Created feedback %s (%s)", record.id, record.type)
        return record

    def update_status(self, feedback_id: str, status: str) -> FeedbackRecord:
        with self._lock:
            records = self._read()
            for index, record in enumerate(records):
                if record.id == feedback_id:
                    break
            else:
                raise NotFoundError("Feedback not found")

            # unknown id wins over a bad status: 404 before 400
            if status not in FEEDBACK_STATUSES:
                raise ValidationError(f"Status must be one of: {', '.join(FEEDBACK_STATUSES)}")
            updated = record.with_status(status)
            records[index] = updated
            self._write(records)
        logger.info("Feedback %s status -> %s", feedback_id, status)
        return updated

    def delete(self, feedback_id: str) -> None:
        with self._lock:
            records = self._read()
            remaining = [record for record in records if record.id != feedback_id]
            if len(remaining) == len(records):
                raise NotFoundError("Feedback not found")
            self._write(remaining)
        logger.info("Deleted feedback %s", feedback_id)

    # ------------------------------------------------------------------
    # File access (callers hold the lock)
    # ------------------------------------------------------------------

    def _read(self) -> List[FeedbackRecord]:
        if not self.path.exists():
            return []
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.warning("Could not read %s, treating as empty: %s", self.path, exc)
            return []
        if not isinstance(data, list):
            logger.warning("%s does not hold a JSON array, treating as empty", self.path)
            return []

        records = []
        for item in data:
            try:
                records.append(FeedbackRecord.model_validate(item))
            except RecordValidationError as exc:
                logger.warning("Skipping malformed feedback entry in %s: %s", self.path, exc)
        return records

    def _write(self, records: List[FeedbackRecord]):
        payload: List[Dict[str, Any]] = [record.to_dict() for record in records]
        tmp_name: Optional[str] = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=".feedback-", suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(payload, fh, indent=2)
            os.replace(tmp_name, self.path)
        except OSError as exc:
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StorageError(f"Failed to write {self.path}: {exc}") from exc

    @staticmethod
    def _next_id(records: List[FeedbackRecord]) -> str:
        # Millisecond timestamp, kept strictly above every numeric id already stored.
        candidate = int(time.time() * 1000)
        numeric_ids = [int(record.id) for record in records if record.id.isdecimal()]
        if numeric_ids and candidate <= max(numeric_ids):
            candidate = max(numeric_ids) + 1
        return str(candidate)
