from pydantic import BaseModel, Field, ConfigDict
from typing import Dict, Any
from datetime import datetime, timezone

FEEDBACK_TYPES = ("general", "bug", "feature", "complaint")
FEEDBACK_STATUSES = ("pending", "reviewed", "resolved")
REQUIRED_FIELDS = ("name", "email", "message", "type")


def utc_timestamp(now: datetime = None) -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. 2024-05-01T12:00:00.123Z"""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class FeedbackRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    email: str
    message: str
    type: str
    status: str = Field(default="pending")
    created_at: str = Field(alias="createdAt", default_factory=utc_timestamp)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)

    def with_status(self, status: str) -> "FeedbackRecord":
        return self.model_copy(update={"status": status})
