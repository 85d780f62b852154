from collections import Counter
from typing import Dict, Any

from feedback_system.models import FEEDBACK_STATUSES, FEEDBACK_TYPES
from feedback_system.store import FeedbackStore


class FeedbackAnalytics:
    """
    Aggregates the stored feedback into the dashboard counters: total items,
    items per status and items per type. Known statuses and types are always
    present (zero-filled); any other type value gets its own key.
    """

    def __init__(self, store: FeedbackStore):
        self.store = store

    def get_summary(self) -> Dict[str, Any]:
        records = self.store.list()
        status_counter = Counter(record.status for record in records)
        type_counter = Counter(record.type for record in records)

        by_status = {status: status_counter.get(status, 0) for status in FEEDBACK_STATUSES}
        by_type = {feedback_type: type_counter.get(feedback_type, 0) for feedback_type in FEEDBACK_TYPES}
        for feedback_type, count in type_counter.items():
            if feedback_type not in by_type:
                by_type[feedback_type] = count

        return {
            "total": len(records),
            "by_status": by_status,
            "by_type": by_type,
        }
