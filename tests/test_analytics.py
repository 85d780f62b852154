import os
import sys
from pathlib import Path

# Add project root to Python path
sys.path.insert(0, str(Path(__file__).parent.parent))

os.environ.setdefault("GEMINI_API_KEY", "test-key")

from analytics.feedback_analytics import FeedbackAnalytics  # noqa: E402
from feedback_system.store import FeedbackStore  # noqa: E402


def test_summary_of_empty_store_is_zero_filled(tmp_path):
    summary = FeedbackAnalytics(FeedbackStore(tmp_path / "feedback.json")).get_summary()
    assert summary == {
        "total": 0,
        "by_status": {"pending": 0, "reviewed": 0, "resolved": 0},
        "by_type": {"general": 0, "bug": 0, "feature": 0, "complaint": 0},
    }


def test_summary_counts_status_and_type(tmp_path):
    store = FeedbackStore(tmp_path / "feedback.json")
    bug = store.create("A", "a@x.com", "crash", "bug")
    store.create("B", "b@x.com", "more", "feature")
    store.create("C", "c@x.com", "hmm", "praise")
    store.update_status(bug.id, "resolved")

    summary = FeedbackAnalytics(store).get_summary()

    assert summary["total"] == 3
    assert summary["by_status"] == {"pending": 2, "reviewed": 0, "resolved": 1}
    assert summary["by_type"]["bug"] == 1
    assert summary["by_type"]["feature"] == 1
    assert summary["by_type"]["general"] == 0
    assert summary["by_type"]["praise"] == 1
