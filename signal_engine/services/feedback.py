import logging
from datetime import datetime, timezone
from typing import List, Optional, Tuple

from signal_engine.schemas.feedback import ClassificationTags, FeedbackIn
from signal_engine.services.classifier import FeedbackClassifier
from signal_engine.services.store import FeedbackStore

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("text", "source", "timestamp")

SEED_SAMPLES: List[Tuple[str, str]] = [
    ("Login fails for enterprise users", "GitHub"),
    ("SSO integration breaks randomly", "Support"),
    ("Dashboard takes more than 10 seconds to load", "Discord"),
    ("API latency is very high during peak hours", "GitHub"),
    ("Documentation is outdated for v2 APIs", "Email"),
    ("Navigation is confusing in settings screen", "Twitter"),
    ("Need export to CSV feature", "Support"),
    ("Bug in report generation", "Support"),
]


class FeedbackValidationError(ValueError):
    pass


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def validate_submission(payload: Optional[FeedbackIn]) -> FeedbackIn:
    if payload is None or not all(getattr(payload, name) for name in REQUIRED_FIELDS):
        raise FeedbackValidationError(", ".join(REQUIRED_FIELDS) + " required")
    return payload


async def ingest_feedback(
    payload: Optional[FeedbackIn],
    store: FeedbackStore,
    classifier: FeedbackClassifier,
) -> ClassificationTags:
    submission = validate_submission(payload)
    tags = await classifier.classify(submission.text)
    record = store.insert(
        text=submission.text,
        source=submission.source,
        timestamp=submission.timestamp,
        created_at=utc_now_iso(),
        tags=tags,
    )
    logger.info(
        "Stored feedback %s from %s as %s/%s",
        record.id,
        record.source,
        tags.theme,
        tags.urgency,
    )
    return tags


async def seed_feedback(store: FeedbackStore, classifier: FeedbackClassifier) -> int:
    """Classify and store the demo samples one at a time.

    Rows written before a failing insert are kept.
    """

    for text, source in SEED_SAMPLES:
        tags = await classifier.classify(text)
        now = utc_now_iso()
        store.insert(text=text, source=source, timestamp=now, created_at=now, tags=tags)
    logger.info("Seeded %s sample feedback items", len(SEED_SAMPLES))
    return len(SEED_SAMPLES)
