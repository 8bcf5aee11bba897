from dataclasses import dataclass
from typing import List

from sqlalchemy import case, func
from sqlalchemy.orm import Session

from signal_engine.models.feedback import Feedback
from signal_engine.schemas.feedback import ClassificationTags

URGENCY_WEIGHT = case(
    (Feedback.urgency == "High", 3),
    (Feedback.urgency == "Medium", 2),
    else_=1,
)
SEVERITY_WEIGHT = case(
    (Feedback.severity == "Critical", 3),
    (Feedback.severity == "Moderate", 2),
    else_=1,
)


@dataclass(frozen=True)
class FeedbackTotals:
    total: int
    high_urgency: int
    critical: int
    negative: int


@dataclass(frozen=True)
class ThemeAggregate:
    theme: str
    coverage: int
    avg_urgency: float
    avg_severity: float


def _count_where(condition):
    return func.sum(case((condition, 1), else_=0))


class FeedbackStore:
    """Append-only access to the feedback table."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def insert(
        self,
        *,
        text: str,
        source: str,
        timestamp: str,
        created_at: str,
        tags: ClassificationTags,
    ) -> Feedback:
        record = Feedback(
            text=text,
            source=source,
            timestamp=timestamp,
            created_at=created_at,
            theme=tags.theme,
            urgency=tags.urgency,
            severity=tags.severity,
            sentiment=tags.sentiment,
            escalated=False,
        )
        self.db.add(record)
        self.db.commit()
        self.db.refresh(record)
        return record

    def aggregate_totals(self) -> FeedbackTotals:
        total, high_urgency, critical, negative = self.db.query(
            func.count(Feedback.id),
            _count_where(Feedback.urgency == "High"),
            _count_where(Feedback.severity == "Critical"),
            _count_where(Feedback.sentiment == "Negative"),
        ).one()
        return FeedbackTotals(
            total=int(total or 0),
            high_urgency=int(high_urgency or 0),
            critical=int(critical or 0),
            negative=int(negative or 0),
        )

    def aggregate_by_theme(self) -> List[ThemeAggregate]:
        query = (
            self.db.query(
                Feedback.theme,
                func.count(Feedback.id),
                func.avg(URGENCY_WEIGHT),
                func.avg(SEVERITY_WEIGHT),
            )
            .group_by(Feedback.theme)
            .order_by(Feedback.theme)
        )
        return [
            ThemeAggregate(
                theme=theme,
                coverage=int(coverage),
                avg_urgency=float(avg_urgency),
                avg_severity=float(avg_severity),
            )
            for theme, coverage, avg_urgency, avg_severity in query.all()
        ]
