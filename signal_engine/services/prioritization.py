from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, List

from signal_engine.schemas.analytics import ClusterSummary, ClustersOut, StatsOut
from signal_engine.services.store import FeedbackTotals, ThemeAggregate

SUMMARY_NEGATIVE = "User sentiment is trending negative."
SUMMARY_URGENT = "Urgent issues detected that may require prioritization."
SUMMARY_LOW_RISK = "Feedback volume is low risk."

HIGH_IMPACT_THRESHOLD = 20
UNCATEGORIZED_THEME = "Other"

INSIGHT_TAXONOMY_GAP = (
    "Large volume of uncategorized feedback suggests taxonomy gaps.",
    "Refine AI classification prompts or expand feedback categories.",
)
INSIGHT_HIGH_IMPACT = (
    "High-impact issue affecting multiple users.",
    "Prioritize investigation and remediation.",
)
INSIGHT_RECURRING = (
    "Recurring user feedback detected.",
    "Monitor and review in upcoming sprint.",
)


def summarize_totals(totals: FeedbackTotals) -> str:
    # An empty store never counts as trending negative.
    if totals.total and totals.negative > totals.total / 2:
        return SUMMARY_NEGATIVE
    if totals.high_urgency > 0 or totals.critical > 0:
        return SUMMARY_URGENT
    return SUMMARY_LOW_RISK


def build_stats(totals: FeedbackTotals) -> StatsOut:
    return StatsOut(
        total=totals.total,
        high_urgency=totals.high_urgency,
        critical=totals.critical,
        negative=totals.negative,
        summary=summarize_totals(totals),
    )


def round_half_up(value: float) -> float:
    # Rounds the exact binary value, so 2.125 becomes 2.13.
    return float(Decimal(value).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def priority_score(coverage: int, avg_urgency: float, avg_severity: float) -> float:
    return coverage * avg_urgency * avg_severity


def _insight_for(theme: str, priority: float) -> tuple:
    if theme == UNCATEGORIZED_THEME:
        return INSIGHT_TAXONOMY_GAP
    if priority > HIGH_IMPACT_THRESHOLD:
        return INSIGHT_HIGH_IMPACT
    return INSIGHT_RECURRING


def build_cluster(aggregate: ThemeAggregate) -> ClusterSummary:
    priority = priority_score(
        aggregate.coverage, aggregate.avg_urgency, aggregate.avg_severity
    )
    insight, recommendation = _insight_for(aggregate.theme, priority)
    return ClusterSummary(
        theme=aggregate.theme,
        coverage=aggregate.coverage,
        avg_urgency=round_half_up(aggregate.avg_urgency),
        avg_severity=round_half_up(aggregate.avg_severity),
        priority=round_half_up(priority),
        insight=insight,
        recommendation=recommendation,
    )


def rank_clusters(aggregates: Iterable[ThemeAggregate]) -> ClustersOut:
    clusters: List[ClusterSummary] = sorted(
        (build_cluster(aggregate) for aggregate in aggregates),
        key=lambda cluster: cluster.priority,
        reverse=True,
    )
    return ClustersOut(top_problem=clusters[0] if clusters else None, clusters=clusters)
