from typing import List, Optional

from pydantic import BaseModel


class StatsOut(BaseModel):
    total: int
    high_urgency: int
    critical: int
    negative: int
    summary: str


class ClusterSummary(BaseModel):
    theme: str
    coverage: int
    avg_urgency: float
    avg_severity: float
    priority: float
    insight: str
    recommendation: str


class ClustersOut(BaseModel):
    top_problem: Optional[ClusterSummary] = None
    clusters: List[ClusterSummary]
