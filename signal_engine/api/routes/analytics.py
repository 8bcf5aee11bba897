from fastapi import APIRouter, Depends

from signal_engine.api.dependencies import get_store
from signal_engine.schemas.analytics import ClustersOut, StatsOut
from signal_engine.services.prioritization import build_stats, rank_clusters
from signal_engine.services.store import FeedbackStore

router = APIRouter(tags=["analytics"])


@router.get("/stats", response_model=StatsOut)
def stats(store: FeedbackStore = Depends(get_store)):
    return build_stats(store.aggregate_totals())


@router.get("/clusters", response_model=ClustersOut)
def clusters(store: FeedbackStore = Depends(get_store)):
    return rank_clusters(store.aggregate_by_theme())
