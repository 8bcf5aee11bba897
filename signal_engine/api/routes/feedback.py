from typing import Optional

from fastapi import APIRouter, Body, Depends

from signal_engine.api.dependencies import get_classifier, get_store
from signal_engine.schemas.feedback import FeedbackIn, FeedbackStored, SeedResult
from signal_engine.services.classifier import FeedbackClassifier
from signal_engine.services.feedback import ingest_feedback, seed_feedback
from signal_engine.services.store import FeedbackStore

router = APIRouter(tags=["feedback"])


@router.post("/feedback", response_model=FeedbackStored)
async def submit_feedback(
    payload: Optional[FeedbackIn] = Body(default=None),
    store: FeedbackStore = Depends(get_store),
    classifier: FeedbackClassifier = Depends(get_classifier),
):
    tags = await ingest_feedback(payload, store, classifier)
    return FeedbackStored(tags=tags)


@router.get("/seed", response_model=SeedResult)
async def seed(
    store: FeedbackStore = Depends(get_store),
    classifier: FeedbackClassifier = Depends(get_classifier),
):
    count = await seed_feedback(store, classifier)
    return SeedResult(count=count)
