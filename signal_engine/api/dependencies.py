from functools import lru_cache

from fastapi import Depends
from sqlalchemy.orm import Session

from signal_engine.db.session import SessionLocal
from signal_engine.services.classifier import FeedbackClassifier, classifier_from_settings
from signal_engine.services.store import FeedbackStore


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_store(db: Session = Depends(get_db)) -> FeedbackStore:
    return FeedbackStore(db)


@lru_cache(maxsize=1)
def get_classifier() -> FeedbackClassifier:
    return classifier_from_settings()
