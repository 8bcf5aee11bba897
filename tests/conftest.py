import os
import sys
from pathlib import Path
from typing import Iterable, List, Optional

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

test_db_path = PROJECT_ROOT / "test.db"
if test_db_path.exists():
    test_db_path.unlink()

os.environ["DATABASE_URL"] = f"sqlite:///{test_db_path}"
os.environ["AI_API_KEY"] = ""

from signal_engine.main import app  # noqa: E402
from signal_engine.db.base import Base  # noqa: E402
from signal_engine.api.dependencies import get_classifier, get_db  # noqa: E402
from signal_engine.models.feedback import Feedback  # noqa: E402
from signal_engine.schemas.feedback import ClassificationTags  # noqa: E402
from signal_engine.services.classifier import FeedbackClassifier  # noqa: E402

SQLALCHEMY_DATABASE_URL = f"sqlite:///{test_db_path}"
engine = create_engine(
    SQLALCHEMY_DATABASE_URL, connect_args={"check_same_thread": False}
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


class FakeClassifier(FeedbackClassifier):
    """Returns queued tag sets in order, then repeats the last one."""

    def __init__(self, tags: Optional[Iterable[ClassificationTags]] = None) -> None:
        super().__init__(api_key="test", model="fake")
        self.queue: List[ClassificationTags] = list(tags or [])
        self.last = ClassificationTags(
            theme="Bug", urgency="High", severity="Critical", sentiment="Negative"
        )
        self.calls: List[str] = []

    def push(self, **tags) -> None:
        self.queue.append(ClassificationTags(**tags))

    async def classify(self, text: str) -> ClassificationTags:
        self.calls.append(text)
        if self.queue:
            self.last = self.queue.pop(0)
        return self.last


@pytest.fixture
def fake_classifier():
    classifier = FakeClassifier()
    app.dependency_overrides[get_classifier] = lambda: classifier
    yield classifier
    app.dependency_overrides.pop(get_classifier, None)


@pytest.fixture
def db_session():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client():
    Base.metadata.create_all(bind=engine)
    with TestClient(app) as c:
        yield c
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def stored_rows():
    def _rows() -> List[Feedback]:
        db = TestingSessionLocal()
        try:
            return db.query(Feedback).order_by(Feedback.id).all()
        finally:
            db.close()

    return _rows
