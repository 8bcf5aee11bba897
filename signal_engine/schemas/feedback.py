from typing import Literal, Optional

from pydantic import BaseModel

Theme = Literal[
    "Authentication",
    "Performance",
    "UI/UX",
    "Documentation",
    "Bug",
    "Feature Request",
    "Integration",
    "Other",
]
Urgency = Literal["Low", "Medium", "High"]
Severity = Literal["Minor", "Moderate", "Critical"]
Sentiment = Literal["Positive", "Neutral", "Negative"]


class ClassificationTags(BaseModel):
    theme: Theme
    urgency: Urgency
    severity: Severity
    sentiment: Sentiment


class FeedbackIn(BaseModel):
    # Presence is checked by the ingestion service.
    text: Optional[str] = None
    source: Optional[str] = None
    timestamp: Optional[str] = None


class FeedbackStored(BaseModel):
    status: Literal["stored"] = "stored"
    tags: ClassificationTags


class SeedResult(BaseModel):
    status: Literal["seeded"] = "seeded"
    count: int
