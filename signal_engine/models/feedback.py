from sqlalchemy import Boolean, Column, Integer, String, Text

from signal_engine.db.base import Base


class Feedback(Base):
    __tablename__ = "feedback"

    id = Column(Integer, primary_key=True, index=True)
    text = Column(Text, nullable=False)
    source = Column(String, nullable=False)
    timestamp = Column(String, nullable=False)
    created_at = Column(String, nullable=False)
    theme = Column(String, nullable=False, index=True)
    urgency = Column(String, nullable=False)
    severity = Column(String, nullable=False)
    sentiment = Column(String, nullable=False)
    escalated = Column(Boolean, nullable=False, default=False)
