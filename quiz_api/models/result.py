"""
Result model - one completed attempt at a test
"""
from sqlalchemy import Column, String, Integer, Float, TIMESTAMP, ForeignKey, JSON, Uuid, func
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import relationship
from quiz_api.database import Base, utcnow
import uuid


class Result(Base):
    """
    Results table

    Clients send either max_score or total_questions + percentage,
    so all three are nullable.
    """
    __tablename__ = "results"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    test_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("tests.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_name = Column(String(255), default="Anonymous")
    answers = Column(JSON().with_variant(JSONB(), "postgresql"))
    score = Column(Float)
    max_score = Column(Float, nullable=True)
    total_questions = Column(Integer, nullable=True)
    percentage = Column(Float, nullable=True)
    completed_at = Column(TIMESTAMP(timezone=True), default=utcnow)
    created_at = Column(TIMESTAMP(timezone=True), default=utcnow, server_default=func.now())

    test = relationship("Test", back_populates="results")

    def __repr__(self):
        return f"<Result(test_id={self.test_id}, user_name={self.user_name}, score={self.score})>"
