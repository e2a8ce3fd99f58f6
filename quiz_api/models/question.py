"""
Question model - one multiple-choice item of a test
"""
from sqlalchemy import Column, Text, Integer, ForeignKey, JSON, Uuid
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import relationship
from quiz_api.database import Base
import uuid


class Question(Base):
    """
    Questions table - order_index is zero-based in submission order
    """
    __tablename__ = "questions"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    test_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("tests.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    question_text = Column(Text, nullable=False)
    options = Column(JSON().with_variant(JSONB(), "postgresql"))  # ["A", "B", "C"]
    correct_answer = Column(Text)  # stored as text whatever the client sent
    points = Column(Integer, default=1)
    order_index = Column(Integer, nullable=False)

    test = relationship("Test", back_populates="questions")

    def __repr__(self):
        return f"<Question(test_id={self.test_id}, order_index={self.order_index})>"
