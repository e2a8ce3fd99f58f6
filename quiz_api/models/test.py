"""
Test model - a published quiz with denormalized rating fields
"""
from sqlalchemy import Column, String, Text, Integer, Float, Boolean, TIMESTAMP, Uuid, func
from sqlalchemy.orm import relationship
from quiz_api.database import Base, utcnow
import uuid


class Test(Base):
    """
    Tests table - quiz header rows

    average_rating and review_count are recomputed whenever a review is added.
    """
    __tablename__ = "tests"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    title = Column(String(255), nullable=False)
    description = Column(Text)
    question_count = Column(Integer, default=0)
    total_points = Column(Integer, default=0)
    is_published = Column(Boolean, default=True)
    average_rating = Column(Float, default=0)
    review_count = Column(Integer, default=0)
    created_by = Column(Uuid(as_uuid=True), nullable=True)
    created_at = Column(TIMESTAMP(timezone=True), default=utcnow, server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True), nullable=True)

    questions = relationship(
        "Question",
        back_populates="test",
        cascade="save-update, merge, delete",
        order_by="Question.order_index",
    )
    tag_links = relationship("TestTag", back_populates="test", cascade="save-update, merge, delete")
    reviews = relationship("Review", back_populates="test", cascade="save-update, merge, delete")
    results = relationship("Result", back_populates="test", cascade="save-update, merge, delete")

    def __repr__(self):
        return f"<Test(id={self.id}, title={self.title})>"
