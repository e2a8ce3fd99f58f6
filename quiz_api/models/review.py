"""
Review model - rating and comment left on a test
"""
from sqlalchemy import Column, Integer, Text, Boolean, TIMESTAMP, ForeignKey, Uuid, func
from sqlalchemy.orm import relationship
from quiz_api.database import Base, utcnow
import uuid


class Review(Base):
    """Test reviews table - only approved rows count toward the rating"""
    __tablename__ = "test_reviews"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    test_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("tests.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id = Column(Uuid(as_uuid=True), nullable=True)
    rating = Column(Integer, nullable=False)
    comment = Column(Text)
    is_approved = Column(Boolean, default=True)
    created_at = Column(TIMESTAMP(timezone=True), default=utcnow, server_default=func.now())

    test = relationship("Test", back_populates="reviews")

    def __repr__(self):
        return f"<Review(test_id={self.test_id}, rating={self.rating})>"
