"""
Tag and TestTag models
"""
from sqlalchemy import Column, String, Boolean, TIMESTAMP, ForeignKey, Uuid, func
from sqlalchemy.orm import relationship
from quiz_api.database import Base, utcnow
import uuid


class Tag(Base):
    """Tags table - only active tags are listed"""
    __tablename__ = "tags"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(100), unique=True, nullable=False)
    is_active = Column(Boolean, default=True)
    created_at = Column(TIMESTAMP(timezone=True), default=utcnow, server_default=func.now())

    test_links = relationship("TestTag", back_populates="tag", cascade="save-update, merge, delete")

    def __repr__(self):
        return f"<Tag(name={self.name})>"


class TestTag(Base):
    """Test <-> Tag association"""
    __tablename__ = "test_tags"

    test_id = Column(
        Uuid(as_uuid=True), ForeignKey("tests.id", ondelete="CASCADE"), primary_key=True
    )
    tag_id = Column(
        Uuid(as_uuid=True), ForeignKey("tags.id", ondelete="CASCADE"), primary_key=True
    )

    test = relationship("Test", back_populates="tag_links")
    tag = relationship("Tag", back_populates="test_links")
