"""
User model - only admins log in through the API
"""
from sqlalchemy import Column, String, TIMESTAMP, Uuid, func
from quiz_api.database import Base, utcnow
import uuid


class User(Base):
    """Users table"""
    __tablename__ = "users"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(20), default="user")
    last_login = Column(TIMESTAMP(timezone=True), nullable=True)
    created_at = Column(TIMESTAMP(timezone=True), default=utcnow, server_default=func.now())

    def __repr__(self):
        return f"<User(email={self.email}, role={self.role})>"
