"""
AdminLog model - append-only audit trail of admin mutations
"""
from sqlalchemy import Column, String, Text, Integer, TIMESTAMP, Uuid, func
from quiz_api.database import Base, utcnow


class AdminLog(Base):
    """Admin logs table"""
    __tablename__ = "admin_logs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Uuid(as_uuid=True), nullable=True)
    action_type = Column(String(50), nullable=False)  # CREATE_TEST, UPDATE_TEST, ...
    description = Column(Text)
    created_at = Column(TIMESTAMP(timezone=True), default=utcnow, server_default=func.now())

    def __repr__(self):
        return f"<AdminLog(action_type={self.action_type}, user_id={self.user_id})>"
