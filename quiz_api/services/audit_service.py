"""
Admin audit trail
"""
import logging
from typing import Optional
from uuid import UUID

from sqlalchemy.orm import Session

from quiz_api.models import AdminLog

logger = logging.getLogger(__name__)


class AuditService:
    """Appends admin actions to admin_logs within the caller's transaction"""

    CREATE_TEST = "CREATE_TEST"
    UPDATE_TEST = "UPDATE_TEST"
    DELETE_TEST = "DELETE_TEST"
    CREATE_TAG = "CREATE_TAG"

    def log(
        self,
        db: Session,
        user_id: Optional[UUID],
        action_type: str,
        description: str
    ) -> AdminLog:
        entry = AdminLog(
            user_id=user_id,
            action_type=action_type,
            description=description
        )
        db.add(entry)

        logger.info(f"Admin action: {action_type} by {user_id} - {description}")

        return entry


# Global instance
audit_service = AuditService()
