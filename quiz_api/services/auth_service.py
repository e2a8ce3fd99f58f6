"""
Admin authentication
"""
import logging
from typing import Optional

from sqlalchemy.orm import Session

from quiz_api.database import utcnow
from quiz_api.models import User

logger = logging.getLogger(__name__)


class AuthService:
    """
    Admin login check

    The submitted password is compared verbatim against the stored
    password_hash column; there is no hashing on this side.
    """

    ADMIN_ROLE = "admin"

    def authenticate_admin(self, db: Session, email: str, password: str) -> Optional[User]:
        """
        Return the admin user matching email and password, or None

        On success last_login is set to now. Which field failed to match
        is deliberately not reported.
        """
        user = db.query(User).filter(
            User.email == email,
            User.password_hash == password,
            User.role == self.ADMIN_ROLE
        ).first()

        if not user:
            logger.warning("Admin login failed")
            return None

        user.last_login = utcnow()
        db.flush()

        logger.info(f"Admin logged in: {user.id}")

        return user


# Global instance
auth_service = AuthService()
