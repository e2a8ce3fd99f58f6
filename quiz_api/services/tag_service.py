"""
Tag listing and creation
"""
import logging
from typing import List

from sqlalchemy.orm import Session

from quiz_api.models import Tag
from quiz_api.schemas.tag import TagCreate
from quiz_api.services.audit_service import audit_service

logger = logging.getLogger(__name__)


class TagService:
    """Active tag listing and tag creation"""

    def list_active_tags(self, db: Session) -> List[Tag]:
        return db.query(Tag).filter(Tag.is_active.is_(True)).order_by(Tag.name).all()

    def create_tag(self, db: Session, payload: TagCreate) -> Tag:
        tag = Tag(name=payload.name, is_active=True)
        db.add(tag)

        audit_service.log(db, payload.user_id, audit_service.CREATE_TAG, f"Created tag: {payload.name}")
        db.flush()

        logger.info(f"Tag created: {tag.id} ({tag.name})")

        return tag


# Global instance
tag_service = TagService()
