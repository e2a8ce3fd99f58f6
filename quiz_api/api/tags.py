"""
Tag API endpoints
"""
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import List
import logging

from quiz_api.database import get_db
from quiz_api.schemas.tag import TagCreate, TagEnvelope, TagResponse
from quiz_api.services.tag_service import tag_service

router = APIRouter(prefix="/api/tags", tags=["tags"])
logger = logging.getLogger(__name__)


@router.get("", response_model=List[TagResponse])
async def list_tags(db: Session = Depends(get_db)):
    """Active tags ordered by name"""
    try:
        return [TagResponse.model_validate(t) for t in tag_service.list_active_tags(db)]
    except Exception as e:
        logger.error(f"Failed to list tags: {str(e)}")
        raise HTTPException(status_code=500, detail=str(e))


@router.post("", response_model=TagEnvelope)
async def create_tag(payload: TagCreate, db: Session = Depends(get_db)):
    """Create an active tag"""
    try:
        tag = tag_service.create_tag(db, payload)
        db.commit()
        db.refresh(tag)

        return TagEnvelope(data=TagResponse.model_validate(tag))

    except Exception as e:
        logger.error(f"Failed to create tag: {str(e)}")
        db.rollback()
        raise HTTPException(status_code=500, detail={"success": False, "error": str(e)})
