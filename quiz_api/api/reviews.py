"""
Review API endpoints
"""
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
import logging

from quiz_api.database import get_db
from quiz_api.schemas.review import ReviewCreate, ReviewEnvelope, ReviewResponse
from quiz_api.services.review_service import review_service

router = APIRouter(prefix="/api/reviews", tags=["reviews"])
logger = logging.getLogger(__name__)


@router.post("", response_model=ReviewEnvelope)
async def add_review(payload: ReviewCreate, db: Session = Depends(get_db)):
    """
    Add a review and refresh the test's average rating and review count
    """
    try:
        review = review_service.add_review(db, payload)
        db.commit()
        db.refresh(review)

        return ReviewEnvelope(data=ReviewResponse.model_validate(review))

    except Exception as e:
        logger.error(f"Failed to add review: {str(e)}")
        db.rollback()
        raise HTTPException(status_code=500, detail={"success": False, "error": str(e)})
