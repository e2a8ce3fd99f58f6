"""
Review submission
"""
import logging

from sqlalchemy.orm import Session

from quiz_api.models import Review
from quiz_api.schemas.review import ReviewCreate
from quiz_api.services.rating_service import rating_service

logger = logging.getLogger(__name__)


class ReviewService:
    """Stores reviews and keeps the test rating current"""

    def add_review(self, db: Session, payload: ReviewCreate) -> Review:
        """
        Store an approved, anonymous review and refresh the test's rating
        """
        # No moderation yet: every review is approved on arrival
        review = Review(
            test_id=payload.test_id,
            rating=payload.rating,
            comment=payload.comment,
            user_id=None,
            is_approved=True
        )
        db.add(review)
        db.flush()

        logger.info(f"Review added: test={payload.test_id}, rating={payload.rating}")

        rating_service.refresh_test_rating(db, payload.test_id)

        return review


# Global instance
review_service = ReviewService()
