"""
Rating aggregation for tests
"""
import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Tuple
from uuid import UUID

from sqlalchemy.orm import Session

from quiz_api.models import Review, Test

logger = logging.getLogger(__name__)


class RatingService:
    """Computes and denormalizes the average rating of a test"""

    def average_rating(self, ratings: List[int]) -> float:
        """
        Mean of the ratings rounded half-up to one decimal

        Returns 0.0 for an empty list.
        """
        if not ratings:
            return 0.0

        mean = Decimal(sum(ratings)) / Decimal(len(ratings))
        return float(mean.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))

    def approved_ratings(self, db: Session, test_id: UUID) -> List[int]:
        rows = db.query(Review.rating).filter(
            Review.test_id == test_id,
            Review.is_approved.is_(True)
        ).all()
        return [rating for (rating,) in rows]

    def summarize(self, db: Session, test_id: UUID) -> Tuple[float, int]:
        """Return (average_rating, review_count) over approved reviews"""
        ratings = self.approved_ratings(db, test_id)
        return self.average_rating(ratings), len(ratings)

    def refresh_test_rating(self, db: Session, test_id: UUID) -> Tuple[float, int]:
        """
        Recompute the rating and write it back onto the test row

        Pending reviews must be flushed before calling this.
        """
        average_rating, review_count = self.summarize(db, test_id)

        db.query(Test).filter(Test.id == test_id).update(
            {"average_rating": average_rating, "review_count": review_count},
            synchronize_session="fetch"
        )

        logger.info(
            f"Rating refreshed: test={test_id}, "
            f"average={average_rating}, reviews={review_count}"
        )

        return average_rating, review_count


# Global instance
rating_service = RatingService()
