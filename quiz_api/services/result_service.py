"""
Result storage and listing
"""
import logging
from typing import List
from uuid import UUID

from sqlalchemy.orm import Session, joinedload

from quiz_api.database import utcnow
from quiz_api.models import Result
from quiz_api.schemas.result import ResultCreate

logger = logging.getLogger(__name__)


class ResultService:
    """Stores completed attempts and lists them"""

    DEFAULT_USER_NAME = "Anonymous"

    def submit_result(self, db: Session, payload: ResultCreate) -> Result:
        result = Result(
            test_id=payload.test_id,
            user_name=payload.user_name or self.DEFAULT_USER_NAME,
            answers=payload.answers,
            score=payload.score,
            max_score=payload.max_score,
            total_questions=payload.total_questions,
            percentage=payload.percentage,
            completed_at=utcnow()
        )
        db.add(result)
        db.flush()

        logger.info(f"Result saved: test={payload.test_id}, user={result.user_name}, score={payload.score}")

        return result

    def list_results(self, db: Session) -> List[Result]:
        """All results newest-first, with the parent test loaded"""
        return db.query(Result).options(
            joinedload(Result.test)
        ).order_by(Result.created_at.desc()).all()

    def list_results_for_test(self, db: Session, test_id: UUID) -> List[Result]:
        return db.query(Result).filter(
            Result.test_id == test_id
        ).order_by(Result.completed_at.desc()).all()


# Global instance
result_service = ResultService()
