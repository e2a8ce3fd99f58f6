"""
Result submission and listing API endpoints
"""
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from uuid import UUID
from typing import List
import logging

from quiz_api.database import get_db
from quiz_api.schemas.result import (
    ResultCreate, ResultEnvelope, ResultResponse, ResultWithTest
)
from quiz_api.services.result_service import result_service

router = APIRouter(prefix="/api/results", tags=["results"])
logger = logging.getLogger(__name__)


@router.post("", response_model=ResultEnvelope)
async def submit_result(payload: ResultCreate, db: Session = Depends(get_db)):
    """
    Store a completed attempt

    user_name falls back to "Anonymous".
    """
    try:
        result = result_service.submit_result(db, payload)
        db.commit()
        db.refresh(result)

        return ResultEnvelope(data=ResultResponse.model_validate(result))

    except Exception as e:
        logger.error(f"Failed to save result: {str(e)}")
        db.rollback()
        raise HTTPException(status_code=500, detail={"success": False, "error": str(e)})


@router.get("", response_model=List[ResultWithTest])
async def list_results(db: Session = Depends(get_db)):
    """All results, newest first, with the test's title and description"""
    try:
        results = result_service.list_results(db)
        return [ResultWithTest.model_validate(r) for r in results]
    except Exception as e:
        logger.error(f"Failed to list results: {str(e)}")
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/{test_id}", response_model=List[ResultResponse])
async def list_results_for_test(test_id: UUID, db: Session = Depends(get_db)):
    """Results of one test, most recently completed first"""
    try:
        results = result_service.list_results_for_test(db, test_id)
        return [ResultResponse.model_validate(r) for r in results]
    except Exception as e:
        logger.error(f"Failed to list results for test {test_id}: {str(e)}")
        raise HTTPException(status_code=500, detail=str(e))
