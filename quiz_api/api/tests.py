"""
Test catalogue API endpoints
"""
from fastapi import APIRouter, Depends, HTTPException, Body
from sqlalchemy.orm import Session
from uuid import UUID
from typing import Optional
import logging

from quiz_api.database import get_db
from quiz_api.schemas.test import (
    TestCreate, TestUpdate, TestDelete, TestDetail,
    TestEnvelope, TestResponse, SuccessResponse
)
from quiz_api.services.test_service import test_service

router = APIRouter(prefix="/api/tests", tags=["tests"])
logger = logging.getLogger(__name__)


@router.get("")
async def list_tests(
    published_only: bool = True,
    include_details: bool = True,
    db: Session = Depends(get_db)
):
    """
    List tests, newest first

    - published_only: hide unpublished tests (default on)
    - include_details: attach questions, tags and a live average rating
    """
    try:
        return test_service.list_tests(
            db, published_only=published_only, include_details=include_details
        )
    except Exception as e:
        logger.error(f"Failed to list tests: {str(e)}")
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/{test_id}", response_model=TestDetail)
async def get_test(test_id: UUID, db: Session = Depends(get_db)):
    """
    Get one test with questions in order, tags and approved reviews
    """
    try:
        test = test_service.get_test(db, test_id)
    except Exception as e:
        logger.error(f"Failed to load test {test_id}: {str(e)}")
        raise HTTPException(status_code=500, detail=str(e))

    if test is None:
        raise HTTPException(status_code=500, detail="Test not found")

    return test


@router.post("", response_model=TestEnvelope)
async def create_test(payload: TestCreate, db: Session = Depends(get_db)):
    """
    Create a test with its questions and tags

    question_count and total_points are derived from the question list.
    """
    try:
        test = test_service.create_test(db, payload)
        db.commit()
        db.refresh(test)

        return TestEnvelope(data=TestResponse.model_validate(test))

    except Exception as e:
        logger.error(f"Failed to create test: {str(e)}")
        db.rollback()
        raise HTTPException(status_code=500, detail={"success": False, "error": str(e)})


@router.put("/{test_id}", response_model=TestEnvelope)
async def update_test(test_id: UUID, payload: TestUpdate, db: Session = Depends(get_db)):
    """
    Replace a test's fields, questions and tags
    """
    try:
        test = test_service.update_test(db, test_id, payload)
        if test is None:
            db.rollback()
            raise HTTPException(
                status_code=500,
                detail={"success": False, "error": "Test not found"}
            )

        db.commit()
        db.refresh(test)

        return TestEnvelope(data=TestResponse.model_validate(test))

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Failed to update test {test_id}: {str(e)}")
        db.rollback()
        raise HTTPException(status_code=500, detail={"success": False, "error": str(e)})


@router.delete("/{test_id}", response_model=SuccessResponse)
async def delete_test(
    test_id: UUID,
    payload: Optional[TestDelete] = Body(None),
    db: Session = Depends(get_db)
):
    """
    Delete a test; questions, tag links, reviews and results go with it

    Deleting an unknown id still succeeds and is audited.
    """
    user_id = payload.user_id if payload else None

    try:
        test_service.delete_test(db, test_id, user_id)
        db.commit()

        return SuccessResponse()

    except Exception as e:
        logger.error(f"Failed to delete test {test_id}: {str(e)}")
        db.rollback()
        raise HTTPException(status_code=500, detail={"success": False, "error": str(e)})
