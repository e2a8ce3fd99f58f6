"""
Admin authentication API endpoints
"""
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
import logging

from quiz_api.database import get_db
from quiz_api.schemas.auth import LoginRequest, LoginResponse, UserResponse
from quiz_api.services.auth_service import auth_service

router = APIRouter(prefix="/api/admin", tags=["admin"])
logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"


@router.post("/login", response_model=LoginResponse)
async def admin_login(payload: LoginRequest, db: Session = Depends(get_db)):
    """
    Log an admin in

    Any mismatch (email, password or role) gets the same 401.
    """
    try:
        user = auth_service.authenticate_admin(db, payload.email, payload.password)
        if user is None:
            raise HTTPException(
                status_code=401,
                detail={"success": False, "error": INVALID_CREDENTIALS}
            )

        db.commit()
        db.refresh(user)

        return LoginResponse(user=UserResponse.model_validate(user))

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Admin login error: {str(e)}")
        db.rollback()
        raise HTTPException(status_code=500, detail={"success": False, "error": str(e)})
