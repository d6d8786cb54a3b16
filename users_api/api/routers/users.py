from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from users_api.data.database import get_db
from users_api.services.user_service import UserService
from users_api.domain.schemas import UserCreate, UserRead
from users_api.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/users", tags=["users"])

@router.post("", response_model=UserRead)
def create_user(payload: UserCreate, db: Session = Depends(get_db)):
    service = UserService(db)
    try:
        return service.create_user(payload)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"create_user failed: {e}")
        raise HTTPException(status_code=500, detail=str(e))

@router.get("", response_model=List[UserRead])
def list_users(db: Session = Depends(get_db)):
    service = UserService(db)
    try:
        return service.list_users()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"list_users failed: {e}")
        raise HTTPException(status_code=500, detail=str(e))
