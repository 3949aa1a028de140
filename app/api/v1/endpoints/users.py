"""
User endpoints.

Create and look up the owners of sleep sessions.
"""

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from app.api.dependencies import get_current_user
from app.db.session import get_db
from app.models.user import User
from app.schemas.user import UserCreate, UserResponse
from app.services.user_service import UserService

router = APIRouter()


@router.post("", summary="Create a user.", response_model=UserResponse, status_code=status.HTTP_201_CREATED, )
def create_user(user_data: UserCreate, db: Session = Depends(get_db)):
    service = UserService(db)
    return service.register(user_data)


@router.get("/{user_id}", summary="Get a user.", response_model=UserResponse, )
def get_user(user: User = Depends(get_current_user)):
    return user
