"""
User service.

Registration and lookup of sleep log owners.
"""

from typing import Optional

import structlog
from fastapi import HTTPException, status
from sqlmodel import Session

from app.db.repositories.user import UserRepository
from app.models.user import User
from app.schemas.user import UserCreate

logger = structlog.get_logger()


class UserService:
    """Service for user-related business logic."""

    def __init__(self, session: Session):
        self.repository = UserRepository(session)

    def register(self, user_data: UserCreate) -> User:
        """
        Register a new user.

        Raises:
            HTTPException: 400 if the email is already taken
        """
        if self.repository.exists_by_email(user_data.email):
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="User already registered")

        user = self.repository.create(User(email=user_data.email, full_name=user_data.full_name))
        logger.info("user_registered", user_id=user.id)
        return user

    def get_user_by_id(self, user_id: int) -> Optional[User]:
        return self.repository.get_by_id(user_id)
