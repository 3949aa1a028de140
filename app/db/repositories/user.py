"""
User repository.

Lookups on ``users`` plus the row lock that serialises one user's sleep
session writes.
"""

from typing import Optional

from sqlmodel import Session, select

from app.models.user import User


class UserRepository:
    """Repository for User database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, user: User) -> User:
        self.session.add(user)
        self.session.commit()
        self.session.refresh(user)
        return user

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self.session.get(User, user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        return self.session.exec(select(User).where(User.email == email)).first()

    def exists_by_email(self, email: str) -> bool:
        return self.get_by_email(email) is not None

    def lock(self, user_id: int) -> Optional[int]:
        """
        Take ``SELECT ... FOR UPDATE`` on the user row.

        Held until the caller's transaction ends.  Dialects without row
        locks (SQLite) render a plain SELECT.

        Returns:
            The user id, or None if the user does not exist
        """
        with self.session.no_autoflush:
            statement = select(User.id).where(User.id == user_id).with_for_update()
            return self.session.exec(statement).first()
