"""
Note service.

Business logic for free-text daily notes.
"""

import datetime

import structlog
from fastapi import HTTPException, status
from sqlmodel import Session

from app.db.repositories.note import NoteRepository
from app.models.note import Note
from app.schemas.note import NoteCreate, NoteResponse

logger = structlog.get_logger()


class NoteService:
    """Service for note business logic."""

    def __init__(self, session: Session):
        self.repository = NoteRepository(session)

    def create(self, user_id: int, data: NoteCreate) -> NoteResponse:
        """
        Attach a note to a date.

        Args:
            user_id: Owner of the note
            data: Date and optional body

        Returns:
            The stored note
        """
        entry = self.repository.create(Note(user_id=user_id, date=data.date, body=data.body))
        logger.info("note_created", user_id=user_id, note_id=entry.id, date=str(data.date))
        return NoteResponse.model_validate(entry)

    def get_range(self, user_id: int, start: datetime.date, end: datetime.date) -> list[NoteResponse]:
        """
        Notes dated within ``[start, end]``, oldest first.

        Raises:
            HTTPException: 400 if ``start > end``
        """
        if start > end:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="start must not be after end")
        return [NoteResponse.model_validate(n) for n in self.repository.get_by_user_date_range(user_id, start, end)]
