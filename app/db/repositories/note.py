"""
Note repository.

Handles database operations for :class:`Note`.
"""

import datetime

from sqlmodel import Session, select

from app.models.note import Note


class NoteRepository:
    """Repository for Note database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, entry: Note) -> Note:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def get_by_user_date_range(self, user_id: int, start: datetime.date, end: datetime.date, ) -> list[Note]:
        statement = (select(Note).where(Note.user_id == user_id, Note.date >= start, Note.date <= end, ).order_by(
            Note.date, Note.id))
        return list(self.session.exec(statement).all())
