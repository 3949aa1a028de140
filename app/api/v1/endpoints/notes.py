"""
Note endpoints.

Attach free-text notes to dates and list them.
"""

import datetime

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from app.api.dependencies import get_current_user
from app.db.session import get_db
from app.models.user import User
from app.schemas.note import NoteCreate, NoteResponse
from app.services.note_service import NoteService

router = APIRouter()


@router.post("", summary="Add a note to a date.", response_model=NoteResponse, status_code=status.HTTP_201_CREATED, )
def create_note(data: NoteCreate, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = NoteService(db)
    return service.create(user.id, data)


@router.get("", summary="List notes in a date range.", response_model=list[NoteResponse], )
def list_notes(start: datetime.date = Query(..., description="Range start (inclusive)"),
               end: datetime.date = Query(..., description="Range end (inclusive)"), db: Session = Depends(get_db),
               user: User = Depends(get_current_user), ):
    service = NoteService(db)
    return service.get_range(user.id, start, end)
