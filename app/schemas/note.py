"""Note API schemas."""

import datetime
from typing import Optional

from pydantic import BaseModel, Field


class NoteCreate(BaseModel):
    """Schema for attaching a note to a date.  ``body`` may be omitted."""

    date: datetime.date
    body: Optional[str] = Field(None, max_length=4000)


class NoteResponse(BaseModel):
    """Schema for a note in API responses."""

    id: int
    user_id: int
    date: datetime.date
    body: Optional[str] = None
    created_at: datetime.datetime

    class Config:
        from_attributes = True
