"""Tests for daily notes."""

import datetime

import pytest
from fastapi import HTTPException

from app.schemas.note import NoteCreate
from app.services.note_service import NoteService

D = datetime.date(2025, 6, 1)


@pytest.fixture
def note_service(db) -> NoteService:
    return NoteService(db)


class TestNoteService:
    def test_create_with_body(self, note_service, user):
        note = note_service.create(user.id, NoteCreate(date=D, body="Slept well"))
        assert note.id is not None
        assert (note.user_id, note.date, note.body) == (user.id, D, "Slept well")

    def test_body_may_be_omitted(self, note_service, user):
        assert note_service.create(user.id, NoteCreate(date=D)).body is None

    def test_several_notes_per_date_in_order(self, note_service, user):
        note_service.create(user.id, NoteCreate(date=D + datetime.timedelta(days=1), body="later"))
        note_service.create(user.id, NoteCreate(date=D, body="first"))
        note_service.create(user.id, NoteCreate(date=D, body="second"))
        notes = note_service.get_range(user.id, D, D + datetime.timedelta(days=1))
        assert [n.body for n in notes] == ["first", "second", "later"]

    def test_range_is_per_user(self, note_service, user, other_user):
        note_service.create(other_user.id, NoteCreate(date=D, body="not mine"))
        assert note_service.get_range(user.id, D, D) == []

    def test_reversed_range_is_rejected(self, note_service, user):
        with pytest.raises(HTTPException) as excinfo:
            note_service.get_range(user.id, D, D - datetime.timedelta(days=1))
        assert excinfo.value.status_code == 400

    def test_overlong_body_is_rejected_by_schema(self):
        with pytest.raises(ValueError):
            NoteCreate(date=D, body="x" * 4001)
