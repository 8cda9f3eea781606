"""
Note routes
Handles free-text notes, optionally linked to a problem
"""
from typing import List, Optional
from fastapi import APIRouter, HTTPException

from api.dependencies import CurrentUser, DBSession
from models.database_service import (
    get_notes_by_user, get_notes_by_problem, get_note_by_id,
    create_note, update_note, delete_note
)
from models.problem_models import NoteCreate, NoteUpdate, NoteResponse

router = APIRouter(prefix="/api", tags=["Notes"])


def _matches(note, term: str) -> bool:
    if term in (note.content or "").lower():
        return True
    return any(term in tag.lower() for tag in (note.tags or []))


@router.get("/notes", response_model=List[NoteResponse])
async def list_notes(current_user: CurrentUser, db: DBSession, search: Optional[str] = None):
    """List notes, newest first, optionally filtered by content or tag"""
    notes = get_notes_by_user(db, current_user.id)  # type: ignore
    term = (search or "").strip().lower()
    if term:
        notes = [n for n in notes if _matches(n, term)]
    return [NoteResponse.model_validate(n) for n in notes]


@router.get("/notes/{note_id}", response_model=NoteResponse)
async def get_note(note_id: int, current_user: CurrentUser, db: DBSession):
    note = get_note_by_id(db, note_id, current_user.id)  # type: ignore
    if not note:
        raise HTTPException(status_code=404, detail="Note not found")
    return NoteResponse.model_validate(note)


@router.post("/notes", response_model=NoteResponse, status_code=201)
async def add_note(payload: NoteCreate, current_user: CurrentUser, db: DBSession):
    """Create a note"""
    note = create_note(db, current_user.id, payload.content, payload.tags, payload.problem_id)  # type: ignore
    return NoteResponse.model_validate(note)


@router.put("/notes/{note_id}", response_model=NoteResponse)
async def edit_note(note_id: int, payload: NoteUpdate, current_user: CurrentUser, db: DBSession):
    """Save edits to a note"""
    updates = {k: v for k, v in payload.model_dump(exclude_unset=True).items()
               if v is not None or k == "problem_id"}
    note = update_note(db, note_id, current_user.id, updates)  # type: ignore
    if not note:
        raise HTTPException(status_code=404, detail="Note not found")
    return NoteResponse.model_validate(note)


@router.delete("/notes/{note_id}")
async def remove_note(note_id: int, current_user: CurrentUser, db: DBSession):
    success = delete_note(db, note_id, current_user.id)  # type: ignore
    if not success:
        raise HTTPException(status_code=404, detail="Note not found")
    return {"message": "Note deleted successfully"}


@router.get("/problems/{problem_id}/notes", response_model=List[NoteResponse])
async def list_problem_notes(problem_id: int, current_user: CurrentUser, db: DBSession):
    """Notes attached to a problem"""
    return [NoteResponse.model_validate(n) for n in get_notes_by_problem(db, problem_id, current_user.id)]  # type: ignore
