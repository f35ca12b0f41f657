"""
Children's Church API — Scripture Note Route Handlers
=======================================================

What:  CRUD endpoints under /api/notes.
Why:   Teachers keep study notes tied to a scripture reference.
How:   Extracts path/body, delegates to NoteService, returns JSON.
Who:   Called by the frontend Scripture Study page.

Ids in the path are accepted as strings: a non-numeric id is an unknown
note (404), not a malformed request.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends

from church_api.models.note import Note
from church_api.schemas.common import ErrorResponse, MessageResponse
from church_api.schemas.note import NoteCreate, NoteUpdate
from church_api.services.note_service import note_service
from church_api.store import JsonDocumentStore, get_document_store

logger = logging.getLogger(__name__)

# ── Router Configuration ──────────────────────────────────────────────────
router = APIRouter(prefix="/api", tags=["Notes"])


@router.get(
    "/notes",
    response_model=List[Note],
    responses={500: {"description": "Store fault", "model": ErrorResponse}},
    summary="List all scripture notes",
)
async def list_notes(
    store: JsonDocumentStore = Depends(get_document_store),
) -> List[Note]:
    return await note_service.list_notes(store)


@router.get(
    "/notes/{note_id}",
    response_model=Note,
    responses={
        404: {"description": "Note not found", "model": ErrorResponse},
        500: {"description": "Store fault", "model": ErrorResponse},
    },
    summary="Get a single note by ID",
)
async def get_note(
    note_id: str,
    store: JsonDocumentStore = Depends(get_document_store),
) -> Note:
    return await note_service.get_note(store, note_id)


@router.post(
    "/notes",
    status_code=201,
    response_model=Note,
    responses={
        201: {"description": "Note created", "model": Note},
        400: {"description": "Missing title or content", "model": ErrorResponse},
        500: {"description": "Store fault", "model": ErrorResponse},
    },
    summary="Create a note",
)
async def create_note(
    payload: NoteCreate,
    store: JsonDocumentStore = Depends(get_document_store),
) -> Note:
    return await note_service.create_note(store, payload)


@router.put(
    "/notes/{note_id}",
    response_model=Note,
    responses={
        400: {"description": "Missing title or content", "model": ErrorResponse},
        404: {"description": "Note not found", "model": ErrorResponse},
        500: {"description": "Store fault", "model": ErrorResponse},
    },
    summary="Replace a note",
    description="Overwrites title, verse and content; refreshes updatedAt.",
)
async def update_note(
    note_id: str,
    payload: NoteUpdate,
    store: JsonDocumentStore = Depends(get_document_store),
) -> Note:
    return await note_service.update_note(store, note_id, payload)


@router.delete(
    "/notes/{note_id}",
    response_model=MessageResponse,
    responses={
        404: {"description": "Note not found", "model": ErrorResponse},
        500: {"description": "Store fault", "model": ErrorResponse},
    },
    summary="Delete a note",
)
async def delete_note(
    note_id: str,
    store: JsonDocumentStore = Depends(get_document_store),
) -> MessageResponse:
    return await note_service.delete_note(store, note_id)
