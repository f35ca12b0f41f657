"""
Children's Church API — Q&A Question Route Handlers
=====================================================

What:  CRUD endpoints under /api/qanda/questions.
Why:   Audience members submit questions; the host's screen polls the list,
       marks questions read and deletes them.
How:   Thin handlers: extract body/path, delegate to QuestionService.
Who:   Called by the frontend Q&A page.

Caching:
    Responses carry no cache headers; the host view polls and must always see
    the latest list.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends

from church_api.models.question import Question
from church_api.schemas.common import ErrorResponse, MessageResponse
from church_api.schemas.question import QuestionCreate, QuestionUpdate
from church_api.services.question_service import question_service
from church_api.store import JsonDocumentStore, get_document_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/qanda", tags=["Q&A"])


@router.get(
    "/questions",
    response_model=List[Question],
    responses={500: {"description": "Store fault", "model": ErrorResponse}},
    summary="List all questions",
)
async def list_questions(
    store: JsonDocumentStore = Depends(get_document_store),
) -> List[Question]:
    """Every stored question, in submission order."""
    return await question_service.list_questions(store)


@router.post(
    "/questions",
    status_code=201,
    response_model=Question,
    responses={
        201: {"description": "Question submitted", "model": Question},
        400: {"description": "Missing question text", "model": ErrorResponse},
        500: {"description": "Store fault", "model": ErrorResponse},
    },
    summary="Submit a question",
)
async def create_question(
    payload: QuestionCreate,
    store: JsonDocumentStore = Depends(get_document_store),
) -> Question:
    return await question_service.create_question(store, payload)


@router.put(
    "/questions/{question_id}",
    response_model=Question,
    responses={
        404: {"description": "Question not found", "model": ErrorResponse},
        500: {"description": "Store fault", "model": ErrorResponse},
    },
    summary="Mark a question read or unread",
    description="An omitted isRead marks the question as read.",
)
async def mark_question_read(
    question_id: str,
    payload: Optional[QuestionUpdate] = None,
    store: JsonDocumentStore = Depends(get_document_store),
) -> Question:
    # A PUT without a body behaves like {}
    return await question_service.mark_read(store, question_id, payload or QuestionUpdate())


@router.delete(
    "/questions/{question_id}",
    response_model=MessageResponse,
    responses={
        404: {"description": "Question not found", "model": ErrorResponse},
        500: {"description": "Store fault", "model": ErrorResponse},
    },
    summary="Delete a question",
)
async def delete_question(
    question_id: str,
    store: JsonDocumentStore = Depends(get_document_store),
) -> MessageResponse:
    return await question_service.delete_question(store, question_id)
