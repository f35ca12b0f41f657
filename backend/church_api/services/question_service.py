"""
Children's Church API — Question Service
==========================================

What:  Business rules for audience questions: list, submit, mark read, delete.
Why:   Keeps validation, identity assignment and response shaping out of the
       route handlers, so the rules can be tested without HTTP.
How:   Every call loads the document from the store; writes go through
       store.mutate() and persist the whole document before returning.
Who:   Called by the /api/qanda/questions route handlers.

Ordering:
    list_questions returns the collection exactly as stored. "Unread first"
    and similar views are the UI's job.
"""

import logging
from typing import List, Optional, Tuple

from church_api.exceptions import NotFoundError, ValidationError
from church_api.models.document import Document
from church_api.models.question import Question
from church_api.schemas.common import MessageResponse
from church_api.schemas.question import QuestionCreate, QuestionUpdate
from church_api.store import JsonDocumentStore
from church_api.utils import epoch_millis, next_record_id, parse_record_id

logger = logging.getLogger(__name__)

DEFAULT_NAME = "Anonymous"


class QuestionService:
    """
    Stateless service for the `qanda_questions` collection.

    Responsibilities:
        - list_questions(): the whole collection
        - create_question(): validate, assign id/timestamp, append
        - mark_read(): three-way isRead update
        - delete_question(): remove by id
    """

    async def list_questions(self, store: JsonDocumentStore) -> List[Question]:
        document = await store.load()
        return document.qanda_questions

    async def create_question(
        self, store: JsonDocumentStore, payload: QuestionCreate
    ) -> Question:
        """
        Submit a new question.

        Raises:
            ValidationError: text missing or blank (nothing is written).
        """
        text = (payload.text or "").strip()
        if not text:
            raise ValidationError(message="Question text is required", field="text")

        async with store.mutate() as document:
            now_ms = epoch_millis()
            question = Question(
                id=next_record_id((q.id for q in document.qanda_questions), now_ms),
                name=payload.name or DEFAULT_NAME,
                text=text,
                is_read=False,
                timestamp=now_ms,
            )
            document.qanda_questions.append(question)

        logger.info("Question %d submitted", question.id)
        return question

    async def mark_read(
        self, store: JsonDocumentStore, raw_id: str, payload: QuestionUpdate
    ) -> Question:
        """
        Set isRead on one question; an omitted isRead means true.

        Raises:
            NotFoundError: No question has this id (or the id is not numeric).
        """
        async with store.mutate() as document:
            _, question = self._find(document, raw_id)
            question.is_read = payload.resolved_is_read()

        logger.info("Question %d marked isRead=%s", question.id, question.is_read)
        return question

    async def delete_question(self, store: JsonDocumentStore, raw_id: str) -> MessageResponse:
        """
        Raises:
            NotFoundError: No question has this id; the collection is unchanged.
        """
        async with store.mutate() as document:
            index, question = self._find(document, raw_id)
            del document.qanda_questions[index]

        logger.info("Question %d deleted", question.id)
        return MessageResponse(message="Question deleted")

    @staticmethod
    def _find(document: Document, raw_id: str) -> Tuple[int, Question]:
        question_id: Optional[int] = parse_record_id(raw_id)
        if question_id is not None:
            for index, question in enumerate(document.qanda_questions):
                if question.id == question_id:
                    return index, question
        raise NotFoundError(resource="question", resource_id=raw_id)


# ── Singleton Instance ────────────────────────────────────────────────────
question_service = QuestionService()
