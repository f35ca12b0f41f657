"""
Children's Church API — Scripture Note Service
================================================

What:  Business rules for scripture notes: list, get, create, replace, delete.
Why:   Encapsulates validation and timestamp handling, independent of HTTP.
How:   Reads load the document from the store; writes go through
       store.mutate() and persist the whole document before returning.
Who:   Called by the /api/notes route handlers.

Update semantics:
    PUT is a full replace of title, verse and content. updatedAt is refreshed
    on every update; createdAt never changes after creation.
"""

import logging
from typing import List, Optional, Tuple

from church_api.exceptions import NotFoundError, ValidationError
from church_api.models.document import Document
from church_api.models.note import Note
from church_api.schemas.common import MessageResponse
from church_api.schemas.note import NoteCreate, NoteUpdate
from church_api.store import JsonDocumentStore
from church_api.utils import epoch_millis, next_record_id, parse_record_id, utc_now_iso

logger = logging.getLogger(__name__)


class NoteService:
    """
    Stateless service for the `scripture_notes` collection.

    Error Handling Strategy:
        Validation runs before the store is touched, so a rejected request
        never reads or writes the file. Store faults (StoreError,
        CorruptStoreError) propagate unchanged to the global handlers.
    """

    async def list_notes(self, store: JsonDocumentStore) -> List[Note]:
        document = await store.load()
        return document.scripture_notes

    async def get_note(self, store: JsonDocumentStore, raw_id: str) -> Note:
        """
        Raises:
            NotFoundError: No note has this id (or the id is not numeric).
        """
        document = await store.load()
        _, note = self._find(document, raw_id)
        return note

    async def create_note(self, store: JsonDocumentStore, payload: NoteCreate) -> Note:
        """
        Raises:
            ValidationError: title or content missing/empty.
        """
        self._validate(payload)

        async with store.mutate() as document:
            now_iso = utc_now_iso()
            note = Note(
                id=next_record_id((n.id for n in document.scripture_notes), epoch_millis()),
                title=payload.title,
                verse=payload.verse or "",
                content=payload.content,
                created_at=now_iso,
                updated_at=now_iso,
            )
            document.scripture_notes.append(note)

        logger.info("Note %d created", note.id)
        return note

    async def update_note(
        self, store: JsonDocumentStore, raw_id: str, payload: NoteUpdate
    ) -> Note:
        """
        Replace title, verse and content of an existing note.

        Raises:
            ValidationError: title or content missing/empty (checked first).
            NotFoundError: No note has this id.
        """
        self._validate(payload)

        async with store.mutate() as document:
            _, note = self._find(document, raw_id)
            note.title = payload.title
            note.verse = payload.verse or ""
            note.content = payload.content
            note.updated_at = utc_now_iso()

        logger.info("Note %d updated", note.id)
        return note

    async def delete_note(self, store: JsonDocumentStore, raw_id: str) -> MessageResponse:
        """
        Raises:
            NotFoundError: No note has this id; the collection is unchanged.
        """
        async with store.mutate() as document:
            index, note = self._find(document, raw_id)
            del document.scripture_notes[index]

        logger.info("Note %d deleted", note.id)
        return MessageResponse(message="Note deleted")

    @staticmethod
    def _validate(payload: NoteCreate) -> None:
        missing = [name for name in ("title", "content") if not getattr(payload, name)]
        if missing:
            raise ValidationError(
                message="Title and content are required",
                context={"fields": missing},
            )

    @staticmethod
    def _find(document: Document, raw_id: str) -> Tuple[int, Note]:
        note_id: Optional[int] = parse_record_id(raw_id)
        if note_id is not None:
            for index, note in enumerate(document.scripture_notes):
                if note.id == note_id:
                    return index, note
        raise NotFoundError(resource="note", resource_id=raw_id)


# ── Singleton Instance ────────────────────────────────────────────────────
# NoteService is stateless; the store is passed in on every call
note_service = NoteService()
