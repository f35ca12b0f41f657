"""
Children's Church API — JSON Document Store
=============================================

What:  Owns the single JSON file holding both collections; exposes
       initialize / load / save and a locked read-modify-write helper.
Why:   Centralizes every touch of the backing file in one place. Services
       never open the file themselves.
How:   Whole-document reads and whole-document writes with async file I/O
       (aiofiles). There is no partial-update API.
Who:   Injected into route handlers via FastAPI's Depends(get_document_store).
When:  The file is created on startup (or lazily on first load); it is read
       on every request and rewritten on every successful mutation.

Write path:
    save() serializes the full document to a temporary sibling file and then
    renames it over the real one, so readers see either the old or the new
    document, never a half-written one.

Concurrency:
    mutate() holds a per-store asyncio.Lock across load → change → save, so
    two writes in the same process can no longer lose each other's changes
    (the previous Node service let the last writer win). Plain reads take no
    lock. Several processes sharing one file still race; run a single worker.
"""

import asyncio
import json
import logging
import os
import uuid
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator, Union

import aiofiles
from pydantic import ValidationError as PydanticValidationError

from church_api.config import settings
from church_api.exceptions import CorruptStoreError, StoreError
from church_api.models.document import Document

logger = logging.getLogger(__name__)

# What: Indentation used for every write, matching the files already deployed
JSON_INDENT = 2


class JsonDocumentStore:
    """
    Flat-file store for the Document.

    Attributes:
        path: Location of the JSON document on disk.
    """

    def __init__(self, path: Union[str, Path, None] = None):
        """
        Args:
            path: Override the document location (used in tests).
                  If None, uses settings.data_file.
        """
        self.path = Path(path or settings.data_file)
        self._lock = asyncio.Lock()

    async def initialize(self) -> bool:
        """
        Create the document file with two empty collections if it is absent.

        Idempotent: an existing file is never touched. Exclusive-create mode
        makes this hold even when two callers race to initialize.

        Returns:
            True if the file was created by this call, False if it existed.

        Raises:
            StoreError: The directory or file could not be created.
        """
        if self.path.exists():
            return False

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            async with aiofiles.open(self.path, "x", encoding="utf-8") as f:
                await f.write(self._serialize(Document.empty()))
        except FileExistsError:
            return False
        except OSError as e:
            logger.error("Failed to initialize document store at %s: %s", self.path, str(e))
            raise StoreError(context={"path": str(self.path), "os_error": str(e)})

        logger.info("Initialized empty document store at %s", self.path)
        return True

    async def load(self) -> Document:
        """
        Read and parse the whole document.

        A missing file is initialized first. The file is never repaired: any
        content that is not a JSON object of the expected shape is reported
        as CorruptStoreError.

        Raises:
            CorruptStoreError: The file is not a valid document.
            StoreError: The file could not be read.
        """
        if not self.path.exists():
            await self.initialize()

        try:
            async with aiofiles.open(self.path, "r", encoding="utf-8") as f:
                raw = await f.read()
        except OSError as e:
            logger.error("Failed to read document store %s: %s", self.path, str(e))
            raise StoreError(context={"path": str(self.path), "os_error": str(e)})

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise CorruptStoreError(
                context={"path": str(self.path), "reason": f"invalid JSON: {e}"},
            )

        if not isinstance(data, dict):
            raise CorruptStoreError(
                context={"path": str(self.path), "reason": "top level is not an object"},
            )

        try:
            return Document.model_validate(data)
        except PydanticValidationError as e:
            raise CorruptStoreError(
                context={
                    "path": str(self.path),
                    "reason": "records do not match the expected shape",
                    "errors": e.error_count(),
                },
            )

    async def save(self, document: Document) -> None:
        """
        Overwrite the backing file with the full document.

        This is the only mutation path of the store.

        Raises:
            StoreError: The document could not be written. The previous file
                        is left in place.
        """
        payload = self._serialize(document)
        tmp_path = self.path.with_name(f".{self.path.name}.{uuid.uuid4().hex[:8]}.tmp")

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            async with aiofiles.open(tmp_path, "w", encoding="utf-8") as f:
                await f.write(payload)
            os.replace(tmp_path, self.path)
        except OSError as e:
            logger.error("Failed to write document store %s: %s", self.path, str(e))
            if tmp_path.exists():
                tmp_path.unlink()
            raise StoreError(context={"path": str(self.path), "os_error": str(e)})

        logger.debug(
            "Saved document: %d questions, %d notes",
            len(document.qanda_questions),
            len(document.scripture_notes),
        )

    @asynccontextmanager
    async def mutate(self) -> AsyncGenerator[Document, None]:
        """
        Locked read-modify-write of the whole document.

        Usage:
            async with store.mutate() as document:
                document.qanda_questions.append(question)

        The document is saved only when the block exits cleanly; an exception
        raised inside the block (e.g. NotFoundError) leaves the file untouched.
        """
        async with self._lock:
            document = await self.load()
            yield document
            await self.save(document)

    @staticmethod
    def _serialize(document: Document) -> str:
        return json.dumps(document.to_json_dict(), indent=JSON_INDENT, ensure_ascii=False)


# ── Singleton Instance ────────────────────────────────────────────────────
# One store (and one lock) per process for the configured file
document_store = JsonDocumentStore()


def get_document_store() -> JsonDocumentStore:
    """
    FastAPI dependency that provides the process-wide document store.

    Tests replace it through app.dependency_overrides with a store on a
    temporary path.
    """
    return document_store
