"""
Children's Church API — Scripture Note Request Schemas
========================================================

What:  Request bodies for POST and PUT on /api/notes.
Why:   Create and update carry the same three fields; update is a full
       replace, so it reuses the create shape rather than a partial patch.
"""

from typing import Optional

from pydantic import BaseModel, Field


class NoteCreate(BaseModel):
    """Body of POST /api/notes."""

    title: Optional[str] = Field(default=None, description="Note title (required)")
    verse: Optional[str] = Field(default=None, description="Scripture reference; empty when omitted")
    content: Optional[str] = Field(default=None, description="Note body (required)")


class NoteUpdate(NoteCreate):
    """Body of PUT /api/notes/{id}. Every field is overwritten."""
