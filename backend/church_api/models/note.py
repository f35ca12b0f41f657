"""
Children's Church API — Scripture Note Record
===============================================

What:  One study note as stored in `scripture_notes`.
Wire format: camelCase `createdAt` / `updatedAt` holding ISO-8601 UTC strings
with millisecond precision (e.g. "2024-01-15T12:00:00.000Z").

Lifecycle:
    1. Created with createdAt == updatedAt
    2. Fully replaced (title, verse, content) on update; updatedAt refreshed
    3. Removed by an explicit DELETE
"""

from pydantic import BaseModel, Field


class Note(BaseModel):
    """A scripture study note."""

    id: int = Field(description="Identifier, the creation time in epoch milliseconds")
    title: str = Field(description="Note title")
    verse: str = Field(default="", description="Scripture reference, empty when not given")
    content: str = Field(description="Note body")
    created_at: str = Field(alias="createdAt", description="Creation time (UTC ISO 8601)")
    updated_at: str = Field(alias="updatedAt", description="Last update time (UTC ISO 8601)")

    model_config = {"populate_by_name": True, "extra": "allow"}
