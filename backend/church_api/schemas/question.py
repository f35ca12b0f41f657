"""
Children's Church API — Question Request Schemas
==================================================

What:  Request bodies for POST and PUT on /api/qanda/questions.
Why:   Fields are optional at the schema level; the service decides what is
       missing so the client gets "Question text is required" (400) instead of
       a generic schema error.
"""

from typing import Optional

from pydantic import BaseModel, Field, StrictBool


class QuestionCreate(BaseModel):
    """Body of POST /api/qanda/questions."""

    name: Optional[str] = Field(default=None, description="Asker's name; defaults to 'Anonymous'")
    text: Optional[str] = Field(default=None, description="The question (required, non-blank)")


class QuestionUpdate(BaseModel):
    """
    Body of PUT /api/qanda/questions/{id}.

    isRead is a three-way field:
        absent or null → mark as read (true)
        false          → mark as unread
        true           → mark as read

    Only JSON booleans are accepted; strings such as "no" are rejected.
    """

    is_read: Optional[StrictBool] = Field(
        default=None,
        alias="isRead",
        description="New read state; omitted means 'mark as read'",
    )

    model_config = {"populate_by_name": True}

    def resolved_is_read(self) -> bool:
        """The read state to store, applying the omitted-means-true rule."""
        if self.is_read is None:
            return True
        return self.is_read
