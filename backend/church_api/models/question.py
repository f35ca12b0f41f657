"""
Children's Church API — Question Record
=========================================

What:  One audience question as stored in `qanda_questions`.
Wire format: camelCase `isRead`, epoch-millisecond `id` and `timestamp`.

Lifecycle:
    1. Created by a submission (isRead = false)
    2. isRead flipped by the host through PUT
    3. Removed by an explicit DELETE; there is no expiry
"""

from pydantic import BaseModel, Field


class Question(BaseModel):
    """A question submitted by the audience."""

    id: int = Field(description="Identifier, the creation time in epoch milliseconds")
    name: str = Field(default="Anonymous", description="Who asked; 'Anonymous' when omitted")
    text: str = Field(description="The question, trimmed")
    is_read: bool = Field(default=False, alias="isRead", description="Whether the host has read it")
    timestamp: int = Field(description="Creation time in epoch milliseconds")

    # populate_by_name: services build records with snake_case keywords
    # extra="allow": hand-added fields in the file survive a rewrite
    model_config = {"populate_by_name": True, "extra": "allow"}
