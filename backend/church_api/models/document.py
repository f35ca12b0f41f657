"""
Children's Church API — Document Model
========================================

What:  The single persisted object: two named, ordered collections.
How:   Parsed from the JSON file on every load, dumped back whole on every save.

File layout:
    {
      "qanda_questions": [Question, ...],
      "scripture_notes": [Note, ...]
    }

Both collections are always present after parsing; a missing or null field is
read as an empty list. There is no retention policy: the document only grows
through creates and shrinks through deletes.
"""

from typing import Any, Dict, List

from pydantic import BaseModel, Field, field_validator

from church_api.models.note import Note
from church_api.models.question import Question


class Document(BaseModel):
    """The whole JSON document owned by the store."""

    qanda_questions: List[Question] = Field(default_factory=list)
    scripture_notes: List[Note] = Field(default_factory=list)

    model_config = {"extra": "allow"}

    @field_validator("qanda_questions", "scripture_notes", mode="before")
    @classmethod
    def default_missing_collection(cls, v: Any) -> Any:
        """A null collection is treated the same as a missing one."""
        return [] if v is None else v

    def to_json_dict(self) -> Dict[str, Any]:
        """Dump using the camelCase wire names the file and the UI expect."""
        return self.model_dump(by_alias=True)

    @classmethod
    def empty(cls) -> "Document":
        return cls(qanda_questions=[], scripture_notes=[])
