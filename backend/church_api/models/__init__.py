# Models package init
"""
Children's Church API — Persisted Record Models
=================================================

What:  Pydantic models describing the on-disk JSON document and its records.
Why:   One definition of each record shape, shared by the store (parse and
       serialize the file) and the routes (response bodies).

Model Inventory:
    - document.py:  Document (the whole file)
    - question.py:  Question (one audience question)
    - note.py:      Note (one scripture note)
"""

from church_api.models.document import Document
from church_api.models.note import Note
from church_api.models.question import Question

__all__ = ["Document", "Note", "Question"]
