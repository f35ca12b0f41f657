# Services package init
"""
Children's Church API — Services Layer
========================================

What:  Business logic between routes (HTTP) and the document store.
Why:   Routes handle HTTP; services handle validation, identity and shaping.

Service Inventory:
    - QuestionService: audience questions (qanda_questions)
    - NoteService: scripture notes (scripture_notes)

Both are stateless singletons; the store is passed in on every call.
"""
