"""
Children's Church API — Application Package
=============================================

What:  Backend for the children's church Q&A screen and scripture notes.

Architecture Note:
    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← validation, ids, timestamps
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← Pydantic records and bodies
    ├─────────────────────────────────────┤
    │     Document Store (Persistence)    │  ← one JSON file, whole rewrites
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
