# Schemas package init
"""
Children's Church API — Request/Response Schemas
==================================================

What:  Pydantic models defining request bodies and non-record responses.
Why:   Input is accepted loosely here and checked by the services, so that a
       missing field becomes a 400 with a readable message rather than a
       schema error.
"""
