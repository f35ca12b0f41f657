# Routes package init
"""
Children's Church API — API Routes Package
============================================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - questions.py:  GET/POST        /api/qanda/questions
                     PUT/DELETE      /api/qanda/questions/{id}
    - notes.py:      GET/POST        /api/notes
                     GET/PUT/DELETE  /api/notes/{id}
    - health.py:     GET             /health

Design Principle:
    Routes are THIN: they read the path and body, call a service, and let the
    global exception handlers turn failures into status codes.
"""
