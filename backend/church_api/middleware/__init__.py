# Middleware package init
"""
Children's Church API — Middleware Package
============================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    - Request ID first: every later log line can carry the correlation ID
    - Logging: records status and duration once the response is built
"""
