# Middleware package init
"""
REST Notes — Middleware Package
================================

Middleware Chain:
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    Request ID runs first so the access log line and any error response
    carry the same id.
"""
