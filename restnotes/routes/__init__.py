# Routes package init
"""
REST Notes — API Routes Package
================================

Route Inventory:
    - index.py:   GET /                     (links to the collections)
    - notes.py:   /notes, /notes/{id}, /notes/{id}/tags
    - tags.py:    /tags, /tags/{id}, /tags/{id}/notes
    - health.py:  GET /health               (database probe)

Design Principle:
    Routes are THIN: they read the request, call a service, and hand the
    returned entities to an assembler. Status codes and the Location header
    are decided here; everything else lives in the services.
"""
