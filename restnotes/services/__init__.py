# Services package init
"""
REST Notes — Services Layer
============================

What:  Business logic between routes (HTTP) and repositories (persistence).

Service Inventory:
    - tag_resolver.py: TagReferenceResolver, tag URI → Tag
    - assemblers.py:   entity → resource with links, collection envelopes
    - note_service.py: NoteService, the /notes operations
    - tag_service.py:  TagService, the /tags operations

Services are built per request around that request's repositories
(see restnotes.dependencies), so they hold no state between requests.
"""
