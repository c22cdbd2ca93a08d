"""
REST Notes — Application Package Initializer
=============================================

What: Marks the `restnotes` directory as a Python package.
Who:  Imported by uvicorn (`restnotes.main:app`), Alembic and pytest.

Architecture Note:
    The service is a thin hypermedia layer over a persistence abstraction:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │   Services + Assemblers (Logic)     │  ← Tag resolution, links, envelopes
    ├─────────────────────────────────────┤
    │   Repositories (Store Interface)    │  ← find_all / find_by_id / save / delete
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    Services only talk to the repository interfaces, so tests swap the
    SQLAlchemy store for an in-memory one.
"""

__version__ = "1.0.0"
