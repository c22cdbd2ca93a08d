"""
REST Notes — Test Configuration (conftest.py)
==============================================

What:  Shared pytest fixtures for the entire test suite.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── note_repository / tag_repository: in-memory stores (no DB)
    ├── note_service / tag_service: services wired to the in-memory stores
    └── test_client: HTTPX AsyncClient against the app, backed by a
        throw-away SQLite database whose schema is rebuilt per test
"""

import os
import tempfile

# Override settings for testing BEFORE any restnotes import
os.environ["DATABASE_URL"] = (
    f"sqlite+aiosqlite:///{tempfile.mkdtemp(prefix='restnotes_test_')}/test.db"
)
os.environ["LOG_LEVEL"] = "WARNING"
os.environ.pop("PUBLIC_BASE_URL", None)
os.environ.pop("AUTO_CREATE_SCHEMA", None)

from typing import Dict, List, Optional, Sequence  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from restnotes.models.note import Note  # noqa: E402
from restnotes.models.tag import Tag  # noqa: E402
from restnotes.repositories.base import NoteRepository, TagRepository  # noqa: E402
from restnotes.services.note_service import NoteService  # noqa: E402
from restnotes.services.tag_service import TagService  # noqa: E402


# ══════════════════════════════════════════════════════════════════════════
# In-Memory Store
# ══════════════════════════════════════════════════════════════════════════


class InMemoryNoteRepository(NoteRepository):
    """Dict-backed note store; ids are assigned 1, 2, 3, ... like the database."""

    def __init__(self):
        self.rows: Dict[int, Note] = {}
        self.saves = 0
        self._next_id = 1

    async def find_all(self) -> Sequence[Note]:
        return [self.rows[key] for key in sorted(self.rows)]

    async def find_by_id(self, note_id: int) -> Optional[Note]:
        return self.rows.get(note_id)

    async def find_all_by_tag(self, tag_id: int) -> Sequence[Note]:
        return [
            note for note in await self.find_all()
            if any(link.tag_id == tag_id for link in note.tag_links)
        ]

    async def save(self, note: Note) -> Note:
        if note.id is None:
            note.id = self._next_id
            self._next_id += 1
        self.rows[note.id] = note
        self.saves += 1
        return note

    async def delete(self, note_id: int) -> None:
        self.rows.pop(note_id, None)


class InMemoryTagRepository(TagRepository):

    def __init__(self, notes: InMemoryNoteRepository):
        self.notes = notes
        self.rows: Dict[int, Tag] = {}
        self._next_id = 1

    async def find_all(self) -> Sequence[Tag]:
        return [self.rows[key] for key in sorted(self.rows)]

    async def find_by_id(self, tag_id: int) -> Optional[Tag]:
        return self.rows.get(tag_id)

    async def save(self, tag: Tag) -> Tag:
        if tag.id is None:
            tag.id = self._next_id
            self._next_id += 1
        self.rows[tag.id] = tag
        return tag

    async def delete(self, tag_id: int) -> None:
        if self.rows.pop(tag_id, None) is None:
            return
        for note in self.notes.rows.values():
            note.tag_links = [link for link in note.tag_links if link.tag_id != tag_id]

    async def add(self, *names: str) -> List[Tag]:
        """Test helper: store tags by name and return them."""
        return [await self.save(Tag(name=name)) for name in names]


# ══════════════════════════════════════════════════════════════════════════
# Function-Scoped Fixtures
# ══════════════════════════════════════════════════════════════════════════


@pytest.fixture
def note_repository() -> InMemoryNoteRepository:
    return InMemoryNoteRepository()


@pytest.fixture
def tag_repository(note_repository) -> InMemoryTagRepository:
    return InMemoryTagRepository(note_repository)


@pytest.fixture
def note_service(note_repository, tag_repository) -> NoteService:
    return NoteService(note_repository, tag_repository)


@pytest.fixture
def tag_service(note_repository, tag_repository) -> TagService:
    return TagService(note_repository, tag_repository)


@pytest_asyncio.fixture
async def test_client():
    """
    HTTPX AsyncClient routed straight into the ASGI app.

    The schema is dropped and recreated for every test, so ids start at 1.
    The engine is disposed afterwards because pooled aiosqlite connections
    belong to the event loop of the test that opened them.
    """
    from restnotes.database import Base, engine
    from restnotes.main import app

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    await engine.dispose()
