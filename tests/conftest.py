import asyncio
import os
import tempfile

os.environ.setdefault("DATABASE_PATH", os.path.join(tempfile.gettempdir(), "epg_guide_tests", "channels.db"))

import pytest

from epg_guide.database import close_db, init_db, session_scope
from epg_guide.schemas import ProgrammeEntry, association_table_adapter
from epg_guide.services.db_service import store_schedule_records
from epg_guide.services.guide_types import ScheduleRecord


def make_programme(**fields) -> ProgrammeEntry:
    """Build a programme entry the way it arrives from programs.json"""
    fields.setdefault("site", "example.com")
    return ProgrammeEntry.model_validate(fields)


def seed_store(database_path: str, records: list[ScheduleRecord]) -> None:
    """Create the store at database_path and append records"""
    async def _seed():
        await init_db(database_path)
        try:
            async with session_scope() as session:
                await store_schedule_records(session, records)
        finally:
            await close_db()

    asyncio.run(_seed())


def run_with_store(database_path: str, work):
    """Run work(session) inside one event loop against an initialized store"""
    async def _run():
        await init_db(database_path)
        try:
            async with session_scope() as session:
                return await work(session)
        finally:
            await close_db()

    return asyncio.run(_run())


@pytest.fixture
def database_path(tmp_path) -> str:
    return str(tmp_path / "channels.db")


@pytest.fixture
def associations_raw() -> dict:
    return {
        "bbc.uk": [
            {
                "site": "bbc.co.uk",
                "channel": "bbc.uk",
                "start": 1700000000,
                "stop": 1700003600,
                "title": [{"lang": "en", "value": "News & Weather"}],
                "description": [{"lang": "en", "value": "The  latest\nheadlines"}],
                "categories": [{"lang": "en", "value": "News"}],
                "icons": ["https://img.example.com/news.png"],
            },
            {
                "site": "tvguide.co.uk",
                "channel": "bbc.uk",
                "start": 1700003600,
                "title": [{"lang": "en", "value": "No End Time"}],
            },
        ],
        "cnn.us": [
            {
                "site": "cnn.com",
                "channel": "cnn.us",
                "start": 1700001800,
                "stop": 1700005400,
                "title": [{"lang": "en", "value": "Newsroom"}],
            },
        ],
        "orphan.fr": [
            {
                "site": "orphan.fr",
                "channel": "orphan.fr",
                "start": 1700000000,
                "stop": 1700001800,
                "title": [{"lang": "fr", "value": "Journal"}],
            },
        ],
    }


@pytest.fixture
def associations(associations_raw):
    return association_table_adapter.validate_python(associations_raw)


@pytest.fixture
def schedule_records() -> list[ScheduleRecord]:
    return [
        ScheduleRecord(xmltv_id="cnn.us", name="CNN", logo=None),
        ScheduleRecord(xmltv_id="bbc.uk", name="BBC One", logo="https://logo.example.com/bbc.png"),
        ScheduleRecord(xmltv_id="bbc.uk", name="BBC 1", logo=None),
        ScheduleRecord(xmltv_id="cnn.us", name="CNN International", logo="https://logo.example.com/cnn.png"),
        ScheduleRecord(xmltv_id="unused.de", name="Unused", logo=None),
    ]
