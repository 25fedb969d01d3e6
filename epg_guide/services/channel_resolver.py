"""
Channel Resolver

Determines which channels to render and fetches their records from the store.
"""
from collections.abc import Mapping, Sequence
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from epg_guide.schemas import ProgrammeEntry
from epg_guide.services.db_service import find_schedule_records
from epg_guide.services.guide_types import ScheduleRecord

logger = logging.getLogger(__name__)


def resolve_channel_ids(associations: Mapping[str, Sequence[ProgrammeEntry]]) -> list[str]:
    """Channel IDs of the association table, deduplicated in first-seen order."""
    return list(dict.fromkeys(associations))


async def fetch_schedule_records(
    db: AsyncSession,
    associations: Mapping[str, Sequence[ProgrammeEntry]]
) -> list[ScheduleRecord]:
    """
    Query the store for every channel in the association table

    Store errors are not handled here; they abort the run.

    Args:
        db: Database session
        associations: Association table keyed by xmltv_id

    Returns:
        Raw records as returned by the store
    """
    channel_ids = resolve_channel_ids(associations)
    logger.info(f"Resolving {len(channel_ids)} channel IDs against the record store")

    return await find_schedule_records(db, channel_ids)
