"""
Database operations for the channel record store

This module contains the read and seed operations for channel name/logo variants.
"""
import logging
from collections.abc import Collection, Sequence
from datetime import datetime, timezone

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from epg_guide.models import ChannelRecord
from epg_guide.services.guide_types import ScheduleRecord


logger = logging.getLogger(__name__)


async def find_schedule_records(
    db: AsyncSession,
    xmltv_ids: Collection[str]
) -> list[ScheduleRecord]:
    """
    Fetch every record whose xmltv_id is in the given set.

    Args:
        db: Database session
        xmltv_ids: Channel identifiers to match

    Returns:
        Matching records in insertion order
    """
    if not xmltv_ids:
        logger.debug("No channel IDs requested")
        return []

    stmt = (
        select(ChannelRecord)
        .where(ChannelRecord.xmltv_id.in_(list(xmltv_ids)))
        .order_by(ChannelRecord.id)
    )
    result = await db.execute(stmt)
    rows = result.scalars().all()

    logger.info("Found %s records for %s channel IDs", len(rows), len(xmltv_ids))

    return [
        ScheduleRecord(xmltv_id=row.xmltv_id, name=row.name, logo=row.logo)
        for row in rows
    ]


async def store_schedule_records(db: AsyncSession, records: Sequence[ScheduleRecord]) -> int:
    """
    Append channel records to the store.

    Args:
        db: Database session
        records: Records to insert, kept in the given order

    Returns:
        Number of records inserted
    """
    record_list = list(records)
    if not record_list:
        logger.debug("No records to store")
        return 0

    now = datetime.now(timezone.utc)
    payload = [
        {
            "xmltv_id": record.xmltv_id,
            "name": record.name,
            "logo": record.logo,
            "created_at": now,
        }
        for record in record_list
    ]

    await db.execute(insert(ChannelRecord), payload)

    logger.info("Stored %s channel records", len(payload))
    return len(payload)
