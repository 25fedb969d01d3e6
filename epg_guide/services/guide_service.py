"""
Guide Generation Service

Coordinates loading, merging, serialization and output of guide.xml.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path

from epg_guide.config import settings
from epg_guide.database import close_db, init_db, session_scope
from epg_guide.schemas import AssociationTable
from epg_guide.services.association_service import load_association_table
from epg_guide.services.channel_resolver import fetch_schedule_records
from epg_guide.services.xmltv_serializer import convert_to_xmltv
from epg_guide.services.xmltv_validation import validate_xmltv_document
from epg_guide.utils.data_merging import merge_guide
from epg_guide.utils.file_operations import write_text_file
from epg_guide.utils.logging_helpers import (
    log_generation_end,
    log_generation_start,
    log_merge_summary,
    log_section_end,
    log_section_start,
)


logger = logging.getLogger(__name__)


@dataclass(slots=True)
class GuideResult:
    output_path: Path
    started_at: datetime
    completed_at: datetime
    records_found: int
    channels_written: int
    programmes_total: int

    @property
    def duration_seconds(self) -> float:
        return max(0.0, (self.completed_at - self.started_at).total_seconds())

    def to_dict(self) -> dict:
        return {
            "output_path": str(self.output_path),
            "records_found": self.records_found,
            "channels_written": self.channels_written,
            "programmes_total": self.programmes_total,
            "started_at": self.started_at.isoformat(),
            "completed_at": self.completed_at.isoformat(),
            "duration_seconds": self.duration_seconds,
        }


class GuideGenerationPipeline:
    """Runs resolve, merge and serialize stages for one guide file."""

    def __init__(
        self,
        programs_path: Path | str,
        output_path: Path | str,
        *,
        validate_output: bool = True,
    ) -> None:
        self.programs_path = Path(programs_path)
        self.output_path = Path(output_path)
        self.validate_output = validate_output

    async def run(self) -> GuideResult:
        started_at = datetime.now(timezone.utc)

        associations = await self._load_associations()
        records = await self._resolve_records(associations)

        log_section_start(logger, "merge")
        channels, programmes = merge_guide(records, associations)
        log_merge_summary(logger, len(records), len(channels), len(programmes))
        log_section_end(logger, "merge")

        log_section_start(logger, "serialize")
        xml = convert_to_xmltv(channels, programmes)
        if self.validate_output:
            validate_xmltv_document(xml)
        await write_text_file(self.output_path, xml)
        log_section_end(logger, "serialize")

        return GuideResult(
            output_path=self.output_path,
            started_at=started_at,
            completed_at=datetime.now(timezone.utc),
            records_found=len(records),
            channels_written=len(channels),
            programmes_total=len(programmes),
        )

    async def _load_associations(self) -> AssociationTable:
        log_section_start(logger, "load associations")
        associations = await load_association_table(self.programs_path)
        log_section_end(logger, "load associations")
        return associations

    async def _resolve_records(self, associations: AssociationTable):
        log_section_start(logger, "resolve channels")
        async with session_scope() as session:
            records = await fetch_schedule_records(session, associations)
        log_section_end(logger, "resolve channels")
        return records


async def generate_guide(
    programs_path: Path | str | None = None,
    output_path: Path | str | None = None,
    database_path: str | None = None,
) -> GuideResult:
    """
    Main entry point for guide generation.

    The record store must already exist; it is never created here. Any
    failure is logged and re-raised, and the output file is only replaced
    once the whole document has been rendered.

    Returns:
        Summary of the generated guide
    """
    log_generation_start(logger)

    pipeline = GuideGenerationPipeline(
        programs_path or settings.programs_path,
        output_path or settings.output_path,
        validate_output=settings.validate_output,
    )

    try:
        await init_db(database_path, create_schema=False)
        result = await pipeline.run()
    except Exception as exc:
        logger.error("Guide generation failed: %s", exc, exc_info=True)
        raise
    finally:
        await close_db()

    logger.info(
        "Generated %s with %s channels in %.2fs",
        result.output_path,
        result.channels_written,
        result.duration_seconds,
    )
    log_generation_end(logger)
    return result
