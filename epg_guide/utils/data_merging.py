"""
Data merging utilities

This module collapses channel record variants into canonical channels and
flattens per-channel programme lists into one emission sequence.
"""
import logging
from collections.abc import Mapping, Sequence

from epg_guide.schemas import ProgrammeEntry
from epg_guide.services.guide_types import CanonicalChannel, GuideConfigurationError, ScheduleRecord

logger = logging.getLogger(__name__)


def sort_records_by_name(records: Sequence[ScheduleRecord]) -> list[ScheduleRecord]:
    """Stable ascending sort on display name; ties keep store order."""
    return sorted(records, key=lambda record: record.name or "")


def extract_country(xmltv_id: str) -> str | None:
    """
    Derive a country code from the second dot-delimited segment of an ID.

    Args:
        xmltv_id: Channel identifier such as 'abc.us.example'

    Returns:
        Upper-cased segment ('US'), or None when the ID has no such segment
    """
    segments = xmltv_id.split(".")
    if len(segments) < 2 or not segments[1]:
        return None
    return segments[1].upper()


def merge_channels(sorted_records: Sequence[ScheduleRecord]) -> list[CanonicalChannel]:
    """
    Fold name-sorted records into one canonical channel per xmltv_id.

    The first record for an ID fixes its position in the result. Later records
    contribute display names not seen yet and a logo if none was set.

    Args:
        sorted_records: Records already ordered by sort_records_by_name

    Returns:
        Canonical channels in first-seen order, without site URLs
    """
    merged: dict[str, CanonicalChannel] = {}

    for record in sorted_records:
        current = merged.get(record.xmltv_id)
        if current is None:
            merged[record.xmltv_id] = CanonicalChannel(
                id=record.xmltv_id,
                display_names=[record.name],
                logo=record.logo or None,
                country=extract_country(record.xmltv_id),
            )
            continue

        if not current.logo and record.logo:
            current.logo = record.logo
            logger.debug("Took logo for %s from variant '%s'", record.xmltv_id, record.name)

        if record.name not in current.display_names:
            current.display_names.append(record.name)

    return list(merged.values())


def build_site_url(site: str) -> str:
    return f"https://{site}"


def assign_sites(
    channels: Sequence[CanonicalChannel],
    associations: Mapping[str, Sequence[ProgrammeEntry | None]]
) -> None:
    """
    Set each channel's site URL from its first non-null association entry.

    Args:
        channels: Canonical channels, updated in place
        associations: Association table keyed by xmltv_id

    Raises:
        GuideConfigurationError: If a channel has no association entry
    """
    for channel in channels:
        first = next(
            (entry for entry in associations.get(channel.id) or () if entry is not None),
            None,
        )
        if first is None:
            raise GuideConfigurationError(
                f"Channel '{channel.id}' has no site association"
            )
        channel.site = build_site_url(first.site)


def flatten_programmes(
    associations: Mapping[str, Sequence[ProgrammeEntry | None]]
) -> list[ProgrammeEntry | None]:
    """Concatenate programme lists in association-table order; nulls pass through."""
    programmes: list[ProgrammeEntry | None] = []
    for entries in associations.values():
        programmes.extend(entries)
    return programmes


def merge_guide(
    records: Sequence[ScheduleRecord],
    associations: Mapping[str, Sequence[ProgrammeEntry | None]]
) -> tuple[list[CanonicalChannel], list[ProgrammeEntry | None]]:
    """
    Build the channel and programme sequences for serialization.

    Args:
        records: Raw store records for the resolved channel IDs
        associations: Association table keyed by xmltv_id

    Returns:
        Tuple of (channels, programmes)
    """
    channels = merge_channels(sort_records_by_name(records))
    assign_sites(channels, associations)
    programmes = flatten_programmes(associations)

    dropped = len(associations) - len(channels)
    if dropped > 0:
        logger.debug("%s associated channel(s) have no store records", dropped)

    return channels, programmes
