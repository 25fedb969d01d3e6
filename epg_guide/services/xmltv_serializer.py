"""
XMLTV Serializer Service

Renders canonical channels and programme entries into XMLTV text.
"""
from collections.abc import Iterable
import logging

from epg_guide.schemas import LocalizedText, ProgrammeEntry
from epg_guide.services.guide_types import CanonicalChannel
from epg_guide.utils.timezone import format_xmltv_timestamp
from epg_guide.utils.xml_escape import escape_string

logger = logging.getLogger(__name__)

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8" ?>'
LINE_END = "\r\n"


def convert_to_xmltv(
    channels: Iterable[CanonicalChannel],
    programmes: Iterable[ProgrammeEntry | None]
) -> str:
    """
    Render a complete XMLTV document.

    Args:
        channels: Canonical channels in emission order
        programmes: Programme entries in emission order

    Returns:
        Document text; each top-level element ends with CRLF
    """
    parts = [f"{XML_DECLARATION}<tv>{LINE_END}"]

    channel_count = 0
    for channel in channels:
        parts.append(_render_channel(channel))
        channel_count += 1

    programme_count = 0
    skipped = 0
    for programme in programmes:
        rendered = _render_programme(programme)
        if rendered is None:
            skipped += 1
            continue
        parts.append(rendered)
        programme_count += 1

    parts.append("</tv>")

    logger.info(
        "Serialized %s channels and %s programmes (%s skipped as null or without start/stop)",
        channel_count,
        programme_count,
        skipped,
    )
    return "".join(parts)


def _render_channel(channel: CanonicalChannel) -> str:
    """Render one channel element"""
    output = f'<channel id="{escape_string(channel.id)}">'
    for display_name in channel.display_names:
        output += f"<display-name>{escape_string(display_name)}</display-name>"
    if channel.logo:
        output += f'<icon src="{escape_string(channel.logo)}"/>'
    output += f"<url>{escape_string(channel.site)}</url>"
    output += f"</channel>{LINE_END}"
    return output


def _render_programme(programme: ProgrammeEntry | None) -> str | None:
    """Render one programme element, or None when it is null or has no time range"""
    # start or stop of 0 counts as missing
    if programme is None or not programme.start or not programme.stop:
        return None

    start = format_xmltv_timestamp(programme.start)
    stop = format_xmltv_timestamp(programme.stop)

    output = (
        f'<programme start="{start}" stop="{stop}" '
        f'channel="{escape_string(programme.channel)}">'
    )
    output += _render_localized("title", programme.title)
    output += _render_localized("desc", programme.description)
    output += _render_localized("category", programme.categories)
    for icon in programme.icons:
        output += f'<icon src="{escape_string(icon)}"/>'
    output += f"</programme>{LINE_END}"
    return output


def _render_localized(tag: str, values: Iterable[LocalizedText]) -> str:
    return "".join(
        f'<{tag} lang="{escape_string(item.lang)}">{escape_string(item.value)}</{tag}>'
        for item in values
    )
