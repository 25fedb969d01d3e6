import logging

from lxml import etree # type: ignore

from epg_guide.services.guide_types import GuideConfigurationError

logger = logging.getLogger(__name__)


class XmltvValidationError(GuideConfigurationError):
    """Raised when a rendered document is not well-formed XMLTV"""
    pass


def validate_xmltv_document(xml: str) -> tuple[int, int]:
    """
    Parse a rendered guide back and count its top-level elements

    Args:
        xml: Complete document text including the XML declaration

    Returns:
        Tuple of (channel_count, programme_count)

    Raises:
        XmltvValidationError: If the document is malformed or has the wrong root
    """
    try:
        root = etree.fromstring(xml.encode("utf-8"))
    except etree.XMLSyntaxError as e:
        logger.error(f"Rendered guide is not well-formed: {e}")
        raise XmltvValidationError(f"Rendered guide is not well-formed: {e}") from e

    if root.tag != "tv":
        raise XmltvValidationError(f"Unexpected root element: {root.tag}")

    channel_count = len(root.findall("channel"))
    programme_count = len(root.findall("programme"))
    logger.debug(f"Validated guide: {channel_count} channels, {programme_count} programmes")

    return channel_count, programme_count
