"""
Association Table Service

Loads the channel -> programme/site table prepared by the grabbers.
"""
import json
import logging
from pathlib import Path

from pydantic import ValidationError

from epg_guide.schemas import AssociationTable, association_table_adapter
from epg_guide.services.guide_types import GuideConfigurationError
from epg_guide.utils.file_operations import read_text_file


logger = logging.getLogger(__name__)


def parse_association_table(content: str, source: str = "<string>") -> AssociationTable:
    """
    Parse and validate association table JSON

    Args:
        content: JSON object mapping xmltv_id to a non-empty programme array
        source: Name used in error messages

    Returns:
        Association table in file order

    Raises:
        GuideConfigurationError: If the content is not valid JSON or fails validation
    """
    try:
        raw = json.loads(content)
    except json.JSONDecodeError as e:
        raise GuideConfigurationError(f"Association file {source} is not valid JSON: {e}") from e

    try:
        table = association_table_adapter.validate_python(raw)
    except ValidationError as e:
        raise GuideConfigurationError(
            f"Association file {source} failed validation: {e.error_count()} error(s)\n{e}"
        ) from e

    return table


async def load_association_table(path: Path | str) -> AssociationTable:
    """
    Read the association table from disk

    Args:
        path: Location of programs.json

    Returns:
        Association table in file order

    Raises:
        FileNotFoundError: If the file does not exist
        GuideConfigurationError: If the file content is unusable
    """
    logger.info(f"Loading association table from {path}")
    content = await read_text_file(path)
    table = parse_association_table(content, source=str(path))

    programme_count = sum(len(entries) for entries in table.values())
    logger.info(f"Loaded {len(table)} channels with {programme_count} programmes")

    return table
