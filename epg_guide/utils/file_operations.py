"""
File operation utilities

This module handles reading inputs and writing the guide without leaving partial files.
"""
import logging
import os
import tempfile
from pathlib import Path

import aiofiles


logger = logging.getLogger(__name__)


async def read_text_file(path: Path | str, encoding: str = "utf-8") -> str:
    """
    Read a whole text file

    Raises:
        FileNotFoundError: If the file does not exist
        OSError: If the file can't be read
    """
    async with aiofiles.open(path, "r", encoding=encoding) as f:
        return await f.read()


async def write_text_file(path: Path | str, content: str, encoding: str = "utf-8") -> Path:
    """
    Write text atomically

    Content goes to a temporary file in the target directory which then
    replaces the destination, so readers never see a partial document.

    Args:
        path: Destination file
        content: Text to write
        encoding: Output encoding

    Returns:
        Path of the written file
    """
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)

    fd, temp_name = tempfile.mkstemp(dir=target.parent, prefix=f".{target.name}.", suffix=".tmp")
    os.close(fd)
    temp_file = Path(temp_name)

    try:
        async with aiofiles.open(temp_file, "w", encoding=encoding, newline="") as f:
            await f.write(content)
        os.chmod(temp_file, 0o644)
        os.replace(temp_file, target)
    except BaseException:
        cleanup_temp_file(temp_file)
        raise

    size_kb = len(content.encode(encoding)) / 1024
    logger.info(f"Wrote {size_kb:.2f} KB to {target}")

    return target


def cleanup_temp_file(file_path: Path) -> bool:
    """
    Safely delete a temporary file

    Args:
        file_path: Path to file to delete

    Returns:
        True if deleted successfully, False otherwise
    """
    if not file_path or not file_path.exists():
        return False

    try:
        file_path.unlink()
        logger.debug(f"Cleaned up temporary file: {file_path}")
        return True
    except (OSError, PermissionError) as e:
        logger.warning(f"Failed to delete temporary file {file_path}: {e}")
        return False
