"""
Structured logging helpers for consistent log formatting.

Provides utilities for structured, clean logging without excessive decorative separators.
"""
import logging
from datetime import datetime, timezone


def log_section_start(logger: logging.Logger, section_name: str) -> None:
    """
    Log the start of a processing section.

    Args:
        logger: Logger instance
        section_name: Name of the section being started
    """
    logger.info(f"Starting: {section_name}")


def log_section_end(logger: logging.Logger, section_name: str) -> None:
    """
    Log the end of a processing section.

    Args:
        logger: Logger instance
        section_name: Name of the section being ended
    """
    logger.info(f"Completed: {section_name}")


def log_generation_start(logger: logging.Logger) -> None:
    """Log guide generation start."""
    logger.info(f"Guide generation started at {datetime.now(timezone.utc).isoformat()}")


def log_generation_end(logger: logging.Logger) -> None:
    """Log guide generation end."""
    logger.info(f"Guide generation completed at {datetime.now(timezone.utc).isoformat()}")


def log_merge_summary(
    logger: logging.Logger,
    records_count: int,
    channels_count: int,
    programs_count: int
) -> None:
    """
    Log merge operation summary.

    Args:
        logger: Logger instance
        records_count: Number of store records folded
        channels_count: Number of canonical channels
        programs_count: Number of flattened programmes
    """
    logger.info(
        f"Merge summary - Records: {records_count}, Channels: {channels_count}, "
        f"Programs: {programs_count}"
    )
