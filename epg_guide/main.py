import asyncio
import logging
import sys

from epg_guide.config import setup_logging
from epg_guide.services.guide_service import generate_guide


logger = logging.getLogger(__name__)


def main() -> int:
    """Generate guide.xml once and return a process exit status"""
    setup_logging()

    logger.info("="*60)
    logger.info("Generating guide.xml...")
    logger.info("="*60)

    try:
        asyncio.run(generate_guide())
    except Exception as e:
        logger.error("="*60)
        logger.error(f"Guide generation aborted: {e}")
        logger.error("="*60)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
