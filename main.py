"""
lodash_lite – Main entry point.

Minimal bootstrap script to verify the package imports and logging is set up.
"""

import logging

import lodash_lite
from lodash_lite.utils.log import configure_logging

logger = logging.getLogger(__name__)


def main() -> None:
    """Configure logging and print a bootstrap confirmation message."""
    configure_logging()
    logger.info("lodash_lite %s loaded", lodash_lite.__version__)
    print(f"lodash_lite {lodash_lite.__version__} bootstrap complete")


if __name__ == "__main__":
    main()
