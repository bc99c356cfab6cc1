"""
Logging setup.

Library modules only create named loggers (logging.getLogger(__name__)) and
never install handlers; applications call configure_logging() once at startup.
"""

import logging
from typing import Optional, Union


def configure_logging(level: Optional[Union[int, str]] = None) -> None:
    """
    Configure root logging with a timestamped stream handler.

    Args:
        level: Logging level (name or number). If None, the level comes from
               LODASH_LITE_LOG_LEVEL (default WARNING).
    """
    if level is None:
        from lodash_lite.config.settings import get_settings

        level = get_settings().logging.level_number

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(),
        ]
    )
