import logging
from logging.handlers import RotatingFileHandler
from typing import Optional

import colorlog

from src.config import ExamplesConfig

LOG_COLORS = {
    'DEBUG': 'bold_blue',
    'INFO': 'bold_green',
    'WARNING': 'bold_yellow',
    'ERROR': 'bold_red',
    'CRITICAL': 'bold_purple'
}


def setup_logging(config: Optional[ExamplesConfig] = None) -> None:
    """Configure the centralised logging settings.

    Args:
        config: Logging configuration (loaded from the environment when omitted)
    """
    if config is None:
        config = ExamplesConfig.from_environment()
    config.validate()

    logger = logging.getLogger()
    logger.setLevel(config.log_level)

    if not logger.hasHandlers():
        console_handler = logging.StreamHandler()
        console_formatter = colorlog.ColoredFormatter(
            "%(log_color)s%(levelname)s:%(name)s:%(message)s",
            log_colors=LOG_COLORS
        )
        console_handler.setFormatter(console_formatter)
        logger.addHandler(console_handler)

        if config.log_file:
            file_handler = RotatingFileHandler(
                config.log_file,
                maxBytes=config.log_file_max_bytes,
                backupCount=config.log_file_backup_count
            )
            file_formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s - (%(filename)s:%(lineno)d)'
            )
            file_handler.setFormatter(file_formatter)
            logger.addHandler(file_handler)
