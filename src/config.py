"""Configuration management for the songbook examples.

All configuration is read from environment variables.
"""
import logging
import os
from dataclasses import dataclass
from typing import Optional

VALID_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass
class ExamplesConfig:
    """Configuration for logging and the demonstration CLI (reads from environment)."""

    log_level: str = "INFO"
    log_file: Optional[str] = None
    log_file_max_bytes: int = 10485760  # 10 MB
    log_file_backup_count: int = 5
    filter_term: str = "daddy"

    @classmethod
    def from_environment(cls) -> 'ExamplesConfig':
        """Load configuration from environment variables.

        Returns:
            ExamplesConfig: Loaded configuration object

        Raises:
            ValueError: If a numeric variable is not an integer
        """
        return cls(
            log_level=os.getenv('SONGBOOK_LOG_LEVEL', 'INFO').upper(),
            log_file=os.getenv('SONGBOOK_LOG_FILE') or None,
            log_file_max_bytes=int(os.getenv('LOG_FILE_MAX_BYTES', '10485760')),
            log_file_backup_count=int(os.getenv('LOG_FILE_BACKUP_COUNT', '5')),
            filter_term=os.getenv('SONGBOOK_FILTER_TERM', 'daddy'),
        )

    def validate(self) -> None:
        """Validate configuration values.

        Raises:
            ValueError: If any configuration value is invalid
        """
        if self.log_level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid log_level: {self.log_level}. "
                f"Must be one of {', '.join(VALID_LOG_LEVELS)}"
            )
        if self.log_file_max_bytes <= 0:
            raise ValueError(
                f"Invalid log_file_max_bytes: {self.log_file_max_bytes}. Must be > 0"
            )
        if self.log_file_backup_count < 0:
            raise ValueError(
                f"Invalid log_file_backup_count: {self.log_file_backup_count}. Must be >= 0"
            )

    @property
    def numeric_log_level(self) -> int:
        return getattr(logging, self.log_level)
