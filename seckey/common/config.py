"""
Configuration settings for key encryption.
"""

from __future__ import annotations

import logging
import os

from seckey.common.exceptions import ConfigError
from seckey.security_level import SecurityLevel


class Config:
    """Central configuration class for all package settings."""

    def __init__(self) -> None:
        # Scrypt settings
        self.SECURITY_LEVEL_NAME: str = os.getenv("SECKEY_SECURITY_LEVEL", "default")
        self.SCRYPT_MAX_MEMORY: int = int(
            os.getenv("SECKEY_SCRYPT_MAX_MEMORY", str(1024 * 1024 * 1024))
        )  # Refuse levels needing more than 1GiB

        # Background execution
        self.BACKGROUND_WORKERS: int = int(os.getenv("SECKEY_BACKGROUND_WORKERS", "2"))

        # Logging
        self.LOG_LEVEL: int = getattr(
            logging,
            os.getenv("SECKEY_LOG_LEVEL", "WARNING").upper(),
            logging.WARNING,
        )
        self.LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @property
    def DEFAULT_SECURITY_LEVEL(self) -> SecurityLevel:  # noqa: N802
        """Security level used by encrypt when none is given."""
        try:
            return SecurityLevel.parse(self.SECURITY_LEVEL_NAME)
        except ValueError as err:
            msg = f"Invalid SECKEY_SECURITY_LEVEL: {err}"
            raise ConfigError(msg) from err
