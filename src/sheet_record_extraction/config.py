"""Configuration management for sheet record extraction.

This module provides centralized configuration using pydantic-settings.
All configuration options can be set via environment variables with the
SRE_ prefix, or via a .env file in the project root.

Environment Variables:
    SRE_LOG_LEVEL: Logging level (default: INFO)
    SRE_DEBUG: Enable debug mode (default: false)
    SRE_COERCE_DATES: Convert serial dates under date formats (default: true)
    SRE_DATE_SYSTEM: Workbook date system, "1900" or "1904" (default: 1900)
    SRE_BLANK_HEADER_PREFIX: Prefix for headers synthesized from blank
        header cells (default: col_)
    SRE_STRIP_HEADER_WHITESPACE: Strip whitespace around derived headers
        (default: true)
"""

import logging
from datetime import datetime
from typing import Any

from openpyxl.utils.datetime import MAC_EPOCH, WINDOWS_EPOCH
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Extraction settings loaded from environment variables.

    Example .env file:
        SRE_LOG_LEVEL=DEBUG
        SRE_DATE_SYSTEM=1904
    """

    model_config = SettingsConfigDict(
        env_prefix="SRE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # =========================================================================
    # Value Coercion Settings
    # =========================================================================

    coerce_dates: bool = True
    """Convert numeric serials to datetimes when the cell has a date format."""

    date_system: str = "1900"
    """Workbook date system. "1900" counts days from 1899-12-30."""

    # =========================================================================
    # Header Settings
    # =========================================================================

    blank_header_prefix: str = "col_"
    """Prefix for a header derived from a blank cell, followed by its letters."""

    strip_header_whitespace: bool = True
    """Strip surrounding whitespace from derived header text."""

    # =========================================================================
    # Logging Settings
    # =========================================================================

    log_level: str = "INFO"
    """Logging level: DEBUG, INFO, WARNING, ERROR, or CRITICAL."""

    debug: bool = False
    """Enable debug mode with per-cell logging."""

    # =========================================================================
    # Validators
    # =========================================================================

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a valid Python logging level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_v = v.upper()
        if upper_v not in valid_levels:
            raise ValueError(
                f"Invalid log level: {v}. Must be one of: {', '.join(valid_levels)}"
            )
        return upper_v

    @field_validator("date_system")
    @classmethod
    def validate_date_system(cls, v: str) -> str:
        """Validate the date system is one Excel supports."""
        v = v.strip()
        if v not in {"1900", "1904"}:
            raise ValueError(f"date_system must be '1900' or '1904', got {v!r}")
        return v

    @field_validator("blank_header_prefix")
    @classmethod
    def validate_blank_header_prefix(cls, v: str) -> str:
        """Synthesized headers must stay non-empty, so the prefix may not be."""
        if not v:
            raise ValueError("blank_header_prefix must be a non-empty string")
        return v

    # =========================================================================
    # Computed Properties
    # =========================================================================

    @property
    def date_epoch(self) -> datetime:
        """Get the serial-date epoch for the configured date system."""
        if self.date_system == "1904":
            return MAC_EPOCH
        return WINDOWS_EPOCH

    @property
    def log_level_int(self) -> int:
        """Get log level as integer for logging module."""
        level: int = getattr(logging, self.log_level)
        return level

    def to_safe_dict(self) -> dict[str, Any]:
        """Convert settings to a plain dictionary for logging."""
        return {
            "coerce_dates": self.coerce_dates,
            "date_system": self.date_system,
            "blank_header_prefix": self.blank_header_prefix,
            "strip_header_whitespace": self.strip_header_whitespace,
            "log_level": self.log_level,
            "debug": self.debug,
        }


# Create the global settings instance
settings = Settings()
