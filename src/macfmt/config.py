"""Configuration management."""

import os
from dataclasses import dataclass

from .mac_utils import CasePolicy, Notation

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
LOG_FORMATS = ("text", "json", "kv")


@dataclass
class Config:
    """Application configuration."""

    # Logging
    log_level: str = "WARNING"
    log_format: str = "text"  # text, json or kv

    # Output
    notation: Notation = Notation.STANDARD
    case_policy: CasePolicy = CasePolicy.PRESERVE

    # Interactive input
    editor: str = ""

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        config = cls()

        if log_level := os.getenv("LOG_LEVEL"):
            config.log_level = _check_choice(LOG_LEVELS, "LOG_LEVEL", log_level.strip().upper())

        if log_format := os.getenv("LOG_FORMAT"):
            config.log_format = _check_choice(LOG_FORMATS, "LOG_FORMAT", log_format.strip().lower())

        if notation := os.getenv("MACFMT_NOTATION"):
            config.notation = _parse_choice(Notation, "MACFMT_NOTATION", notation)

        if case_policy := os.getenv("MACFMT_CASE"):
            config.case_policy = _parse_choice(CasePolicy, "MACFMT_CASE", case_policy)

        config.editor = os.getenv("EDITOR", "").strip()

        return config


def _check_choice(choices: tuple[str, ...], variable: str, value: str) -> str:
    if value not in choices:
        raise ValueError(f"Invalid {variable}={value!r}, expected one of: {', '.join(choices)}")
    return value


def _parse_choice(enum_cls, variable: str, value: str):
    try:
        return enum_cls(value.strip().lower())
    except ValueError:
        choices = ", ".join(member.value for member in enum_cls)
        raise ValueError(f"Invalid {variable}={value!r}, expected one of: {choices}") from None
