"""Exception hierarchy for ccscan."""

from __future__ import annotations

from typing import Dict, Optional


class CcscanError(Exception):
    """Base exception for all ccscan errors."""

    def __init__(self, message: str, details: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message


class ParseFailure(CcscanError):
    """The frontend could not produce a translation unit."""


class OperatorResolutionFailure(CcscanError):
    """A binary operator node whose symbol cannot be recovered from its tokens."""


class ReportWriteError(CcscanError):
    """The report log could not be opened or written."""


class ConfigError(CcscanError):
    """Invalid configuration value or file."""
