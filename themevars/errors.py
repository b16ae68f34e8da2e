"""Error codes and error handling utilities for ThemeVars."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path
from typing import Any


class ErrorCode(Enum):
    """Standardized error codes for ThemeVars operations."""

    # Theme root errors (fatal for a whole request)
    THEMES_ROOT_NOT_FOUND = auto()
    THEMES_ROOT_NOT_DIRECTORY = auto()
    THEMES_ROOT_UNREADABLE = auto()

    # Per-file errors (isolated, the file is skipped)
    FILE_NOT_FOUND = auto()
    FILE_ACCESS_DENIED = auto()
    FILE_DECODE_FAILED = auto()
    FILE_READ_FAILED = auto()


ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.THEMES_ROOT_NOT_FOUND: "Themes directory not found",
    ErrorCode.THEMES_ROOT_NOT_DIRECTORY: "Themes path is not a directory",
    ErrorCode.THEMES_ROOT_UNREADABLE: "Themes directory could not be listed",

    ErrorCode.FILE_NOT_FOUND: "The stylesheet was not found. It may have been moved or deleted.",
    ErrorCode.FILE_ACCESS_DENIED: "Access denied while reading the stylesheet. Check file permissions.",
    ErrorCode.FILE_DECODE_FAILED: "The stylesheet is not valid UTF-8 text.",
    ErrorCode.FILE_READ_FAILED: "The stylesheet could not be read.",
}

_SUGGESTIONS: dict[ErrorCode, str] = {
    ErrorCode.THEMES_ROOT_NOT_FOUND: "Set the themes directory in the settings or THEMEVARS_THEMES_DIR.",
    ErrorCode.THEMES_ROOT_NOT_DIRECTORY: "Point the themes directory at a folder, not a file.",
    ErrorCode.THEMES_ROOT_UNREADABLE: "Check folder permissions on the themes directory.",
}


@dataclass
class ThemeVarsError(Exception):
    """Base exception for ThemeVars with error code and context."""

    code: ErrorCode
    message: str = ""
    path: Path | None = None
    details: dict[str, Any] = field(default_factory=dict)
    suggestion: str = ""

    def __post_init__(self) -> None:
        if not self.message:
            self.message = ERROR_MESSAGES.get(self.code, "An unexpected error occurred.")
        if not self.suggestion:
            self.suggestion = _SUGGESTIONS.get(self.code, "")

    def __str__(self) -> str:
        parts = [self.message]
        if self.path:
            parts.append(f"\nPath: {self.path}")
        if self.details:
            details_str = " | ".join(f"{k}={v}" for k, v in self.details.items())
            parts.append(f"\nDetails: {details_str}")
        return "".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging or the result document."""
        return {
            "code": self.code.name,
            "message": self.message,
            "path": str(self.path) if self.path else None,
            "details": self.details,
            "suggestion": self.suggestion,
        }


def classify_exception(exc: Exception, path: Path | None = None) -> ThemeVarsError:
    """Classify a file read exception into a ThemeVarsError with appropriate code."""
    details = {"original": str(exc)}
    if isinstance(exc, ThemeVarsError):
        return exc
    if isinstance(exc, UnicodeDecodeError):
        return ThemeVarsError(ErrorCode.FILE_DECODE_FAILED, path=path, details=details)
    if isinstance(exc, FileNotFoundError):
        return ThemeVarsError(ErrorCode.FILE_NOT_FOUND, path=path, details=details)
    if isinstance(exc, PermissionError):
        return ThemeVarsError(ErrorCode.FILE_ACCESS_DENIED, path=path, details=details)
    if isinstance(exc, OSError):
        return ThemeVarsError(ErrorCode.FILE_READ_FAILED, path=path, details=details)

    return ThemeVarsError(
        ErrorCode.FILE_READ_FAILED,
        message=f"{type(exc).__name__}: {exc}",
        path=path,
        details=details,
    )
