"""Theme variable models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

PropertyTable = dict[str, str]
Theme = dict[str, PropertyTable]
ThemeCollection = dict[str, Theme]


class ColorKind(Enum):
    """How a literal value was classified as a color."""

    NOT_A_COLOR = "not_a_color"
    RECOGNIZED_UNSUPPORTED = "recognized_unsupported"
    PARSED = "parsed"


@dataclass(frozen=True, slots=True)
class NormalizedColor:
    """An sRGB color with 8-bit channels and a real alpha."""

    r: int
    g: int
    b: int
    a: float = 1.0

    def to_hex(self) -> str:
        base = f"#{self.r:02x}{self.g:02x}{self.b:02x}"
        if self.a >= 1.0:
            return base
        return f"{base}{round(self.a * 255):02x}"

    def to_rgba_tuple(self) -> tuple[int, int, int, int]:
        return self.r, self.g, self.b, round(self.a * 255)


@dataclass(frozen=True, slots=True)
class ColorClassification:
    """Result of classifying one literal value."""

    kind: ColorKind
    color: NormalizedColor | None = None

    @property
    def is_parsed(self) -> bool:
        return self.kind is ColorKind.PARSED

    @property
    def looks_like_color(self) -> bool:
        return self.kind is not ColorKind.NOT_A_COLOR


NOT_A_COLOR = ColorClassification(ColorKind.NOT_A_COLOR)
RECOGNIZED_UNSUPPORTED = ColorClassification(ColorKind.RECOGNIZED_UNSUPPORTED)


@dataclass(frozen=True, slots=True)
class FileReadFailure:
    """A stylesheet that was skipped during aggregation."""

    theme: str
    path: str
    code: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {
            "theme": self.theme,
            "path": self.path,
            "code": self.code,
            "message": self.message,
        }


@dataclass(frozen=True, slots=True)
class AggregationResult:
    """Snapshot of every theme found under a themes root.

    A failed result never carries themes. ``to_dict`` renders the document
    handed to the presentation layer.
    """

    success: bool
    themes: ThemeCollection = field(default_factory=dict)
    files_processed: int = 0
    error: str = ""
    error_code: str = ""
    failures: tuple[FileReadFailure, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        if not self.success:
            return {
                "success": False,
                "error": self.error,
                "code": self.error_code,
            }
        return {
            "success": True,
            "themes": {
                theme_name: {file_key: dict(table) for file_key, table in theme.items()}
                for theme_name, theme in self.themes.items()
            },
            "filesProcessed": self.files_processed,
            "failures": [failure.to_dict() for failure in self.failures],
        }
