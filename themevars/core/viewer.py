"""Display rows for theme variables."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Mapping

from themevars.core.colors import classify_and_parse
from themevars.core.models import ColorClassification, ColorKind, PropertyTable, Theme
from themevars.core.resolver import is_reference, resolve_value

DEFAULT_PREFERRED_FILES: tuple[str, ...] = ("variables.css", "styles.css")


class IndicatorKind(Enum):
    """What a presentation layer should draw next to a variable."""

    SWATCH = "swatch"
    GENERIC = "generic"
    SKIP = "skip"


@dataclass(frozen=True, slots=True)
class VariableRow:
    """One resolved and classified custom property."""

    name: str
    raw: str
    resolved: str
    classification: ColorClassification

    @property
    def reference(self) -> str:
        """The ``var(--name)`` token a user would paste into a stylesheet."""
        return f"var(--{self.name})"

    @property
    def indicator(self) -> IndicatorKind:
        if self.classification.kind is ColorKind.PARSED:
            return IndicatorKind.SWATCH
        if self.classification.kind is ColorKind.RECOGNIZED_UNSUPPORTED:
            return IndicatorKind.GENERIC
        if is_reference(self.raw) and (not self.resolved or is_reference(self.resolved)):
            return IndicatorKind.GENERIC
        return IndicatorKind.SKIP

    @property
    def label(self) -> str:
        return f"{self.reference}: {self.resolved}"


def build_row(name: str, table: Mapping[str, str]) -> VariableRow:
    raw = table[name]
    resolved = resolve_value(raw, table)
    return VariableRow(
        name=name,
        raw=raw,
        resolved=resolved,
        classification=classify_and_parse(resolved),
    )


def iter_variable_rows(table: Mapping[str, str]) -> Iterator[VariableRow]:
    """Yield rows lazily, resolving each reference within ``table`` only."""
    for name in table:
        yield build_row(name, table)


def pick_theme_table(
    theme: Theme,
    preferred_files: Iterable[str] = DEFAULT_PREFERRED_FILES,
) -> PropertyTable | None:
    """Choose the table a theme is displayed from."""
    for file_key in preferred_files:
        table = theme.get(file_key)
        if table is not None:
            return table
    if len(theme) == 1:
        return next(iter(theme.values()))
    return None


def build_theme_view(
    themes: Mapping[str, Theme],
    preferred_files: Iterable[str] = DEFAULT_PREFERRED_FILES,
    *,
    include_non_colors: bool = False,
) -> dict[str, list[VariableRow]]:
    """Return display rows per theme, skipping themes with no displayable table."""
    preferred = tuple(preferred_files)
    view: dict[str, list[VariableRow]] = {}
    for theme_name, theme in themes.items():
        table = pick_theme_table(theme, preferred)
        if table is None:
            continue
        rows = [
            row
            for row in iter_variable_rows(table)
            if include_non_colors or row.indicator is not IndicatorKind.SKIP
        ]
        view[theme_name] = rows
    return view
