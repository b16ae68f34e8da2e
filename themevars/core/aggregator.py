"""Theme discovery and per-file variable aggregation."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

from themevars.core.extractor import extract_root_variables
from themevars.core.models import AggregationResult, FileReadFailure, Theme, ThemeCollection
from themevars.errors import ErrorCode, ThemeVarsError, classify_exception

logger = logging.getLogger(__name__)

CSS_SUFFIX = ".css"


def _is_stylesheet(path: Path) -> bool:
    return path.name.endswith(CSS_SUFFIX)


class ThemeAggregator:
    """Builds a theme -> file -> property table snapshot of a themes root.

    Regular ``*.css`` files directly under the root are single-file themes
    named after the file. Each subdirectory is a theme whose stylesheets are
    found by walking it recursively and keyed by their relative path.
    """

    def __init__(self, root: str | Path) -> None:
        self._root = Path(root)
        self._failures: list[FileReadFailure] = []
        self._files_processed = 0

    @property
    def root(self) -> Path:
        return self._root

    def collect(self) -> AggregationResult:
        """Read every stylesheet under the root and return a fresh snapshot."""
        self._failures = []
        self._files_processed = 0
        logger.debug("Reading CSS files from directory: %s", self._root)

        try:
            entries = self._list_root()
        except ThemeVarsError as exc:
            logger.warning("%s: %s", exc.message, self._root)
            return AggregationResult(
                success=False,
                error=exc.message,
                error_code=exc.code.name,
            )

        themes: ThemeCollection = {}
        # Root-level files first, then theme directories.
        for css_file in (path for path in entries if path.is_file() and _is_stylesheet(path)):
            theme_name = css_file.name[: -len(CSS_SUFFIX)]
            if not theme_name:
                continue
            variables = self._read_variables(css_file, theme_name)
            if variables:
                themes.setdefault(theme_name, {})[css_file.name] = variables

        for theme_dir in (path for path in entries if path.is_dir()):
            theme = self._collect_directory(theme_dir)
            if theme:
                themes.setdefault(theme_dir.name, {}).update(theme)

        logger.info(
            "Successfully processed %d CSS files across %d themes",
            self._files_processed,
            len(themes),
        )
        if self._failures:
            logger.warning("Skipped %d unreadable CSS files", len(self._failures))
        return AggregationResult(
            success=True,
            themes=themes,
            files_processed=self._files_processed,
            failures=tuple(self._failures),
        )

    def _list_root(self) -> list[Path]:
        if not self._root.exists():
            raise ThemeVarsError(ErrorCode.THEMES_ROOT_NOT_FOUND, path=self._root)
        if not self._root.is_dir():
            raise ThemeVarsError(ErrorCode.THEMES_ROOT_NOT_DIRECTORY, path=self._root)
        try:
            return sorted(self._root.iterdir())
        except OSError as exc:
            raise ThemeVarsError(
                ErrorCode.THEMES_ROOT_UNREADABLE,
                path=self._root,
                details={"original": str(exc)},
            ) from exc

    def _collect_directory(self, theme_dir: Path) -> Theme:
        theme: Theme = {}
        theme_name = theme_dir.name

        def _on_walk_error(exc: OSError) -> None:
            failed = Path(exc.filename) if exc.filename else theme_dir
            self._record_failure(theme_name, failed, exc)

        for dirpath, dirnames, filenames in os.walk(theme_dir, onerror=_on_walk_error):
            dirnames.sort()
            for fname in sorted(filenames):
                css_file = Path(dirpath) / fname
                if not _is_stylesheet(css_file) or not css_file.is_file():
                    continue
                variables = self._read_variables(css_file, theme_name)
                if variables:
                    theme[css_file.relative_to(theme_dir).as_posix()] = variables
        return theme

    def _read_variables(self, css_file: Path, theme_name: str) -> dict[str, str] | None:
        try:
            content = css_file.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            self._record_failure(theme_name, css_file, exc)
            return None
        self._files_processed += 1
        return extract_root_variables(content)

    def _record_failure(self, theme_name: str, path: Path, exc: Exception) -> None:
        error = classify_exception(exc, path=path)
        logger.warning("Skipping %s (%s): %s", path, error.code.name, exc)
        try:
            display_path = path.relative_to(self._root).as_posix()
        except ValueError:
            display_path = str(path)
        self._failures.append(
            FileReadFailure(
                theme=theme_name,
                path=display_path,
                code=error.code.name,
                message=error.message,
            )
        )


def read_css_data(root: str | Path) -> dict[str, Any]:
    """Aggregate a themes root and return the serializable result document."""
    return ThemeAggregator(root).collect().to_dict()
