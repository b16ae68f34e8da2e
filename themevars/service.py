"""Request entry point for theme variable snapshots."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from themevars.config.settings import AppSettings
from themevars.core.aggregator import ThemeAggregator
from themevars.core.models import AggregationResult
from themevars.core.viewer import VariableRow, build_theme_view

logger = logging.getLogger(__name__)


class CssDataService:
    """Reads the configured themes directory on every request."""

    def __init__(self, settings: AppSettings) -> None:
        self._settings = settings

    @property
    def themes_dir(self) -> Path:
        return self._settings.themes_dir

    def collect(self) -> AggregationResult:
        return ThemeAggregator(self.themes_dir).collect()

    def get_css_data(self) -> dict[str, Any]:
        """Return the theme variable document for the presentation layer."""
        logger.debug("get_css_data called for %s", self.themes_dir)
        return self.collect().to_dict()

    def load_view(
        self, *, include_non_colors: bool = False
    ) -> tuple[bool, dict[str, list[VariableRow]], str]:
        result = self.collect()
        if not result.success:
            return False, {}, result.error
        view = build_theme_view(
            result.themes,
            self._settings.preferred_files,
            include_non_colors=include_non_colors,
        )
        rows = sum(len(items) for items in view.values())
        return True, view, f"Loaded {rows} variables from {len(view)} themes"
