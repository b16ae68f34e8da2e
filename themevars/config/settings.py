"""Application settings via QSettings."""

from __future__ import annotations

import os
from pathlib import Path

from PySide6.QtCore import QSettings

DEFAULT_THEMES_DIR = (
    "/usr/local/bin/ignition/data/modules/com.inductiveautomation.perspective/themes"
)
DEFAULT_PREFERRED_FILES: tuple[str, ...] = ("variables.css", "styles.css")
THEMES_DIR_ENV = "THEMEVARS_THEMES_DIR"

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class AppSettings:
    """Wraps QSettings for persistent app configuration.

    Pass ``ini_path`` to keep settings in a standalone INI file instead of
    the per-user native store.
    """

    def __init__(self, ini_path: str | Path | None = None) -> None:
        if ini_path is not None:
            self._qs = QSettings(str(ini_path), QSettings.Format.IniFormat)
        else:
            self._qs = QSettings("ThemeVars", "ThemeVars")

    # -- themes --

    @property
    def themes_dir(self) -> Path:
        raw = self._qs.value("themes/dir", "", type=str)
        value = (raw or "").strip()
        if value:
            return Path(value)
        return Path(os.environ.get(THEMES_DIR_ENV, "").strip() or DEFAULT_THEMES_DIR)

    @themes_dir.setter
    def themes_dir(self, value: str | Path) -> None:
        self._qs.setValue("themes/dir", str(value).strip())

    @property
    def preferred_files(self) -> tuple[str, ...]:
        raw = self._qs.value("themes/preferred_files", "", type=str)
        names = tuple(part.strip() for part in (raw or "").split(",") if part.strip())
        return names or DEFAULT_PREFERRED_FILES

    @preferred_files.setter
    def preferred_files(self, value: tuple[str, ...] | list[str]) -> None:
        cleaned = [name.strip() for name in value if isinstance(name, str) and name.strip()]
        self._qs.setValue("themes/preferred_files", ",".join(cleaned))

    # -- logging --

    @property
    def log_level(self) -> str:
        raw = self._qs.value("logging/level", "INFO", type=str)
        level = (raw or "").strip().upper()
        if level in _LOG_LEVELS:
            return level
        return "INFO"

    @log_level.setter
    def log_level(self, value: str) -> None:
        level = (value or "").strip().upper()
        if level not in _LOG_LEVELS:
            level = "INFO"
        self._qs.setValue("logging/level", level)

    # -- helpers --

    def sync(self) -> None:
        self._qs.sync()

    @property
    def app_data_dir(self) -> Path:
        path = self._app_data_dir()
        path.mkdir(parents=True, exist_ok=True)
        return path

    @property
    def logs_dir(self) -> Path:
        path = self.app_data_dir / "logs"
        path.mkdir(parents=True, exist_ok=True)
        return path

    @staticmethod
    def _app_data_dir() -> Path:
        base = Path(os.environ.get("APPDATA", Path.home() / ".config"))
        return base / "themevars"
