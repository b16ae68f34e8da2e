"""Tests for themevars.core.aggregator."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from themevars.core.aggregator import ThemeAggregator, read_css_data
from themevars.errors import ErrorCode


def _write_css(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


@pytest.fixture
def themes_root(tmp_path):
    root = tmp_path / "themes"
    _write_css(root / "dark.css", ":root { --bg: #000; }")
    _write_css(root / "light" / "variables.css", ":root { --bg: #fff; --fg: var(--ink); }")
    _write_css(root / "light" / "extra.css", ":root { --ink: #111; }")
    (root / "README.txt").write_text("not a theme", encoding="utf-8")
    return root


class TestThemeAggregator:
    def test_single_and_directory_themes(self, themes_root):
        result = ThemeAggregator(themes_root).collect()
        assert result.success is True
        assert set(result.themes) == {"dark", "light"}
        assert result.themes["dark"] == {"dark.css": {"bg": "#000"}}
        assert set(result.themes["light"]) == {"variables.css", "extra.css"}
        assert result.themes["light"]["variables.css"] == {"bg": "#fff", "fg": "var(--ink)"}
        assert result.files_processed == 3
        assert result.failures == ()

    def test_nested_files_keyed_by_relative_path(self, themes_root):
        _write_css(themes_root / "light" / "components" / "button.css", ":root { --btn: red; }")
        result = ThemeAggregator(themes_root).collect()
        assert result.themes["light"]["components/button.css"] == {"btn": "red"}
        assert result.files_processed == 4

    def test_file_without_root_block_counted_but_omitted(self, themes_root):
        _write_css(themes_root / "plain.css", "body { margin: 0; }")
        _write_css(themes_root / "light" / "layout.css", ".x { --y: 1; }")
        result = ThemeAggregator(themes_root).collect()
        assert "plain" not in result.themes
        assert "layout.css" not in result.themes["light"]
        assert result.files_processed == 5

    def test_directory_without_stylesheets_omitted(self, themes_root):
        (themes_root / "empty").mkdir()
        (themes_root / "assets").mkdir()
        (themes_root / "assets" / "logo.svg").write_text("<svg/>", encoding="utf-8")
        result = ThemeAggregator(themes_root).collect()
        assert set(result.themes) == {"dark", "light"}

    def test_non_css_suffix_ignored(self, themes_root):
        _write_css(themes_root / "print.CSS", ":root { --a: 1; }")
        _write_css(themes_root / "light" / "notes.css.bak", ":root { --a: 1; }")
        result = ThemeAggregator(themes_root).collect()
        assert "print" not in result.themes
        assert result.files_processed == 3

    def test_unreadable_file_is_skipped(self, themes_root):
        (themes_root / "light" / "broken.css").write_bytes(b":root { --a: \xff\xfe; }")
        result = ThemeAggregator(themes_root).collect()
        assert result.success is True
        assert set(result.themes["light"]) == {"variables.css", "extra.css"}
        assert result.files_processed == 3
        assert len(result.failures) == 1
        failure = result.failures[0]
        assert failure.theme == "light"
        assert failure.path == "light/broken.css"
        assert failure.code == ErrorCode.FILE_DECODE_FAILED.name

    def test_unreadable_single_file_theme_does_not_abort(self, themes_root):
        (themes_root / "bad.css").write_bytes(b"\xff\xff\xff")
        result = ThemeAggregator(themes_root).collect()
        assert result.success is True
        assert "bad" not in result.themes
        assert set(result.themes) == {"dark", "light"}
        assert [f.path for f in result.failures] == ["bad.css"]

    def test_same_name_file_and_directory_merge(self, themes_root):
        _write_css(themes_root / "dark" / "variables.css", ":root { --fg: #eee; }")
        result = ThemeAggregator(themes_root).collect()
        assert result.themes["dark"] == {
            "dark.css": {"bg": "#000"},
            "variables.css": {"fg": "#eee"},
        }

    def test_missing_root_is_structured_failure(self, tmp_path):
        result = ThemeAggregator(tmp_path / "nope").collect()
        assert result.success is False
        assert result.themes == {}
        assert result.error == "Themes directory not found"
        assert result.error_code == ErrorCode.THEMES_ROOT_NOT_FOUND.name

    def test_root_that_is_a_file_fails(self, tmp_path):
        target = tmp_path / "themes.css"
        target.write_text(":root { --a: 1; }", encoding="utf-8")
        result = ThemeAggregator(target).collect()
        assert result.success is False
        assert result.error_code == ErrorCode.THEMES_ROOT_NOT_DIRECTORY.name

    def test_bare_css_file_name_is_not_a_theme(self, themes_root):
        _write_css(themes_root / ".css", ":root { --a: 1; }")
        result = ThemeAggregator(themes_root).collect()
        assert "" not in result.themes
        assert set(result.themes) == {"dark", "light"}

    def test_empty_root(self, tmp_path):
        result = ThemeAggregator(tmp_path).collect()
        assert result.success is True
        assert result.themes == {}
        assert result.files_processed == 0

    def test_each_collect_is_a_fresh_snapshot(self, themes_root):
        aggregator = ThemeAggregator(themes_root)
        first = aggregator.collect()
        (themes_root / "dark.css").unlink()
        second = aggregator.collect()
        assert "dark" in first.themes
        assert "dark" not in second.themes
        assert second.files_processed == 2


class TestResultDocument:
    def test_success_document_is_json_serializable(self, themes_root):
        doc = read_css_data(themes_root)
        assert doc["success"] is True
        assert doc["filesProcessed"] == 3
        assert doc["themes"]["dark"]["dark.css"]["bg"] == "#000"
        assert doc["failures"] == []
        assert json.loads(json.dumps(doc)) == doc

    def test_failure_document_has_no_themes(self, tmp_path):
        doc = read_css_data(tmp_path / "missing")
        assert doc == {
            "success": False,
            "error": "Themes directory not found",
            "code": "THEMES_ROOT_NOT_FOUND",
        }
