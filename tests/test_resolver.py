"""Tests for themevars.core.resolver."""

from themevars.core.resolver import MAX_RESOLVE_DEPTH, is_reference, reference_name, resolve_value


def test_literal_passes_through_unchanged():
    assert resolve_value("#fff", {}) == "#fff"
    assert resolve_value("#fff", {"fff": "nope"}, 0) == "#fff"


def test_direct_reference():
    table = {"x": "#fff", "y": "var(--x)"}
    assert resolve_value(table["y"], table, 0) == "#fff"


def test_chained_reference():
    table = {"a": "var(--b)", "b": "var(--c)", "c": "rgb(1, 2, 3)"}
    assert resolve_value(table["a"], table) == "rgb(1, 2, 3)"


def test_reference_with_inner_whitespace():
    table = {"x": "10px"}
    assert resolve_value("  var( --x )  ", table) == "10px"


def test_dangling_reference_resolves_to_empty():
    assert resolve_value("var(--missing)", {}, 0) == ""


def test_cycle_terminates_with_a_value():
    table = {"a": "var(--b)", "b": "var(--a)"}
    result_a = resolve_value(table["a"], table, 0)
    result_b = resolve_value(table["b"], table, 0)
    assert result_a in {"var(--a)", "var(--b)"}
    assert result_b in {"var(--a)", "var(--b)"}


def test_self_reference_terminates():
    table = {"a": "var(--a)"}
    assert resolve_value("var(--a)", table) == "var(--a)"


def test_depth_bound_returns_current_value():
    table = {f"v{i}": f"var(--v{i + 1})" for i in range(MAX_RESOLVE_DEPTH + 5)}
    table[f"v{MAX_RESOLVE_DEPTH + 5}"] = "#000"
    result = resolve_value("var(--v0)", table)
    assert result == f"var(--v{MAX_RESOLVE_DEPTH})"


def test_starting_at_bound_returns_input():
    table = {"x": "#fff"}
    assert resolve_value("var(--x)", table, MAX_RESOLVE_DEPTH) == "var(--x)"


def test_embedded_reference_is_not_substituted():
    table = {"x": "#fff"}
    value = "1px solid var(--x)"
    assert resolve_value(value, table) == value


def test_is_reference():
    assert is_reference("var(--a)")
    assert is_reference(" var(--a) ")
    assert not is_reference("calc(var(--a) * 2)")
    assert not is_reference("var(--a")


def test_reference_name_strips_prefix():
    assert reference_name("var(--primary-color)") == "primary-color"
    assert reference_name("var(plain)") == "plain"
    assert reference_name("#fff") is None
