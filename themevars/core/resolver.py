"""Resolve ``var(--name)`` references within a single property table."""

from __future__ import annotations

from typing import Mapping

MAX_RESOLVE_DEPTH = 10

_REFERENCE_PREFIX = "var("
_REFERENCE_SUFFIX = ")"
_PROPERTY_PREFIX = "--"


def is_reference(value: str) -> bool:
    """Return True when the whole trimmed value is a single ``var(...)``."""
    text = value.strip()
    return (
        text.startswith(_REFERENCE_PREFIX)
        and text.endswith(_REFERENCE_SUFFIX)
        and len(text) >= len(_REFERENCE_PREFIX) + len(_REFERENCE_SUFFIX)
    )


def reference_name(value: str) -> str | None:
    """Return the referenced property name without its ``--`` prefix."""
    if not is_reference(value):
        return None
    inner = value.strip()[len(_REFERENCE_PREFIX):-len(_REFERENCE_SUFFIX)].strip()
    if inner.startswith(_PROPERTY_PREFIX):
        inner = inner[len(_PROPERTY_PREFIX):]
    return inner


def resolve_value(raw: str, table: Mapping[str, str], depth: int = 0) -> str:
    """Follow a chain of references until a literal or the depth bound.

    A reference to a name missing from ``table`` resolves to ``""``. Once
    ``depth`` reaches ``MAX_RESOLVE_DEPTH`` the current value is returned
    unchanged, so cyclic chains terminate with a best-effort result.
    """
    value = raw
    while depth < MAX_RESOLVE_DEPTH:
        name = reference_name(value)
        if name is None:
            return value
        value = table.get(name, "")
        depth += 1
    return value
