"""Capture and restore expand/select state of a navigation tree.

The tree is any object graph satisfying :class:`TreeNode`; nodes are matched
between capture and restore by their path of names from the top level.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Protocol, Sequence

logger = logging.getLogger(__name__)

PATH_SEPARATOR = "/"


class TreeNode(Protocol):
    name: str
    expanded: bool
    selected: bool

    @property
    def children(self) -> Sequence["TreeNode"]: ...


@dataclass(frozen=True, slots=True)
class TreeNodeState:
    path: str
    name: str
    expanded: bool
    selected: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "name": self.name,
            "expanded": self.expanded,
            "selected": self.selected,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TreeNodeState":
        return cls(
            path=str(data["path"]),
            name=str(data.get("name", "")),
            expanded=bool(data.get("expanded", False)),
            selected=bool(data.get("selected", False)),
        )


def node_path(parent_path: str, name: str) -> str:
    return f"{parent_path}{PATH_SEPARATOR}{name}" if parent_path else name


def capture_state(roots: Iterable[TreeNode]) -> list[TreeNodeState]:
    """Return node states in depth-first order."""
    states: list[TreeNodeState] = []
    for root in roots:
        _capture(root, "", states)
    return states


def restore_state(roots: Iterable[TreeNode], states: Iterable[TreeNodeState]) -> int:
    """Expand and select nodes recorded as such; return how many were touched."""
    by_path = {state.path: state for state in states}
    touched = 0
    for root in roots:
        touched += _restore(root, "", by_path)
    return touched


def _capture(node: TreeNode, parent_path: str, states: list[TreeNodeState]) -> None:
    path = node_path(parent_path, node.name)
    states.append(
        TreeNodeState(path=path, name=node.name, expanded=node.expanded, selected=node.selected)
    )
    for child in node.children:
        _capture(child, path, states)


def _restore(node: TreeNode, parent_path: str, by_path: Mapping[str, TreeNodeState]) -> int:
    path = node_path(parent_path, node.name)
    touched = 0
    saved = by_path.get(path)
    if saved is not None and (saved.expanded or saved.selected):
        if saved.expanded:
            node.expanded = True
        if saved.selected:
            node.selected = True
        touched = 1
    for child in node.children:
        touched += _restore(child, path, by_path)
    return touched


class BrowserStateManager:
    """Keeps the most recent snapshot of a tree between rebuilds."""

    def __init__(self) -> None:
        self._last_state: list[TreeNodeState] | None = None

    @property
    def has_snapshot(self) -> bool:
        return self._last_state is not None

    def snapshot(self) -> list[TreeNodeState]:
        return list(self._last_state or [])

    def capture(self, roots: Iterable[TreeNode]) -> None:
        self._last_state = capture_state(roots)
        logger.debug("Captured tree state for %d nodes", len(self._last_state))

    def restore(self, roots: Iterable[TreeNode]) -> int:
        if self._last_state is None:
            return 0
        touched = restore_state(roots, self._last_state)
        logger.debug("Restored tree state on %d nodes", touched)
        return touched
