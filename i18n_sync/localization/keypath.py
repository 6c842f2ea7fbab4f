"""Dotted key paths over nested translation trees.

A translation tree is a ``dict`` whose values are either namespaces (nested
``dict``) or leaves. Anything that is not a ``dict`` is a leaf, including
``None`` and lists: lists are never descended into.
"""

import json
from enum import Enum
from typing import Any, Dict, List

from ..errors import KeyPathError

SEPARATOR = "."


class NodeKind(Enum):
    """Kinds of nodes in a translation tree"""
    NAMESPACE = "namespace"
    LEAF = "leaf"


class _Missing:
    """Sentinel for a key path that resolves to nothing."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING = _Missing()


def node_kind(value: Any) -> NodeKind:
    """Classify a tree node."""
    if isinstance(value, dict):
        return NodeKind.NAMESPACE
    return NodeKind.LEAF


def is_namespace(value: Any) -> bool:
    return node_kind(value) is NodeKind.NAMESPACE


def leaf_text(value: Any) -> str:
    """Text form of a leaf as it appears inside a placeholder.

    Lists are joined with commas, ``None`` inside a list becomes empty.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, list):
        return ",".join("" if item is None else leaf_text(item) for item in value)
    if isinstance(value, dict):
        return json.dumps(value, ensure_ascii=False)
    return str(value)


def join_path(prefix: str, key: str) -> str:
    return f"{prefix}{SEPARATOR}{key}" if prefix else key


def flatten(tree: Dict[str, Any], prefix: str = "") -> List[str]:
    """Return every leaf key path of ``tree`` in depth-first iteration order."""
    keys: List[str] = []
    for key, value in tree.items():
        full_key = join_path(prefix, key)
        if is_namespace(value):
            keys.extend(flatten(value, full_key))
        else:
            keys.append(full_key)
    return keys


def _split(path: str) -> List[str]:
    if not path:
        raise KeyPathError("Key path must not be empty", path=path)
    return path.split(SEPARATOR)


def get_by_path(tree: Dict[str, Any], path: str) -> Any:
    """Resolve ``path`` in ``tree``; return ``MISSING`` if it does not resolve."""
    current: Any = tree
    for segment in _split(path):
        if not is_namespace(current) or segment not in current:
            return MISSING
        current = current[segment]
    return current


def set_by_path(tree: Dict[str, Any], path: str, value: Any) -> None:
    """Assign ``value`` at ``path``, creating intermediate namespaces.

    Raises:
        KeyPathError: an intermediate segment already holds a leaf
    """
    *parents, last = _split(path)
    current = tree
    for segment in parents:
        if segment not in current:
            current[segment] = {}
        elif not is_namespace(current[segment]):
            raise KeyPathError(
                f"Cannot set '{path}': '{segment}' is a leaf, not a namespace",
                path=path,
                segment=segment,
            )
        current = current[segment]
    current[last] = value


def delete_by_path(tree: Dict[str, Any], path: str) -> bool:
    """Remove the node at ``path``. Returns True if something was removed."""
    *parents, last = _split(path)
    current: Any = tree
    for segment in parents:
        if not is_namespace(current) or segment not in current:
            return False
        current = current[segment]
    if not is_namespace(current) or last not in current:
        return False
    del current[last]
    return True


def prune_empty(tree: Dict[str, Any]) -> int:
    """Delete namespaces left without children, bottom-up.

    Returns the number of namespaces removed.
    """
    removed = 0
    for key in list(tree):
        value = tree[key]
        if not is_namespace(value):
            continue
        removed += prune_empty(value)
        if not value:
            del tree[key]
            removed += 1
    return removed
