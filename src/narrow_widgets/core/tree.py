"""
Form tree utilities.

Host forms are nested dicts: keys beginning with '#' are element properties,
all other keys are children, and integer children are ordinal value slots.
These helpers read and write such trees by key path. Writers operate on the
tree they are given; callers that need copy-on-write take a structural copy
first (see ``copy_tree``).
"""

from typing import Any, Dict, Hashable, List, Sequence

from .constants import CONSTANTS

Tree = Dict[Hashable, Any]


def copy_tree(value: Any) -> Any:
    """Copy the dict/list structure of a form tree.

    Leaf values (callbacks, entities, strings) are shared with the original.
    """
    if isinstance(value, dict):
        return {key: copy_tree(child) for key, child in value.items()}
    if isinstance(value, list):
        return [copy_tree(child) for child in value]
    return value


def is_property(key: Hashable) -> bool:
    return isinstance(key, str) and key.startswith("#")


def is_ordinal(key: Hashable) -> bool:
    # bool is an int subclass but never a slot key
    return isinstance(key, int) and not isinstance(key, bool)


def child_keys(tree: Tree) -> List[Hashable]:
    """Child keys in insertion order, properties excluded."""
    return [key for key in tree if not is_property(key)]


def ordinal_keys(tree: Any) -> List[int]:
    """Integer keys of a tree, in insertion order."""
    if not isinstance(tree, dict):
        return []
    return [key for key in tree if is_ordinal(key)]


def get_value(tree: Any, parents: Sequence[Hashable], default: Any = None) -> Any:
    """Return the value at ``parents`` or ``default`` when any step is missing."""
    current = tree
    for key in parents:
        if not isinstance(current, dict) or key not in current:
            return default
        current = current[key]
    return current


def set_value(tree: Tree, parents: Sequence[Hashable], value: Any) -> None:
    """Set ``value`` at ``parents``, creating intermediate dicts as needed."""
    if not parents:
        raise ValueError("Cannot set a value at an empty path")
    current = tree
    for key in parents[:-1]:
        if not isinstance(current.get(key), dict):
            current[key] = {}
        current = current[key]
    current[parents[-1]] = value


def error_name(parents: Sequence[Hashable]) -> str:
    """Encode a key path as the host's error name, e.g. ``field][2][target_id``."""
    return CONSTANTS.ERROR_NAME_SEPARATOR.join(str(key) for key in parents)


def wrapper_id(parents: Sequence[Hashable]) -> str:
    return CONSTANTS.WRAPPER_ID_SEPARATOR.join(str(key) for key in parents)
