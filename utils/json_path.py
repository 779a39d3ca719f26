"""Get-or-default traversal of nested, optional JSON structures.

Provider responses may omit any field at any depth. ``dig`` walks a fixed path
of keys and list indexes and returns ``default`` at the first missing step
instead of raising.
"""
from typing import Any, Sequence, Union

Step = Union[str, int]


def get_step(value: Any, step: Step, default: Any = None) -> Any:
    """Return ``value[step]`` or ``default`` when the step cannot be taken."""
    if isinstance(step, int):
        if isinstance(value, list) and -len(value) <= step < len(value):
            return value[step]
        return default
    if isinstance(value, dict):
        return value.get(step, default)
    return default


def dig(value: Any, path: Sequence[Step], default: Any = None) -> Any:
    """Follow ``path`` into ``value``; ``None`` along the way counts as missing.

    Example:
        dig({"a": [{"b": "x"}]}, ("a", 0, "b"))  # -> "x"
        dig({"a": []}, ("a", 0, "b"), "none")     # -> "none"
    """
    current = value
    for step in path:
        current = get_step(current, step)
        if current is None:
            return default
    return current
