"""Argument guards used at the public entry point.

Each predicate reports pass/fail and has no side effects::

    is_string("abc")                      # True
    is_string("", allow_empty=True)       # True
    is_plain_object({}, allow_empty=True) # True

With ``allow_empty=True`` an empty value (``None``, a blank string, an
empty mapping or sequence) passes regardless of its type. Without it, an
empty value always fails.

Numbers and booleans are never empty.
"""

from collections.abc import Callable, Mapping, Sequence
from typing import Any

from urltemplate.errors import ConfigurationError

# Type alias for a type predicate
type Check = Callable[..., bool]


# ---------------------------------------------------------------------------
# Presence
# ---------------------------------------------------------------------------


def is_empty(value: Any) -> bool:
    """True for ``None``, blank strings, and empty mappings or sequences.

    Raises ``TypeError`` for values with no notion of emptiness.
    """
    if value is None:
        return True
    # bool before int: bool is an int subclass
    if isinstance(value, (bool, int, float)):
        return False
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (Mapping, list, tuple)):
        return len(value) == 0
    msg = f"Could not find a rule to determine whether object of type {type(value).__name__!r} is empty."
    raise TypeError(msg)


def _guard(value: Any, allow_empty: bool) -> bool | None:
    """Shared empty handling: a decided result, or None to keep checking."""
    if value is None or (isinstance(value, (str, Mapping, list, tuple)) and is_empty(value)):
        return allow_empty
    return None


# ---------------------------------------------------------------------------
# Types
# ---------------------------------------------------------------------------


def is_string(value: Any, *, allow_empty: bool = False) -> bool:
    """Value is a non-blank ``str``."""
    decided = _guard(value, allow_empty)
    if decided is not None:
        return decided
    return isinstance(value, str)


def is_boolean(value: Any, *, allow_empty: bool = False) -> bool:
    """Value is exactly ``True`` or ``False``."""
    decided = _guard(value, allow_empty)
    if decided is not None:
        return decided
    return isinstance(value, bool)


def is_number(value: Any, *, allow_empty: bool = False) -> bool:
    """Value is an ``int`` or ``float`` (booleans excluded)."""
    decided = _guard(value, allow_empty)
    if decided is not None:
        return decided
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_plain_object(value: Any, *, allow_empty: bool = False) -> bool:
    """Value is a non-empty mapping."""
    decided = _guard(value, allow_empty)
    if decided is not None:
        return decided
    return isinstance(value, Mapping)


def is_non_empty_array(value: Any, *, allow_empty: bool = False) -> bool:
    """Value is a non-empty ``list`` or ``tuple``."""
    decided = _guard(value, allow_empty)
    if decided is not None:
        return decided
    return isinstance(value, (list, tuple))


# ---------------------------------------------------------------------------
# Collections
# ---------------------------------------------------------------------------


def are_elements_of_type(values: Sequence[Any], check: Check) -> bool:
    """Every element passes *check*.

    Empty elements are a caller error, not a failed check.
    """
    if not is_non_empty_array(values, allow_empty=True):
        msg = "Argument 'values' expected an array."
        raise ConfigurationError(msg)

    for element in values:
        if is_empty(element):
            msg = "Elements to be checked cannot be None or empty."
            raise ConfigurationError(msg)
        if not check(element):
            return False
    return True


def are_elements_of_enum(values: Sequence[str], allowed: Sequence[str]) -> bool:
    """Every element of *values* is one of *allowed*, ignoring case."""
    if not is_non_empty_array(values) or not are_elements_of_type(values, is_string):
        msg = "Argument 'values' expected an array of strings."
        raise ConfigurationError(msg)
    if not is_non_empty_array(allowed) or not are_elements_of_type(allowed, is_string):
        msg = "Argument 'allowed' expected an array of strings."
        raise ConfigurationError(msg)

    choices = frozenset(choice.casefold() for choice in allowed)
    return all(element.casefold() in choices for element in values)


def require(condition: bool, message: str) -> None:
    """Raise ``ConfigurationError(message)`` unless *condition* holds."""
    if not condition:
        raise ConfigurationError(message)
