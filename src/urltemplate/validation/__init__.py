"""Argument validation — small, side-effect-free guards.

Usage::

    from urltemplate.validation import is_string, require

    require(is_string(template), "Argument 'template' expects a non-empty string.")

Every predicate takes ``allow_empty=`` so optional arguments can be
checked with the same call as required ones.
"""

from urltemplate.validation.rules import (
    Check,
    are_elements_of_enum,
    are_elements_of_type,
    is_boolean,
    is_empty,
    is_non_empty_array,
    is_number,
    is_plain_object,
    is_string,
    require,
)

__all__ = [
    "Check",
    "are_elements_of_enum",
    "are_elements_of_type",
    "is_boolean",
    "is_empty",
    "is_non_empty_array",
    "is_number",
    "is_plain_object",
    "is_string",
    "require",
]
