"""Match options.

MatchOptions is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups once built.
"""

from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any

from urltemplate.errors import ConfigurationError
from urltemplate.validation import are_elements_of_enum, is_boolean, is_empty, is_plain_object

# Accepted option keys (compared case-insensitively) -> MatchOptions field
OPTION_NAMES: dict[str, str] = {
    "ignore_trailing_slash": "ignore_trailing_slash",
    "ignoretrailingslash": "ignore_trailing_slash",
}


@dataclass(frozen=True, slots=True)
class MatchOptions:
    """Options for a single ``parse_url`` call. Immutable after creation.

    ``ignore_trailing_slash``: when true, a trailing ``/`` missing from either
    the template or the URL is synthesized before matching::

        options = MatchOptions(ignore_trailing_slash=True)
    """

    ignore_trailing_slash: bool = False

    def __post_init__(self) -> None:
        if not is_boolean(self.ignore_trailing_slash):
            msg = "Argument 'options.ignore_trailing_slash' expects bool."
            raise ConfigurationError(msg)

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any] | None) -> "MatchOptions":
        """Build options from a plain mapping, rejecting unknown keys.

        ``None`` and ``{}`` give the defaults. A key whose value is ``None``
        keeps its default.
        """
        if not is_plain_object(options, allow_empty=True):
            msg = "Argument 'options' expects a mapping."
            raise ConfigurationError(msg)
        if is_empty(options):
            return cls()

        keys = list(options)
        if not are_elements_of_enum(keys, list(OPTION_NAMES)):
            valid = ", ".join(f.name for f in fields(cls))
            msg = f"Argument 'options' contains one or more invalid options. Valid options are {valid}"
            raise ConfigurationError(msg)

        values: dict[str, bool] = {}
        for key in keys:
            value = options[key]
            if value is None:
                continue
            if not is_boolean(value):
                msg = f"Argument 'options.{key}' expects bool, got {type(value).__name__}."
                raise ConfigurationError(msg)
            values[OPTION_NAMES[key.casefold()]] = value
        return cls(**values)


def resolve_options(options: MatchOptions | Mapping[str, Any] | None) -> MatchOptions:
    """Accept a ``MatchOptions`` as-is, or build one from a mapping or ``None``."""
    if isinstance(options, MatchOptions):
        return options
    return MatchOptions.from_mapping(options)
