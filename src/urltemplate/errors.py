"""urltemplate exception hierarchy.

Shared across the tokenizer, matcher, and entry point so every module
raises and catches the same types.

A URL that does not match a template is *not* an error: ``parse_url``
returns a falsy ``MatchResult`` for that case.
"""


class UrlTemplateError(Exception):
    """Base for all urltemplate-specific errors."""


class ConfigurationError(UrlTemplateError):
    """Raised when arguments, options, or the template itself are invalid.

    Not recoverable by retrying with the same input.
    """


class TemplateError(ConfigurationError):
    """The template is structurally malformed, independent of any URL."""

    def __init__(self, message: str, template: str | None = None) -> None:
        super().__init__(message)
        self.template = template


class ColocatedVariablesError(TemplateError):
    """Two ``{variable}`` placeholders with no literal text between them."""

    def __init__(self, first: str, second: str, template: str | None = None) -> None:
        msg = (
            f"{{variable}} tokens cannot be placed together: "
            f"{{{first}}} is directly followed by {{{second}}}"
        )
        super().__init__(msg, template)
        self.first = first
        self.second = second


class DuplicateVariableError(TemplateError):
    """The same variable id appears more than once in a template."""

    def __init__(self, variable_id: str, template: str | None = None) -> None:
        super().__init__(f"Duplicate variable id: {variable_id!r}", template)
        self.variable_id = variable_id


class TokenizationError(UrlTemplateError):
    """Internal consistency failure: tokens do not cover their segment.

    Indicates a bug in the tokenizer rather than bad input.
    """
