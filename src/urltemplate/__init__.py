"""urltemplate — match URLs against ``{variable}`` route templates.

Decides whether an address matches a route and pulls path, query, and
hash parameters out of it.

Basic usage::

    from urltemplate import parse_url

    result = parse_url("/path1/{id}", "https://localhost:3000/path1/123")
    result.success    # True
    result.variables  # {"id": "123"}

A URL that does not match returns a falsy ``MatchResult``; only bad
arguments and malformed templates raise (``ConfigurationError``).
"""

__version__ = "0.1.0"
__all__ = [
    "ColocatedVariablesError",
    "ConfigurationError",
    "DuplicateVariableError",
    "ExactToken",
    "MatchOptions",
    "MatchResult",
    "TemplateError",
    "Token",
    "TokenizationError",
    "UrlTemplateError",
    "VariableToken",
    "parse_url",
]

# Public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "ColocatedVariablesError": "urltemplate.errors",
    "ConfigurationError": "urltemplate.errors",
    "DuplicateVariableError": "urltemplate.errors",
    "TemplateError": "urltemplate.errors",
    "TokenizationError": "urltemplate.errors",
    "UrlTemplateError": "urltemplate.errors",
    "ExactToken": "urltemplate.tokens",
    "Token": "urltemplate.tokens",
    "VariableToken": "urltemplate.tokens",
    "MatchOptions": "urltemplate.config",
    "MatchResult": "urltemplate.result",
    "parse_url": "urltemplate.parser",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import urltemplate`` from importing httpx until a match is made.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    from importlib import import_module

    return getattr(import_module(module_name), name)
