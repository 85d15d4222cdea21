"""Public entry point — match a URL against a ``{variable}`` template.

Usage::

    from urltemplate import parse_url

    result = parse_url("/books/{book}/?author={author}", location)
    if result:
        result.variables  # {"book": "...", "author": "..."}

The URL must be absolute; its origin is ignored. Matching is case
sensitive, and text beyond what the template requires is ignored.
"""

import logging
from collections.abc import Mapping
from typing import Any

from urltemplate.config import MatchOptions, resolve_options
from urltemplate.errors import ConfigurationError
from urltemplate.matcher import match_tokens
from urltemplate.result import MatchResult
from urltemplate.tokenizer import tokenize_template
from urltemplate.urls import UrlParts, split_url
from urltemplate.validation import is_string, require

logger = logging.getLogger("urltemplate.parser")


def _align_trailing_slash(template: str, url: str) -> tuple[str, str]:
    """Append ``/`` to whichever of the pair lacks the other's trailing slash."""
    url_slash = url.endswith("/")
    template_slash = template.endswith("/")
    if url_slash and not template_slash:
        template += "/"
    elif template_slash and not url_slash:
        url += "/"
    return template, url


def _split_template(template: str, origin: str) -> UrlParts | None:
    """Decompose *template* relative to *origin*.

    Returns ``None`` for an absolute template on a different origin,
    which can never match.
    """
    absolute = split_url(template)
    if absolute is not None:
        if absolute.origin != origin:
            logger.debug("No match: template origin %r differs from %r", absolute.origin, origin)
            return None
        return absolute

    if not template.startswith("/"):
        template = f"/{template}"

    parts = split_url(origin + template)
    if parts is None:
        msg = f"Template {template!r} does not form a valid URL with origin {origin!r}."
        raise ConfigurationError(msg)
    return parts


def parse_url(
    template: str,
    url: str,
    options: MatchOptions | Mapping[str, Any] | None = None,
) -> MatchResult:
    """Match *url* against *template* and extract its variables.

    Args:
        template: A relative (or same-origin absolute) URL with
            ``{variable}`` placeholders in its path, query, or hash.
            Placeholders containing whitespace are literal text.
        url: The absolute URL to test, e.g. the current location.
        options: ``MatchOptions`` or a mapping such as
            ``{"ignore_trailing_slash": True}``.

    Returns:
        A truthy ``MatchResult`` with ``.variables`` on a match, or a falsy
        one with no variables. Values are raw strings and may be empty.

    Raises:
        ConfigurationError: Bad arguments or options, a URL that is not
            absolute, or a template with colocated or duplicate variables.
    """
    require(is_string(template), "Argument 'template' expects a non-empty string.")
    require(is_string(url), "Argument 'url' expects a non-empty string.")

    url_parts = split_url(url)
    if url_parts is None:
        msg = f"Url {url!r} is invalid. Url must start with an origin in the format of scheme://host[:port]."
        raise ConfigurationError(msg)

    opts = resolve_options(options)

    if opts.ignore_trailing_slash:
        template, url = _align_trailing_slash(template, url)
        url_parts = split_url(url)
        if url_parts is None:
            msg = f"Url {url!r} is invalid after appending a trailing slash."
            raise ConfigurationError(msg)

    template_parts = _split_template(template, url_parts.origin)
    if template_parts is None:
        return MatchResult.failed()

    logger.debug("Matching %r against %r", template_parts.target, url_parts.target)

    tokens = tokenize_template(
        template_parts.path,
        template_parts.query_pairs,
        template_parts.query_string,
        template_parts.hash,
        template=template,
    )
    return match_tokens(tokens, url_parts.target)
