"""Token matcher — walk template tokens over a decoded URL.

Single forward pass, no backtracking. The cursor is the total length of
URL text consumed so far; every search starts there, so the first
occurrence of a literal at or after the cursor always wins.
"""

import logging
from collections.abc import Sequence

from urltemplate.errors import TokenizationError
from urltemplate.result import MatchResult
from urltemplate.tokens import ExactToken, Token

logger = logging.getLogger("urltemplate.matcher")


def _next_exact(tokens: Sequence[Token], index: int) -> ExactToken | None:
    for token in tokens[index + 1 :]:
        if isinstance(token, ExactToken):
            return token
    return None


def match_tokens(tokens: Sequence[Token], target: str) -> MatchResult:
    """Match *tokens* against *target* (decoded path + query + hash).

    Exact tokens must appear at or after the cursor. A variable captures
    the text up to the next exact token's match, or the rest of *target*
    when it is the last token. Captures may be empty.

    Returns a failed ``MatchResult`` when a literal cannot be located;
    that is an expected outcome, not an error.
    """
    variables: dict[str, str] = {}
    cursor = 0
    last = len(tokens) - 1

    for i, token in enumerate(tokens):
        if isinstance(token, ExactToken):
            if target.find(token.text, cursor) < 0:
                logger.debug("No match: %r not found at or after %d in %r", token.text, cursor, target)
                return MatchResult.failed()
            cursor += len(token.text)
            continue

        if i == last:
            value = target[cursor:]
        else:
            following = _next_exact(tokens, i)
            if following is None:
                msg = (
                    f"Variable {{{token.id}}} is followed by another variable; "
                    "the template should have been rejected before matching."
                )
                raise TokenizationError(msg)
            found = target.find(following.text, cursor)
            if found < 0:
                logger.debug(
                    "No match: %r (after {%s}) not found at or after %d in %r",
                    following.text,
                    token.id,
                    cursor,
                    target,
                )
                return MatchResult.failed()
            value = target[cursor:found]

        variables[token.id] = value
        cursor += len(value)

    return MatchResult.matched(variables)
