"""Template tokenizer — split a template into exact and variable tokens.

A template is tokenized segment by segment (path, query, hash), each
segment offset by the length of the segments before it::

    tokenize_string("/path1/{id}/path2")
    # [ExactToken("/path1/", 0, 6), VariableToken("id", 7, 10), ExactToken("/path2", 11, 16)]

    tokenize_queries([("q", "{term}"), ("page", "1")], 5)
    # [ExactToken("?q=", 5, 7), VariableToken("term", 8, 13),
    #  ExactToken("&page=", 14, 19), ExactToken("1", 20, 20)]

``tokenize_template`` joins the segments and rejects templates whose
variables cannot be told apart.
"""

import re
from collections.abc import Iterable, Mapping, Sequence

from urltemplate.errors import (
    ColocatedVariablesError,
    ConfigurationError,
    DuplicateVariableError,
    TokenizationError,
)
from urltemplate.tokens import ExactToken, Token, VariableToken

# {variable} — no whitespace allowed inside the braces.
# group(0) is the full "{variable}", group(1) the id only.
VARIABLE_RE = re.compile(r"\{(\S+?)\}")


def tokenize_string(segment: str, start_index: int = 0) -> list[Token]:
    """Tokenize one template segment around its ``{variable}`` placeholders.

    Literal runs between placeholders become ``ExactToken``; empty runs
    produce nothing. A segment without placeholders is a single
    ``ExactToken`` (an empty segment produces no tokens at all).

    Raises ``ConfigurationError`` on bad argument types and
    ``TokenizationError`` if the tokens fail to cover the segment.
    """
    if not isinstance(segment, str):
        msg = "Argument 'segment' expects type str."
        raise ConfigurationError(msg)
    if not isinstance(start_index, int) or isinstance(start_index, bool):
        msg = "Argument 'start_index' expects type int."
        raise ConfigurationError(msg)

    tokens: list[Token] = []
    position = 0

    for match in VARIABLE_RE.finditer(segment):
        if match.start() > position:
            tokens.append(
                ExactToken(
                    text=segment[position : match.start()],
                    start_index=start_index + position,
                    stop_index=start_index + match.start() - 1,
                )
            )
        tokens.append(
            VariableToken(
                id=match.group(1),
                start_index=start_index + match.start(),
                stop_index=start_index + match.end() - 1,
            )
        )
        position = match.end()

    if position < len(segment):
        tokens.append(
            ExactToken(
                text=segment[position:],
                start_index=start_index + position,
                stop_index=start_index + len(segment) - 1,
            )
        )

    covered = sum(token.length for token in tokens)
    if covered != len(segment):
        msg = f"Tokenization failed: tokens cover {covered} of {len(segment)} characters in {segment!r}."
        raise TokenizationError(msg)

    return tokens


def tokenize_queries(
    queries: Mapping[str, str] | Iterable[tuple[str, str]],
    start_index: int = 0,
) -> list[Token]:
    """Tokenize query pairs as they appear in a query string.

    The ``?``/``&`` delimiter, key, and ``=`` form one fused ``ExactToken``
    so a variable's value can never swallow a delimiter: ``?q={var}&r=1``
    still matches ``?q=&&&&r=1``. Values are tokenized with
    ``tokenize_string``; empty values add no token.
    """
    pairs = queries.items() if isinstance(queries, Mapping) else queries

    tokens: list[Token] = []
    offset = start_index

    for i, (key, value) in enumerate(pairs):
        prefix = "?" if i == 0 else "&"
        key_token = ExactToken(
            text=f"{prefix}{key}=",
            start_index=offset,
            stop_index=offset + len(key) + 1,
        )
        tokens.append(key_token)
        offset += key_token.length

        if value:
            value_tokens = tokenize_string(value, offset)
            tokens.extend(value_tokens)
            offset += sum(token.length for token in value_tokens)

    return tokens


def check_colocated_variables(tokens: Sequence[Token], template: str | None = None) -> None:
    """Two variable tokens must be separated by an exact token."""
    for current, following in zip(tokens, tokens[1:]):
        if isinstance(current, VariableToken) and isinstance(following, VariableToken):
            raise ColocatedVariablesError(current.id, following.id, template)


def check_duplicate_variables(tokens: Sequence[Token], template: str | None = None) -> None:
    """Each variable id may appear only once per template."""
    seen: set[str] = set()
    for token in tokens:
        if not isinstance(token, VariableToken):
            continue
        if token.id in seen:
            raise DuplicateVariableError(token.id, template)
        seen.add(token.id)


def tokenize_template(
    path: str,
    query_pairs: Mapping[str, str] | Iterable[tuple[str, str]] = (),
    query_string: str = "",
    hash_: str = "",
    *,
    template: str | None = None,
) -> list[Token]:
    """Tokenize a decomposed template into one validated token sequence.

    Offsets run across the reconstructed ``path + query_string + hash_``.
    *template* is only used to label errors.

    Raises ``ColocatedVariablesError`` or ``DuplicateVariableError`` when
    the template is ambiguous.
    """
    tokens: list[Token] = []
    tokens.extend(tokenize_string(path, 0))
    tokens.extend(tokenize_queries(query_pairs, len(path)))
    if hash_:
        tokens.extend(tokenize_string(hash_, len(path) + len(query_string)))

    check_colocated_variables(tokens, template)
    check_duplicate_variables(tokens, template)
    return tokens
