"""URL decomposition for templates and target URLs.

Parsing and normalization go through ``httpx.URL``; query pairs are
split with ``urllib.parse`` so repeated keys keep declaration order.

Usage::

    from urltemplate.urls import split_url

    parts = split_url("https://localhost:3000/books/12?page=2#notes")
    parts.origin       # "https://localhost:3000"
    parts.path         # "/books/12"
    parts.query_string # "?page=2"
    parts.query_pairs  # (("page", "2"),)
    parts.hash         # "#notes"
"""

import re
from dataclasses import dataclass
from urllib.parse import parse_qsl, unquote

import httpx

# Escapes decode_uri leaves alone: decoding them would change how the
# string splits into path, query, and hash.
_RESERVED = frozenset(";/?:@&=+$,#")
_ESCAPE_RUN_RE = re.compile(r"(?:%[0-9A-Fa-f]{2})+")


def decode_uri(text: str) -> str:
    """Percent-decode *text*, keeping escapes of URI delimiters intact.

    ``/another%20path`` -> ``/another path`` but ``a%26b`` stays ``a%26b``.
    Invalid UTF-8 sequences decode to U+FFFD.
    """

    def _decode_run(match: re.Match[str]) -> str:
        run = match.group(0)
        out: list[str] = []
        pending: list[str] = []
        for i in range(0, len(run), 3):
            escape = run[i : i + 3]
            if chr(int(escape[1:], 16)) in _RESERVED:
                out.append(unquote("".join(pending)))
                pending.clear()
                out.append(escape)
            else:
                pending.append(escape)
        out.append(unquote("".join(pending)))
        return "".join(out)

    return _ESCAPE_RUN_RE.sub(_decode_run, text)


@dataclass(frozen=True, slots=True)
class UrlParts:
    """Decoded components of an absolute URL.

    ``query_string`` includes the leading ``?`` and ``hash`` the leading
    ``#``; both are empty when the URL has no such component.
    ``query_pairs`` keeps declaration order and repeated keys.
    """

    origin: str
    path: str
    query_string: str
    query_pairs: tuple[tuple[str, str], ...]
    hash: str

    @property
    def target(self) -> str:
        """Everything after the origin: path + query string + hash."""
        return self.path + self.query_string + self.hash


def _parse(url: str) -> httpx.URL | None:
    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL:
        return None
    if not parsed.is_absolute_url:
        return None
    return parsed


def split_url(url: str) -> UrlParts | None:
    """Decompose an absolute URL, or return ``None`` for anything else.

    Relative references (``/path``) and malformed URLs both give ``None``;
    callers decide whether that is an error. Dot segments in the path are
    resolved (``/a/./b`` -> ``/a/b``); escapes of URI delimiters stay
    encoded in the path, query string, and hash alike.
    """
    parsed = _parse(url)
    if parsed is None:
        return None

    raw_path = parsed.raw_path.decode("ascii").split("?", 1)[0]
    raw_query = parsed.query.decode("ascii")
    # str(parsed) is fully percent-encoded, so the first "#" starts the fragment
    raw_fragment = str(parsed).partition("#")[2]
    return UrlParts(
        origin=f"{parsed.scheme}://{parsed.netloc.decode('ascii')}",
        path=decode_uri(raw_path),
        query_string=decode_uri(f"?{raw_query}") if raw_query else "",
        query_pairs=tuple(parse_qsl(raw_query, keep_blank_values=True)),
        hash=decode_uri(f"#{raw_fragment}") if raw_fragment else "",
    )
