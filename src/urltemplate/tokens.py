"""Template tokens — the exact/variable pieces a template is split into.

Offsets are inclusive and index into the reconstructed template string
(decoded path, then query string, then hash).
"""

from dataclasses import dataclass
from enum import Enum


class TokenKind(Enum):
    """Discriminator for the two token shapes."""

    EXACT = "exact"
    VARIABLE = "var"


@dataclass(frozen=True, slots=True)
class ExactToken:
    """Literal text the URL must contain verbatim.

    ``/path1/`` in ``/path1/{id}`` -> ``ExactToken("/path1/", 0, 6)``
    """

    text: str
    start_index: int
    stop_index: int

    @property
    def kind(self) -> TokenKind:
        return TokenKind.EXACT

    @property
    def length(self) -> int:
        return len(self.text)


@dataclass(frozen=True, slots=True)
class VariableToken:
    """A ``{name}`` placeholder. Offsets include both braces.

    ``{id}`` in ``/path1/{id}`` -> ``VariableToken("id", 7, 10)``
    """

    id: str
    start_index: int
    stop_index: int

    @property
    def kind(self) -> TokenKind:
        return TokenKind.VARIABLE

    @property
    def length(self) -> int:
        return self.stop_index - self.start_index + 1


type Token = ExactToken | VariableToken
