"""MatchResult — outcome of matching a URL against a template."""

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class MatchResult:
    """The outcome of a single ``parse_url`` call.

    The result is falsy when the URL did not match, so you can write::

        result = parse_url("/books/{id}", location)
        if not result:
            return
        book_id = result.variables["id"]

    ``variables`` maps variable ids to raw extracted strings, in template
    order. Values may be empty. A failed match never carries variables.
    """

    success: bool
    variables: dict[str, str] = field(default_factory=dict)

    @classmethod
    def failed(cls) -> "MatchResult":
        return cls(success=False)

    @classmethod
    def matched(cls, variables: dict[str, str]) -> "MatchResult":
        return cls(success=True, variables=variables)

    def __bool__(self) -> bool:
        """Falsy on no-match — enables ``if not result:`` pattern."""
        return self.success
