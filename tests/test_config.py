"""Tests for urltemplate.config — MatchOptions frozen dataclass."""

import pytest

from urltemplate.config import MatchOptions, resolve_options
from urltemplate.errors import ConfigurationError


class TestMatchOptions:
    def test_defaults(self) -> None:
        assert MatchOptions().ignore_trailing_slash is False

    def test_override(self) -> None:
        assert MatchOptions(ignore_trailing_slash=True).ignore_trailing_slash is True

    def test_frozen(self) -> None:
        opts = MatchOptions()
        with pytest.raises(AttributeError):
            opts.ignore_trailing_slash = True  # type: ignore[misc]

    def test_rejects_non_bool(self) -> None:
        with pytest.raises(ConfigurationError, match="expects bool"):
            MatchOptions(ignore_trailing_slash="yes")  # type: ignore[arg-type]


class TestFromMapping:
    @pytest.mark.parametrize("options", [None, {}])
    def test_empty_gives_defaults(self, options: dict | None) -> None:
        assert MatchOptions.from_mapping(options) == MatchOptions()

    @pytest.mark.parametrize("key", ["ignore_trailing_slash", "ignoreTrailingSlash", "IGNORE_TRAILING_SLASH"])
    def test_accepted_spellings(self, key: str) -> None:
        assert MatchOptions.from_mapping({key: True}).ignore_trailing_slash is True

    def test_none_value_keeps_default(self) -> None:
        assert MatchOptions.from_mapping({"ignore_trailing_slash": None}) == MatchOptions()

    def test_unknown_key(self) -> None:
        with pytest.raises(ConfigurationError, match="Valid options are ignore_trailing_slash"):
            MatchOptions.from_mapping({"a": 5})

    def test_non_bool_value(self) -> None:
        with pytest.raises(ConfigurationError, match=r"options\.ignoreTrailingSlash' expects bool"):
            MatchOptions.from_mapping({"ignoreTrailingSlash": "abc"})

    @pytest.mark.parametrize("options", ["abc", 5, ["ignore_trailing_slash"], object()])
    def test_not_a_mapping(self, options: object) -> None:
        with pytest.raises(ConfigurationError, match="expects a mapping"):
            MatchOptions.from_mapping(options)  # type: ignore[arg-type]


class TestResolveOptions:
    def test_passes_through_instance(self) -> None:
        opts = MatchOptions(ignore_trailing_slash=True)
        assert resolve_options(opts) is opts

    def test_builds_from_mapping(self) -> None:
        assert resolve_options({"ignore_trailing_slash": True}) == MatchOptions(ignore_trailing_slash=True)

    def test_none(self) -> None:
        assert resolve_options(None) == MatchOptions()
