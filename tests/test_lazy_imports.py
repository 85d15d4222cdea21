"""Tests for urltemplate.__init__ — lazy import registry covers all public names."""

import pytest

import urltemplate


@pytest.mark.parametrize("name", urltemplate.__all__)
def test_all_names_resolve(name: str) -> None:
    """Every name in __all__ must resolve via __getattr__ without error."""
    obj = getattr(urltemplate, name)
    assert obj is not None, f"urltemplate.{name} resolved to None"


def test_all_names_in_lazy_registry() -> None:
    missing = set(urltemplate.__all__) - set(urltemplate._LAZY_IMPORTS)
    assert not missing, f"Names in __all__ but not in _LAZY_IMPORTS: {sorted(missing)}"


def test_lazy_registry_no_extras() -> None:
    extras = set(urltemplate._LAZY_IMPORTS) - set(urltemplate.__all__)
    assert not extras, f"Names in _LAZY_IMPORTS but not in __all__: {sorted(extras)}"


def test_unknown_name_raises() -> None:
    with pytest.raises(AttributeError, match="has no attribute 'nope'"):
        urltemplate.nope  # noqa: B018
