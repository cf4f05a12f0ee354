"""Tests for finch.__init__ — lazy imports cover all public names."""

import pytest

import finch


@pytest.mark.parametrize("name", finch.__all__)
def test_all_names_resolve(name: str) -> None:
    """Every name in __all__ must resolve via __getattr__ without error."""
    obj = getattr(finch, name)
    assert obj is not None, f"finch.{name} resolved to None"


def test_unknown_name_raises_attribute_error() -> None:
    """Accessing an unregistered name raises AttributeError."""
    with pytest.raises(AttributeError, match="no attribute"):
        finch.__getattr__("ThisDoesNotExist")
