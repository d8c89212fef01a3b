"""Ensure packages expose the expected public names."""

from importlib import import_module

import pytest


@pytest.mark.parametrize(
    "module_name",
    ["src.adapters.interface", "src.adapters.interface.streamlit"],
)
def test_interface_package_exports_are_empty(module_name: str) -> None:
    module = import_module(module_name)
    assert module.__all__ == []


@pytest.mark.parametrize(
    "module_name",
    [
        "src.application.ports",
        "src.application.use_cases",
        "src.domain.models",
        "src.domain.services",
    ],
)
def test_package_exports_resolve(module_name: str) -> None:
    """Every name in __all__ is importable from the package."""
    module = import_module(module_name)
    assert module.__all__
    for name in module.__all__:
        assert hasattr(module, name), name
