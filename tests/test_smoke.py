"""Smoke tests to verify package structure and imports work."""


def test_import_types():
    """Test that core types can be imported."""
    from pyoptional import Absent, AbsentType, Optional, Present

    assert Optional is not None
    assert Present is not None
    assert AbsentType is not None
    assert Absent is not None


def test_import_errors():
    """Test that the error taxonomy can be imported."""
    from pyoptional import FlatMapContractViolationError, NoSuchElementError, NullPointerError, OptionalError

    assert OptionalError is not None
    assert NullPointerError is not None
    assert NoSuchElementError is not None
    assert FlatMapContractViolationError is not None


def test_import_submodules():
    """Test that submodule imports match the flat ones."""
    import pyoptional
    from pyoptional.codec import decode, encode
    from pyoptional.decorators import optional_return
    from pyoptional.types import Optional

    assert Optional is pyoptional.Optional
    assert optional_return is pyoptional.optional_return
    assert encode is not None
    assert decode is not None


def test_all_exports_resolve():
    """Every name in __all__ is importable."""
    import pyoptional

    for name in pyoptional.__all__:
        assert getattr(pyoptional, name) is not None


def test_scenarios():
    """End-to-end usage of the public surface."""
    from pyoptional import Optional

    assert Optional.of('something').map(len).get() == 9
    assert Optional.empty().or_else('fallback') == 'fallback'
    assert str(Optional.of('v')) == 'Optional[v]'
    assert str(Optional.empty()) == 'Optional.empty'
