"""Tests for package exports."""


def test_exports_available() -> None:
    """Test that the public API is importable from the package root."""
    from storeops import (
        DeleteResult,
        check_not_empty,
        check_not_none,
        new_instance,
    )

    assert DeleteResult is not None
    assert check_not_empty is not None
    assert check_not_none is not None
    assert new_instance is not None


def test_module_factory_is_classmethod() -> None:
    """Test that the module-level factory builds DeleteResults."""
    from storeops import DeleteResult, new_instance

    assert new_instance(1, "users") == DeleteResult.new_instance(1, "users")


def test_version() -> None:
    import storeops

    assert storeops.__version__ == "0.1.0"


def test_public_api() -> None:
    import storeops

    assert sorted(storeops.__all__) == [
        "DeleteResult",
        "TableName",
        "TagName",
        "check_not_empty",
        "check_not_none",
        "new_instance",
    ]
