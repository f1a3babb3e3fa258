"""Shared pytest fixtures."""

import pytest

from storeops import DeleteResult


@pytest.fixture
def tables() -> set[str]:
    """A fresh, mutable set of table names for each test."""
    return {"users", "orders"}


@pytest.fixture
def tags() -> set[str]:
    """A fresh, mutable set of notification tags for each test."""
    return {"tagA"}


@pytest.fixture
def result(tables: set[str], tags: set[str]) -> DeleteResult:
    """A DeleteResult built from the tables and tags fixtures."""
    return DeleteResult.new_instance(3, tables, tags)
