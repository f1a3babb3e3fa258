"""Immutable result of a delete operation.

A DeleteResult is produced by whatever executed the delete and is handed to
the notification side, which reads ``affected_tables`` and ``affected_tags``
to decide which observers to wake up.
"""

from __future__ import annotations

import operator
from collections.abc import Iterable
from dataclasses import dataclass, field

from storeops.checks import check_not_empty, check_not_none
from storeops.types import TableName, TagName


def _format_names(names: Iterable[object]) -> str:
    """Render a collection of names for error messages."""
    return "{" + ", ".join(repr(name) for name in names) + "}"


def _collect_names(names: object, kind: str) -> tuple[object, ...]:
    """Snapshot a collection of names, rejecting bare strings and scalars."""
    # A bare str would silently split into one-character names
    if isinstance(names, str):
        raise ValueError(
            f"{kind} must be a collection of names, got a str; "
            "use DeleteResult.new_instance() for a single table or tag"
        )
    try:
        return tuple(names)  # type: ignore[call-overload]
    except TypeError:
        raise ValueError(
            f"{kind} must be a collection of names, got {type(names).__name__}"
        ) from None


@dataclass(frozen=True, slots=True)
class DeleteResult:
    """Immutable container for the result of a delete operation.

    Attributes:
        number_of_rows_deleted: How many rows the delete removed. Never negative.
        affected_tables: Names of the tables the delete touched.
        affected_tags: Notification tags the delete touched. Empty when the
            caller supplied none.
    """

    number_of_rows_deleted: int
    affected_tables: frozenset[TableName]
    affected_tags: frozenset[TagName] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        check_not_none(self.affected_tables, "Please specify affected tables")
        tables = _collect_names(self.affected_tables, "affected_tables")
        for table in tables:
            check_not_empty(
                table,
                "affected_table must not be None or empty, "
                f"affected_tables = {_format_names(tables)}",
            )

        # None means the caller had no tags to report
        tags = (
            ()
            if self.affected_tags is None
            else _collect_names(self.affected_tags, "affected_tags")
        )
        for tag in tags:
            check_not_empty(
                tag,
                "affected_tag must not be None or empty, "
                f"affected_tags = {_format_names(tags)}",
            )

        count = self.number_of_rows_deleted
        if isinstance(count, bool):
            raise ValueError("number_of_rows_deleted must be an int, got bool")
        try:
            count = operator.index(count)
        except TypeError:
            raise ValueError(
                f"number_of_rows_deleted must be an int, got {type(count).__name__}"
            ) from None
        if count < 0:
            raise ValueError(f"number_of_rows_deleted must not be negative: {count}")

        object.__setattr__(self, "number_of_rows_deleted", count)
        object.__setattr__(self, "affected_tables", frozenset(tables))
        object.__setattr__(self, "affected_tags", frozenset(tags))

    @classmethod
    def new_instance(
        cls,
        number_of_rows_deleted: int,
        affected_tables: TableName | Iterable[TableName] | None,
        affected_tags: TagName | Iterable[TagName] | None = None,
    ) -> DeleteResult:
        """Create a DeleteResult.

        Args:
            number_of_rows_deleted: Number of rows that were deleted
            affected_tables: A single table name, or the tables that were affected
            affected_tags: A single tag, the tags that were affected, or None

        Returns:
            New immutable DeleteResult

        Raises:
            ValueError: If tables are missing, any table/tag name is empty, or
                the row count is not a non-negative integer
        """
        if isinstance(affected_tables, str):
            affected_tables = (affected_tables,)
        if isinstance(affected_tags, str):
            affected_tags = (affected_tags,)
        return cls(
            number_of_rows_deleted,
            affected_tables,  # type: ignore[arg-type]
            affected_tags,  # type: ignore[arg-type]
        )


new_instance = DeleteResult.new_instance

__all__ = ["DeleteResult", "new_instance"]
