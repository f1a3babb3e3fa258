"""storeops - Immutable results of storage operations."""

from storeops.checks import check_not_empty, check_not_none
from storeops.delete_result import DeleteResult, new_instance

# Core types
from storeops.types import TableName, TagName

__version__ = "0.1.0"

__all__ = [
    "DeleteResult",
    "TableName",
    "TagName",
    "check_not_empty",
    "check_not_none",
    "new_instance",
]
