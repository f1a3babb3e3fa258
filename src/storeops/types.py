"""Core types for storeops."""

TableName = str
TagName = str
