"""
Merger record storage.

Provides abstractions and implementations for storing merger records in a
JSON file or a PostgreSQL table.
"""

from .base import BaseFilter, BaseRecordStore, RecordFilter, RecordStore
from .factory import RecordStoreType, create_record_store
from .filters import FiledBetweenFilter, IndustryFilter, StatusFilter
from .loaders import JSONRecordStore, PostgreSQLRecordStore

__all__ = [
    # Base abstractions
    "RecordStore",
    "RecordFilter",
    "BaseRecordStore",
    "BaseFilter",
    # Concrete implementations
    "JSONRecordStore",
    "PostgreSQLRecordStore",
    # Filters
    "StatusFilter",
    "IndustryFilter",
    "FiledBetweenFilter",
    # Factory
    "create_record_store",
    "RecordStoreType",
]
