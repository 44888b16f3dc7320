"""
Factory for creating record stores.
"""

from enum import Enum
from pathlib import Path

from .base import RecordStore
from .loaders import JSONRecordStore, PostgreSQLRecordStore


class RecordStoreType(Enum):
    """Supported record store types."""
    POSTGRESQL = "postgresql"
    JSON = "json"


def create_record_store(
    store_type: RecordStoreType,
    **kwargs
) -> RecordStore:
    """
    Create record store with appropriate configuration.

    Args:
        store_type: Type of record store to create
        **kwargs: Configuration parameters specific to store type

    Returns:
        Configured record store

    Examples:
        >>> # Create PostgreSQL store with default config
        >>> store = create_record_store(RecordStoreType.POSTGRESQL)

        >>> # Create JSON store
        >>> store = create_record_store(
        ...     RecordStoreType.JSON,
        ...     path="/path/to/mergers.json"
        ... )
    """
    if store_type == RecordStoreType.POSTGRESQL:
        return PostgreSQLRecordStore(
            host=kwargs.get("host"),
            port=kwargs.get("port"),
            user=kwargs.get("user"),
            password=kwargs.get("password"),
            database=kwargs.get("database"),
            table=kwargs.get("table", "mergers"),
        )
    elif store_type == RecordStoreType.JSON:
        path = kwargs.get("path")
        return JSONRecordStore(path=Path(path) if path else None)
    else:
        raise ValueError(f"Unsupported record store type: {store_type}")
