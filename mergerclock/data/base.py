"""
Base abstractions for merger record storage.

Defines interfaces for record stores and record filters.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Protocol, runtime_checkable

from mergerclock.schema.records import MergerRecord


@runtime_checkable
class RecordStore(Protocol):
    """
    Protocol for merger record stores.

    CRUD access to merger records held in any backend (file, database, ...).
    """

    def list_records(self) -> List[MergerRecord]:
        ...

    def get_record(self, record_id: str) -> Optional[MergerRecord]:
        ...

    def create_record(self, record: MergerRecord) -> MergerRecord:
        ...

    def update_record(self, record_id: str, **changes) -> MergerRecord:
        ...

    def delete_record(self, record_id: str) -> None:
        ...


@runtime_checkable
class RecordFilter(Protocol):
    """Protocol for filtering merger records."""

    def filter(self, records: List[MergerRecord]) -> List[MergerRecord]:
        ...


class BaseRecordStore(ABC):
    """
    Abstract base class for record stores.

    Provides filter registration; subclasses implement the storage operations.
    """

    def __init__(self):
        """Initialize record store."""
        self._filters: List[RecordFilter] = []

    def add_filter(self, filter_instance: RecordFilter) -> None:
        """
        Add a filter to be applied when listing records.

        Args:
            filter_instance: Filter to add
        """
        self._filters.append(filter_instance)

    def _apply_filters(self, records: List[MergerRecord]) -> List[MergerRecord]:
        result = records
        for filter_instance in self._filters:
            result = filter_instance.filter(result)
        return result

    def list_records(self) -> List[MergerRecord]:
        """All records passing the registered filters, most recent filing first."""
        records = sorted(self._fetch_all(), key=lambda r: r.filing_date, reverse=True)
        return self._apply_filters(records)

    @abstractmethod
    def _fetch_all(self) -> List[MergerRecord]:
        """Load every stored record (to be implemented by subclasses)."""
        pass

    @abstractmethod
    def get_record(self, record_id: str) -> Optional[MergerRecord]:
        pass

    @abstractmethod
    def create_record(self, record: MergerRecord) -> MergerRecord:
        pass

    @abstractmethod
    def update_record(self, record_id: str, **changes) -> MergerRecord:
        pass

    @abstractmethod
    def delete_record(self, record_id: str) -> None:
        pass


class BaseFilter(ABC):
    """
    Abstract base class for record filters.
    """

    @abstractmethod
    def filter(self, records: List[MergerRecord]) -> List[MergerRecord]:
        pass
