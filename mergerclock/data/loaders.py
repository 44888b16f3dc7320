"""
Concrete record store implementations.

Provides stores backed by a JSON file and by PostgreSQL.
"""

import json
import logging
import os
from dataclasses import fields, replace
from pathlib import Path
from typing import Dict, List, Optional

from mergerclock.schema.records import MergerRecord

from .base import BaseRecordStore

logger = logging.getLogger(__name__)

_COLUMNS = [f.name for f in fields(MergerRecord)]


class JSONRecordStore(BaseRecordStore):
    """
    Merger records kept as a list of objects in a single JSON file.

    Useful for testing, demos, or when the database is unavailable.
    """

    def __init__(self, path: Optional[Path] = None):
        """
        Initialize JSON record store.

        Args:
            path: JSON file (defaults to env var MERGERCLOCK_RECORDS_PATH, then ./mergers.json)
        """
        super().__init__()
        self.path = Path(path or os.getenv("MERGERCLOCK_RECORDS_PATH", "mergers.json"))

    def _read(self) -> List[Dict]:
        if not self.path.exists():
            return []
        with open(self.path, "r", encoding="utf-8") as f:
            return json.load(f)

    def _write(self, rows: List[Dict]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(rows, f, indent=2)

    def _fetch_all(self) -> List[MergerRecord]:
        return [MergerRecord.from_dict(row) for row in self._read()]

    def get_record(self, record_id: str) -> Optional[MergerRecord]:
        for row in self._read():
            if row.get("id") == record_id:
                return MergerRecord.from_dict(row)
        logger.warning("Merger record %s not found in %s", record_id, self.path)
        return None

    def create_record(self, record: MergerRecord) -> MergerRecord:
        rows = self._read()
        if any(row.get("id") == record.id for row in rows):
            raise ValueError(f"Merger record {record.id} already exists")
        rows.append(record.to_dict())
        self._write(rows)
        logger.info("Created merger record %s", record.id)
        return record

    def update_record(self, record_id: str, **changes) -> MergerRecord:
        rows = self._read()
        for i, row in enumerate(rows):
            if row.get("id") == record_id:
                updated = replace(MergerRecord.from_dict(row), **changes)
                rows[i] = updated.to_dict()
                self._write(rows)
                logger.info("Updated merger record %s: %s", record_id, sorted(changes))
                return updated
        raise KeyError(record_id)

    def delete_record(self, record_id: str) -> None:
        rows = self._read()
        remaining = [row for row in rows if row.get("id") != record_id]
        if len(remaining) == len(rows):
            raise KeyError(record_id)
        self._write(remaining)
        logger.info("Deleted merger record %s", record_id)


class PostgreSQLRecordStore(BaseRecordStore):
    """
    Merger records in the PostgreSQL `mergers` table.
    """

    def __init__(
        self,
        host: Optional[str] = None,
        port: Optional[int] = None,
        user: Optional[str] = None,
        password: Optional[str] = None,
        database: Optional[str] = None,
        table: str = "mergers",
    ):
        """
        Initialize PostgreSQL record store.

        Args:
            host: Database host (defaults to env var POSTGRES_HOST)
            port: Database port (defaults to env var POSTGRES_PORT)
            user: Database user (defaults to env var POSTGRES_USER)
            password: Database password (defaults to env var POSTGRES_PASSWORD)
            database: Database name (defaults to env var POSTGRES_DB)
            table: Table holding merger rows
        """
        super().__init__()
        self.table = table
        self.config = {
            "host": host or os.getenv("POSTGRES_HOST", "localhost"),
            "port": port or int(os.getenv("POSTGRES_PORT", "5432")),
            "user": user or os.getenv("POSTGRES_USER", "postgres"),
            "password": password or os.getenv("POSTGRES_PASSWORD", ""),
            "database": database or os.getenv("POSTGRES_DB", "mergers"),
        }

    def _connect(self):
        try:
            import psycopg2
            import psycopg2.extras
        except ImportError:
            raise ImportError(
                "psycopg2 is required for PostgreSQL record store. "
                "Install it with: pip install psycopg2-binary"
            )

        return psycopg2.connect(
            cursor_factory=psycopg2.extras.RealDictCursor, **self.config
        )

    def _query(self, sql: str, params=()) -> List[Dict]:
        conn = self._connect()
        try:
            with conn:
                with conn.cursor() as cur:
                    cur.execute(sql, params)
                    return [dict(row) for row in cur.fetchall()]
        finally:
            conn.close()

    def _fetch_all(self) -> List[MergerRecord]:
        rows = self._query(
            f"SELECT {', '.join(_COLUMNS)} FROM {self.table} ORDER BY filing_date DESC"
        )
        return [MergerRecord.from_dict(row) for row in rows]

    def get_record(self, record_id: str) -> Optional[MergerRecord]:
        rows = self._query(
            f"SELECT {', '.join(_COLUMNS)} FROM {self.table} WHERE id = %s",
            (record_id,),
        )
        if not rows:
            logger.warning("Merger record %s not found in %s", record_id, self.table)
            return None
        return MergerRecord.from_dict(rows[0])

    def create_record(self, record: MergerRecord) -> MergerRecord:
        data = record.to_dict()
        placeholders = ", ".join(["%s"] * len(_COLUMNS))
        rows = self._query(
            f"INSERT INTO {self.table} ({', '.join(_COLUMNS)}) "
            f"VALUES ({placeholders}) RETURNING {', '.join(_COLUMNS)}",
            tuple(data[c] for c in _COLUMNS),
        )
        logger.info("Created merger record %s", record.id)
        return MergerRecord.from_dict(rows[0])

    def update_record(self, record_id: str, **changes) -> MergerRecord:
        unknown = set(changes) - set(_COLUMNS)
        if unknown:
            raise ValueError(f"Unknown merger record fields: {sorted(unknown)}")
        current = self.get_record(record_id)
        if current is None:
            raise KeyError(record_id)
        if not changes:
            return current

        data = replace(current, **changes).to_dict()
        columns = [c for c in _COLUMNS if c in changes]
        assignments = ", ".join(f"{c} = %s" for c in columns)
        rows = self._query(
            f"UPDATE {self.table} SET {assignments}, updated_at = NOW() "
            f"WHERE id = %s RETURNING {', '.join(_COLUMNS)}",
            tuple(data[c] for c in columns) + (record_id,),
        )
        logger.info("Updated merger record %s: %s", record_id, sorted(changes))
        return MergerRecord.from_dict(rows[0])

    def delete_record(self, record_id: str) -> None:
        rows = self._query(
            f"DELETE FROM {self.table} WHERE id = %s RETURNING id", (record_id,)
        )
        if not rows:
            raise KeyError(record_id)
        logger.info("Deleted merger record %s", record_id)
