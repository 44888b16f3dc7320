"""Merger record conversions and the JSON record store."""

import json
from datetime import date

import pytest

from mergerclock.data import (
    FiledBetweenFilter,
    IndustryFilter,
    JSONRecordStore,
    PostgreSQLRecordStore,
    RecordStore,
    RecordStoreType,
    StatusFilter,
    create_record_store,
)
from mergerclock.schema import (
    MergerOutcome,
    MergerRecord,
    MergerStatus,
    convert_to_merger,
    convert_to_record,
)


def record(record_id, filing, status="Phase 1", industry="Retail", **extra):
    return MergerRecord(
        id=record_id,
        acquirer=f"Acquirer {record_id}",
        target=f"Target {record_id}",
        industry=industry,
        filing_date=filing,
        current_status=status,
        **extra,
    )


@pytest.fixture
def store(tmp_path):
    s = JSONRecordStore(tmp_path / "mergers.json")
    s.create_record(record("a", "2026-01-05"))
    s.create_record(record("b", "2026-03-02", status="Phase 2", industry="Energy", has_phase_2=True))
    s.create_record(record("c", "2025-11-03", status="Cleared", status_date="2026-01-20"))
    return s


def test_record_defaults():
    r = record("x", "2026-01-05")
    assert r.name == "Target x / Acquirer x"
    assert r.filing_date == date(2026, 1, 5)
    assert r.status == MergerStatus.PHASE_1
    assert record("y", "2026-01-05", status="Unknown label").status is None


def test_convert_to_merger_maps_status():
    merger = convert_to_merger(record("b", "2026-03-02", status="Phase 2"))
    assert merger.outcome == MergerOutcome.UNDER_REVIEW
    assert merger.has_phase_2
    assert merger.end_date is None

    withdrawn = convert_to_merger(record("w", "2026-03-02", status="Withdrawn", status_date="2026-04-01"))
    assert withdrawn.outcome == MergerOutcome.BLOCKED
    assert withdrawn.end_date == date(2026, 4, 1)


def test_convert_to_record_keeps_phase2_label():
    merger = convert_to_merger(record("b", "2026-03-02", status="Phase 2"))
    assert convert_to_record(merger).current_status == "Phase 2"


def test_store_satisfies_protocol(store):
    assert isinstance(store, RecordStore)


def test_list_records_newest_first(store):
    assert [r.id for r in store.list_records()] == ["b", "a", "c"]


def test_get_record(store):
    assert store.get_record("c").status_date == date(2026, 1, 20)
    assert store.get_record("missing") is None


def test_create_duplicate_rejected(store):
    with pytest.raises(ValueError, match="already exists"):
        store.create_record(record("a", "2026-01-05"))


def test_update_record(store):
    updated = store.update_record("a", current_status="Phase 2", has_phase_2=True)
    assert updated.has_phase_2
    assert store.get_record("a").current_status == "Phase 2"
    with pytest.raises(KeyError):
        store.update_record("missing", has_phase_2=True)


def test_delete_record(store):
    store.delete_record("b")
    assert [r.id for r in store.list_records()] == ["a", "c"]
    with pytest.raises(KeyError):
        store.delete_record("b")


def test_file_holds_iso_dates(store):
    rows = json.loads(store.path.read_text(encoding="utf-8"))
    assert rows[0]["filing_date"] == "2026-01-05"
    assert rows[2]["status_date"] == "2026-01-20"


def test_filters(store):
    store.add_filter(StatusFilter.under_review())
    assert [r.id for r in store.list_records()] == ["b", "a"]
    store.add_filter(IndustryFilter("energy"))
    assert [r.id for r in store.list_records()] == ["b"]


def test_filed_between_filter(store):
    store.add_filter(FiledBetweenFilter(start=date(2025, 12, 1), end=date(2026, 2, 1)))
    assert [r.id for r in store.list_records()] == ["a"]


def test_factory(tmp_path):
    json_store = create_record_store(RecordStoreType.JSON, path=str(tmp_path / "m.json"))
    assert isinstance(json_store, JSONRecordStore)
    assert json_store.list_records() == []

    pg_store = create_record_store(RecordStoreType.POSTGRESQL, host="db.internal", port=6543)
    assert isinstance(pg_store, PostgreSQLRecordStore)
    assert pg_store.config["host"] == "db.internal"
    assert pg_store.config["port"] == 6543

    with pytest.raises(ValueError):
        create_record_store("csv")


def test_record_requires_filing_date():
    with pytest.raises(TypeError):
        record("x", None)
    with pytest.raises(ValueError):
        record("x", "")


def test_stored_row_without_filing_date_rejected_on_load(tmp_path):
    path = tmp_path / "m.json"
    path.write_text(json.dumps([{**record("a", "2026-01-05").to_dict(), "filing_date": None}]))
    with pytest.raises(TypeError):
        JSONRecordStore(path).list_records()


class FakeCursor:
    def __init__(self, conn):
        self.conn = conn

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def execute(self, sql, params):
        self.conn.executed.append((sql, params))

    def fetchall(self):
        return self.conn.results.pop(0) if self.conn.results else []


class FakeConnection:
    """Stands in for a psycopg2 connection; each query consumes one result set."""

    def __init__(self, *results):
        self.results = list(results)
        self.executed = []
        self.closed = 0

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def cursor(self):
        return FakeCursor(self)

    def close(self):
        self.closed += 1


def pg_store(monkeypatch, *results):
    conn = FakeConnection(*results)
    s = PostgreSQLRecordStore(host="db.internal")
    monkeypatch.setattr(s, "_connect", lambda: conn)
    return s, conn


def pg_row(record_id, filing, **extra):
    # psycopg2 returns DATE columns as datetime.date
    row = record(record_id, "2026-01-01", **extra).to_dict()
    row["filing_date"] = filing
    return row


COLUMNS = (
    "id, acquirer, target, industry, filing_date, current_status, "
    "status_date, name, description, is_followed, has_phase_2"
)


def test_postgres_create_record(monkeypatch):
    new = record("a", "2026-01-05", industry="Energy")
    s, conn = pg_store(monkeypatch, [pg_row("a", date(2026, 1, 5), industry="Energy")])

    created = s.create_record(new)

    assert created == new
    sql, params = conn.executed[0]
    assert sql == (
        f"INSERT INTO mergers ({COLUMNS}) VALUES ({', '.join(['%s'] * 11)}) "
        f"RETURNING {COLUMNS}"
    )
    assert params[:5] == ("a", "Acquirer a", "Target a", "Energy", "2026-01-05")
    assert len(params) == 11
    assert conn.closed == 1


def test_postgres_get_and_list(monkeypatch):
    s, conn = pg_store(
        monkeypatch,
        [pg_row("a", date(2026, 1, 5))],
        [],
        [pg_row("a", date(2026, 1, 5)), pg_row("b", date(2026, 2, 9))],
    )

    assert s.get_record("a").filing_date == date(2026, 1, 5)
    assert s.get_record("missing") is None
    assert [r.id for r in s.list_records()] == ["b", "a"]

    assert conn.executed[0] == (f"SELECT {COLUMNS} FROM mergers WHERE id = %s", ("a",))
    assert conn.executed[2][0] == f"SELECT {COLUMNS} FROM mergers ORDER BY filing_date DESC"
    assert conn.closed == 3


def test_postgres_update_record_sets_only_changed_columns(monkeypatch):
    s, conn = pg_store(
        monkeypatch,
        [pg_row("a", date(2026, 1, 5))],
        [pg_row("a", date(2026, 1, 5), status="Cleared", status_date=date(2026, 2, 17))],
    )

    updated = s.update_record("a", status_date=date(2026, 2, 17), current_status="Cleared")

    assert updated.status == MergerStatus.CLEARED
    assert updated.status_date == date(2026, 2, 17)
    sql, params = conn.executed[1]
    assert sql == (
        "UPDATE mergers SET current_status = %s, status_date = %s, updated_at = NOW() "
        f"WHERE id = %s RETURNING {COLUMNS}"
    )
    assert params == ("Cleared", "2026-02-17", "a")


def test_postgres_update_without_changes_returns_current(monkeypatch):
    s, conn = pg_store(monkeypatch, [pg_row("a", date(2026, 1, 5))])
    assert s.update_record("a").id == "a"
    assert len(conn.executed) == 1


def test_postgres_update_errors(monkeypatch):
    s, conn = pg_store(monkeypatch, [])

    with pytest.raises(ValueError, match="colour"):
        s.update_record("a", colour="red")
    assert conn.executed == []

    with pytest.raises(KeyError):
        s.update_record("missing", current_status="Cleared")
    assert len(conn.executed) == 1


def test_postgres_delete_record(monkeypatch):
    s, conn = pg_store(monkeypatch, [{"id": "a"}], [])

    s.delete_record("a")
    assert conn.executed[0] == ("DELETE FROM mergers WHERE id = %s RETURNING id", ("a",))

    with pytest.raises(KeyError):
        s.delete_record("a")
