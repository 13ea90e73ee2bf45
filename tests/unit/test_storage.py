import sqlite3
from datetime import datetime, timedelta, timezone

import pytest

from interviews import Candidate, ConflictError, InterviewSession
from storage import CandidateStore, DatabaseClosedError, InterviewDatabase, SessionStore

T0 = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


def _candidate(email, created_at, **extra):
    return Candidate(
        name=extra.pop("name", "Sam Lee"),
        email=email,
        job_role=extra.pop("job_role", "QA Engineer"),
        resume_text="qa automation",
        created_at=created_at,
        **extra,
    )


def test_migrate_creates_tables(tmp_db):
    conn = sqlite3.connect(tmp_db)
    try:
        names = {row[0] for row in conn.execute("SELECT name FROM sqlite_master WHERE type = 'table'")}
    finally:
        conn.close()
    assert {"candidates", "interview_sessions"} <= names


def test_connect_close_lifecycle(tmp_db):
    database = InterviewDatabase(tmp_db)
    assert not database.is_connected
    with database:
        assert database.is_connected
    assert not database.is_connected
    with pytest.raises(DatabaseClosedError):
        with database.transaction():
            pass


def test_transaction_rolls_back_on_error(db):
    store = CandidateStore(db)
    with pytest.raises(RuntimeError):
        with db.transaction() as conn:
            store.insert(_candidate("a@example.com", T0), conn=conn)
            raise RuntimeError("abort")
    assert store.get_by_email("a@example.com") is None


def test_candidate_round_trip_and_duplicate_email(db):
    store = CandidateStore(db)
    original = store.insert(_candidate("a@example.com", T0))
    loaded = store.get(original.id)
    assert loaded == original
    with pytest.raises(ConflictError) as excinfo:
        store.insert(_candidate("a@example.com", T0 + timedelta(minutes=1)))
    assert excinfo.value.candidate_id == original.id


def test_document_uses_camel_case_shape(db):
    candidate = CandidateStore(db).insert(_candidate("a@example.com", T0))
    with db.transaction() as conn:
        raw = conn.execute("SELECT document FROM candidates WHERE id = ?", (candidate.id,)).fetchone()[0]
    assert '"jobRole"' in raw and '"resumeText"' in raw and '"finalScore"' in raw


def test_list_orders_filters_and_searches(db):
    store = CandidateStore(db)
    older = store.insert(_candidate("old@example.com", T0, final_score=9.0, status="completed"))
    newer = store.insert(_candidate("new@example.com", T0 + timedelta(hours=1), name="Ana Ruiz", final_score=4.0))

    assert [c.id for c in store.list()] == [newer.id, older.id]
    assert [c.id for c in store.list(sort="finalScore")] == [older.id, newer.id]
    assert [c.id for c in store.list(status="completed")] == [older.id]
    assert [c.id for c in store.list(search="ana")] == [newer.id]
    assert [c.id for c in store.list(search="QA ENGINEER")] == [newer.id, older.id]


def test_session_purge_only_removes_stale_inactive(db):
    store = SessionStore(db)
    stale = store.insert(InterviewSession(candidate_id="c1", is_active=False, last_activity_at=T0))
    fresh = store.insert(
        InterviewSession(candidate_id="c2", is_active=False, last_activity_at=T0 + timedelta(hours=30))
    )
    active = store.insert(InterviewSession(candidate_id="c3", is_active=True, last_activity_at=T0))

    removed = store.purge_stale(T0 + timedelta(hours=24))
    assert removed == 1
    assert store.get_by_candidate(stale.candidate_id) is None
    assert store.get_by_candidate(fresh.candidate_id) == fresh
    assert [s.id for s in store.list_active()] == [active.id]
