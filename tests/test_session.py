"""Tests for the single active session."""

from __future__ import annotations

import pytest

from catalogdesk.storage import (
    StoreHandle,
    clear_current_user,
    get_current_user,
    set_current_user,
)


@pytest.fixture()
def store(tmp_path):
    handle = StoreHandle(str(tmp_path / "test.db"))
    handle.initialize()
    yield handle
    handle.close()


def _session_rows(store):
    with store.connection() as conn:
        return [r["email"] for r in conn.execute("SELECT email FROM session").fetchall()]


def test_no_current_user_initially(store):
    assert get_current_user(store) is None


def test_set_then_get(store):
    set_current_user(store, "a@x.com")
    assert get_current_user(store) == "a@x.com"


def test_second_set_replaces_first(store):
    set_current_user(store, "a@x.com")
    set_current_user(store, "b@y.com")

    assert get_current_user(store) == "b@y.com"
    assert _session_rows(store) == ["b@y.com"]


def test_repeated_set_keeps_single_row(store):
    for _ in range(5):
        set_current_user(store, "a@x.com")
    assert _session_rows(store) == ["a@x.com"]


def test_clear_removes_current_user(store):
    set_current_user(store, "a@x.com")
    clear_current_user(store)

    assert get_current_user(store) is None
    assert _session_rows(store) == []


def test_clear_is_idempotent(store):
    clear_current_user(store)
    clear_current_user(store)
    assert get_current_user(store) is None


def test_session_persists_across_handles(tmp_path):
    db_path = str(tmp_path / "test.db")
    first = StoreHandle(db_path)
    first.initialize()
    set_current_user(first, "a@x.com")
    first.close()

    second = StoreHandle(db_path)
    second.initialize()
    try:
        assert get_current_user(second) == "a@x.com"
    finally:
        second.close()
