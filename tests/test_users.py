"""Tests for user registration, lookup, and sign-in."""

from __future__ import annotations

import pytest

from catalogdesk.storage import (
    ConstraintViolation,
    DuplicateEmail,
    StoreHandle,
    User,
    create_user,
    get_current_user,
    get_user,
    set_current_user,
    sign_in,
)


@pytest.fixture()
def store(tmp_path):
    handle = StoreHandle(str(tmp_path / "test.db"))
    handle.initialize()
    yield handle
    handle.close()


class TestCreateUser:
    def test_creates_user_with_verbatim_password(self, store):
        create_user(store, "alice@example.com", "s3cret")

        user = get_user(store, "alice@example.com")
        assert isinstance(user, User)
        assert user.id is not None
        assert user.email == "alice@example.com"
        assert user.password == "s3cret"

    def test_duplicate_email_raises(self, store):
        create_user(store, "alice@example.com", "first")

        with pytest.raises(DuplicateEmail, match="alice@example.com"):
            create_user(store, "alice@example.com", "second")

    def test_duplicate_is_a_constraint_violation(self, store):
        create_user(store, "alice@example.com", "first")

        with pytest.raises(ConstraintViolation):
            create_user(store, "alice@example.com", "second")

    def test_duplicate_leaves_original_row_unchanged(self, store):
        create_user(store, "alice@example.com", "first")
        original = get_user(store, "alice@example.com")

        with pytest.raises(DuplicateEmail):
            create_user(store, "alice@example.com", "second")

        assert get_user(store, "alice@example.com") == original

    def test_ids_are_assigned_per_user(self, store):
        create_user(store, "alice@example.com", "a")
        create_user(store, "bob@example.com", "b")

        assert get_user(store, "alice@example.com").id != get_user(store, "bob@example.com").id


class TestGetUser:
    def test_unknown_email_returns_none(self, store):
        assert get_user(store, "nobody@example.com") is None

    def test_lookup_is_case_sensitive(self, store):
        create_user(store, "alice@example.com", "pw")

        assert get_user(store, "Alice@Example.com") is None

    def test_lookup_does_not_normalize_whitespace(self, store):
        create_user(store, "alice@example.com", "pw")

        assert get_user(store, " alice@example.com") is None


class TestSignIn:
    def test_correct_password_sets_session(self, store):
        create_user(store, "alice@example.com", "pw")

        assert sign_in(store, "alice@example.com", "pw") is True
        assert get_current_user(store) == "alice@example.com"

    def test_wrong_password_rejected(self, store):
        create_user(store, "alice@example.com", "pw")

        assert sign_in(store, "alice@example.com", "nope") is False
        assert get_current_user(store) is None

    def test_unknown_user_rejected(self, store):
        assert sign_in(store, "ghost@example.com", "pw") is False

    def test_rejection_keeps_existing_session(self, store):
        create_user(store, "alice@example.com", "pw")
        set_current_user(store, "bob@example.com")

        assert sign_in(store, "alice@example.com", "wrong") is False
        assert get_current_user(store) == "bob@example.com"
