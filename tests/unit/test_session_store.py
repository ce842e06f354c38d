"""
Unit tests for the persistent token store
"""

import json

import pytest

from kitchen_tracker.security.session_store import SessionStore


@pytest.mark.unit
class TestSessionStore:
    """Token persistence across restarts"""

    def test_empty_store_is_logged_out(self, session_store):
        assert session_store.get() is None
        assert not session_store.is_authenticated()

    def test_set_and_get(self, session_store):
        session_store.set("tok-abc")

        assert session_store.get() == "tok-abc"
        assert session_store.is_authenticated()

    def test_token_survives_new_instance(self, session_store):
        session_store.set("tok-abc")

        reopened = SessionStore(session_store.storage_path)
        assert reopened.get() == "tok-abc"

    def test_clear_logs_out(self, logged_in_store):
        logged_in_store.clear()

        assert not logged_in_store.is_authenticated()
        assert logged_in_store.get() is None

    def test_clear_when_absent_is_noop(self, session_store):
        session_store.clear()
        assert not session_store.storage_path.exists()

    def test_other_keys_preserved(self, session_store):
        session_store.storage_path.write_text(json.dumps({"theme": "dark"}), encoding="utf-8")

        session_store.set("tok-abc")
        session_store.clear()

        data = json.loads(session_store.storage_path.read_text(encoding="utf-8"))
        assert data == {"theme": "dark"}

    def test_corrupt_file_treated_as_empty(self, session_store):
        session_store.storage_path.write_text("{not json", encoding="utf-8")

        assert session_store.get() is None
        session_store.set("tok-abc")
        assert session_store.get() == "tok-abc"

    def test_empty_token_rejected(self, session_store):
        with pytest.raises(ValueError):
            session_store.set("")

    def test_custom_key(self, tmp_path):
        store = SessionStore(tmp_path / "nested" / "store.json", token_key="session")
        store.set("tok-abc")

        data = json.loads((tmp_path / "nested" / "store.json").read_text(encoding="utf-8"))
        assert data == {"session": "tok-abc"}
