from __future__ import annotations

import pytest
from pydantic import ValidationError

from pypos.session import AppRole, AuthSession, SessionStore


def test_login_paths() -> None:
    assert AppRole.CUSTOMER.login_path == "/customer/scan"
    assert AppRole.STORE.login_path == "/login"
    assert AppRole.TENANT.login_path == "/login"
    assert AppRole.STAFF.login_path == "/login"


def test_empty_token_is_rejected() -> None:
    with pytest.raises(ValidationError):
        AuthSession(role=AppRole.STORE, token="   ")


def test_store_keeps_one_session_per_role() -> None:
    store = SessionStore()
    store.set(AuthSession(role=AppRole.STORE, token="a", user={"id": 1}))
    store.set(AuthSession(role=AppRole.STORE, token="b", user={"id": 2}))
    store.set(AuthSession(role=AppRole.STAFF, token="c"))

    assert store.token_for(AppRole.STORE) == "b"
    session = store.get(AppRole.STORE)
    assert session is not None
    assert session.user == {"id": 2}
    assert session.age >= 0

    store.clear(AppRole.STORE)
    assert AppRole.STORE not in store
    assert store.token_for(AppRole.STORE) is None
    assert AppRole.STAFF in store

    store.clear(AppRole.STORE)
    store.clear_all()
    assert store.get(AppRole.STAFF) is None
