from datetime import timedelta

import pytest
from jose import JWTError

from bosan.core.security import create_session_token, decode_session_token, new_session_id
from bosan.core.sessions import InMemorySessionStore


def test_session_store_roundtrip_and_destroy():
    store = InMemorySessionStore(ttl=timedelta(minutes=5))
    store.set("abc", {"user_id": 1})

    assert store.get("abc") == {"user_id": 1}
    assert len(store) == 1

    store.destroy("abc")
    assert store.get("abc") is None
    store.destroy("abc")


def test_session_store_returns_copies():
    store = InMemorySessionStore(ttl=timedelta(minutes=5))
    store.set("abc", {"user_id": 1})
    data = store.get("abc")
    data["user_id"] = 99
    assert store.get("abc") == {"user_id": 1}


def test_expired_sessions_are_pruned():
    store = InMemorySessionStore(ttl=timedelta(seconds=-1))
    store.set("old", {"user_id": 1})
    assert store.get("old") is None
    assert len(store) == 0


def test_destroy_user_removes_every_session_of_that_user():
    store = InMemorySessionStore(ttl=timedelta(minutes=5))
    store.set("a", {"user_id": 1})
    store.set("b", {"user_id": 1})
    store.set("c", {"user_id": 2})

    assert store.destroy_user(1) == 2
    assert store.get("a") is None
    assert store.get("b") is None
    assert store.get("c") == {"user_id": 2}


def test_session_token_carries_session_id():
    sid = new_session_id()
    assert decode_session_token(create_session_token(sid)) == sid


def test_expired_session_token_is_rejected():
    token = create_session_token(new_session_id(), expires_delta=timedelta(seconds=-10))
    with pytest.raises(JWTError):
        decode_session_token(token)


def test_session_token_signed_with_other_key_is_rejected():
    from jose import jwt

    forged = jwt.encode({"sid": "x", "type": "session"}, "other-key", algorithm="HS256")
    with pytest.raises(JWTError):
        decode_session_token(forged)
