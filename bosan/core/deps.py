from typing import Generator

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import APIKeyCookie
from jose import JWTError
from sqlalchemy.orm import Session

from bosan.core.config import settings
from bosan.core.security import decode_session_token
from bosan.core.sessions import SessionStore
from bosan.db.session import SessionLocal
from bosan.models.user import User, Role

# Swagger Authorize에서 세션 쿠키를 입력받는 스키마
session_cookie = APIKeyCookie(name=settings.SESSION_COOKIE_NAME, auto_error=False)


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_session_store(request: Request) -> SessionStore:
    return request.app.state.session_store


def resolve_session_id(token: str | None) -> str | None:
    if not token:
        return None
    try:
        return decode_session_token(token)
    except JWTError:
        return None


def get_optional_user(
    token: str | None = Depends(session_cookie),
    db: Session = Depends(get_db),
    store: SessionStore = Depends(get_session_store),
) -> User | None:
    sid = resolve_session_id(token)
    if sid is None:
        return None

    data = store.get(sid)
    if not data or "user_id" not in data:
        return None

    return db.get(User, data["user_id"])


def get_current_user(user: User | None = Depends(get_optional_user)) -> User:
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
    return user


# 비로그인 / 일반 회원 모두 403
def get_current_admin(current_user: User | None = Depends(get_optional_user)) -> User:
    if current_user is None or current_user.role != Role.ADMIN:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    return current_user
