"""
security.py

비밀번호 해싱 및 세션 쿠키 토큰 생성/검증을 담당하는 보안 유틸리티 모음.

이 파일은 인증(auth) 로직에서 사용하는
저수준(low-level) 보안 기능만을 제공하며,
라우터나 비즈니스 로직은 포함하지 않는다.

주요 기능:
- 비밀번호 해싱 및 검증 (bcrypt)
- 세션 ID 발급
- 세션 ID를 담은 서명 토큰(JWT) 생성 / 디코딩

설계 원칙:
- 쿠키에는 서명된 세션 ID만 담고, 사용자 정보는 서버 측 세션 저장소에만 둔다
- 시간 기반(exp) 만료는 UTC 기준으로 처리

관련 파일:
- bosan.core.config        : 시크릿 키 및 만료 설정
- bosan.core.sessions      : 서버 측 세션 저장소
- bosan.core.deps          : 쿠키를 실제로 검증하는 인증 의존성

"""

import secrets
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import jwt, JWTError
from passlib.context import CryptContext

from bosan.core.config import settings


pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain: str, hashed: str) -> bool:
    return pwd_context.verify(plain, hashed)


def new_session_id() -> str:
    return secrets.token_urlsafe(32)


"""
세션 토큰 생성 함수

- sid: 서버 측 세션 저장소의 키
- type: "session" 고정
- exp: 만료 시각 (UTC timestamp)

"""

def create_session_token(session_id: str, expires_delta: Optional[timedelta] = None) -> str:
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.SESSION_EXPIRE_MINUTES)
    )
    payload = {
        "sid": session_id,
        "type": "session",
        "exp": int(expire.timestamp()),
    }
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


"""
세션 토큰 디코딩 및 검증 함수

- 서명 / 만료 / 토큰 타입 확인
- 유효하지 않을 경우 JWTError 발생

"""

def decode_session_token(token: str) -> str:
    payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    if payload.get("type") != "session":
        raise JWTError("Not a session token")
    sid = payload.get("sid")
    if not sid:
        raise JWTError("Missing session id")
    return sid
