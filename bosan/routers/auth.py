"""
auth.py

인증(Authentication) API 모음.

회원 가입, 로그인, 로그아웃, 현재 로그인 사용자 조회를 담당한다.
서버 측 세션 방식을 사용하며, 클라이언트는 서명된 세션 ID가 담긴
HttpOnly 쿠키만 가진다.

주요 기능:
- 회원 가입 (가입 즉시 로그인)
- 로그인 (username 또는 email)
- 로그아웃 (세션 삭제 + 쿠키 제거)
- 현재 사용자 조회

설계 원칙:
- 로그인 실패 시 계정 존재 여부를 드러내지 않는다
- 응답에는 password_hash 를 절대 포함하지 않는다 (UserResponse)

관련 파일:
- bosan.core.security        : 비밀번호 해시 / 세션 토큰 생성·검증
- bosan.core.sessions        : 서버 측 세션 저장소
- bosan.core.deps            : 인증 의존성(get_current_user)
- bosan.services.users       : 회원 조회 / 생성 / 인증

"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from bosan.core.config import settings
from bosan.core.deps import get_db, get_current_user, get_session_store, resolve_session_id, session_cookie
from bosan.core.security import create_session_token, new_session_id
from bosan.core.sessions import SessionStore
from bosan.models.user import User, Role
from bosan.schemas.user import RegisterRequest, LoginRequest, UserResponse
from bosan.services import users as user_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["auth"])


def start_session(response: Response, store: SessionStore, user: User) -> None:
    sid = new_session_id()
    store.set(sid, {"user_id": user.id})

    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=create_session_token(sid),
        httponly=True,
        secure=settings.COOKIE_SECURE,
        samesite=settings.COOKIE_SAMESITE,
        domain=settings.COOKIE_DOMAIN,
        path="/",
        max_age=settings.SESSION_EXPIRE_MINUTES * 60,
    )


def clear_session_cookie(response: Response) -> None:
    response.delete_cookie(
        key=settings.SESSION_COOKIE_NAME,
        path="/",
        domain=settings.COOKIE_DOMAIN,
    )


"""
회원 가입 API

- username / email 중복(대소문자 무시) 시 400
- 가입 시 권한은 항상 member
- 가입 성공 시 바로 로그인 세션 생성

"""

@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def register(
    data: RegisterRequest,
    response: Response,
    db: Session = Depends(get_db),
    store: SessionStore = Depends(get_session_store),
):
    try:
        user = user_service.create_user(
            db,
            username=data.username,
            email=data.email,
            password=data.password,
            full_name=data.full_name,
            role=Role.MEMBER,
            specialty=data.specialty,
            year_elevated=data.year_elevated,
            profile_image=data.profile_image,
        )
        db.commit()
        db.refresh(user)
    except ValueError as e:
        db.rollback()
        raise HTTPException(status_code=400, detail=str(e))
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=400, detail="Username or email already exists")
    except Exception:
        db.rollback()
        raise

    start_session(response, store, user)
    logger.info("New member registered: %s", user.username)
    return user


"""
로그인 API

- username 필드에 username 또는 email 모두 허용
- 성공 시 세션 쿠키 설정 후 사용자 정보 반환

"""

@router.post("/login", response_model=UserResponse)
def login(
    data: LoginRequest,
    response: Response,
    db: Session = Depends(get_db),
    store: SessionStore = Depends(get_session_store),
):
    user = user_service.authenticate(db, data.username, data.password)
    if not user:
        logger.info("Failed login attempt for %s", data.username)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid username or password")

    start_session(response, store, user)
    logger.info("User logged in: %s", user.username)
    return user


"""
로그아웃 API

- 서버 측 세션 삭제
- 세션 쿠키 제거
- 이미 로그아웃된 상태여도 200

"""

@router.post("/logout")
def logout(
    response: Response,
    token: str | None = Depends(session_cookie),
    store: SessionStore = Depends(get_session_store),
):
    sid = resolve_session_id(token)
    if sid is not None:
        store.destroy(sid)
        logger.info("Session ended")

    clear_session_cookie(response)
    return {"success": True}


@router.get("/user", response_model=UserResponse)
def current_user(user: User = Depends(get_current_user)):
    return user
