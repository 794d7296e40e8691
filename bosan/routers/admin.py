"""
admin.py

관리자 전용 회원 관리 API 모음.

공개 회원 명부 / 본인 프로필(users.py)과 분리하여,
회원 계정 자체를 만들고 고치고 지우는 권한을 관리자에게만 두기 위한 구조이다.

주요 기능:
- 전체 회원 목록 조회
- 회원 생성 (role 지정 가능)
- 회원 정보 부분 수정 (비밀번호 재설정, 권한 변경 포함)
- 회원 삭제 (해당 회원의 세션도 모두 종료)

설계 원칙:
- 모든 엔드포인트는 관리자 권한(get_current_admin)을 요구
- 관리자 화면은 /members, 문서상 경로는 /users → 둘 다 같은 핸들러로 연결
- 관리자 계정은 삭제 불가(403), 자기 자신의 권한 변경 불가(400)
- 납부 내역이 있는 회원은 삭제 불가(400)

관련 파일:
- bosan.services.users       : 회원 저장소 / 중복 검사
- bosan.schemas.user         : 요청 / 응답 스키마
- bosan.core.sessions        : 삭제된 회원의 세션 제거
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from bosan.core.deps import get_current_admin, get_db, get_session_store
from bosan.core.sessions import SessionStore
from bosan.models.user import User, Role
from bosan.schemas.user import AdminUserCreateRequest, AdminUserUpdateRequest, UserResponse
from bosan.services import users as user_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/admin", tags=["admin"])


# 전체 회원 목록 조회 (관리자 전용)
@router.get("/users", response_model=list[UserResponse])
@router.get("/members", response_model=list[UserResponse])
def list_users(
    db: Session = Depends(get_db),
    _: User = Depends(get_current_admin),
):
    return user_service.list_users(db)


# 회원 생성 (관리자 전용, role 지정 가능)
@router.post("/users", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
@router.post("/members", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(
    body: AdminUserCreateRequest,
    db: Session = Depends(get_db),
    admin: User = Depends(get_current_admin),
):
    try:
        user = user_service.create_user(db, **body.model_dump())
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

    logger.info("Member %s created by %s", user.username, admin.username)
    return user


# 회원 정보 수정 (관리자 전용)
@router.put("/users/{user_id}", response_model=UserResponse)
@router.patch("/users/{user_id}", response_model=UserResponse)
@router.put("/members/{user_id}", response_model=UserResponse)
@router.patch("/members/{user_id}", response_model=UserResponse)
def update_user(
    user_id: int,
    body: AdminUserUpdateRequest,
    db: Session = Depends(get_db),
    admin: User = Depends(get_current_admin),
):
    user = user_service.get_user(db, user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")

    changes = body.changes()

    # 자기 자신 권한 변경 금지
    if user.id == admin.id and "role" in changes and changes["role"] != user.role:
        raise HTTPException(status_code=400, detail="Cannot change your own role")

    before_role = user.role
    try:
        user = user_service.update_user(db, user, changes)
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

    if user.role != before_role:
        logger.info("Role of %s changed %s -> %s by %s", user.username, before_role.value, user.role.value, admin.username)
    return user


# 회원 삭제 (관리자 전용, 관리자 계정은 삭제 불가)
@router.delete("/users/{user_id}")
@router.delete("/members/{user_id}")
def delete_user(
    user_id: int,
    db: Session = Depends(get_db),
    admin: User = Depends(get_current_admin),
    store: SessionStore = Depends(get_session_store),
):
    user = user_service.get_user(db, user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")

    if user.role == Role.ADMIN:
        raise HTTPException(status_code=403, detail="Admin accounts cannot be deleted")

    username = user.username
    try:
        user_service.delete_user(db, user)
        db.commit()
    except ValueError as e:
        db.rollback()
        raise HTTPException(status_code=400, detail=str(e))
    except Exception:
        db.rollback()
        raise

    store.destroy_user(user_id)
    logger.info("Member %s deleted by %s", username, admin.username)
    return {"success": True}
