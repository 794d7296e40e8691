"""
users.py

회원 프로필 및 공개 회원 명부 API 모음.

관리자용 회원 관리 기능(admin.py)과 분리하여,
권한 범위와 노출 가능한 데이터 범위를 명확히 하기 위한 구조이다.

주요 기능:
- 본인 프로필 조회 / 수정
- 공개 회원 명부 조회 (로그인 불필요)

설계 원칙:
- 프로필 수정은 허용 목록(ProfileUpdateRequest)에 있는 필드만 반영
  → password / role 은 이 경로로 절대 바뀌지 않는다
- 공개 명부는 이름 / 전문 분야 / 승급 연도 / 사진만 노출

관련 파일:
- bosan.schemas.user         : 프로필 / 명부 스키마
- bosan.services.users       : 회원 저장소
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from bosan.core.deps import get_current_user, get_db
from bosan.models.user import User
from bosan.schemas.user import MemberPublic, ProfileUpdateRequest, UserResponse
from bosan.services import users as user_service

router = APIRouter(prefix="/api", tags=["users"])


@router.get("/user/profile", response_model=UserResponse)
def profile(current_user: User = Depends(get_current_user)):
    return current_user


"""
본인 프로필 수정 API

- 보낸 필드만 부분 수정
- email 변경 시 다른 회원과 중복(대소문자 무시)이면 400

"""
@router.put("/user/profile", response_model=UserResponse)
def update_profile(
    data: ProfileUpdateRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        user = user_service.update_user(db, current_user, data.changes())
        db.commit()
        db.refresh(user)
    except ValueError as e:
        db.rollback()
        raise HTTPException(status_code=400, detail=str(e))
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=400, detail="Email already exists")
    except Exception:
        db.rollback()
        raise

    return user


@router.get("/members", response_model=list[MemberPublic])
def list_members(db: Session = Depends(get_db)):
    return user_service.list_users(db)
