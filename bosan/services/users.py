"""
services/users.py

회원(User) 도메인의 저장소 및 비즈니스 로직 모음.

라우터(auth / users / admin)에서 공통으로 사용하는
조회, 생성, 수정, 삭제, 인증 로직을 담당한다.

설계 원칙:
- HTTP / FastAPI 의존성 없음
- 없는 회원 조회는 예외가 아닌 None 반환
- 정책 위반(중복 username/email 등)은 ValueError로 알리고
  라우터에서 400으로 변환
- 트랜잭션 제어(commit / rollback)는 라우터에서 수행

관련 파일:
- bosan.models.user        : User / Role 모델
- bosan.routers.auth       : 가입 / 로그인
- bosan.routers.admin      : 관리자 회원 관리

"""

from sqlalchemy import select, func, delete
from sqlalchemy.orm import Session

from bosan.core.security import get_password_hash, verify_password
from bosan.models.user import User, Role, identity_key
from bosan.models.event import EventRegistration
from bosan.models.payment import Payment


def get_user(db: Session, user_id: int) -> User | None:
    return db.get(User, user_id)


# username / email 조회는 대소문자 구분 없음 (casefold 키 컬럼 비교)
def get_user_by_username(db: Session, username: str) -> User | None:
    return db.scalar(select(User).where(User.username_key == identity_key(username)))


def get_user_by_email(db: Session, email: str) -> User | None:
    return db.scalar(select(User).where(User.email_key == identity_key(email)))


"""
로그인 식별자로 회원 조회

- username 우선, 없으면 email로 조회
- 관리자 로그인 화면은 username, 일반 로그인 화면은 email을 보낸다

"""

def get_user_by_login(db: Session, identifier: str) -> User | None:
    return get_user_by_username(db, identifier) or get_user_by_email(db, identifier)


def list_users(db: Session) -> list[User]:
    return list(db.scalars(select(User).order_by(User.id)).all())


"""
username / email 중복 검사

- exclude_id: 수정 시 자기 자신은 제외
- 중복이면 ValueError 발생

"""

def ensure_unique_identity(
    db: Session,
    *,
    username: str | None = None,
    email: str | None = None,
    exclude_id: int | None = None,
) -> None:
    if username is not None:
        existing = get_user_by_username(db, username)
        if existing and existing.id != exclude_id:
            raise ValueError("Username already exists")
    if email is not None:
        existing = get_user_by_email(db, email)
        if existing and existing.id != exclude_id:
            raise ValueError("Email already exists")


def create_user(
    db: Session,
    *,
    username: str,
    email: str,
    password: str,
    full_name: str,
    role: Role = Role.MEMBER,
    specialty: str | None = None,
    year_elevated: str | None = None,
    profile_image: str | None = None,
) -> User:
    ensure_unique_identity(db, username=username, email=email)

    user = User(
        username=username,
        email=email,
        password_hash=get_password_hash(password),
        full_name=full_name,
        role=role,
        specialty=specialty,
        year_elevated=year_elevated,
        profile_image=profile_image,
    )
    db.add(user)
    db.flush()
    return user


"""
회원 정보 부분 수정

- changes 에 들어있는 키만 반영 (shallow merge)
- password 가 있으면 해시로 변환해서 저장
- username / email 변경 시 중복 검사

"""

def update_user(db: Session, user: User, changes: dict) -> User:
    ensure_unique_identity(
        db,
        username=changes.get("username"),
        email=changes.get("email"),
        exclude_id=user.id,
    )

    changes = dict(changes)
    password = changes.pop("password", None)
    if password is not None:
        user.password_hash = get_password_hash(password)

    for key, value in changes.items():
        setattr(user, key, value)

    db.flush()
    return user


def count_user_payments(db: Session, user_id: int) -> int:
    return db.scalar(
        select(func.count()).select_from(Payment).where(Payment.user_id == user_id)
    ) or 0


"""
회원 삭제

- 납부 내역이 있는 회원은 삭제 불가 (납부 기록 보존)
- 해당 회원의 행사 신청 내역은 함께 삭제
- 관리자 계정 보호는 라우터에서 처리

"""

def delete_user(db: Session, user: User) -> None:
    if count_user_payments(db, user.id) > 0:
        raise ValueError("Member has payment history and cannot be deleted")

    db.execute(delete(EventRegistration).where(EventRegistration.user_id == user.id))
    db.delete(user)
    db.flush()


"""
로그인 인증

- 식별자(username/email) + 비밀번호 확인
- 실패 사유(계정 없음 / 비밀번호 불일치)는 구분하지 않고 None 반환

"""

def authenticate(db: Session, identifier: str, password: str) -> User | None:
    user = get_user_by_login(db, identifier)
    if not user or not verify_password(password, user.password_hash):
        return None
    return user
