"""
user.py

회원(User) 및 권한(Role) 모델 정의 파일.

협회 회원의 기본 정보와 권한(Role), 인증 정보를 관리한다.
모든 인증, 권한, 납부, 관리자 기능의 기준이 되는 핵심 모델이다.

"""

import datetime
from enum import Enum

from sqlalchemy import String, DateTime, Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column, validates

from bosan.db.base import Base, utcnow


"""
회원 권한(Role) 정의

- MEMBER : 일반 회원
- ADMIN  : 관리자 (관리자 화면 및 /api/admin/* 접근 가능)

"""

class Role(str, Enum):
    MEMBER = "member"
    ADMIN = "admin"


def identity_key(value: str) -> str:
    """username / email 비교용 정규화 값 (유니코드 대소문자 무시)"""
    return value.casefold()


"""
회원(User) 모델

- username / email 은 대소문자 구분 없이 고유
  (casefold 한 값을 username_key / email_key 에 따로 저장하고 그 컬럼에 unique)
- role을 통해 접근 권한 제어

"""

class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)

    username: Mapped[str] = mapped_column(String(50), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)

    # 조회 / 중복 검사용 (validates 에서 자동 설정)
    username_key: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    email_key: Mapped[str] = mapped_column(String(320), unique=True, nullable=False)

    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    full_name: Mapped[str] = mapped_column(String(100), nullable=False)

    role: Mapped[Role] = mapped_column(
        SAEnum(Role, name="user_role", native_enum=False, values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=Role.MEMBER,
    )

    specialty: Mapped[str | None] = mapped_column(String(100), nullable=True)
    year_elevated: Mapped[str | None] = mapped_column(String(10), nullable=True)
    profile_image: Mapped[str | None] = mapped_column(String(500), nullable=True)

    created_at: Mapped[datetime.datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)

    @validates("username")
    def _set_username_key(self, key, value):
        self.username_key = identity_key(value)
        return value

    @validates("email")
    def _set_email_key(self, key, value):
        self.email_key = identity_key(value)
        return value
