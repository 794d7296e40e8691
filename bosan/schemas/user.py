from datetime import datetime

from pydantic import EmailStr, Field

from bosan.models.user import Role
from bosan.schemas.base import CamelModel, PartialUpdate


class RegisterRequest(CamelModel):
    username: str = Field(min_length=3, max_length=50)
    email: EmailStr
    password: str = Field(min_length=8, max_length=64)
    full_name: str = Field(min_length=3, max_length=100)
    specialty: str | None = None
    year_elevated: str | None = None
    profile_image: str | None = None


class LoginRequest(CamelModel):
    # username 또는 email
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


# 본인/관리자에게 보여주는 회원 정보 (password_hash 제외)
class UserResponse(CamelModel):
    id: int
    username: str
    email: str
    full_name: str
    role: Role
    specialty: str | None
    year_elevated: str | None
    profile_image: str | None
    created_at: datetime


# 공개 회원 명부용 (이메일 등 민감 정보 제외)
class MemberPublic(CamelModel):
    id: int
    full_name: str
    specialty: str | None
    year_elevated: str | None
    profile_image: str | None


class ProfileUpdateRequest(PartialUpdate):
    """본인 프로필 수정 허용 목록.

    password / role / username 은 여기에 없으므로 보내도 무시된다.
    """

    non_nullable = ("full_name", "email")

    full_name: str | None = Field(default=None, min_length=3, max_length=100)
    email: EmailStr | None = None
    specialty: str | None = None
    year_elevated: str | None = None
    profile_image: str | None = None


class AdminUserCreateRequest(CamelModel):
    username: str = Field(min_length=3, max_length=50)
    email: EmailStr
    password: str = Field(min_length=6, max_length=64)
    full_name: str = Field(min_length=1, max_length=100)
    role: Role = Role.MEMBER
    specialty: str | None = None
    year_elevated: str | None = None
    profile_image: str | None = None


class AdminUserUpdateRequest(PartialUpdate):
    non_nullable = ("username", "email", "password", "full_name", "role")

    username: str | None = Field(default=None, min_length=3, max_length=50)
    email: EmailStr | None = None
    password: str | None = Field(default=None, min_length=6, max_length=64)
    full_name: str | None = Field(default=None, min_length=1, max_length=100)
    role: Role | None = None
    specialty: str | None = None
    year_elevated: str | None = None
    profile_image: str | None = None
