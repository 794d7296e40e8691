# tests/helpers.py
import uuid
from sqlalchemy.orm import Session

from bosan.models.user import User, Role
from bosan.core.security import get_password_hash


def create_user_in_db(
    db: Session,
    *,
    username: str,
    password: str,
    role: Role = Role.MEMBER,
    email: str | None = None,
    full_name: str = "Test Member",
) -> User:
    user = User(
        username=username,
        email=email or f"{username}@test.com",
        password_hash=get_password_hash(password),
        full_name=full_name,
        role=role,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def login(client, username: str, password: str):
    r = client.post("/api/login", json={"username": username, "password": password})
    assert r.status_code == 200, r.text
    return r.json()


def register_member(client, **overrides) -> dict:
    suffix = uuid.uuid4().hex[:6]
    body = {
        "username": f"member_{suffix}",
        "email": f"member_{suffix}@test.com",
        "password": "MemberPassw0rd!",
        "fullName": "Ada Obi",
        "specialty": "Commercial Law",
        "yearElevated": "2015",
    }
    body.update(overrides)
    r = client.post("/api/register", json=body)
    assert r.status_code == 201, r.text
    return {**r.json(), "password": body["password"]}


def setup_admin(client, db: Session) -> dict:
    """ADMIN 계정을 DB에 만들고 client 로 로그인"""
    username = f"admin_{uuid.uuid4().hex[:6]}"
    password = "AdminPassw0rd!"
    admin = create_user_in_db(db, username=username, password=password, role=Role.ADMIN, full_name="BOSAN Admin")
    login(client, username, password)
    return {"id": admin.id, "username": username, "password": password}


def setup_admin_and_member(client, db: Session, make_client) -> dict:
    """
    client = ADMIN 세션, member_client = 가입한 MEMBER 세션
    """
    admin = setup_admin(client, db)
    member_client = make_client()
    member = register_member(member_client)
    return {"admin": admin, "member": member, "member_client": member_client}


def event_body(**overrides) -> dict:
    body = {
        "title": "Annual Legal Conference",
        "description": "Keynotes and panels",
        "date": "2026-11-20",
        "venue": "Eko Hotels & Suites, Lagos",
        "time": "9:00 AM - 5:00 PM",
    }
    body.update(overrides)
    return body
