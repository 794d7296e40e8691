"""

관리자 회원 관리 통합 테스트.
- /api/admin/users 와 /api/admin/members 는 같은 기능
- 생성 시 중복 400, 수정 시 비밀번호 재해시
- 관리자 계정 삭제 403, 납부 내역 있는 회원 삭제 400
- 삭제된 회원의 세션은 즉시 무효
- 자기 자신의 권한 변경 400

"""

from bosan.models.user import Role
from tests.helpers import create_user_in_db, login, register_member, setup_admin, setup_admin_and_member


def test_admin_lists_members_under_both_paths(client, db, make_client):
    ctx = setup_admin_and_member(client, db, make_client)

    users = client.get("/api/admin/users")
    members = client.get("/api/admin/members")
    assert users.status_code == members.status_code == 200
    assert users.json() == members.json()

    ids = [u["id"] for u in users.json()]
    assert ids == [ctx["admin"]["id"], ctx["member"]["id"]]
    for u in users.json():
        assert "passwordHash" not in u
        assert "password" not in u


def test_member_and_anonymous_cannot_use_admin_routes(client, db, make_client):
    ctx = setup_admin_and_member(client, db, make_client)
    assert ctx["member_client"].get("/api/admin/users").status_code == 403

    anonymous = make_client()
    assert anonymous.get("/api/admin/users").status_code == 403


def test_admin_creates_member_with_role(client, db, make_client):
    setup_admin(client, db)

    r = client.post("/api/admin/members", json={
        "username": "newadmin",
        "email": "newadmin@bosan.org",
        "password": "secret1",
        "fullName": "Second Admin",
        "role": "admin",
    })
    assert r.status_code == 201, r.text
    assert r.json()["role"] == "admin"

    new_client = make_client()
    login(new_client, "newadmin", "secret1")
    assert new_client.get("/api/admin/users").status_code == 200

    dup = client.post("/api/admin/users", json={
        "username": "NEWADMIN",
        "email": "another@bosan.org",
        "password": "secret1",
        "fullName": "Dup",
    })
    assert dup.status_code == 400
    assert dup.json()["detail"] == "Username already exists"


def test_admin_updates_member_and_password(client, db, make_client):
    ctx = setup_admin_and_member(client, db, make_client)
    member = ctx["member"]

    r = client.patch(f"/api/admin/users/{member['id']}", json={
        "fullName": "Renamed Member",
        "password": "brandnew1",
    })
    assert r.status_code == 200, r.text
    assert r.json()["fullName"] == "Renamed Member"

    fresh = make_client()
    old = fresh.post("/api/login", json={"username": member["username"], "password": member["password"]})
    assert old.status_code == 401
    login(fresh, member["username"], "brandnew1")

    missing = client.put("/api/admin/users/9999", json={"fullName": "Ghost"})
    assert missing.status_code == 404


def test_admin_update_email_conflict(client, db, make_client):
    ctx = setup_admin_and_member(client, db, make_client)
    other = create_user_in_db(db, username="other", password="OtherPassw0rd", email="other@bosan.org")

    r = client.put(f"/api/admin/users/{ctx['member']['id']}", json={"email": "Other@bosan.org"})
    assert r.status_code == 400
    assert r.json()["detail"] == "Email already exists"

    same = client.put(f"/api/admin/users/{other.id}", json={"email": "other@bosan.org"})
    assert same.status_code == 200


def test_admin_cannot_change_own_role(client, db):
    admin = setup_admin(client, db)

    r = client.patch(f"/api/admin/users/{admin['id']}", json={"role": "member"})
    assert r.status_code == 400
    assert r.json()["detail"] == "Cannot change your own role"

    unchanged = client.patch(f"/api/admin/users/{admin['id']}", json={"role": "admin", "fullName": "Still Admin"})
    assert unchanged.status_code == 200
    assert unchanged.json()["role"] == "admin"


def test_admin_can_promote_member(client, db, make_client):
    ctx = setup_admin_and_member(client, db, make_client)
    r = client.patch(f"/api/admin/users/{ctx['member']['id']}", json={"role": "admin"})
    assert r.status_code == 200
    assert r.json()["role"] == "admin"

    assert ctx["member_client"].get("/api/admin/users").status_code == 200


def test_admin_accounts_cannot_be_deleted(client, db):
    setup_admin(client, db)
    other_admin = create_user_in_db(db, username="otheradmin", password="OtherAdmin1", role=Role.ADMIN)

    r = client.delete(f"/api/admin/users/{other_admin.id}")
    assert r.status_code == 403
    assert r.json()["detail"] == "Admin accounts cannot be deleted"


def test_member_with_payments_cannot_be_deleted(client, db, make_client):
    ctx = setup_admin_and_member(client, db, make_client)
    pay = ctx["member_client"].post("/api/payments", json={"amount": 1000, "purpose": "dues"})
    assert pay.status_code == 201

    r = client.delete(f"/api/admin/members/{ctx['member']['id']}")
    assert r.status_code == 400
    assert r.json()["detail"] == "Member has payment history and cannot be deleted"

    assert ctx["member_client"].get("/api/user").status_code == 200


def test_delete_member_ends_sessions_and_registrations(client, db, make_client):
    ctx = setup_admin_and_member(client, db, make_client)
    member_client = ctx["member_client"]

    event = client.post("/api/admin/events", json={
        "title": "Dinner", "description": "Annual dinner", "date": "2026-12-01",
        "venue": "Abuja", "time": "7:00 PM",
    }).json()
    assert member_client.post(f"/api/events/{event['id']}/register").status_code == 201

    r = client.delete(f"/api/admin/users/{ctx['member']['id']}")
    assert r.status_code == 200
    assert r.json() == {"success": True}

    assert member_client.get("/api/user").status_code == 401
    assert client.get(f"/api/admin/events/{event['id']}/registrations").json() == []
    assert [u["id"] for u in client.get("/api/admin/users").json()] == [ctx["admin"]["id"]]

    missing = client.delete(f"/api/admin/users/{ctx['member']['id']}")
    assert missing.status_code == 404


def test_register_after_member_deleted_reuses_username(client, db, make_client):
    ctx = setup_admin_and_member(client, db, make_client)
    member = ctx["member"]
    assert client.delete(f"/api/admin/users/{member['id']}").status_code == 200

    again = make_client()
    register_member(again, username=member["username"], email=member["email"])
