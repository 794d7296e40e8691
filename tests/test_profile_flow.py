"""

프로필 / 회원 명부 통합 테스트.
- 프로필 수정은 허용 목록 필드만 반영 (role / password 변경 불가)
- email 중복 400, null 400
- 공개 명부에는 민감 정보가 없다

"""

from tests.helpers import login, register_member


def test_get_profile(client):
    member = register_member(client)
    r = client.get("/api/user/profile")
    assert r.status_code == 200
    assert r.json()["id"] == member["id"]
    assert r.json()["specialty"] == "Commercial Law"


def test_profile_update_ignores_role_and_password(client, make_client):
    member = register_member(client)

    r = client.put("/api/user/profile", json={
        "fullName": "Ada Obi SAN",
        "specialty": "Maritime Law",
        "role": "admin",
        "password": "hijacked-password",
        "username": "renamed",
    })
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["fullName"] == "Ada Obi SAN"
    assert body["specialty"] == "Maritime Law"
    assert body["role"] == "member"
    assert body["username"] == member["username"]
    assert body["yearElevated"] == "2015"

    assert client.get("/api/admin/members").status_code == 403

    fresh = make_client()
    login(fresh, member["username"], member["password"])
    bad = fresh.post("/api/login", json={"username": member["username"], "password": "hijacked-password"})
    assert bad.status_code == 401


def test_profile_email_conflict(client, make_client):
    other = make_client()
    taken = register_member(other)

    register_member(client)
    r = client.put("/api/user/profile", json={"email": taken["email"].upper()})
    assert r.status_code == 400
    assert r.json()["detail"] == "Email already exists"


def test_profile_rejects_null_required_fields(client):
    register_member(client)
    r = client.put("/api/user/profile", json={"fullName": None})
    assert r.status_code == 400

    cleared = client.put("/api/user/profile", json={"specialty": None})
    assert cleared.status_code == 200
    assert cleared.json()["specialty"] is None


def test_profile_requires_login(client):
    assert client.get("/api/user/profile").status_code == 401
    assert client.put("/api/user/profile", json={"fullName": "Nobody Here"}).status_code == 401


def test_members_directory_is_public_and_minimal(client, make_client):
    register_member(client, fullName="Ada Obi")
    register_member(make_client(), fullName="Bola Ige")

    anonymous = make_client()
    r = anonymous.get("/api/members")
    assert r.status_code == 200
    members = r.json()
    assert [m["fullName"] for m in members] == ["Ada Obi", "Bola Ige"]
    for m in members:
        assert set(m) == {"id", "fullName", "specialty", "yearElevated", "profileImage"}
