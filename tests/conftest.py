import os

# 앱 import 전에 테스트용 설정 주입
os.environ["DATABASE_URL"] = "sqlite+pysqlite:///:memory:"
os.environ["SEED_SAMPLE_DATA"] = "false"
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
for _name in ("ADMIN_USERNAME", "ADMIN_EMAIL", "ADMIN_PASSWORD"):
    os.environ.pop(_name, None)

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

import bosan.models  # noqa: F401,E402
from bosan.main import app as fastapi_app  # noqa: E402
from bosan.core.deps import get_db  # noqa: E402
from bosan.db.base import Base  # noqa: E402
from bosan.db.session import build_engine  # noqa: E402


@pytest.fixture()
def engine():
    """테스트마다 새 메모리 DB"""
    engine = build_engine("sqlite+pysqlite:///:memory:")
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture()
def db(session_factory):
    """테스트에서 직접 DB 조작할 때 쓰는 세션"""
    session = session_factory()
    try:
        yield session
        session.commit()
    finally:
        session.close()


@pytest.fixture()
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    fastapi_app.dependency_overrides[get_db] = override_get_db
    with TestClient(fastapi_app) as c:
        yield c
    fastapi_app.dependency_overrides.clear()


@pytest.fixture()
def make_client(client):
    """두 번째 사용자용 클라이언트 (같은 앱 상태 / 세션 저장소 공유, 쿠키만 분리)"""
    extra = []

    def _make() -> TestClient:
        c = TestClient(fastapi_app)
        extra.append(c)
        return c

    yield _make

    for c in extra:
        c.close()
