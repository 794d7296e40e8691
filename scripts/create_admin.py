"""

관리자(admin) 계정 생성 스크립트.

- 영속 DB(DATABASE_URL 이 파일 SQLite / PostgreSQL 등)를 쓸 때
  서버 최초 세팅 시 한 번 실행하는 용도
- .env에 정의된 ADMIN_* 환경 변수를 읽어 admin 계정을 생성한다.
- 같은 username / email 계정이 이미 있으면 생성하지 않고 종료한다.

기본 메모리 DB에서는 프로세스가 끝나면 사라지므로 의미가 없고,
그 경우에는 서버 시작 시 lifespan 에서 같은 ADMIN_* 값으로 계정이 만들어진다.

사용 방법
- 가상환경 접속
- (.venv) ~$ python -m scripts.create_admin

"""

import os
from dotenv import load_dotenv
load_dotenv()

import bosan.models  # noqa: F401,E402
from bosan.db.base import Base  # noqa: E402
from bosan.db.session import SessionLocal, engine  # noqa: E402
from bosan.services.seed import ensure_admin  # noqa: E402


def main():
    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        username = os.environ["ADMIN_USERNAME"]
        email = os.environ["ADMIN_EMAIL"]
        password = os.environ["ADMIN_PASSWORD"]
        full_name = os.environ.get("ADMIN_FULL_NAME", "BOSAN Administrator")

        user, created = ensure_admin(
            db,
            username=username,
            email=email,
            password=password,
            full_name=full_name,
        )
        if not created:
            print(f"Account already exists: {user.username} ({user.role.value}). Skip creation.")
            return

        db.commit()
        print(f"Admin created: {user.username}")

    finally:
        db.close()


if __name__ == "__main__":
    main()
