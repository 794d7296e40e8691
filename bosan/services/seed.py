"""
services/seed.py

시작 시 초기 데이터 생성 로직.

저장소가 휘발성(메모리 DB)이므로 프로세스가 뜰 때마다
샘플 공지 / 행사 / 자료를 다시 채워 넣는다.
초기 관리자 계정 생성도 여기서 담당한다.

관련 파일:
- bosan.main                 : lifespan에서 호출
- scripts.create_admin       : 영속 DB에 관리자 계정만 만들 때 사용

"""

import logging
from datetime import date, timedelta

from sqlalchemy import select, func
from sqlalchemy.orm import Session

from bosan.models.content import Announcement, Resource
from bosan.models.event import Event
from bosan.models.user import User, Role
from bosan.services import content as content_service
from bosan.services import events as event_service
from bosan.services import users as user_service

logger = logging.getLogger(__name__)


def _is_empty(db: Session, model) -> bool:
    return (db.scalar(select(func.count()).select_from(model)) or 0) == 0


"""
샘플 데이터 생성

- 공지 1건, 다가오는 행사 3건(오늘 기준 +30/+45/+60일), 자료 2건
- 테이블마다 비어 있을 때만 채운다 (재시작 / 영속 DB 중복 방지)

"""

def seed_sample_data(db: Session, *, today: date | None = None) -> None:
    today = today or date.today()

    if _is_empty(db, Announcement):
        content_service.create_announcement(
            db,
            title="Annual Conference 2023",
            content="Registration for the 2023 Annual Conference is now open. "
                    "Early bird registration ends on June 30th, 2023.",
            type="Event",
            is_important=True,
        )

    if _is_empty(db, Event):
        event_service.create_event(
            db,
            title="Annual Legal Conference 2023",
            description="Join us for the premier gathering of legal professionals in Nigeria. "
                        "Featuring keynote speakers and panel discussions on emerging legal trends.",
            date=today + timedelta(days=30),
            venue="Eko Hotels & Suites, Lagos",
            time="9:00 AM - 5:00 PM",
            image="https://images.unsplash.com/photo-1540575467063-178a50c2df87?auto=format&fit=crop&w=400&q=80",
            is_past=False,
        )
        event_service.create_event(
            db,
            title="Legal Practice Management Workshop",
            description="A comprehensive workshop on modern legal practice management, "
                        "technology integration, and client relations.",
            date=today + timedelta(days=45),
            venue="Transcorp Hilton, Abuja",
            time="10:00 AM - 3:00 PM",
            image="https://images.unsplash.com/photo-1556761175-5973dc0f32e7?auto=format&fit=crop&w=400&q=80",
            is_past=False,
        )
        event_service.create_event(
            db,
            title="BOSAN Annual Dinner & Awards",
            description="A prestigious evening recognizing outstanding contributions to the legal profession. "
                        "Black tie required.",
            date=today + timedelta(days=60),
            venue="Oriental Hotel, Lagos",
            time="6:00 PM - 10:00 PM",
            image="https://images.unsplash.com/photo-1575505586569-646b2ca898fc?auto=format&fit=crop&w=400&q=80",
            is_past=False,
        )

    if _is_empty(db, Resource):
        content_service.create_resource(
            db,
            title="Code of Conduct for Legal Practitioners",
            description="Guidelines for professional conduct of legal practitioners in Nigeria",
            category="Legal Document",
            file_url="/resources/code-of-conduct.pdf",
        )
        content_service.create_resource(
            db,
            title="Supreme Court Practice Directions",
            description="Updated practice directions for the Supreme Court of Nigeria",
            category="Legal Document",
            file_url="/resources/supreme-court-directions.pdf",
        )

    logger.info("Sample data ready")


"""
초기 관리자 계정 생성

- 같은 username 또는 email 이 이미 있으면 생성하지 않고 기존 계정 반환
- 반환값: (user, created)

"""

def ensure_admin(
    db: Session,
    *,
    username: str,
    email: str,
    password: str,
    full_name: str,
) -> tuple[User, bool]:
    existing = user_service.get_user_by_username(db, username) or user_service.get_user_by_email(db, email)
    if existing:
        return existing, False

    admin = user_service.create_user(
        db,
        username=username,
        email=email,
        password=password,
        full_name=full_name,
        role=Role.ADMIN,
    )
    logger.info("Admin account created: %s", admin.username)
    return admin, True
