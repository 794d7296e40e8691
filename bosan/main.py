"""
main.py

FastAPI 애플리케이션 진입점(Entry Point).

주요 역할:
- 로깅 설정
- FastAPI 앱 인스턴스 생성 및 lifespan 등록
  (테이블 생성, 세션 저장소 생성, 샘플 데이터 / 초기 관리자 생성)
- CORS 미들웨어 / 전역 예외 처리기 설정
- 각 도메인별 라우터(auth, users, events, content, payments, admin ...) 등록
- 헬스 체크 및 DB 연결 상태 확인용 엔드포인트 제공

설계 원칙:
- 비즈니스 로직은 포함하지 않고 설정/조립 역할만 수행
- 실제 기능은 routers / services 계층에 위임

관련 파일:
- bosan.core.config        : 환경 변수 및 설정 로드
- bosan.core.deps          : DB 세션 / 인증 의존성
- bosan.routers.*          : 기능별 API 라우터

"""

import logging
from contextlib import asynccontextmanager
from datetime import timedelta

from fastapi import FastAPI, Depends
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.orm import Session
from sqlalchemy import text

import bosan.models  # noqa: F401
from bosan.core.config import settings
from bosan.core.deps import get_db
from bosan.core.errors import register_exception_handlers
from bosan.core.sessions import InMemorySessionStore
from bosan.db.base import Base
from bosan.db.session import engine, SessionLocal
from bosan.routers import (
    auth,
    users,
    events,
    content,
    payments,
    admin,
    admin_events,
    admin_content,
    admin_payments,
)
from bosan.services.seed import seed_sample_data, ensure_admin

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


def bootstrap_data() -> None:
    db = SessionLocal()
    try:
        if settings.SEED_SAMPLE_DATA:
            seed_sample_data(db)
        if settings.ADMIN_USERNAME and settings.ADMIN_EMAIL and settings.ADMIN_PASSWORD:
            ensure_admin(
                db,
                username=settings.ADMIN_USERNAME,
                email=settings.ADMIN_EMAIL,
                password=settings.ADMIN_PASSWORD,
                full_name=settings.ADMIN_FULL_NAME,
            )
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting BOSAN backend")

    Base.metadata.create_all(bind=engine)
    logger.info("Database tables ready")

    app.state.session_store = InMemorySessionStore(ttl=timedelta(minutes=settings.SESSION_EXPIRE_MINUTES))

    bootstrap_data()

    yield

    logger.info("Shutting down BOSAN backend")
    engine.dispose()


app = FastAPI(title="BOSAN Backend", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(auth.router)
app.include_router(users.router)
app.include_router(events.router)
app.include_router(content.router)
app.include_router(payments.router)
app.include_router(admin.router)
app.include_router(admin_events.router)
app.include_router(admin_content.router)
app.include_router(admin_payments.router)


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/db-ping")
def db_ping(db: Session = Depends(get_db)):
    value = db.execute(text("SELECT 1")).scalar_one()
    return {"db": "ok", "value": value}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("bosan.main:app", host="0.0.0.0", port=5000, log_level=settings.LOG_LEVEL.lower())
