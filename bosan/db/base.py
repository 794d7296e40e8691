"""
base.py

SQLAlchemy ORM Base 정의 파일.

모든 모델(User, Event, Payment 등)은
이 Base를 기준으로 테이블 메타데이터가 관리된다.
마이그레이션 도구 없이 시작 시 Base.metadata.create_all()로 테이블을 만든다.

관련 파일:
- bosan.models.*          : 모든 ORM 모델
- bosan.main              : lifespan에서 테이블 생성

"""

from datetime import datetime, timezone

from sqlalchemy.orm import declarative_base

Base = declarative_base()


def utcnow() -> datetime:
    return datetime.now(timezone.utc)
