"""
services/events.py

행사(Event) 및 행사 참가 신청(EventRegistration) 로직 모음.

설계 원칙:
- 다가오는 행사 / 지난 행사는 is_past 플래그로만 구분 (둘이 전체를 분할)
- 중복 참가 신청은 (event_id, user_id) unique 제약으로 막는다
  → 조회 후 삽입이 아니라 삽입 후 IntegrityError 처리
- 행사 삭제 시 참가 신청 내역도 함께 삭제

관련 파일:
- bosan.models.event       : Event / EventRegistration 모델
- bosan.routers.events     : 공개 / 회원 행사 API
- bosan.routers.admin_events : 관리자 행사 API

"""

from sqlalchemy import select, delete, desc
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from bosan.models.event import Event, EventRegistration


def get_event(db: Session, event_id: int) -> Event | None:
    return db.get(Event, event_id)


def list_events(db: Session) -> list[Event]:
    return list(db.scalars(select(Event).order_by(Event.id)).all())


def get_upcoming_events(db: Session) -> list[Event]:
    return list(db.scalars(
        select(Event)
        .where(Event.is_past.is_(False))
        .order_by(Event.date, Event.id)
    ).all())


def get_past_events(db: Session) -> list[Event]:
    return list(db.scalars(
        select(Event)
        .where(Event.is_past.is_(True))
        .order_by(desc(Event.date), desc(Event.id))
    ).all())


def create_event(db: Session, **fields) -> Event:
    event = Event(**fields)
    db.add(event)
    db.flush()
    return event


def update_event(db: Session, event: Event, changes: dict) -> Event:
    for key, value in changes.items():
        setattr(event, key, value)
    db.flush()
    return event


def delete_event(db: Session, event: Event) -> None:
    db.execute(delete(EventRegistration).where(EventRegistration.event_id == event.id))
    db.delete(event)
    db.flush()


def get_event_registrations(db: Session, event_id: int) -> list[EventRegistration]:
    return list(db.scalars(
        select(EventRegistration)
        .where(EventRegistration.event_id == event_id)
        .order_by(EventRegistration.id)
    ).all())


def get_user_event_registrations(db: Session, user_id: int) -> list[EventRegistration]:
    return list(db.scalars(
        select(EventRegistration)
        .where(EventRegistration.user_id == user_id)
        .order_by(EventRegistration.id)
    ).all())


"""
행사 참가 신청

- 이미 신청한 경우 ValueError("Already registered for this event")
- 실패 시 세션은 rollback이 필요한 상태가 되므로 호출 측(라우터)에서 rollback

"""

def register_for_event(db: Session, *, event_id: int, user_id: int) -> EventRegistration:
    registration = EventRegistration(event_id=event_id, user_id=user_id)
    db.add(registration)
    try:
        db.flush()
    except IntegrityError:
        raise ValueError("Already registered for this event")
    return registration
