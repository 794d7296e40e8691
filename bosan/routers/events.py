"""
events.py

공개 행사 조회 및 회원 행사 참가 신청 API 모음.

관리자용 행사 관리 기능(admin_events.py)과 분리하여,
권한 경계와 책임을 명확히 하기 위한 구조이다.

주요 기능:
- 전체 / 다가오는 / 지난 행사 조회 (로그인 불필요)
- 행사 참가 신청 (회원)
- 본인 참가 신청 내역 조회 (회원)

관련 파일:
- bosan.services.events      : 행사 / 참가 신청 저장소
- bosan.schemas.event        : 요청 / 응답 스키마

"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from bosan.core.deps import get_current_user, get_db
from bosan.models.user import User
from bosan.schemas.event import CreatedResponse, EventRegistrationResponse, EventResponse
from bosan.services import events as event_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/events", tags=["events"])


@router.get("", response_model=list[EventResponse])
def list_events(db: Session = Depends(get_db)):
    return event_service.list_events(db)


# 날짜 오름차순
@router.get("/upcoming", response_model=list[EventResponse])
def upcoming_events(db: Session = Depends(get_db)):
    return event_service.get_upcoming_events(db)


# 날짜 내림차순
@router.get("/past", response_model=list[EventResponse])
def past_events(db: Session = Depends(get_db)):
    return event_service.get_past_events(db)


@router.get("/registrations/me", response_model=list[EventRegistrationResponse])
def my_registrations(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return event_service.get_user_event_registrations(db, current_user.id)


@router.get("/{event_id}", response_model=EventResponse)
def get_event(event_id: int, db: Session = Depends(get_db)):
    event = event_service.get_event(db, event_id)
    if not event:
        raise HTTPException(status_code=404, detail="Event not found")
    return event


"""
행사 참가 신청 API

- 존재하지 않는 행사면 404
- 이미 신청한 행사면 400
- 성공 시 201 + 신청 ID

"""
@router.post("/{event_id}/register", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def register_for_event(
    event_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    event = event_service.get_event(db, event_id)
    if not event:
        raise HTTPException(status_code=404, detail="Event not found")

    try:
        registration = event_service.register_for_event(db, event_id=event.id, user_id=current_user.id)
        db.commit()
    except ValueError as e:
        db.rollback()
        raise HTTPException(status_code=400, detail=str(e))
    except Exception:
        db.rollback()
        raise

    logger.info("User %s registered for event %s", current_user.id, event.id)
    return CreatedResponse(id=registration.id)
