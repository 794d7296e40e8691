"""
admin_events.py

관리자 전용 행사 관리 API 모음.

주요 기능:
- 행사 생성 / 부분 수정(지난 행사 전환 포함) / 삭제
- 행사별 참가 신청 내역 조회

설계 원칙:
- 모든 엔드포인트는 관리자 권한(get_current_admin)을 요구
- 행사 삭제 시 참가 신청 내역도 함께 삭제 (service에서 처리)

관련 파일:
- bosan.services.events      : 행사 저장소
- bosan.schemas.event        : 요청 / 응답 스키마
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from bosan.core.deps import get_current_admin, get_db
from bosan.models.user import User
from bosan.schemas.event import (
    EventCreateRequest,
    EventRegistrationResponse,
    EventResponse,
    EventUpdateRequest,
)
from bosan.services import events as event_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/admin/events", tags=["admin-events"])


@router.post("", response_model=EventResponse, status_code=status.HTTP_201_CREATED)
def create_event(
    body: EventCreateRequest,
    db: Session = Depends(get_db),
    admin: User = Depends(get_current_admin),
):
    try:
        event = event_service.create_event(db, **body.model_dump())
        db.commit()
        db.refresh(event)
    except Exception:
        db.rollback()
        raise

    logger.info("Event %s created by %s", event.id, admin.username)
    return event


@router.put("/{event_id}", response_model=EventResponse)
@router.patch("/{event_id}", response_model=EventResponse)
def update_event(
    event_id: int,
    body: EventUpdateRequest,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_admin),
):
    event = event_service.get_event(db, event_id)
    if not event:
        raise HTTPException(status_code=404, detail="Event not found")

    try:
        event = event_service.update_event(db, event, body.changes())
        db.commit()
        db.refresh(event)
    except Exception:
        db.rollback()
        raise

    return event


@router.delete("/{event_id}")
def delete_event(
    event_id: int,
    db: Session = Depends(get_db),
    admin: User = Depends(get_current_admin),
):
    event = event_service.get_event(db, event_id)
    if not event:
        raise HTTPException(status_code=404, detail="Event not found")

    try:
        event_service.delete_event(db, event)
        db.commit()
    except Exception:
        db.rollback()
        raise

    logger.info("Event %s deleted by %s", event_id, admin.username)
    return {"success": True}


@router.get("/{event_id}/registrations", response_model=list[EventRegistrationResponse])
def event_registrations(
    event_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_admin),
):
    event = event_service.get_event(db, event_id)
    if not event:
        raise HTTPException(status_code=404, detail="Event not found")
    return event_service.get_event_registrations(db, event.id)
