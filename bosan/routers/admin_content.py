"""
admin_content.py

관리자 전용 콘텐츠 관리 API 모음.

주요 기능:
- 공지사항 생성 / 수정 / 삭제
- 자료 생성 / 수정 / 삭제
- 문의 메시지 조회 / 읽음 처리 / 삭제

설계 원칙:
- 모든 엔드포인트는 관리자 권한(get_current_admin)을 요구
- 수정은 보낸 필드만 반영하는 부분 수정 (PUT / PATCH 동일)
- 문의 메시지 경로는 /messages 와 /contact-messages 둘 다 제공
  (관리자 화면은 /contact-messages 를 사용)

관련 파일:
- bosan.services.content     : 공지 / 자료 / 문의 저장소
- bosan.schemas.content      : 요청 / 응답 스키마
"""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from bosan.core.deps import get_current_admin, get_db
from bosan.models.user import User
from bosan.schemas.content import (
    AnnouncementCreateRequest,
    AnnouncementResponse,
    AnnouncementUpdateRequest,
    ContactMessageResponse,
    ContactMessageUpdateRequest,
    ResourceCreateRequest,
    ResourceResponse,
    ResourceUpdateRequest,
)
from bosan.services import content as content_service

router = APIRouter(prefix="/api/admin", tags=["admin-content"])


def _commit(db: Session, obj=None):
    try:
        db.commit()
        if obj is not None:
            db.refresh(obj)
    except Exception:
        db.rollback()
        raise
    return obj


# 공지사항

@router.post("/announcements", response_model=AnnouncementResponse, status_code=status.HTTP_201_CREATED)
def create_announcement(
    body: AnnouncementCreateRequest,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_admin),
):
    announcement = content_service.create_announcement(db, **body.model_dump())
    return _commit(db, announcement)


@router.put("/announcements/{announcement_id}", response_model=AnnouncementResponse)
@router.patch("/announcements/{announcement_id}", response_model=AnnouncementResponse)
def update_announcement(
    announcement_id: int,
    body: AnnouncementUpdateRequest,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_admin),
):
    announcement = content_service.get_announcement(db, announcement_id)
    if not announcement:
        raise HTTPException(status_code=404, detail="Announcement not found")

    announcement = content_service.update_announcement(db, announcement, body.changes())
    return _commit(db, announcement)


@router.delete("/announcements/{announcement_id}")
def delete_announcement(
    announcement_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_admin),
):
    announcement = content_service.get_announcement(db, announcement_id)
    if not announcement:
        raise HTTPException(status_code=404, detail="Announcement not found")

    content_service.delete_announcement(db, announcement)
    _commit(db)
    return {"success": True}


# 자료실

@router.post("/resources", response_model=ResourceResponse, status_code=status.HTTP_201_CREATED)
def create_resource(
    body: ResourceCreateRequest,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_admin),
):
    resource = content_service.create_resource(db, **body.model_dump())
    return _commit(db, resource)


@router.put("/resources/{resource_id}", response_model=ResourceResponse)
@router.patch("/resources/{resource_id}", response_model=ResourceResponse)
def update_resource(
    resource_id: int,
    body: ResourceUpdateRequest,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_admin),
):
    resource = content_service.get_resource(db, resource_id)
    if not resource:
        raise HTTPException(status_code=404, detail="Resource not found")

    resource = content_service.update_resource(db, resource, body.changes())
    return _commit(db, resource)


@router.delete("/resources/{resource_id}")
def delete_resource(
    resource_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_admin),
):
    resource = content_service.get_resource(db, resource_id)
    if not resource:
        raise HTTPException(status_code=404, detail="Resource not found")

    content_service.delete_resource(db, resource)
    _commit(db)
    return {"success": True}


# 문의 메시지

@router.get("/messages", response_model=list[ContactMessageResponse])
@router.get("/contact-messages", response_model=list[ContactMessageResponse])
def list_messages(
    db: Session = Depends(get_db),
    _: User = Depends(get_current_admin),
):
    return content_service.list_contact_messages(db)


@router.patch("/messages/{message_id}", response_model=ContactMessageResponse)
@router.patch("/contact-messages/{message_id}", response_model=ContactMessageResponse)
def update_message(
    message_id: int,
    body: ContactMessageUpdateRequest,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_admin),
):
    message = content_service.get_contact_message(db, message_id)
    if not message:
        raise HTTPException(status_code=404, detail="Message not found")

    message = content_service.update_contact_message(db, message, {"is_read": body.is_read})
    return _commit(db, message)


@router.delete("/messages/{message_id}")
@router.delete("/contact-messages/{message_id}")
def delete_message(
    message_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_admin),
):
    message = content_service.get_contact_message(db, message_id)
    if not message:
        raise HTTPException(status_code=404, detail="Message not found")

    content_service.delete_contact_message(db, message)
    _commit(db)
    return {"success": True}
