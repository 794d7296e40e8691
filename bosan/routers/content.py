"""
content.py

공지사항 / 자료실 / 문의하기 API (공개 및 회원용).

- 공지사항 조회: 로그인 불필요, 최신순
- 자료실 조회: 회원 로그인 필요
- 문의 접수: 로그인 불필요

관리자용 콘텐츠 관리 기능은 admin_content.py 참고.
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from bosan.core.deps import get_current_user, get_db
from bosan.models.user import User
from bosan.schemas.content import (
    AnnouncementResponse,
    ContactMessageCreateRequest,
    ResourceResponse,
)
from bosan.schemas.event import CreatedResponse
from bosan.services import content as content_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["content"])


@router.get("/announcements", response_model=list[AnnouncementResponse])
def list_announcements(db: Session = Depends(get_db)):
    return content_service.list_announcements(db)


@router.get("/resources", response_model=list[ResourceResponse])
def list_resources(
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
):
    return content_service.list_resources(db)


@router.post("/contact", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def submit_contact_message(body: ContactMessageCreateRequest, db: Session = Depends(get_db)):
    try:
        message = content_service.create_contact_message(db, **body.model_dump())
        db.commit()
    except Exception:
        db.rollback()
        raise

    logger.info("Contact message %s received", message.id)
    return CreatedResponse(id=message.id)
