"""
services/content.py

공지사항 / 자료실 / 문의 메시지 저장소 함수 모음.

세 엔티티 모두 같은 형태의 CRUD만 필요하므로 한 파일에 모았다.
없는 레코드 조회는 None 반환, 트랜잭션 제어는 라우터에서 수행한다.

"""

from sqlalchemy import select, desc
from sqlalchemy.orm import Session

from bosan.models.content import Announcement, Resource, ContactMessage


def _apply(db: Session, obj, changes: dict):
    for key, value in changes.items():
        setattr(obj, key, value)
    db.flush()
    return obj


def _create(db: Session, model, fields: dict):
    obj = model(**fields)
    db.add(obj)
    db.flush()
    return obj


def _delete(db: Session, obj) -> None:
    db.delete(obj)
    db.flush()


# 공지사항

def get_announcement(db: Session, announcement_id: int) -> Announcement | None:
    return db.get(Announcement, announcement_id)


def list_announcements(db: Session) -> list[Announcement]:
    return list(db.scalars(
        select(Announcement).order_by(desc(Announcement.created_at), desc(Announcement.id))
    ).all())


def create_announcement(db: Session, **fields) -> Announcement:
    return _create(db, Announcement, fields)


def update_announcement(db: Session, announcement: Announcement, changes: dict) -> Announcement:
    return _apply(db, announcement, changes)


def delete_announcement(db: Session, announcement: Announcement) -> None:
    _delete(db, announcement)


# 자료실

def get_resource(db: Session, resource_id: int) -> Resource | None:
    return db.get(Resource, resource_id)


def list_resources(db: Session) -> list[Resource]:
    return list(db.scalars(select(Resource).order_by(Resource.id)).all())


def create_resource(db: Session, **fields) -> Resource:
    return _create(db, Resource, fields)


def update_resource(db: Session, resource: Resource, changes: dict) -> Resource:
    return _apply(db, resource, changes)


def delete_resource(db: Session, resource: Resource) -> None:
    _delete(db, resource)


# 문의 메시지

def get_contact_message(db: Session, message_id: int) -> ContactMessage | None:
    return db.get(ContactMessage, message_id)


def list_contact_messages(db: Session) -> list[ContactMessage]:
    return list(db.scalars(
        select(ContactMessage).order_by(desc(ContactMessage.created_at), desc(ContactMessage.id))
    ).all())


def create_contact_message(db: Session, **fields) -> ContactMessage:
    return _create(db, ContactMessage, fields)


def update_contact_message(db: Session, message: ContactMessage, changes: dict) -> ContactMessage:
    return _apply(db, message, changes)


def delete_contact_message(db: Session, message: ContactMessage) -> None:
    _delete(db, message)
