"""

서비스 계층(저장소 함수) 단위 테스트.
- DB 세션을 직접 넘겨서 HTTP 없이 확인한다.

"""

from datetime import date, timedelta

import pytest
from sqlalchemy.exc import IntegrityError

from bosan.models.content import Announcement, Resource
from bosan.models.event import Event
from bosan.models.payment import PaymentStatus
from bosan.models.user import Role, User
from bosan.services import events as event_service
from bosan.services import payments as payment_service
from bosan.services import users as user_service
from bosan.services.seed import ensure_admin, seed_sample_data


def _user(db, username="tunde", email=None):
    user = user_service.create_user(
        db,
        username=username,
        email=email or f"{username}@bosan.org",
        password="TundePassw0rd",
        full_name="Tunde Bakare",
    )
    db.commit()
    return user


def test_create_and_lookup_user_case_insensitive(db):
    user = _user(db, username="Tunde", email="Tunde@Bosan.org")

    assert user.id is not None
    assert user.role == Role.MEMBER
    assert user.password_hash != "TundePassw0rd"

    assert user_service.get_user(db, user.id).id == user.id
    assert user_service.get_user_by_username(db, "TUNDE").id == user.id
    assert user_service.get_user_by_email(db, "tunde@bosan.org").id == user.id
    assert user_service.get_user(db, 9999) is None
    assert user_service.get_user_by_username(db, "nobody") is None


def test_create_user_rejects_duplicates(db):
    _user(db, username="tunde")
    with pytest.raises(ValueError, match="Username already exists"):
        user_service.create_user(db, username="TUNDE", email="x@bosan.org", password="p", full_name="X")
    with pytest.raises(ValueError, match="Email already exists"):
        user_service.create_user(db, username="other", email="TUNDE@bosan.org", password="p", full_name="X")


def test_authenticate(db):
    _user(db)
    assert user_service.authenticate(db, "tunde", "TundePassw0rd") is not None
    assert user_service.authenticate(db, "tunde@bosan.org", "TundePassw0rd") is not None
    assert user_service.authenticate(db, "tunde", "wrong") is None
    assert user_service.authenticate(db, "ghost", "TundePassw0rd") is None


def test_update_user_merges_and_rehashes(db):
    user = _user(db)
    old_hash = user.password_hash

    user_service.update_user(db, user, {"specialty": "Energy Law", "password": "NewPassw0rd"})
    db.commit()

    assert user.specialty == "Energy Law"
    assert user.full_name == "Tunde Bakare"
    assert user.password_hash != old_hash
    assert user_service.authenticate(db, "tunde", "NewPassw0rd") is not None


def test_events_partition_and_registration(db):
    user = _user(db)
    upcoming = event_service.create_event(
        db, title="A", description="d", date=date(2026, 11, 1), venue="v", time="t",
    )
    past = event_service.create_event(
        db, title="B", description="d", date=date(2025, 1, 1), venue="v", time="t", is_past=True,
    )
    db.commit()

    assert [e.id for e in event_service.get_upcoming_events(db)] == [upcoming.id]
    assert [e.id for e in event_service.get_past_events(db)] == [past.id]

    registration = event_service.register_for_event(db, event_id=upcoming.id, user_id=user.id)
    db.commit()
    assert registration.id is not None

    with pytest.raises(ValueError, match="Already registered"):
        event_service.register_for_event(db, event_id=upcoming.id, user_id=user.id)
    db.rollback()

    assert len(event_service.get_event_registrations(db, upcoming.id)) == 1
    assert len(event_service.get_user_event_registrations(db, user.id)) == 1


def test_payment_reference_and_verify(db):
    user = _user(db)
    payment = payment_service.create_payment(db, user_id=user.id, amount=1000, purpose="dues")
    db.commit()

    assert payment.status == PaymentStatus.PENDING
    assert payment_service.REFERENCE_RE.match(payment.reference)
    assert payment_service.get_payment_by_reference(db, payment.reference).id == payment.id

    payment_service.verify_payment(db, payment)
    db.commit()
    assert payment.status == PaymentStatus.SUCCESSFUL

    with pytest.raises(ValueError, match="Payment already successful"):
        payment_service.verify_payment(db, payment)


def test_delete_user_with_payments_is_refused(db):
    user = _user(db)
    payment_service.create_payment(db, user_id=user.id, amount=1000, purpose="dues")
    db.commit()

    with pytest.raises(ValueError, match="payment history"):
        user_service.delete_user(db, user)
    assert user_service.count_user_payments(db, user.id) == 1


def test_seed_sample_data_is_idempotent(db):
    today = date(2026, 1, 10)
    seed_sample_data(db, today=today)
    db.commit()
    seed_sample_data(db, today=today)
    db.commit()

    assert db.query(Announcement).count() == 1
    assert db.query(Resource).count() == 2

    events = event_service.get_upcoming_events(db)
    assert [e.date for e in events] == [today + timedelta(days=d) for d in (30, 45, 60)]
    assert db.query(Event).filter(Event.is_past.is_(True)).count() == 0
    assert {r.category for r in db.query(Resource).all()} == {"Legal Document"}


def test_ensure_admin_creates_once(db):
    admin, created = ensure_admin(
        db, username="admin", email="admin@bosan.org", password="AdminPassw0rd", full_name="Admin",
    )
    db.commit()
    assert created is True
    assert admin.role == Role.ADMIN

    again, created_again = ensure_admin(
        db, username="ADMIN", email="other@bosan.org", password="x", full_name="Admin",
    )
    assert created_again is False
    assert again.id == admin.id


def test_identity_keys_fold_unicode_case(db):
    user = _user(db, username="Ömer", email="Ömer@Bosan.org")

    assert user.username_key == "ömer"
    assert user.email_key == "ömer@bosan.org"
    assert user_service.get_user_by_username(db, "ÖMER").id == user.id
    assert user_service.get_user_by_email(db, "ömer@bosan.org").id == user.id

    user_service.update_user(db, user, {"username": "Straße"})
    db.commit()
    assert user.username_key == "strasse"
    assert user_service.get_user_by_username(db, "STRASSE").id == user.id
    assert user_service.get_user_by_username(db, "ömer") is None


def test_identity_keys_are_unique_in_storage(db):
    _user(db, username="Ömer")
    db.add(User(
        username="öMER",
        email="another@bosan.org",
        password_hash="x",
        full_name="Duplicate",
    ))
    with pytest.raises(IntegrityError):
        db.flush()
    db.rollback()
