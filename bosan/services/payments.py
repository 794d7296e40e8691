"""
services/payments.py

납부(Payment) 도메인의 비즈니스 로직 모음.

설계 원칙:
- reference / status 는 항상 서버가 결정 (클라이언트 값 무시)
- 생성 직후 상태는 pending
- 상태 변경은 검증 콜백(verify) 또는 관리자 조치로만 발생

관련 파일:
- bosan.models.payment       : Payment / PaymentStatus 모델
- bosan.routers.payments     : 회원 납부 API
- bosan.routers.admin_payments : 관리자 납부 관리 / 내보내기

"""

import logging
import random
import re
import time

from sqlalchemy import select, desc
from sqlalchemy.orm import Session

from bosan.models.payment import Payment, PaymentStatus
from bosan.models.user import User

logger = logging.getLogger(__name__)

REFERENCE_RE = re.compile(r"^PAY-\d+-\d+$")


def generate_reference() -> str:
    return f"PAY-{int(time.time() * 1000)}-{random.randint(0, 999)}"


def get_payment(db: Session, payment_id: int) -> Payment | None:
    return db.get(Payment, payment_id)


def get_payment_by_reference(db: Session, reference: str) -> Payment | None:
    return db.scalar(select(Payment).where(Payment.reference == reference))


# 본인 납부 내역 (최신순)
def get_user_payments(db: Session, user_id: int) -> list[Payment]:
    return list(db.scalars(
        select(Payment)
        .where(Payment.user_id == user_id)
        .order_by(desc(Payment.created_at), desc(Payment.id))
    ).all())


# 관리자용 전체 납부 내역 (최신순, 페이지네이션 없음)
def get_all_payments(db: Session) -> list[Payment]:
    return list(db.scalars(
        select(Payment).order_by(desc(Payment.created_at), desc(Payment.id))
    ).all())


"""
납부 요청 생성

- reference 충돌 시 새로 생성 (같은 ms + 같은 난수일 때만 발생)
- status 는 pending 고정

"""

def create_payment(db: Session, *, user_id: int, amount: int, purpose: str) -> Payment:
    reference = generate_reference()
    while get_payment_by_reference(db, reference) is not None:
        reference = generate_reference()

    payment = Payment(
        user_id=user_id,
        amount=amount,
        purpose=purpose,
        reference=reference,
        status=PaymentStatus.PENDING,
    )
    db.add(payment)
    db.flush()
    return payment


def update_payment_status(db: Session, payment: Payment, status: PaymentStatus) -> Payment:
    before = payment.status
    payment.status = status
    db.flush()
    logger.info("Payment %s status %s -> %s", payment.reference, before.value, status.value)
    return payment


"""
납부 검증

- 결제 게이트웨이 검증 콜백에 해당 (외부 호출 없이 상태만 전환)
- pending 상태에서만 successful 로 전환 가능

"""

def verify_payment(db: Session, payment: Payment) -> Payment:
    if payment.status != PaymentStatus.PENDING:
        raise ValueError(f"Payment already {payment.status.value}")
    return update_payment_status(db, payment, PaymentStatus.SUCCESSFUL)


"""
관리자 내보내기용 행 목록

- (payment, user) 튜플, 최신순
- 회원이 지워진 경우 user 는 None

"""

def payment_export_rows(db: Session) -> list[tuple[Payment, User | None]]:
    rows = db.execute(
        select(Payment, User)
        .outerjoin(User, User.id == Payment.user_id)
        .order_by(desc(Payment.created_at), desc(Payment.id))
    ).all()
    return [(payment, user) for payment, user in rows]
