"""
payments.py

회원(Member) 전용 납부 API 모음.

로그인한 회원이 본인의 납부 요청을 만들고,
납부 내역을 조회하고, 결제 검증 콜백으로 납부를 확정하는 기능을 담당한다.
관리자용 납부 관리 기능(admin_payments.py)과 분리된 구조이다.

주요 기능:
- 본인 납부 내역 조회 (최신순)
- 납부 요청 생성 (reference 서버 생성, status=pending 고정)
- reference 기준 납부 검증 (pending → successful)

설계 원칙:
- 클라이언트가 보낸 status / reference 는 무시
- 다른 회원의 납부는 검증할 수 없다 (관리자 제외, 404로 응답)

관련 파일:
- bosan.services.payments    : 납부 저장소 / reference 생성
- bosan.schemas.payment      : 요청 / 응답 스키마

"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from bosan.core.deps import get_current_user, get_db
from bosan.models.user import User, Role
from bosan.schemas.payment import PaymentCreateRequest, PaymentResponse
from bosan.services import payments as payment_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/payments", tags=["payments"])


@router.get("", response_model=list[PaymentResponse])
def my_payments(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return payment_service.get_user_payments(db, current_user.id)


@router.post("", response_model=PaymentResponse, status_code=status.HTTP_201_CREATED)
def create_payment(
    body: PaymentCreateRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        payment = payment_service.create_payment(
            db,
            user_id=current_user.id,
            amount=body.amount,
            purpose=body.purpose,
        )
        db.commit()
        db.refresh(payment)
    except Exception:
        db.rollback()
        raise

    logger.info("Payment %s created by user %s", payment.reference, current_user.id)
    return payment


"""
납부 검증 API

- 결제 게이트웨이 콜백 대신 호출되는 엔드포인트
- 본인 납부(또는 관리자)만 검증 가능
- pending 이 아닌 납부는 400

"""
@router.put("/{reference}/verify", response_model=PaymentResponse)
def verify_payment(
    reference: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    payment = payment_service.get_payment_by_reference(db, reference)
    if not payment or (payment.user_id != current_user.id and current_user.role != Role.ADMIN):
        raise HTTPException(status_code=404, detail="Payment not found")

    try:
        payment = payment_service.verify_payment(db, payment)
        db.commit()
        db.refresh(payment)
    except ValueError as e:
        db.rollback()
        raise HTTPException(status_code=400, detail=str(e))
    except Exception:
        db.rollback()
        raise

    return payment
