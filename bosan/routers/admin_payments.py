"""
admin_payments.py

관리자 전용 납부 관리 API 모음.

주요 기능:
- 전체 회원 납부 내역 조회 (최신순)
- 납부 상태 변경 (pending / successful / failed / refunded)
- 관리자용 CSV / Excel(xlsx) 데이터 내보내기

설계 원칙:
- 모든 엔드포인트는 관리자 권한(get_current_admin)을 요구
- 납부 조회 / 상태 변경 로직은 service 계층(bosan.services.payments)에 위임

관련 파일:
- bosan.services.payments    : 납부 저장소
- bosan.schemas.payment      : 요청 / 응답 스키마
"""

import csv
import io
from starlette.responses import StreamingResponse, Response
from openpyxl import Workbook

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from bosan.core.deps import get_current_admin, get_db
from bosan.models.user import User
from bosan.schemas.payment import PaymentResponse, PaymentStatusUpdate
from bosan.services import payments as payment_service

router = APIRouter(prefix="/api/admin/payments", tags=["admin-payments"])

EXPORT_HEADER = [
    "payment_id", "reference", "user_id", "username", "full_name",
    "amount", "purpose", "status", "created_at",
]


def _export_row(payment, user) -> list:
    return [
        payment.id,
        payment.reference,
        payment.user_id,
        user.username if user else "",
        user.full_name if user else "",
        payment.amount,
        payment.purpose,
        payment.status.value,
        payment.created_at.isoformat() if payment.created_at else "",
    ]


@router.get("", response_model=list[PaymentResponse])
def list_all_payments(
    db: Session = Depends(get_db),
    _: User = Depends(get_current_admin),
):
    return payment_service.get_all_payments(db)


"""
관리자용 납부 내역 CSV 다운로드 API

- StreamingResponse 로 한 줄씩 내보냄
- UTF-8 BOM 을 먼저 출력하여 Excel 에서 바로 열 수 있게 처리

"""
@router.get("/export")
def export_payments_csv(
    db: Session = Depends(get_db),
    _: User = Depends(get_current_admin),
):
    rows = payment_service.payment_export_rows(db)

    def generate():
        yield "\ufeff"

        output = io.StringIO()
        writer = csv.writer(output)

        writer.writerow(EXPORT_HEADER)
        yield output.getvalue()
        output.seek(0)
        output.truncate(0)

        for payment, user in rows:
            writer.writerow(_export_row(payment, user))
            yield output.getvalue()
            output.seek(0)
            output.truncate(0)

    headers = {"Content-Disposition": 'attachment; filename="payments.csv"'}
    return StreamingResponse(generate(), media_type="text/csv; charset=utf-8", headers=headers)


@router.get("/export.xlsx")
def export_payments_xlsx(
    db: Session = Depends(get_db),
    _: User = Depends(get_current_admin),
):
    wb = Workbook()
    ws = wb.active
    ws.title = "payments"

    ws.append(EXPORT_HEADER)
    for payment, user in payment_service.payment_export_rows(db):
        ws.append(_export_row(payment, user))

    buf = io.BytesIO()
    wb.save(buf)

    headers = {"Content-Disposition": 'attachment; filename="payments.xlsx"'}
    return Response(
        content=buf.getvalue(),
        media_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        headers=headers,
    )


@router.put("/{payment_id}", response_model=PaymentResponse)
@router.patch("/{payment_id}", response_model=PaymentResponse)
def update_payment_status(
    payment_id: int,
    body: PaymentStatusUpdate,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_admin),
):
    payment = payment_service.get_payment(db, payment_id)
    if not payment:
        raise HTTPException(status_code=404, detail="Payment not found")

    try:
        payment = payment_service.update_payment_status(db, payment, body.status)
        db.commit()
        db.refresh(payment)
    except Exception:
        db.rollback()
        raise

    return payment
