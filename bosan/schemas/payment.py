from datetime import datetime

from pydantic import ConfigDict, Field

from bosan.models.payment import PaymentStatus
from bosan.schemas.base import CamelModel

# 64비트 INTEGER 컬럼 상한
MAX_AMOUNT = 2**63 - 1


class PaymentCreateRequest(CamelModel):
    # reference / status 는 서버가 정하므로 보내도 무시
    model_config = ConfigDict(extra="ignore")

    amount: int = Field(..., gt=0, le=MAX_AMOUNT, strict=True, examples=[5000])
    purpose: str = Field(..., min_length=1, max_length=100, examples=["membership_renewal"])


class PaymentResponse(CamelModel):
    id: int
    user_id: int
    amount: int
    purpose: str
    reference: str
    status: PaymentStatus
    created_at: datetime


class PaymentStatusUpdate(CamelModel):
    status: PaymentStatus
