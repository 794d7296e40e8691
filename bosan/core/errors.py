"""
errors.py

전역 예외 처리기 등록.

- 요청 본문 / 경로 파라미터 검증 실패: FastAPI 기본 422 대신 400으로 응답
  (detail 에 필드별 오류 목록)
- 처리되지 않은 예외: 500 + 고정 메시지, 스택은 서버 로그에만 남긴다

HTTPException(400/401/403/404)은 FastAPI 기본 처리기를 그대로 사용한다.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


def validation_errors(exc: RequestValidationError) -> list[dict]:
    return [
        {
            "loc": [str(part) for part in err.get("loc", ())],
            "msg": err.get("msg", ""),
            "type": err.get("type", ""),
        }
        for err in exc.errors()
    ]


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": validation_errors(exc)},
    )


async def unexpected_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "An unexpected error occurred"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unexpected_exception_handler)
