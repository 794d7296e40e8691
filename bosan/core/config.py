"""
config.py

애플리케이션 전역 설정(Configuration) 관리 파일.

.env 환경 변수들을 Pydantic BaseSettings를 통해 로드하여
애플리케이션 전반에서 공통으로 사용하는 설정 값을 제공한다.

주요 설정 항목:
- 데이터베이스 연결 정보 (기본값: 프로세스 내 메모리 SQLite)
- 세션 쿠키 서명 시크릿 및 만료 정책
- 쿠키 보안 옵션
- CORS 허용 도메인 목록
- 시작 시 샘플 데이터 / 초기 관리자 계정 생성 옵션

관련 파일:
- bosan.main               : CORS, 로깅 및 앱 초기화 시 설정 사용
- bosan.core.security      : 세션 토큰 시크릿 / 해시 라운드 사용
- bosan.db.session         : DATABASE_URL 사용

"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # 기본값은 휘발성 메모리 DB (재시작 시 데이터 초기화)
    DATABASE_URL: str = "sqlite+pysqlite:///:memory:"

    SECRET_KEY: str
    ALGORITHM: str = "HS256"

    SESSION_COOKIE_NAME: str = "bosan.sid"
    SESSION_EXPIRE_MINUTES: int = 60 * 24

    # 쿠키/배포 옵션
    # - COOKIE_SECURE: HTTPS 환경에서만 True 권장
    COOKIE_SECURE: bool = False
    COOKIE_SAMESITE: str = "lax"
    COOKIE_DOMAIN: str | None = None

    CORS_ORIGINS: List[str] = ["http://localhost:5000", "http://127.0.0.1:5000"]

    BCRYPT_ROUNDS: int = 12

    SEED_SAMPLE_DATA: bool = True

    # 초기 관리자 계정 (설정된 경우에만 생성)
    ADMIN_USERNAME: str | None = None
    ADMIN_EMAIL: str | None = None
    ADMIN_PASSWORD: str | None = None
    ADMIN_FULL_NAME: str = "BOSAN Administrator"

    LOG_LEVEL: str = "INFO"


settings = Settings()
