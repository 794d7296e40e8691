"""
sessions.py

서버 측 로그인 세션 저장소.

쿠키에는 서명된 세션 ID만 담기고,
실제 세션 데이터(로그인한 user_id 등)는 이 저장소에 보관된다.

SessionStore는 get / set / destroy 인터페이스만 정의하며,
기본 구현인 InMemorySessionStore는 프로세스 메모리에만 저장하므로
서버 재시작 시 모든 세션이 사라진다.
운영 환경에서는 같은 인터페이스로 Redis 등 외부 저장소 구현을 붙이면 된다.

관련 파일:
- bosan.main               : lifespan에서 저장소 생성 후 app.state에 등록
- bosan.core.deps          : 요청마다 세션 조회
- bosan.routers.auth       : 로그인 시 생성 / 로그아웃 시 삭제

"""

import threading
from datetime import datetime, timedelta, timezone
from typing import Any, Protocol


class SessionStore(Protocol):
    def get(self, session_id: str) -> dict[str, Any] | None: ...

    def set(self, session_id: str, data: dict[str, Any]) -> None: ...

    def destroy(self, session_id: str) -> None: ...

    def destroy_user(self, user_id: int) -> int: ...


class InMemorySessionStore:
    """만료 시각을 함께 저장하는 dict 기반 세션 저장소.

    만료된 항목은 조회 시점에 정리된다.
    """

    def __init__(self, ttl: timedelta):
        self.ttl = ttl
        self._sessions: dict[str, tuple[datetime, dict[str, Any]]] = {}
        self._lock = threading.Lock()

    def get(self, session_id: str) -> dict[str, Any] | None:
        now = datetime.now(timezone.utc)
        with self._lock:
            self._prune(now)
            entry = self._sessions.get(session_id)
            if entry is None:
                return None
            return dict(entry[1])

    def set(self, session_id: str, data: dict[str, Any]) -> None:
        expires_at = datetime.now(timezone.utc) + self.ttl
        with self._lock:
            self._sessions[session_id] = (expires_at, dict(data))

    def destroy(self, session_id: str) -> None:
        with self._lock:
            self._sessions.pop(session_id, None)

    # 회원 삭제 시 해당 회원의 모든 세션 제거
    def destroy_user(self, user_id: int) -> int:
        with self._lock:
            sids = [sid for sid, (_, data) in self._sessions.items() if data.get("user_id") == user_id]
            for sid in sids:
                del self._sessions[sid]
            return len(sids)

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    def _prune(self, now: datetime) -> None:
        expired = [sid for sid, (expires_at, _) in self._sessions.items() if expires_at <= now]
        for sid in expired:
            del self._sessions[sid]
