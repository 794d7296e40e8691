"""
query_client.py

BOSAN API 조회 캐시 클라이언트.

GET 경로(예: "/api/events/upcoming")를 캐시 키로 사용하여
조회 결과를 보관하고, 변경 요청(POST/PUT/PATCH/DELETE)이 성공하면
관련 키를 stale 로 표시해서 다음 조회 때 다시 받아오게 한다.

- fetch_query(key)  : 캐시 조회 → 없거나 stale 이면 GET 요청
                      결과는 QueryResult(data, is_loading, error, is_stale)
- mutate(...)       : 요청 성공 시 invalidates 에 적힌 키를 stale 처리
- api_request(...)  : 2xx 가 아니면 ApiError 발생

세션 쿠키는 httpx.Client 의 쿠키 저장소가 유지한다.
테스트에서는 FastAPI TestClient(httpx.Client 하위 클래스)를 그대로 넘길 수 있다.
"""

import logging
from dataclasses import dataclass
from typing import Any, Iterable

import httpx

logger = logging.getLogger(__name__)


class ApiError(Exception):
    def __init__(self, status_code: int, message: str):
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message


@dataclass
class QueryResult:
    """조회 결과.

    fetch_query 는 동기 호출이라 요청이 끝난 뒤에만 결과를 돌려준다.
    따라서 반환된 결과의 is_loading 은 항상 False 이고,
    화면 쪽 조회 계약(data / isLoading / error)과 같은 모양을 맞추기 위해서만 둔다.
    """

    data: Any = None
    is_loading: bool = False
    error: ApiError | None = None
    is_stale: bool = False


@dataclass
class _CacheEntry:
    data: Any
    stale: bool = False


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(body, dict) and "detail" in body:
        detail = body["detail"]
        if isinstance(detail, list):
            return "; ".join(str(item.get("msg", item)) if isinstance(item, dict) else str(item) for item in detail)
        return str(detail)
    return response.text


class QueryClient:
    def __init__(self, http: httpx.Client):
        self.http = http
        self._cache: dict[str, _CacheEntry] = {}

    def api_request(self, method: str, path: str, json: Any = None) -> httpx.Response:
        if json is None:
            response = self.http.request(method, path)
        else:
            response = self.http.request(method, path, json=json)
        if not response.is_success:
            raise ApiError(response.status_code, _error_message(response))
        return response

    def fetch_query(self, key: str) -> QueryResult:
        entry = self._cache.get(key)
        if entry is not None and not entry.stale:
            return QueryResult(data=entry.data)

        try:
            data = self.api_request("GET", key).json()
        except ApiError as e:
            logger.debug("Query %s failed: %s", key, e)
            return QueryResult(
                data=entry.data if entry else None,
                error=e,
                is_stale=entry is not None,
            )

        self._cache[key] = _CacheEntry(data=data)
        return QueryResult(data=data)

    def mutate(
        self,
        method: str,
        path: str,
        json: Any = None,
        invalidates: Iterable[str] = (),
    ) -> Any:
        response = self.api_request(method, path, json=json)
        self.invalidate_queries(*invalidates)
        if not response.content:
            return None
        return response.json()

    def invalidate_queries(self, *keys: str) -> None:
        for key in keys:
            entry = self._cache.get(key)
            if entry is not None:
                entry.stale = True

    def set_query_data(self, key: str, data: Any) -> None:
        self._cache[key] = _CacheEntry(data=data)

    def get_query_data(self, key: str) -> Any:
        entry = self._cache.get(key)
        return entry.data if entry else None

    def is_stale(self, key: str) -> bool:
        entry = self._cache.get(key)
        return entry is None or entry.stale

    def clear(self) -> None:
        self._cache.clear()
