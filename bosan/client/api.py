"""
api.py

화면 단위로 정리한 BOSAN API 호출 모음.

각 조회는 QueryClient 캐시 키(GET 경로)에 묶이고,
각 변경은 화면이 다시 그려야 하는 키들을 함께 무효화한다.
요청 본문 필드는 서버 JSON 형식(camelCase)을 그대로 사용한다.
"""

from typing import Any

from bosan.client.query_client import QueryClient, QueryResult

USER_KEY = "/api/user"
PROFILE_KEY = "/api/user/profile"
ANNOUNCEMENTS_KEY = "/api/announcements"
EVENTS_KEY = "/api/events"
UPCOMING_EVENTS_KEY = "/api/events/upcoming"
PAST_EVENTS_KEY = "/api/events/past"
MY_REGISTRATIONS_KEY = "/api/events/registrations/me"
MEMBERS_KEY = "/api/members"
RESOURCES_KEY = "/api/resources"
PAYMENTS_KEY = "/api/payments"
ADMIN_MEMBERS_KEY = "/api/admin/members"
ADMIN_MESSAGES_KEY = "/api/admin/contact-messages"
ADMIN_PAYMENTS_KEY = "/api/admin/payments"

EVENT_KEYS = (EVENTS_KEY, UPCOMING_EVENTS_KEY, PAST_EVENTS_KEY)


class BosanApi:
    def __init__(self, queries: QueryClient):
        self.queries = queries

    # 인증

    def login(self, username: str, password: str) -> dict:
        user = self.queries.mutate("POST", "/api/login", json={"username": username, "password": password})
        self.queries.set_query_data(USER_KEY, user)
        return user

    def register(self, **fields: Any) -> dict:
        user = self.queries.mutate("POST", "/api/register", json=fields, invalidates=(MEMBERS_KEY,))
        self.queries.set_query_data(USER_KEY, user)
        return user

    def logout(self) -> None:
        self.queries.mutate("POST", "/api/logout")
        # 로그아웃하면 사용자별 데이터가 섞이지 않도록 캐시 전체 비움
        self.queries.clear()

    def current_user(self) -> QueryResult:
        return self.queries.fetch_query(USER_KEY)

    # 공개 조회

    def announcements(self) -> QueryResult:
        return self.queries.fetch_query(ANNOUNCEMENTS_KEY)

    def events(self) -> QueryResult:
        return self.queries.fetch_query(EVENTS_KEY)

    def upcoming_events(self) -> QueryResult:
        return self.queries.fetch_query(UPCOMING_EVENTS_KEY)

    def past_events(self) -> QueryResult:
        return self.queries.fetch_query(PAST_EVENTS_KEY)

    def members(self) -> QueryResult:
        return self.queries.fetch_query(MEMBERS_KEY)

    def send_contact_message(self, **fields: Any) -> dict:
        return self.queries.mutate("POST", "/api/contact", json=fields)

    # 회원

    def resources(self) -> QueryResult:
        return self.queries.fetch_query(RESOURCES_KEY)

    def register_for_event(self, event_id: int) -> dict:
        return self.queries.mutate(
            "POST",
            f"/api/events/{event_id}/register",
            invalidates=(UPCOMING_EVENTS_KEY, MY_REGISTRATIONS_KEY),
        )

    def my_registrations(self) -> QueryResult:
        return self.queries.fetch_query(MY_REGISTRATIONS_KEY)

    def payments(self) -> QueryResult:
        return self.queries.fetch_query(PAYMENTS_KEY)

    def create_payment(self, amount: int, purpose: str) -> dict:
        return self.queries.mutate(
            "POST", "/api/payments", json={"amount": amount, "purpose": purpose}, invalidates=(PAYMENTS_KEY,)
        )

    def verify_payment(self, reference: str) -> dict:
        return self.queries.mutate(
            "PUT", f"/api/payments/{reference}/verify", invalidates=(PAYMENTS_KEY, ADMIN_PAYMENTS_KEY)
        )

    def profile(self) -> QueryResult:
        return self.queries.fetch_query(PROFILE_KEY)

    def update_profile(self, **fields: Any) -> dict:
        return self.queries.mutate(
            "PUT", PROFILE_KEY, json=fields, invalidates=(USER_KEY, PROFILE_KEY, MEMBERS_KEY)
        )

    # 관리자: 행사

    def create_event(self, **fields: Any) -> dict:
        return self.queries.mutate("POST", "/api/admin/events", json=fields, invalidates=EVENT_KEYS)

    def update_event(self, event_id: int, **fields: Any) -> dict:
        return self.queries.mutate("PATCH", f"/api/admin/events/{event_id}", json=fields, invalidates=EVENT_KEYS)

    def delete_event(self, event_id: int) -> dict:
        return self.queries.mutate("DELETE", f"/api/admin/events/{event_id}", invalidates=EVENT_KEYS)

    def event_registrations(self, event_id: int) -> QueryResult:
        return self.queries.fetch_query(f"/api/admin/events/{event_id}/registrations")

    # 관리자: 공지 / 자료

    def create_announcement(self, **fields: Any) -> dict:
        return self.queries.mutate("POST", "/api/admin/announcements", json=fields, invalidates=(ANNOUNCEMENTS_KEY,))

    def update_announcement(self, announcement_id: int, **fields: Any) -> dict:
        return self.queries.mutate(
            "PATCH", f"/api/admin/announcements/{announcement_id}", json=fields, invalidates=(ANNOUNCEMENTS_KEY,)
        )

    def delete_announcement(self, announcement_id: int) -> dict:
        return self.queries.mutate(
            "DELETE", f"/api/admin/announcements/{announcement_id}", invalidates=(ANNOUNCEMENTS_KEY,)
        )

    def create_resource(self, **fields: Any) -> dict:
        return self.queries.mutate("POST", "/api/admin/resources", json=fields, invalidates=(RESOURCES_KEY,))

    def update_resource(self, resource_id: int, **fields: Any) -> dict:
        return self.queries.mutate(
            "PATCH", f"/api/admin/resources/{resource_id}", json=fields, invalidates=(RESOURCES_KEY,)
        )

    def delete_resource(self, resource_id: int) -> dict:
        return self.queries.mutate("DELETE", f"/api/admin/resources/{resource_id}", invalidates=(RESOURCES_KEY,))

    # 관리자: 회원

    def admin_members(self) -> QueryResult:
        return self.queries.fetch_query(ADMIN_MEMBERS_KEY)

    def create_member(self, **fields: Any) -> dict:
        return self.queries.mutate(
            "POST", ADMIN_MEMBERS_KEY, json=fields, invalidates=(ADMIN_MEMBERS_KEY, MEMBERS_KEY)
        )

    def update_member(self, user_id: int, **fields: Any) -> dict:
        return self.queries.mutate(
            "PATCH", f"{ADMIN_MEMBERS_KEY}/{user_id}", json=fields, invalidates=(ADMIN_MEMBERS_KEY, MEMBERS_KEY)
        )

    def delete_member(self, user_id: int) -> dict:
        return self.queries.mutate(
            "DELETE", f"{ADMIN_MEMBERS_KEY}/{user_id}", invalidates=(ADMIN_MEMBERS_KEY, MEMBERS_KEY)
        )

    # 관리자: 문의 / 납부

    def contact_messages(self) -> QueryResult:
        return self.queries.fetch_query(ADMIN_MESSAGES_KEY)

    def mark_message_read(self, message_id: int, is_read: bool = True) -> dict:
        return self.queries.mutate(
            "PATCH", f"{ADMIN_MESSAGES_KEY}/{message_id}", json={"isRead": is_read}, invalidates=(ADMIN_MESSAGES_KEY,)
        )

    def delete_message(self, message_id: int) -> dict:
        return self.queries.mutate("DELETE", f"{ADMIN_MESSAGES_KEY}/{message_id}", invalidates=(ADMIN_MESSAGES_KEY,))

    def admin_payments(self) -> QueryResult:
        return self.queries.fetch_query(ADMIN_PAYMENTS_KEY)

    def update_payment_status(self, payment_id: int, status: str) -> dict:
        return self.queries.mutate(
            "PATCH", f"{ADMIN_PAYMENTS_KEY}/{payment_id}", json={"status": status},
            invalidates=(ADMIN_PAYMENTS_KEY, PAYMENTS_KEY),
        )
