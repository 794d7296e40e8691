# Base.metadata에 모든 테이블을 등록하기 위한 import
from bosan.models.user import User, Role  # noqa: F401
from bosan.models.event import Event, EventRegistration  # noqa: F401
from bosan.models.payment import Payment, PaymentStatus  # noqa: F401
from bosan.models.content import Announcement, Resource, ContactMessage  # noqa: F401
