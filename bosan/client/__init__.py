from bosan.client.query_client import ApiError, QueryClient, QueryResult  # noqa: F401
from bosan.client.api import BosanApi  # noqa: F401
