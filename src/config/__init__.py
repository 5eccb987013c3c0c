from .settings import settings, get_settings
from .constants import (
    CORRELATION_ID_HEADER,
    USER_ID_HEADER,
    SESSION_ID_HEADER,
    SLOW_REQUEST_SECONDS,
)

__all__ = [
    "settings",
    "get_settings",
    "CORRELATION_ID_HEADER",
    "USER_ID_HEADER",
    "SESSION_ID_HEADER",
    "SLOW_REQUEST_SECONDS",
]
