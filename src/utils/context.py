"""
Request context variables.

Holds the correlation, user and session ids of the request being served so
that log records can carry them without threading them through every call.
"""

from contextvars import ContextVar
from typing import Dict, Optional

correlation_id_var: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)
user_id_var: ContextVar[Optional[str]] = ContextVar("user_id", default=None)
session_id_var: ContextVar[Optional[str]] = ContextVar("session_id", default=None)

_CONTEXT_VARS = {
    "correlation_id": correlation_id_var,
    "user_id": user_id_var,
    "session_id": session_id_var,
}


def get_correlation_id() -> Optional[str]:
    return correlation_id_var.get()


def set_correlation_id(correlation_id: str) -> None:
    correlation_id_var.set(correlation_id)


def get_user_id() -> Optional[str]:
    return user_id_var.get()


def set_user_id(user_id: str) -> None:
    user_id_var.set(user_id)


def get_session_id() -> Optional[str]:
    return session_id_var.get()


def set_session_id(session_id: str) -> None:
    session_id_var.set(session_id)


def clear_all_context() -> None:
    """Reset every request context variable."""
    for var in _CONTEXT_VARS.values():
        var.set(None)


def get_request_context() -> Dict[str, str]:
    """
    Current request context, without unset entries.

    Returns:
        Mapping such as {"correlation_id": "...", "user_id": "..."}
    """
    context = {}
    for name, var in _CONTEXT_VARS.items():
        value = var.get()
        if value:
            context[name] = value
    return context
