"""
Exceptions raised by the Logistics Matching module.
"""

from typing import Optional


class LogisticsError(Exception):
    """Base class for logistics matching errors."""


class ServiceUnavailable(LogisticsError):
    """
    The partner has no active offering for the requested service type.

    Callers should present this as "no quote available" and not retry.
    """

    def __init__(self, service_type: str, partner_id: Optional[str] = None):
        self.service_type = getattr(service_type, "value", service_type)
        self.partner_id = partner_id
        message = f"Service '{self.service_type}' not available"
        if partner_id:
            message += f" for partner {partner_id}"
        super().__init__(message)
