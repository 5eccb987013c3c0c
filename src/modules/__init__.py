# Modules package
from .logistics_matching import Orchestrator, ServiceUnavailable

__all__ = [
    "Orchestrator",
    "ServiceUnavailable",
]
