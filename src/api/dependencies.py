"""
FastAPI dependencies for dependency injection.
"""

from src.modules.logistics_matching import Orchestrator, get_orchestrator


def get_orchestrator_dep() -> Orchestrator:
    """Dependency for the logistics orchestrator and its components."""
    return get_orchestrator()
