"""Dependency injection for FastAPI endpoints"""

from fastapi import Request

from claimcraft_engine.config import settings
from claimcraft_engine.domain.statutory import StatutoryConfig

# Built at import so a bad statutory setting stops the service from starting
_statutory_config = settings.statutory_config()


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_statutory_config() -> StatutoryConfig:
    """Provide the statutory rates and thresholds"""
    return _statutory_config
