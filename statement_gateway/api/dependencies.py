"""Dependency injection for FastAPI endpoints"""

from fastapi import Request
from statement_gateway.infrastructure.clients.holidays import HolidayClient


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_holiday_client() -> HolidayClient:
    """Provide holiday calendar client instance"""
    return HolidayClient()
