"""Dependency injection for FastAPI endpoints"""

from fastapi import Request
from receipt_processor.infrastructure.storage.store import ReceiptStore


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_store(request: Request) -> ReceiptStore:
    """Provide the receipt store owned by the running application"""
    return request.app.state.store
