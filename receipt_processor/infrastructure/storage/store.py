"""In-memory storage for receipt points"""

import threading
import uuid
from typing import Dict, Tuple


def new_receipt_id() -> str:
    """Generate a fresh receipt identifier (random UUID4)"""
    return str(uuid.uuid4())


class ReceiptStore:
    """
    Thread-safe mapping of receipt id to awarded points.

    Records live for the lifetime of the store instance. A single lock
    guards every read and write, so a completed put is visible to any
    later get.
    """

    def __init__(self):
        self._points: Dict[str, int] = {}
        self._lock = threading.Lock()

    def put(self, receipt_id: str, points: int) -> None:
        """Store points for a receipt, replacing any previous value"""
        with self._lock:
            self._points[receipt_id] = points

    def get(self, receipt_id: str) -> Tuple[int, bool]:
        """Return (points, found). Unknown ids give (0, False)."""
        with self._lock:
            if receipt_id not in self._points:
                return 0, False
            return self._points[receipt_id], True

    def __len__(self) -> int:
        with self._lock:
            return len(self._points)
