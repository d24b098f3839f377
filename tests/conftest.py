"""Pytest fixtures for testing"""

import pytest
from fastapi.testclient import TestClient
from receipt_processor.api.main import create_app
from receipt_processor.domain.models import Item, Receipt
from receipt_processor.infrastructure.storage.store import ReceiptStore


@pytest.fixture
def store() -> ReceiptStore:
    """Fresh, empty receipt store for each test"""
    return ReceiptStore()


@pytest.fixture
def client(store: ReceiptStore) -> TestClient:
    """Create FastAPI test client backed by the test store"""
    return TestClient(create_app(store=store))


@pytest.fixture
def target_payload() -> dict:
    """The well-known Target receipt, as submitted over HTTP (28 points)"""
    return {
        "retailer": "Target",
        "purchaseDate": "2022-01-01",
        "purchaseTime": "13:01",
        "items": [
            {"shortDescription": "Mountain Dew 12PK", "price": "6.49"},
            {"shortDescription": "Emils Cheese Pizza", "price": "12.25"},
            {"shortDescription": "Knorr Creamy Chicken", "price": "1.26"},
            {"shortDescription": "Doritos Nacho Cheese", "price": "3.35"},
            {"shortDescription": "   Klarbrunn 12-PK 12 FL OZ  ", "price": "12.00"},
        ],
        "total": "35.35",
    }


@pytest.fixture
def corner_market_payload() -> dict:
    """The well-known M&M Corner Market receipt (109 points)"""
    return {
        "retailer": "M&M Corner Market",
        "purchaseDate": "2022-03-20",
        "purchaseTime": "14:33",
        "items": [
            {"shortDescription": "Gatorade", "price": "2.25"},
            {"shortDescription": "Gatorade", "price": "2.25"},
            {"shortDescription": "Gatorade", "price": "2.25"},
            {"shortDescription": "Gatorade", "price": "2.25"},
        ],
        "total": "9.00",
    }


def receipt_from_payload(payload: dict) -> Receipt:
    return Receipt(
        retailer=payload["retailer"],
        purchase_date=payload["purchaseDate"],
        purchase_time=payload["purchaseTime"],
        total=payload["total"],
        items=tuple(Item(i["shortDescription"], i["price"]) for i in payload["items"]),
    )


@pytest.fixture
def target_receipt(target_payload: dict) -> Receipt:
    return receipt_from_payload(target_payload)


@pytest.fixture
def corner_market_receipt(corner_market_payload: dict) -> Receipt:
    return receipt_from_payload(corner_market_payload)
