"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator
from typing import Any, List

from receipt_processor.domain.exceptions import InvalidReceiptError
from receipt_processor.domain.models import Item, Receipt


class ItemSchema(BaseModel):
    """Single line item in a submitted receipt"""

    model_config = ConfigDict(populate_by_name=True)

    short_description: str = Field("", alias="shortDescription")
    price: str = ""

    @field_validator("short_description", "price", mode="before")
    @classmethod
    def null_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class ReceiptRequest(BaseModel):
    """Request body for POST /receipts/process"""

    model_config = ConfigDict(populate_by_name=True)

    retailer: str = ""
    purchase_date: str = Field("", alias="purchaseDate")
    purchase_time: str = Field("", alias="purchaseTime")
    total: str = ""
    items: List[ItemSchema] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def null_body_as_empty(cls, data: Any) -> Any:
        return {} if data is None else data

    @field_validator("retailer", "purchase_date", "purchase_time", "total", mode="before")
    @classmethod
    def null_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("items", mode="before")
    @classmethod
    def null_items_as_empty(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, list):
            return [{} if item is None else item for item in value]
        return value

    def to_domain(self) -> Receipt:
        return Receipt(
            retailer=self.retailer,
            purchase_date=self.purchase_date,
            purchase_time=self.purchase_time,
            total=self.total,
            items=tuple(
                Item(short_description=item.short_description, price=item.price)
                for item in self.items
            ),
        )


class ProcessReceiptResponse(BaseModel):
    """Response for POST /receipts/process"""

    id: str


class PointsResponse(BaseModel):
    """Response for GET /receipts/{id}/points"""

    points: int


def parse_receipt(body: bytes) -> Receipt:
    """
    Decode a raw JSON request body into a Receipt.

    Missing or null fields default to empty values, as does a null body.
    Unknown fields are ignored.

    Raises:
        InvalidReceiptError: On malformed JSON or fields of the wrong JSON type
    """
    try:
        return ReceiptRequest.model_validate_json(body).to_domain()
    except ValidationError as e:
        raise InvalidReceiptError(f"Invalid receipt payload: {e.error_count()} error(s)") from e
