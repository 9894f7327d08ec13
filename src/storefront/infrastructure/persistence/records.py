"""Record schemas for the persisted collections.

The store only ever holds three kinds of record.  Each raw dict is
parsed into its kind's pydantic model when it crosses the persistence
boundary, in either direction, so a malformed record (wrong type, bad
price, unknown status, unparseable timestamp) is rejected with a domain
ValidationError instead of surfacing later inside the repository.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, Field, StrictInt, StrictStr
from pydantic import ValidationError as PydanticValidationError

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.order import OrderStatus


class RecordKind(Enum):
    PRODUCT = "products"
    ORDER = "orders"
    CATEGORY = "categories"


class ProductRecord(BaseModel):
    id: StrictStr
    name: StrictStr
    price: Decimal = Field(ge=0, description="Unit price, stored as a decimal string")
    currency: StrictStr = "CNY"
    unit: StrictStr = ""
    category: StrictStr = ""
    image: StrictStr
    spec: StrictStr = ""


class OrderItemRecord(BaseModel):
    product_id: StrictStr
    name: StrictStr
    quantity: StrictInt = Field(gt=0)
    price: Decimal = Field(ge=0)


class OrderRecord(BaseModel):
    id: StrictStr
    client_id: StrictStr
    status: OrderStatus
    items: list[OrderItemRecord] = Field(min_length=1)
    total_amount: Decimal = Field(ge=0)
    currency: StrictStr = "CNY"
    created_at: datetime
    updated_at: datetime


class CategoryRecord(BaseModel):
    id: StrictStr
    name: StrictStr


Record = ProductRecord | OrderRecord | CategoryRecord

_MODELS: dict[RecordKind, type[BaseModel]] = {
    RecordKind.PRODUCT: ProductRecord,
    RecordKind.ORDER: OrderRecord,
    RecordKind.CATEGORY: CategoryRecord,
}

_LABELS = {
    RecordKind.PRODUCT: "product",
    RecordKind.ORDER: "order",
    RecordKind.CATEGORY: "category",
}


def _describe(label: str, exc: PydanticValidationError) -> str:
    error = exc.errors()[0]
    location = ".".join(str(part) for part in error["loc"])
    if not location:
        return f"{label} record is invalid: {error['msg']}"
    return f"{label} record field '{location}': {error['msg']}"


def parse_record(kind: RecordKind, raw: object) -> Record:
    """Parse ``raw`` into the model for ``kind``."""
    try:
        return _MODELS[kind].model_validate(raw)  # type: ignore[return-value]
    except PydanticValidationError as exc:
        raise ValidationError(_describe(_LABELS[kind], exc)) from exc


def dump_record(record: Record) -> dict:
    """JSON-ready dict: decimals as strings, timestamps as ISO 8601."""
    return record.model_dump(mode="json")
