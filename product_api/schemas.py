from datetime import datetime, timezone
from typing import Any, Dict, List

from pydantic import BaseModel, StrictFloat, StrictStr, field_serializer, field_validator

from product_api.validation import clean_name, clean_price


class ProductCreate(BaseModel):
    name: StrictStr
    price: StrictFloat

    @field_validator("name")
    @classmethod
    def check_name(cls, value: str) -> str:
        return clean_name(value)

    @field_validator("price")
    @classmethod
    def check_price(cls, value: float) -> float:
        return clean_price(value)


class ProductOut(BaseModel):
    id: str
    name: str
    price: float
    createdAt: datetime
    updatedAt: datetime

    @field_serializer("createdAt", "updatedAt")
    def serialize_timestamp(self, value: datetime) -> str:
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class HealthResponse(BaseModel):
    ok: bool


class ErrorResponse(BaseModel):
    error: str


def validation_message(errors: List[Dict[str, Any]]) -> str:
    """Pick the client facing message for a failed ProductCreate body.

    The name is reported first; a body that is missing, malformed or not an
    object has no usable name either.
    """
    fields = {
        err["loc"][1]
        for err in errors
        if len(err.get("loc", ())) > 1 and err["loc"][0] == "body"
    }
    if "price" in fields and "name" not in fields and not _body_level(errors):
        return "Invalid price"
    return "Invalid name"


def _body_level(errors: List[Dict[str, Any]]) -> bool:
    return any(
        tuple(err.get("loc", ())) == ("body",) or err.get("type") == "json_invalid"
        for err in errors
    )
