from datetime import datetime

import pytest
from pydantic import ValidationError

from product_api.schemas import ProductCreate, ProductOut, validation_message


def test_product_create_strips_name():
    payload = ProductCreate(name="  Widget ", price=3)

    assert payload.name == "Widget"
    assert payload.price == 3.0


def test_product_create_rejects_string_price():
    with pytest.raises(ValidationError):
        ProductCreate(name="Widget", price="3")


def test_timestamps_rendered_as_utc():
    out = ProductOut(
        id="65f0c0ffee0000000000abcd",
        name="Widget",
        price=1.0,
        createdAt=datetime(2024, 3, 1, 12, 30, 0, 123000),
        updatedAt=datetime(2024, 3, 1, 12, 30, 0, 123000),
    )

    assert out.model_dump(mode="json")["createdAt"] == "2024-03-01T12:30:00.123Z"


@pytest.mark.parametrize(
    "errors,message",
    [
        ([{"loc": ("body", "name"), "type": "missing"}], "Invalid name"),
        ([{"loc": ("body", "price"), "type": "float_type"}], "Invalid price"),
        (
            [
                {"loc": ("body", "name"), "type": "string_type"},
                {"loc": ("body", "price"), "type": "float_type"},
            ],
            "Invalid name",
        ),
        ([{"loc": ("body",), "type": "missing"}], "Invalid name"),
        ([{"loc": ("body", 9), "type": "json_invalid"}], "Invalid name"),
    ],
)
def test_validation_message(errors, message):
    assert validation_message(errors) == message
