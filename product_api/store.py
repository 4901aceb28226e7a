"""Create and list products stored in MongoDB."""

import logging
from typing import List

from mongoengine.errors import (
    FieldDoesNotExist,
    InvalidDocumentError,
    InvalidQueryError,
    LookUpError,
    OperationError,
    ValidationError,
)
from pymongo.errors import PyMongoError

from product_api.database import Database
from product_api.exceptions import StoreError
from product_api.models import Product
from product_api.validation import clean_name, clean_price

logger = logging.getLogger(__name__)

# Errors from the driver or the ODM that mean the store itself failed.
STORE_FAILURES = (
    PyMongoError,
    OperationError,
    ValidationError,
    FieldDoesNotExist,
    InvalidDocumentError,
    InvalidQueryError,
    LookUpError,
)


class ProductStore:
    def __init__(self, database: Database):
        self.database = database

    def create(self, name, price) -> Product:
        """Validate and persist a new product.

        Raises ProductValidationError before touching the database when the
        name or price is unusable, and StoreError when the write fails.
        """
        name = clean_name(name)
        price = clean_price(price)

        product = Product(name=name, price=price)
        try:
            product.save(force_insert=True)
        except STORE_FAILURES as e:
            raise StoreError("Failed to save product") from e

        logger.info("Product saved: %s", product.id)
        return product

    def list(self) -> List[Product]:
        """All products, newest first."""
        try:
            return list(Product.objects.order_by("-createdAt", "-id"))
        except STORE_FAILURES as e:
            raise StoreError("Failed to list products") from e
