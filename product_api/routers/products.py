import logging
from typing import List

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from product_api.exceptions import ProductValidationError, StoreError
from product_api.schemas import ErrorResponse, ProductCreate, ProductOut
from product_api.store import ProductStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/products", tags=["Products"])

SERVER_ERROR = {"error": "server error"}


def get_product_store(request: Request) -> ProductStore:
    return request.app.state.product_store


@router.post(
    "",
    response_model=ProductOut,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def create_product(payload: ProductCreate, store: ProductStore = Depends(get_product_store)):
    try:
        product = store.create(payload.name, payload.price)
        return ProductOut(**product.to_dict())
    except ProductValidationError as e:
        return JSONResponse(status_code=400, content={"error": e.message})
    except StoreError:
        logger.exception("POST /api/products error")
        return JSONResponse(status_code=500, content=SERVER_ERROR)
    except Exception:
        logger.exception("POST /api/products unexpected error")
        return JSONResponse(status_code=500, content=SERVER_ERROR)


@router.get(
    "",
    response_model=List[ProductOut],
    responses={500: {"model": ErrorResponse}},
)
def list_products(store: ProductStore = Depends(get_product_store)):
    try:
        products = store.list()
        return [ProductOut(**product.to_dict()) for product in products]
    except StoreError:
        logger.exception("GET /api/products error")
        return JSONResponse(status_code=500, content=SERVER_ERROR)
    except Exception:
        logger.exception("GET /api/products unexpected error")
        return JSONResponse(status_code=500, content=SERVER_ERROR)
