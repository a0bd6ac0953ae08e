"""FastAPI endpoints for the Catalog domain.

Each route translates between Pydantic schemas (external contract) and
Protean commands or catalog queries (internal domain concepts).
"""

from fastapi import APIRouter, HTTPException, Query, Response
from fastapi.responses import JSONResponse
from protean.utils.globals import current_domain

from catalog.api.schemas import (
    ChangePriceRequest,
    CreateProductRequest,
    HealthResponse,
    ProductPageResponse,
    ProductResponse,
    StockStatusResponse,
    UpdateProductRequest,
)
from catalog.health.aggregator import inventory_health
from catalog.product import queries
from catalog.product.creation import AddProduct
from catalog.product.details import UpdateProduct
from catalog.product.pricing import ChangeProductPrice
from catalog.product.product import Product
from catalog.product.removal import DeleteProduct
from catalog.product.stock import classify

product_router = APIRouter(prefix="/products", tags=["products"])
metrics_router = APIRouter(prefix="/metrics", tags=["metrics"])


def _to_response(product) -> ProductResponse:
    return ProductResponse(
        id=str(product.id),
        name=product.name,
        description=product.description,
        price=product.price,
        quantity=product.quantity,
        category=product.category,
        stock_status=classify(product.quantity).value,
        created_at=product.created_at,
        updated_at=product.updated_at,
    )


def _to_page_response(page) -> ProductPageResponse:
    return ProductPageResponse(
        items=[_to_response(p) for p in page.items],
        page=page.page,
        size=page.size,
        total_elements=page.total,
        total_pages=page.total_pages,
        has_next=page.has_next,
        has_previous=page.has_previous,
    )


def _get_or_404(product_id: str):
    product = queries.find_product(product_id)
    if product is None:
        raise HTTPException(status_code=404, detail=f"Product not found with ID: {product_id}")
    return product


def _optional_float(value):
    return float(value) if value is not None else None


# --- Product endpoints ---


@product_router.post("", status_code=201, response_model=ProductResponse)
async def add_product(body: CreateProductRequest) -> ProductResponse:
    command = AddProduct(
        name=body.name,
        description=body.description,
        price=float(body.price),
        quantity=body.quantity,
        category=body.category,
    )
    product_id = current_domain.process(command, asynchronous=False)
    return _to_response(current_domain.repository_for(Product).get(product_id))


@product_router.get("", response_model=list[ProductResponse])
async def list_products() -> list[ProductResponse]:
    return [_to_response(p) for p in queries.list_products()]


@product_router.get("/paginated", response_model=ProductPageResponse)
async def list_products_paginated(
    page: int = Query(0, ge=0),
    size: int = Query(queries.DEFAULT_PAGE_SIZE, ge=1),
    sort_by: str = "id",
    sort_dir: str = "asc",
) -> ProductPageResponse:
    return _to_page_response(queries.list_products_page(page, size, sort_by, sort_dir))


@product_router.get("/search", response_model=list[ProductResponse])
async def search_products(name: str) -> list[ProductResponse]:
    return [_to_response(p) for p in queries.search_products(name)]


@product_router.get("/search/paginated", response_model=ProductPageResponse)
async def search_products_paginated(
    name: str,
    page: int = Query(0, ge=0),
    size: int = Query(queries.DEFAULT_SEARCH_PAGE_SIZE, ge=1),
    sort_by: str = "id",
    sort_dir: str = "asc",
) -> ProductPageResponse:
    return _to_page_response(queries.search_products_page(name, page, size, sort_by, sort_dir))


@product_router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: str) -> ProductResponse:
    return _to_response(_get_or_404(product_id))


@product_router.get("/{product_id}/status", response_model=StockStatusResponse)
async def get_stock_status(product_id: str) -> StockStatusResponse:
    product = _get_or_404(product_id)
    return StockStatusResponse(
        product_id=str(product.id),
        quantity=product.quantity,
        stock_status=classify(product.quantity).value,
    )


@product_router.put("/{product_id}", response_model=ProductResponse)
async def update_product(product_id: str, body: UpdateProductRequest) -> ProductResponse:
    command = UpdateProduct(
        product_id=product_id,
        name=body.name,
        description=body.description,
        price=_optional_float(body.price),
        quantity=body.quantity,
        category=body.category,
    )
    current_domain.process(command, asynchronous=False)
    return _to_response(current_domain.repository_for(Product).get(product_id))


@product_router.patch("/{product_id}/price", response_model=ProductResponse)
async def change_price(product_id: str, body: ChangePriceRequest) -> ProductResponse:
    command = ChangeProductPrice(product_id=product_id, price=float(body.price))
    current_domain.process(command, asynchronous=False)
    return _to_response(current_domain.repository_for(Product).get(product_id))


@product_router.delete("/{product_id}", status_code=204)
async def delete_product(product_id: str) -> Response:
    current_domain.process(DeleteProduct(product_id=product_id), asynchronous=False)
    return Response(status_code=204)


# --- Metrics endpoints ---


@metrics_router.get("/health", response_model=HealthResponse)
async def get_inventory_health():
    report = inventory_health(current_domain.repository_for(Product))
    payload = HealthResponse(**report.to_dict())
    # Unreadable counts or configuration still produce a body, flagged unavailable
    status_code = 503 if report.failed else 200
    return JSONResponse(status_code=status_code, content=payload.model_dump(mode="json"))
