"""Pydantic request/response schemas for the Catalog API."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field

NAME_REGEX = r"^[a-zA-Z0-9\s\-_.]+$"
CATEGORY_REGEX = r"^[a-zA-Z\s\-]+$"

# --- Product Request Schemas ---


class CreateProductRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Widget",
                    "description": "A simple widget for testing",
                    "price": 19.99,
                    "quantity": 3,
                    "category": "Tools",
                }
            ]
        }
    }

    name: str = Field(..., min_length=1, max_length=255, pattern=NAME_REGEX)
    description: str = Field(..., min_length=10, max_length=500)
    price: Decimal = Field(..., gt=0, le=Decimal("999999.99"), max_digits=8, decimal_places=2)
    quantity: int = Field(..., ge=0, le=999_999)
    category: str = Field(..., min_length=1, max_length=100, pattern=CATEGORY_REGEX)


class UpdateProductRequest(BaseModel):
    """Fields left out are required or kept depending on the update policy."""

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Widget Pro",
                    "description": "An improved widget for testing",
                    "price": 29.99,
                    "quantity": 12,
                    "category": "Tools",
                }
            ]
        }
    }

    name: str | None = Field(None, max_length=255)
    description: str | None = Field(None, min_length=10, max_length=500)
    price: Decimal | None = Field(None, gt=0, le=Decimal("999999.99"), max_digits=8, decimal_places=2)
    quantity: int | None = Field(None, ge=0, le=999_999)
    category: str | None = Field(None, min_length=1, max_length=100, pattern=CATEGORY_REGEX)


class ChangePriceRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"price": 24.99}]}}

    price: Decimal = Field(..., gt=0, le=Decimal("999999.99"), max_digits=8, decimal_places=2)


# --- Product Response Schemas ---


class ProductResponse(BaseModel):
    id: str
    name: str
    description: str
    price: float
    quantity: int
    category: str
    stock_status: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ProductPageResponse(BaseModel):
    items: list[ProductResponse]
    page: int
    size: int
    total_elements: int
    total_pages: int
    has_next: bool
    has_previous: bool


class StockStatusResponse(BaseModel):
    product_id: str
    quantity: int
    stock_status: str


# --- Health Response Schemas ---


class HealthResponse(BaseModel):
    timestamp: datetime
    status: str
    message: str
    total_products: int | None = None
    in_stock_products: int | None = None
    low_stock_products: int | None = None
    out_of_stock_products: int | None = None
    stock_availability_rate: float | None = None
    low_stock_threshold: int
    degraded_threshold: int
    down_threshold: int
