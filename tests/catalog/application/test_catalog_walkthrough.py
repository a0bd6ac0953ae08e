"""End-to-end walk through a product's life in the catalog."""

import pytest
from catalog.product.creation import AddProduct
from catalog.product.exceptions import DuplicateNameError
from catalog.product.pricing import ChangeProductPrice
from catalog.product.queries import find_product, product_stock_status
from catalog.product.removal import DeleteProduct
from catalog.product.stock import StockStatus
from protean.utils.globals import current_domain

WIDGET = {
    "name": "Widget",
    "description": "A simple widget for testing",
    "price": 19.99,
    "quantity": 3,
    "category": "Tools",
}


def test_widget_lifecycle():
    product_id = current_domain.process(AddProduct(**WIDGET), asynchronous=False)
    assert product_stock_status(product_id) is StockStatus.CRITICAL_STOCK

    with pytest.raises(DuplicateNameError):
        current_domain.process(AddProduct(**WIDGET), asynchronous=False)

    current_domain.process(ChangeProductPrice(product_id=product_id, price=24.99), asynchronous=False)
    product = find_product(product_id)
    assert product.price == 24.99
    assert product.quantity == 3

    current_domain.process(DeleteProduct(product_id=product_id), asynchronous=False)
    assert find_product(product_id) is None
