"""Shared BDD fixtures and step definitions for the Catalog domain."""

import pytest
from catalog.product.creation import AddProduct
from catalog.product.exceptions import DuplicateNameError, InvalidDataError, NotFoundError
from catalog.product.product import Product
from protean.utils.globals import current_domain
from pytest_bdd import given, parsers, then

_ERROR_CLASSES = {
    "duplicate name": DuplicateNameError,
    "not found": NotFoundError,
    "invalid data": InvalidDataError,
}


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def error():
    """Container for captured domain errors."""
    return {"exc": None}


@pytest.fixture()
def catalog_state():
    """Ids of products added during a scenario, keyed by name."""
    return {}


@pytest.fixture()
def add_product():
    """Process an AddProduct command with scenario defaults."""

    def _add(name, quantity=3, price=19.99, category="Tools"):
        command = AddProduct(
            name=name,
            description=f"{name} used in catalog scenarios",
            price=price,
            quantity=quantity,
            category=category,
        )
        return current_domain.process(command, asynchronous=False)

    return _add


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('a product named "{name}" with quantity {quantity:d}'))
def product_with_quantity(add_product, catalog_state, name, quantity):
    catalog_state[name] = add_product(name, quantity=quantity)


@given(parsers.cfparse('a product named "{name}" priced at {price:f}'))
def product_with_price(add_product, catalog_state, name, price):
    catalog_state[name] = add_product(name, price=price)


# ---------------------------------------------------------------------------
# Then steps (shared)
# ---------------------------------------------------------------------------
@then(parsers.cfparse('the action is rejected as "{kind}"'))
def action_fails_with(error, kind):
    assert error["exc"] is not None, f"Expected a {kind} error but none was raised"
    assert isinstance(error["exc"], _ERROR_CLASSES[kind])


@then(parsers.cfparse("the catalog holds {count:d} product"))
@then(parsers.cfparse("the catalog holds {count:d} products"))
def catalog_holds(count):
    assert current_domain.repository_for(Product).count_all() == count
