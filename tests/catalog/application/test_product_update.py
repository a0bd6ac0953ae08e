"""Application tests for the update-product command handler."""

from unittest.mock import patch

import pytest
from catalog.product.creation import AddProduct
from catalog.product.details import UpdateProduct
from catalog.product.exceptions import DuplicateNameError, InvalidDataError, NotFoundError
from catalog.product.product import Product
from protean.utils.globals import current_domain

FULL_UPDATE = {
    "name": "Widget Pro",
    "description": "An improved widget for testing",
    "price": 29.99,
    "quantity": 12,
    "category": "Hand Tools",
}


def _add_product(name="Widget"):
    command = AddProduct(
        name=name,
        description="A simple widget for testing",
        price=19.99,
        quantity=3,
        category="Tools",
    )
    return current_domain.process(command, asynchronous=False)


def _update(product_id, **fields):
    return current_domain.process(UpdateProduct(product_id=product_id, **fields), asynchronous=False)


class TestReplaceUpdate:
    def test_all_fields_replaced(self):
        product_id = _add_product()
        _update(product_id, **FULL_UPDATE)

        product = current_domain.repository_for(Product).get(product_id)
        assert product.snapshot() == FULL_UPDATE

    def test_partial_body_rejected(self):
        product_id = _add_product()
        with pytest.raises(InvalidDataError):
            _update(product_id, name="Widget Pro")

        assert current_domain.repository_for(Product).get(product_id).name == "Widget"

    def test_update_writes_to_event_store(self):
        product_id = _add_product()
        _update(product_id, **FULL_UPDATE)

        messages = current_domain.event_store.store.read("catalog::product")
        updated = [m for m in messages if m.metadata.headers.type == "Catalog.ProductUpdated.v1"]
        assert len(updated) == 1
        assert updated[0].data["name"] == "Widget Pro"


class TestPatchUpdate:
    @pytest.fixture(autouse=True)
    def patch_policy(self, monkeypatch):
        monkeypatch.setenv("CATALOG_UPDATE_POLICY", "patch")

    def test_only_supplied_fields_change(self):
        product_id = _add_product()
        _update(product_id, quantity=75)

        product = current_domain.repository_for(Product).get(product_id)
        assert product.quantity == 75
        assert product.name == "Widget"
        assert product.price == 19.99

    def test_empty_patch_rejected(self):
        product_id = _add_product()
        with pytest.raises(InvalidDataError):
            _update(product_id)


class TestBlankName:
    @pytest.mark.parametrize("name", ["", "   "])
    def test_blank_name_rejected_and_record_unchanged(self, name):
        product_id = _add_product()
        repo = current_domain.repository_for(Product)
        before = repo.get(product_id).snapshot()

        with pytest.raises(InvalidDataError) as exc:
            _update(product_id, **dict(FULL_UPDATE, name=name))
        assert "name must not be blank" in str(exc.value)

        assert repo.get(product_id).snapshot() == before


class TestMissingProduct:
    def test_unknown_id_rejected(self):
        with pytest.raises(NotFoundError) as exc:
            _update("does-not-exist", **FULL_UPDATE)
        assert "Product not found with ID: does-not-exist" in str(exc.value)


class TestRename:
    def test_rename_to_existing_name_rejected(self):
        _add_product(name="Gadget")
        product_id = _add_product(name="Widget")

        with pytest.raises(DuplicateNameError):
            _update(product_id, **dict(FULL_UPDATE, name="Gadget"))

        assert current_domain.repository_for(Product).get(product_id).name == "Widget"

    def test_keeping_own_name_allowed(self):
        product_id = _add_product(name="Widget")
        _update(product_id, **dict(FULL_UPDATE, name="Widget"))

        assert current_domain.repository_for(Product).get(product_id).quantity == 12


class TestAuditLog:
    def test_update_logs_before_and_after(self):
        product_id = _add_product()

        with patch("catalog.product.details.logger") as mock_logger:
            _update(product_id, **FULL_UPDATE)

        mock_logger.info.assert_any_call(
            "Product updated",
            product_id=product_id,
            policy="replace",
            before={
                "name": "Widget",
                "description": "A simple widget for testing",
                "price": 19.99,
                "quantity": 3,
                "category": "Tools",
            },
            after=FULL_UPDATE,
        )
