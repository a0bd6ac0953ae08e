"""Tests for ProductUpdate and the update policies that build it."""

import pytest
from catalog.config import UpdatePolicy
from catalog.product.exceptions import InvalidDataError
from catalog.product.product import Product
from catalog.product.updates import ProductUpdate, build_update
from protean.exceptions import ValidationError

FULL_UPDATE = {
    "name": "Widget Pro",
    "description": "An improved widget for testing",
    "price": 29.99,
    "quantity": 12,
    "category": "Hand Tools",
}


class TestProductUpdate:
    def test_changes_returns_supplied_fields_only(self):
        update = ProductUpdate(price=29.99, quantity=0)
        assert update.changes() == {"price": 29.99, "quantity": 0}

    def test_invalid_fields_collected_together(self):
        with pytest.raises(ValidationError) as exc:
            ProductUpdate(name="Bad!", category="Tools2")
        assert set(exc.value.messages) == {"name", "category"}

    def test_empty_update_is_valid_value_object(self):
        assert ProductUpdate().changes() == {}


class TestReplacePolicy:
    def test_full_update_accepted(self):
        update = build_update(FULL_UPDATE, UpdatePolicy.REPLACE)
        assert update.changes() == FULL_UPDATE

    def test_missing_fields_rejected(self):
        with pytest.raises(InvalidDataError) as exc:
            build_update({"name": "Widget Pro", "price": 29.99}, UpdatePolicy.REPLACE)
        assert set(exc.value.messages) == {"description", "quantity", "category"}

    def test_missing_name_rejected_as_blank(self):
        values = dict(FULL_UPDATE, name=None)
        with pytest.raises(InvalidDataError) as exc:
            build_update(values, UpdatePolicy.REPLACE)
        assert "name must not be blank" in str(exc.value)


class TestPatchPolicy:
    def test_single_field_accepted(self):
        update = build_update({"quantity": 7}, UpdatePolicy.PATCH)
        assert update.changes() == {"quantity": 7}

    def test_nothing_supplied_rejected(self):
        with pytest.raises(InvalidDataError) as exc:
            build_update({}, UpdatePolicy.PATCH)
        assert "_update" in exc.value.messages


class TestBlankName:
    @pytest.mark.parametrize("policy", list(UpdatePolicy))
    @pytest.mark.parametrize("name", ["", "   ", "\t\n"])
    def test_blank_name_always_rejected(self, policy, name):
        values = dict(FULL_UPDATE, name=name)
        with pytest.raises(InvalidDataError) as exc:
            build_update(values, policy)
        assert "name" in exc.value.messages


class TestFieldRules:
    def test_invalid_value_surfaces_as_invalid_data(self):
        values = dict(FULL_UPDATE, description="short")
        with pytest.raises(InvalidDataError) as exc:
            build_update(values, UpdatePolicy.REPLACE)
        assert "description" in exc.value.messages

    def test_invalid_data_is_a_validation_error(self):
        with pytest.raises(ValidationError):
            build_update(dict(FULL_UPDATE, price=0.001), UpdatePolicy.PATCH)


class TestApplyUpdate:
    def _product(self):
        return Product.create(
            name="Widget",
            description="A simple widget for testing",
            price=19.99,
            quantity=3,
            category="Tools",
        )

    def test_apply_full_update(self):
        product = self._product()
        product.apply_update(build_update(FULL_UPDATE, UpdatePolicy.REPLACE))
        assert product.snapshot() == FULL_UPDATE

    def test_apply_patch_keeps_other_fields(self):
        product = self._product()
        product.apply_update(build_update({"quantity": 60}, UpdatePolicy.PATCH))
        assert product.quantity == 60
        assert product.name == "Widget"
        assert product.price == 19.99

    def test_apply_update_refreshes_updated_at(self):
        product = self._product()
        created_at = product.created_at
        product.apply_update(build_update({"quantity": 60}, UpdatePolicy.PATCH))
        assert product.created_at == created_at
        assert product.updated_at >= created_at
