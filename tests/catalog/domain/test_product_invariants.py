"""Tests for Product field rules enforced as invariants."""

import pytest
from catalog.product.product import Product
from protean.exceptions import ValidationError


def _make_product(**overrides):
    defaults = {
        "name": "Widget",
        "description": "A simple widget for testing",
        "price": 19.99,
        "quantity": 3,
        "category": "Tools",
    }
    defaults.update(overrides)
    return Product.create(**defaults)


class TestNameRules:
    @pytest.mark.parametrize("name", ["Widget", "Widget 2000", "widget-pro_v1.5"])
    def test_allowed_names(self, name):
        assert _make_product(name=name).name == name

    @pytest.mark.parametrize("name", ["Widget!", "Wid/get", "Café"])
    def test_disallowed_characters(self, name):
        with pytest.raises(ValidationError) as exc:
            _make_product(name=name)
        assert "name" in exc.value.messages

    def test_whitespace_only_name_rejected(self):
        with pytest.raises(ValidationError) as exc:
            _make_product(name="   ")
        assert "name" in exc.value.messages


class TestDescriptionRules:
    def test_too_short(self):
        with pytest.raises(ValidationError) as exc:
            _make_product(description="Too short")
        assert "between 10 and 500" in str(exc.value)

    def test_exactly_ten_characters(self):
        assert _make_product(description="0123456789").description == "0123456789"

    def test_too_long(self):
        with pytest.raises(ValidationError):
            _make_product(description="x" * 501)


class TestPriceRules:
    def test_minimum_price(self):
        assert _make_product(price=0.01).price == 0.01

    def test_maximum_price(self):
        assert _make_product(price=999_999.99).price == 999_999.99

    def test_below_minimum(self):
        with pytest.raises(ValidationError):
            _make_product(price=0.0)

    def test_above_maximum(self):
        with pytest.raises(ValidationError):
            _make_product(price=1_000_000.0)

    def test_three_decimals(self):
        with pytest.raises(ValidationError) as exc:
            _make_product(price=1.005)
        assert "price" in exc.value.messages


class TestQuantityRules:
    def test_negative_quantity(self):
        with pytest.raises(ValidationError):
            _make_product(quantity=-1)

    def test_maximum_quantity(self):
        assert _make_product(quantity=999_999).quantity == 999_999

    def test_above_maximum(self):
        with pytest.raises(ValidationError):
            _make_product(quantity=1_000_000)


class TestCategoryRules:
    @pytest.mark.parametrize("category", ["Tools", "Home Garden", "Arts-Crafts"])
    def test_allowed_categories(self, category):
        assert _make_product(category=category).category == category

    @pytest.mark.parametrize("category", ["Tools2", "Home_Garden", "Toys&Games"])
    def test_disallowed_categories(self, category):
        with pytest.raises(ValidationError) as exc:
            _make_product(category=category)
        assert "category" in exc.value.messages
