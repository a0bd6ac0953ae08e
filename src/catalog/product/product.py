"""Product aggregate root and the field rules shared with product updates."""

import re
from datetime import datetime
from decimal import Decimal, InvalidOperation

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, Integer, String

from catalog.domain import catalog

NAME_PATTERN = re.compile(r"^[a-zA-Z0-9\s\-_.]+$")
CATEGORY_PATTERN = re.compile(r"^[a-zA-Z\s\-]+$")

DESCRIPTION_MIN_LENGTH = 10
DESCRIPTION_MAX_LENGTH = 500
MIN_PRICE = 0.01
MAX_PRICE = 999_999.99
MAX_QUANTITY = 999_999

MUTABLE_FIELDS = ("name", "description", "price", "quantity", "category")


# --- Field rules ---------------------------------------------------------
# Each returns a list of error messages; empty means the value is acceptable.
# None is treated as "not supplied" and left to required-field checks.


def name_errors(name):
    if name is None:
        return []
    if not name.strip():
        return ["Product name is required"]
    if not NAME_PATTERN.match(name):
        return ["Product name can only contain letters, numbers, spaces, hyphens, underscores, and dots"]
    return []


def description_errors(description):
    if description is None:
        return []
    if not DESCRIPTION_MIN_LENGTH <= len(description) <= DESCRIPTION_MAX_LENGTH:
        return [
            f"Product description must be between {DESCRIPTION_MIN_LENGTH} "
            f"and {DESCRIPTION_MAX_LENGTH} characters"
        ]
    return []


def price_errors(price):
    if price is None:
        return []
    try:
        exponent = Decimal(str(price)).as_tuple().exponent
    except InvalidOperation:
        return ["Price must be a number"]
    if exponent < -2:
        return ["Price must have maximum 6 digits before decimal and 2 after"]
    return []


def category_errors(category):
    if category is None:
        return []
    if not CATEGORY_PATTERN.match(category):
        return ["Category can only contain letters, spaces, and hyphens"]
    return []


def _raise_if(field_name, messages):
    if messages:
        raise ValidationError({field_name: messages})


@catalog.aggregate
class Product:
    """A catalog item with its on-hand quantity.

    Names are unique across the catalog. The command handlers check this
    before writing; ``unique=True`` makes the store reject a duplicate that
    slips past the check under concurrent writers.
    """

    name: String(required=True, max_length=255, unique=True)
    description: String(required=True, max_length=DESCRIPTION_MAX_LENGTH)
    price: Float(required=True, min_value=MIN_PRICE, max_value=MAX_PRICE)
    quantity: Integer(required=True, min_value=0, max_value=MAX_QUANTITY)
    category: String(required=True, max_length=100)
    created_at: DateTime(default=datetime.now)
    updated_at: DateTime(default=datetime.now)

    @invariant.post
    def name_must_be_well_formed(self):
        _raise_if("name", name_errors(self.name))

    @invariant.post
    def description_length_must_be_in_range(self):
        _raise_if("description", description_errors(self.description))

    @invariant.post
    def price_must_have_at_most_two_decimals(self):
        _raise_if("price", price_errors(self.price))

    @invariant.post
    def category_must_be_well_formed(self):
        _raise_if("category", category_errors(self.category))

    @classmethod
    def create(cls, name, description, price, quantity, category):
        from catalog.product.events import ProductAdded

        now = datetime.now()
        product = cls(
            name=name,
            description=description,
            price=price,
            quantity=quantity,
            category=category,
            created_at=now,
            updated_at=now,
        )
        product.raise_(
            ProductAdded(
                product_id=product.id,
                name=product.name,
                price=product.price,
                quantity=product.quantity,
                category=product.category,
                added_at=now,
            )
        )
        return product

    def snapshot(self):
        """Current values of the mutable fields, keyed by field name."""
        return {field_name: getattr(self, field_name) for field_name in MUTABLE_FIELDS}

    def apply_update(self, update):
        """Apply every field carried by a ``ProductUpdate``.

        Invariants are checked once, after all fields are assigned.
        """
        from catalog.product.events import ProductUpdated

        with atomic_change(self):
            for field_name, value in update.changes().items():
                setattr(self, field_name, value)

        self.updated_at = datetime.now()

        self.raise_(
            ProductUpdated(
                product_id=self.id,
                name=self.name,
                description=self.description,
                price=self.price,
                quantity=self.quantity,
                category=self.category,
                updated_at=self.updated_at,
            )
        )

    def change_price(self, new_price):
        """Set a new price and return the previous one."""
        from catalog.product.events import ProductPriceChanged

        previous_price = self.price
        self.price = new_price
        self.updated_at = datetime.now()

        self.raise_(
            ProductPriceChanged(
                product_id=self.id,
                previous_price=previous_price,
                new_price=self.price,
                changed_at=self.updated_at,
            )
        )
        return previous_price
