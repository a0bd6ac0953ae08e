"""ProductUpdate value object, the carrier for changes to an existing product.

Only the fields it holds are applied, and each one is validated with the
same rules the Product aggregate enforces, so an update can never smuggle in
a value the entity itself would reject.
"""

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Float, Integer, String

from catalog.config import UpdatePolicy
from catalog.domain import catalog
from catalog.product.exceptions import InvalidDataError
from catalog.product.product import (
    DESCRIPTION_MAX_LENGTH,
    MAX_PRICE,
    MAX_QUANTITY,
    MIN_PRICE,
    MUTABLE_FIELDS,
    category_errors,
    description_errors,
    name_errors,
    price_errors,
)


@catalog.value_object
class ProductUpdate:
    """New values for some or all of a product's mutable fields."""

    name: String(max_length=255)
    description: String(max_length=DESCRIPTION_MAX_LENGTH)
    price: Float(min_value=MIN_PRICE, max_value=MAX_PRICE)
    quantity: Integer(min_value=0, max_value=MAX_QUANTITY)
    category: String(max_length=100)

    @invariant.post
    def supplied_fields_must_be_valid(self):
        errors = {}
        for field_name, messages in (
            ("name", name_errors(self.name)),
            ("description", description_errors(self.description)),
            ("price", price_errors(self.price)),
            ("category", category_errors(self.category)),
        ):
            if messages:
                errors[field_name] = messages
        if errors:
            raise ValidationError(errors)

    def changes(self):
        """Supplied fields only, keyed by field name."""
        values = {field_name: getattr(self, field_name) for field_name in MUTABLE_FIELDS}
        return {field_name: value for field_name, value in values.items() if value is not None}


def build_update(values, policy):
    """Turn raw field values into a validated ``ProductUpdate``.

    Under ``REPLACE`` every mutable field must be present. A blank name is
    always rejected. Any failure surfaces as ``InvalidDataError``.
    """
    name = values.get("name")
    if (name is None and policy is UpdatePolicy.REPLACE) or (name is not None and not name.strip()):
        raise InvalidDataError({"name": ["Invalid product data provided: name must not be blank"]})

    supplied = {field_name: values.get(field_name) for field_name in MUTABLE_FIELDS}
    supplied = {field_name: value for field_name, value in supplied.items() if value is not None}

    if policy is UpdatePolicy.REPLACE:
        missing = [field_name for field_name in MUTABLE_FIELDS if field_name not in supplied]
        if missing:
            raise InvalidDataError({field_name: ["is required when replacing a product"] for field_name in missing})
    elif not supplied:
        raise InvalidDataError({"_update": ["No fields supplied to update"]})

    try:
        return ProductUpdate(**supplied)
    except ValidationError as exc:
        raise InvalidDataError(exc.messages) from exc
