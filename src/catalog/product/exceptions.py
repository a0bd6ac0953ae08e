"""Typed failures raised by product operations.

They extend Protean's own exceptions, so anything that already understands
``ValidationError`` / ``ObjectNotFoundError`` (HTTP error mapping, callers
catching the generic type) keeps working. Messages are always a
``{"field": [message, ...]}`` dict.
"""

from protean.exceptions import ObjectNotFoundError, ValidationError


class DuplicateNameError(ValidationError):
    """Another product already uses the requested name."""


class NotFoundError(ObjectNotFoundError):
    """The operation targets a product id that does not exist."""


class InvalidDataError(ValidationError):
    """The supplied product data is unusable (blank name, invalid field values)."""


def duplicate_name(name: str) -> DuplicateNameError:
    return DuplicateNameError({"name": [f"Product with name '{name}' already exists"]})


def product_not_found(product_id) -> NotFoundError:
    return NotFoundError({"_entity": [f"Product not found with ID: {product_id}"]})
