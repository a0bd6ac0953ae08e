"""Domain events for the Product aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String

from catalog.domain import catalog


@catalog.event(part_of="Product")
class ProductAdded:
    """A new product was added to the catalog."""

    __version__ = 1

    product_id: Identifier(required=True)
    name: String(required=True)
    price: Float(required=True)
    quantity: Integer(required=True)
    category: String(required=True)
    added_at: DateTime(required=True)


@catalog.event(part_of="Product")
class ProductUpdated:
    """A product's details were replaced or patched."""

    __version__ = 1

    product_id: Identifier(required=True)
    name: String(required=True)
    description: String()
    price: Float(required=True)
    quantity: Integer(required=True)
    category: String(required=True)
    updated_at: DateTime(required=True)


@catalog.event(part_of="Product")
class ProductPriceChanged:
    """A product's price was changed."""

    __version__ = 1

    product_id: Identifier(required=True)
    previous_price: Float(required=True)
    new_price: Float(required=True)
    changed_at: DateTime(required=True)
