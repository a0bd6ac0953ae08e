"""Product creation: command and handler."""

import structlog
from protean import handle
from protean.fields import Float, Integer, String
from protean.utils.globals import current_domain

from catalog.domain import catalog
from catalog.product.exceptions import duplicate_name
from catalog.product.product import Product

logger = structlog.get_logger(__name__)


@catalog.command(part_of="Product")
class AddProduct:
    """Add a new product to the catalog under a name nobody else uses."""

    name: String(required=True, max_length=255)
    description: String(required=True, max_length=500)
    price: Float(required=True)
    quantity: Integer(required=True)
    category: String(required=True, max_length=100)


@catalog.command_handler(part_of=Product)
class AddProductHandler:
    @handle(AddProduct)
    def add_product(self, command):
        logger.info("Adding new product", name=command.name)

        repo = current_domain.repository_for(Product)

        # Advisory: two writers racing on the same name both pass this check;
        # the unique constraint on Product.name is what stops the second one.
        if repo.find_by_exact_name(command.name) is not None:
            logger.warning("Rejected duplicate product name", name=command.name)
            raise duplicate_name(command.name)

        product = Product.create(
            name=command.name,
            description=command.description,
            price=command.price,
            quantity=command.quantity,
            category=command.category,
        )
        repo.add(product)

        logger.info(
            "Product added",
            product_id=str(product.id),
            name=product.name,
            price=product.price,
            quantity=product.quantity,
            category=product.category,
        )
        return str(product.id)
