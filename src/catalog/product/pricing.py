"""Product pricing: command and handler."""

import structlog
from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Float, Identifier
from protean.utils.globals import current_domain

from catalog.domain import catalog
from catalog.product.exceptions import InvalidDataError, product_not_found
from catalog.product.product import Product

logger = structlog.get_logger(__name__)


@catalog.command(part_of="Product")
class ChangeProductPrice:
    """Change a product's price and nothing else."""

    product_id: Identifier(required=True)
    price: Float(required=True)


@catalog.command_handler(part_of=Product)
class ChangeProductPriceHandler:
    @handle(ChangeProductPrice)
    def change_price(self, command):
        logger.info("Changing product price", product_id=str(command.product_id), new_price=command.price)

        repo = current_domain.repository_for(Product)
        product = repo.find_by_id(command.product_id)
        if product is None:
            raise product_not_found(command.product_id)

        try:
            previous_price = product.change_price(command.price)
        except ValidationError as exc:
            raise InvalidDataError(exc.messages) from exc
        repo.add(product)

        logger.info(
            "Product price changed",
            product_id=str(product.id),
            name=product.name,
            previous_price=previous_price,
            new_price=product.price,
        )
        return str(product.id)
