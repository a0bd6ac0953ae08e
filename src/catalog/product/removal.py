"""Product removal: command and handler."""

import structlog
from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from catalog.domain import catalog
from catalog.product.exceptions import product_not_found
from catalog.product.product import Product

logger = structlog.get_logger(__name__)


@catalog.command(part_of="Product")
class DeleteProduct:
    product_id: Identifier(required=True)


@catalog.command_handler(part_of=Product)
class DeleteProductHandler:
    @handle(DeleteProduct)
    def delete_product(self, command):
        logger.info("Deleting product", product_id=str(command.product_id))

        repo = current_domain.repository_for(Product)
        if not repo.exists_by_id(command.product_id):
            raise product_not_found(command.product_id)

        repo.delete_by_id(command.product_id)
        logger.info("Product deleted", product_id=str(command.product_id))
