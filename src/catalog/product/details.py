"""Product details management: command and handler.

Whether an update replaces every field or patches only the supplied ones is
decided by ``CATALOG_UPDATE_POLICY`` (see ``catalog.config``).
"""

import structlog
from protean import handle
from protean.fields import Float, Identifier, Integer, String
from protean.utils.globals import current_domain

from catalog.config import get_update_policy
from catalog.domain import catalog
from catalog.product.exceptions import duplicate_name, product_not_found
from catalog.product.product import MUTABLE_FIELDS, Product
from catalog.product.updates import build_update

logger = structlog.get_logger(__name__)


@catalog.command(part_of="Product")
class UpdateProduct:
    product_id: Identifier(required=True)
    name: String(max_length=255)
    description: String(max_length=500)
    price: Float()
    quantity: Integer()
    category: String(max_length=100)


@catalog.command_handler(part_of=Product)
class UpdateProductHandler:
    @handle(UpdateProduct)
    def update_product(self, command):
        policy = get_update_policy()
        logger.info("Updating product", product_id=str(command.product_id), policy=policy.value)

        repo = current_domain.repository_for(Product)
        product = repo.find_by_id(command.product_id)
        if product is None:
            raise product_not_found(command.product_id)

        update = build_update({field_name: getattr(command, field_name) for field_name in MUTABLE_FIELDS}, policy)

        new_name = update.name
        if new_name is not None and new_name != product.name:
            clash = repo.find_by_exact_name(new_name)
            if clash is not None and clash.id != product.id:
                raise duplicate_name(new_name)

        before = product.snapshot()
        product.apply_update(update)
        repo.add(product)

        logger.info(
            "Product updated",
            product_id=str(product.id),
            policy=policy.value,
            before=before,
            after=product.snapshot(),
        )
        return str(product.id)
