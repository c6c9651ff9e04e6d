"""Product management: admin commands and handler."""

from protean import handle
from protean.fields import Boolean, Float, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.product.product import Product
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.command(part_of="Product")
class CreateProduct:
    image = String(max_length=500)
    title = String(required=True, max_length=255)
    description = Text()
    price = Float(required=True, min_value=0.0)
    stock = Integer(default=0, min_value=0)
    is_archived = Boolean(default=False)


@storefront.command(part_of="Product")
class UpdateProduct:
    """Partial update. Fields left as None keep their current value."""

    product_id = Identifier(required=True)
    image = String(max_length=500)
    title = String(max_length=255)
    description = Text()
    price = Float(min_value=0.0)
    stock = Integer(min_value=0)
    is_archived = Boolean()


@storefront.command(part_of="Product")
class DeleteProduct:
    product_id = Identifier(required=True)


@storefront.command_handler(part_of=Product)
class ManageProductHandler:
    @handle(CreateProduct)
    def create_product(self, command):
        product = Product.create(
            title=command.title,
            price=command.price,
            stock=command.stock or 0,
            image=command.image,
            description=command.description,
            is_archived=bool(command.is_archived),
        )
        current_domain.repository_for(Product).add(product)
        logger.info("product_created", product_id=str(product.id), title=product.title)
        return str(product.id)

    @handle(UpdateProduct)
    def update_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        product.update(
            image=command.image,
            title=command.title,
            description=command.description,
            price=command.price,
            stock=command.stock,
            is_archived=command.is_archived,
        )
        repo.add(product)
        logger.info("product_updated", product_id=str(product.id), is_archived=product.is_archived)

    @handle(DeleteProduct)
    def delete_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        product.remove()
        # Persist first so the unit of work publishes ProductRemoved
        repo.add(product)
        repo._dao.delete(product)
        logger.info("product_deleted", product_id=str(command.product_id))
