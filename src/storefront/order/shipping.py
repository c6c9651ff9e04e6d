"""Shipment toggle: command and handler."""

from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.errors import ResourceNotFound
from storefront.order.order import Order
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.command(part_of="Order")
class ToggleShipment:
    order_id = Identifier(required=True)


@storefront.command_handler(part_of=Order)
class ToggleShipmentHandler:
    @handle(ToggleShipment)
    def toggle_shipment(self, command):
        repo = current_domain.repository_for(Order)
        try:
            order = repo.get(command.order_id)
        except ObjectNotFoundError:
            raise ResourceNotFound("Order not found.") from None

        is_shipped = order.toggle_shipped()
        repo.add(order)
        logger.info("shipment_toggled", order_id=str(order.id), is_shipped=is_shipped)
        return is_shipped
