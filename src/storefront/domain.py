"""Storefront bounded context: products, orders and checkout.

Products and orders live in one domain so the checkout workflow can read and
update stock synchronously while placing an order.
"""

from protean.domain import Domain

from storefront.utils.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__)

storefront = Domain(name="storefront")
