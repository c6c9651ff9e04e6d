import pytest
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def storefront_bed():
    from storefront.domain import storefront

    bed = DomainFixture(storefront)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(storefront_bed):
    with storefront_bed.domain_context():
        yield

        from protean import current_domain

        for _, provider in current_domain.providers.items():
            provider._data_reset()


@pytest.fixture()
def make_product():
    """Create a product through its command and return the persisted aggregate."""
    from protean import current_domain
    from storefront.product.management import CreateProduct
    from storefront.product.product import Product

    def _make(**overrides):
        defaults = {"title": "Desk Lamp", "price": 10.0, "stock": 5}
        defaults.update(overrides)
        product_id = current_domain.process(CreateProduct(**defaults), asynchronous=False)
        return current_domain.repository_for(Product).get(product_id)

    return _make


@pytest.fixture()
def address():
    return {
        "firstName": "Ada",
        "lastName": "Lovelace",
        "email": "ada@example.com",
        "street": "12 Analytical Way",
        "city": "London",
        "zipCode": 12345,
        "phoneNumber": 701234567,
    }
