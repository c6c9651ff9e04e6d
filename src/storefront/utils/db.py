"""Schema management for the PostgreSQL provider configured in domain.toml."""

from protean.domain import Domain
from sqlalchemy import create_engine


def _sql_providers(domain: Domain):
    for provider in domain.providers.values():
        if provider.conn_info["provider"] == "postgresql":
            yield provider, create_engine(provider.conn_info["database_uri"])


def setup_db(domain: Domain):
    """Create the product, order and order item tables. No-op for the memory provider."""
    with domain.domain_context():
        for provider, engine in _sql_providers(domain):
            records = [*domain.registry.aggregates.values(), *domain.registry.entities.values()]
            for record in records:
                # Table models are registered on the provider metadata when the DAO is first built
                if record.cls.meta_.provider == provider.name:
                    domain.repository_for(record.cls)._dao  # noqa: B018
            provider._metadata.create_all(engine)


def drop_db(domain: Domain):
    with domain.domain_context():
        for provider, engine in _sql_providers(domain):
            provider._metadata.drop_all(engine)
