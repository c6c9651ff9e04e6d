"""Storefront database management CLI.

Usage:
    python src/manage.py setup-db        # Create tables for SQL providers
    python src/manage.py drop-db         # Drop them again
    python src/manage.py seed-products   # Add demo products when the catalog is empty
"""

import argparse
import sys

DEMO_PRODUCTS = [
    {
        "title": "Linen Tote Bag",
        "description": "Undyed linen tote with reinforced handles.",
        "price": 19.0,
        "stock": 40,
        "image": "https://images.unsplash.com/photo-1544816155-12df9643f363?w=800",
    },
    {
        "title": "Ceramic Pour-Over",
        "description": "Hand-glazed pour-over dripper, fits standard #2 filters.",
        "price": 34.5,
        "stock": 15,
        "image": "https://images.unsplash.com/photo-1495474472287-4d71bcdd2085?w=800",
    },
    {
        "title": "Walnut Desk Organizer",
        "description": "Solid walnut tray with three compartments.",
        "price": 58.0,
        "stock": 8,
        "image": "https://images.unsplash.com/photo-1519710164239-da123dc03ef4?w=800",
    },
]


def _domain():
    from storefront.domain import storefront

    storefront.init()
    return storefront


def setup_database():
    from storefront.utils.db import setup_db

    print("Creating storefront database schema...")
    setup_db(_domain())
    print("Done.")


def drop_database():
    from storefront.utils.db import drop_db

    print("Dropping storefront database schema...")
    drop_db(_domain())
    print("Done.")


def seed_products():
    from protean.utils.globals import current_domain

    from storefront.product.management import CreateProduct
    from storefront.product.product import Product

    domain = _domain()
    with domain.domain_context():
        if current_domain.repository_for(Product)._dao.query.limit(None).all().items:
            print("Catalog already has products, nothing to seed.")
            return
        for data in DEMO_PRODUCTS:
            product_id = current_domain.process(CreateProduct(**data), asynchronous=False)
            print(f"  added {data['title']} ({product_id})")
    print("Done.")


def main():
    parser = argparse.ArgumentParser(description="Storefront database management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")
    subparsers.add_parser("seed-products", help="Add demo products to an empty catalog")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    elif args.command == "seed-products":
        seed_products()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
