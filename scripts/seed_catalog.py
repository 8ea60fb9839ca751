#!/usr/bin/env python3
"""Seed product catalog script.

Creates the catalog tables and inserts the sample categories and
products, or generates product codes for ad-hoc names.

Usage:
    python scripts/seed_catalog.py
    python scripts/seed_catalog.py --skip-tables
    python scripts/seed_catalog.py --code "iPhone 15 Pro" --code "Clean Code"
"""

import argparse
import asyncio

from catalog_api.catalog.codegen import generate_product_code
from catalog_api.catalog.service import CatalogService, PopulateResult
from catalog_api.domain.exceptions import CatalogError
from catalog_api.infrastructure.database import async_session_factory, create_tables, engine


async def seed(skip_tables: bool = False) -> PopulateResult:
    """Insert sample data into the configured database.

    Args:
        skip_tables: Don't create missing tables first.

    Returns:
        Populate result.
    """
    if not skip_tables:
        await create_tables()

    async with async_session_factory() as session:
        service = CatalogService(session)
        result = await service.populate_sample_data()
        await session.commit()
    return result


async def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Seed the product catalog with sample data",
    )
    parser.add_argument(
        "--skip-tables",
        action="store_true",
        help="Don't create database tables before seeding",
    )
    parser.add_argument(
        "--code",
        action="append",
        metavar="NAME",
        help="Print the product code for NAME instead of seeding (repeatable)",
    )

    args = parser.parse_args()

    if args.code:
        for name in args.code:
            print(f"{name!r}: {generate_product_code(name)}")
        return

    print("=" * 60)
    print("Catalog Seeder")
    print("=" * 60)

    try:
        result = await seed(skip_tables=args.skip_tables)
    except CatalogError as e:
        print(f"  ✗ Error: {e.message} {e.details}")
        raise SystemExit(1) from e
    finally:
        await engine.dispose()

    print(f"  ✓ Categories: {result.categories_added}")
    print(f"  ✓ Products: {result.products_added}")
    print("=" * 60)
    print("Seeding complete!")
    print("=" * 60)


if __name__ == "__main__":
    asyncio.run(main())
