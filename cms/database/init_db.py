"""
Database initialization and seeding.

This script:
- Creates the pages and modules tables
- Optionally drops them first
- Optionally adds sample pages and modules for development

Usage:
    # Create tables
    python -m cms.database.init_db

    # Reset database (drops all tables and recreates)
    python -m cms.database.init_db --reset

    # Add sample data for testing
    python -m cms.database.init_db --sample-data
"""

import argparse

from sqlalchemy import func, select
from sqlalchemy.engine import Engine

from cms.config import get_settings
from cms.core.logging import configure_logging
from cms.database.pool import (
    connection_scope,
    create_all_tables,
    dispose_pool,
    drop_all_tables,
    establish_database_connection,
)
from cms.models import ModuleEntity, PageEntity
from cms.repositories import ModuleModel, PageModel
from cms.schemas import MutModule, MutPage

SAMPLE_PAGES = [
    MutPage(page_name="home", page_url="/", page_title="Home"),
    MutPage(page_name="about", page_url="/about", page_title="About Us"),
    MutPage(page_name="contact", page_url="/contact", page_title="Contact"),
]

SAMPLE_MODULES = [
    MutModule(page_name="home", title="hero", content="Welcome!"),
    MutModule(page_name="home", title="footer", content="(c) CMS"),
    MutModule(page_name="about", title="body", content="Who we are."),
]


def create_tables(pool: Engine, reset: bool = False) -> None:
    """
    Create all database tables.

    Args:
        pool: Connection pool
        reset: If True, drop existing tables first
    """
    if reset:
        print("🗑️  Dropping existing tables...")
        drop_all_tables(pool)
        print("✅ Tables dropped")

    print("📊 Creating database tables...")
    create_all_tables(pool)
    print("✅ Tables created")


def seed_sample_data(pool: Engine) -> None:
    """Insert the sample pages and their modules; existing pages are kept."""
    print("\n🌱 Seeding sample data...")
    page_model = PageModel()
    module_model = ModuleModel()

    with connection_scope(pool) as db:
        for page in SAMPLE_PAGES:
            if page_model.create(page, db):
                print(f"  ✅ Created page: {page.page_name}")
            else:
                print(f"  ⏭️  Page '{page.page_name}' already exists (skipping)")

        for module in SAMPLE_MODULES:
            existing = {m.title for m in module_model.read_all_for_page(module.page_name, db)}
            if module.title in existing:
                print(f"  ⏭️  Module '{module.title}' on '{module.page_name}' already exists")
                continue
            module_model.create(module, db)
            print(f"  ✅ Created module: {module.page_name}/{module.title}")

    print("✅ Sample data seeded")


def print_database_status(pool: Engine) -> None:
    """Print current database status and counts."""
    print("\n" + "=" * 60)
    print("📊 Database Status")
    print("=" * 60)

    with connection_scope(pool) as db:
        pages_count = db.execute(select(func.count()).select_from(PageEntity.__table__)).scalar_one()
        modules_count = db.execute(select(func.count()).select_from(ModuleEntity.__table__)).scalar_one()

        print(f"  Pages:   {pages_count}")
        print(f"  Modules: {modules_count}")

        if pages_count > 0:
            print("\n  Current Pages:")
            for page in PageModel().read_all(db):
                print(f"    • {page.page_name} -> {page.page_url} ({page.page_title})")

    print("=" * 60)


def initialize_database(pool: Engine, reset: bool = False, sample_data: bool = False) -> None:
    """
    Initialize the database.

    Args:
        pool: Connection pool
        reset: Drop existing tables before creating
        sample_data: Add sample data for testing
    """
    print("=" * 60)
    print("🗄️  Database Initialization")
    print("=" * 60)

    create_tables(pool, reset=reset)

    if sample_data:
        seed_sample_data(pool)

    print_database_status(pool)

    print("\n✅ Database initialization complete!")


def main(argv=None):
    """Main entry point with CLI argument parsing."""
    parser = argparse.ArgumentParser(
        description="Initialize and seed the CMS database",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Create tables
  python -m cms.database.init_db

  # Reset database (drop all tables and recreate)
  python -m cms.database.init_db --reset

  # Full reset with sample data
  python -m cms.database.init_db --reset --sample-data
        """
    )

    parser.add_argument(
        "--reset",
        action="store_true",
        help="Drop existing tables before creating (WARNING: deletes all data!)"
    )

    parser.add_argument(
        "--sample-data",
        action="store_true",
        help="Add sample pages and modules"
    )

    parser.add_argument(
        "--yes",
        action="store_true",
        help="Do not ask for confirmation before --reset"
    )

    args = parser.parse_args(argv)

    if args.reset and not args.yes:
        print("⚠️  WARNING: This will DELETE ALL DATA in the database!")
        response = input("Are you sure? Type 'yes' to continue: ")
        if response.lower() != 'yes':
            print("❌ Aborted")
            return

    settings = get_settings()
    configure_logging(settings.log_level)

    pool = establish_database_connection(settings)
    try:
        initialize_database(pool, reset=args.reset, sample_data=args.sample_data)
    finally:
        dispose_pool(pool)


if __name__ == "__main__":
    main()
