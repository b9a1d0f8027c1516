# consistent_seeding/runner.py

"""
Seeder runner and ``consistent-seed`` command line entry point.

Seeders run one after another, each inside its own transaction, so a
failing seeder leaves the data from earlier seeders committed.
"""

import argparse
import asyncio
import importlib
import logging
import sys
from collections import defaultdict
from typing import Dict, List, Optional, Sequence, Type

from faker import Faker
from sqlalchemy import MetaData

from .config import settings
from .context import SeedingContext
from .database import DatabaseManager
from .exceptions import SeederLoadError
from .generator import get_generator, new_generator
from .logging_config import configure_logging
from .seeders import DataSeeder

logger = logging.getLogger(__name__)


class SeederRunner:
    """Runs seeders serially against a ``DatabaseManager``."""

    def __init__(
        self,
        db: DatabaseManager,
        faker: Optional[Faker] = None,
        output: Optional[logging.Logger] = None,
    ) -> None:
        self.db = db
        self.faker = faker if faker is not None else get_generator()
        self.output = output or logging.getLogger("consistent_seeding.output")
        self.seeded_data: Dict[str, int] = defaultdict(int)

    async def run_seeder(self, seeder: DataSeeder) -> Dict[str, int]:
        """Run one seeder in its own transaction and return its created counts."""
        name = seeder.get_name()
        try:
            async with self.db.get_db_transaction() as session:
                context = SeedingContext(
                    session=session, faker=self.faker, output=self.output
                )
                await seeder.seed(context)
        except Exception as e:
            logger.error(
                f"Seeder {name} failed: {e}", exc_info=True, extra={"seeder": name}
            )
            raise

        for table, count in context.created.items():
            self.seeded_data[table] += count
        logger.info(f"Seeder {name} completed", extra={"seeder": name})
        return dict(context.created)

    async def run(self, seeders: Sequence[DataSeeder]) -> Dict[str, int]:
        logger.info(f"Running {len(seeders)} seeder(s)...")
        for seeder in seeders:
            await self.run_seeder(seeder)
        self.print_summary()
        return dict(self.seeded_data)

    def print_summary(self) -> None:
        if not self.seeded_data:
            logger.info("No records created")
            return
        logger.info("Seeding summary:")
        for table, count in sorted(self.seeded_data.items()):
            logger.info(f"  - {table}: {count}")


def _import_attribute(path: str):
    module_name, sep, attr = path.partition(":")
    if not sep or not module_name or not attr:
        raise SeederLoadError(path, f"Expected 'package.module:Name', got '{path}'")
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise SeederLoadError(path, cause=e) from e
    target = module
    for part in attr.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as e:
            raise SeederLoadError(
                path, f"'{module_name}' has no attribute '{attr}'", cause=e
            ) from e
    return target


def load_seeder(path: str) -> Type[DataSeeder]:
    """Resolve ``package.module:ClassName`` to a ``DataSeeder`` subclass."""
    target = _import_attribute(path)
    if not (isinstance(target, type) and issubclass(target, DataSeeder)):
        raise SeederLoadError(path, f"'{path}' is not a DataSeeder subclass")
    return target


def load_metadata(path: str) -> MetaData:
    """Resolve an import path to a ``MetaData`` or a declarative base carrying one."""
    target = _import_attribute(path)
    metadata = (
        target if isinstance(target, MetaData) else getattr(target, "metadata", None)
    )
    if not isinstance(metadata, MetaData):
        raise SeederLoadError(path, f"'{path}' is not a MetaData or declarative base")
    return metadata


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="consistent-seed",
        description="Run deterministic data seeders against a database.",
    )
    parser.add_argument(
        "seeders",
        nargs="+",
        help="Seeder classes as 'package.module:ClassName', run in the given order.",
    )
    parser.add_argument("--database-url", help="Database connection URL.")
    parser.add_argument("--locale", help="Faker locale (default: SEED_FAKER_LOCALE).")
    parser.add_argument(
        "--metadata",
        help="'package.module:Base' whose tables are created before seeding.",
    )
    parser.add_argument(
        "--echo", action="store_true", help="Log SQL statements issued by the engine."
    )
    parser.add_argument("--log-level", default=None, help="Log level for seeding output.")
    return parser


async def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level or settings.LOG_LEVEL)

    try:
        seeders = [load_seeder(path)() for path in args.seeders]
        metadata = load_metadata(args.metadata) if args.metadata else None
    except SeederLoadError as e:
        logger.error(str(e))
        return 1

    db = DatabaseManager()
    try:
        await db.initialize(database_url=args.database_url, echo=args.echo or None)
        if metadata is not None:
            await db.create_all_tables(metadata)
        faker = new_generator(args.locale) if args.locale else get_generator()
        await SeederRunner(db, faker=faker).run(seeders)
    except Exception as e:
        logger.critical(f"Seeding process failed: {e}", exc_info=True)
        return 1
    finally:
        await db.close()
    return 0


def cli() -> None:
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    cli()
