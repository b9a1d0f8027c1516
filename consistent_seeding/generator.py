# consistent_seeding/generator.py

"""
Shared Faker generator and name-based seeding.

A seeder reseeds the generator from a CRC32 of its own name before it runs, so
the values it observes are the same whether it runs alone or after others.
"""

import logging
import zlib
from typing import Optional

from faker import Faker

from .config import settings

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = settings.FAKER_LOCALE

_global_faker: Optional[Faker] = None


def seed_for_name(name: str) -> int:
    """Return the unsigned 32-bit CRC32 of ``name``.

    Collisions between different names are possible and accepted.
    """
    return zlib.crc32(name.encode("utf-8")) & 0xFFFFFFFF


def new_generator(locale: Optional[str] = None) -> Faker:
    """Create a fresh, unseeded Faker instance."""
    return Faker(locale or DEFAULT_LOCALE)


def get_generator() -> Faker:
    """
    Return the process-wide Faker instance.

    Created on first access with the configured locale; later calls return the
    same object. Seeders reseed it rather than replacing it.
    """
    global _global_faker
    if _global_faker is None:
        _global_faker = new_generator()
        logger.debug(f"Created shared Faker generator (locale={DEFAULT_LOCALE})")
    return _global_faker


def reset_generator() -> None:
    """Forget the shared generator so the next ``get_generator`` builds a new one."""
    global _global_faker
    _global_faker = None


def reseed(generator: Faker, name: str) -> int:
    """Seed ``generator`` from ``name`` and return the seed used."""
    seed = seed_for_name(name)
    generator.seed_instance(seed)
    # Values handed out by generator.unique would otherwise be excluded on replay
    generator.unique.clear()
    logger.debug(f"Reseeded generator for '{name}' with {seed}")
    return seed
