# consistent_seeding/context.py

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Dict

from faker import Faker
from sqlalchemy.ext.asyncio import AsyncSession

from .generator import get_generator


@dataclass
class SeedingContext:
    """Everything a seeder run needs, passed explicitly to each seeder.

    ``output`` is the reporting channel handed through to seeder bodies as-is.
    """

    session: AsyncSession
    faker: Faker = field(default_factory=get_generator)
    output: logging.Logger = field(
        default_factory=lambda: logging.getLogger("consistent_seeding.output")
    )
    created: Dict[str, int] = field(default_factory=lambda: defaultdict(int))

    def record_created(self, table_name: str, count: int = 1) -> None:
        self.created[table_name] += count
