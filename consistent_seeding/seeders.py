# consistent_seeding/seeders.py

"""
Seeder base classes.

``DataSeeder`` and ``ScenarioDataSeeder`` are the plain integration points a
runner calls. The ``Consistent*`` variants reseed the context's Faker instance
from a CRC32 of their identifying name before the body runs, so the generated
values are the same on every run and do not depend on what was seeded earlier.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Awaitable, Callable, List

from .context import SeedingContext
from .generator import reseed

logger = logging.getLogger(__name__)


class DataSeeder(ABC):
    """A unit of seeding logic. Override ``populate`` with the field population."""

    def get_name(self) -> str:
        return self.__class__.__name__

    async def seed(self, context: SeedingContext) -> None:
        logger.info(f"Seeding {self.get_name()}", extra={"seeder": self.get_name()})
        await self.populate(context)

    @abstractmethod
    async def populate(self, context: SeedingContext) -> None:
        """Create the seeder's records using ``context.session`` and ``context.faker``."""


@dataclass
class Scenario:
    """A named block of seeding logic within a ``ScenarioDataSeeder``."""

    name: str
    body: Callable[[SeedingContext], Awaitable[None]]

    async def run(self, context: SeedingContext) -> None:
        await self.body(context)


class ScenarioDataSeeder(DataSeeder):
    """Seeder made of scenarios, each run after a ``before_scenario`` hook."""

    @abstractmethod
    def get_scenarios(self) -> List[Scenario]:
        """Return the scenarios in the order they should run."""

    async def before_scenario(self, scenario: Scenario, context: SeedingContext) -> None:
        context.output.info(
            f"Scenario: {scenario.name}", extra={"seeder": self.get_name()}
        )

    async def populate(self, context: SeedingContext) -> None:
        for scenario in self.get_scenarios():
            await self.before_scenario(scenario, context)
            await scenario.run(context)


class ConsistentDataSeeder(DataSeeder):
    """Reseeds the generator from the seeder's class name before seeding."""

    async def seed(self, context: SeedingContext) -> None:
        # Same seed whether this seeder runs with others or on its own.
        reseed(context.faker, self.get_name())
        await super().seed(context)


class ConsistentScenarioDataSeeder(ScenarioDataSeeder):
    """Reseeds the generator from each scenario's name before it runs."""

    async def before_scenario(self, scenario: Scenario, context: SeedingContext) -> None:
        reseed(context.faker, scenario.name)
        await super().before_scenario(scenario, context)
