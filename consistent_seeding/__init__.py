# consistent_seeding/__init__.py

"""
Deterministic test-data seeding for SQLAlchemy models with Faker.

Seeders reseed a shared Faker generator from a hash of their own name before
running, ``SeedingFactory`` finds or builds records by column values, and
``Recipe`` subclasses carry the switches that control what gets seeded.
"""

from .context import SeedingContext
from .exceptions import RecordNotFoundError, SeederLoadError, SeedingError
from .factory import SeedingFactory
from .generator import get_generator, new_generator, reseed, seed_for_name
from .recipe import Recipe, create_recipe
from .seeders import (
    ConsistentDataSeeder,
    ConsistentScenarioDataSeeder,
    DataSeeder,
    Scenario,
    ScenarioDataSeeder,
)

__version__ = "1.0.0"

__all__ = [
    # Generator
    "get_generator",
    "new_generator",
    "reseed",
    "seed_for_name",
    # Factory
    "SeedingFactory",
    "SeedingContext",
    # Seeders
    "DataSeeder",
    "Scenario",
    "ScenarioDataSeeder",
    "ConsistentDataSeeder",
    "ConsistentScenarioDataSeeder",
    # Recipes
    "Recipe",
    "create_recipe",
    # Errors
    "SeedingError",
    "RecordNotFoundError",
    "SeederLoadError",
]
