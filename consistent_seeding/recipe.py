# consistent_seeding/recipe.py

"""
Recipes hold the flags, fixed values and switches that control what a
seeder or ``SeedingFactory`` creates.
"""

from typing import Any, Type, TypeVar

R = TypeVar("R", bound="Recipe")


class Recipe:
    """Base class for recipes. Subclasses are usually dataclasses with defaults."""

    @classmethod
    def create(cls: Type[R], **overrides: Any) -> R:
        """Return a new instance of the subclass this is called on."""
        if cls is Recipe:
            raise TypeError("Recipe is abstract; call create() on a subclass")
        return cls(**overrides)


def create_recipe(recipe_type: Type[R], **overrides: Any) -> R:
    """Build a recipe of ``recipe_type`` with any field overrides applied."""
    if not (isinstance(recipe_type, type) and issubclass(recipe_type, Recipe)):
        raise TypeError(f"{recipe_type!r} is not a Recipe subclass")
    return recipe_type.create(**overrides)
