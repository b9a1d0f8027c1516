# tests/unit/test_recipe.py

from dataclasses import dataclass

import pytest

from consistent_seeding import Recipe, create_recipe

from ..seeders import AdminRecipe, UserRecipe


class PlainRecipe(Recipe):
    def __init__(self):
        self.enabled = True


class TestRecipeCreate:
    """Tests for Recipe.create"""

    def test_returns_concrete_subclass(self):
        recipe = AdminRecipe.create()
        assert type(recipe) is AdminRecipe
        assert recipe.is_admin is True
        assert recipe.role_name == "admin"

    def test_parent_and_child_are_distinct(self):
        assert type(UserRecipe.create()) is UserRecipe
        assert not isinstance(UserRecipe.create(), AdminRecipe)

    def test_new_instance_each_call(self):
        assert UserRecipe.create() is not UserRecipe.create()

    def test_overrides(self):
        recipe = UserRecipe.create(count=10, email_domain="test.local")
        assert recipe.count == 10
        assert recipe.email_domain == "test.local"
        assert recipe.is_admin is False

    def test_non_dataclass_subclass(self):
        recipe = PlainRecipe.create()
        assert isinstance(recipe, PlainRecipe)
        assert recipe.enabled

    def test_base_class_rejected(self):
        with pytest.raises(TypeError):
            Recipe.create()

    def test_unknown_override_rejected(self):
        with pytest.raises(TypeError):
            UserRecipe.create(colour="blue")


class TestCreateRecipe:
    """Tests for the create_recipe factory function"""

    def test_builds_given_type(self):
        recipe = create_recipe(AdminRecipe, count=4)
        assert isinstance(recipe, AdminRecipe)
        assert recipe.count == 4

    def test_rejects_non_recipe(self):
        @dataclass
        class NotARecipe:
            count: int = 1

        with pytest.raises(TypeError):
            create_recipe(NotARecipe)
