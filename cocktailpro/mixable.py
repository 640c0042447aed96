"""The recipe book limited to what the machine can actually mix."""

from __future__ import annotations

from .ingredients import AvailableIngredients
from .recipe import Recipe
from .recipebook import DEFAULT_RECIPE_FILE, RecipeBook

_RULE = "*********************************************"


class MixableRecipeBook(RecipeBook):
    """A recipe book without the recipes whose ingredients are missing."""

    def __init__(
        self, ingredients: AvailableIngredients, path: str = DEFAULT_RECIPE_FILE
    ) -> None:
        super().__init__(path)
        print("********** Rezepte vor dem Filtern **********")
        self.browse()
        self.ingredients = ingredients
        self.remove_unavailable()

    def browse(self) -> None:
        """Print every recipe, flagging those that can no longer be mixed."""
        print(_RULE)
        print(f"Es gibt {len(self)} mischbare Cocktails")
        for recipe in self:
            flag = "" if recipe.mixable else " !NICHT MISCHBAR! "
            print(f"{recipe.number}. {flag}{recipe.describe()}")
        print(_RULE)

    def is_recipe_available(self, recipe: Recipe) -> bool:
        """True if every step's ingredient is available."""
        return all(step.ingredient in self.ingredients for step in recipe.steps)

    def remove_unavailable(self) -> None:
        """Drop every recipe that needs an ingredient the machine lacks."""
        self.recipes[:] = [r for r in self.recipes if self.is_recipe_available(r)]