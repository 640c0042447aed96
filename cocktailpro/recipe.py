"""Recipes and their steps."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field


@dataclass
class RecipeStep:
    """One step: an ingredient or action with its amount."""

    ingredient: str = ""
    amount: float = 0.0


@dataclass
class Recipe:
    """A numbered cocktail recipe made of ordered steps."""

    name: str = ""
    number: int = 0
    steps: list[RecipeStep] = field(default_factory=list)
    mixable: bool = True

    def append_step(self, ingredient: str, amount: float) -> None:
        self.steps.append(RecipeStep(ingredient, amount))

    def describe(self) -> str:
        """Return the name followed by the ingredients of all steps."""
        ingredients = ", ".join(step.ingredient for step in self.steps)
        return f"{self.name}: {ingredients}"

    def browse(self) -> str:
        """Write the description to stdout without a line break and return it."""
        text = self.describe()
        sys.stdout.write(text)
        return text