"""Prepares a cocktail step by step with the machine's devices."""

from __future__ import annotations

from .device_manager import DeviceManager
from .recipe import Recipe


class CocktailPreparer:
    """Runs the steps of a recipe, then drains and cleans the machine."""

    def __init__(self, device_manager: DeviceManager) -> None:
        self.device_manager = device_manager

    def prepare(self, recipe: Recipe) -> bool:
        """Prepare ``recipe``; always returns True."""
        print("Gruess Gott, ich bin der CocktailZubereiter!")
        print(f"Ich habe Ihre Bestellung: {recipe.name} erhalten.")
        print("Bitte gedulden Sie sich einen Moment, waehrend ich den Cocktail zubereite!\n")
        final_step = 0
        for index, step in enumerate(recipe.steps):
            print(f"Rezeptschritt: {step.ingredient}, {step.amount:g}")
            self.device_manager.prepare_step(step.ingredient, step.amount)
            final_step = index
        self.device_manager.empty(final_step)
        self.device_manager.clean()
        return True