"""The book of cocktail recipes, read from a CSV file or built in."""

from __future__ import annotations

import re
from collections.abc import Iterator

from .recipe import Recipe

DEFAULT_RECIPE_FILE = "Rezepte.csv"

_AMOUNT = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


class RecipeFileError(Exception):
    """The recipe file is missing or malformed."""


def _parse_amount(text: str) -> float | None:
    match = _AMOUNT.match(text)
    return float(match.group(1)) if match else None


def parse_line(line: str, number: int) -> Recipe:
    """Build a recipe from one ``name;ingredient;amount;...`` line."""
    if line == "":
        raise RecipeFileError("Empty Line, aborting.")
    name, *rest = line.split(";")
    recipe = Recipe(name=name, number=number)
    fields = iter(rest)
    amount = 0.0
    for ingredient in fields:
        if not ingredient:
            break
        amount_field = next(fields, None)
        if amount_field is not None:
            parsed = _parse_amount(amount_field)
            if parsed is not None:
                amount = parsed
        recipe.append_step(ingredient, amount)
    return recipe


def _recipe(number: int, name: str, *steps: tuple[str, float]) -> Recipe:
    recipe = Recipe(name=name, number=number)
    for ingredient, amount in steps:
        recipe.append_step(ingredient, amount)
    return recipe


def default_recipes() -> list[Recipe]:
    """Return the built-in recipes used when no recipe file exists."""
    return [
        _recipe(1, "Caipirinha", ("Limettenstuecke", 8), ("Zucker", 15),
                ("Stampfen", 20), ("Eis", 90), ("Cachaca", 5), ("Mischen", 10)),
        _recipe(2, "Margarita", ("Zitronensaft", 2), ("Cointreau", 2),
                ("Tequilla", 4), ("Eis", 50), ("Mischen", 20)),
        _recipe(3, "Daiquiri", ("Limettensaft", 2), ("Zuckersirup", 2),
                ("Rum weiss", 5), ("Eis", 50), ("Mischen", 20)),
        _recipe(4, "Planters Punch", ("Zitronensaft", 2), ("Grenadine", 1),
                ("Orangensaft", 8), ("Rum braun", 6), ("Eis", 100), ("Mischen", 20)),
        _recipe(5, "Caipiroska", ("Limettenstuecke", 8), ("Zucker", 15),
                ("Stampfen", 20), ("Eis", 90), ("Wodka", 5), ("Mischen", 10)),
        _recipe(6, "Caipirissima", ("Limettenstuecke", 8), ("Zucker", 15),
                ("Stampfen", 20), ("Eis", 90), ("Rum weiss", 5), ("Mischen", 10)),
        _recipe(7, "Cuban Island", ("Zitronensaft", 2), ("Cointreau", 2),
                ("Rum weiss", 2), ("Wodka", 2), ("Eis", 30), ("Mischen", 30)),
        _recipe(8, "Martini James B", ("Gin", 6), ("Wodka", 2),
                ("Noilly Prat", 1), ("Schuetteln", 10)),
    ]


class RecipeBook:
    """An ordered collection of recipes."""

    def __init__(self, path: str = DEFAULT_RECIPE_FILE) -> None:
        self.recipes: list[Recipe] = []
        try:
            with open(path, encoding="utf-8"):
                pass
        except OSError:
            print("Rezept Datei konnte nicht gefunden werden, benutze Standard Variante")
            self.recipes = default_recipes()
        else:
            print("Rezepte-Liste gefunden!", end="")
            self.read_recipes(path)

    def __len__(self) -> int:
        return len(self.recipes)

    def __getitem__(self, index: int) -> Recipe:
        return self.recipes[index]

    def __iter__(self) -> Iterator[Recipe]:
        return iter(self.recipes)

    def find_by_number(self, number: int) -> Recipe:
        """Return the recipe with the given cocktail number."""
        for recipe in self.recipes:
            if recipe.number == number:
                return recipe
        raise KeyError(number)

    def has_number(self, number: int) -> bool:
        return any(recipe.number == number for recipe in self.recipes)

    def delete_recipe(self, index: int) -> bool:
        """Remove the recipe at ``index``; False if there is none."""
        if not 0 <= index < len(self.recipes):
            return False
        del self.recipes[index]
        return True

    def read_recipes(self, path: str = DEFAULT_RECIPE_FILE) -> None:
        """Append the recipes of a CSV file; its first line is a header."""
        try:
            handle = open(path, encoding="utf-8", errors="replace", newline="")
        except OSError as exc:
            raise RecipeFileError("File not found" + path) from exc
        print("Rezepte-Liste erfolgreich geöffnet!", end="")
        with handle:
            next(handle, None)
            for number, line in enumerate(handle, start=1):
                self.recipes.append(parse_line(line.removesuffix("\n"), number))