"""The whole cocktail machine and its command-line entry point."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence

from .device_manager import DeviceManager, HardwareConfigError
from .ingredients import DEFAULT_INGREDIENT_FILE, AvailableIngredients, IngredientFileError
from .mixable import MixableRecipeBook
from .preparer import CocktailPreparer
from .recipe import Recipe
from .recipebook import DEFAULT_RECIPE_FILE, RecipeFileError
from .timer import get_timer

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
QUIT = -1
DEMO_ROUNDS = 11


class InvalidChoiceError(Exception):
    """The chosen cocktail number does not exist."""


def _to_int(text: str) -> int:
    """Read a leading integer the lenient way; 0 if there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _read_token() -> str:
    while True:
        tokens = input().split()
        if tokens:
            return tokens[0]


class CocktailPro:
    """Builds every component of the machine and serves cocktails."""

    def __init__(
        self,
        argv: Sequence[str] | None = None,
        recipe_path: str = DEFAULT_RECIPE_FILE,
        ingredients_path: str = DEFAULT_INGREDIENT_FILE,
    ) -> None:
        args = list(argv) if argv is not None else []
        self.timer = get_timer()
        self.ingredients = AvailableIngredients(ingredients_path)
        self.recipe_book = MixableRecipeBook(self.ingredients, recipe_path)
        self.device_manager = DeviceManager(self.ingredients, self.timer)
        self.preparer = CocktailPreparer(self.device_manager)
        if len(args) == 1:
            if args[0] == "-D":
                self.timer.turbo = 1000
                self.demo()
            elif args[0] == "-T":
                self.timer.turbo = 10000
            else:
                self.timer.turbo = 10

    def mix(self, interactive: bool) -> None:
        """Serve cocktails: forever when interactive, else the last one once."""
        while True:
            self.print_levels()
            self.mark_unmixable()
            if interactive:
                number = 0
                while number == 0:
                    try:
                        number = self.choose_cocktail()
                    except InvalidChoiceError as exc:
                        print(exc, file=sys.stderr)
            else:
                number = len(self.recipe_book)
            self.mix_number(number)
            if not interactive:
                return

    def demo(self) -> None:
        """Mix cocktail number 1 several times in a row."""
        self.print_levels()
        print("\n\n")
        for _ in range(DEMO_ROUNDS):
            self.mix_number(1)

    def choose_cocktail(self, entry: str | int | None = None) -> int:
        """Ask for a cocktail number; ``entry`` replaces the keyboard input.

        Entering -1 ends the program.
        """
        print("********** Mischbare Rezepte **********")
        self.recipe_book.browse()
        print("Was haetten Sie denn gern? (-1 zum Verlassen)")
        text = _read_token() if entry is None else str(entry)
        number = _to_int(text)
        if number == QUIT:
            raise SystemExit(0)
        if self.recipe_book.has_number(number):
            return number
        print("MEEEP! Too many fingers on keyboard error!")
        raise InvalidChoiceError(f"Ihre Eingabe: {text} trifft auf kein Cocktail zu!\n")

    def print_levels(self) -> None:
        print()
        print("Füllstände der Dosierer:")
        for dispenser in self.device_manager.dispensers().values():
            print(f"{dispenser.content}: {dispenser.level:g}")
        print()

    def can_mix(self, recipe: Recipe) -> bool:
        """False if some dispenser holds no more than a step of the recipe needs."""
        return not any(
            dispenser.content == step.ingredient and dispenser.level <= step.amount
            for dispenser in self.device_manager.dispensers().values()
            for step in recipe.steps
        )

    def mark_unmixable(self) -> None:
        for recipe in self.recipe_book:
            if not self.can_mix(recipe):
                recipe.mixable = False

    def mix_number(self, number: int) -> None:
        """Prepare the cocktail with ``number`` if the dispensers still suffice."""
        if not self.recipe_book.has_number(number):
            raise InvalidChoiceError(f"Ihre Eingabe: {number} trifft auf kein Cocktail zu!\n")
        recipe = self.recipe_book.find_by_number(number)
        if self.can_mix(recipe):
            print(recipe.name)
            self.preparer.prepare(recipe)
        else:
            print()
            print("Dieser Cocktail ist nicht mehr mischbar!")
            print(
                "Bitte schalten sie den CocktailPro aus, füllen alle Zutaten nach "
                "und starten dann wieder um diesen Cocktail zu mischen!"
            )
            print()


def main(argv: Sequence[str] | None = None) -> int:
    """Start the machine and serve cocktails until the user quits."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        CocktailPro(args).mix(True)
    except HardwareConfigError as exc:
        print(exc, file=sys.stderr)
        return 0
    except (IngredientFileError, RecipeFileError) as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())