"""The ingredients and abilities the machine has available."""

from __future__ import annotations

from collections.abc import Iterator

DEFAULT_INGREDIENT_FILE = "zutaten.txt"
SPECIAL_ABILITIES = ("Mischen", "Stampfen", "Schuetteln")


class IngredientFileError(Exception):
    """The ingredient file could not be opened."""


class AvailableIngredients:
    """Ingredients read from a file, followed by the special abilities."""

    def __init__(self, path: str = DEFAULT_INGREDIENT_FILE) -> None:
        self.items: list[str] = []
        self.read_file(path)
        self.browse()
        self.add_special_abilities()
        self.dispenser_count = len(self.items)

    def read_file(self, path: str) -> None:
        """Append one ingredient per line of the file."""
        try:
            handle = open(path, encoding="utf-8", errors="replace", newline="")
        except OSError as exc:
            message = "File not found: " + path
            print(message)
            raise IngredientFileError(message) from exc
        print(f"Oeffne Zutatendatei {path}")
        with handle:
            for line in handle:
                line = line.removesuffix("\n").removesuffix("\r")
                self.items.append(line)

    def add_special_abilities(self) -> None:
        """Add mixing, mashing and shaking as pseudo ingredients."""
        self.items.extend(SPECIAL_ABILITIES)

    def browse(self) -> None:
        print("*********** Verfuegbare Einheiten bzw. Zutaten: ***********")
        for item in self.items:
            print(item)
        print("**********************************************************")

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> str:
        return self.items[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self.items)

    def __contains__(self, name: object) -> bool:
        return name in self.items