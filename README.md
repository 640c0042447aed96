# cocktailpro

A console simulation of a cocktail machine. The machine reads the
ingredients it has loaded, filters its recipe book down to the cocktails it
can mix, and prepares the chosen cocktail step by step: dispensers pour
ingredients onto a scale until the requested weight is reached, the masher,
mixer and shaker run for their set time, and the emptier drains the glass at
the end. While a device works, one `*` is printed for every simulated second.

All messages the machine prints are in German.

## Installation

```
pip install .
```

## Running the machine

```
cocktailpro
```

The machine lists its ingredients and recipes, prints the fill level of
every dispenser and the list of mixable cocktails, then asks which one you
would like. Type the cocktail's number and press Enter. An entry that is not
the number of a listed cocktail is reported and the question is asked again.
Type `-1` to switch the machine off.

A cocktail whose dispensers no longer hold more than a step needs is shown
as `!NICHT MISCHBAR!`; choosing it tells you to refill the machine and start
it again.

### Options

The machine looks at a single argument only; with more than one, all are
ignored.

| Argument  | Effect                                                                     |
|-----------|----------------------------------------------------------------------------|
| `-D`      | Runs 1000 times faster and first prepares cocktail number 1 eleven times, then asks as usual |
| `-T`      | Runs 10000 times faster                                                    |
| any other | Runs 10 times faster                                                       |

Without an argument every step runs in real time.

### Exit status

If the ingredient file would need hardware the machine does not have (see
below), the reason is printed to standard error and the machine stops with
status 0. If `zutaten.txt` cannot be opened, or `Rezepte.csv` contains an
empty line, the error is printed to standard error and the status is 1.

## Input files

Both files are looked up in the current working directory.

`zutaten.txt` lists the loaded ingredients, one per line, and must exist.
The machine adds its own abilities `Mischen`, `Stampfen` and `Schuetteln` to
the list. An ingredient may appear more than once, which gives its dispenser
an extra 1000 g; `Eis` and `Limettenstuecke` may appear only once. A file
that needs more than eleven ordinary dispensers (everything except ice and
lime pieces) is rejected.

`Rezepte.csv` holds the recipes. The first line is a header and is skipped.
Every further line is a recipe name followed by pairs of ingredient and
amount, all separated by `;`:

```
Name;Zutat;Menge
Caipirinha;Limettenstuecke;8;Zucker;15;Stampfen;20;Eis;90;Cachaca;5;Mischen;10
```

Recipes are numbered from 1 in the order they appear. If the file is
missing, a built-in book of eight classic cocktails is used instead.
Recipes that need an ingredient the machine has not loaded are dropped.

## Use as a library

```python
from cocktailpro.machine import CocktailPro

machine = CocktailPro(["-T"])
machine.print_levels()
machine.mix_number(1)
```

`CocktailPro` also takes `recipe_path` and `ingredients_path` to read other
files. `choose_cocktail(entry)` checks a given entry instead of reading the
keyboard and raises `InvalidChoiceError` for an unknown number;
`mix_number` raises the same for a number not in the book. `can_mix(recipe)`
tells whether the dispensers still suffice for a recipe.

The building blocks live in their own modules: `cocktailpro.recipe`
(`Recipe`, `RecipeStep`), `cocktailpro.recipebook` (`RecipeBook`,
`parse_line`, `default_recipes`), `cocktailpro.ingredients`
(`AvailableIngredients`), `cocktailpro.mixable` (`MixableRecipeBook`),
`cocktailpro.devices` (`Dispenser`, `Emptier`, `Mixer`, `Masher`, `Shaker`),
`cocktailpro.scale` (`Scale`), `cocktailpro.timer` (`Timer`, `get_timer`),
`cocktailpro.device_manager` (`DeviceManager`) and `cocktailpro.preparer`
(`CocktailPreparer`).

All devices share one timer from `get_timer()` unless given their own, so
the speed set by `CocktailPro` applies to every device.

## What it does not do

Fill levels live only in memory: each start begins with full dispensers, and
nothing is saved between runs. There is no refill command; restarting the
machine is the way to refill it.

## Running the tests

```
pip install .[test]
pytest
```