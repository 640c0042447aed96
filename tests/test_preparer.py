import pytest

from cocktailpro.device_manager import DeviceManager
from cocktailpro.ingredients import AvailableIngredients
from cocktailpro.preparer import CocktailPreparer
from cocktailpro.recipe import Recipe
from cocktailpro.timer import Timer


@pytest.fixture
def preparer(tmp_path):
    path = tmp_path / "zutaten.txt"
    path.write_text("Eis\nWodka\nZucker\n", encoding="utf-8")
    manager = DeviceManager(AvailableIngredients(str(path)), Timer(turbo=10000))
    return CocktailPreparer(manager)


@pytest.fixture
def recipe():
    result = Recipe(name="test")
    result.append_step("Wodka", 10)
    return result


def test_prepare_greets(preparer, recipe, capsys):
    capsys.readouterr()
    assert preparer.prepare(recipe) is True
    output = capsys.readouterr().out
    assert output[:12] == "Gruess Gott,"
    assert "Ich habe Ihre Bestellung: test erhalten." in output
    assert "Rezeptschritt: Wodka, 10" in output


def test_prepare_uses_dispenser_and_empties(preparer, recipe):
    preparer.prepare(recipe)
    manager = preparer.device_manager
    assert manager.dispensers()["Wodka"].level == 990
    assert manager.scale.weight == 0


def test_prepare_empties_to_last_step_index(preparer):
    recipe = Recipe(name="two")
    recipe.append_step("Eis", 20)
    recipe.append_step("Wodka", 5)
    preparer.prepare(recipe)
    assert preparer.device_manager.scale.weight <= 1
    assert preparer.device_manager.dispensers()["Eis"].level == 980