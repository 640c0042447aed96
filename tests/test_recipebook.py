import pytest

from cocktailpro.recipebook import (
    RecipeBook,
    RecipeFileError,
    default_recipes,
    parse_line,
)


@pytest.fixture
def book(tmp_path):
    return RecipeBook(str(tmp_path / "missing.csv"))


@pytest.fixture
def csv_file(tmp_path):
    path = tmp_path / "Rezepte.csv"
    path.write_text(
        "Name;Zutat;Menge\n"
        "Testini;Gin;6;Wodka;2;Schuetteln;10\n"
        "Eiswasser;Eis;50\n",
        encoding="utf-8",
    )
    return str(path)


def test_number_of_recipes_matches_list(book):
    assert len(book) == len(book.recipes)
    assert len(book) == 8


def test_delete_recipe_bound(book):
    assert book.delete_recipe(len(book)) is False


def test_delete_recipe_out_of_bound(book):
    assert book.delete_recipe(100) is False


def test_delete_recipe_removes(book):
    assert book.delete_recipe(0) is True
    assert len(book) == 7
    assert book[0].name == "Margarita"


def test_read_recipes_missing_file(book, tmp_path):
    with pytest.raises(RecipeFileError) as info:
        book.read_recipes(str(tmp_path / "nope.csv"))
    assert str(info.value)[:14] == "File not found"


def test_empty_line():
    with pytest.raises(RecipeFileError) as info:
        parse_line("", 1)
    assert str(info.value)[:21] == "Empty Line, aborting."


def test_default_recipes_count(book):
    book.recipes.clear()
    book.recipes.extend(default_recipes())
    assert len(book) == 8


def test_missing_file_message(tmp_path, capsys):
    RecipeBook(str(tmp_path / "missing.csv"))
    out = capsys.readouterr().out
    assert "benutze Standard Variante" in out


def test_reads_file(csv_file, capsys):
    book = RecipeBook(csv_file)
    assert capsys.readouterr().out.startswith("Rezepte-Liste gefunden!")
    assert [r.name for r in book] == ["Testini", "Eiswasser"]
    assert [r.number for r in book] == [1, 2]
    assert [(s.ingredient, s.amount) for s in book[0].steps] == [
        ("Gin", 6.0), ("Wodka", 2.0), ("Schuetteln", 10.0)
    ]


def test_read_recipes_appends(csv_file):
    book = RecipeBook(csv_file)
    book.read_recipes(csv_file)
    assert len(book) == 4


def test_empty_line_in_file(tmp_path):
    path = tmp_path / "bad.csv"
    path.write_text("Header\nA;Eis;1\n\nB;Eis;2\n", encoding="utf-8")
    with pytest.raises(RecipeFileError):
        RecipeBook(str(path))


def test_parse_line_values():
    recipe = parse_line("Mix;Eis;12.5;Zucker;3", 4)
    assert recipe.name == "Mix"
    assert recipe.number == 4
    assert [(s.ingredient, s.amount) for s in recipe.steps] == [
        ("Eis", 12.5), ("Zucker", 3.0)
    ]


def test_parse_line_stops_at_empty_ingredient():
    recipe = parse_line("Mix;Eis;1;;Zucker;2", 1)
    assert [s.ingredient for s in recipe.steps] == ["Eis"]


def test_parse_line_missing_amount_keeps_previous():
    recipe = parse_line("Mix;Eis;7;Zucker", 1)
    assert [(s.ingredient, s.amount) for s in recipe.steps] == [
        ("Eis", 7.0), ("Zucker", 7.0)
    ]


def test_find_and_has_number(book):
    assert book.find_by_number(3).name == "Daiquiri"
    assert book.has_number(8) is True
    assert book.has_number(9) is False
    with pytest.raises(KeyError):
        book.find_by_number(42)


def test_default_recipe_contents():
    recipes = default_recipes()
    assert [r.number for r in recipes] == list(range(1, 9))
    assert recipes[7].describe() == "Martini James B: Gin, Wodka, Noilly Prat, Schuetteln"