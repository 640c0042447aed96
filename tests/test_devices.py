import time

import pytest

from cocktailpro.devices import (
    Dispenser,
    Emptier,
    InternalDevice,
    Masher,
    Mixer,
    Shaker,
)
from cocktailpro.scale import Scale
from cocktailpro.timer import Timer


@pytest.fixture
def fast_timer():
    return Timer(turbo=10000)


def test_dispenser_weight_of_ingredient(fast_timer, capsys):
    scale = Scale()
    dispenser = Dispenser(1, 250, "Zutat", scale, 100, timer=fast_timer)
    dispenser.do_it(1)
    assert scale.delta == 1
    out = capsys.readouterr().out
    assert out.startswith("Zutat Ventil wurde geoeffnet")
    assert "Es wurden 1g Zutat abgefuellt" in out


def test_dispenser_pieces_per_unit(fast_timer):
    dispenser = Dispenser(1, 250, "Zutat", Scale(), 100, timer=fast_timer)
    assert dispenser.pieces_per_unit() == 1


def test_dispenser_lowers_level(fast_timer, capsys):
    dispenser = Dispenser(1, 250, "Zutat", Scale(), 100, timer=fast_timer)
    dispenser.do_it(1)
    assert dispenser.level == 99
    assert dispenser.max_level == 100


def test_lime_dispenser_counts_pieces(fast_timer, capsys):
    dispenser = Dispenser(10, 1000, "Limettenstuecke", Scale(), 100, timer=fast_timer)
    dispenser.do_it(10)
    assert dispenser.level == 99


def test_dispenser_stops_when_not_busy(fast_timer):
    scale = Scale()
    dispenser = Dispenser(1, 250, "Zutat", scale, 100, timer=fast_timer)
    scale.change_weight(5)
    assert dispenser.busy is False
    assert dispenser.level == 100


def test_emptier_weight(fast_timer, capsys):
    scale = Scale()
    scale.change_weight(50)
    emptier = Emptier(5, 1250, scale, timer=fast_timer)
    emptier.do_it(5)
    assert scale.weight == 5
    out = capsys.readouterr().out
    assert out.startswith("Ihr Cocktail hat ein Gesamtgewicht von 50g")


def test_clean_stops_device(fast_timer):
    dispenser = Dispenser(1, 250, "Zutat", Scale(), 100, timer=fast_timer)
    dispenser.busy = True
    dispenser.clean()
    assert dispenser.busy is False


def test_internal_device_is_abstract():
    with pytest.raises(TypeError):
        InternalDevice()