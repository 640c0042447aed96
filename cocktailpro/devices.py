"""The internal devices of the cocktail machine."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .scale import Observer, Scale
from .timer import Timer, get_timer

LIME_PIECES = "Limettenstuecke"


class InternalDevice(ABC):
    """A device inside the machine that works for some time."""

    def __init__(self, timer: Timer | None = None) -> None:
        self.timer = timer if timer is not None else get_timer()
        self.time_unit = 0
        self.busy = False

    @abstractmethod
    def do_it(self, value: float) -> None:
        """Run the device's operation."""

    def clean(self) -> None:
        """Clean the device, which stops anything it was still doing."""
        self.busy = False


class Dispenser(InternalDevice, Observer):
    """Dispenses one ingredient onto the scale until enough has run out."""

    def __init__(
        self,
        grams_per_unit: float,
        time_unit: int,
        content: str,
        scale: Scale,
        max_level: float,
        timer: Timer | None = None,
    ) -> None:
        super().__init__(timer)
        self.grams_per_unit = grams_per_unit
        self.time_unit = time_unit
        self.content = content
        self.scale = scale
        self.max_level = max_level
        self.level = max_level
        self.target = 0.0
        scale.attach(self)

    def update(self) -> None:
        if self.busy and self.scale.delta >= self.target:
            self.busy = False

    def do_it(self, grams: float) -> None:
        """Open the valve until ``grams`` have landed on the scale."""
        self.target = grams
        self.scale.tare()
        self.busy = True
        print(f"{self.content} Ventil wurde geoeffnet")
        while self.busy:
            self.timer.sleep(self.time_unit)
            self.scale.change_weight(self.grams_per_unit)
            if self.content == LIME_PIECES:
                self.level -= self.grams_per_unit / 10
            else:
                self.level -= self.grams_per_unit
        print(f"{self.content} Ventil wurde geschlossen")
        print(f"Es wurden {self.scale.delta}g {self.content} abgefuellt")
        print()

    def pieces_per_unit(self) -> int:
        """How many pieces the dispenser releases per time unit."""
        return int(self.grams_per_unit)


class Emptier(InternalDevice, Observer):
    """Drains the finished cocktail from the glass."""

    def __init__(
        self,
        grams_per_unit: float,
        time_unit: int,
        scale: Scale,
        timer: Timer | None = None,
    ) -> None:
        super().__init__(timer)
        self.grams_per_unit = grams_per_unit
        self.time_unit = time_unit
        self.scale = scale
        self.target = 0.0
        scale.attach(self)

    def update(self) -> None:
        if self.busy and self.scale.weight <= self.target:
            self.busy = False

    def do_it(self, target_weight: float) -> None:
        """Drain until the scale shows ``target_weight`` or less."""
        print(f"Ihr Cocktail hat ein Gesamtgewicht von {self.scale.weight}g")
        print("Entleervorgang wird begonnen...")
        self.target = target_weight
        self.busy = True
        while self.busy:
            self.timer.sleep(self.time_unit)
            self.scale.change_weight(-self.grams_per_unit)
        print()
        print("Entleervorgang wurde beendet, bitte entnehmen Sie ihren Cocktail!")
        print()


class TimedDevice(InternalDevice):
    """A device whose work is simply running for a number of seconds."""

    def do_it(self, seconds: float) -> None:
        self.timer.sleep(seconds * 1000)
        print()


class Mixer(TimedDevice):
    """Mixes the cocktail."""


class Masher(TimedDevice):
    """Mashes the ingredients in the glass."""


class Shaker(TimedDevice):
    """Shakes the cocktail."""