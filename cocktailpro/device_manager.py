"""Creation and control of all devices inside the machine."""

from __future__ import annotations

from .devices import Dispenser, Emptier, InternalDevice, Masher, Mixer, Shaker
from .ingredients import SPECIAL_ABILITIES, AvailableIngredients
from .scale import Scale
from .timer import Timer

ICE = "Eis"
LIME_PIECES = "Limettenstuecke"
EMPTY = "Entleeren"
MASH = "Stampfen"
SHAKE = "Schuetteln"
MIX = "Mischen"
ACTIONS = frozenset({EMPTY, MASH, SHAKE, MIX})
MAX_DISPENSERS = 11


class HardwareConfigError(Exception):
    """The ingredient list cannot be built with the machine's hardware."""


def check_dispenser_count(count: int) -> None:
    """Raise if more ordinary dispensers are needed than the machine has."""
    if count > MAX_DISPENSERS:
        raise HardwareConfigError(
            f"{count}Die Zutatendatei setzt zu viele Dosierer voraus, "
            "bitte editieren sie sie und starten neu!"
        )


class DeviceManager:
    """Builds the dispensers and processing units and runs recipe steps on them."""

    def __init__(
        self, ingredients: AvailableIngredients, timer: Timer | None = None
    ) -> None:
        self.ingredients = ingredients
        self.timer = timer
        self.create_devices()

    def create_devices(self) -> None:
        """Create the scale, the processing units and one dispenser per ingredient.

        Ingredients listed twice get a single dispenser holding twice as much;
        ice and lime pieces may appear only once.
        """
        self.scale = Scale()
        self.emptier = Emptier(25, 1000, self.scale, self.timer)
        self.devices: dict[str, InternalDevice] = {
            EMPTY: self.emptier,
            MASH: Masher(self.timer),
            SHAKE: Shaker(self.timer),
            MIX: Mixer(self.timer),
        }
        names = list(self.ingredients)
        real = names[: max(len(names) - len(SPECIAL_ABILITIES), 0)]
        count = 0
        for name in reversed(real):
            existing = self.devices.get(name)
            if existing is None:
                count += self._create_original(name)
                continue
            if name in (ICE, LIME_PIECES):
                raise HardwareConfigError(
                    "Error: Zweimal Eis oder Limettenstuecke sind nicht hardwarekompatibel!"
                )
            if not isinstance(existing, Dispenser):
                raise HardwareConfigError(f"{name} kann nicht dosiert werden")
            self.devices[name] = Dispenser(
                1, 250, name, self.scale, existing.level + 1000, self.timer
            )
            count += 1
        check_dispenser_count(count)
        self.dispenser_count = count

    def _create_original(self, name: str) -> int:
        """Create the first dispenser for ``name``; return 1 if it is an ordinary one."""
        if name == ICE:
            self.devices[name] = Dispenser(20, 1000, name, self.scale, 1000, self.timer)
            return 0
        if name == LIME_PIECES:
            self.devices[name] = Dispenser(10, 1000, name, self.scale, 100, self.timer)
            return 0
        self.devices[name] = Dispenser(1, 250, name, self.scale, 1000, self.timer)
        return 1

    def prepare_step(self, ingredient: str, amount: float) -> None:
        """Run one recipe step; lime pieces are measured by count, not weight."""
        device = self.devices[ingredient]
        if ingredient == LIME_PIECES and isinstance(device, Dispenser):
            device.do_it(amount * device.pieces_per_unit())
        else:
            device.do_it(amount)

    def empty(self, amount: float) -> None:
        """Drain the glass down to ``amount`` grams."""
        self.emptier.do_it(amount)

    def clean(self) -> None:
        for device in self.devices.values():
            device.clean()

    def dispensers(self) -> dict[str, Dispenser]:
        """Return the ingredient dispensers ordered by name."""
        return {
            name: device
            for name, device in sorted(self.devices.items())
            if name not in ACTIONS and isinstance(device, Dispenser)
        }