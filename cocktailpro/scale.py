"""The machine's scale and the observer pattern it notifies through."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Observer(ABC):
    """Something that reacts when a subject changes."""

    @abstractmethod
    def update(self) -> None:
        """React to a change of the observed subject."""


class Subject:
    """Keeps observers and notifies them of changes."""

    def __init__(self) -> None:
        self.observers: list[Observer] = []

    def attach(self, observer: Observer) -> None:
        self.observers.append(observer)

    def notify(self) -> None:
        """Call every observer, the most recently attached first."""
        for observer in reversed(self.observers):
            observer.update()


class Scale(Subject):
    """Weighs the glass; ``delta`` is the weight added since the last tare."""

    def __init__(self) -> None:
        super().__init__()
        self.weight = 0
        self.delta = 0

    def change_weight(self, grams: float) -> None:
        """Add whole grams (negative to remove) and notify observers."""
        grams = int(grams)
        self.weight = max(self.weight + grams, 0)
        self.delta += grams
        self.notify()

    def tare(self) -> int:
        """Reset the delta weight and return it."""
        self.delta = 0
        return self.delta