"""Player state: weather, vital statistics and the bag of items."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum

MAX_STAT = 100


class GameOver(Exception):
    """Raised when the player dies."""


class Escaped(Exception):
    """Raised when the player escapes the island."""


class Weather(str, Enum):
    SUNNY = "sunny"
    EXTREME_RAINFALL = "extreme rainfall"
    EXTREME_COLD = "extreme cold"
    EXTREME_HOT = "extreme hot"

    def __str__(self) -> str:
        return self.value


def roll_weather(rng: random.Random) -> Weather:
    """Pick the day's weather: 71% sunny, the rest split between extremes."""
    index = rng.randint(0, 100)
    if index <= 70:
        return Weather.SUNNY
    if index <= 80:
        return Weather.EXTREME_RAINFALL
    if index <= 90:
        return Weather.EXTREME_COLD
    return Weather.EXTREME_HOT


_DEDUCTIONS = {
    Weather.SUNNY: (15, 5),
    Weather.EXTREME_RAINFALL: (15, 5),
    Weather.EXTREME_COLD: (20, 5),
    Weather.EXTREME_HOT: (15, 10),
}


def deduction(weather: Weather) -> tuple[int, int]:
    """Return the (hunger, mental) loss for one action in *weather*."""
    return _DEDUCTIONS[Weather(weather)]


@dataclass
class Stats:
    hp: int = MAX_STAT
    hunger: int = MAX_STAT
    mental: int = MAX_STAT

    def format_table(self) -> str:
        """Render the current stats as a boxed table."""
        border = "+-------------------------------+"
        return "\n".join(
            [
                border,
                "|   Current Stats               |",
                border,
                f"| HP:     {self.hp:>3} / 100             |",
                f"| Hunger: {self.hunger:>3} / 100             |",
                f"| Mental: {self.mental:>3} / 100             |",
                border,
            ]
        )

    def clamp(self) -> None:
        """Keep every stat within 0..100."""
        self.hp = min(max(self.hp, 0), MAX_STAT)
        self.hunger = min(max(self.hunger, 0), MAX_STAT)
        self.mental = min(max(self.mental, 0), MAX_STAT)


_SHIELD_VALUES = {
    "knife": 10,
    "upgraded knife": 30,
    "fur clothing": 20,
    "gun&bullet": 50,
    "armor": 50,
}

# Listed in the order they are reported by Inventory.blueprints().
_BLUEPRINTS = (
    ("armor", "armor blueprint"),
    ("signal flare", "signal flare blueprint"),
    ("gun&bullet", "gun bullet blueprint"),
)


class Inventory:
    """The player's bag.

    Any item that has been looked up or added is considered present in the
    bag, even with a quantity of zero; menus rely on that presence.
    """

    def __init__(self) -> None:
        self._items: dict[str, int] = {}

    def count(self, item: str) -> int:
        """Return how many of *item* the bag holds, registering the item."""
        return self._items.setdefault(item, 0)

    def add(self, item: str, amount: int = 1) -> None:
        self._items[item] = self.count(item) + amount

    def take(self, item: str, amount: int = 1) -> None:
        """Remove *amount* of *item*; raise ValueError if there are not enough."""
        held = self.count(item)
        if held < amount:
            raise ValueError(f"not enough {item}: have {held}, need {amount}")
        self._items[item] = held - amount

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def nonzero(self) -> list[tuple[str, int]]:
        """Return (item, quantity) pairs with a non-zero quantity, sorted by name."""
        return sorted((name, qty) for name, qty in self._items.items() if qty != 0)

    def shield(self) -> int:
        """Return how much damage the carried gear absorbs."""
        return sum(self.count(item) * value for item, value in _SHIELD_VALUES.items())

    def has_blueprint(self, name: str) -> bool:
        """Whether the bag holds the blueprint for *name*, e.g. "armor"."""
        return self.count(f"{name} blueprint") > 0

    def blueprints(self) -> list[str]:
        """Return the names of the blueprints the player owns."""
        return [label for name, label in _BLUEPRINTS if self.has_blueprint(name)]

    def format_table(self) -> str:
        """Render the non-empty items as a boxed two-column table."""
        border = "+--------------------+----------------+"
        lines = [border, "|       Item         |     Quantity   |", border]
        lines.extend(f"| {name:<19}| {qty:<15}|" for name, qty in self.nonzero())
        lines.append(border)
        return "\n".join(lines)