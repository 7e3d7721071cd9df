"""Eating and cooking: recovering stats from food and roasting ingredients."""

from __future__ import annotations

from dataclasses import dataclass

from castaway.state import MAX_STAT, Inventory, Stats

_EATING_MENU = (
    "+-------------------------------+",
    "|          Eating Menu          |",
    "+-------------------------------+",
    "| [1] Fruit: Recover 30 Hunger |",
    "| [2] Fish: Recover 30 Hunger,  |",
    "|     -20 HP, -5 Mental         |",
    "| [3] Meat: Recover 40 Hunger,  |",
    "|     -20 HP, -15 Mental        |",
    "| [4] Roast Fish: Recover 50    |",
    "|     Hunger, +20 Mental        |",
    "| [5] Roast Meat: Recover 60    |",
    "|     Hunger, +10 Mental        |",
    "| [6] Roast Beef: Recover 80    |",
    "|     Hunger, +20 Mental        |",
    "| [7] Roast Bear Meat: Recover  |",
    "|     100 Hunger, +50 Mental    |",
    "| [8] Roast Wolf Meat: Recover  |",
    "|     100 Hunger, +50 Mental    |",
    "| [9] Herb: Recover 60 HP       |",
    "+-------------------------------+",
)

_COOKING_MENU = (
    "+-------------------+----------------------+",
    "| Dish              | Ingredients Needed   |",
    "+-------------------+----------------------+",
    "| 1. Roast Fish     | Fish -1, Wood -1     |",
    "| 2. Roast Meat     | Meat -1, Wood -1     |",
    "| 3. Roast Beef     | Beef -1, Wood -1     |",
    "| 4. Roast Mutton   | Mutton -1, Wood -1   |",
    "| 5. Roast Bear     | Bear Meat -1, Wood -1|",
    "| 6. Roast Wolf     | Wolf Meat -1, Wood -1|",
    "+-------------------+----------------------+",
)


@dataclass(frozen=True)
class _Food:
    item: str
    hunger: int
    hp: int
    mental: int
    eaten: str
    missing: str


_FOODS = {
    1: _Food("fruit", 30, 0, 0,
             "You ate a fruit. Hunger bar recovered by 30.",
             "You have no fruit!"),
    2: _Food("fish", 30, -20, -5,
             "You ate a fish directly. Hunger recovered by 30, HP decreased by 20, "
             "and Mental decreased by 5.",
             "You have no fish!"),
    3: _Food("meat", 40, -20, -15,
             "You ate meat directly. Hunger recovered by 40, HP decreased by 20, "
             "and Mental decreased by 15.",
             "You have no meat!"),
    4: _Food("roast fish", 50, 0, 20,
             "You ate roast fish. Hunger recovered by 50, Mental recovered by 20.",
             "You have no roast fish!"),
    5: _Food("roast meat", 60, 0, 10,
             "You ate roast meat. Hunger recovered by 60, Mental recovered by 10.",
             "You have no roast meat!"),
    6: _Food("roast beef", 80, 0, 20,
             "You ate roast beef. Hunger recovered by 80, Mental recovered by 20.",
             "You have no roast beef!"),
    7: _Food("roast bear meat", 100, 0, 50,
             "You ate roast bear meat. Hunger recovered by 100, Mental recovered by 50.",
             "You have no roast bear meat!"),
    8: _Food("roast wolf meat", 100, 0, 50,
             "You ate roast wolf meat. Hunger recovered by 100, Mental recovered by 50.",
             "You have no roast wolf meat!"),
    9: _Food("herb", 0, 60, 0,
             "You ate herb and recovered 60 HP.",
             "You don't have any herb!"),
}

# Menu number -> (dish, ingredient)
_DISHES = {
    1: ("roast fish", "fish"),
    2: ("roast meat", "meat"),
    3: ("roast beef", "beef"),
    4: ("roast mutton", "mutton"),
    5: ("roast bear meat", "bear meat"),
    6: ("roast wolf meat", "wolf meat"),
}


@dataclass(frozen=True)
class CookResult:
    """What one cooking choice produced.

    ``dish`` names what was cooked, if anything; ``stop`` is set when the
    player ends the cooking session; ``log_entry`` is the survival-log text.
    """

    message: str
    log_entry: str | None = None
    dish: str | None = None
    stop: bool = False

    @property
    def cooked(self) -> bool:
        return self.dish is not None


def eating_menu() -> str:
    """Render the menu of foods and their effects."""
    return "\n".join(_EATING_MENU)


def cooking_menu() -> str:
    """Render the menu of dishes and their ingredients."""
    return "\n".join(_COOKING_MENU)


def _apply(value: int, change: int) -> int:
    # Gains are capped at the maximum; losses are left unclamped.
    if change > 0:
        return min(MAX_STAT, value + change)
    return value + change


def eat(stats: Stats, inventory: Inventory, choice: int) -> str:
    """Eat the food numbered *choice* on the eating menu and return the message."""
    food = _FOODS.get(choice)
    if food is None:
        return "Invalid choice! Please select a valid food option."
    if inventory.count(food.item) <= 0:
        return food.missing
    inventory.take(food.item)
    stats.hunger = _apply(stats.hunger, food.hunger)
    stats.hp = _apply(stats.hp, food.hp)
    stats.mental = _apply(stats.mental, food.mental)
    return food.eaten


def cook_dish(inventory: Inventory, choice: int) -> CookResult:
    """Cook the dish numbered *choice* on the cooking menu; 0 ends the session."""
    if choice == 0:
        return CookResult(
            "You decided to stop cooking.", "You decided to stop cooking.\n", stop=True
        )
    entry = _DISHES.get(choice)
    if entry is None:
        return CookResult("Invalid choice. Please select a valid dish.")
    dish, ingredient = entry
    log_entry = f"You had made a {dish}\n"
    if inventory.count(ingredient) < 1:
        return CookResult(f"You don't have enough {ingredient} to cook {dish}.", log_entry)
    if inventory.count("wood") < 1:
        return CookResult(f"You don't have enough wood to cook {dish}.", log_entry)
    inventory.take(ingredient)
    inventory.take("wood")
    inventory.add(dish)
    return CookResult(f"You cooked {dish}!", log_entry, dish=dish)