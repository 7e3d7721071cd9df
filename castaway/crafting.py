"""Crafting recipes: turning gathered materials into tools, shelter and escape gear."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from castaway.state import Inventory

_BORDER = "+--------------------+---------------------+"

_BASE_RECIPES = (
    "| 1. Campfire       | Wood-5               |",
    "| 2. Knife          | Wood-3 , Metal-3     |",
    "| 3. Upgrade Knife  | Wood-10, Metal-10    |",
    "| 4. Build Shelter  | Wood-10, Metal-4     |",
    "| 5. Upgrade Shelter| Wood-10, Metal-6     |",
    "| 6. Fur Clothing   | Leather-10           |",
    "| 7. Boat           | Wood-35, Metal-20    |",
)

# Recipes that appear only once their blueprint has been found.
_BLUEPRINT_RECIPES = (
    ("gun&bullet", "| 8. Gun&bullet     | Metal-15             |"),
    ("signal flare", "| 9. Signal Flare   | Metal-20             |"),
    ("armor", "| 10.Armor          | Metal-10, Leather-10 |"),
)


@dataclass(frozen=True)
class CraftResult:
    """What a crafting attempt produced.

    ``log_entry`` is the text for the survival log, or None when the attempt
    leaves no record. ``cancelled`` is set when the player chose to craft nothing.
    """

    message: str
    log_entry: str | None = None
    crafted: str | None = None
    cancelled: bool = False


def recipe_menu(inventory: Inventory) -> str:
    """Render the crafting menu, including recipes unlocked by blueprints."""
    lines = [_BORDER, *_BASE_RECIPES]
    lines.extend(line for name, line in _BLUEPRINT_RECIPES if inventory.has_blueprint(name))
    lines.append(_BORDER)
    return "\n".join(lines)


def _consume(inventory: Inventory, costs: dict[str, int]) -> None:
    for item, amount in costs.items():
        inventory.take(item, amount)


def _made(inventory: Inventory, item: str, costs: dict[str, int], message: str) -> CraftResult:
    _consume(inventory, costs)
    inventory.add(item)
    return CraftResult(message, f"{item}\n", crafted=item)


def _campfire(inventory: Inventory) -> CraftResult:
    if inventory.count("campfire") > 0:
        return CraftResult("You have already crafted a campfire!", "Nothing\n")
    if inventory.count("wood") >= 5:
        return _made(
            inventory,
            "campfire",
            {"wood": 5},
            "You crafted a campfire! It has been added to your inventory.",
        )
    return CraftResult("You don't have enough wood to craft a campfire. You need 5 wood.")


def _knife(inventory: Inventory) -> CraftResult:
    if inventory.count("wood") >= 3 and inventory.count("metal") >= 3:
        return _made(
            inventory,
            "knife",
            {"wood": 3, "metal": 3},
            "You crafted a knife! It has been added to your inventory.",
        )
    return CraftResult(
        "You don't have enough resource to craft a knife. You need 3 wood and 3 metal."
    )


def _upgraded_knife(inventory: Inventory) -> CraftResult:
    if (
        inventory.count("wood") >= 10
        and inventory.count("metal") >= 10
        and inventory.count("knife") >= 1
    ):
        return _made(
            inventory,
            "upgraded knife",
            {"wood": 10, "metal": 10, "knife": 1},
            "You upgraded your knife! It has been added to your inventory.",
        )
    return CraftResult(
        "You cannot upgrade your knife. You need a knife, 10 wood and 10 metal."
    )


def _shelter(inventory: Inventory) -> CraftResult:
    if inventory.count("shelter") == 1 or inventory.count("upgraded shelter") == 1:
        return CraftResult("You already have a shelter", "nothing\n")
    if inventory.count("wood") >= 10 and inventory.count("metal") >= 4:
        return _made(
            inventory,
            "shelter",
            {"wood": 10, "metal": 4},
            "You have created a shelter! It has been added to your inventory.",
        )
    return CraftResult(
        "You don't have enough resource to craft a shelter. You need 10 wood and 4 metal.\n",
        "nothing\n",
    )


def _upgraded_shelter(inventory: Inventory) -> CraftResult:
    if inventory.count("upgraded shelter") == 1:
        return CraftResult("You already have a upgraded shelter", "nothing\n")
    if (
        inventory.count("shelter") == 1
        and inventory.count("wood") >= 10
        and inventory.count("metal") >= 6
    ):
        return _made(
            inventory,
            "upgraded shelter",
            {"wood": 10, "metal": 6, "shelter": 1},
            "You have upgraded your shelter! It has been added to your inventory.",
        )
    return CraftResult(
        "You cannot upgrade your shelter. You need a shelter, 10 wood and 6 metal\n",
        "nothing\n",
    )


def _fur_clothing(inventory: Inventory) -> CraftResult:
    if inventory.count("leather") >= 10:
        return _made(
            inventory,
            "fur clothing",
            {"leather": 10},
            "You crafted a fur clothing! It has been added to your inventory.",
        )
    return CraftResult(
        "You don't have enough leather to craft a fur clothing. You need 10 leather."
    )


def _boat(inventory: Inventory) -> CraftResult:
    if inventory.count("boat") != 0:
        return CraftResult("You already have a boat!", "Nothing\n")
    if inventory.count("wood") >= 35 and inventory.count("metal") >= 20:
        return _made(
            inventory,
            "boat",
            {"wood": 35, "metal": 20},
            "You crafted a boat! You can now attempt to escape the island!",
        )
    return CraftResult(
        "You don't have enough resource to craft a boat. You need 50 wood and 30 metal."
    )


def _gun(inventory: Inventory) -> CraftResult:
    if inventory.count("metal") >= 15 and inventory.count("gun&bullet blueprint") > 0:
        return _made(inventory, "gun&bullet", {"metal": 15}, "You crafted a gun&bullet")
    return CraftResult(
        "You don't have enough metal to craft a gun&bullet. "
        "You need 15 metal and a gun&bullet blueprint"
    )


def _signal_flare(inventory: Inventory) -> CraftResult:
    if inventory.count("metal") >= 20 and inventory.count("signal flare blueprint") > 0:
        return _made(inventory, "signal flare", {"metal": 20}, "You crafted a signal flare")
    return CraftResult(
        "You don't have enough metal to craft a signal flare. "
        "You need 20 metal and a signal flare blueprint"
    )


def _armor(inventory: Inventory) -> CraftResult:
    if (
        inventory.count("metal") >= 10
        and inventory.count("leather") >= 10
        and inventory.count("fur clothing") >= 1
        and inventory.count("armor blueprint") > 0
    ):
        return _made(
            inventory,
            "armor",
            {"metal": 10, "leather": 10, "fur clothing": 1},
            "You crafted an armor",
        )
    return CraftResult(
        "You cannot craft an armor. "
        "You need 10 metal, 10 leather, a fur clothing and an armor blueprint"
    )


_RECIPES: dict[int, Callable[[Inventory], CraftResult]] = {
    1: _campfire,
    2: _knife,
    3: _upgraded_knife,
    4: _shelter,
    5: _upgraded_shelter,
    6: _fur_clothing,
    7: _boat,
    8: _gun,
    9: _signal_flare,
    10: _armor,
}


def craft(inventory: Inventory, choice: int) -> CraftResult:
    """Craft the recipe numbered *choice* from the menu; 0 cancels."""
    if choice == 0:
        return CraftResult("You decided not to craft anything.", "Nothing\n", cancelled=True)
    recipe = _RECIPES.get(choice)
    if recipe is None:
        return CraftResult("Invalid choice. Please select a valid item to craft.", "Nothing\n")
    return recipe(inventory)