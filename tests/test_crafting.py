import pytest

from castaway.crafting import CraftResult, craft, recipe_menu
from castaway.state import Inventory


def make_bag(**items):
    bag = Inventory()
    for name, qty in items.items():
        bag.add(name.replace("_", " "), qty)
    return bag


def test_cancel_crafts_nothing():
    bag = make_bag(wood=10)
    result = craft(bag, 0)
    assert result.cancelled
    assert result.log_entry == "Nothing\n"
    assert result.message == "You decided not to craft anything."
    assert bag.count("wood") == 10


def test_invalid_choice_logs_nothing():
    bag = make_bag(wood=10)
    result = craft(bag, 42)
    assert result == CraftResult(
        "Invalid choice. Please select a valid item to craft.", "Nothing\n"
    )
    assert bag.count("wood") == 10


def test_campfire_success():
    bag = make_bag(wood=5)
    result = craft(bag, 1)
    assert result.crafted == "campfire"
    assert result.log_entry == "campfire\n"
    assert bag.count("campfire") == 1
    assert bag.count("wood") == 0


def test_campfire_only_once():
    bag = make_bag(wood=10, campfire=1)
    result = craft(bag, 1)
    assert result.crafted is None
    assert result.log_entry == "Nothing\n"
    assert bag.count("wood") == 10


def test_campfire_not_enough_wood_leaves_no_log():
    bag = make_bag(wood=4)
    result = craft(bag, 1)
    assert result.log_entry is None
    assert result.crafted is None
    assert bag.count("wood") == 4
    assert "campfire" in bag


def test_knife_and_upgrade():
    bag = make_bag(wood=13, metal=13)
    assert craft(bag, 2).crafted == "knife"
    assert bag.count("knife") == 1
    result = craft(bag, 3)
    assert result.crafted == "upgraded knife"
    assert bag.count("knife") == 0
    assert bag.count("upgraded knife") == 1
    assert bag.count("wood") == 0
    assert bag.count("metal") == 0


def test_upgrade_knife_requires_knife():
    bag = make_bag(wood=10, metal=10)
    result = craft(bag, 3)
    assert result.crafted is None
    assert result.log_entry is None
    assert bag.count("wood") == 10


def test_shelter_then_upgrade():
    bag = make_bag(wood=20, metal=10)
    assert craft(bag, 4).log_entry == "shelter\n"
    result = craft(bag, 5)
    assert result.log_entry == "upgraded shelter\n"
    assert bag.count("shelter") == 0
    assert bag.count("upgraded shelter") == 1
    assert bag.count("wood") == 0
    assert bag.count("metal") == 0


def test_shelter_already_built():
    bag = make_bag(wood=20, metal=10, shelter=1)
    result = craft(bag, 4)
    assert result.log_entry == "nothing\n"
    assert result.message == "You already have a shelter"
    assert bag.count("wood") == 20


def test_upgraded_shelter_needs_shelter():
    bag = make_bag(wood=20, metal=10)
    result = craft(bag, 5)
    assert result.log_entry == "nothing\n"
    assert bag.count("upgraded shelter") == 0


def test_fur_clothing():
    bag = make_bag(leather=10)
    assert craft(bag, 6).crafted == "fur clothing"
    assert bag.count("leather") == 0
    assert craft(bag, 6).crafted is None


def test_failed_boat_still_registers_boat():
    bag = make_bag(wood=1)
    result = craft(bag, 7)
    assert result.crafted is None
    assert "boat" in bag
    assert bag.count("boat") == 0


def test_boat_success_and_only_once():
    bag = make_bag(wood=70, metal=40)
    assert craft(bag, 7).crafted == "boat"
    again = craft(bag, 7)
    assert again.message == "You already have a boat!"
    assert bag.count("boat") == 1
    assert bag.count("wood") == 35


@pytest.mark.parametrize(
    "choice, item, blueprint, extra",
    [
        (8, "gun&bullet", "gun&bullet blueprint", {"metal": 15}),
        (9, "signal flare", "signal flare blueprint", {"metal": 20}),
        (10, "armor", "armor blueprint", {"metal": 10, "leather": 10, "fur clothing": 1}),
    ],
)
def test_blueprint_items_need_blueprint(choice, item, blueprint, extra):
    bag = Inventory()
    for name, qty in extra.items():
        bag.add(name, qty)
    assert craft(bag, choice).crafted is None
    bag.add(blueprint)
    result = craft(bag, choice)
    assert result.crafted == item
    assert result.log_entry == f"{item}\n"
    assert all(bag.count(name) == 0 for name in extra)


def test_recipe_menu_shows_unlocked_recipes_only():
    bag = Inventory()
    plain = recipe_menu(bag)
    assert "| 1. Campfire       | Wood-5               |" in plain
    assert "Gun&bullet" not in plain
    bag.add("signal flare blueprint")
    unlocked = recipe_menu(bag)
    assert "| 9. Signal Flare   | Metal-20             |" in unlocked
    assert "Armor" not in unlocked
    assert len(unlocked.splitlines()) == len(plain.splitlines()) + 1