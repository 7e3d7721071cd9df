import pytest

from castaway.food import CookResult, cook_dish, cooking_menu, eat, eating_menu
from castaway.state import Inventory, Stats


def bag_with(**items):
    bag = Inventory()
    for name, qty in items.items():
        bag.add(name.replace("_", " "), qty)
    return bag


def test_eat_fruit_recovers_hunger():
    stats = Stats(hp=50, hunger=50, mental=50)
    bag = bag_with(fruit=1)
    message = eat(stats, bag, 1)
    assert message == "You ate a fruit. Hunger bar recovered by 30."
    assert stats.hunger == 50 + 30
    assert stats.hp == 50 and stats.mental == 50
    assert bag.count("fruit") == 0


def test_eat_raw_fish_costs_hp_and_mental():
    stats = Stats(hp=50, hunger=50, mental=50)
    bag = bag_with(fish=2)
    eat(stats, bag, 2)
    assert stats.hunger == 50 + 30
    assert stats.hp == 50 - 20
    assert stats.mental == 50 - 5
    assert bag.count("fish") == 1


def test_raw_meat_losses_are_not_clamped():
    stats = Stats(hp=10, hunger=90, mental=10)
    eat(stats, bag_with(meat=1), 3)
    assert stats.hp == 10 - 20
    assert stats.mental == 10 - 15
    assert stats.hunger == 100


@pytest.mark.parametrize("choice, item", [(4, "roast fish"), (6, "roast beef"), (7, "roast bear meat"), (8, "roast wolf meat")])
def test_roast_food_caps_stats(choice, item):
    stats = Stats(hp=100, hunger=95, mental=95)
    bag = bag_with(**{item.replace(" ", "_"): 1})
    eat(stats, bag, choice)
    assert stats.hunger == 100
    assert stats.mental == 100
    assert bag.count(item) == 0


def test_herb_heals_up_to_max():
    stats = Stats(hp=70, hunger=40, mental=40)
    message = eat(stats, bag_with(herb=1), 9)
    assert message == "You ate herb and recovered 60 HP."
    assert stats.hp == 100
    assert stats.hunger == 40


def test_eat_missing_food_changes_nothing():
    stats = Stats(hp=50, hunger=50, mental=50)
    message = eat(stats, Inventory(), 5)
    assert message == "You have no roast meat!"
    assert stats == Stats(hp=50, hunger=50, mental=50)


def test_eat_invalid_choice():
    stats = Stats()
    assert eat(stats, bag_with(fruit=1), 12) == "Invalid choice! Please select a valid food option."
    assert stats == Stats()


def test_cook_stop():
    result = cook_dish(Inventory(), 0)
    assert result.stop
    assert result.log_entry == "You decided to stop cooking.\n"
    assert not result.cooked


def test_cook_invalid_choice_has_no_log():
    result = cook_dish(bag_with(fish=1, wood=1), 9)
    assert result == CookResult("Invalid choice. Please select a valid dish.")


def test_cook_success_moves_items():
    bag = bag_with(fish=1, wood=2)
    result = cook_dish(bag, 1)
    assert result.dish == "roast fish"
    assert result.cooked
    assert result.log_entry == "You had made a roast fish\n"
    assert bag.count("fish") == 0
    assert bag.count("wood") == 1
    assert bag.count("roast fish") == 1


def test_cook_without_ingredient_still_logs():
    bag = bag_with(wood=1)
    result = cook_dish(bag, 5)
    assert not result.cooked
    assert result.message == "You don't have enough bear meat to cook roast bear meat."
    assert result.log_entry == "You had made a roast bear meat\n"
    assert bag.count("wood") == 1


def test_cook_without_wood():
    bag = bag_with(wolf_meat=1)
    result = cook_dish(bag, 6)
    assert result.message == "You don't have enough wood to cook roast wolf meat."
    assert bag.count("wolf meat") == 1


def test_cooked_dish_can_be_eaten():
    bag = bag_with(beef=1, wood=1)
    cook_dish(bag, 3)
    stats = Stats(hp=100, hunger=10, mental=10)
    eat(stats, bag, 6)
    assert stats.hunger == 10 + 80
    assert stats.mental == 10 + 20
    assert bag.nonzero() == []


def test_menus_render_boxes():
    eating = eating_menu().splitlines()
    cooking = cooking_menu().splitlines()
    assert eating[1] == "|          Eating Menu          |"
    assert eating[0] == eating[-1]
    assert "| 4. Roast Mutton   | Mutton -1, Wood -1   |" in cooking
    assert cooking[0] == cooking[-1]