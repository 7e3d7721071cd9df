# castaway

A turn-based survival game that runs in the terminal. You are stranded on an
island and get four actions each day. You have to keep your HP, hunger and
mental bars up and live through each night until you can get off the island.

## Installing

```
pip install .
```

## Playing

```
castaway
```

Options:

- `--log PATH`: where to write the survival log. The default is a file named
  `Survival Log` in the current directory.
- `--seed N`: a seed for the random events, which makes a game repeatable.

Each morning the game shows the day's weather and a menu of actions:

- **Exploring the island**: look for materials (wood, metal, herbs) or
  ingredients (fruit, fish, meat). A wild animal may attack you. You may also
  come across a cave. If you enter it, it may trap you, and it may hold a
  blueprint.
- **Eating**: eat raw or cooked food to restore hunger and mental. Herbs
  restore HP. Eating does not use up an action.
- **Crafting**: make a campfire, knives, a shelter, fur clothing or a boat.
  A blueprint unlocks the recipe for gun&bullet, a signal flare or armor.
- **Resting**: recover HP and mental.
- **Hunting**: always gives beef and leather. A bear or a wolf may attack
  you, and then you also get its meat.
- **Cooking**: offered once you have a campfire. You can cook up to two
  dishes in one session.
- **Attempt to escape**: offered once you have a boat or a signal flare.
  The attempt succeeds 70% of the time. A failed attempt costs 50 HP.

The weather changes what each action costs. Extreme rainfall makes exploring
much harder. Weapons and clothing reduce the damage animals do. A shelter
lowers the risk at night, and an upgraded shelter keeps you safe all night.

Each step you take is appended to the survival log. If you die, the game
offers to print the log.

## Using it as a library

You can call the game logic directly through these modules:

- `castaway.state`: `Stats`, `Inventory`, `Weather`, `roll_weather`,
  `deduction`, and the `GameOver` and `Escaped` exceptions
- `castaway.crafting`: `recipe_menu`, `craft` and `CraftResult`
- `castaway.food`: `eat`, `cook_dish`, `CookResult`, `eating_menu` and
  `cooking_menu`
- `castaway.events`: `gather`, `enter_cave`, `hunt`, `night_event`
  (returning a `NightOutcome`), `try_escape`, `animal_damage` and
  `check_health`
- `castaway.log`: `SurvivalLog`
- `castaway.game`: `Game` runs the day loop. You can give it any input
  function, output callable, `SurvivalLog` and `random.Random`. `main` is the
  command-line entry point.

```python
from castaway.state import Inventory
from castaway.crafting import craft

bag = Inventory()
bag.add("wood", 5)
result = craft(bag, 1)  # campfire
print(result.message)
print(bag.count("campfire"))  # 1
```

## What it does not do

You cannot save a game and continue it later. The survival log only records
what happened and cannot be loaded back in. Each run starts a new game.

## Running the tests

```
pip install .[test]
pytest
```