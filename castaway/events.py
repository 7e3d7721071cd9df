"""Random events on the island: exploring, the cave, hunting, nights and escape."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from castaway.state import Escaped, GameOver, Inventory, Stats

ANIMAL_BASE_DAMAGE = 40
CAVE_BASE_DAMAGE = 140
FAILED_ESCAPE_DAMAGE = 50
POOR_SLEEP_MENTAL_LOSS = 15
LOW_STAT_THRESHOLD = 20

# Each gathering kind maps to four equally likely finds:
# (items gained, text shown to the player, survival-log entry).
_GATHER_TABLES: dict[str, tuple[tuple[tuple[tuple[str, int], ...], str, str], ...]] = {
    "m": (
        ((("metal", 2), ("wood", 3)), "+2 metal, +3 wood",
         "You gained 2 metal and 3 wood during the exploration\n"),
        ((("wood", 5), ("herb", 1)), "+5 wood, +1 herb",
         "You gained 5 wood and 1 herb during the exploration\n"),
        ((("metal", 5),), "+5 metal",
         "You gained 5 metal during the exploration\n"),
        ((("metal", 3), ("wood", 3), ("herb", 1)), "+3 metal, +3 wood, +1 herb",
         "You gained 3 metal, 3 wood and 1 herb during the exploration\n"),
    ),
    "i": (
        ((("fruit", 1), ("fish", 1)), "+1 fruit, +1 fish",
         "You gained 1 fruit and 1 fish during the exploration\n"),
        ((("fruit", 1), ("meat", 1)), "+1 fruit, +1 meat",
         "You gained 1 fruit and 1 meat during the exploration\n"),
        ((("fish", 1), ("meat", 1)), "+1 fish, +1 meat",
         "You gained 1 fish and 1 meat during the exploration\n"),
        ((("fruit", 1), ("fish", 1), ("meat", 1)), "+1 fruit, +1 fish, +1 meat",
         "You gained 1 fruit, 1 fish and 1 meat during the exploration\n"),
    ),
}


@dataclass
class NightOutcome:
    """What happened overnight: the messages shown and the losses suffered."""

    messages: list[str] = field(default_factory=list)
    damage: int = 0
    mental_loss: int = 0

    @property
    def attacked(self) -> bool:
        return self.damage > 0 or any("attacked" in line for line in self.messages)

    @property
    def slept_poorly(self) -> bool:
        return self.mental_loss > 0


def animal_damage(inventory: Inventory) -> int:
    """HP lost to an animal attack once the player's gear has absorbed its share."""
    return max(ANIMAL_BASE_DAMAGE - inventory.shield(), 0)


def gather(inventory: Inventory, kind: str, rng: random.Random) -> tuple[str, str | None]:
    """Gather materials ("M") or ingredients ("I") into the bag.

    Returns the text describing what was found and the survival-log entry.
    An unknown kind gathers nothing and returns ("", None).
    """
    table = _GATHER_TABLES.get(kind.lower()) if len(kind) == 1 else None
    if table is None:
        return "", None
    items, shown, log_entry = table[rng.randrange(len(table))]
    for item, amount in items:
        inventory.add(item, amount)
    return shown, log_entry


def enter_cave(
    stats: Stats, inventory: Inventory, blueprints: list[str], rng: random.Random
) -> list[str]:
    """Explore a cave the player chose to enter and return the messages.

    There is a 70% chance of a trap costing HP and a 90% chance of finding
    one of the remaining *blueprints*, which is removed from that list.
    """
    messages: list[str] = []
    roll = rng.randint(1, 100)
    if roll <= 70:
        damage = max(CAVE_BASE_DAMAGE - inventory.shield(), 0)
        stats.hp -= damage
        messages.append(f"You were trapped in the cave and lost {damage} HP!")
    if roll <= 90:
        if blueprints:
            blueprint = blueprints.pop(rng.randrange(len(blueprints)))
            inventory.add(blueprint)
            messages.append(
                f"Congrats! You discovered valuable {blueprint} inside the cave! "
                "These could help you craft powerful items."
            )
        else:
            messages.append("The cave held no blueprints you had not already found.")
    else:
        messages.append(
            "You carefully explored the cave but found nothing unusual. "
            "At least you came out unharmed."
        )
    return messages


def hunt(stats: Stats, inventory: Inventory, rng: random.Random) -> tuple[list[str], str]:
    """Go hunting; return the messages and the survival-log entry.

    A bear or a wolf attacks 35% of the time each; every hunt yields one beef
    and three leather. HP never drops below zero here.
    """
    roll = rng.randrange(100)
    damage = animal_damage(inventory)
    messages: list[str] = []
    if roll < 35:
        stats.hp -= damage
        inventory.add("bear meat")
        summary = "You successfully hunted a bear and obtained 1 bear meat, 1 beef and 3 leather!"
        messages.append(f" You lost {damage} HP  in a bear attack!")
    elif roll < 70:
        stats.hp -= damage
        inventory.add("wolf meat")
        summary = "You successfully hunted a wolf and obtained 1 wolf meat, 1 beef and 3 leather!"
        messages.append(f" You lost {damage} HP in a wolf attack!")
    else:
        summary = "You did not encounter any attack and obtained 1 beef and 3 leather!"
    messages.append(summary)
    inventory.add("beef", 1)
    inventory.add("leather", 3)
    stats.hp = max(stats.hp, 0)
    return messages, summary + "\n"


def _animal_attack(stats: Stats, inventory: Inventory, outcome: NightOutcome) -> None:
    damage = animal_damage(inventory)
    stats.hp -= damage
    outcome.damage = damage
    outcome.messages.append(
        f"You were attacked by a wild animal during the night and lost {damage} HP!"
    )


def _poor_sleep(stats: Stats, outcome: NightOutcome) -> None:
    stats.mental -= POOR_SLEEP_MENTAL_LOSS
    outcome.mental_loss = POOR_SLEEP_MENTAL_LOSS
    outcome.messages.append(
        "You have had a poor sleeping quality at night and your mental bar droped by 15!"
    )


def night_event(stats: Stats, inventory: Inventory, rng: random.Random) -> NightOutcome:
    """Resolve the night: shelter lowers the odds of an attack or of poor sleep."""
    roll = rng.randint(0, 100)
    outcome = NightOutcome(["*** Night is falling... ***"])
    if inventory.count("upgraded shelter") == 1:
        outcome.messages.append("Your upgraded shelter kept you safe through the night.")
        return outcome
    if inventory.count("shelter") == 1:
        outcome.messages.append("Your shelter kept you safe, but it wasn't very comfortable.")
        safe_until, attack_until = 70, 90
    else:
        outcome.messages.append(
            "You managed to survive the night without a shelter, but it was tough."
        )
        safe_until, attack_until = 60, 80
    if roll <= safe_until:
        return outcome
    if roll <= attack_until:
        _animal_attack(stats, inventory, outcome)
    else:
        _poor_sleep(stats, outcome)
    return outcome


def try_escape(stats: Stats, inventory: Inventory, rng: random.Random) -> tuple[list[str], str]:
    """Attempt to leave the island with a boat or signal flare.

    Raises Escaped on success (70% chance); otherwise returns the messages
    and the survival-log entry. A failed attempt costs 50 HP.
    """
    if "boat" not in inventory and "signal flare" not in inventory:
        return ["You do not have the necessary items to attempt an escape!"], "Nothing"
    messages = ["You have the necessary items to attempt an escape!"]
    if rng.randrange(100) < 70:
        raise Escaped("Congratulations! You have successfully escaped the island!")
    stats.hp = max(stats.hp - FAILED_ESCAPE_DAMAGE, 0)
    messages.append("Your escape attempt failed.")
    messages.append(
        f"You lost 50 HP during the failed escape attempt. Current HP: {stats.hp}"
    )
    return messages, "Failed!"


def check_health(stats: Stats) -> list[str]:
    """Return a warning for each stat that has fallen dangerously low.

    Raises GameOver if HP has run out.
    """
    if stats.hp <= 0:
        raise GameOver("You died...")
    warnings = []
    if stats.hunger < LOW_STAT_THRESHOLD:
        warnings.append("You are starving! WARNING!!!")
    if stats.mental < LOW_STAT_THRESHOLD:
        warnings.append("Your mental is breaking down! WARNING!!!")
    return warnings