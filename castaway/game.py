"""The day-by-day game loop: menus, actions, nights and the end of the game."""

from __future__ import annotations

import argparse
import random
from collections.abc import Callable, Sequence

from castaway.crafting import craft, recipe_menu
from castaway.events import (
    CAVE_BASE_DAMAGE,
    animal_damage,
    check_health,
    enter_cave,
    gather,
    hunt,
    night_event,
    try_escape,
)
from castaway.food import cook_dish, cooking_menu, eat, eating_menu
from castaway.log import DEFAULT_LOG_PATH, SurvivalLog
from castaway.state import (
    MAX_STAT,
    Escaped,
    GameOver,
    Inventory,
    Stats,
    Weather,
    deduction,
    roll_weather,
)

ACTIONS_PER_DAY = 4
DISHES_PER_SESSION = 2
WARNING_HP_PENALTY = 20
RAIN_HP_LOSS = 20
RAIN_HUNGER_LOSS = 30
RAIN_MENTAL_LOSS = 5
REST_HP_GAIN = 20
REST_MENTAL_GAIN = 20

LOG_HEADER = "This Survival Log records your actions in each day\n"
BLUEPRINTS = ("gun&bullet blueprint", "signal flare blueprint", "armor blueprint")

INJURY_DEATH = "You have succumbed to your injuries. Game Over!"
NIGHT_DEATH = "You didn't survive the night. Game Over!"

_MENU_BORDER = "+------------------------------+"
_EXPLORE_BORDER = "+------------------------------------------------+"
_DAY_SEPARATOR = (
    "-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+",
    "+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-",
    "-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+",
    "+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-",
)


class Game:
    """One survival game on the island, driven by text input and output."""

    def __init__(
        self,
        log: SurvivalLog | None = None,
        input_func: Callable[[str], str] | None = None,
        output: Callable[[str], object] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.log = log if log is not None else SurvivalLog()
        self._input = input_func if input_func is not None else input
        self._output = output if output is not None else print
        self.rng = rng if rng is not None else random.Random()
        self.stats = Stats()
        self.inventory = Inventory()
        self.blueprints: list[str] = list(BLUEPRINTS)
        self.day = 1
        self.weather = Weather.SUNNY
        self.steps_remaining = 0

    # -- input and output helpers -------------------------------------------

    def _say(self, text: str = "") -> None:
        self._output(text)

    def _read_line(self, prompt: str = "") -> str:
        while True:
            text = self._input(prompt).strip()
            if text:
                return text

    def _read_char(self, prompt: str = "") -> str:
        return self._read_line(prompt)[0]

    def _read_int(self, prompt: str = "") -> int:
        text = self._read_line(prompt)
        try:
            return int(text.split()[0])
        except ValueError:
            return -1

    def _show_stats(self) -> None:
        self._say(self.stats.format_table())
        self._say("")

    def _show_bag(self) -> None:
        self._say(self.inventory.format_table())

    def _step_label(self) -> str:
        return f"Step {ACTIONS_PER_DAY + 1 - self.steps_remaining} "

    def _health_penalty(self) -> int:
        warnings = check_health(self.stats)
        for warning in warnings:
            self._say(warning)
        return WARNING_HP_PENALTY * len(warnings)

    def _clamp_needs(self) -> None:
        self.stats.hunger = min(max(self.stats.hunger, 0), MAX_STAT)
        self.stats.mental = min(max(self.stats.mental, 0), MAX_STAT)

    def _spend_effort(self, clamp: bool = True) -> None:
        hunger_loss, mental_loss = deduction(self.weather)
        self.stats.hp -= self._health_penalty()
        self.stats.hunger -= hunger_loss
        self.stats.mental -= mental_loss
        if clamp:
            self._clamp_needs()

    # -- the day ---------------------------------------------------------------

    def initialize(self) -> None:
        """Reset the player and start a fresh survival log."""
        self.stats = Stats()
        self.inventory = Inventory()
        self.blueprints = list(BLUEPRINTS)
        self.day = 1
        self.weather = Weather.SUNNY
        self.log.start(LOG_HEADER)
        self._say("Game initialized!")
        self._say(
            "Cooking is allowed only when you have crafted campfire "
            "and shelter is key to survive the night!!!"
        )

    def start_of_day(self) -> None:
        """Give the player a fresh set of actions and announce the weather."""
        self.steps_remaining = ACTIONS_PER_DAY
        self.log.append(f"Day {self.day}: Today's weather is {self.weather}\n")
        self._say(
            f"Good morning! It's your {self.day} day on the island. "
            f"The weather today is {self.weather}."
        )
        self._say(f"You have {self.steps_remaining} actions available today.")

    def selection_menu(self) -> tuple[str, bool]:
        """Show the action menu; return the choice and whether escape is offered."""
        lines = [
            _MENU_BORDER,
            "| What do you want to do next: |",
            _MENU_BORDER,
            "| [1] Exploring the island     |",
            "| [2] Eating                   |",
            "| [3] Crafting                 |",
            "| [4] Resting                  |",
            "| [5] Hunting                  |",
        ]
        if "campfire" in self.inventory:
            lines.append("| [6] Cooking                  |")
        ready = "signal flare" in self.inventory or "boat" in self.inventory
        if ready:
            lines.append("| [7] Attempt to escape        |")
        lines.append(_MENU_BORDER)
        self._say("\n".join(lines))
        choice = self._read_char("Please enter your choice: ")
        self._say("")
        return choice, ready

    def perform_action(self, choice: str, ready_to_escape: bool) -> None:
        """Carry out one menu choice.

        Raises GameOver if the player dies and Escaped if they get away.
        """
        handlers = {
            "1": self._explore_action,
            "2": self._eat_action,
            "3": self._craft_action,
            "4": self._rest_action,
            "5": self._hunt_action,
            "6": self._cook_action,
        }
        if choice == "7":
            self._escape_action(ready_to_escape)
        elif choice in handlers:
            handlers[choice]()
        else:
            self._say("Invalid input! Please select a valid option.")
        self._show_bag()
        if self.stats.hp <= 0:
            raise GameOver(INJURY_DEATH)

    def run_day(self) -> None:
        """Ask for actions until none remain for the day."""
        while self.steps_remaining > 0:
            choice, ready = self.selection_menu()
            self.perform_action(choice, ready)
            if self.steps_remaining > 0:
                self._say(f"You have {self.steps_remaining} steps remaining today.")
            else:
                self._say("You have no steps remaining for today.")

    def end_day(self) -> None:
        """Resolve the night and begin the next day."""
        self.day += 1
        self._say("The day has ended. Preparing for the next day...")
        for line in _DAY_SEPARATOR:
            self._say(line)
        outcome = night_event(self.stats, self.inventory, self.rng)
        for message in outcome.messages:
            self._say(message)
        self._show_stats()
        self.log.append("\n")
        if self.stats.hp <= 0:
            raise GameOver(NIGHT_DEATH)
        self.weather = roll_weather(self.rng)
        self.start_of_day()

    def play(self) -> bool:
        """Play until the player escapes (True) or dies (False)."""
        self.initialize()
        self.start_of_day()
        try:
            while True:
                self.run_day()
                self.end_day()
        except Escaped as escaped:
            self.log.append("Succeed!")
            self._say(str(escaped))
            return True
        except GameOver as death:
            self._say(str(death))
            self._say("We have a Survival Log for you.Do you want to read it? [Y/N]")
            self.log.append("You died")
            if self._read_char().lower() == "y":
                for line in self.log.read():
                    self._say(line)
            return False

    # -- individual actions ------------------------------------------------------

    def _explore_action(self) -> None:
        self.log.append(self._step_label() + "Exploring Island: \n")
        self._explore()
        self.steps_remaining -= 1
        if self.weather is Weather.EXTREME_RAINFALL:
            self.stats.hp -= RAIN_HP_LOSS
            self.stats.hp -= self._health_penalty()
            self.stats.hunger -= RAIN_HUNGER_LOSS
            self.stats.mental -= RAIN_MENTAL_LOSS
            self._clamp_needs()
        else:
            self._spend_effort()
        self._show_stats()

    def _explore(self) -> None:
        self._say(
            "\n".join(
                [
                    _EXPLORE_BORDER,
                    "| You can only look for either MATERIALS or      |",
                    "| INGREDIENTS each time.                         |",
                    "| Which one would you choose?                    |",
                    _EXPLORE_BORDER,
                    "| [M] MATERIALS                                  |",
                    "| [I] INGREDIENTS                                |",
                    _EXPLORE_BORDER,
                ]
            )
        )
        kind = self._read_char()
        event = self.rng.randint(1, 100)
        if event <= 20:
            damage = animal_damage(self.inventory)
            self._say(
                "You were attacked by a wild animal while exploring the island and lost "
                f"{damage} HP! Crafted items like knives or fur clothing have reduced the damage."
            )
            self.stats.hp -= damage
        elif event <= 40:
            self._visit_cave()

        if self.stats.hp <= 0:
            raise GameOver(INJURY_DEATH)

        shown, log_entry = gather(self.inventory, kind, self.rng)
        if log_entry is not None:
            self.log.append(log_entry)
        self._say(f"\nYou found <<< {shown} >>> during your exploration!")

    def _visit_cave(self) -> None:
        trap = CAVE_BASE_DAMAGE - self.inventory.shield()
        self._say(
            "*** You stumbled upon a mysterious cave that might hold hidden dangers "
            "or treasures! ***"
        )
        self._say(
            f"Exploring the cave has a 70% chance of being trapped, costing you {trap} HP. "
            "Crafted items like knives or fur clothing have reduced the damage."
        )
        if trap >= self.stats.hp:
            self._say(
                "HINT: If the cost of HP is larger than your current HP, you will die "
                "immediately. Consider crafting some weapons first."
            )
        answer = self._read_char("Do you wish to take the risk and enter the cave? (Y/N): ")
        self._say("")
        if answer.lower() == "y":
            for message in enter_cave(self.stats, self.inventory, self.blueprints, self.rng):
                self._say(message)
        else:
            self._say("You decided not to take the risk and left the cave untouched.")
        self._say(f"Your current HP: {self.stats.hp}")

    def _eat_action(self) -> None:
        self._show_bag()
        self._say(eating_menu())
        choice = self._read_int("What would you like to eat? Enter your choice: ")
        self._say(eat(self.stats, self.inventory, choice))
        self._show_stats()

    def _craft_action(self) -> None:
        self._show_bag()
        self.log.append(self._step_label() + "Crafting Items: ")
        self._craft_item()
        self.steps_remaining -= 1
        self._spend_effort()
        self._show_stats()

    def _craft_item(self) -> None:
        self._say(recipe_menu(self.inventory))
        choice = self._read_int("Enter the number of the item you want to craft, or 0 to cancel: ")
        result = craft(self.inventory, choice)
        if result.log_entry is not None:
            self.log.append(result.log_entry)
        self._say(result.message)
        if not result.cancelled:
            self._say("\nYour updated bag after crafting:")
            self._show_bag()

    def _rest_action(self) -> None:
        self._rest()
        self.log.append(self._step_label() + "Resting: You had a good rest\n")
        self.steps_remaining -= 1
        self._show_stats()

    def _rest(self) -> None:
        self._say("You take a rest and regain energy.")
        self.stats.hp += REST_HP_GAIN
        self.stats.hp -= self._health_penalty()
        self.stats.hunger -= deduction(self.weather)[0]
        self.stats.mental += REST_MENTAL_GAIN
        self.stats.clamp()

    def _hunt_action(self) -> None:
        self.log.append(self._step_label() + "Hunting: ")
        messages, log_entry = hunt(self.stats, self.inventory, self.rng)
        for message in messages:
            self._say(message)
        self.log.append(log_entry)
        self.steps_remaining -= 1
        self._spend_effort()
        self._show_stats()

    def _cook_action(self) -> None:
        self._show_bag()
        self.log.append(self._step_label() + "Cooking: ")
        if "campfire" in self.inventory:
            self._cook_food()
            self.steps_remaining -= 1
        else:
            self.log.append("Cooking is not available without a campfire!\n")
            self._say("Cooking is not available without a campfire!")
        self._spend_effort()
        self._show_stats()

    def _cook_food(self) -> None:
        if self.inventory.count("campfire") < 1:
            self._say("!!! You need a campfire to cook food. Craft one first!!!\n")
            # The step is given back; crafting takes its place.
            self.steps_remaining += 1
            self._craft_item()
            return
        self._say(cooking_menu())
        cooked = 0
        while cooked < DISHES_PER_SESSION:
            choice = self._read_int("Select a dish to cook (1-6), or enter 0 to stop: ")
            result = cook_dish(self.inventory, choice)
            if result.log_entry is not None:
                self.log.append(result.log_entry)
            if result.cooked:
                cooked += 1
                self._say(
                    f"{result.message} Remaining dishes to cook: {DISHES_PER_SESSION - cooked}"
                )
            else:
                self._say(result.message)
            if result.stop:
                break
        if cooked == 0:
            self._say("You didn't cook anything today.")
        else:
            self._say(f"Cooking session complete. You cooked {cooked} dish(es).")

    def _escape_action(self, ready_to_escape: bool) -> None:
        if ready_to_escape:
            self.log.append(self._step_label() + "Attempt to escape: ")
            messages, log_entry = try_escape(self.stats, self.inventory, self.rng)
            for message in messages:
                self._say(message)
            self.log.append(log_entry)
            self._spend_effort(clamp=False)
            self.steps_remaining -= 1
        else:
            self._say("You are not ready to escape yet!")
        self._show_stats()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game in the terminal."""
    parser = argparse.ArgumentParser(
        prog="castaway",
        description="Survive on a deserted island until you can escape.",
    )
    parser.add_argument("--log", default=DEFAULT_LOG_PATH, help="path of the survival log")
    parser.add_argument("--seed", type=int, default=None, help="seed for the random events")
    args = parser.parse_args(argv)
    game = Game(SurvivalLog(args.log), rng=random.Random(args.seed))
    try:
        game.play()
    except (EOFError, KeyboardInterrupt):
        print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())