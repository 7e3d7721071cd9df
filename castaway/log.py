"""The survival log: a plain text file recording what happened each day."""

from __future__ import annotations

from pathlib import Path

DEFAULT_LOG_PATH = "Survival Log"


class SurvivalLog:
    """Append-only text log of the player's actions, kept in a file."""

    def __init__(self, path: str | Path = DEFAULT_LOG_PATH) -> None:
        self.path = Path(path)

    def start(self, header: str) -> None:
        """Create or truncate the log and write *header* followed by a newline."""
        with self.path.open("w", encoding="utf-8") as handle:
            handle.write(header + "\n")

    def append(self, text: str) -> None:
        """Append *text* exactly as given, with no newline added."""
        with self.path.open("a", encoding="utf-8") as handle:
            handle.write(text)

    def read(self) -> list[str]:
        """Return the log's lines without their line endings.

        Raises FileNotFoundError if the log has not been created.
        """
        with self.path.open("r", encoding="utf-8") as handle:
            return handle.read().splitlines()