"""Named screens and the ``screen`` command that creates and reopens them."""

from __future__ import annotations

import sys
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime

TIMESTAMP_FORMAT = "%m/%d/%Y, %I:%M %p"


class ScreenCommandError(ValueError):
    """Raised for a malformed or impossible ``screen`` command."""


def _clear_terminal() -> None:
    sys.stdout.write("\033[2J\033[H")
    sys.stdout.flush()


@dataclass
class Screen:
    """A screen with instruction counters and its creation time."""

    name: str
    current_instruction: int = 0
    total_instruction: int = 0
    time_created: datetime = field(default_factory=datetime.now)

    def timestamp(self) -> str:
        return self.time_created.strftime(TIMESTAMP_FORMAT)

    def display(self) -> str:
        """Print the screen's details and return the printed text."""
        text = "\n".join(
            (
                f"Screen Name: {self.name}",
                f"Current Instruction: {self.current_instruction}",
                f"Total Instructions: {self.total_instruction}",
                f"Timestamp of when the screen is created: {self.timestamp()}",
            )
        )
        print(text)
        return text


class CommandParser:
    """Parses ``screen -s|-r|-ls <name>`` commands against a table of screens."""

    def __init__(self, clear: Callable[[], None] | None = None) -> None:
        self.screens: dict[str, Screen] = {}
        self._clear = clear or _clear_terminal

    def parse(self, text: str) -> Screen | None:
        """Run one command line; return the screen shown, if any."""
        words = text.split()
        command, option, name = (words + ["", "", ""])[:3]
        if command != "screen":
            raise ScreenCommandError(f"Unknown command: {command}")
        return self._screen(option, name)

    def _screen(self, option: str, name: str) -> Screen | None:
        if option == "-s":
            if not name:
                raise ScreenCommandError("No name provided for screen.")
            if name in self.screens:
                raise ScreenCommandError("Screen already exists. Please load instead.")
            screen = self.screens[name] = Screen(name)
        elif option == "-r":
            if not name:
                raise ScreenCommandError("No name provided for screen.")
            try:
                screen = self.screens[name]
            except KeyError:
                raise ScreenCommandError(
                    "Inputted screen name doesn't exists."
                ) from None
        elif option == "-ls":
            print("LIST SCREEN HERE")
            return None
        else:
            raise ScreenCommandError(f"Unknown option for screen: {option}")
        self._clear()
        screen.display()
        return screen