"""Interactive consoles: the abstract console, process screens and the main prompt."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Protocol

from .process import Process
from .screen import ScreenCommandError

PROMPT = "root:\\\\>"

BANNER = (
    "   ______     ______     ______     ______   ______     ______     __  __    ",
    r"  /\  ___\   /\  ___\   /\  __ \   /\  == \ /\  ___\   /\  ___\   /\ \_\ \   ",
    r"  \ \ \____  \ \___  \  \ \ \/\ \  \ \  _-/ \ \  __\   \ \___  \  \ \____ \  ",
    r"   \ \_____\  \/\_____\  \ \_____\  \ \_\    \ \_____\  \/\_____\  \/\_____\ ",
    r"    \/_____/   \/_____/   \/_____/   \/_/     \/_____/   \/_____/   \/_____/ ",
)

WELCOME = "Hello, Welcome to CSOPESY command line!"
HINT_UNINITIALIZED = "Type 'initialize' to initialize the console, 'exit' to quit"
HINT_INITIALIZED = "Type 'clear' to clear the screen, 'exit' to quit"
NOT_INITIALIZED = (
    "Console has not been initialized yet. Please type 'initialize' to start."
)


class ConsoleError(LookupError):
    """Raised when a console cannot be found, switched to or driven."""


class _Manager(Protocol):
    def exit_application(self) -> None: ...

    def switch_to_screen(self, screen_name: str) -> None: ...


def clear_screen() -> None:
    """Clear the terminal and move the cursor home."""
    sys.stdout.write("\033[2J\033[H")
    sys.stdout.flush()


class Console(ABC):
    """A named console that can be enabled, fed input and drawn."""

    def __init__(self, name: str = "") -> None:
        self.name = name

    @abstractmethod
    def on_enabled(self) -> None:
        """Called when the console becomes the current one."""

    @abstractmethod
    def display(self) -> None:
        """Draw the console after input has been processed."""

    @abstractmethod
    def process(self) -> None:
        """Read and interpret input."""


class BaseScreen(Console):
    """A screen showing the progress of a fresh process with the given name."""

    def __init__(self, process_name: str) -> None:
        super().__init__(process_name)
        self.attached_process = Process(0, process_name)
        self.refreshed = False

    def on_enabled(self) -> None:
        clear_screen()
        self.print_process_info()

    def process(self) -> None:
        """Screens take no input of their own."""

    def display(self) -> None:
        """Screens draw nothing beyond what ``on_enabled`` shows."""

    def print_process_info(self) -> None:
        proc = self.attached_process
        print()
        print(f"Process: {proc.name}")
        print(f"ID: {proc.pid}")
        print()
        if proc.is_finished:
            print("Finished!")
        else:
            print(f"Current instruction line: {proc.command_counter}")
            print(f"Lines of code: {proc.lines_of_code}")
        print()


class MainConsole(Console):
    """The command prompt that reads commands and acts on them when drawn."""

    def __init__(
        self,
        name: str = "MainConsole",
        manager: _Manager | None = None,
        input_fn: Callable[[str], str] | None = None,
    ) -> None:
        super().__init__(name)
        self.manager = manager
        self._input = input_fn
        self.command_message = ""
        self.screen_name = ""
        self.initialized = False

    def _require_manager(self) -> _Manager:
        if self.manager is None:
            raise ConsoleError("No console manager attached.")
        return self.manager

    def on_enabled(self) -> None:
        clear_screen()
        self.print_header()

    def process(self) -> None:
        """Prompt for one line of input; end of input counts as ``exit``."""
        reader = self._input or input
        try:
            line = reader(PROMPT)
        except EOFError:
            line = "exit"
        self.handle_input(line)

    def handle_input(self, line: str) -> str:
        """Interpret one command line and return the pending command message."""
        command, arg1, arg2 = (line.split() + ["", "", ""])[:3]
        if command in ("exit", "clear"):
            self.command_message = command
        elif command == "initialize":
            self.command_message = command
            self.initialized = True
        elif command == "screen" and arg1 == "-r" and arg2:
            self.command_message = "screenR"
            self.screen_name = arg2
        elif command == "screen" and arg1 == "-s" and arg2:
            self.command_message = "screenS"
            self.screen_name = arg2
        elif command == "screen" and arg1 == "-ls":
            self.command_message = "screenLS"
        else:
            self.command_message = command
        return self.command_message

    def display(self) -> None:
        if not self.command_message:
            self.on_enabled()

        message = self.command_message
        if not self.initialized:
            if message == "exit":
                self.command_message = ""
                self._require_manager().exit_application()
            else:
                print(NOT_INITIALIZED)
            return

        if message in ("initialize", "screenS", "schedule-test", "scheduler-stop"):
            self.command_message = ""
        elif message == "clear":
            clear_screen()
            self.print_header()
            self.command_message = ""
        elif message == "exit":
            self.command_message = ""
            self._require_manager().exit_application()
        elif message == "screenR":
            self.command_message = ""
            try:
                self._require_manager().switch_to_screen(self.screen_name)
            except ConsoleError as err:
                print(err, file=sys.stderr)
        elif message == "report-util":
            self.report_util()
        elif message == "unknown-command":
            self.command_message = ""
            print("Unknown command. Please try again.")

    def print_header(self) -> None:
        for line in BANNER:
            print(line)
        print(WELCOME)
        print(HINT_INITIALIZED if self.initialized else HINT_UNINITIALIZED)

    def report_util(self) -> None:
        print("report-util command recognized. Doing something.")

    def process_screen(self, screen_command: str, screen_name: str) -> None:
        """Handle a ``screen`` option; raise ScreenCommandError on bad input."""
        if screen_command == "-s":
            if not screen_name:
                raise ScreenCommandError("No name provided for screen.")
            print("MAKE A PROCESS HERE")
        elif screen_command == "-r":
            if not screen_name:
                raise ScreenCommandError("No name provided for screen.")
            raise ScreenCommandError("Inputted screen name doesn't exists.")
        else:
            raise ScreenCommandError("Unknown option for screen: ")