"""Console manager singleton and the application's main loop."""

from __future__ import annotations

from collections.abc import Callable

from .consoles import Console, ConsoleError, MainConsole, clear_screen

MAIN_CONSOLE = "MAIN_CONSOLE"
MARQUEE_CONSOLE = "MARQUEE_CONSOLE"
SCHEDULING_CONSOLE = "SCHEDULING_CONSOLE"
MEMORY_CONSOLE = "MEMORY_CONSOLE"


class ConsoleManager:
    """Holds the named consoles and tracks which one is current."""

    _instance: ConsoleManager | None = None

    def __init__(self, input_fn: Callable[[str], str] | None = None) -> None:
        self.running = True
        self.consoles: dict[str, Console] = {
            MAIN_CONSOLE: MainConsole(manager=self, input_fn=input_fn),
        }
        self.current: Console | None = None
        self.previous: Console | None = None
        self.switch_console(MAIN_CONSOLE)

    @classmethod
    def get_instance(cls) -> ConsoleManager | None:
        return cls._instance

    @classmethod
    def initialize(cls) -> ConsoleManager:
        """Create the shared instance if there is none, and return it."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def destroy(cls) -> None:
        cls._instance = None

    def _require_current(self) -> Console:
        if self.current is None:
            raise ConsoleError("No console is currently set.")
        return self.current

    def draw_console(self) -> None:
        self._require_current().display()

    def process(self) -> None:
        self._require_current().process()

    def switch_console(self, console_name: str) -> None:
        """Make the named console current without remembering the old one."""
        try:
            console = self.consoles[console_name]
        except KeyError:
            raise ConsoleError(
                f"Console name '{console_name}' not initialized."
            ) from None
        clear_screen()
        self.current = console
        console.on_enabled()

    def return_to_previous_console(self) -> None:
        if self.previous is None:
            raise ConsoleError("No previous console to return to.")
        clear_screen()
        self.current = self.previous
        self.current.on_enabled()

    def switch_to_screen(self, screen_name: str) -> None:
        """Make the named screen current, remembering the console left behind."""
        try:
            screen = self.consoles[screen_name]
        except KeyError:
            raise ConsoleError(f"Screen name '{screen_name}' not found.") from None
        clear_screen()
        self.previous = self.current
        self.current = screen
        screen.on_enabled()

    def exit_application(self) -> None:
        self.running = False

    @property
    def is_running(self) -> bool:
        return self.running


def main(argv: list[str] | None = None) -> int:
    """Run the console until the user exits."""
    manager = ConsoleManager.initialize()
    try:
        while manager.is_running:
            manager.process()
            manager.draw_console()
    finally:
        ConsoleManager.destroy()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())