"""Instructions that a process executes one line at a time."""

from __future__ import annotations

from enum import Enum, auto

from .worker import Worker


class CommandType(Enum):
    """Kinds of instruction a process can hold."""

    IO = auto()
    PRINT = auto()


class Command:
    """A single instruction belonging to a process."""

    def __init__(self, pid: int, command_type: CommandType) -> None:
        self.pid = pid
        self.command_type = command_type

    def execute(self) -> None:
        """Spend the fixed time one instruction takes."""
        Worker.sleep(10)


class PrintCommand(Command):
    """An instruction that produces a line of output tagged with its process."""

    def __init__(self, pid: int, text: str) -> None:
        super().__init__(pid, CommandType.PRINT)
        self.text = text

    @property
    def message(self) -> str:
        return f"PID {self.pid}:{self.text}\n"

    def execute(self) -> str:
        """Run the instruction and return the message it produced."""
        super().execute()
        return self.message