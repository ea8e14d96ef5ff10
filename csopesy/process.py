"""An emulated process: a named list of instructions and a program counter."""

from __future__ import annotations

from enum import Enum, auto

from .commands import Command, CommandType, PrintCommand


class ProcessState(Enum):
    READY = auto()
    RUNNING = auto()
    WAITING = auto()
    FINISHED = auto()


class Process:
    """A process with an instruction list and a counter into it."""

    def __init__(self, pid: int, name: str) -> None:
        self.pid = pid
        self.name = name
        self.commands: list[Command] = []
        self.command_counter = 0
        self.cpu_core_id = -1
        self.state = ProcessState.READY

    def add_command(self, command_type: CommandType) -> None:
        """Append an instruction; every new instruction is a print instruction."""
        self.commands.append(PrintCommand(self.pid, "Command added!"))

    def execute_current_command(self):
        """Execute the instruction under the counter and return its result."""
        if self.is_finished:
            raise IndexError(
                f"process {self.name!r} has no instruction at line {self.command_counter}"
            )
        return self.commands[self.command_counter].execute()

    def move_to_next_line(self) -> None:
        self.command_counter += 1

    def increment_command_counter(self) -> int:
        """Advance the counter and return its value from before the advance."""
        previous = self.command_counter
        self.command_counter += 1
        return previous

    @property
    def is_finished(self) -> bool:
        return self.command_counter >= len(self.commands)

    @property
    def remaining_time(self) -> int:
        return self.command_counter

    @property
    def lines_of_code(self) -> int:
        return len(self.commands)