"""Abstract CPU scheduler that runs its loop on a background thread."""

from __future__ import annotations

from abc import abstractmethod
from enum import Enum, auto

from .process import Process
from .worker import Worker

FCFS_SCHEDULER_NAME = "FCFSScheduler"


class SchedulingAlgorithm(Enum):
    FCFS = auto()


class Scheduler(Worker):
    """Base for schedulers: holds processes and drives ``execute`` in a loop."""

    def __init__(
        self,
        algorithm: SchedulingAlgorithm = SchedulingAlgorithm.FCFS,
        pid: int = 0,
        process_name: str = "",
    ) -> None:
        self.algorithm = algorithm
        self.pid = pid
        self.process_name = process_name
        self.running = True
        self.processes: list[Process] = []

    def find_process(self, process_name: str) -> Process | None:
        """Return the first held process with the given name, or None."""
        return next((p for p in self.processes if p.name == process_name), None)

    def run(self) -> None:
        """Initialise, then execute scheduling steps until stopped."""
        self.init()
        while self.running:
            self.execute()

    def stop(self) -> None:
        self.running = False

    @property
    @abstractmethod
    def name(self) -> str:
        """The scheduler's name."""

    @abstractmethod
    def check_cores(self) -> int:
        """Return the index of a free core."""

    @abstractmethod
    def init(self) -> None:
        """Prepare the scheduler before its loop begins."""

    @abstractmethod
    def execute(self) -> None:
        """Perform one scheduling step."""

    @abstractmethod
    def add_process(self, process: Process, core: int) -> None:
        """Queue a process for the given core."""

    @abstractmethod
    def assign_core(self, process: Process, core: int) -> None:
        """Bind a process to a core."""

    @abstractmethod
    def check_core_queue(self) -> int:
        """Return the core whose queue should take the next process."""

    @abstractmethod
    def process_from_queue(self, index: int) -> str:
        """Return the name of the queued process at ``index``."""

    @abstractmethod
    def print_core(self) -> None:
        """Show the state of the cores."""

    @abstractmethod
    def print_process_queue(self) -> None:
        """Show the queued processes."""

    @abstractmethod
    def scheduler_start(self) -> None:
        """Begin producing processes."""

    @abstractmethod
    def scheduler_stop(self) -> None:
        """Stop producing processes."""