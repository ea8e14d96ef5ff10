"""Base class for objects that do their work on a background thread."""

from __future__ import annotations

import threading
import time
from abc import ABC, abstractmethod


class Worker(ABC):
    """Something whose ``run`` method is started on a detached daemon thread."""

    def start(self) -> threading.Thread:
        """Start ``run`` on a new daemon thread and return that thread."""
        thread = threading.Thread(target=self.run, daemon=True)
        thread.start()
        return thread

    @staticmethod
    def sleep(ms: int) -> None:
        """Block the calling thread for ``ms`` milliseconds."""
        time.sleep(ms / 1000)

    @abstractmethod
    def run(self) -> None:
        """The work done on the background thread."""