"""An interactive shell emulating an operating system: processes, screens and consoles."""

__version__ = "0.1.0"