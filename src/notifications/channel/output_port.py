"""Output channel port: abstract interface for writing rendered notices."""

from abc import ABC, abstractmethod


class OutputPort(ABC):
    """Abstract interface for output channel adapters."""

    @abstractmethod
    def write_lines(self, lines: list[str]) -> None:
        """Write each line, in order, followed by a line break."""
        ...
