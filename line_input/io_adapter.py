# line_input/io_adapter.py

from abc import ABC, abstractmethod


class LineSource(ABC):
    """Produces the next line of text for a read."""

    @abstractmethod
    def read_line(self) -> str:
        """
        Return the next line including its terminator, or "" at end of stream.
        Raises OSError (or ValueError for a closed or undecodable stream) on failure.
        """


class TextSink(ABC):
    """Receives prompt text and makes it visible before the read starts."""

    @abstractmethod
    def write(self, text: str) -> None:
        ...

    @abstractmethod
    def flush(self) -> None:
        ...
