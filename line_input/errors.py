# line_input/errors.py

from enum import Enum

from core import messages


class InputErrorKind(str, Enum):
    WRITE = "write"
    FLUSH = "flush"
    READ = "read"


class InputError(Exception):
    """
    Base for every failure of a prompt/read cycle.
    Wraps the original stream error (OSError, or ValueError for closed or
    undecodable streams) so callers can inspect both the kind and the cause.
    """
    kind: InputErrorKind
    prefix: str = "Input failed"

    def __init__(self, cause: Exception) -> None:
        self.cause = cause
        super().__init__(f"{self.prefix}: {cause}")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.cause!r})"


class WriteError(InputError):
    """Emitting the rendered prompt failed."""
    kind = InputErrorKind.WRITE
    prefix = messages.WRITE_ERROR_PREFIX


class FlushError(InputError):
    """The prompt was written but could not be flushed to the terminal."""
    kind = InputErrorKind.FLUSH
    prefix = messages.FLUSH_ERROR_PREFIX


class ReadError(InputError):
    """The line could not be read from the source."""
    kind = InputErrorKind.READ
    prefix = messages.READ_ERROR_PREFIX
