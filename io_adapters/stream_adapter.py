# io_adapters/stream_adapter.py

import io
from typing import IO, Union

from line_input.io_adapter import LineSource, TextSink

Stream = Union[IO[str], IO[bytes]]


def _is_binary(stream) -> bool:
    if isinstance(stream, io.TextIOBase):
        return False
    if isinstance(stream, (io.RawIOBase, io.BufferedIOBase)):
        return True
    # Duck-typed streams: text ones expose an encoding.
    return not hasattr(stream, "encoding")


class StreamSource(LineSource):
    """
    Line source over any readable stream: io.StringIO, io.BytesIO, an open file,
    a socket's makefile(). Byte streams are decoded line by line.
    """
    def __init__(self, stream: Stream, encoding: str = "utf-8", errors: str = "replace"):
        self.stream = stream
        self.encoding = encoding
        self.errors = errors
        self._binary = _is_binary(stream)

    def read_line(self) -> str:
        line = self.stream.readline()
        if self._binary:
            return line.decode(self.encoding, self.errors)
        return line

    @classmethod
    def from_text(cls, text: str) -> "StreamSource":
        return cls(io.StringIO(text))


class StreamSink(TextSink):
    """
    Text sink over any writable stream. Text is encoded for byte streams.
    """
    def __init__(self, stream: Stream, encoding: str = "utf-8"):
        self.stream = stream
        self.encoding = encoding
        self._binary = _is_binary(stream)

    def write(self, text: str) -> None:
        if self._binary:
            self.stream.write(text.encode(self.encoding))
        else:
            self.stream.write(text)

    def flush(self) -> None:
        self.stream.flush()

    def getvalue(self) -> str:
        """Everything written so far, for in-memory buffers only."""
        value = self.stream.getvalue()
        if self._binary:
            return value.decode(self.encoding)
        return value

    @classmethod
    def in_memory(cls) -> "StreamSink":
        return cls(io.StringIO())
