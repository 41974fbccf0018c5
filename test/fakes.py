# test/fakes.py

from line_input.io_adapter import LineSource, TextSink


class ScriptedSource(LineSource):
    """Returns the scripted lines in order, then "" (end of stream)."""
    def __init__(self, *lines: str):
        self.lines = list(lines)
        self.read_count = 0

    def read_line(self) -> str:
        self.read_count += 1
        if not self.lines:
            return ""
        return self.lines.pop(0)


class FailingSource(LineSource):
    def __init__(self, message: str = "test error"):
        self.message = message
        self.read_count = 0

    def read_line(self) -> str:
        self.read_count += 1
        raise OSError(self.message)


class RecordingSink(TextSink):
    def __init__(self):
        self.writes = []
        self.flush_count = 0

    def write(self, text: str) -> None:
        self.writes.append(text)

    def flush(self) -> None:
        self.flush_count += 1

    def output(self) -> str:
        return "".join(self.writes)


class FailingSink(TextSink):
    def __init__(self, fail_write: bool = True, fail_flush: bool = True):
        self.fail_write = fail_write
        self.fail_flush = fail_flush
        self.writes = []

    def write(self, text: str) -> None:
        if self.fail_write:
            raise BrokenPipeError("write failed")
        self.writes.append(text)

    def flush(self) -> None:
        if self.fail_flush:
            raise BrokenPipeError("flush failed")
