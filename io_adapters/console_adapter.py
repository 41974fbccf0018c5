# io_adapters/console_adapter.py

import sys

from line_input.io_adapter import LineSource, TextSink


class StdinSource(LineSource):
    """
    Reads from the process's standard input:
      - read_line(): the next line as typed, including "\\n"
                     ("" once stdin is closed)
    sys.stdin is looked up on every call so redirection and test capture apply.
    """
    def read_line(self) -> str:
        if sys.stdin is None:
            raise OSError("stdin is not available")
        return sys.stdin.readline()


class StdoutSink(TextSink):
    def write(self, text: str) -> None:
        if sys.stdout is None:
            raise OSError("stdout is not available")
        sys.stdout.write(text)

    def flush(self) -> None:
        if sys.stdout is None:
            raise OSError("stdout is not available")
        sys.stdout.flush()
