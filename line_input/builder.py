# line_input/builder.py

from core.config_schema import InputOptions
from line_input.io_adapter import LineSource, TextSink
from line_input.reader import read_input


class Input:
    """
    Fluent front end for a single read:

        port = Input("Port").default("8080").trim(False).read()

    Every setter returns a new Input; the options bundle itself is frozen.
    """

    def __init__(self, prompt: str = ""):
        self.options = InputOptions(prompt=prompt)

    @classmethod
    def from_options(cls, options: InputOptions) -> "Input":
        builder = cls.__new__(cls)
        builder.options = options
        return builder

    def _with(self, **changes) -> "Input":
        return Input.from_options(self.options.model_copy(update=changes))

    def prompt(self, text: str) -> "Input":
        return self._with(prompt=text)

    def default(self, value: str) -> "Input":
        return self._with(default=value)

    def trim(self, enabled: bool) -> "Input":
        return self._with(trim=enabled)

    def show_prompt(self, enabled: bool) -> "Input":
        return self._with(show_prompt=enabled)

    def read(self) -> str:
        return read_input(self.options)

    def read_with_io(self, source: LineSource, sink: TextSink) -> str:
        return read_input(self.options, source, sink)

    def __repr__(self) -> str:
        return f"Input({self.options!r})"
