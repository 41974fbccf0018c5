# line_input/reader.py

from typing import Optional

from core import messages
from core.config_schema import InputOptions
from io_adapters.console_adapter import StdinSource, StdoutSink
from line_input.errors import FlushError, ReadError, WriteError
from line_input.io_adapter import LineSource, TextSink

# Closed streams raise ValueError, undecodable input UnicodeDecodeError (a ValueError).
STREAM_ERRORS = (OSError, ValueError)


def render_prompt(prompt: str, default: Optional[str] = None) -> Optional[str]:
    """
    Build the text shown before the read, e.g. "Port [8080]:".
    Returns None for an empty prompt; an empty default shows no brackets.
    """
    if not prompt:
        return None
    if default:
        return f"{prompt} [{default}]{messages.PROMPT_SUFFIX}"
    return f"{prompt}{messages.PROMPT_SUFFIX}"


def strip_line_terminator(line: str) -> str:
    # At most one "\n" or "\r\n"; a lone trailing "\r" stays.
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def process_input(raw: str, default: Optional[str] = None, trim: bool = True) -> str:
    """
    Post-process a raw line.

    trim=True  -> strip all surrounding whitespace; a blank line yields `default`.
    trim=False -> strip only the line terminator; only a truly empty line
                  yields `default`, so "   " comes back as-is.
    """
    value = raw.strip() if trim else strip_line_terminator(raw)
    if not value and default is not None:
        return default
    return value


def read_input_with_io(
    prompt: str,
    default: Optional[str],
    trim: bool,
    show_prompt: bool,
    source: LineSource,
    sink: TextSink,
) -> str:
    """
    Run one prompt/read/process cycle against the given source and sink.

    Raises WriteError or FlushError if the prompt cannot be shown (nothing is
    read in that case) and ReadError if the source fails. End of stream is
    treated as an empty line.
    """
    text = render_prompt(prompt, default) if show_prompt else None
    if text is not None:
        try:
            sink.write(text)
        except STREAM_ERRORS as e:
            raise WriteError(e) from e
        try:
            sink.flush()
        except STREAM_ERRORS as e:
            raise FlushError(e) from e

    try:
        raw = source.read_line()
    except STREAM_ERRORS as e:
        raise ReadError(e) from e

    return process_input(raw, default, trim)


def read_input(
    options: InputOptions,
    source: Optional[LineSource] = None,
    sink: Optional[TextSink] = None,
) -> str:
    return read_input_with_io(
        options.prompt,
        options.default,
        options.trim,
        options.effective_show_prompt,
        StdinSource() if source is None else source,
        StdoutSink() if sink is None else sink,
    )


def input_text(prompt: str, *, source: Optional[LineSource] = None, sink: Optional[TextSink] = None) -> str:
    """Like the builtin input(): trimmed, prompt shown only when non-empty."""
    return read_input(InputOptions(prompt=prompt), source, sink)


def input_with_default(
    prompt: str,
    default: str,
    *,
    source: Optional[LineSource] = None,
    sink: Optional[TextSink] = None,
) -> str:
    """Trimmed input that falls back to `default` on a blank line."""
    options = InputOptions(prompt=prompt, default=default, show_prompt=True)
    return read_input(options, source, sink)


def input_trim(
    prompt: str,
    trim: bool,
    *,
    source: Optional[LineSource] = None,
    sink: Optional[TextSink] = None,
) -> str:
    return read_input(InputOptions(prompt=prompt, trim=trim), source, sink)
