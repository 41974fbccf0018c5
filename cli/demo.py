# cli/demo.py

import sys
import uuid
from pathlib import Path
from typing import Optional, TextIO

from core.config_loader import load_config, load_env_variables
from core.config_schema import DemoConfig
from io_adapters.console_adapter import StdinSource, StdoutSink
from line_input.builder import Input
from line_input.errors import InputError
from line_input.io_adapter import LineSource, TextSink
from utils.structured_logger import log_event


def run_demo(
    config: Optional[DemoConfig] = None,
    source: Optional[LineSource] = None,
    sink: Optional[TextSink] = None,
    err: Optional[TextIO] = None,
    log_file: Optional[Path] = None,
) -> int:
    """
    Walk through the five input styles. Returns 0 on success, 1 on the first
    input error (which is reported on `err`).
    """
    config = config or load_config()
    source = source if source is not None else StdinSource()
    sink = sink if sink is not None else StdoutSink()
    err = err if err is not None else sys.stderr
    run_id = str(uuid.uuid4())
    prompts = config.prompts

    def say(text: str = ""):
        sink.write(text + "\n")

    def record(step: str, input_data=None, output_data=None, outcome: str = "ok"):
        if config.event_log:
            log_event(run_id, step, input_data, output_data, outcome, log_file=log_file)

    def fail(step: str, what: str, e: InputError) -> int:
        print(f"Error reading {what}: {e}", file=err)
        record(step, output_data=str(e), outcome="error")
        return 1

    say(f"{config.title}\n")
    record("start", output_data=config.title)

    say("1. Basic input example:")
    try:
        name = Input(prompts.name).read_with_io(source, sink)
    except InputError as e:
        return fail("basic", "input", e)
    if not name:
        say(config.messages.no_name_entered)
    else:
        say(f"Hello, {name}!")
    record("basic", input_data=name)

    say("\n2. Input with default value:")
    try:
        port = Input(prompts.port).default(config.default_port).show_prompt(True).read_with_io(source, sink)
    except InputError as e:
        return fail("default", "port", e)
    say(f"Using port: {port}")
    record("default", input_data=port)

    say("\n3. Input with preserved whitespace:")
    try:
        text = Input(prompts.text_preserved).trim(False).read_with_io(source, sink)
    except InputError as e:
        return fail("preserved", "text", e)
    say(f"Raw input: '{text}'")
    record("preserved", input_data=text)

    say("\n4. Input with trimming:")
    try:
        text = Input(prompts.text_trimmed).trim(True).read_with_io(source, sink)
    except InputError as e:
        return fail("trimmed", "text", e)
    say(f"Trimmed input: '{text}'")
    record("trimmed", input_data=text)

    say("\n5. Empty prompt example:")
    try:
        data = Input(prompts.empty).read_with_io(source, sink)
    except InputError as e:
        return fail("empty_prompt", "input", e)
    say(f"You entered: '{data}'")
    record("empty_prompt", input_data=data)

    say(f"\n{config.messages.demo_completed}")
    record("done")
    return 0


def main():
    env = load_env_variables()
    log_file = env["LOG_FILE"]
    try:
        status = run_demo(log_file=log_file)
    except KeyboardInterrupt:
        print("\nGoodbye!")
        status = 130
    except OSError as e:
        # stdout itself failed, e.g. a closed pipe
        print(f"Output error: {e}", file=sys.stderr)
        status = 1
    sys.exit(status)


if __name__ == "__main__":
    main()
