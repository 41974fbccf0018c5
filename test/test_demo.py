# test/test_demo.py

import io

import pytest

from fakes import FailingSink, FailingSource, RecordingSink, ScriptedSource
from cli import demo
from io_adapters.stream_adapter import StreamSource
from core.config_schema import DemoConfig
from utils.structured_logger import read_events


def run(source, sink=None, config=None, log_file=None):
    err = io.StringIO()
    sink = sink or RecordingSink()
    status = demo.run_demo(
        config=config or DemoConfig(event_log=log_file is not None),
        source=source,
        sink=sink,
        err=err,
        log_file=log_file,
    )
    return status, sink, err.getvalue()


def test_full_run():
    source = ScriptedSource("Alice\n", "\n", "  spaced  \n", "  trimmed  \n", "anything\n")
    status, sink, err = run(source)
    out = sink.output()
    assert status == 0
    assert err == ""
    assert out.startswith("=== line-input Demo ===")
    assert "Enter your name:" in out
    assert "Hello, Alice!" in out
    assert "Enter port [8080]:" in out
    assert "Using port: 8080" in out
    assert "Raw input: '  spaced  '" in out
    assert "Trimmed input: 'trimmed'" in out
    assert "You entered: 'anything'" in out
    assert out.rstrip().endswith("Demo completed successfully!")


def test_empty_name():
    status, sink, _ = run(ScriptedSource("\n", "3000\n", "a\n", "b\n", "c\n"))
    assert status == 0
    assert "No name entered!" in sink.output()
    assert "Using port: 3000" in sink.output()


def test_end_of_stream_still_completes():
    status, sink, _ = run(ScriptedSource())
    assert status == 0
    assert "Using port: 8080" in sink.output()


def test_read_error_aborts():
    source = FailingSource("stdin closed")
    status, sink, err = run(source)
    assert status == 1
    assert err.startswith("Error reading input: Failed to read from stdin: stdin closed")
    assert source.read_count == 1
    assert "2. Input with default value" not in sink.output()


def test_output_failure_outside_prompts_propagates_from_run_demo():
    with pytest.raises(OSError):
        run(ScriptedSource("x\n"), sink=FailingSink())


def test_undecodable_input_aborts_with_message():
    source = StreamSource(io.TextIOWrapper(io.BytesIO(b"\xff\n"), encoding="utf-8"))
    status, _, err = run(source)
    assert status == 1
    assert err.startswith("Error reading input: Failed to read from stdin:")


def test_custom_config():
    config = DemoConfig(title="Setup", default_port="9000", event_log=False)
    status, sink, _ = run(ScriptedSource("\n", "\n", "\n", "\n", "\n"), config=config)
    assert status == 0
    assert sink.output().startswith("Setup")
    assert "Using port: 9000" in sink.output()


def test_events_logged(tmp_path):
    log_file = tmp_path / "events.ndjson"
    run(ScriptedSource("Alice\n", "\n", "a\n", "b\n", "c\n"), log_file=log_file)
    events = read_events(log_file=log_file)
    assert [e["step"] for e in events] == [
        "start", "basic", "default", "preserved", "trimmed", "empty_prompt", "done",
    ]
    assert events[1]["input"] == "Alice"
    assert events[2]["input"] == "8080"
    assert len({e["run_id"] for e in events}) == 1


def test_error_event_logged(tmp_path):
    log_file = tmp_path / "events.ndjson"
    run(FailingSource(), log_file=log_file)
    events = read_events(log_file=log_file)
    assert events[-1]["step"] == "basic"
    assert events[-1]["outcome"] == "error"


def test_main_exit_status(monkeypatch, tmp_path):
    monkeypatch.setenv("LINE_INPUT_LOG_FILE", str(tmp_path / "events.ndjson"))
    monkeypatch.setattr(demo, "run_demo", lambda log_file=None: 0)
    with pytest.raises(SystemExit) as exc_info:
        demo.main()
    assert exc_info.value.code == 0


def test_main_keyboard_interrupt(monkeypatch, capsys):
    def interrupted(log_file=None):
        raise KeyboardInterrupt

    monkeypatch.setattr(demo, "run_demo", interrupted)
    with pytest.raises(SystemExit) as exc_info:
        demo.main()
    assert exc_info.value.code == 130
    assert "Goodbye!" in capsys.readouterr().out


def test_main_output_failure(monkeypatch, capsys):
    def broken_pipe(log_file=None):
        raise BrokenPipeError("stdout closed")

    monkeypatch.setattr(demo, "run_demo", broken_pipe)
    with pytest.raises(SystemExit) as exc_info:
        demo.main()
    assert exc_info.value.code == 1
    assert "Output error: stdout closed" in capsys.readouterr().err
