import json
import logging

from ignorematch.ignore_rules import compile_ignore_lines
from ignorematch.utils.logging import configure_logging


def _last_payload(capfd) -> dict:
    captured = capfd.readouterr()
    lines = [line for line in captured.err.splitlines() if line]
    assert lines, "expected at least one log line"
    return json.loads(lines[-1])


def test_structured_logging_includes_extra_fields(capfd):
    configure_logging()
    capfd.readouterr()

    logging.getLogger("test.logger").info("hello", extra={"foo": "bar"})

    payload = _last_payload(capfd)
    assert payload["message"] == "hello"
    assert payload["foo"] == "bar"
    assert payload["level"] == "INFO"
    assert payload["logger"] == "test.logger"
    assert "taskName" not in payload


def test_structured_logging_includes_exception(capfd):
    configure_logging()
    capfd.readouterr()

    try:
        raise RuntimeError("boom")
    except RuntimeError:
        logging.getLogger("test.logger").exception("failed")

    payload = _last_payload(capfd)
    assert payload["message"] == "failed"
    assert "RuntimeError: boom" in payload["exception"]


def test_compile_logs_rule_count_at_debug(capfd):
    configure_logging(logging.DEBUG)
    capfd.readouterr()

    compile_ignore_lines(["*.o", "!"])

    captured = capfd.readouterr()
    messages = [json.loads(line)["message"] for line in captured.err.splitlines() if line]
    assert "Compiled 1 ignore rules" in messages
    assert any(message.startswith("Skipping empty pattern") for message in messages)
