"""Tests for structured logging setup."""

import json

import pytest

from sentence_chunker.core.logging import log, setup_logging

pytestmark = pytest.mark.unit


class TestSetupLogging:
    def test_json_to_stderr(self, capsys):
        setup_logging("json")
        log.info("qa.file.done", passed=3, total=4)

        captured = capsys.readouterr()
        assert captured.out == ""
        record = json.loads(captured.err.strip().splitlines()[-1])
        assert record["event"] == "qa.file.done"
        assert record["level"] == "info"
        assert record["passed"] == 3
        assert "timestamp" in record

    def test_level_filter(self, capsys):
        setup_logging("plain", level="warning")
        log.info("chunk.split.done")
        log.warning("qa.case.skipped", reason="x")

        err = capsys.readouterr().err
        assert "chunk.split.done" not in err
        assert "qa.case.skipped" in err

    def test_debug_level(self, capsys):
        setup_logging("plain", level="debug")
        log.debug("chunk.split", offset=59, strategy="window-edge")
        assert "chunk.split" in capsys.readouterr().err

    def test_unknown_level(self):
        with pytest.raises(ValueError):
            setup_logging("plain", level="chatty")

    def test_default_is_quiet(self, capsys):
        from sentence_chunker import normalize, scan

        text = b"a" * 50
        normalize(text, scan(text), 1, 10)
        assert capsys.readouterr().err == ""
