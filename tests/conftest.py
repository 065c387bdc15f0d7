"""Global test configuration for sentence_chunker tests."""

import json
from pathlib import Path

import pytest

from sentence_chunker.core.logging import configure_default_logging

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def reset_logging():
    """Restore the quiet library logging config after CLI tests reconfigure it."""
    yield
    configure_default_logging()


@pytest.fixture
def regression_dir() -> Path:
    """Directory tree of JSON regression files that all pass."""
    return FIXTURES / "regression"


@pytest.fixture
def write_cases(tmp_path):
    """Write a harness JSON file and return its path."""

    def _write(tests, name: str = "cases.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps({"tests": tests}), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def paragraph_text() -> bytes:
    """1000 bytes of words with a paragraph break at offsets 378-379."""
    text = ("alpha " * 63 + "\n\n" + "beta " * 124).encode()
    assert len(text) == 1000
    return text
