"""
JSON-described regression harness for the sentence chunker.

A test file looks like::

    {"tests": [
        {"source_text": "Hello there. How are you?",
         "expected": ["Hello there.", "How are you?"]},
        {"source_text": "Just one.", "expected": "Just one."}
    ]}

Each case is run through scan() + normalize() and the materialized spans are
compared, in order, against the expected sentences. Broken files and cases
are reported and skipped, never fatal.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterator, List, Optional, Tuple

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..chunking.boundaries import scan
from ..chunking.engine import materialize, normalize
from ..core.logging import log


@dataclass
class CaseResult:
    index: int
    expected: List[str]
    actual: List[str]
    mismatches: List[Tuple[int, str, str]] = field(default_factory=list)
    missing: List[Tuple[int, str]] = field(default_factory=list)
    extra: List[Tuple[int, str]] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not (self.mismatches or self.missing or self.extra)


@dataclass
class FileResult:
    path: Path
    total: int = 0
    cases: List[CaseResult] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def passed(self) -> int:
        return sum(1 for case in self.cases if case.passed)

    @property
    def ok(self) -> bool:
        return self.error is None and not self.skipped and self.passed == self.total


def _decode(raw: bytes) -> str:
    return raw.decode("utf-8", errors="replace")


def run_case(
    index: int,
    source_text: str,
    expected: List[str],
    min_length: int,
    max_length: int,
) -> CaseResult:
    """Chunk ``source_text`` and compare the result sentence by sentence."""
    text = source_text.encode("utf-8")
    spans = normalize(text, scan(text), min_length, max_length)
    produced = materialize(text, spans)

    result = CaseResult(
        index=index,
        expected=list(expected),
        actual=[_decode(raw) for raw in produced],
    )

    common = min(len(produced), len(expected))
    for j in range(common):
        if produced[j] != expected[j].encode("utf-8"):
            result.mismatches.append((j, expected[j], result.actual[j]))

    for j in range(len(produced), len(expected)):
        result.missing.append((j, expected[j]))

    for j in range(len(expected), len(produced)):
        result.extra.append((j, result.actual[j]))

    return result


def _expected_sentences(node: Any) -> Optional[List[str]]:
    if isinstance(node, str):
        return [node]
    if isinstance(node, list):
        return [item if isinstance(item, str) else "" for item in node]
    return None


def run_file(path: Path, min_length: int = 5, max_length: int = 200) -> FileResult:
    """
    Run every case of a JSON test file.

    Args:
        path: JSON file with a top-level "tests" array
        min_length: Default minimum span length for cases without an override
        max_length: Default maximum span length for cases without an override

    Returns:
        FileResult with per-case outcomes; ``error`` is set when the file
        itself cannot be used.
    """
    result = FileResult(path=path)

    try:
        root = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        result.error = f"Invalid JSON in file: {e}"
        log.warning("qa.file.invalid", path=str(path), error=str(e))
        return result

    tests = root.get("tests") if isinstance(root, dict) else None
    if not isinstance(tests, list):
        result.error = "No valid 'tests' array"
        log.warning("qa.file.invalid", path=str(path), error=result.error)
        return result

    result.total = len(tests)

    for i, case in enumerate(tests):
        if not isinstance(case, dict):
            result.skipped.append(f"Test {i} is not a valid object.")
            continue

        source_text = case.get("source_text")
        if not isinstance(source_text, str) or not source_text:
            result.skipped.append(f"Test {i} has no source_text.")
            continue

        expected = _expected_sentences(case.get("expected"))
        if expected is None:
            result.skipped.append(f"Test {i} has no valid expected field.")
            continue

        try:
            case_result = run_case(
                i,
                source_text,
                expected,
                int(case.get("min_length", min_length)),
                int(case.get("max_length", max_length)),
            )
        except (TypeError, ValueError) as e:
            # InvalidBoundsError is a ValueError
            result.skipped.append(f"Test {i} has invalid length bounds: {e}")
            continue

        if not case_result.passed:
            log.info(
                "qa.case.failed",
                path=str(path),
                case=i,
                mismatches=len(case_result.mismatches),
                missing=len(case_result.missing),
                extra=len(case_result.extra),
            )
        result.cases.append(case_result)

    for reason in result.skipped:
        log.warning("qa.case.skipped", path=str(path), reason=reason)

    log.info("qa.file.done", path=str(path), passed=result.passed, total=result.total)
    return result


def discover(path: Path) -> Iterator[Path]:
    """Yield the path itself, or every .json file below a directory."""
    if path.is_dir():
        yield from sorted(p for p in path.rglob("*.json") if p.is_file())
    else:
        yield path


def run_path(path: Path, min_length: int = 5, max_length: int = 200) -> List[FileResult]:
    """Run the harness over a single JSON file or a directory tree of them."""
    return [run_file(p, min_length, max_length) for p in discover(path)]


def render_report(results: List[FileResult], console: Console) -> None:
    """Print failure details followed by a per-file summary table."""
    for file_result in results:
        if file_result.error:
            console.print(f"[red]{escape(str(file_result.path))}: {escape(file_result.error)}[/red]")
            continue

        for reason in file_result.skipped:
            console.print(f"[yellow]{escape(reason)}[/yellow]")

        for case in file_result.cases:
            if case.passed:
                continue
            for j, expected, got in case.mismatches:
                console.print(f"Test {case.index}, Sentence {j}: FAIL (mismatch)")
                console.print(f"  Expected: [{expected}]", markup=False)
                console.print(f"  Got:      [{got}]", markup=False)
            if case.missing:
                console.print(f"Test {case.index}: Missing {len(case.missing)} sentences:")
                for j, expected in case.missing:
                    console.print(
                        f"  (Missing) Expected sentence {j}: [{expected}]", markup=False
                    )
            if case.extra:
                console.print(f"Test {case.index}: Extra {len(case.extra)} sentences:")
                for j, got in case.extra:
                    console.print(f"  (Extra) Got sentence {j}: [{got}]", markup=False)
            console.print(f"[red]Test {case.index}: FAILED[/red]")

    table = Table(title="Sentence chunker regression summary")
    table.add_column("File")
    table.add_column("Passed", justify="right")
    table.add_column("Total", justify="right")
    table.add_column("Skipped", justify="right")
    table.add_column("Status")

    for file_result in results:
        if file_result.error:
            status = "[red]error[/red]"
        elif file_result.ok:
            status = "[green]pass[/green]"
        else:
            status = "[red]fail[/red]"
        table.add_row(
            escape(str(file_result.path)),
            str(file_result.passed),
            str(file_result.total),
            str(len(file_result.skipped)),
            status,
        )

    console.print(table)
