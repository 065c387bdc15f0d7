import json
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from ..chunking.boundaries import scan
from ..chunking.engine import materialize, normalize
from ..core.config import Settings
from ..core.errors import InvalidBoundsError
from ..core.logging import log, setup_logging
from ..qa.harness import render_report, run_path

app = typer.Typer(add_completion=False, help="Sentence chunker CLI")


@app.callback()
def _init(
    ctx: typer.Context,
    config_file: Optional[str] = typer.Option(
        None,
        "--config",
        help="Config file (.sentence_chunker.yaml auto-discovered)",
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log debug events (overrides LOG_LEVEL)"
    ),
) -> None:
    """Load configuration and set up logging before any command runs."""
    try:
        settings = Settings.load_config(config_file)
    except Exception as e:
        typer.echo(f"❌ Config error: {e}", err=True)
        raise typer.Exit(1) from e

    level = "debug" if verbose else settings.LOG_LEVEL
    try:
        setup_logging(settings.LOG_FORMAT, level=level)  # type: ignore[arg-type]
    except ValueError as e:
        typer.echo(f"❌ Config error: {e}", err=True)
        raise typer.Exit(1) from e
    log.debug("config.loaded", config_file=config_file or "auto-discovered")
    ctx.obj = settings


def _settings(ctx: typer.Context) -> Settings:
    return ctx.obj if isinstance(ctx.obj, Settings) else Settings()


def _read_bytes(path: Path) -> bytes:
    try:
        return path.read_bytes()
    except OSError as e:
        typer.echo(f"❌ Could not read file: {path} ({e})", err=True)
        raise typer.Exit(1) from e


def _chunk(content: bytes, min_length: int, max_length: int):
    try:
        return normalize(content, scan(content), min_length, max_length)
    except InvalidBoundsError as e:
        typer.echo(f"❌ {e}", err=True)
        raise typer.Exit(1) from e


def _run_qa(path: Path, settings: Settings, min_length: Optional[int], max_length: Optional[int]) -> None:
    results = run_path(
        path,
        min_length if min_length is not None else settings.CHUNKER_QA_MIN_LENGTH,
        max_length if max_length is not None else settings.CHUNKER_QA_MAX_LENGTH,
    )
    if not results:
        typer.echo(f"❌ No JSON test files found under {path}", err=True)
        raise typer.Exit(1)

    console = Console(
        file=sys.stdout,
        color_system=None if settings.NO_COLOR else "auto",
    )
    render_report(results, console)

    if not all(result.ok for result in results):
        raise typer.Exit(1)


@app.command()
def version() -> None:
    from .. import __version__

    typer.echo(__version__)


@app.command()
def split(
    ctx: typer.Context,
    path: Path = typer.Argument(..., help="Text file to chunk (a .json file runs the regression harness)"),
    min_length: Optional[int] = typer.Option(None, "--min-length", help="Minimum preferred sentence length in bytes"),
    max_length: Optional[int] = typer.Option(None, "--max-length", help="Maximum preferred sentence length in bytes"),
) -> None:
    """
    Chunk a file into sentences and print one per line.

    Newlines inside a sentence are printed as a literal \\n.
    """
    settings = _settings(ctx)
    if not path.exists():
        typer.echo(f"❌ Path not found: {path}", err=True)
        raise typer.Exit(1)

    if path.is_dir() or path.suffix == ".json":
        _run_qa(path, settings, min_length, max_length)
        return

    content = _read_bytes(path)
    chunks = _chunk(
        content,
        min_length if min_length is not None else settings.CHUNKER_MIN_LENGTH,
        max_length if max_length is not None else settings.CHUNKER_MAX_LENGTH,
    )
    log.info("chunk.split.done", path=str(path), sentences=len(chunks))

    for sentence in materialize(content, chunks):
        line = sentence.decode("utf-8", errors="replace").replace("\n", "\\n")
        typer.echo(line)


@app.command()
def spans(
    ctx: typer.Context,
    path: Path = typer.Argument(..., help="Text file to chunk"),
    min_length: Optional[int] = typer.Option(None, "--min-length", help="Minimum preferred sentence length in bytes"),
    max_length: Optional[int] = typer.Option(None, "--max-length", help="Maximum preferred sentence length in bytes"),
    raw: bool = typer.Option(False, "--raw", help="Print first-pass spans without length normalization"),
) -> None:
    """Print spans as JSON lines of byte offsets."""
    settings = _settings(ctx)
    content = _read_bytes(path)

    if raw:
        result = scan(content)
    else:
        result = _chunk(
            content,
            min_length if min_length is not None else settings.CHUNKER_MIN_LENGTH,
            max_length if max_length is not None else settings.CHUNKER_MAX_LENGTH,
        )

    for span in result:
        typer.echo(json.dumps(span.to_dict()))


@app.command()
def qa(
    ctx: typer.Context,
    path: Path = typer.Argument(..., help="JSON test file or directory of them"),
    min_length: Optional[int] = typer.Option(None, "--min-length", help="Override the harness minimum length"),
    max_length: Optional[int] = typer.Option(None, "--max-length", help="Override the harness maximum length"),
) -> None:
    """Run the JSON regression harness; exits 1 if any case fails."""
    if not path.exists():
        typer.echo(f"❌ Path not found: {path}", err=True)
        raise typer.Exit(1)

    _run_qa(path, _settings(ctx), min_length, max_length)


if __name__ == "__main__":
    app()
