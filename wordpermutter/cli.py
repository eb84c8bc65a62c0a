from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

import typer
from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from .loader import load_words
from .output import output_path_for, write_lines
from .permutator import build_sections, format_sections
from .words import Word, WordType

DEFAULT_LIMIT = 14
MIN_LIMIT = 2
# optional sign and ASCII digits only, no padding or underscores
LIMIT_RE = re.compile(r"[+-]?[0-9]+")

app = typer.Typer(add_completion=False, no_args_is_help=False)
console = Console()
err_console = Console(stderr=True)

log = logging.getLogger("wordpermutter")


@dataclass
class RunConfig:
    words_file: Path
    limit: int
    out: Path
    summary: bool = True


def setup_logging(verbose: bool = False) -> None:
    log.setLevel(logging.DEBUG if verbose else logging.INFO)
    if not any(isinstance(h, RichHandler) for h in log.handlers):
        log.addHandler(RichHandler(console=err_console, show_path=False, markup=False))


def fail(msg: str) -> typer.Exit:
    err_console.print(f"[red]{escape(msg)}[/red]")
    return typer.Exit(code=1)


def parse_limit(raw: Optional[str]) -> int:
    """
    Parse the length limit argument; exits with status 1 when malformed or < 2.
    """
    if raw is None:
        return DEFAULT_LIMIT
    if not LIMIT_RE.fullmatch(raw):
        raise fail("Improperly formatted number. Exiting program.")
    limit = int(raw)
    if limit < MIN_LIMIT:
        raise fail(f"Combinations need to be at least {MIN_LIMIT} characters in length")
    return limit


def build_config(
    words_file: Optional[str], limit: Optional[str], out: Optional[Path], summary: bool
) -> RunConfig:
    if not words_file:
        raise fail("No parameters provided")
    path = Path(words_file)
    if not path.exists():
        raise fail("File could not be found!")
    n = parse_limit(limit)
    return RunConfig(
        words_file=path,
        limit=n,
        out=out if out is not None else output_path_for(path),
        summary=summary,
    )


def print_summary(cfg: RunConfig, words: List[Word], total: int) -> None:
    by_type = {t: 0 for t in WordType}
    for w in words:
        by_type[w.type] += 1

    table = Table(title="Word permutations", box=box.SIMPLE_HEAVY)
    table.add_column("metric", style="bold")
    table.add_column("value", justify="right")
    table.add_row("words (any order)", f"{by_type[WordType.ANY_ORDER]:,}")
    table.add_row("words (first only)", f"{by_type[WordType.FIRST]:,}")
    table.add_row("words (second only)", f"{by_type[WordType.SECOND]:,}")
    table.add_row("length limit", str(cfg.limit))
    table.add_section()
    table.add_row("permutations", f"{total:,}")
    console.print(table)


def run(cfg: RunConfig) -> bool:
    """
    Load, generate and write. Returns False when the output could not be written.
    """
    words = load_words(cfg.words_file)
    if not words:
        log.warning("no words loaded from %s", cfg.words_file)

    sections = build_sections(words, cfg.limit)
    total = sum(len(combos) for _, combos in sections)
    lines = format_sections(sections)
    log.debug("%d permutations from %d words (limit=%d)", total, len(words), cfg.limit)

    if not write_lines(cfg.out, lines):
        return False

    if cfg.summary:
        print_summary(cfg, words, total)
        console.print(f"[bold green]Wrote[/bold green] {escape(str(cfg.out))}")
    return True


# negative limits like "-1" must reach parse_limit instead of failing as unknown options
@app.command(context_settings={"ignore_unknown_options": True})
def main(
    words_file: Optional[str] = typer.Argument(None, help="word list, one word per line"),
    limit: Optional[str] = typer.Argument(None, help=f"max combination length, inclusive (default {DEFAULT_LIMIT})"),
    out: Optional[Path] = typer.Option(None, "--out", help="output file (default: <name>_output.txt in cwd)"),
    summary: bool = typer.Option(True, "--summary/--no-summary", help="print a summary table"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="debug logging"),
):
    """
    Combine every pair of words from WORDS_FILE into two-word permutations.

    Word list format:
      word    may go first or second
      word#   may only go first
      word*   may only go second
      // ...  comment, ignored
    """
    setup_logging(verbose)
    cfg = build_config(words_file, limit, out, summary)
    if not run(cfg):
        raise typer.Exit(code=1)
