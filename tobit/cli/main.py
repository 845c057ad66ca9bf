"""
Command-line interface: list, show, chapters, search.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from tobit.core.config import default_config, load_config
from tobit.core.errors import TobitError
from tobit.core.models import Corpus, Document
from tobit.processing.chapters import chapter_index
from tobit.processing.corpus import load_corpus
from tobit.processing.search import search as search_corpus
from tobit.rendering.text import render_concordance, render_manuscript

app = typer.Typer(add_completion=False, no_args_is_help=True)

ConfigOption = typer.Option(None, "--config", "-c", exists=True, readable=True, help="JSON corpus configuration")
BaseOption = typer.Option(None, "--base", "-b", help="Directory or URL holding the manuscript files")
VerboseOption = typer.Option(False, "--verbose", "-v", help="Log debug information")
ProgressOption = typer.Option(False, "--progress/--no-progress", help="Show a progress bar while loading")


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _load(config_path: Optional[Path], base: Optional[str], verbose: bool, progress: bool = False) -> Corpus:
    _configure_logging(verbose)
    try:
        config = load_config(config_path, base=base) if config_path else default_config(base)
    except TobitError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    return load_corpus(config, progress=progress)


def _select(corpus: Corpus, manuscript: str) -> Document:
    document = corpus.get(manuscript)
    if document is None:
        typer.echo(f"Manuscript not found: {manuscript}", err=True)
        raise typer.Exit(code=1)
    return document


@app.command("list")
def list_manuscripts(
    config: Optional[Path] = ConfigOption,
    base: Optional[str] = BaseOption,
    verbose: bool = VerboseOption,
    progress: bool = ProgressOption,
) -> None:
    """List the loaded manuscripts in display order."""
    corpus = _load(config, base, verbose, progress)
    if not len(corpus):
        typer.echo("No manuscripts loaded.")
        return
    for document in corpus:
        words = sum(len(unit.words) for unit in document.units)
        typer.echo(f"{document.identifier}\t{document.title}\t{len(document.units)} units\t{words} words")


@app.command()
def show(
    manuscript: str = typer.Argument(..., help="Identifier (e.g. O.xml) or display title"),
    glosses: bool = typer.Option(False, "--glosses/--no-glosses", help="Print word annotations"),
    config: Optional[Path] = ConfigOption,
    base: Optional[str] = BaseOption,
    verbose: bool = VerboseOption,
) -> None:
    """Print a manuscript's metadata, verses and translations."""
    corpus = _load(config, base, verbose)
    document = _select(corpus, manuscript)
    typer.echo(render_manuscript(document, glosses=glosses), nl=False)


@app.command()
def chapters(
    manuscript: str = typer.Argument(..., help="Identifier (e.g. O.xml) or display title"),
    config: Optional[Path] = ConfigOption,
    base: Optional[str] = BaseOption,
    verbose: bool = VerboseOption,
) -> None:
    """Print the chapter headings of a manuscript."""
    corpus = _load(config, base, verbose)
    document = _select(corpus, manuscript)
    for index in chapter_index(document):
        typer.echo(index)


@app.command()
def search(
    query: str = typer.Argument(..., help="Word or part of a word"),
    config: Optional[Path] = ConfigOption,
    base: Optional[str] = BaseOption,
    verbose: bool = VerboseOption,
    progress: bool = ProgressOption,
) -> None:
    """Concordance search across all manuscripts."""
    if not query.strip():
        typer.echo(render_concordance([], query), nl=False)
        return
    corpus = _load(config, base, verbose, progress)
    hits = search_corpus(corpus, query)
    typer.echo(render_concordance(hits, query), nl=False)


def run() -> None:  # entry point for module execution
    app()


if __name__ == "__main__":
    run()
