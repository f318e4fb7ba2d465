# src/campusqa/cli/app.py
"""Command-line interface for campus-qa.

This module provides a thin Typer wrapper around the commands layer.
Each command:
1. Parses args (via Typer)
2. Creates progress callbacks (for Rich display)
3. Calls commands module functions
4. Renders results with Rich
"""

from __future__ import annotations

import logging

try:
    import typer
    from rich.console import Console
    from rich.markup import escape
    from rich.markdown import Markdown
    from rich.panel import Panel
    from rich.progress import BarColumn, Progress, SpinnerColumn, TextColumn
    from rich.table import Table
except ImportError as e:
    raise SystemExit(
        "CLI requires additional dependencies.\nInstall with: pip install campus-qa[cli]"
    ) from e

from campusqa import __version__
from campusqa.commands import ProgressUpdate, ask, ingest, status
from campusqa.commands.base import CommandResult, IngestResult
from campusqa.log import configure_logging

app = typer.Typer(
    name="campusqa",
    help="campus-qa - answer campus questions from your own documents.",
    no_args_is_help=True,
)
console = Console()


def _print_error(result: CommandResult) -> None:
    console.print(f"[red]Error: {escape(result.error or '')}[/red]")
    if result.suggestion:
        console.print(f"[dim]{escape(result.suggestion)}[/dim]")


def version_callback(value: bool) -> None:
    if value:
        console.print(f"campusqa {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Log pipeline details to stderr.",
    ),
) -> None:
    """campus-qa - retrieval-augmented campus assistant."""
    configure_logging(logging.DEBUG if verbose else logging.WARNING)


@app.command(name="ask")
def ask_cmd(
    question: str = typer.Argument(..., help="Question to ask"),
    data_dir: str = typer.Option(
        None,
        "--data-dir",
        "-d",
        help="Data directory (default: from settings)",
    ),
    config_file: str = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file",
    ),
    k: int = typer.Option(
        None,
        "--k",
        "-k",
        help="Number of document chunks to use as context",
    ),
    plain: bool = typer.Option(
        False,
        "--plain",
        help="Plain output (no colors/formatting)",
    ),
) -> None:
    """Answer a question from the indexed documents."""
    result = ask.ask(
        question=question,
        data_dir=data_dir,
        config_path=config_file,
        k=k,
    )

    if not result.success:
        _print_error(result)
        raise typer.Exit(1)

    if plain:
        console.print(f"Answer: {result.answer}", markup=False)
        if result.sources:
            console.print()
            console.print("Sources:")
            for i, s in enumerate(result.sources, 1):
                console.print(f"  [{i}] {s.title} (score: {s.score:.3f})", markup=False)
                console.print(f"      {s.source_url}", markup=False)
        return

    console.print(Panel(Markdown(result.answer), title="Answer", border_style="green"))
    if result.sources:
        console.print()
        console.print("[bold]Sources:[/bold]")
        for i, s in enumerate(result.sources, 1):
            title = escape(s.title)
            console.print(f"  \\[{i}] [cyan]{title}[/cyan] [dim](score: {s.score:.3f})[/dim]")
            console.print(f"      [dim]{escape(s.source_url)}[/dim]")


@app.command(name="ingest")
def ingest_cmd(
    path: str = typer.Argument(..., help="File or directory to ingest"),
    prefix: str = typer.Option(
        "",
        "--prefix",
        "-p",
        help="Only ingest documents whose relative path starts with this",
    ),
    tags: list[str] = typer.Option(
        None,
        "--tag",
        "-t",
        help="Tag attached to every chunk (repeatable)",
    ),
    base_url: str = typer.Option(
        None,
        "--base-url",
        help="Public URL prefix used for source citations",
    ),
    data_dir: str = typer.Option(
        None,
        "--data-dir",
        "-d",
        help="Data directory (default: from settings)",
    ),
    config_file: str = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file",
    ),
    plain: bool = typer.Option(
        False,
        "--plain",
        help="Plain output (no colors/formatting)",
    ),
) -> None:
    """Ingest a file or directory into the store."""
    options = {
        "path": path,
        "prefix": prefix,
        "tags": tags or [],
        "base_url": base_url,
        "data_dir": data_dir,
        "config_path": config_file,
    }

    if plain or not console.is_terminal:
        result = ingest.ingest(**options)
    else:
        with Progress(
            SpinnerColumn(),
            TextColumn("[bold]{task.fields[stage]:>12}", justify="right"),
            BarColumn(bar_width=20),
            TextColumn("{task.fields[progress_text]}", style="cyan"),
            TextColumn("{task.description}", style="dim"),
            console=console,
        ) as progress:
            task = progress.add_task("", total=None, stage="Documents", progress_text="")

            def on_progress(update: ProgressUpdate) -> None:
                if update.is_indeterminate:
                    progress.update(
                        task,
                        stage=update.stage.value,
                        description=escape(update.message or ""),
                        total=None,
                        progress_text="",
                    )
                    return
                progress.update(
                    task,
                    stage=update.stage.value,
                    description=escape(update.message or ""),
                    completed=update.current,
                    total=update.total,
                    progress_text=f"{update.percentage}% ({update.current}/{update.total})",
                )

            result = ingest.ingest(**options, on_progress=on_progress)

    _render_ingest_result(result, plain=plain)


def _render_ingest_result(result: IngestResult, plain: bool) -> None:
    """Render ingest result to console."""
    failures = [r for r in result.document_results if r.error]

    if plain:
        for r in failures:
            console.print(f"Failed {r.document_id}: {r.error}", markup=False)
    else:
        for r in failures:
            console.print(f"[red]Failed {escape(r.document_id)}:[/red] {escape(r.error or '')}")

    if not result.success:
        _print_error(result)
        raise typer.Exit(1)

    if result.documents_processed == 0 and not failures:
        console.print(result.error or "No documents found")
        return

    summary = f"Ingested {result.documents_processed} documents ({result.total_chunks} chunks)"
    if plain:
        console.print(summary)
        if result.documents_failed:
            console.print(f"{result.documents_failed} documents failed")
    else:
        console.print(f"[green]{summary}[/green]")
        if result.documents_failed:
            console.print(f"[yellow]{result.documents_failed} documents failed[/yellow]")


@app.command(name="status")
def status_cmd(
    data_dir: str = typer.Option(
        None,
        "--data-dir",
        "-d",
        help="Data directory (default: from settings)",
    ),
    config_file: str = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file",
    ),
    plain: bool = typer.Option(
        False,
        "--plain",
        help="Plain output (no colors/formatting)",
    ),
) -> None:
    """Show store statistics."""
    result = status.status(data_dir=data_dir, config_path=config_file)

    if not result.success:
        _print_error(result)
        raise typer.Exit(1)

    if result.total_chunks == 0:
        if plain:
            console.print("No documents indexed.")
        else:
            console.print("[dim]No documents indexed. Run 'campusqa ingest' first.[/dim]")
        raise typer.Exit(0)

    if plain:
        console.print("Store Status:")
        console.print(f"  Data directory: {result.data_dir}", markup=False)
        console.print(f"  Sources: {result.total_sources}")
        console.print(f"  Chunks: {result.total_chunks}")
        for source in result.sources:
            console.print(f"  {source.title} ({source.chunk_count} chunks)", markup=False)
        return

    table = Table(title=f"Indexed Sources ({result.total_sources})")
    table.add_column("Title", style="cyan")
    table.add_column("Source URL", style="dim")
    table.add_column("Chunks", justify="right")
    for source in result.sources:
        table.add_row(escape(source.title), escape(source.source_url), str(source.chunk_count))

    console.print(f"[bold]Data directory:[/bold] {escape(result.data_dir)}")
    console.print(f"[bold]Chunks:[/bold] {result.total_chunks}")
    console.print(table)
