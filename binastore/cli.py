import typer
from enum import Enum
from pathlib import Path
from typing import Optional
from rich import print
from rich.markup import escape
from rich.table import Table

from .config import EXAMPLE_INPUT, load_app_config
from .lines import process, render_all_as_csv, render_all_as_plain_text
from .log import get_logger, setup_logging
from .mapping import describe_mapping
from .services import (
    ClipboardUnavailable,
    FileShareTarget,
    ShareUnavailable,
    copy_to_clipboard,
    http_share_target,
)

app = typer.Typer(help="Number → Letter Converter CLI")
logger = get_logger("cli")

class OutputFormat(str, Enum):
    table = "table"
    text = "text"
    csv = "csv"

@app.callback()
def main():
    cfg = load_app_config()
    setup_logging(cfg.log_level)

def read_input(text: Optional[str], file: Optional[str], example: bool = False) -> str:
    if example:
        return EXAMPLE_INPUT
    if text is not None:
        return text
    if file:
        return Path(file).read_text(encoding="utf-8")
    return typer.get_text_stream("stdin").read()

def results_table(results) -> Table:
    table = Table(title="Results", show_lines=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Source")
    table.add_column("Word", style="bold")
    for idx, r in enumerate(results, 1):
        source = escape(r.source) if r.source else "[dim](empty)[/dim]"
        word = r.word or "[dim](no digits)[/dim]"
        table.add_row(str(idx), source, word)
    return table

@app.command()
def convert(
    text: Optional[str] = typer.Argument(None, help="Digits to convert; reads stdin when omitted"),
    file: Optional[str] = typer.Option(None, "--file", "-f", help="Read input from a text file"),
    example: bool = typer.Option(False, "--example", help=f"Use the example input {EXAMPLE_INPUT}"),
    output_format: OutputFormat = typer.Option(OutputFormat.table, "--format"),
):
    results = process(read_input(text, file, example))
    logger.debug("Converted %d lines", len(results))
    if output_format == OutputFormat.text:
        typer.echo(render_all_as_plain_text(results))
    elif output_format == OutputFormat.csv:
        typer.echo(render_all_as_csv(results))
    else:
        print(f"[cyan]Mapping: {describe_mapping()}[/cyan]")
        print(results_table(results))

@app.command()
def copy(
    text: Optional[str] = typer.Argument(None),
    file: Optional[str] = typer.Option(None, "--file", "-f"),
    line: Optional[int] = typer.Option(None, "--line", "-l", help="Copy only this line's word (1-based)"),
):
    results = process(read_input(text, file))
    if line is None:
        payload = render_all_as_plain_text(results)
    else:
        if not 1 <= line <= len(results):
            raise typer.BadParameter(f"Line must be between 1 and {len(results)}.", param_hint="--line")
        payload = results[line - 1].word
    try:
        copy_to_clipboard(payload)
    except ClipboardUnavailable as e:
        logger.warning("Clipboard write failed: %s", e)
        print("[red]Unable to copy[/red]")
        raise typer.Exit(1)
    print("[green]Copied to clipboard[/green]")

@app.command()
def share(
    text: Optional[str] = typer.Argument(None),
    file: Optional[str] = typer.Option(None, "--file", "-f"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Write the CSV export here instead of the share endpoint"),
):
    csv_text = render_all_as_csv(process(read_input(text, file)))
    try:
        target = FileShareTarget(output) if output else http_share_target()
        target.share(csv_text)
    except ShareUnavailable as e:
        logger.warning("Share failed: %s", e)
        print("[red]Unable to share[/red]")
        raise typer.Exit(1)
    print("[green]Shared CSV export[/green]")

@app.command()
def mapping():
    print(f"Mapping: {describe_mapping()}")

if __name__ == "__main__":
    app()
