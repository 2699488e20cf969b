from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv

from .version import __version__
from .config import ProseWrap
from .utils.logging import setup_logger
from .pipeline import RunConfig, run


app = typer.Typer(add_completion=False, help="Reflow documentation comment descriptions.")


def _version_callback(value: bool):
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=0)


@app.command()
def main(
    input: Optional[Path] = typer.Option(
        None, "-i", "--input", exists=True, dir_okay=False, readable=True, help="Description text file (default stdin)"
    ),
    output: Optional[Path] = typer.Option(None, "-o", "--output", help="Output file path (default stdout)"),
    tag: str = typer.Option("description", "-t", "--tag", help="Tag the description belongs to"),
    label: str = typer.Option("", "--label", help="Tag label printed before the description, e.g. '@param {string} name '"),
    column: int = typer.Option(0, "--column", min=0, help="Indentation column of the comment"),
    print_width: int = typer.Option(80, "--print-width", min=1, help="Target line width"),
    with_dot: bool = typer.Option(False, "--with-dot/--no-dot", help="End descriptions with a period"),
    prose_wrap: ProseWrap = typer.Option(ProseWrap.KEEP, "--prose-wrap", help="Markdown printer prose wrapping"),
    log_level: str = typer.Option("INFO", "--log-level", envvar="DOCREFLOW_LOG_LEVEL", help="Logging level"),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Print version and exit"
    ),
):
    setup_logger(log_level)
    cfg = RunConfig(
        input=input,
        output=output,
        tag=tag,
        label=label,
        column=column,
        print_width=print_width,
        with_dot=with_dot,
        prose_wrap=prose_wrap,
        log_level=log_level,
    )
    run(cfg)


def entrypoint():
    load_dotenv()
    app()


if __name__ == "__main__":
    entrypoint()
