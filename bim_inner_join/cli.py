"""Typer CLI for the bim inner join.

Usage:
    # Join two files, writing bij_* files to the current directory
    bim-inner-join study1.bim study2.bim

    # Several inputs, custom output location and prefix
    bim-inner-join a.bim b.bim c.bim.gz -o results --prefix shared
"""

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape

from bim_inner_join import __version__

app = typer.Typer(
    name="bim-inner-join",
    help="Find the variants shared by several sorted PLINK .bim files",
    add_completion=False,
)

console = Console()

USAGE = "Usage:\n\tbim-inner-join file1.bim file2.bim [ file3.bim ... ]"


def setup_logging(verbose: bool = False) -> None:
    """Setup logging configuration."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


@app.command()
def join(
    files: Annotated[
        list[Path] | None,
        typer.Argument(
            help="Sorted PLINK .bim files (plain or gzipped), at least two",
            show_default=False,
        ),
    ] = None,
    output_dir: Annotated[
        Path | None,
        typer.Option(
            "--output-dir", "-o",
            help="Output directory (default: current directory)",
            file_okay=False,
            dir_okay=True,
        ),
    ] = None,
    prefix: Annotated[
        str,
        typer.Option(
            "--prefix",
            help="Prefix for the output filenames",
        ),
    ] = "bij",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose", "-v",
            help="Enable verbose logging",
        ),
    ] = False,
) -> None:
    """Inner join of sorted .bim files on chromosome and position.

    Walks all files in lock-step and keeps the loci present in every one of
    them with compatible alleles ("0" counts as a missing allele, so A/0
    matches A/G but not T/G). Inputs must be sorted by chromosome, then
    position.

    Writes, in the output directory:

        bij_names_1.txt ... bij_names_N.txt  matched variant names per input
        bij_matches.bim                      one record per matched locus
        bij_mismatches.bim                   reserved, left empty
    """
    from bim_inner_join.config import Config
    from bim_inner_join.main import run_join
    from bim_inner_join.models import ErrorKind

    setup_logging(verbose)

    config = Config(
        input_files=files or [],
        output_dir=output_dir,
        prefix=prefix,
        verbose=verbose,
    )

    errors = config.validate()
    if any(e.kind is ErrorKind.USAGE for e in errors):
        console.print(USAGE)
        raise typer.Exit(code=1)
    if errors:
        for error in errors:
            console.print(f"[red]ERROR:[/red] {escape(error.message)}")
        raise typer.Exit(code=1)

    console.print(f"[bold]BIM inner join[/bold] v{__version__}", style="blue")
    console.print(f"Input files:       {config.n_files}")
    console.print(f"Output directory:  {config.output_dir}")
    console.print(f"Output prefix:     {config.prefix}\n")

    try:
        run_join(config, console=console)
    except (OSError, ValueError) as e:
        console.print(f"[red]ERROR:[/red] {escape(str(e))}")
        if verbose:
            import traceback
            console.print(traceback.format_exc())
        raise typer.Exit(code=1)


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
