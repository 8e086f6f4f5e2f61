"""Command-line interface for nb2md."""

import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from nb2md import Nb2MdError, __version__
from nb2md.config import ConversionConfig, get_config
from nb2md.conversion import convert as convert_notebook
from nb2md.parsing import NotebookLoader

console = Console()


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def main(verbose: bool):
    """nb2md - Convert Jupyter notebooks to markdown."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.argument("notebook", type=click.Path(path_type=Path))
@click.option(
    "--output",
    "-o",
    type=click.Path(path_type=Path),
    required=True,
    help="Path to the output markdown file",
)
@click.option(
    "--skip-output/--no-skip-output",
    default=None,
    help="Omit cell outputs and images (default: from config or false)",
)
@click.option(
    "--image-dir",
    type=click.Path(path_type=Path),
    default=None,
    help="Directory for extracted images (default: from config or images)",
)
def convert(
    notebook: Path,
    output: Path,
    skip_output: Optional[bool],
    image_dir: Optional[Path],
):
    """Convert a Jupyter notebook to markdown.

    NOTEBOOK: Path to the .ipynb file to convert
    """
    console.print(
        f"Converting [yellow]{escape(str(notebook))}[/yellow] "
        f"to [yellow]{escape(str(output))}[/yellow]"
    )

    try:
        config = get_config()
        overrides = {}
        if skip_output is not None:
            overrides["skip_output"] = skip_output
        if image_dir is not None:
            overrides["image_dir"] = image_dir
        if overrides:
            config = config.model_copy(update=overrides)

        loaded = NotebookLoader().load(notebook)
        result = asyncio.run(convert_notebook(loaded, output, config))

    except Nb2MdError as e:
        console.print(
            Panel.fit(
                f"[red]Error:[/red] {escape(str(e))}",
                border_style="red",
                title="[bold red]Conversion Failed[/bold red]",
            )
        )
        sys.exit(1)

    lines = [
        "[green]Success![/green]\n",
        f"Cells: [bold]{result.cell_count}[/bold]",
        f"Document: [yellow]{result.output_path}[/yellow]",
    ]
    if not config.skip_output:
        lines.append(
            f"Images: [bold]{len(result.images)}[/bold] in [yellow]{config.image_dir}/[/yellow]"
        )
    console.print(Panel.fit("\n".join(lines), border_style="green"))


@main.command()
def config_show():
    """Show current configuration."""
    try:
        config = get_config()
    except Exception as e:
        console.print(f"[red]Error loading config:[/red] {e}")
        sys.exit(1)

    console.print(Panel.fit("[bold cyan]nb2md Configuration[/bold cyan]", border_style="cyan"))
    console.print()
    console.print(f"[cyan]Skip Output:[/cyan] {config.skip_output}")
    console.print(f"[cyan]Image Dir:[/cyan] {config.image_dir}")


if __name__ == "__main__":
    main()
