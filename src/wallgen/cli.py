import asyncio
import logging
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table
from typing_extensions import Annotated

from wallgen import __version__
from wallgen.config import settings
from wallgen.core import generate_wallpaper
from wallgen.errors import ConfigurationError, GenerationError
from wallgen.models import ASPECT_RATIOS, GenerationMode, GenerationRequest
from wallgen.utils import encode_image_file, mask_secret

app = typer.Typer(
    name="wallgen",
    help="🖼️ Turn a short description (in any language) into wallpaper image URLs.",
    add_completion=False,
)
console = Console()


def version_callback(value: bool):
    if value:
        console.print(f"Wallgen Version: [bold green]{__version__}[/bold green]")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = False,
):
    pass


@app.command()
def generate(
    subject: Annotated[
        str | None,
        typer.Argument(
            help="What the wallpaper should show. If not provided, you will be asked to enter it.",
            show_default=False,
        ),
    ] = None,
    aspect_ratio: Annotated[
        str,
        typer.Option(
            "--aspect-ratio",
            "-a",
            help=f"Aspect ratio, one of {', '.join(ASPECT_RATIOS)}. 16:9 renders landscape.",
        ),
    ] = "9:16",
    mode: Annotated[
        GenerationMode,
        typer.Option(
            "--mode",
            "-m",
            help="'creative' for free variations, 'styles' for one image per catalog style.",
        ),
    ] = GenerationMode.CREATIVE,
    count: Annotated[
        int,
        typer.Option(
            "--count",
            "-n",
            min=1,
            help="Number of variations (creative mode only).",
        ),
    ] = 1,
    reference_image: Annotated[
        Path | None,
        typer.Option(
            "--reference-image",
            "-r",
            exists=True,
            dir_okay=False,
            readable=True,
            help="Image to edit; sent to the model as context.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            help="Log pipeline details, including the requests sent to the model.",
            is_flag=True,
        ),
    ] = False,
):
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )

    if subject is None:
        subject = typer.prompt("Please describe the wallpaper you want")

    try:
        request = GenerationRequest(
            subject=subject,
            reference_image=encode_image_file(reference_image) if reference_image else None,
            aspect_ratio=aspect_ratio,
            mode=mode,
            count=count,
        )
    except (ValidationError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] Invalid request: {e}")
        raise typer.Exit(code=1)

    console.print(f"🎨 Mode: [bold cyan]{request.mode.value}[/bold cyan]")
    console.print(f'📜 Subject: "{request.subject}"')

    async def _generate():
        return await generate_wallpaper(request, verbose=verbose)

    try:
        with console.status("[spinner]Processing...", spinner="dots"):
            result = asyncio.run(_generate())
    except ConfigurationError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(code=1)
    except GenerationError:
        console.print(
            "[bold red]Error:[/bold red] Sorry, I couldn't create your wallpaper. Please try again."
        )
        raise typer.Exit(code=1)

    console.print(
        Panel(result.text, title="[bold green]Success ✨[/bold green]", expand=False)
    )
    labels = (
        list(settings.styles)
        if result.mode == GenerationMode.STYLES
        else [f"#{i + 1}" for i in range(len(result.images))]
    )
    table = Table(title="🖼️ Wallpapers", show_lines=True)
    table.add_column("Variant", style="cyan", no_wrap=True)
    table.add_column("Prompt", style="yellow")
    table.add_column("URL", style="blue", overflow="fold")
    for label, prompt, url in zip(labels, result.prompts, result.images):
        table.add_row(label, prompt, url)
    console.print(table)


@app.command(name="styles")
def list_styles_command():
    table = Table(title="🎭 Style Catalog")
    table.add_column("#", style="magenta", no_wrap=True)
    table.add_column("Style", style="cyan")
    for i, style in enumerate(settings.styles, start=1):
        table.add_row(str(i), style)
    console.print(table)


@app.command(name="show-config")
def show_config_command():
    table = Table(title="⚙️ Wallgen Configuration")
    table.add_column("Setting", style="cyan", no_wrap=True)
    table.add_column("Value", style="green")
    table.add_row("API Key", mask_secret(settings.engine.api_key))
    table.add_row(
        "Model Base URL",
        str(settings.engine.base_url) if settings.engine.base_url else "N/A (Official OpenAI)",
    )
    table.add_row("Model", settings.engine.model)
    table.add_row("Renderer", str(settings.renderer.base_url))
    table.add_row("Reserved Script", settings.reserved_script)
    table.add_row("Portrait", "x".join(str(v) for v in settings.portrait))
    table.add_row("Landscape", "x".join(str(v) for v in settings.landscape))
    console.print(table)


if __name__ == "__main__":
    app()
