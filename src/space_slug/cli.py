"""CLI for space-slug."""

from __future__ import annotations

import asyncio
import logging
import random
from pathlib import Path
from typing import Annotated, Any

import structlog
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from space_slug import __version__
from space_slug.core.config import CliConfig, SlugOptions, load_config
from space_slug.core.errors import SpaceSlugError
from space_slug.data import DEFAULT_DICTIONARY
from space_slug.parts import SlugPart, parse_part_spec
from space_slug.unique import generate_unique_slugs

# Configure structlog
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.dev.ConsoleRenderer(),
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)

app = typer.Typer(
    name="space-slug",
    help="space-slug - Generate readable slugs like witty-otter-42",
    add_completion=False,
)
console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"space-slug v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option("--version", "-v", callback=version_callback, is_eager=True),
    ] = None,
) -> None:
    """space-slug CLI."""


def _read_used_slugs(path: Path | None) -> list[str]:
    if path is None:
        return []
    if not path.exists():
        msg = f"Used slugs file not found: {path}"
        raise FileNotFoundError(msg)
    lines = path.read_text(encoding="utf-8").splitlines()
    return [line.strip() for line in lines if line.strip()]


def _apply_cli_overrides(config: CliConfig, **overrides: Any) -> CliConfig:
    updates = {key: value for key, value in overrides.items() if value is not None}
    return config.model_copy(update=updates)


def _build_parts(specs: list[str]) -> list[SlugPart]:
    return [parse_part_spec(spec) for spec in specs]


@app.command()
def generate(
    count: Annotated[int, typer.Option("--count", "-n", min=1, help="Number of slugs")] = 1,
    part: Annotated[
        list[str] | None,
        typer.Option(
            "--part",
            "-p",
            help="Part spec: category[:n], digits[:n], digits!:n or =text. Repeatable.",
        ),
    ] = None,
    separator: Annotated[
        str | None, typer.Option("--separator", "-s", help="Separator between words")
    ] = None,
    locale: Annotated[str | None, typer.Option("--locale", help="Dictionary locale")] = None,
    max_attempts: Annotated[
        int | None, typer.Option("--max-attempts", min=1, help="Attempts per slug")
    ] = None,
    used: Annotated[
        Path | None, typer.Option("--used", help="File with one already used slug per line")
    ] = None,
    seed: Annotated[int | None, typer.Option("--seed", help="Seed for reproducible slugs")] = None,
    upper: Annotated[
        bool | None, typer.Option("--upper/--lower", help="Uppercase fragments")
    ] = None,
    config_path: Annotated[
        Path | None, typer.Option("--config", "-c", help="Path to config YAML file")
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-V", help="Verbose output")] = False,
) -> None:
    """Generate slugs, unique among themselves and against --used."""
    log_level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
    )

    try:
        config = load_config(config_path) if config_path else CliConfig()
        config = _apply_cli_overrides(
            config,
            separator=separator,
            locale=locale,
            max_attempts=max_attempts,
            parts=part or None,
            upper=upper,
        )
        options = SlugOptions(
            locale=config.locale,
            separator=config.separator,
            transform=str.upper if config.upper else None,
            rng=random.Random(seed) if seed is not None else None,  # noqa: S311
        )
        slugs = asyncio.run(
            generate_unique_slugs(
                count,
                _build_parts(config.parts),
                options,
                used_slugs=_read_used_slugs(used),
                max_attempts=config.max_attempts,
            )
        )
        for slug in slugs:
            console.print(slug, markup=False, highlight=False)

    except FileNotFoundError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e
    except SpaceSlugError as e:
        console.print(f"[red]{e}")
        raise typer.Exit(1) from e
    except ValueError as e:
        console.print(f"[red]Invalid option:[/red] {e}")
        raise typer.Exit(1) from e


@app.command()
def categories(
    locale: Annotated[str, typer.Option("--locale", help="Dictionary locale")] = "en",
) -> None:
    """List the bundled dictionary categories for a locale."""
    words = DEFAULT_DICTIONARY.get(locale)
    if not words:
        console.print(f"[red]Error:[/red] No dictionary for locale '{locale}'")
        raise typer.Exit(1)

    table = Table(title=f"Categories ({locale})")
    table.add_column("Category", style="cyan")
    table.add_column("Words", justify="right")
    table.add_column("Sample")
    for name, entries in sorted(words.items()):
        table.add_row(name, str(len(entries)), ", ".join(entries[:3]))
    console.print(table)


if __name__ == "__main__":
    app()
