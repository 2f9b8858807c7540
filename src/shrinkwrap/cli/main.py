"""Main CLI entry point for shrinkwrap.

Samples modifier values and previews shrink candidates from the command
line.
"""

from typing import Any
import ast
import sys

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from shrinkwrap import __version__
from shrinkwrap.core.registry import get_global_arbitrary_registry
from shrinkwrap.logging import get_logger
from shrinkwrap.modifiers.registry import ModifierKind, ModifierRegistry
from shrinkwrap.settings.base import GenerationSettings
from shrinkwrap.settings.loader import load_settings
from shrinkwrap.utils.helpers import generate_seed, take

console = Console()
logger = get_logger(__name__)

# Stateful modifiers need a user-supplied state machine, which cannot be
# given on the command line.
CLI_KINDS = [kind.value for kind in ModifierKind if kind is not ModifierKind.STATEFUL]


def _fail(ctx: click.Context, error: Exception) -> None:
    console.print(f"[red]Error: {escape(str(error))}[/red]")
    if ctx.obj.get("verbose", False):
        import traceback
        console.print(escape(traceback.format_exc()))
    sys.exit(1)


def _load(config: str | None, **overrides: Any) -> GenerationSettings:
    settings = load_settings(config) if config else GenerationSettings()
    updates = {key: value for key, value in overrides.items() if value is not None}
    return GenerationSettings.model_validate({**settings.model_dump(), **updates})


def _parse_value(text: str) -> Any:
    """Read a Python literal, falling back to the raw text."""
    try:
        return ast.literal_eval(text)
    except (ValueError, SyntaxError):
        return text


@click.group()
@click.version_option(version=__version__, prog_name="shrinkwrap")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """shrinkwrap - Generate and shrink test data through modifiers.

    Modifiers wrap a base value to enforce invariants, reshape the
    distribution, or change the order in which shrinks are explored.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


@cli.command()
@click.pass_context
def list_modifiers(ctx: click.Context) -> None:
    """List available modifiers."""
    registry = ModifierRegistry()

    table = Table(title="Available Modifiers")
    table.add_column("Kind", style="cyan")
    table.add_column("Description")

    for kind in registry.list_kinds():
        table.add_row(kind.value, registry.describe(kind))

    console.print(table)


@cli.command()
@click.pass_context
def list_bases(ctx: click.Context) -> None:
    """List base arbitraries that modifiers can wrap."""
    registry = get_global_arbitrary_registry()

    table = Table(title="Base Arbitraries")
    table.add_column("Name", style="cyan")
    table.add_column("Arbitrary")

    for name in registry.list_names():
        table.add_row(name, escape(repr(registry.get(name))))

    console.print(table)


@cli.command()
@click.argument("kind", type=click.Choice(CLI_KINDS))
@click.option("--base", "-b", help="Base arbitrary name (see list-bases; default: int)")
@click.option("--count", "-n", type=int, help="Number of values")
@click.option("--size", type=int, help="Fixed ambient size (default: ramp up to max_size)")
@click.option("--seed", "-s", type=int, help="Random seed for reproducibility")
@click.option("--config", "-c", type=click.Path(exists=True), help="Settings YAML file")
@click.pass_context
def sample(
    ctx: click.Context,
    kind: str,
    base: str | None,
    count: int | None,
    size: int | None,
    seed: int | None,
    config: str | None,
) -> None:
    """Generate values of a modifier.

    KIND is the modifier kind (see list-modifiers).
    """
    verbose = ctx.obj.get("verbose", False)

    try:
        settings = _load(config, count=count, size=size, seed=seed)
        if settings.seed is None:
            settings = settings.model_copy(update={"seed": generate_seed()})

        arbitrary = ModifierRegistry().create(kind, base=base)
        logger.debug("Sampling %d values from %r", settings.count, arbitrary)

        for value in arbitrary.sample(settings=settings):
            click.echo(repr(value))

        if verbose:
            console.print(f"[dim]seed={settings.seed}[/dim]")

    except Exception as e:
        _fail(ctx, e)


@cli.command()
@click.argument("kind", type=click.Choice(CLI_KINDS))
@click.argument("value")
@click.option("--base", "-b", help="Base arbitrary name (see list-bases; default: int)")
@click.option("--rank", "-r", type=int, default=0, help="Rank for ranked_shrink")
@click.option("--limit", "-l", type=int, help="Maximum number of candidates to show")
@click.option("--config", "-c", type=click.Path(exists=True), help="Settings YAML file")
@click.pass_context
def shrink(
    ctx: click.Context,
    kind: str,
    value: str,
    base: str | None,
    rank: int,
    limit: int | None,
    config: str | None,
) -> None:
    """Show the shrink candidates of a value.

    KIND is the modifier kind; VALUE is a Python literal such as 42,
    "[3, 1, 2]" or "'abc'" (bare words are taken as strings).
    """
    try:
        settings = _load(config, shrink_limit=limit)
        arbitrary = ModifierRegistry().create(kind, base=base)

        payload = _parse_value(value)
        if kind == ModifierKind.RANKED_SHRINK.value:
            wrapped = arbitrary.modifier(payload, rank=rank)
        else:
            wrapped = arbitrary.modifier(payload)

        candidates = take(arbitrary.shrink(wrapped), settings.shrink_limit)
        if not candidates:
            console.print("[yellow]No shrink candidates[/yellow]")
            return

        table = Table(title=f"Shrinks of {escape(repr(wrapped))}")
        table.add_column("#", justify="right")
        table.add_column("Candidate", style="cyan")
        show_rank = kind == ModifierKind.RANKED_SHRINK.value
        if show_rank:
            table.add_column("Rank", justify="right")

        for index, candidate in enumerate(candidates):
            row = [str(index), escape(repr(candidate))]
            if show_rank:
                row.append(str(candidate.rank))
            table.add_row(*row)

        console.print(table)

    except Exception as e:
        _fail(ctx, e)


@cli.command()
@click.argument("path", type=click.Path(exists=True))
@click.pass_context
def validate_settings(ctx: click.Context, path: str) -> None:
    """Validate a settings file.

    PATH is the path to the YAML file to validate.
    """
    try:
        settings = load_settings(path)
    except Exception as e:
        _fail(ctx, e)
        return

    console.print(f"[green]Valid settings: {escape(path)}[/green]")
    if ctx.obj.get("verbose", False):
        for key, value in settings.model_dump().items():
            console.print(f"  {key}: {escape(repr(value))}")


if __name__ == "__main__":
    cli()
