"""
Main CLI entry point for confloader.
"""

import json
import logging
import sys
from typing import Any, Tuple

import click
import yaml
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from confloader import Config, ConfigError, ConfigLoader, LoaderSettings
from confloader_cli import __version__

console = Console()
err_console = Console(stderr=True)


def _spec_from_args(specs: Tuple[str, ...]) -> Any:
    # Several arguments form a sequence, so "?"-prefixed ones are optional
    return specs[0] if len(specs) == 1 else list(specs)


def _build_tree(label: str, value: Any) -> Tree:
    tree = Tree(escape(label))
    _add_nodes(tree, value)
    return tree


def _add_nodes(node: Tree, value: Any) -> None:
    if isinstance(value, dict):
        for key, child in value.items():
            if isinstance(child, (dict, list)):
                _add_nodes(node.add(f"[bold]{escape(str(key))}[/bold]"), child)
            else:
                node.add(f"[bold]{escape(str(key))}[/bold]: {escape(repr(child))}")
    elif isinstance(value, list):
        for index, child in enumerate(value):
            if isinstance(child, (dict, list)):
                _add_nodes(node.add(f"[dim]{index}[/dim]"), child)
            else:
                node.add(f"[dim]{index}[/dim]: {escape(repr(child))}")
    else:
        node.add(escape(repr(value)))


def _fail(ctx: click.Context, error: Exception) -> None:
    err_console.print(f"[bold red]Error:[/bold red] {escape(str(error))}", soft_wrap=True)
    if ctx.obj.get("debug"):
        raise error
    sys.exit(1)


def _make_loader(ctx: click.Context) -> ConfigLoader:
    try:
        settings = LoaderSettings(dist_marker=ctx.obj["dist_marker"])
    except ValidationError as e:
        _fail(ctx, e)
    return ConfigLoader(settings=settings)


@click.group(invoke_without_command=True)
@click.option("--version", is_flag=True, help="Show version and exit")
@click.option("--dist-marker", default="dist", show_default=True, help="Filename suffix ignored when detecting the format")
@click.option("--debug", "-d", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, version: bool, dist_marker: str, debug: bool) -> None:
    """
    confloader - load Python, INI, XML, JSON and YAML configuration files.

    SPEC arguments may be files or directories. When several are given,
    prefix one with '?' to make it optional.
    """
    ctx.ensure_object(dict)
    ctx.obj["debug"] = debug
    ctx.obj["dist_marker"] = dist_marker

    if debug:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(logging.DEBUG)
        console_handler.setFormatter(logging.Formatter(
            "%(name)s - %(levelname)s - %(message)s"
        ))

        root_logger = logging.getLogger()
        root_logger.setLevel(logging.DEBUG)
        root_logger.addHandler(console_handler)

    if version:
        console.print(f"[bold cyan]confloader[/bold cyan] version [green]{__version__}[/green]")
        return

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command()
@click.argument("specs", nargs=-1, required=True)
@click.pass_context
def files(ctx: click.Context, specs: Tuple[str, ...]) -> None:
    """List the files SPECS resolve to, in load order."""
    loader = _make_loader(ctx)

    try:
        paths = loader.resolve(_spec_from_args(specs))
    except ConfigError as e:
        _fail(ctx, e)

    for path in paths:
        console.print(escape(str(path)), soft_wrap=True, highlight=False)

    if not paths:
        err_console.print("[yellow]No files resolved[/yellow]")


@cli.command()
@click.argument("specs", nargs=-1, required=True)
@click.option("--key", "-k", help="Dotted key to print instead of the whole tree")
@click.option(
    "--format", "-f", "output_format",
    type=click.Choice(["json", "yaml", "tree"]),
    default="json",
    show_default=True,
    help="Output format",
)
@click.pass_context
def show(ctx: click.Context, specs: Tuple[str, ...], key: str | None, output_format: str) -> None:
    """Load SPECS and print the merged configuration."""
    loader = _make_loader(ctx)

    try:
        config = Config.load(_spec_from_args(specs), loader=loader)
    except ConfigError as e:
        _fail(ctx, e)

    value: Any = config.all()
    if key is not None:
        if not config.has(key):
            _fail(ctx, LookupError(f"Key not found: {key}"))
        value = config.get(key)

    if output_format == "json":
        click.echo(json.dumps(value, indent=2, default=str))
    elif output_format == "yaml":
        click.echo(yaml.safe_dump(value, default_flow_style=False, sort_keys=False).rstrip())
    else:
        console.print(_build_tree(key or " ".join(specs), value), soft_wrap=True)


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
