"""Click CLI interface definitions.

Defines the command-line interface structure and routes commands
to their respective runners.
"""

from __future__ import annotations

from pathlib import Path

import click
from dotenv import load_dotenv

from DynamicPageList.cli.runner import CommandRunner
from DynamicPageList.config import load_config


def _parse_request_args(values: tuple[str, ...]) -> dict[str, str]:
    request: dict[str, str] = {}
    for item in values:
        if "=" not in item:
            raise click.BadParameter(f"expected KEY=VALUE, got {item!r}", param_hint="--request")
        key, value = item.split("=", 1)
        request[key.strip()] = value
    return request


@click.group(help="DynamicPageList: validate page-list directives into query specifications.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=Path("config/default.yml"),
    show_default=True,
    help="Path to YAML config file.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path) -> None:
    """CLI entry group.

    Loads environment variables from .env file before processing config.

    Args:
        ctx: Click context.
        config_path: Path to YAML config file.
    """
    load_dotenv()

    cfg = load_config(config_path)
    ctx.obj = cfg


@cli.command("parse")
@click.argument("directive", type=click.File("r", encoding="utf-8"))
@click.option("--request", "request_args", multiple=True, help="Request argument KEY=VALUE (repeatable).")
@click.option("--grant", "granted", multiple=True, help="Right held by the caller (repeatable).")
@click.pass_context
def parse_cmd(ctx: click.Context, directive, request_args: tuple[str, ...], granted: tuple[str, ...]) -> None:
    """Parse a directive file (or - for stdin) and print the specification as JSON.

    Raises:
        click.Abort: When the directive is aborted.
    """
    runner = CommandRunner(ctx.obj)
    output = runner.run_parse(
        ctx.command.name,
        directive.read(),
        request=_parse_request_args(request_args),
        granted=granted,
    )
    click.echo(output)
