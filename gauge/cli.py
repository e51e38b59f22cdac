"""
Gauge CLI
==========

Click-based command-line interface for PassGauge. Provides subcommands
for scoring a password, comparing the substring matchers and running the
HTTP service.

Usage::

    passgauge check "MyP@ssw0rd!"
    passgauge -o json check "MyP@ssw0rd!"
    passgauge match "hunter1234" "1234"
    passgauge serve --port 5000

References:
    - Click Documentation. https://click.palletsprojects.com/
"""

from __future__ import annotations

import json
from typing import Optional

import click
import uvicorn

from shared.config import GaugeConfig
from shared.console import GaugeConsole

from gauge import __version__
from gauge.core.engine import GaugeEngine
from gauge.output.console import GaugeConsoleOutput


# ===================================================================== #
#  CLI Group
# ===================================================================== #

@click.group()
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to PassGauge configuration file (TOML).",
)
@click.option(
    "--output", "-o",
    type=click.Choice(["console", "json"]),
    default="console",
    help="Output format.",
)
@click.option(
    "--quiet", "-q",
    is_flag=True,
    default=False,
    help="Suppress banner and informational output.",
)
@click.version_option(__version__, prog_name="passgauge")
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[str],
    output: str,
    quiet: bool,
) -> None:
    """PassGauge -- Password Strength Heuristics.

    Score passwords, inspect the weak-pattern matchers and serve the
    analysis over HTTP.
    """
    ctx.ensure_object(dict)

    try:
        gauge_config = GaugeConfig.load(config) if config else GaugeConfig()
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--config") from exc
    ctx.obj["config"] = gauge_config
    ctx.obj["output_format"] = output
    ctx.obj["quiet"] = quiet

    console = GaugeConsole(quiet=quiet)
    ctx.obj["console"] = console
    ctx.obj["display"] = GaugeConsoleOutput(console)

    if not quiet and output == "console":
        console.banner(version=__version__)


def _engine(ctx: click.Context) -> GaugeEngine:
    """Build the engine lazily so ``serve`` does not create two."""
    if "engine" not in ctx.obj:
        try:
            ctx.obj["engine"] = GaugeEngine(ctx.obj["config"])
        except ValueError as exc:
            raise click.ClickException(f"Invalid configuration: {exc}") from exc
    return ctx.obj["engine"]


# ===================================================================== #
#  Subcommands
# ===================================================================== #

@cli.command()
@click.argument("password", required=False)
@click.pass_context
def check(ctx: click.Context, password: Optional[str]) -> None:
    """Score a password and list improvement suggestions.

    When PASSWORD is omitted it is read from a hidden prompt.
    """
    if password is None:
        password = click.prompt("Password", hide_input=True, default="", show_default=False)
    if not password:
        raise click.BadParameter("Enter a password.", param_hint="PASSWORD")

    result = _engine(ctx).analyze(password)

    if ctx.obj["output_format"] == "json":
        click.echo(json.dumps(
            result.model_dump(mode="json"),
            indent=2,
            ensure_ascii=False,
        ))
    else:
        display: GaugeConsoleOutput = ctx.obj["display"]
        display.display_analysis(result)


@cli.command()
@click.argument("text")
@click.argument("pattern")
@click.pass_context
def match(ctx: click.Context, text: str, pattern: str) -> None:
    """Run both substring matchers on TEXT and PATTERN.

    Shows the KMP failure table and each algorithm's verdict. Exits with
    status 1 if the algorithms disagree.
    """
    report = _engine(ctx).compare_matchers(text, pattern)

    if ctx.obj["output_format"] == "json":
        click.echo(json.dumps(
            {**report.model_dump(mode="json"), "agree": report.agree},
            indent=2,
            ensure_ascii=False,
        ))
    else:
        display: GaugeConsoleOutput = ctx.obj["display"]
        display.display_match(report)

    if not report.agree:
        ctx.exit(1)


@cli.command()
@click.option("--host", default=None, help="Bind address (overrides config).")
@click.option("--port", "-p", type=int, default=None, help="Port (overrides config).")
@click.pass_context
def serve(ctx: click.Context, host: Optional[str], port: Optional[int]) -> None:
    """Start the HTTP analysis service."""
    from gauge.server.app import create_app

    config: GaugeConfig = ctx.obj["config"]
    console: GaugeConsole = ctx.obj["console"]

    bind_host = host or config.server.host
    bind_port = port if port is not None else config.server.port

    app = create_app(config, engine=_engine(ctx))
    console.info(f"Server running on http://{bind_host}:{bind_port}")
    uvicorn.run(
        app,
        host=bind_host,
        port=bind_port,
        log_level=config.global_settings.log_level.lower(),
    )


# ===================================================================== #
#  Entry Point
# ===================================================================== #

def main() -> None:
    """Main entry point for the PassGauge CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
