"""
Keyspace CLI
=============

Click-based command-line interface for the Keyspace strength meter.

Usage::

    python -m keyspace check "MyP@ssw0rd!" --confirm "MyP@ssw0rd!"
    python -m keyspace simulate "MyP@ssw0rd!" --guess-rate 1e10
    python -m keyspace generate --length 20 --count 3
    python -m keyspace -o json report "MyP@ssw0rd!"

When PASSWORD is omitted it is prompted for with hidden input, which
keeps it out of shell history. With ``-o html``, ``check`` and ``simulate``
write the full password report; ``generate`` has no HTML form.

References:
    - Click Documentation. https://click.palletsprojects.com/
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import click

from shared.config import KeyspaceConfig
from shared.console import KeyspaceConsole
from shared.models import ScanResult

from keyspace import __version__
from keyspace.core.engine import KeyspaceEngine
from keyspace.output.console import KeyspaceConsoleOutput
from keyspace.output.report import KeyspaceReportGenerator


# ===================================================================== #
#  CLI Group
# ===================================================================== #

@click.group()
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to a Keyspace configuration file (TOML).",
)
@click.option(
    "--output", "-o",
    type=click.Choice(["console", "json", "html"]),
    default="console",
    help="Output format.",
)
@click.option(
    "--output-file", "-f",
    type=click.Path(dir_okay=False),
    default=None,
    help="Output file path (for JSON/HTML output).",
)
@click.option(
    "--quiet", "-q",
    is_flag=True,
    default=False,
    help="Suppress the banner.",
)
@click.version_option(__version__, prog_name="keyspace")
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[str],
    output: str,
    output_file: Optional[str],
    quiet: bool,
) -> None:
    """Keyspace -- password strength meter and brute-force simulator.

    Estimate entropy, check composition requirements, project
    brute-force crack time, and generate strong suggestions.
    """
    ctx.ensure_object(dict)

    try:
        keyspace_config = KeyspaceConfig.load(config) if config else KeyspaceConfig()
        engine = KeyspaceEngine(keyspace_config)
    except (TypeError, ValueError) as exc:
        raise click.BadParameter(str(exc), param_hint="'--config'") from exc

    ctx.obj["config"] = keyspace_config
    ctx.obj["output_format"] = output
    ctx.obj["output_file"] = output_file

    console = KeyspaceConsole()
    ctx.obj["console"] = console
    ctx.obj["engine"] = engine
    ctx.obj["display"] = KeyspaceConsoleOutput(console)
    ctx.obj["reporter"] = KeyspaceReportGenerator()

    if not quiet and output == "console":
        console.banner(version=__version__)


def _read_password(password: Optional[str]) -> str:
    if password is not None:
        return password
    return click.prompt("Password", hide_input=True, default="", show_default=False)


def _emit_json(ctx: click.Context, payload: dict) -> None:
    """Write *payload* to --output-file or stdout."""
    text = json.dumps(payload, indent=2, ensure_ascii=False, allow_nan=False, default=str)
    output_file = ctx.obj["output_file"]
    if output_file:
        path = Path(output_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        ctx.obj["console"].success(f"JSON saved to: {path}")
    else:
        click.echo(text)


def _handle_output(ctx: click.Context, result: ScanResult) -> None:
    """Handle report output based on the selected format."""
    output_format = ctx.obj["output_format"]
    output_file = ctx.obj["output_file"]
    reporter: KeyspaceReportGenerator = ctx.obj["reporter"]
    console: KeyspaceConsole = ctx.obj["console"]

    if output_format == "json":
        if output_file:
            path = reporter.generate_json(result, Path(output_file))
            console.success(f"JSON report saved to: {path}")
        else:
            click.echo(reporter.render_json(result))
    elif output_format == "html":
        if output_file:
            path = Path(output_file)
        else:
            output_dir = ctx.obj["config"].global_settings.output_dir
            path = Path(output_dir) / "keyspace_report.html"
        path = reporter.generate_html(result, path)
        console.success(f"HTML report saved to: {path}")


# ===================================================================== #
#  Subcommands
# ===================================================================== #

@cli.command()
@click.argument("password", required=False)
@click.option(
    "--confirm",
    default=None,
    help="Confirmation entry to compare against PASSWORD.",
)
@click.pass_context
def check(ctx: click.Context, password: Optional[str], confirm: Optional[str]) -> None:
    """Show the strength meter and requirement checklist."""
    engine: KeyspaceEngine = ctx.obj["engine"]
    candidate = _read_password(password)

    reading = engine.evaluate(candidate)
    match = engine.check_match(candidate, confirm) if confirm is not None else None

    output_format = ctx.obj["output_format"]
    if output_format == "console":
        ctx.obj["display"].display_reading(reading, match)
    elif output_format == "html":
        _handle_output(ctx, engine.analyze_password(candidate))
    else:
        payload = {"reading": reading.model_dump(mode="json")}
        if match is not None:
            payload["match"] = match.model_dump(mode="json")
        _emit_json(ctx, payload)


@cli.command()
@click.argument("password", required=False)
@click.option(
    "--guess-rate", "-r",
    type=float,
    default=None,
    help="Attacker guesses per second (default from config, 2e9).",
)
@click.option(
    "--animate/--no-animate",
    default=False,
    help="Play the brute-force progress bar before the result.",
)
@click.pass_context
def simulate(
    ctx: click.Context,
    password: Optional[str],
    guess_rate: Optional[float],
    animate: bool,
) -> None:
    """Simulate a dictionary and brute-force attack on PASSWORD."""
    engine: KeyspaceEngine = ctx.obj["engine"]
    candidate = _read_password(password)

    try:
        report = engine.simulate_attack(candidate, guess_rate)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--guess-rate") from exc

    output_format = ctx.obj["output_format"]
    if output_format == "console":
        ctx.obj["display"].display_attack(report, animate=animate)
    elif output_format == "html":
        _handle_output(ctx, engine.analyze_password(candidate, guess_rate))
    else:
        _emit_json(ctx, {"attack": report.model_dump(mode="json")})


@cli.command()
@click.option(
    "--length", "-l",
    type=int,
    default=None,
    help="Password length (default from config, 14; minimum 4).",
)
@click.option(
    "--count", "-n",
    type=click.IntRange(min=1),
    default=1,
    help="Number of passwords to generate.",
)
@click.pass_context
def generate(ctx: click.Context, length: Optional[int], count: int) -> None:
    """Generate passwords containing every character class."""
    if ctx.obj["output_format"] == "html":
        raise click.UsageError(
            "generate supports console and json output only", ctx=ctx
        )
    engine: KeyspaceEngine = ctx.obj["engine"]

    try:
        passwords = [engine.suggest(length) for _ in range(count)]
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--length") from exc

    suggestions = [(pw, engine.evaluate(pw)) for pw in passwords]

    if ctx.obj["output_format"] == "console":
        ctx.obj["display"].display_suggestions(suggestions)
    else:
        _emit_json(ctx, {
            "suggestions": [
                {
                    "password": pw,
                    "bits": reading.estimate.bits,
                    "strength": reading.estimate.label.value,
                }
                for pw, reading in suggestions
            ]
        })


@cli.command()
@click.argument("password", required=False)
@click.pass_context
def report(ctx: click.Context, password: Optional[str]) -> None:
    """Full analysis of PASSWORD as findings (console, JSON, or HTML)."""
    engine: KeyspaceEngine = ctx.obj["engine"]
    candidate = _read_password(password)

    result = engine.analyze_password(candidate)

    if ctx.obj["output_format"] == "console":
        console: KeyspaceConsole = ctx.obj["console"]
        console.section("Password Report")
        console.findings_table(result.findings)
        console.info(result.summary)
    else:
        _handle_output(ctx, result)


# ===================================================================== #
#  Entry Point
# ===================================================================== #

def main() -> None:
    """Main entry point for the Keyspace CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
