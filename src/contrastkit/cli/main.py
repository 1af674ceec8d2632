"""CLI entry point for contrast-kit.

Invoked as::

    contrast-kit [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m contrastkit.cli.main

Commands
--------
luminance   Show the relative luminance of a color
ratio       Compute the contrast ratio of a foreground over a background
pick        Pick the foreground color for one role
palette     Pick foreground colors for every role
policies    List registered role policies
version     Show version information

Colors are accepted as ``#RGB``, ``#RRGGBB``, ``#RRGGBBAA``, ``r,g,b[,a]``
floats in ``[0, 1]``, or a palette name such as ``orange``.
"""
from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING, Any, TypeVar

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.syntax import Syntax
from rich.table import Table

if TYPE_CHECKING:
    from contrastkit.color.model import Color
    from contrastkit.config.options import ContrastOptions
    from contrastkit.engine.engine import ContrastResult

console = Console()
err_console = Console(stderr=True)

F = TypeVar("F", bound=Callable[..., Any])

ROLE_CHOICES = ["primary", "secondary", "link", "neon-link"]

POLICY_ENTRYPOINT_GROUP = "contrastkit.policies"


def _parse_color_or_exit(text: str) -> "Color":
    """Parse a color argument, printing an error and exiting on failure."""
    from contrastkit.color.parsing import parse_color
    from contrastkit.errors import InvalidColorError

    try:
        return parse_color(text)
    except InvalidColorError as exc:
        err_console.print(f"[red]Error:[/red] {exc}")
        sys.exit(1)


def _build_options_or_exit(config: str | None, **overrides: object) -> "ContrastOptions":
    """Load options from ``config`` (if given) and layer CLI flags on top."""
    from contrastkit.config.options import ContrastOptions, load_options
    from contrastkit.errors import ConfigError

    try:
        base = load_options(config) if config else ContrastOptions()
        return base.replace(**overrides)
    except ConfigError as exc:
        err_console.print(f"[red]Config error:[/red] {exc}")
        sys.exit(1)


def _swatch(color: "Color") -> str:
    """Rich markup for a small color sample followed by the hex code."""
    return f"[on {color.to_hex()[:7]}]    [/] {color.to_hex()}"


def _results_table(title: str, results: "list[ContrastResult]") -> Table:
    table = Table(title=title, show_lines=True)
    table.add_column("Role", style="bold", min_width=10)
    table.add_column("Policy", min_width=10)
    table.add_column("Color", min_width=14)
    table.add_column("Ratio", justify="right")
    table.add_column("Threshold", justify="right")
    table.add_column("Meets", justify="center")

    for result in results:
        meets = "[green]yes[/green]" if result.passes else "[yellow]no[/yellow]"
        if result.fell_back:
            meets += "\n[dim]fallback[/dim]"
        table.add_row(
            result.role.value,
            result.policy,
            _swatch(result.color),
            f"{result.ratio:.2f}",
            f"{result.threshold:.2f}",
            meets,
        )
    return table


def _engine_options(func: F) -> F:
    """Attach the options shared by ``pick`` and ``palette``."""
    decorators = [
        click.option(
            "--config",
            "config",
            type=click.Path(exists=False, dir_okay=False),
            default=None,
            help="YAML file with contrast options",
        ),
        click.option("--threshold", type=float, default=None, help="Override the role threshold"),
        click.option(
            "--strict",
            is_flag=True,
            default=False,
            help="Re-check derived roles and fall back to black/white",
        ),
        click.option("--link-policy", default=None, help="Link policy name"),
        click.option("--secondary-policy", default=None, help="Secondary policy name"),
        click.option(
            "--wcag",
            is_flag=True,
            default=False,
            help="Validate with the symmetric WCAG ratio",
        ),
    ]
    for decorator in reversed(decorators):
        func = decorator(func)
    return func


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="contrast-kit")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Pick readable foreground colors for any background."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=err_console, show_path=False)],
            force=True,
        )

    # Every command resolves policies against the same registry
    from contrastkit.engine.policies import policy_registry

    policy_registry.load_entrypoints(POLICY_ENTRYPOINT_GROUP)


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from contrastkit import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]contrast-kit[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# policies command
# ---------------------------------------------------------------------------


@cli.command(name="policies")
def policies_command() -> None:
    """List role policies, including those loaded from entry-points."""
    from contrastkit.config.options import ContrastOptions
    from contrastkit.engine.policies import policy_registry

    defaults = ContrastOptions()

    table = Table(title="Registered policies")
    table.add_column("Role", style="bold")
    table.add_column("Policies")
    for role, names in policy_registry.as_table().items():
        default = defaults.policy_name(role)
        rendered = [f"[bold]{n}[/bold] (default)" if n == default else n for n in names]
        table.add_row(role.value, ", ".join(rendered) or "[dim](none)[/dim]")
    console.print(table)


# ---------------------------------------------------------------------------
# luminance command
# ---------------------------------------------------------------------------


@cli.command(name="luminance")
@click.argument("color")
def luminance_command(color: str) -> None:
    """Show the relative luminance of COLOR."""
    from contrastkit.engine.luminance import relative_luminance

    parsed = _parse_color_or_exit(color)
    console.print(f"{_swatch(parsed)}  luminance [bold]{relative_luminance(parsed):.4f}[/bold]")


# ---------------------------------------------------------------------------
# ratio command
# ---------------------------------------------------------------------------


@cli.command(name="ratio")
@click.argument("foreground")
@click.argument("background")
@click.option("--threshold", type=float, default=4.5, show_default=True, help="Required ratio")
@click.option("--wcag", is_flag=True, default=False, help="Use the symmetric WCAG ratio")
def ratio_command(foreground: str, background: str, threshold: float, wcag: bool) -> None:
    """Compute the contrast of FOREGROUND over BACKGROUND.

    Exits with status 1 when the ratio is below the threshold.
    """
    from contrastkit.engine.luminance import ratio_function

    fg = _parse_color_or_exit(foreground)
    bg = _parse_color_or_exit(background)
    ratio = ratio_function("wcag" if wcag else "asymmetric")(fg, bg)

    verdict = "[green]PASS[/green]" if ratio >= threshold else "[red]FAIL[/red]"
    console.print(
        f"{_swatch(fg)} on {_swatch(bg)}: ratio [bold]{ratio:.2f}[/bold] "
        f"(threshold {threshold:.2f}) {verdict}"
    )
    if ratio < threshold:
        sys.exit(1)


# ---------------------------------------------------------------------------
# pick command
# ---------------------------------------------------------------------------


@cli.command(name="pick")
@click.argument("background")
@click.option(
    "--role",
    type=click.Choice(ROLE_CHOICES, case_sensitive=False),
    default="primary",
    show_default=True,
    help="Foreground role to compute",
)
@_engine_options
def pick_command(
    background: str,
    role: str,
    config: str | None,
    threshold: float | None,
    strict: bool,
    link_policy: str | None,
    secondary_policy: str | None,
    wcag: bool,
) -> None:
    """Pick the foreground color for one role on BACKGROUND."""
    from contrastkit.engine.engine import ContrastEngine
    from contrastkit.errors import PolicyNotFoundError

    bg = _parse_color_or_exit(background)
    options = _build_options_or_exit(
        config,
        threshold=threshold,
        strict=strict or None,
        link_policy=link_policy,
        secondary_policy=secondary_policy,
        ratio="wcag" if wcag else None,
    )

    try:
        result = ContrastEngine(options).evaluate(bg, role.lower())
    except PolicyNotFoundError as exc:
        err_console.print(f"[red]Error:[/red] {exc}")
        sys.exit(1)

    console.print(_results_table(f"Background {_swatch(bg)}", [result]))
    console.print(f"{result.role.value}: [bold]{result.color.to_hex()}[/bold]")


# ---------------------------------------------------------------------------
# palette command
# ---------------------------------------------------------------------------


@cli.command(name="palette")
@click.argument("background")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "json", "yaml"], case_sensitive=False),
    default="table",
    help="Output format",
)
@click.option("--output", "-o", default=None, help="Output file path (json/yaml only)")
@_engine_options
def palette_command(
    background: str,
    output_format: str,
    output: str | None,
    config: str | None,
    threshold: float | None,
    strict: bool,
    link_policy: str | None,
    secondary_policy: str | None,
    wcag: bool,
) -> None:
    """Pick foreground colors for every role on BACKGROUND."""
    from contrastkit.engine.engine import ContrastEngine
    from contrastkit.errors import PolicyNotFoundError
    from contrastkit.export import PaletteSerializer

    bg = _parse_color_or_exit(background)
    options = _build_options_or_exit(
        config,
        threshold=threshold,
        strict=strict or None,
        link_policy=link_policy,
        secondary_policy=secondary_policy,
        ratio="wcag" if wcag else None,
    )

    try:
        results = ContrastEngine(options).palette(bg)
    except PolicyNotFoundError as exc:
        err_console.print(f"[red]Error:[/red] {exc}")
        sys.exit(1)

    output_format = output_format.lower()
    if output_format == "table":
        console.print(_results_table(f"Background {_swatch(bg)}", list(results.values())))
        return

    serializer = PaletteSerializer()
    if output_format == "json":
        text = serializer.to_json(bg, results, indent=2)
    else:
        text = serializer.to_yaml(bg, results)

    if output:
        try:
            Path(output).write_text(text, encoding="utf-8")
        except OSError as exc:
            err_console.print(f"[red]Error:[/red] Cannot write {output}: {exc}")
            sys.exit(1)
        console.print(f"[green]Palette written to[/green] {output}")
    else:
        console.print(Syntax(text, output_format, line_numbers=False))


if __name__ == "__main__":
    cli()
