"""CLI entry point for axis-constraints."""

import json
import logging
import sys

import click

from axis_constraints.config import RenderConfig, SolveConfig
from axis_constraints.constraints.engine import solve_layout_dict
from axis_constraints.logging_config import setup_logging
from axis_constraints.renderers import FORMATS, get_renderer

logger = logging.getLogger("axis_constraints.cli")


@click.command()
@click.argument("input", required=False, type=click.Path(exists=True))
@click.option("--format", "-f", "fmt", type=click.Choice(FORMATS), default="text", help="Output format")
@click.option("--output", "-o", "output", type=str, default=None, help="Write output to this file instead of stdout")
@click.option("--ratio", "-r", "default_ratio", type=float, default=1.0, help="Ratio used when none is given")
@click.option("--no-type-warnings", "quiet_types", is_flag=True, help="Drop links to differently typed axes silently")
@click.option("--verbose", "-v", "verbose", is_flag=True, help="Log debug output to stderr")
@click.option("--log-file", "log_file", type=str, default=None, help="Log debug output to stderr and to this file")
def main(
    input: str | None,
    fmt: str,
    output: str | None,
    default_ratio: float,
    quiet_types: bool,
    verbose: bool,
    log_file: str | None,
) -> None:
    """Chart layout axis scale-constraint groups from a JSON layout."""
    try:
        solve_config = SolveConfig(
            default_ratio=default_ratio,
            warn_on_type_mismatch=not quiet_types,
            log_level=logging.DEBUG if verbose or log_file else logging.WARNING,
        )
    except ValueError:
        click.echo(f"error: --ratio must be a finite positive number, got {default_ratio:g}", err=True)
        sys.exit(1)
    render_config = RenderConfig(format=fmt)
    if verbose or log_file:
        setup_logging(solve_config.log_level, log_file)

    if input:
        try:
            with open(input) as f:
                text = f.read()
        except OSError as e:
            click.echo(f"error: cannot read '{input}': {e}", err=True)
            sys.exit(1)
    else:
        text = sys.stdin.read()

    try:
        layout = json.loads(text)
    except ValueError as e:
        click.echo(f"error: invalid JSON: {e}", err=True)
        sys.exit(1)

    try:
        # warnings end up in the rendered output; keep stderr for debug logs
        result = solve_layout_dict(layout, solve_config, warn=lambda message: logger.debug("warning: %s", message))
    except ValueError as e:
        click.echo(f"error: {e}", err=True)
        sys.exit(1)

    rendered = get_renderer(render_config.format).render(result)

    if output:
        try:
            with open(output, "w") as f:
                f.write(rendered)
        except OSError as e:
            click.echo(f"error: cannot write '{output}': {e}", err=True)
            sys.exit(1)
    else:
        click.echo(rendered, nl=False)


if __name__ == "__main__":
    main()
