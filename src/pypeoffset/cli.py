"""
Command-line interface for the pipe offset calculator.

Usage:
    pypeoffset angles
    pypeoffset calc 100 --angle 45 --diameter 10
    pypeoffset diagram 100 --angle 30 -o offset.svg
    pypeoffset batch jobs.yaml --output-dir diagrams/
"""

import logging
from pathlib import Path

import click

from .config import OffsetJobFile
from .diagram import build_diagram, write_svg
from .inputs import parameters_from_text
from .offset_calculator import OffsetCalculator, OffsetValidationError, format_angle
from .report import DEFAULT_PRECISION, format_result

logger = logging.getLogger(__name__)

_offset_argument = click.argument("offset_distance")
_angle_option = click.option(
    "--angle", "-a",
    default="45",
    show_default=True,
    help="Fitting angle in degrees (see 'pypeoffset angles').",
)
_diameter_option = click.option(
    "--diameter", "-d",
    default="",
    help="Pipe outside diameter for centerline correction (optional).",
)
_precision_option = click.option(
    "--precision", "-p",
    type=click.IntRange(min=0),
    default=DEFAULT_PRECISION,
    show_default=True,
    help="Decimal places in the output.",
)


@click.group()
@click.version_option(version="0.1.0")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool):
    """pypeoffset - travel, run and cut length for pipe offsets."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@cli.command()
def angles():
    """List the supported fitting angles."""
    for angle in OffsetCalculator().get_supported_angles():
        click.echo(f"{format_angle(angle)}°")


@cli.command()
@_offset_argument
@_angle_option
@_diameter_option
@_precision_option
def calc(offset_distance: str, angle: str, diameter: str, precision: int):
    """
    Calculate an offset.

    OFFSET_DISTANCE is the rise the offset has to make. Put "--" before a
    negative value so it is not read as an option (it is then rejected as
    an invalid offset distance).

    \b
    Examples:
        pypeoffset calc 100 --angle 45 --diameter 10
        pypeoffset calc -a 45 -- -10
    """
    result = _calculate(offset_distance, angle, diameter)
    click.echo(format_result(result, precision))


@cli.command()
@_offset_argument
@_angle_option
@_diameter_option
@_precision_option
@click.option(
    "--output", "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    required=True,
    help="Output SVG file path.",
)
def diagram(offset_distance: str, angle: str, diameter: str, precision: int, output: Path):
    """
    Write a labeled SVG diagram of an offset.

    Example:
        pypeoffset diagram 100 --angle 30 -o offset.svg
    """
    result = _calculate(offset_distance, angle, diameter)
    write_svg(build_diagram(result.diagram, precision), output)
    click.echo(f"Diagram saved to: {output}")


@cli.command()
@click.argument("jobs_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--output-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Also write <job id>.svg diagrams into this directory.",
)
def batch(jobs_file: Path, output_dir: Path | None):
    """
    Calculate every offset in a YAML job file.

    All jobs are attempted; the exit status is 1 if any of them failed.

    Example:
        pypeoffset batch jobs.yaml --output-dir diagrams/
    """
    try:
        job_file = OffsetJobFile.from_yaml(jobs_file)
    except (OSError, ValueError, TypeError) as e:
        click.echo(f"Error loading job file: {e}", err=True)
        raise SystemExit(1) from None

    if output_dir is not None:
        output_dir.mkdir(parents=True, exist_ok=True)

    calculator = OffsetCalculator()
    precision = job_file.settings.precision
    errors = []

    for job in job_file.jobs:
        title = f"[{job.id}] {job.description}".rstrip()
        click.echo(title)
        click.echo("-" * len(title))
        try:
            result = calculator.calculate_offset(job.to_parameters())
        except OffsetValidationError as e:
            logger.debug("Job %s rejected: %s", job.id, e)
            errors.append(f"[{job.id}] {e}")
            click.echo(f"Error: {e}\n")
            continue

        click.echo(format_result(result, precision))
        if output_dir is not None:
            try:
                svg_path = write_svg(build_diagram(result.diagram, precision), output_dir / f"{job.id}.svg")
            except OSError as e:
                errors.append(f"[{job.id}] Cannot write diagram: {e}")
                click.echo(f"Error: cannot write diagram: {e}\n")
                continue
            click.echo(f"Diagram: {svg_path}")
        click.echo()

    click.echo(f"{len(job_file.jobs) - len(errors)} of {len(job_file.jobs)} jobs calculated.")
    if errors:
        click.echo("\nErrors:", err=True)
        for e in errors:
            click.echo(f"  - {e}", err=True)
        raise SystemExit(1)


def _calculate(offset_distance: str, angle: str, diameter: str):
    """Parse and calculate, turning validation errors into a CLI error exit."""
    try:
        params = parameters_from_text(offset_distance, angle, diameter)
        return OffsetCalculator().calculate_offset(params)
    except OffsetValidationError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1) from None


if __name__ == "__main__":
    cli()
