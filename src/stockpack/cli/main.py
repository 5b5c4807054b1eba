"""Typer CLI for packing jobs."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from stockpack.application import PackJobCommand
from stockpack.application.config import (
    ConfigError,
    OutputFormat,
    PackingJobConfiguration,
    load_config,
    merge_config_with_cli,
    validate_config,
)
from stockpack.cli.commands import display_load_error, validate_command
from stockpack.contracts.dtos import PackingOutput
from stockpack.domain.value_objects import AfterGroupFit, ContainerScan
from stockpack.infrastructure import (
    CutDiagramRenderer,
    JsonExporter,
    PackingReportFormatter,
)

app = typer.Typer(
    name="stockpack",
    help="Pack rectangular pieces into containers with bottom-left-fill and DJD.",
)

# Register validate command
app.command(name="validate")(validate_command)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _load_job(job_file: Path, **overrides) -> PackingJobConfiguration:
    """Load, merge and check a job, exiting with code 1 on any error."""
    try:
        config = merge_config_with_cli(load_config(job_file), **overrides)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    result = validate_config(config)
    if not result.is_valid:
        typer.echo("Errors:", err=True)
        for error in result.errors:
            typer.echo(f"  {error.path}: {error.message}", err=True)
        raise typer.Exit(code=1)
    return config


def _run(config: PackingJobConfiguration) -> PackingOutput:
    output = PackJobCommand().execute(config)
    if not output.is_valid:
        for error in output.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)
    return output


@app.command()
def pack(
    job_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON job file"),
    ],
    output_format: Annotated[
        OutputFormat | None,
        typer.Option("--format", "-f", help="Report format: text or json"),
    ] = None,
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the report to this file"),
    ] = None,
    svg_dir: Annotated[
        Path | None,
        typer.Option("--svg-dir", help="Write one SVG cut diagram per container here"),
    ] = None,
    scan: Annotated[
        ContainerScan | None,
        typer.Option("--scan", help="Containers each step inspects: last or all"),
    ] = None,
    after_fit: Annotated[
        AfterGroupFit | None,
        typer.Option("--after-fit", help="After a group fits: stop or continue"),
    ] = None,
    initial_capacity: Annotated[
        float | None,
        typer.Option("--initial-capacity", help="Fill fraction for single-piece placement"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log packing decisions"),
    ] = False,
) -> None:
    """Pack the pieces of a job file into containers.

    Command-line options override the corresponding job file values.

    Examples:
        stockpack pack job.json
        stockpack pack job.json --format json --output result.json
        stockpack pack job.json --scan all --after-fit continue --svg-dir ./diagrams
    """
    _configure_logging(verbose)
    config = _load_job(
        job_file,
        container_scan=scan,
        after_group_fit=after_fit,
        initial_capacity=initial_capacity,
        output_format=output_format,
        svg_dir=str(svg_dir) if svg_dir is not None else None,
    )
    output = _run(config)

    if config.output.format is OutputFormat.JSON:
        report = JsonExporter().export(output)
    else:
        report = PackingReportFormatter().format(output)

    if output_file is not None:
        output_file.write_text(report, encoding="utf-8")
        typer.echo(f"Report written to {output_file}")
    else:
        typer.echo(report)

    if config.output.svg_dir:
        out_dir = Path(config.output.svg_dir)
        out_dir.mkdir(parents=True, exist_ok=True)
        renderer = CutDiagramRenderer()
        for layout, svg in zip(output.layouts, renderer.render_all_svg(output)):
            path = out_dir / f"container_{layout.index + 1}.svg"
            path.write_text(svg, encoding="utf-8")
        typer.echo(f"Wrote {len(output.layouts)} SVG diagram(s) to {out_dir}")


@app.command()
def diagram(
    job_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON job file"),
    ],
    width: Annotated[
        int,
        typer.Option("--width", "-w", help="Diagram width in characters"),
    ] = 80,
) -> None:
    """Show ASCII diagrams of the packed containers."""
    config = _load_job(job_file)
    output = _run(config)
    typer.echo(CutDiagramRenderer().render_all_ascii(output, width=width))


if __name__ == "__main__":
    app()
