"""Click CLI with analyze, dot, and scan subcommands."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from deps_analyzer.graph import RenderError
from deps_analyzer.models import AnalyzerConfig, DependencyGraph, Direction
from deps_analyzer.naming import normalize_module
from deps_analyzer.pipeline import run_analysis
from deps_analyzer.scanner import DEFAULT_LIBRARY_PREFIXES, scan_descriptor

_DIRECTION_CHOICES = [d.value for d in Direction]


@click.group()
@click.version_option(version="0.1.0")
@click.option("--verbose", "-v", is_flag=True, help="Log every descriptor lookup")
def cli(verbose: bool):
    """deps-analyzer: Visualize module dependencies of a Gradle build."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _module_options(func):
    decorators = [
        click.argument("module"),
        click.option(
            "--project-root", "-r",
            type=click.Path(exists=True, file_okay=False, path_type=Path),
            default=".", help="Root of the Gradle build",
        ),
        click.option("--depth", "-d", type=click.IntRange(min=0), default=0,
                     help="Maximum depth to analyze (0 for no limit)"),
        click.option("--direction", type=click.Choice(_DIRECTION_CHOICES, case_sensitive=False),
                     default="LR", help="Graph direction: LR (horizontal) or TB (vertical)"),
        click.option("--duplicate", is_flag=True,
                     help="Duplicate nodes so each node has at most one incoming edge"),
        click.option("--max-nodes", type=click.IntRange(min=1), default=10_000,
                     help="Node ceiling for --duplicate"),
        click.option("--lib-prefix", "lib_prefixes", multiple=True,
                     help="Version catalog accessor prefix (repeatable)"),
    ]
    for decorator in reversed(decorators):
        func = decorator(func)
    return func


def _build_config(module, project_root, depth, direction, duplicate, max_nodes, lib_prefixes,
                  **extra) -> AnalyzerConfig:
    try:
        root = normalize_module(module)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="MODULE")
    return AnalyzerConfig(
        root_module=root,
        project_root=project_root,
        max_depth=depth,
        direction=Direction(direction.upper()),
        duplicate=duplicate,
        max_nodes=max_nodes,
        library_prefixes=tuple(lib_prefixes) or DEFAULT_LIBRARY_PREFIXES,
        **extra,
    )


@cli.command()
@_module_options
@click.option("-o", "--output", "output_path", type=click.Path(dir_okay=False, path_type=Path),
              default="module_dependencies.svg", help="Output file path")
@click.option("--format", "-f", "output_format",
              help="Graphviz output format (defaults to the output file extension)")
def analyze(output_path: Path, output_format: str | None, **options):
    """Resolve MODULE's dependencies and render them to an image."""
    config = _build_config(**options, output_path=output_path, output_format=output_format)

    click.echo(f"\nAnalyzing dependencies for {config.root_module}")
    if config.max_depth > 0:
        click.echo(f"Max depth: {config.max_depth}")
    click.echo(f"Graph direction: {config.direction.value}")
    click.echo(f"Node duplication: {config.duplicate}")

    try:
        result = run_analysis(config)
    except (ValueError, RenderError) as e:
        raise click.ClickException(str(e))

    _print_dependencies(result.graph)
    click.echo(f"\nDiagram generated at: {click.style(str(result.output_path), fg='cyan')}")


@cli.command()
@_module_options
def dot(**options):
    """Print the DOT description of MODULE's dependency graph."""
    config = _build_config(**options)
    try:
        result = run_analysis(config, write=False)
    except (ValueError, RenderError) as e:
        raise click.ClickException(str(e))
    click.echo(result.diagram.source, nl=False)


@cli.command()
@click.argument("descriptor", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def scan(descriptor: Path):
    """List the dependencies declared in a single build descriptor."""
    record = scan_descriptor(descriptor)
    if record.is_empty:
        click.echo("No dependencies found.")
        return

    click.echo(click.style(str(descriptor), fg="cyan"))
    for dep in record.project_deps:
        click.echo(f"  {click.style('project', fg='green'):>16}  {dep}")
    for dep in record.lib_deps:
        click.echo(f"  {click.style('library', fg='magenta'):>16}  {dep}")


def _print_dependencies(graph: DependencyGraph) -> None:
    if not graph.modules:
        click.echo("\nNo dependencies found.")
        return

    click.echo("\nProject Dependencies:")
    for module, deps in graph.project_deps.items():
        click.echo(f"\n{click.style(module, fg='green')} depends on projects:")
        for dep in deps:
            click.echo(f"  - {dep}")

    click.echo("\nLibrary Dependencies:")
    for module, deps in graph.lib_deps.items():
        click.echo(f"\n{click.style(module, fg='magenta')} depends on libs:")
        for dep in deps:
            click.echo(f"  - {dep}")

    click.echo(
        f"\nSummary: {len(graph.scanned)} module(s) scanned, "
        f"{len(graph.modules)} with dependencies"
    )


if __name__ == "__main__":
    cli()
