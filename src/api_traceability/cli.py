"""CLI entry point for api-traceability."""

import json
from pathlib import Path

import click

from api_traceability.config import get_settings
from api_traceability.errors import SpecValidationError, TraceabilityError
from api_traceability.generator.docs import generate_documentation
from api_traceability.log import setup_logging
from api_traceability.matrix.builder import generate_matrix
from api_traceability.matrix.coverage import analyze_coverage
from api_traceability.parser.base import SpecDocument
from api_traceability.parser.loader import load_spec_source
from api_traceability.parser.swagger import ensure_valid, extract_endpoints, validate_spec


def _load(source: str) -> SpecDocument:
    """Load a document from a file path or URL, mapping errors for click."""
    try:
        return load_spec_source(source, timeout=get_settings().fetch_timeout)
    except TraceabilityError as e:
        raise click.ClickException(e.detail) from e
    except OSError as e:
        raise click.ClickException(f"Cannot read {source}: {e}") from e


def _emit(text: str, output: Path | None) -> None:
    if output is None:
        click.echo(text)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text, encoding="utf-8")
    click.echo(f"Saved to {output}", err=True)


@click.group()
@click.option("--log-level", default=None, help="Log level (defaults to TRACEABILITY_LOG_LEVEL or INFO).")
def main(log_level: str | None):
    """API Traceability: build test traceability matrices from OpenAPI documents."""
    settings = get_settings()
    setup_logging(log_level or settings.log_level, json_format=settings.log_json)


@main.command()
@click.argument("source")
def validate(source: str):
    """Check SOURCE for the mandatory OpenAPI 3.x fields."""
    result = validate_spec(_load(source))
    if result.valid:
        click.echo("Specification is valid.")
        return
    for error in result.errors:
        click.echo(f"  - {error}")
    raise click.ClickException(f"{len(result.errors)} validation error(s)")


@main.command()
@click.argument("source")
def endpoints(source: str):
    """List the endpoints of SOURCE."""
    found = extract_endpoints(_load(source))
    for ep in found:
        click.echo(f"{ep.method:<7} {ep.path}  {ep.id}")
    click.echo(f"Found {len(found)} endpoints.", err=True)


@main.command()
@click.argument("source")
@click.option("--project", "project_id", required=True, help="Project identifier used in the matrix id.")
@click.option("-o", "--output", default=None, type=click.Path(path_type=Path), help="Write matrix JSON to this file.")
@click.option("--tests/--no-tests", "include_tests", default=lambda: get_settings().include_tests, help="Synthesize test cases (default from settings).")
@click.option("--strict", is_flag=True, help="Refuse specifications that fail validation.")
def matrix(source: str, project_id: str, output: Path | None, include_tests: bool, strict: bool):
    """Generate a traceability matrix for SOURCE."""
    doc = _load(source)
    if strict:
        try:
            ensure_valid(doc)
        except SpecValidationError as e:
            raise click.ClickException(f"Invalid specification: {e.detail}") from e

    result_matrix = generate_matrix(project_id, doc, include_tests=include_tests)
    click.echo(
        f"{result_matrix.test_metrics.total_endpoints} endpoints, "
        f"{result_matrix.test_metrics.total_test_cases} test cases, "
        f"{result_matrix.test_metrics.coverage_percentage:.1f}% coverage",
        err=True,
    )
    _emit(json.dumps(result_matrix.to_wire(), indent=2), output)


@main.command()
@click.argument("source")
@click.option("--project", "project_id", required=True, help="Project identifier used in the matrix id.")
@click.option("-o", "--output", default=None, type=click.Path(path_type=Path), help="Write the report JSON to this file.")
@click.option("--tests/--no-tests", "include_tests", default=lambda: get_settings().include_tests, help="Synthesize test cases (default from settings).")
def coverage(source: str, project_id: str, output: Path | None, include_tests: bool):
    """Report coverage and gaps for SOURCE."""
    settings = get_settings()
    result_matrix = generate_matrix(project_id, _load(source), include_tests=include_tests)
    report = analyze_coverage(
        result_matrix,
        healthy=settings.healthy_threshold,
        warning=settings.warning_threshold,
    )
    _emit(json.dumps(report.to_wire(), indent=2), output)


@main.command()
@click.argument("source")
@click.option("-o", "--output", default=None, type=click.Path(path_type=Path), help="Write Markdown to this file.")
def docs(source: str, output: Path | None):
    """Render Markdown documentation for SOURCE."""
    _emit(generate_documentation(_load(source)), output)
