"""Command-line interface for flowline."""

import logging
import sys

import click

from .output.errors import ExportError
from .output.exporter import write_export
from .output.formatter import format_validation_result
from .schema.errors import SchemaLoadError, SchemaValidationError
from .schema.loader import parse_document
from .validators.runner import validate_document, validate_workflow_file

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def _report_schema_error(e: SchemaValidationError) -> None:
    click.echo(f"Schema validation error: {e}", err=True)
    for err in e.errors:
        click.echo(f"  - {err['loc']}: {err['msg']}", err=True)


@click.group()
@click.version_option(package_name="flowline")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    envvar="FLOWLINE_LOG_LEVEL",
    show_default=True,
    help="Logging level",
)
def main(log_level: str):
    """flowline: structural validation for workflow graphs."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.argument("workflow_file", type=click.Path(exists=True))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    envvar="FLOWLINE_STRICT",
    help="Treat warnings as errors",
)
def validate(workflow_file: str, output_format: str, strict: bool):
    """Validate a workflow file.

    WORKFLOW_FILE is the path to a YAML or JSON workflow file.

    Exit codes:
      0 - Validation passed
      1 - Validation failed (errors found)
      2 - File or schema error
    """
    try:
        result = validate_workflow_file(workflow_file)
    except SchemaLoadError as e:
        click.echo(f"Error loading file: {e}", err=True)
        sys.exit(2)
    except SchemaValidationError as e:
        _report_schema_error(e)
        sys.exit(2)

    output = format_validation_result(result, output_format)  # type: ignore
    click.echo(output)

    if result.has_errors:
        sys.exit(1)
    elif strict and result.has_warnings:
        sys.exit(1)
    else:
        sys.exit(0)


@main.command()
@click.argument("workflow_file", type=click.Path(exists=True))
@click.option(
    "--output-dir",
    default=".",
    show_default=True,
    help="Directory to write the exported JSON file to",
)
@click.option(
    "--force",
    is_flag=True,
    default=False,
    help="Export even if the workflow has validation errors",
)
def export(workflow_file: str, output_dir: str, force: bool):
    """Export a workflow file as editor JSON.

    WORKFLOW_FILE is the path to a YAML or JSON workflow file. The output
    file is named after the workflow.

    Exit codes:
      0 - Exported
      1 - Workflow has validation errors (use --force to export anyway)
      2 - File, schema or export error
    """
    try:
        document = parse_document(workflow_file)
    except SchemaLoadError as e:
        click.echo(f"Error loading file: {e}", err=True)
        sys.exit(2)
    except SchemaValidationError as e:
        _report_schema_error(e)
        sys.exit(2)

    result = validate_document(document)
    if not result.is_valid and not force:
        click.echo(format_validation_result(result), err=True)
        click.echo(
            f"Refusing to export: {len(result.errors)} error(s). Use --force to export anyway.",
            err=True,
        )
        sys.exit(1)

    try:
        path = write_export(document, output_dir)
    except ExportError as e:
        click.echo(f"Export error: {e}", err=True)
        sys.exit(2)

    click.echo(f"Exported: {path}")
    sys.exit(0)


if __name__ == "__main__":
    main()
