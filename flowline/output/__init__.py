"""Rendering and export of validation results and workflows."""

from .errors import ExportError
from .exporter import export_filename, export_workflow, write_export
from .formatter import format_validation_result

__all__ = [
    "ExportError",
    "export_filename",
    "export_workflow",
    "write_export",
    "format_validation_result",
]
