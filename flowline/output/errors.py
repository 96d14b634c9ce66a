"""Export-related exceptions."""


class ExportError(Exception):
    """Raised when a workflow cannot be exported."""
