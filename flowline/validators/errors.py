"""Validation-related exceptions."""

from .base import ValidationResult


class WorkflowNotExecutableError(Exception):
    """Raised when a workflow with errors is about to be run."""

    def __init__(self, result: ValidationResult):
        self.result = result
        self.error_count = len(result.errors)
        super().__init__(
            f"Workflow has {self.error_count} error(s); fix them before running it"
        )
