"""flowline: structural validation for workflow graphs."""

from .schema.models import Edge, Node, NodeKind, WorkflowDocument
from .validators.base import Severity, ValidationIssue, ValidationResult
from .validators.errors import WorkflowNotExecutableError
from .validators.runner import preflight, validate

__all__ = [
    "Edge",
    "Node",
    "NodeKind",
    "WorkflowDocument",
    "Severity",
    "ValidationIssue",
    "ValidationResult",
    "WorkflowNotExecutableError",
    "preflight",
    "validate",
]
