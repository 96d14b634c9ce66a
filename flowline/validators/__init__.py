"""Validators for structural validation of workflow graphs."""

from .base import Severity, ValidationIssue, ValidationResult
from .connectivity import check_node_connections
from .cycles import check_cycles
from .endpoints import check_end_nodes, check_start_node
from .errors import WorkflowNotExecutableError
from .fields import check_node_fields
from .reachability import check_orphaned_nodes
from .runner import (
    preflight,
    run_validators,
    validate,
    validate_document,
    validate_workflow_file,
)

__all__ = [
    "Severity",
    "ValidationIssue",
    "ValidationResult",
    "WorkflowNotExecutableError",
    "check_start_node",
    "check_end_nodes",
    "check_node_connections",
    "check_orphaned_nodes",
    "check_cycles",
    "check_node_fields",
    "preflight",
    "run_validators",
    "validate",
    "validate_document",
    "validate_workflow_file",
]
