"""Validation runner that orchestrates all validators."""

import logging
from pathlib import Path
from typing import Callable, Iterable

from ..graph.builder import build_graph, build_graph_from_document
from ..graph.model_graph import WorkflowGraph
from ..schema.loader import parse_document
from ..schema.models import Edge, Node, WorkflowDocument
from .base import ValidationResult
from .connectivity import check_node_connections
from .cycles import check_cycles
from .endpoints import check_end_nodes, check_start_node
from .errors import WorkflowNotExecutableError
from .fields import check_node_fields
from .reachability import check_orphaned_nodes

logger = logging.getLogger(__name__)

CHECKS: tuple[Callable[[WorkflowGraph], ValidationResult], ...] = (
    check_start_node,
    check_end_nodes,
    check_node_connections,
    check_orphaned_nodes,
    check_cycles,
    check_node_fields,
)


def run_validators(graph: WorkflowGraph) -> ValidationResult:
    """Run all validators on a workflow graph.

    Args:
        graph: The workflow graph.

    Returns:
        Combined ValidationResult from all validators, in check order.
    """
    result = ValidationResult()

    for check in CHECKS:
        check_result = check(graph)
        if check_result.issues:
            logger.debug("%s: %s", check.__name__, ", ".join(check_result.codes))
        result.merge(check_result)

    logger.info(
        "Validation %s: %d error(s), %d warning(s)",
        "passed" if result.is_valid else "failed",
        len(result.errors),
        len(result.warnings),
    )
    return result


def validate(nodes: Iterable[Node], edges: Iterable[Edge]) -> ValidationResult:
    """Validate a snapshot of workflow nodes and edges.

    The snapshot is only read and nothing is kept between calls, so the
    same snapshot always gives the same result.

    Args:
        nodes: The workflow nodes.
        edges: The workflow edges.

    Returns:
        ValidationResult from all validators.
    """
    return run_validators(build_graph(nodes, edges))


def validate_document(document: WorkflowDocument) -> ValidationResult:
    """Validate a parsed workflow document."""
    return run_validators(build_graph_from_document(document))


def validate_workflow_file(path: str | Path) -> ValidationResult:
    """Load and validate a workflow file.

    Args:
        path: Path to the YAML or JSON workflow file.

    Returns:
        ValidationResult from all validators.

    Raises:
        SchemaLoadError: If the file cannot be loaded.
        SchemaValidationError: If the document fails schema validation.
    """
    document = parse_document(path)
    return validate_document(document)


def preflight(nodes: Iterable[Node], edges: Iterable[Edge]) -> ValidationResult:
    """Validate a workflow before running it.

    Args:
        nodes: The workflow nodes.
        edges: The workflow edges.

    Returns:
        The ValidationResult, which may still carry warnings.

    Raises:
        WorkflowNotExecutableError: If the workflow has any errors.
    """
    result = validate(nodes, edges)
    if not result.is_valid:
        raise WorkflowNotExecutableError(result)
    return result
