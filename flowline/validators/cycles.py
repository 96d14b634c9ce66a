"""Cycle detection validator."""

from ..graph.model_graph import WorkflowGraph
from .base import ValidationResult


def check_cycles(graph: WorkflowGraph) -> ValidationResult:
    """Check that the workflow graph is acyclic.

    Only the first cycle found is reported. Once it is broken, validating
    again reports the next one.

    Args:
        graph: The workflow graph to check.

    Returns:
        ValidationResult with at most one CIRCULAR_DEPENDENCY error.
    """
    result = ValidationResult()

    cycle = graph.find_first_cycle()
    if cycle is None:
        return result

    chain = " → ".join(f'"{graph.get_label(node_id)}"' for node_id in cycle)
    result.add_error(
        code="CIRCULAR_DEPENDENCY",
        message=(
            f"Workflow contains a loop: {chain}. "
            f"Remove one of these connections to break it"
        ),
        cycle=cycle,
    )

    return result
