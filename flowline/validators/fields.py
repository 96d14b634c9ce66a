"""Per-kind required field validator."""

from typing import assert_never

from ..graph.model_graph import WorkflowGraph
from ..schema.models import (
    ApprovalPayload,
    AutomatedPayload,
    EndPayload,
    Node,
    StartPayload,
    TaskPayload,
)
from .base import ValidationResult


def _is_blank(value: str | None) -> bool:
    return not value or not value.strip()


def check_node_fields(graph: WorkflowGraph) -> ValidationResult:
    """Check that every node carries the fields its kind needs to run.

    Every node needs a label. On top of that:

    - task: an assignee (warning, tasks may be assigned later)
    - approval: an approver role (error)
    - automated: a selected action (error)
    - end: a completion message (warning, a default can be shown)

    Args:
        graph: The workflow graph to check.

    Returns:
        ValidationResult with errors and warnings for missing fields.
    """
    result = ValidationResult()

    for node in graph.iter_nodes():
        if _is_blank(node.label):
            result.add_error(
                code="MISSING_LABEL",
                message=f"{node.kind.display_name} node '{node.id}' has no title",
                node_id=node.id,
            )
        _check_payload(node, result)

    return result


def _check_payload(node: Node, result: ValidationResult) -> None:
    payload = node.payload

    if isinstance(payload, StartPayload):
        return

    elif isinstance(payload, TaskPayload):
        if _is_blank(payload.assignee):
            result.add_warning(
                code="TASK_NO_ASSIGNEE",
                message=f"Task '{payload.label}' has no assignee",
                node_id=node.id,
            )

    elif isinstance(payload, ApprovalPayload):
        if _is_blank(payload.approver_role):
            result.add_error(
                code="APPROVAL_NO_ROLE",
                message=(
                    f"Approval '{payload.label}' needs an approver role "
                    f"(e.g. 'Manager', 'HR Director')"
                ),
                node_id=node.id,
            )

    elif isinstance(payload, AutomatedPayload):
        if not payload.action_id:
            result.add_error(
                code="AUTOMATED_NO_ACTION",
                message=f"Automated step '{payload.label}' has no action selected",
                node_id=node.id,
            )

    elif isinstance(payload, EndPayload):
        if _is_blank(payload.end_message):
            result.add_warning(
                code="END_NO_MESSAGE",
                message=f"End '{payload.label}' has no completion message",
                node_id=node.id,
            )

    else:
        assert_never(payload)
