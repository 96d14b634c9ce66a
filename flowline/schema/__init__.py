"""Schema layer for workflow nodes, edges and documents."""

from .errors import SchemaLoadError, SchemaValidationError
from .models import (
    ApprovalPayload,
    AutomatedPayload,
    Edge,
    EndPayload,
    Node,
    NodeKind,
    NodePayload,
    Position,
    StartPayload,
    TaskPayload,
    WorkflowDocument,
    WorkflowMetadata,
)
from .loader import load_data, parse_document, parse_document_data, parse_document_from_string

__all__ = [
    "SchemaLoadError",
    "SchemaValidationError",
    "ApprovalPayload",
    "AutomatedPayload",
    "Edge",
    "EndPayload",
    "Node",
    "NodeKind",
    "NodePayload",
    "Position",
    "StartPayload",
    "TaskPayload",
    "WorkflowDocument",
    "WorkflowMetadata",
    "load_data",
    "parse_document",
    "parse_document_data",
    "parse_document_from_string",
]
