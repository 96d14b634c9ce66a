"""Pydantic models for workflow documents."""

from collections import Counter
from datetime import datetime
from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


class NodeKind(str, Enum):
    """The closed set of step kinds a workflow graph may contain."""

    START = "start"
    TASK = "task"
    APPROVAL = "approval"
    AUTOMATED = "automated"
    END = "end"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


class _Payload(BaseModel):
    """Fields shared by every node payload."""

    model_config = ConfigDict(populate_by_name=True)

    label: str = ""
    description: str | None = None

    @model_validator(mode="before")
    @classmethod
    def drop_null_fields(cls, data: Any) -> Any:
        """Let explicit nulls fall back to the field defaults."""
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class StartPayload(_Payload):
    """Data for the entry point of a workflow."""

    kind: Literal["start"] = "start"
    metadata: dict[str, str] = Field(default_factory=dict)


class TaskPayload(_Payload):
    """Data for a human task step."""

    kind: Literal["task"] = "task"
    assignee: str = ""
    due_date: str | None = Field(default=None, alias="dueDate")
    priority: Literal["low", "medium", "high"] | None = None
    custom_fields: dict[str, str] = Field(default_factory=dict, alias="customFields")


class ApprovalPayload(_Payload):
    """Data for an approval step."""

    kind: Literal["approval"] = "approval"
    approver_role: str = Field(default="", alias="approverRole")
    auto_approve_threshold: float | None = Field(default=None, alias="autoApproveThreshold")
    requires_comment: bool = Field(default=False, alias="requiresComment")
    escalation_timeout: float | None = Field(default=None, alias="escalationTimeout")


class AutomatedPayload(_Payload):
    """Data for a step that runs an automation action."""

    kind: Literal["automated"] = "automated"
    action_id: str = Field(default="", alias="actionId")
    action_label: str = Field(default="", alias="actionLabel")
    parameters: dict[str, Any] = Field(default_factory=dict)


class EndPayload(_Payload):
    """Data for a terminal step."""

    kind: Literal["end"] = "end"
    end_message: str = Field(default="", alias="endMessage")
    show_summary: bool = Field(default=False, alias="showSummary")
    notify_users: list[str] = Field(default_factory=list, alias="notifyUsers")


NodePayload = Annotated[
    Union[StartPayload, TaskPayload, ApprovalPayload, AutomatedPayload, EndPayload],
    Field(discriminator="kind"),
]


class Position(BaseModel):
    """Canvas coordinates of a node. Not used by validation."""

    x: float = 0.0
    y: float = 0.0


class Node(BaseModel):
    """A step in the workflow graph."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    kind: NodeKind = Field(alias="type")
    position: Position = Field(default_factory=Position)
    payload: NodePayload = Field(alias="data")

    @model_validator(mode="before")
    @classmethod
    def normalize_node(cls, data: Any) -> Any:
        """Accept the editor's node layout and fill in the payload kind.

        The editor stores the kind under ``type`` and the payload under
        ``data``, with the payload repeating the kind as ``type``.
        """
        if not isinstance(data, dict):
            return data

        data = dict(data)
        kind = data.pop("kind", None) or data.pop("type", None)
        data.pop("type", None)
        if isinstance(kind, NodeKind):
            kind = kind.value

        payload = data.pop("payload", None)
        if payload is None:
            payload = data.pop("data", None)
        data.pop("data", None)
        if payload is None:
            payload = {}

        if isinstance(payload, dict):
            payload = dict(payload)
            payload_kind = payload.get("kind") or payload.pop("type", None) or kind
            if isinstance(payload_kind, NodeKind):
                payload_kind = payload_kind.value
            if payload_kind is not None:
                payload["kind"] = payload_kind
            if kind is None:
                kind = payload_kind
        elif kind is None:
            kind = getattr(payload, "kind", None)

        if kind is not None:
            data["kind"] = kind
        data["payload"] = payload
        return data

    @model_validator(mode="after")
    def check_payload_kind(self) -> "Node":
        """The payload must carry the same kind as the node."""
        if self.payload.kind != self.kind.value:
            raise ValueError(
                f"Node '{self.id}' is a '{self.kind.value}' node "
                f"but its payload is for a '{self.payload.kind}' node"
            )
        return self

    @property
    def label(self) -> str:
        return self.payload.label


class Edge(BaseModel):
    """A directed connection between two nodes, referenced by id."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = ""
    source: str
    target: str
    label: str | None = None

    @model_validator(mode="after")
    def default_id(self) -> "Edge":
        """Derive an id from the endpoints when none was given."""
        if not self.id:
            self.id = f"e-{self.source}-{self.target}"
        return self


class WorkflowMetadata(BaseModel):
    """Descriptive metadata attached to a saved workflow."""

    category: Literal["onboarding", "leave", "document", "custom"] = "custom"
    tags: list[str] = Field(default_factory=list)
    author: str = ""


class WorkflowDocument(BaseModel):
    """Root model for a workflow file."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = "Untitled Workflow"
    description: str = ""
    nodes: list[Node] = Field(default_factory=list)
    edges: list[Edge] = Field(default_factory=list)
    metadata: WorkflowMetadata = Field(default_factory=WorkflowMetadata)
    exported_at: datetime | None = Field(default=None, alias="exportedAt")

    @model_validator(mode="after")
    def check_unique_node_ids(self) -> "WorkflowDocument":
        """Node ids identify nodes for edges, so they must not repeat."""
        counts = Counter(node.id for node in self.nodes)
        duplicates = sorted(node_id for node_id, count in counts.items() if count > 1)
        if duplicates:
            raise ValueError(f"Duplicate node id(s): {', '.join(duplicates)}")
        return self

    def get_node(self, node_id: str) -> Node | None:
        """Get a node by id."""
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None
