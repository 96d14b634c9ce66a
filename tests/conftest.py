"""Shared fixtures for tests."""

from pathlib import Path

import pytest

from flowline.graph.builder import build_graph_from_document
from flowline.schema.loader import parse_document_from_string
from flowline.schema.models import Edge, Node


@pytest.fixture
def examples_dir() -> Path:
    """Return the path to the examples directory."""
    return Path(__file__).parent.parent / "examples"


@pytest.fixture
def make_node():
    """Return a factory for nodes; the label defaults to the node id."""

    def _make_node(node_id: str, kind: str, label: str | None = None, **fields) -> Node:
        payload = {"label": node_id if label is None else label, **fields}
        return Node.model_validate({"id": node_id, "kind": kind, "payload": payload})

    return _make_node


@pytest.fixture
def make_edge():
    """Return a factory for edges."""

    def _make_edge(source: str, target: str, edge_id: str = "") -> Edge:
        return Edge(id=edge_id, source=source, target=target)

    return _make_edge


@pytest.fixture
def linear_workflow_yaml() -> str:
    """Return a complete, valid Start -> Task -> Approval -> Automated -> End workflow."""
    return """
name: Onboarding
nodes:
  - id: start
    kind: start
    payload: {label: Start}
  - id: task
    kind: task
    payload: {label: Collect documents, assignee: hr@example.com}
  - id: approval
    kind: approval
    payload: {label: Manager sign-off, approver_role: Manager}
  - id: automated
    kind: automated
    payload: {label: Send welcome mail, action_id: send_email}
  - id: end
    kind: end
    payload: {label: Done, end_message: Welcome aboard}
edges:
  - {id: e1, source: start, target: task}
  - {id: e2, source: task, target: approval}
  - {id: e3, source: approval, target: automated}
  - {id: e4, source: automated, target: end}
"""


@pytest.fixture
def linear_document(linear_workflow_yaml):
    """Return the parsed linear workflow."""
    return parse_document_from_string(linear_workflow_yaml)


@pytest.fixture
def linear_graph(linear_document):
    """Return a graph built from the linear workflow."""
    return build_graph_from_document(linear_document)
