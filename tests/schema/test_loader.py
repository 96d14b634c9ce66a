"""Tests for workflow document loader."""

import json

import pytest

from flowline.schema.loader import (
    load_data,
    parse_document,
    parse_document_from_string,
)
from flowline.schema.errors import SchemaLoadError, SchemaValidationError
from flowline.schema.models import NodeKind


class TestLoadData:
    def test_load_valid_yaml(self, tmp_path):
        yaml_file = tmp_path / "test.yaml"
        yaml_file.write_text("name: Flow\nnodes: []")

        data = load_data(yaml_file)
        assert data == {"name": "Flow", "nodes": []}

    def test_load_valid_json(self, tmp_path):
        json_file = tmp_path / "test.json"
        json_file.write_text(json.dumps({"name": "Flow", "edges": []}))

        data = load_data(json_file)
        assert data["name"] == "Flow"

    def test_file_not_found(self):
        with pytest.raises(SchemaLoadError) as exc_info:
            load_data("/nonexistent/path.yaml")
        assert "not found" in str(exc_info.value).lower()
        assert exc_info.value.path == "/nonexistent/path.yaml"

    def test_directory_is_not_a_file(self, tmp_path):
        with pytest.raises(SchemaLoadError) as exc_info:
            load_data(tmp_path)
        assert "Not a file" in str(exc_info.value)

    def test_invalid_yaml(self, tmp_path):
        yaml_file = tmp_path / "invalid.yaml"
        yaml_file.write_text("nodes: [unclosed bracket")

        with pytest.raises(SchemaLoadError) as exc_info:
            load_data(yaml_file)
        assert "Invalid YAML" in str(exc_info.value)

    def test_invalid_json(self, tmp_path):
        json_file = tmp_path / "invalid.json"
        json_file.write_text('{"nodes": [')

        with pytest.raises(SchemaLoadError) as exc_info:
            load_data(json_file)
        assert "Invalid JSON" in str(exc_info.value)

    def test_empty_file_returns_empty_dict(self, tmp_path):
        yaml_file = tmp_path / "empty.yaml"
        yaml_file.write_text("")

        assert load_data(yaml_file) == {}

    def test_non_mapping_at_root(self, tmp_path):
        yaml_file = tmp_path / "list.yaml"
        yaml_file.write_text("- item1\n- item2")

        with pytest.raises(SchemaLoadError) as exc_info:
            load_data(yaml_file)
        assert "mapping" in str(exc_info.value).lower()


class TestParseDocumentFromString:
    def test_parse_linear_workflow(self, linear_workflow_yaml):
        document = parse_document_from_string(linear_workflow_yaml)

        assert document.name == "Onboarding"
        assert [n.id for n in document.nodes] == [
            "start",
            "task",
            "approval",
            "automated",
            "end",
        ]
        assert len(document.edges) == 4
        assert document.get_node("approval").payload.approver_role == "Manager"

    def test_empty_string_gives_empty_document(self):
        document = parse_document_from_string("")

        assert document.nodes == []
        assert document.edges == []
        assert document.name == "Untitled Workflow"

    def test_invalid_yaml(self):
        with pytest.raises(SchemaLoadError):
            parse_document_from_string("nodes: [")

    def test_non_mapping_at_root(self):
        with pytest.raises(SchemaLoadError):
            parse_document_from_string("- just\n- a list")

    def test_schema_error_lists_locations(self):
        yaml_str = """
nodes:
  - id: a
    kind: wormhole
    payload: {label: A}
"""
        with pytest.raises(SchemaValidationError) as exc_info:
            parse_document_from_string(yaml_str)

        assert exc_info.value.errors
        assert all("loc" in err and "msg" in err for err in exc_info.value.errors)
        assert any(err["loc"].startswith("nodes.0") for err in exc_info.value.errors)

    def test_duplicate_node_ids_rejected(self):
        yaml_str = """
nodes:
  - {id: a, kind: start, payload: {label: A}}
  - {id: a, kind: end, payload: {label: B}}
"""
        with pytest.raises(SchemaValidationError) as exc_info:
            parse_document_from_string(yaml_str)

        assert "Duplicate node id" in exc_info.value.errors[0]["msg"]


class TestParseDocument:
    def test_parse_yaml_example(self, examples_dir):
        document = parse_document(examples_dir / "onboarding.yaml")

        assert document.name == "Employee Onboarding"
        assert document.metadata.category == "onboarding"
        assert len(document.nodes) == 5

    def test_parse_editor_json_example(self, examples_dir):
        document = parse_document(examples_dir / "editor_export.json")

        assert document.exported_at is not None
        approval = document.get_node("approval-1")
        assert approval.kind == NodeKind.APPROVAL
        assert approval.payload.approver_role == ""
        assert document.edges[0].id == "reactflow__edge-start-1-approval-1"

    def test_kind_mismatch_is_schema_error(self, examples_dir):
        with pytest.raises(SchemaValidationError):
            parse_document(examples_dir / "invalid" / "kind_mismatch.yaml")
