"""JSON export of workflow documents."""

import json
import logging
import re
from datetime import datetime, timezone
from pathlib import Path

from ..schema.models import WorkflowDocument
from .errors import ExportError

logger = logging.getLogger(__name__)

DEFAULT_EXPORT_STEM = "workflow"


def export_filename(name: str | None) -> str:
    """Derive the export file name from a workflow name.

    Whitespace runs become underscores; a blank name falls back to
    ``workflow.json``.
    """
    if not name or not name.strip():
        return f"{DEFAULT_EXPORT_STEM}.json"
    stem = re.sub(r"\s+", "_", name.strip())
    return f"{stem}.json"


def export_workflow(
    document: WorkflowDocument, exported_at: datetime | None = None
) -> str:
    """Serialize a workflow document as JSON in the editor's layout.

    Args:
        document: The workflow to export.
        exported_at: Export timestamp; defaults to now (UTC).

    Returns:
        The JSON text.

    Raises:
        ExportError: If the workflow has no nodes.
    """
    if not document.nodes:
        raise ExportError("Canvas is empty")

    if exported_at is None:
        exported_at = datetime.now(timezone.utc)

    data = {
        "name": document.name,
        "description": document.description,
        "nodes": [node.model_dump(mode="json", by_alias=True) for node in document.nodes],
        "edges": [
            edge.model_dump(mode="json", by_alias=True, exclude_none=True)
            for edge in document.edges
        ],
        "metadata": document.metadata.model_dump(mode="json"),
        "exportedAt": exported_at.isoformat(),
    }
    return json.dumps(data, indent=2, ensure_ascii=False)


def write_export(
    document: WorkflowDocument,
    output_dir: str | Path,
    exported_at: datetime | None = None,
) -> Path:
    """Export a workflow into a directory under its derived file name.

    Returns:
        Path of the written file.

    Raises:
        ExportError: If the workflow has no nodes or the file cannot be written.
    """
    content = export_workflow(document, exported_at)

    out_path = Path(output_dir)
    file_path = out_path / export_filename(document.name)
    try:
        out_path.mkdir(parents=True, exist_ok=True)
        file_path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise ExportError(f"Cannot write {file_path}: {e}") from e

    logger.info("Exported workflow '%s' to %s", document.name, file_path)
    return file_path
