"""YAML and JSON loading for workflow documents."""

import json
import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from .errors import SchemaLoadError, SchemaValidationError
from .models import WorkflowDocument

logger = logging.getLogger(__name__)


def load_data(path: str | Path) -> dict:
    """Load a workflow file and return the raw data.

    Files ending in ``.json`` are read as JSON, everything else as YAML.

    Args:
        path: Path to the workflow file.

    Returns:
        The parsed data as a dictionary.

    Raises:
        SchemaLoadError: If the file cannot be read or parsed.
    """
    path = Path(path)

    if not path.exists():
        raise SchemaLoadError(f"File not found: {path}", str(path))

    if not path.is_file():
        raise SchemaLoadError(f"Not a file: {path}", str(path))

    logger.debug("Loading workflow file %s", path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            if path.suffix.lower() == ".json":
                data = json.load(f)
            else:
                data = yaml.safe_load(f)
    except json.JSONDecodeError as e:
        raise SchemaLoadError(f"Invalid JSON: {e}", str(path)) from e
    except yaml.YAMLError as e:
        raise SchemaLoadError(f"Invalid YAML: {e}", str(path)) from e
    except OSError as e:
        raise SchemaLoadError(f"Cannot read file: {e}", str(path)) from e

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise SchemaLoadError(
            f"Expected a mapping at root, got {type(data).__name__}", str(path)
        )

    return data


def parse_document(path: str | Path) -> WorkflowDocument:
    """Load and parse a workflow file into a WorkflowDocument.

    Raises:
        SchemaLoadError: If the file cannot be read or parsed.
        SchemaValidationError: If the data fails validation.
    """
    data = load_data(path)
    return parse_document_data(data)


def parse_document_from_string(text: str) -> WorkflowDocument:
    """Parse a YAML (or JSON) string into a WorkflowDocument.

    Raises:
        SchemaLoadError: If the text cannot be parsed.
        SchemaValidationError: If the data fails validation.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise SchemaLoadError(f"Invalid YAML: {e}") from e

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise SchemaLoadError(f"Expected a mapping at root, got {type(data).__name__}")

    return parse_document_data(data)


def parse_document_data(data: dict) -> WorkflowDocument:
    """Parse raw data into a WorkflowDocument.

    Raises:
        SchemaValidationError: If the data fails validation.
    """
    try:
        return WorkflowDocument.model_validate(data)
    except ValidationError as e:
        errors = [
            {
                "loc": ".".join(str(x) for x in err["loc"]),
                "msg": err["msg"],
                "type": err["type"],
            }
            for err in e.errors()
        ]
        raise SchemaValidationError(
            f"Schema validation failed with {len(errors)} error(s)", errors
        ) from e
