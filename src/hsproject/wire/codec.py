"""
JSON codec for project documents.

Reads and writes the wire format with orjson. Decoding runs the schema
check before any record is built so callers get every structural problem
in a single ``ProjectParseError``.
"""

import logging

import orjson

from ..errors import ProjectParseError, ProjectSerializeError
from .models import WireProject
from .schema import WireSchema

logger = logging.getLogger(__name__)


def loads_project(text: str | bytes) -> WireProject:
    """Decode a project document into wire records.

    Args:
        text: Complete JSON document (orjson accepts str or bytes)

    Returns:
        WireProject with every collection populated in file order

    Raises:
        ProjectParseError: If the JSON is malformed or violates the schema
    """
    try:
        data = orjson.loads(text)
    except orjson.JSONDecodeError as e:
        raise ProjectParseError(f"Malformed project JSON: {e}") from e

    errors = WireSchema.validate_project(data)
    if errors:
        raise ProjectParseError("Invalid project document", errors)

    project = WireProject.from_dict(data)
    logger.debug(
        f"Decoded project: {len(project.scenes)} scenes, {len(project.objects)} objects, "
        f"{len(project.rules)} rules, {len(project.abilities)} abilities"
    )
    return project


def dumps_project(project: WireProject, indent: bool = False) -> str:
    """Encode wire records into a project document.

    Args:
        project: Wire project to encode
        indent: Pretty-print with two-space indentation

    Returns:
        The JSON document as text

    Raises:
        ProjectSerializeError: If a value cannot be represented in JSON
    """
    option = orjson.OPT_INDENT_2 if indent else 0
    try:
        encoded = orjson.dumps(project.to_dict(), option=option)
    except orjson.JSONEncodeError as e:
        raise ProjectSerializeError(f"Could not encode project: {e}") from e
    return encoded.decode("utf-8")
