"""
Public entry points: parse, serialize and traverse a project.

These functions do no I/O of their own except the two file helpers at the
bottom, which exist for the command line.
"""

import logging
from pathlib import Path
from typing import Iterator, Optional

from .project.flattener import IdFactory, flatten_project
from .project.models import Block, Project
from .project.resolver import resolve_project
from .project.traversal import iter_blocks
from .wire.codec import dumps_project, loads_project

logger = logging.getLogger(__name__)


def parse(text: str | bytes) -> Project:
    """Parse a project document into the resolved tree.

    Dangling references and unreadable numbers are replaced by placeholders
    and defaults rather than reported.

    Args:
        text: Complete JSON document

    Returns:
        The resolved project tree

    Raises:
        ProjectParseError: If the document is malformed or violates the schema
    """
    return resolve_project(loads_project(text))


def serialize(
    project: Project,
    id_factory: Optional[IdFactory] = None,
    created_at: Optional[float] = None,
    indent: bool = False,
) -> str:
    """Serialize a project tree into a new document.

    Every record gets a fresh identifier and the container fields the tree
    does not keep (stage size, versions, font size) are written as fixed
    constants.

    Args:
        project: Tree to serialize
        id_factory: Source of new identifiers (defaults to random UUIDs)
        created_at: ``createdAt`` written on every ability
        indent: Pretty-print the output

    Returns:
        The JSON document as text

    Raises:
        ProjectSerializeError: If the document cannot be encoded
    """
    wire_project = flatten_project(project, id_factory=id_factory, created_at=created_at)
    return dumps_project(wire_project, indent=indent)


def traverse_mut(project: Project) -> Iterator[Block]:
    """Yield every block of the tree for in-place rewriting."""
    return iter_blocks(project)


def load_project(path: Path) -> Project:
    """Read and parse a project file."""
    logger.info(f"Loading project from: {path}")
    return parse(Path(path).read_bytes())


def save_project(project: Project, path: Path, indent: bool = False) -> None:
    """Serialize a project and write it to ``path``."""
    text = serialize(project, indent=indent)
    Path(path).write_text(text, encoding="utf-8")
    logger.info(f"Saved project to: {path}")
