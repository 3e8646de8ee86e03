"""
hsproject: read, rewrite and write Hopscotch project files.

Converts between the flat, ID-referenced project document and a nested
object tree that can be inspected and rewritten in bulk.
"""

__version__ = "0.1.0"
__author__ = "hsproject Contributors"

# Core entry points
from .api import load_project, parse, save_project, serialize, traverse_mut
from .errors import HSProjectError, ProjectParseError, ProjectSerializeError

# Tree models
from .project.models import (
    NO_TRIGGER_TYPE_TAG,
    UNRESOLVED_TYPE_TAG,
    ArbitraryID,
    Block,
    BlockType,
    HSObject,
    Project,
    Rule,
    Scene,
)
from .project.rewrite import remap_block_types

__all__ = [
    # Entry points
    "parse",
    "serialize",
    "traverse_mut",
    "load_project",
    "save_project",
    "remap_block_types",

    # Errors
    "HSProjectError",
    "ProjectParseError",
    "ProjectSerializeError",

    # Tree models
    "Project",
    "Scene",
    "HSObject",
    "Rule",
    "Block",
    "BlockType",
    "ArbitraryID",
    "UNRESOLVED_TYPE_TAG",
    "NO_TRIGGER_TYPE_TAG",
]
