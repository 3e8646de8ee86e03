"""
Resolved, identifier-free project tree.

Provides the tree models, resolution from wire records, flattening back to
wire records and the mutable block traversal.
"""

from .flattener import GraphFlattener, IdFactory, flatten_project, uuid_id_factory
from .models import (
    NO_TRIGGER_TYPE_TAG,
    UNRESOLVED_TYPE_TAG,
    ArbitraryID,
    Block,
    BlockType,
    HSObject,
    Project,
    Rule,
    Scene,
    block_type_tag,
)
from .resolver import GraphResolver, resolve_project
from .rewrite import DEFAULT_BLOCK_TYPE_MAP, remap_block_types
from .traversal import count_blocks, iter_blocks

__all__ = [
    # Tree models
    "Project",
    "Scene",
    "HSObject",
    "Rule",
    "Block",
    "BlockType",
    "ArbitraryID",
    "block_type_tag",
    # Constants
    "UNRESOLVED_TYPE_TAG",
    "NO_TRIGGER_TYPE_TAG",
    "DEFAULT_BLOCK_TYPE_MAP",
    # Load / save
    "GraphResolver",
    "resolve_project",
    "GraphFlattener",
    "flatten_project",
    "IdFactory",
    "uuid_id_factory",
    # Traversal
    "iter_blocks",
    "count_blocks",
    "remap_block_types",
]
