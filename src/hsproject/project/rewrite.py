"""
Project-wide block rewrites built on the mutable traversal.
"""

import logging
from typing import Mapping

from .models import ArbitraryID, BlockType, Project
from .traversal import iter_blocks

logger = logging.getLogger(__name__)

COMMENT_BLOCK_TAG = 69.0
NONE_BLOCK_TAG = 22.0

DEFAULT_BLOCK_TYPE_MAP: dict[float, float] = {COMMENT_BLOCK_TAG: NONE_BLOCK_TAG}
"""Turns deprecated comment blocks into no-op blocks."""


def remap_block_type(block_type: BlockType, mapping: Mapping[float, float]) -> BlockType:
    """Return the replacement for ``block_type``, or the same value if unmapped.

    Raises:
        TypeError: If the variant is not handled
    """
    if isinstance(block_type, ArbitraryID):
        if block_type.tag in mapping:
            return ArbitraryID(mapping[block_type.tag])
        return block_type
    raise TypeError(f"Unhandled block type variant: {block_type!r}")


def remap_block_types(project: Project, mapping: Mapping[float, float]) -> int:
    """Rewrite every block whose tag is a key of ``mapping`` in one pass.

    Args:
        project: Tree to rewrite in place
        mapping: Source tag -> replacement tag

    Returns:
        Number of blocks rewritten
    """
    lookup = {float(k): float(v) for k, v in mapping.items()}
    rewritten = 0
    for block in iter_blocks(project):
        replacement = remap_block_type(block.block_type, lookup)
        if replacement is not block.block_type:
            block.block_type = replacement
            rewritten += 1

    logger.debug(f"Rewrote {rewritten} block(s) using {len(lookup)} mapping(s)")
    return rewritten
