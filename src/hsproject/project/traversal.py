"""
Depth-first traversal over every block of a project tree.

Order: for each scene, for each object, the pre-game blocks, then for each
rule its event (when present) followed by its body blocks. The generator
yields live ``Block`` nodes one at a time, so assigning ``block_type`` on
a yielded block rewrites the tree directly.
"""

from typing import Iterator

from .models import Block, Project


def iter_blocks(project: Project) -> Iterator[Block]:
    """Yield every block of ``project`` in traversal order.

    Each call starts a new pass over the current state of the tree.
    """
    return project.iter_blocks()


def count_blocks(project: Project) -> int:
    """Number of blocks ``iter_blocks`` would yield."""
    return sum(1 for _ in iter_blocks(project))
