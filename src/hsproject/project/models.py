"""
Data models for the resolved project tree.

The tree owns its nodes and carries no wire identifiers: structure alone
encodes which object a rule belongs to and which blocks a rule runs. It is
built once per load, may be rewritten in place and is flattened again with
freshly minted identifiers on save.
"""

import math
from dataclasses import dataclass, field
from typing import Any, Iterator, List, Optional

# =============================================================================
# Type tags
# =============================================================================

UNRESOLVED_TYPE_TAG = -1.0
"""Tag substituted when a wire type value cannot be read as a number.

Hopscotch block and rule types are positive, so -1 never collides."""

NO_TRIGGER_TYPE_TAG = 0.0
"""``ruleBlockType`` written for a rule that has no event block."""

# Placeholder object attributes, used when a scene names a missing object
DEFAULT_OBJECT_TYPE = 0.0
DEFAULT_OBJECT_FILENAME = "monkey.png"
DEFAULT_OBJECT_WIDTH = 150.0
DEFAULT_OBJECT_HEIGHT = 150.0
DEFAULT_X_POSITION = 0.0
DEFAULT_Y_POSITION = 0.0
DEFAULT_RESIZE_SCALE = 1.0
DEFAULT_ROTATION = 0.0


def coerce_tag(value: Any, fallback: float = UNRESOLVED_TYPE_TAG) -> float:
    """Convert a wire type value to a numeric tag.

    Accepts JSON numbers and numeric text. Booleans, non-numeric text and
    non-finite values yield ``fallback``. Text must be a bare number:
    surrounding whitespace and digit separators (``"1_000"``) are rejected
    even though ``float()`` would take them.

    Args:
        value: Raw value from the wire record
        fallback: Tag returned when conversion fails

    Returns:
        The tag as float
    """
    if isinstance(value, bool):
        return fallback
    if isinstance(value, str) and (value != value.strip() or "_" in value):
        return fallback
    try:
        tag = float(value)
    except (TypeError, ValueError):
        return fallback
    return tag if math.isfinite(tag) else fallback


# =============================================================================
# Block types
# =============================================================================

class BlockType:
    """Base of the block-type union.

    Every place that turns a block type into something else goes through
    ``block_type_tag``, so a new variant only needs handling there.
    """
    __slots__ = ()


@dataclass(frozen=True)
class ArbitraryID(BlockType):
    """A block type known only by its numeric wire tag."""
    tag: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "tag", float(self.tag))


def block_type_tag(block_type: BlockType) -> float:
    """Return the numeric wire tag of a block type.

    Raises:
        TypeError: If the variant is not handled
    """
    if isinstance(block_type, ArbitraryID):
        return block_type.tag
    raise TypeError(f"Unhandled block type variant: {block_type!r}")


# =============================================================================
# Tree nodes
# =============================================================================

@dataclass
class Block:
    """The smallest executable unit, identified by its block type."""
    block_type: BlockType

    @classmethod
    def with_tag(cls, tag: float) -> "Block":
        """Create a block of an arbitrary numeric type."""
        return cls(block_type=ArbitraryID(tag))

    @property
    def type_tag(self) -> float:
        """Numeric tag of this block's type."""
        return block_type_tag(self.block_type)


@dataclass
class Rule:
    """An event handler: an optional trigger event and a body of blocks.

    ``event`` is only set for rules resolved from a wire record. A rule
    built directly, including the placeholder for a missing rule, has none.
    """
    event: Optional[Block] = None
    blocks: List[Block] = field(default_factory=lambda: [])

    def iter_blocks(self) -> Iterator[Block]:
        """Yield the event (if any), then the body blocks."""
        if self.event is not None:
            yield self.event
        yield from self.blocks


@dataclass
class HSObject:
    """An actor in a scene.

    Geometry is stored as floats; the wire keeps it as text.
    """
    object_type: float = DEFAULT_OBJECT_TYPE
    filename: str = DEFAULT_OBJECT_FILENAME
    width: float = DEFAULT_OBJECT_WIDTH
    height: float = DEFAULT_OBJECT_HEIGHT
    x_position: float = DEFAULT_X_POSITION
    y_position: float = DEFAULT_Y_POSITION
    resize_scale: float = DEFAULT_RESIZE_SCALE
    rotation: float = DEFAULT_ROTATION
    name: str = ""
    before_game_starts_blocks: List[Block] = field(default_factory=lambda: [])
    rules: List[Rule] = field(default_factory=lambda: [])

    @classmethod
    def placeholder(cls) -> "HSObject":
        """Object substituted for a scene entry whose ID does not resolve."""
        return cls()

    def iter_blocks(self) -> Iterator[Block]:
        """Yield pre-game blocks, then every rule's blocks in order."""
        yield from self.before_game_starts_blocks
        for rule in self.rules:
            yield from rule.iter_blocks()


@dataclass
class Scene:
    name: str = ""
    objects: List[HSObject] = field(default_factory=lambda: [])

    def iter_blocks(self) -> Iterator[Block]:
        for obj in self.objects:
            yield from obj.iter_blocks()


@dataclass
class Project:
    """Root of the tree: scenes in file order."""
    scenes: List[Scene] = field(default_factory=lambda: [])

    def iter_blocks(self) -> Iterator[Block]:
        for scene in self.scenes:
            yield from scene.iter_blocks()
