"""
Rewrite and output settings for hsproject.

The block type map is stored as text, e.g. ``"69:22, 12:13"``.
"""

import logging
from typing import TYPE_CHECKING, Dict

from ..project.rewrite import DEFAULT_BLOCK_TYPE_MAP
from .types import ConfigError

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings

logger = logging.getLogger(__name__)


def _format_tag(tag: float) -> str:
    return str(int(tag)) if float(tag).is_integer() else str(tag)


def format_block_type_map(mapping: Dict[float, float]) -> str:
    """Render a block type map in its stored text form."""
    return ", ".join(f"{_format_tag(k)}:{_format_tag(v)}" for k, v in mapping.items())


def parse_block_type_map(text: str) -> Dict[float, float]:
    """Parse ``"FROM:TO, FROM:TO"`` into a tag mapping.

    Args:
        text: Comma-separated pairs; empty text yields an empty map

    Returns:
        Source tag -> replacement tag

    Raises:
        ConfigError: If a pair is malformed or not numeric
    """
    mapping: Dict[float, float] = {}
    for pair in text.split(","):
        pair = pair.strip()
        if not pair:
            continue
        source, sep, target = pair.partition(":")
        if not sep:
            raise ConfigError(f"Block type pair must look like FROM:TO, got {pair!r}")
        try:
            mapping[float(source)] = float(target)
        except ValueError as e:
            raise ConfigError(f"Block type pair must be numeric, got {pair!r}") from e
    return mapping


class RewriteSettings:
    """Manages how the command line rewrites and writes projects."""

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    @property
    def block_type_map_text(self) -> str:
        """Raw stored text of the block type map."""
        value = self.settings.value(
            "rewrite/block_type_map", format_block_type_map(DEFAULT_BLOCK_TYPE_MAP)
        )
        # An unquoted value with commas in a hand-edited INI reads back as a list
        if isinstance(value, list):
            return ",".join(str(item) for item in value)
        return str(value) if value is not None else ""

    @property
    def block_type_map(self) -> Dict[float, float]:
        """Get the block type map, falling back to the default if invalid."""
        try:
            return parse_block_type_map(self.block_type_map_text)
        except ConfigError as e:
            logger.warning(f"{e}, using default block type map")
            return dict(DEFAULT_BLOCK_TYPE_MAP)

    @block_type_map.setter
    def block_type_map(self, value: Dict[float, float]) -> None:
        self.settings.setValue("rewrite/block_type_map", format_block_type_map(value))
        self.settings.sync()

    @property
    def pretty_output(self) -> bool:
        """Whether written documents are indented."""
        value = self.settings.value("output/pretty", False)
        if isinstance(value, str):
            return value.lower() in ("true", "1", "yes")
        return bool(value)

    @pretty_output.setter
    def pretty_output(self, value: bool) -> None:
        self.settings.setValue("output/pretty", value)
        self.settings.sync()
