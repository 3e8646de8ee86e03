"""
Flattening of the project tree back into wire records.

Walks the tree top-down and mints a fresh identifier for every node that
is a separate record on the wire. Records are appended in the order their
owners are processed: an object's abilities and rules precede the object,
and a scene's objects precede the scene. Original identifiers are never
reused; the tree does not keep them.
"""

import logging
import math
import time
import uuid
from typing import Callable, List, Optional

from ..wire.models import (
    JsonNumber,
    WireAbility,
    WireBlock,
    WireObject,
    WireProject,
    WireRule,
    WireScene,
    WireStageSize,
)
from .models import (
    DEFAULT_OBJECT_HEIGHT,
    DEFAULT_OBJECT_TYPE,
    DEFAULT_OBJECT_WIDTH,
    DEFAULT_RESIZE_SCALE,
    DEFAULT_ROTATION,
    DEFAULT_X_POSITION,
    DEFAULT_Y_POSITION,
    NO_TRIGGER_TYPE_TAG,
    UNRESOLVED_TYPE_TAG,
    Block,
    HSObject,
    Project,
    Rule,
    Scene,
)

IdFactory = Callable[[], str]
"""Zero-argument callable returning a new identifier."""

# Container fields the tree does not keep; written the same on every save
STAGE_WIDTH = 1024
STAGE_HEIGHT = 768
PLAYER_VERSION = "1.5.0"
PROJECT_VERSION = 33
FONT_SIZE = 80
REQUIRES_BETA_EDITOR = False

# Block fields the tree does not model
PLACEHOLDER_BLOCK_DESCRIPTION = ""
PLACEHOLDER_BLOCK_CLASS = "method"

# Abilities store createdAt as seconds since 2001-01-01 UTC
REFERENCE_DATE_OFFSET = 978307200.0

MAX_WIRE_INTEGER = 2.0**63


def uuid_id_factory() -> str:
    """Default identifier source: an upper-case random UUID."""
    return str(uuid.uuid4()).upper()


def wire_number(value: float, fallback: float = UNRESOLVED_TYPE_TAG) -> JsonNumber:
    """Convert a float to a JSON number, integral values as int.

    Non-finite values and integers outside the signed 64-bit range cannot
    be written by the encoder and become ``fallback``.
    """
    value = float(value)
    if not math.isfinite(value):
        value = float(fallback)
    if value.is_integer():
        if abs(value) >= MAX_WIRE_INTEGER:
            return int(fallback)
        return int(value)
    return value


def number_text(value: float, default: float) -> str:
    """Render a float the way the wire stores geometry, e.g. ``"150"``."""
    return str(wire_number(value, default))


class GraphFlattener:
    """Turns a ``Project`` tree into a ``WireProject``.

    A flattener holds the output collections of one save; create a new one
    per call to ``flatten``.
    """

    def __init__(
        self,
        id_factory: Optional[IdFactory] = None,
        created_at: Optional[float] = None,
    ):
        """Initialize the flattener.

        Args:
            id_factory: Source of new identifiers. Defaults to random UUIDs.
            created_at: ``createdAt`` for every ability written. Defaults to
                the current time.
        """
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.id_factory: IdFactory = id_factory or uuid_id_factory
        if created_at is None:
            created_at = time.time() - REFERENCE_DATE_OFFSET
        self.created_at = created_at
        self.wire_project = WireProject(
            stage_size=WireStageSize(width=STAGE_WIDTH, height=STAGE_HEIGHT),
            player_version=PLAYER_VERSION,
            version=PROJECT_VERSION,
            font_size=FONT_SIZE,
            requires_beta_editor=REQUIRES_BETA_EDITOR,
        )

    def flatten(self, project: Project) -> WireProject:
        """Flatten every scene in tree order.

        Args:
            project: Tree to flatten

        Returns:
            WireProject with freshly identified records
        """
        for scene in project.scenes:
            self._flatten_scene(scene)

        out = self.wire_project
        self.logger.debug(
            f"Flattened project: {len(out.scenes)} scenes, {len(out.objects)} objects, "
            f"{len(out.rules)} rules, {len(out.abilities)} abilities"
        )
        return out

    def _flatten_scene(self, scene: Scene) -> str:
        # Objects must exist before the scene lists them
        object_ids = [self._flatten_object(obj) for obj in scene.objects]
        scene_id = self.id_factory()
        self.wire_project.scenes.append(
            WireScene(name=scene.name, id=scene_id, objects=object_ids)
        )
        return scene_id

    def _flatten_object(self, obj: HSObject) -> str:
        """Write an object, its pre-game ability and its rules.

        Returns:
            The new object ID
        """
        ability_id = self._flatten_blocks(obj.before_game_starts_blocks)
        rule_ids = [self._flatten_rule(rule) for rule in obj.rules]
        object_id = self.id_factory()
        self.wire_project.objects.append(
            WireObject(
                object_id=object_id,
                object_type=wire_number(obj.object_type, DEFAULT_OBJECT_TYPE),
                filename=obj.filename,
                width=number_text(obj.width, DEFAULT_OBJECT_WIDTH),
                height=number_text(obj.height, DEFAULT_OBJECT_HEIGHT),
                name=obj.name,
                x_position=number_text(obj.x_position, DEFAULT_X_POSITION),
                y_position=number_text(obj.y_position, DEFAULT_Y_POSITION),
                resize_scale=number_text(obj.resize_scale, DEFAULT_RESIZE_SCALE),
                rotation=number_text(obj.rotation, DEFAULT_ROTATION),
                rules=rule_ids,
                ability_id=ability_id,
            )
        )
        return object_id

    def _flatten_rule(self, rule: Rule) -> str:
        ability_id = self._flatten_blocks(rule.blocks)
        if rule.event is not None:
            rule_block_type = wire_number(rule.event.type_tag)
        else:
            rule_block_type = wire_number(NO_TRIGGER_TYPE_TAG)
        rule_id = self.id_factory()
        self.wire_project.rules.append(
            WireRule(id=rule_id, rule_block_type=rule_block_type, ability_id=ability_id)
        )
        return rule_id

    def _flatten_blocks(self, blocks: List[Block]) -> str:
        """Write a block list as a new ability and return its ID."""
        wire_blocks = [
            WireBlock(
                block_type=wire_number(block.type_tag),
                description=PLACEHOLDER_BLOCK_DESCRIPTION,
                block_class=PLACEHOLDER_BLOCK_CLASS,
            )
            for block in blocks
        ]
        ability_id = self.id_factory()
        self.wire_project.abilities.append(
            WireAbility(
                ability_id=ability_id,
                created_at=self.created_at,
                blocks=wire_blocks,
            )
        )
        return ability_id


def flatten_project(
    project: Project,
    id_factory: Optional[IdFactory] = None,
    created_at: Optional[float] = None,
) -> WireProject:
    """Flatten a project tree into wire records."""
    return GraphFlattener(id_factory=id_factory, created_at=created_at).flatten(project)
