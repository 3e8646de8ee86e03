"""
Resolution of wire records into the project tree.

Follows ID references scene -> object -> ability/rule -> ability -> block
and builds an owned tree. Referential gaps never fail the load: a missing
object becomes a placeholder object, a missing rule an empty rule, a
missing ability an empty block list, and unreadable numbers fall back to
documented defaults.
"""

import logging
import math
from typing import List, Optional

from ..wire.index import ProjectIndex
from ..wire.models import WireAbility, WireObject, WireProject, WireRule, WireScene
from .models import (
    DEFAULT_OBJECT_HEIGHT,
    DEFAULT_OBJECT_TYPE,
    DEFAULT_OBJECT_WIDTH,
    DEFAULT_RESIZE_SCALE,
    DEFAULT_ROTATION,
    DEFAULT_X_POSITION,
    DEFAULT_Y_POSITION,
    Block,
    HSObject,
    Project,
    Rule,
    Scene,
    coerce_tag,
)


class GraphResolver:
    """Builds a ``Project`` tree from one decoded ``WireProject``.

    The identifier indices are built once in the constructor; ``resolve``
    can be called repeatedly and returns a new tree each time.
    """

    def __init__(self, wire_project: WireProject):
        """Initialize the resolver.

        Args:
            wire_project: Decoded document to resolve
        """
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.wire_project = wire_project
        self.index = ProjectIndex(wire_project)

    def resolve(self) -> Project:
        """Resolve every scene in file order.

        Returns:
            The resolved project tree
        """
        scenes = [self._resolve_scene(scene) for scene in self.wire_project.scenes]
        self.logger.debug(f"Resolved project with {len(scenes)} scene(s)")
        return Project(scenes=scenes)

    def _resolve_scene(self, wire_scene: WireScene) -> Scene:
        objects: List[HSObject] = []
        for object_id in wire_scene.objects:
            wire_object = self.index.object_with_id(object_id)
            if wire_object is None:
                self.logger.warning(
                    f"Scene {wire_scene.name!r} references missing object {object_id!r}, "
                    f"using placeholder"
                )
                objects.append(HSObject.placeholder())
            else:
                objects.append(self._resolve_object(wire_object))
        return Scene(name=wire_scene.name, objects=objects)

    def _resolve_object(self, wire_object: WireObject) -> HSObject:
        """Convert one object, its pre-game ability and its rules.

        Args:
            wire_object: Object record found in the index

        Returns:
            HSObject with geometry parsed from the wire text
        """
        before_game_starts = self._blocks_for_ability(
            wire_object.ability_id, f"object {wire_object.object_id!r}"
        )

        rules: List[Rule] = []
        for rule_id in wire_object.rules:
            wire_rule = self.index.rule_with_id(rule_id)
            if wire_rule is None:
                self.logger.warning(
                    f"Object {wire_object.object_id!r} references missing rule {rule_id!r}, "
                    f"using empty rule"
                )
                rules.append(Rule())
            else:
                rules.append(self._resolve_rule(wire_rule))

        label = wire_object.object_id
        return HSObject(
            object_type=coerce_tag(wire_object.object_type, DEFAULT_OBJECT_TYPE),
            filename=wire_object.filename,
            width=self._parse_number(wire_object.width, DEFAULT_OBJECT_WIDTH, label, "width"),
            height=self._parse_number(wire_object.height, DEFAULT_OBJECT_HEIGHT, label, "height"),
            x_position=self._parse_number(
                wire_object.x_position, DEFAULT_X_POSITION, label, "xPosition"
            ),
            y_position=self._parse_number(
                wire_object.y_position, DEFAULT_Y_POSITION, label, "yPosition"
            ),
            resize_scale=self._parse_number(
                wire_object.resize_scale, DEFAULT_RESIZE_SCALE, label, "resizeScale"
            ),
            rotation=self._parse_number(wire_object.rotation, DEFAULT_ROTATION, label, "rotation"),
            name=wire_object.name,
            before_game_starts_blocks=before_game_starts,
            rules=rules,
        )

    def _resolve_rule(self, wire_rule: WireRule) -> Rule:
        # The event is rebuilt from the trigger type, not copied from a block
        event = Block.with_tag(coerce_tag(wire_rule.rule_block_type))
        blocks = self._blocks_for_ability(wire_rule.ability_id, f"rule {wire_rule.id!r}")
        return Rule(event=event, blocks=blocks)

    def _blocks_for_ability(self, ability_id: Optional[str], owner: str) -> List[Block]:
        """Return the blocks of an ability, or an empty list if it is absent."""
        if ability_id is None:
            return []
        ability = self.index.ability_with_id(ability_id)
        if ability is None:
            self.logger.warning(f"{owner} references missing ability {ability_id!r}")
            return []
        return self._blocks_from_ability(ability)

    @staticmethod
    def _blocks_from_ability(ability: WireAbility) -> List[Block]:
        # Only the type survives; description, class and parameters are dropped
        return [Block.with_tag(coerce_tag(b.block_type)) for b in ability.blocks]

    def _parse_number(self, text: str, default: float, object_id: str, field_name: str) -> float:
        """Parse a numeric-as-string field, falling back to ``default``."""
        value = coerce_tag(text, math.nan)
        if math.isnan(value):
            self.logger.debug(
                f"Object {object_id!r}: {field_name}={text!r} is not a number, "
                f"using {default}"
            )
            return default
        return value


def resolve_project(wire_project: WireProject) -> Project:
    """Resolve a decoded document into the project tree."""
    return GraphResolver(wire_project).resolve()
