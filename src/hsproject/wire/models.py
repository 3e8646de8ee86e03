"""
Data models for the flat Hopscotch project document.

Each record mirrors one JSON object of the wire format. Records reference
each other by string identifier and hold no resolution logic. Field names
on the Python side are snake_case; ``from_dict``/``to_dict`` translate to
and from the exact wire spelling, which is not uniformly camelCase
(``abilityID``, ``block_class``, ``requires_beta_editor``).

``from_dict`` expects data that already passed ``WireSchema`` validation.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, TypeAlias, cast

WireMapping: TypeAlias = Dict[str, Any]
"""A single decoded JSON object."""

JsonNumber: TypeAlias = int | float
"""A JSON number as produced by the decoder."""


def _put_optional(data: WireMapping, key: str, value: Any) -> None:
    """Add ``key`` only when ``value`` is set. Unset optionals are omitted."""
    if value is not None:
        data[key] = value


def _records(raw: Any) -> List[WireMapping]:
    return cast(List[WireMapping], raw or [])


# =============================================================================
# Leaf records
# =============================================================================

@dataclass
class WireParameter:
    """Parameter slot of a block, rule or ability."""
    key: str
    default_value: str
    param_type: JsonNumber
    value: Optional[str] = None

    @classmethod
    def from_dict(cls, data: WireMapping) -> "WireParameter":
        return cls(
            key=data["key"],
            default_value=data["defaultValue"],
            param_type=data["type"],
            value=data.get("value"),
        )

    def to_dict(self) -> WireMapping:
        result: WireMapping = {
            "key": self.key,
            "defaultValue": self.default_value,
        }
        _put_optional(result, "value", self.value)
        result["type"] = self.param_type
        return result


def _parameters(raw: Any) -> List[WireParameter]:
    return [WireParameter.from_dict(p) for p in _records(raw)]


@dataclass
class WireBlock:
    """A block stored inline inside an ability."""
    block_type: JsonNumber
    description: str
    block_class: str
    parameters: List[WireParameter] = field(default_factory=lambda: [])

    @classmethod
    def from_dict(cls, data: WireMapping) -> "WireBlock":
        return cls(
            block_type=data["type"],
            description=data["description"],
            block_class=data["block_class"],
            parameters=_parameters(data.get("parameters")),
        )

    def to_dict(self) -> WireMapping:
        return {
            "type": self.block_type,
            "description": self.description,
            "block_class": self.block_class,
            "parameters": [p.to_dict() for p in self.parameters],
        }


@dataclass
class WireStageSize:
    width: JsonNumber
    height: JsonNumber

    @classmethod
    def from_dict(cls, data: WireMapping) -> "WireStageSize":
        return cls(width=data["width"], height=data["height"])

    def to_dict(self) -> WireMapping:
        return {"width": self.width, "height": self.height}


# =============================================================================
# Identified records
# =============================================================================

@dataclass
class WireScene:
    """A scene listing the IDs of its objects in display order."""
    name: str
    id: str
    objects: List[str] = field(default_factory=lambda: [])

    @classmethod
    def from_dict(cls, data: WireMapping) -> "WireScene":
        return cls(
            name=data["name"],
            id=data["id"],
            objects=list(data["objects"]),
        )

    def to_dict(self) -> WireMapping:
        return {"name": self.name, "id": self.id, "objects": list(self.objects)}


@dataclass
class WireObject:
    """An actor on the stage.

    Geometry fields keep the wire's textual form. Conversion to numbers is
    left to the resolver so that bad text does not fail the load.
    """
    object_id: str
    object_type: JsonNumber
    filename: str
    width: str
    height: str
    name: str
    x_position: str
    y_position: str
    resize_scale: str
    rotation: str
    rules: List[str] = field(default_factory=lambda: [])
    text: Optional[str] = None
    ability_id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: WireMapping) -> "WireObject":
        return cls(
            object_id=data["objectID"],
            object_type=data["type"],
            filename=data["filename"],
            width=data["width"],
            height=data["height"],
            name=data["name"],
            x_position=data["xPosition"],
            y_position=data["yPosition"],
            resize_scale=data["resizeScale"],
            rotation=data["rotation"],
            rules=list(data["rules"]),
            text=data.get("text"),
            ability_id=data.get("abilityID"),
        )

    def to_dict(self) -> WireMapping:
        result: WireMapping = {
            "objectID": self.object_id,
            "type": self.object_type,
            "filename": self.filename,
            "width": self.width,
            "height": self.height,
            "name": self.name,
            "rules": list(self.rules),
            "xPosition": self.x_position,
            "yPosition": self.y_position,
            "resizeScale": self.resize_scale,
            "rotation": self.rotation,
        }
        _put_optional(result, "text", self.text)
        _put_optional(result, "abilityID", self.ability_id)
        return result


@dataclass
class WireRule:
    """An event handler: trigger type plus the ability that runs."""
    id: str
    rule_block_type: JsonNumber
    ability_id: str
    object_id: Optional[str] = None
    parameters: List[WireParameter] = field(default_factory=lambda: [])

    @classmethod
    def from_dict(cls, data: WireMapping) -> "WireRule":
        return cls(
            id=data["id"],
            rule_block_type=data["ruleBlockType"],
            ability_id=data["abilityID"],
            object_id=data.get("objectID"),
            parameters=_parameters(data.get("parameters")),
        )

    def to_dict(self) -> WireMapping:
        result: WireMapping = {
            "id": self.id,
            "ruleBlockType": self.rule_block_type,
        }
        _put_optional(result, "objectID", self.object_id)
        result["abilityID"] = self.ability_id
        result["parameters"] = [p.to_dict() for p in self.parameters]
        return result


@dataclass
class WireAbility:
    """A named, ordered list of inline blocks."""
    ability_id: str
    created_at: JsonNumber
    blocks: List[WireBlock] = field(default_factory=lambda: [])
    name: Optional[str] = None
    parameters: Optional[List[WireParameter]] = None

    @classmethod
    def from_dict(cls, data: WireMapping) -> "WireAbility":
        raw_parameters = data.get("parameters")
        return cls(
            ability_id=data["abilityID"],
            created_at=data["createdAt"],
            blocks=[WireBlock.from_dict(b) for b in _records(data["blocks"])],
            name=data.get("name"),
            parameters=_parameters(raw_parameters) if raw_parameters is not None else None,
        )

    def to_dict(self) -> WireMapping:
        result: WireMapping = {}
        _put_optional(result, "name", self.name)
        result["abilityID"] = self.ability_id
        result["createdAt"] = self.created_at
        if self.parameters is not None:
            result["parameters"] = [p.to_dict() for p in self.parameters]
        result["blocks"] = [b.to_dict() for b in self.blocks]
        return result


# =============================================================================
# Passthrough records (parsed and validated, not resolved into the tree)
# =============================================================================

@dataclass
class WireVariable:
    object_id_string: str
    variable_type: JsonNumber
    name: str

    @classmethod
    def from_dict(cls, data: WireMapping) -> "WireVariable":
        return cls(
            object_id_string=data["objectIdString"],
            variable_type=data["type"],
            name=data["name"],
        )

    def to_dict(self) -> WireMapping:
        return {
            "objectIdString": self.object_id_string,
            "type": self.variable_type,
            "name": self.name,
        }


@dataclass
class WireCustomRule:
    name: str
    id: str
    ability_id: str
    parameters: List[WireParameter] = field(default_factory=lambda: [])
    rules: List[str] = field(default_factory=lambda: [])

    @classmethod
    def from_dict(cls, data: WireMapping) -> "WireCustomRule":
        return cls(
            name=data["name"],
            id=data["id"],
            ability_id=data["abilityID"],
            parameters=_parameters(data.get("parameters")),
            rules=list(data["rules"]),
        )

    def to_dict(self) -> WireMapping:
        return {
            "name": self.name,
            "id": self.id,
            "abilityID": self.ability_id,
            "parameters": [p.to_dict() for p in self.parameters],
            "rules": list(self.rules),
        }


@dataclass
class WireCustomRuleInstance:
    id: str
    custom_rule_id: str
    parameters: List[WireParameter] = field(default_factory=lambda: [])

    @classmethod
    def from_dict(cls, data: WireMapping) -> "WireCustomRuleInstance":
        return cls(
            id=data["id"],
            custom_rule_id=data["customRuleID"],
            parameters=_parameters(data.get("parameters")),
        )

    def to_dict(self) -> WireMapping:
        return {
            "id": self.id,
            "customRuleID": self.custom_rule_id,
            "parameters": [p.to_dict() for p in self.parameters],
        }


@dataclass
class WireEventParameter:
    id: str
    block_type: JsonNumber
    description: str

    @classmethod
    def from_dict(cls, data: WireMapping) -> "WireEventParameter":
        return cls(
            id=data["id"],
            block_type=data["blockType"],
            description=data["description"],
        )

    def to_dict(self) -> WireMapping:
        return {
            "id": self.id,
            "blockType": self.block_type,
            "description": self.description,
        }


@dataclass
class WireSceneReference:
    id: str
    block_type: JsonNumber
    description: str
    scene: str

    @classmethod
    def from_dict(cls, data: WireMapping) -> "WireSceneReference":
        return cls(
            id=data["id"],
            block_type=data["blockType"],
            description=data["description"],
            scene=data["scene"],
        )

    def to_dict(self) -> WireMapping:
        return {
            "id": self.id,
            "blockType": self.block_type,
            "description": self.description,
            "scene": self.scene,
        }


# =============================================================================
# Container
# =============================================================================

@dataclass
class WireProject:
    """The top-level document holding every flat collection."""
    stage_size: WireStageSize
    player_version: str
    version: JsonNumber
    font_size: JsonNumber
    requires_beta_editor: bool
    scenes: List[WireScene] = field(default_factory=lambda: [])
    objects: List[WireObject] = field(default_factory=lambda: [])
    rules: List[WireRule] = field(default_factory=lambda: [])
    abilities: List[WireAbility] = field(default_factory=lambda: [])
    variables: List[WireVariable] = field(default_factory=lambda: [])
    custom_rules: List[WireCustomRule] = field(default_factory=lambda: [])
    custom_rule_instances: List[WireCustomRuleInstance] = field(default_factory=lambda: [])
    event_parameters: List[WireEventParameter] = field(default_factory=lambda: [])
    scene_references: List[WireSceneReference] = field(default_factory=lambda: [])

    @classmethod
    def from_dict(cls, data: WireMapping) -> "WireProject":
        """Build the container and every record it holds.

        Args:
            data: Decoded document that passed ``WireSchema.validate_project``

        Returns:
            WireProject with all collections populated in file order
        """
        return cls(
            stage_size=WireStageSize.from_dict(data["stageSize"]),
            player_version=data["playerVersion"],
            version=data["version"],
            font_size=data["fontSize"],
            requires_beta_editor=data["requires_beta_editor"],
            scenes=[WireScene.from_dict(s) for s in _records(data["scenes"])],
            objects=[WireObject.from_dict(o) for o in _records(data["objects"])],
            rules=[WireRule.from_dict(r) for r in _records(data["rules"])],
            abilities=[WireAbility.from_dict(a) for a in _records(data["abilities"])],
            variables=[WireVariable.from_dict(v) for v in _records(data["variables"])],
            custom_rules=[
                WireCustomRule.from_dict(c) for c in _records(data["customRules"])
            ],
            custom_rule_instances=[
                WireCustomRuleInstance.from_dict(c)
                for c in _records(data["customRuleInstances"])
            ],
            event_parameters=[
                WireEventParameter.from_dict(e)
                for e in _records(data["eventParameters"])
            ],
            scene_references=[
                WireSceneReference.from_dict(s)
                for s in _records(data["sceneReferences"])
            ],
        )

    def to_dict(self) -> WireMapping:
        """Convert to the document mapping in wire field order."""
        return {
            "scenes": [s.to_dict() for s in self.scenes],
            "stageSize": self.stage_size.to_dict(),
            "playerVersion": self.player_version,
            "version": self.version,
            "abilities": [a.to_dict() for a in self.abilities],
            "fontSize": self.font_size,
            "customRules": [c.to_dict() for c in self.custom_rules],
            "objects": [o.to_dict() for o in self.objects],
            "variables": [v.to_dict() for v in self.variables],
            "customRuleInstances": [c.to_dict() for c in self.custom_rule_instances],
            "eventParameters": [e.to_dict() for e in self.event_parameters],
            "sceneReferences": [s.to_dict() for s in self.scene_references],
            "requires_beta_editor": self.requires_beta_editor,
            "rules": [r.to_dict() for r in self.rules],
        }
