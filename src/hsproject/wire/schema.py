"""Structural validation for decoded project documents.

Checks that every record carries its required fields with the right JSON
value types before any wire model is built. Referential integrity (does
an ID point anywhere) is not checked here; the resolver tolerates gaps.
"""

from typing import Any, Dict, List, Tuple, cast

from .models import WireMapping

# Value kinds understood by the validator
STRING = "string"
NUMBER = "number"
BOOL = "bool"
OBJECT = "object"
STRING_LIST = "string list"
TAG = "number or string"
"""Type tags may hold text; unconvertible values become a sentinel later."""

FieldSpec = Tuple[str, bool]
"""(value kind, required)"""

PARAMETER_FIELDS: Dict[str, FieldSpec] = {
    "key": (STRING, True),
    "defaultValue": (STRING, True),
    "value": (STRING, False),
    "type": (NUMBER, True),
}

BLOCK_FIELDS: Dict[str, FieldSpec] = {
    "type": (TAG, True),
    "description": (STRING, True),
    "block_class": (STRING, True),
}

SCENE_FIELDS: Dict[str, FieldSpec] = {
    "name": (STRING, True),
    "id": (STRING, True),
    "objects": (STRING_LIST, True),
}

OBJECT_FIELDS: Dict[str, FieldSpec] = {
    "objectID": (STRING, True),
    "type": (TAG, True),
    "filename": (STRING, True),
    "width": (STRING, True),
    "height": (STRING, True),
    "name": (STRING, True),
    "rules": (STRING_LIST, True),
    "xPosition": (STRING, True),
    "yPosition": (STRING, True),
    "resizeScale": (STRING, True),
    "rotation": (STRING, True),
    "text": (STRING, False),
    "abilityID": (STRING, False),
}

RULE_FIELDS: Dict[str, FieldSpec] = {
    "id": (STRING, True),
    "ruleBlockType": (TAG, True),
    "objectID": (STRING, False),
    "abilityID": (STRING, True),
}

ABILITY_FIELDS: Dict[str, FieldSpec] = {
    "name": (STRING, False),
    "abilityID": (STRING, True),
    "createdAt": (NUMBER, True),
}

VARIABLE_FIELDS: Dict[str, FieldSpec] = {
    "objectIdString": (STRING, True),
    "type": (NUMBER, True),
    "name": (STRING, True),
}

CUSTOM_RULE_FIELDS: Dict[str, FieldSpec] = {
    "name": (STRING, True),
    "id": (STRING, True),
    "abilityID": (STRING, True),
    "rules": (STRING_LIST, True),
}

CUSTOM_RULE_INSTANCE_FIELDS: Dict[str, FieldSpec] = {
    "id": (STRING, True),
    "customRuleID": (STRING, True),
}

EVENT_PARAMETER_FIELDS: Dict[str, FieldSpec] = {
    "id": (STRING, True),
    "blockType": (NUMBER, True),
    "description": (STRING, True),
}

SCENE_REFERENCE_FIELDS: Dict[str, FieldSpec] = {
    "id": (STRING, True),
    "blockType": (NUMBER, True),
    "description": (STRING, True),
    "scene": (STRING, True),
}

STAGE_SIZE_FIELDS: Dict[str, FieldSpec] = {
    "width": (NUMBER, True),
    "height": (NUMBER, True),
}

ROOT_FIELDS: Dict[str, FieldSpec] = {
    "playerVersion": (STRING, True),
    "version": (NUMBER, True),
    "fontSize": (NUMBER, True),
    "requires_beta_editor": (BOOL, True),
}

ROOT_COLLECTIONS = (
    "scenes",
    "abilities",
    "customRules",
    "objects",
    "variables",
    "customRuleInstances",
    "eventParameters",
    "sceneReferences",
    "rules",
)


def _json_kind(value: Any) -> str:
    """Describe a decoded JSON value for error messages."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def _matches(kind: str, value: Any) -> bool:
    is_number = isinstance(value, (int, float)) and not isinstance(value, bool)
    if kind == STRING:
        return isinstance(value, str)
    if kind == NUMBER:
        return is_number
    if kind == BOOL:
        return isinstance(value, bool)
    if kind == OBJECT:
        return isinstance(value, dict)
    if kind == STRING_LIST:
        return isinstance(value, list) and all(
            isinstance(item, str) for item in cast(List[Any], value)
        )
    if kind == TAG:
        return is_number or isinstance(value, str)
    raise ValueError(f"Unknown field kind: {kind}")


class WireSchema:
    """Validation rules for the Hopscotch project document.

    Every method returns a list of error messages (empty if valid) so that
    one pass reports all problems at once.
    """

    @staticmethod
    def validate_fields(
        data: Any, fields: Dict[str, FieldSpec], path: str
    ) -> List[str]:
        """Check one record against its field table.

        Optional fields may be absent or null. Unknown fields are ignored.

        Args:
            data: Decoded JSON value expected to be an object
            fields: Field table mapping wire name to (kind, required)
            path: Location used to prefix error messages

        Returns:
            List of error messages
        """
        if not isinstance(data, dict):
            return [f"{path}: expected object, got {_json_kind(data)}"]

        record = cast(WireMapping, data)
        errors: List[str] = []
        for name, (kind, required) in fields.items():
            if name not in record or record[name] is None:
                if required:
                    errors.append(f"{path}: missing required field '{name}'")
                continue
            value = record[name]
            if not _matches(kind, value):
                errors.append(
                    f"{path}.{name}: expected {kind}, got {_json_kind(value)}"
                )
        return errors

    @staticmethod
    def validate_parameters(
        data: WireMapping, path: str, required: bool = True
    ) -> List[str]:
        """Validate the ``parameters`` array of a record."""
        raw = data.get("parameters")
        if raw is None:
            return [f"{path}: missing required field 'parameters'"] if required else []
        if not isinstance(raw, list):
            return [f"{path}.parameters: expected array, got {_json_kind(raw)}"]

        errors: List[str] = []
        for idx, parameter in enumerate(cast(List[Any], raw)):
            errors.extend(
                WireSchema.validate_fields(
                    parameter, PARAMETER_FIELDS, f"{path}.parameters[{idx}]"
                )
            )
        return errors

    @staticmethod
    def validate_ability(data: Any, path: str) -> List[str]:
        """Validate an ability including its inline blocks."""
        errors = WireSchema.validate_fields(data, ABILITY_FIELDS, path)
        if not isinstance(data, dict):
            return errors

        ability = cast(WireMapping, data)
        errors.extend(WireSchema.validate_parameters(ability, path, required=False))

        blocks = ability.get("blocks")
        if not isinstance(blocks, list):
            if blocks is None:
                errors.append(f"{path}: missing required field 'blocks'")
            else:
                errors.append(f"{path}.blocks: expected array, got {_json_kind(blocks)}")
            return errors

        for idx, block in enumerate(cast(List[Any], blocks)):
            block_path = f"{path}.blocks[{idx}]"
            block_errors = WireSchema.validate_fields(block, BLOCK_FIELDS, block_path)
            errors.extend(block_errors)
            if isinstance(block, dict):
                errors.extend(
                    WireSchema.validate_parameters(cast(WireMapping, block), block_path)
                )
        return errors

    @staticmethod
    def validate_root(data: Any) -> List[str]:
        """Validate root-level scalar fields and collection types.

        Args:
            data: Decoded document

        Returns:
            List of error messages (empty if valid)
        """
        errors = WireSchema.validate_fields(data, ROOT_FIELDS, "project")
        if not isinstance(data, dict):
            return errors

        root = cast(WireMapping, data)
        stage_size = root.get("stageSize")
        if stage_size is None:
            errors.append("project: missing required field 'stageSize'")
        else:
            errors.extend(
                WireSchema.validate_fields(stage_size, STAGE_SIZE_FIELDS, "project.stageSize")
            )
        for name in ROOT_COLLECTIONS:
            value = root.get(name)
            if value is None:
                errors.append(f"project: missing required field '{name}'")
            elif not isinstance(value, list):
                errors.append(f"project.{name}: expected array, got {_json_kind(value)}")
        return errors

    @staticmethod
    def validate_project(data: Any) -> List[str]:
        """Validate a complete decoded document.

        Args:
            data: Decoded document

        Returns:
            List of all validation errors (empty if valid)
        """
        errors = WireSchema.validate_root(data)
        if errors:
            return errors  # Don't continue if root is invalid

        root = cast(WireMapping, data)
        simple_collections: Dict[str, Dict[str, FieldSpec]] = {
            "scenes": SCENE_FIELDS,
            "objects": OBJECT_FIELDS,
            "variables": VARIABLE_FIELDS,
            "eventParameters": EVENT_PARAMETER_FIELDS,
            "sceneReferences": SCENE_REFERENCE_FIELDS,
        }
        for name, fields in simple_collections.items():
            for idx, record in enumerate(root[name]):
                errors.extend(WireSchema.validate_fields(record, fields, f"{name}[{idx}]"))

        with_parameters: Dict[str, Dict[str, FieldSpec]] = {
            "rules": RULE_FIELDS,
            "customRules": CUSTOM_RULE_FIELDS,
            "customRuleInstances": CUSTOM_RULE_INSTANCE_FIELDS,
        }
        for name, fields in with_parameters.items():
            for idx, record in enumerate(root[name]):
                path = f"{name}[{idx}]"
                errors.extend(WireSchema.validate_fields(record, fields, path))
                if isinstance(record, dict):
                    errors.extend(
                        WireSchema.validate_parameters(cast(WireMapping, record), path)
                    )

        for idx, ability in enumerate(root["abilities"]):
            errors.extend(WireSchema.validate_ability(ability, f"abilities[{idx}]"))

        return errors
