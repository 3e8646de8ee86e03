"""Tests for resolving wire records into the project tree."""

import logging
from typing import Any, Dict

import pytest

from conftest import make_block, make_document, make_object
from hsproject.project import (
    UNRESOLVED_TYPE_TAG,
    ArbitraryID,
    Block,
    GraphResolver,
    HSObject,
    Rule,
)
from hsproject.wire import loads_project


def resolve(document: Dict[str, Any], encode) -> Any:
    return GraphResolver(loads_project(encode(document))).resolve()


class TestStructure:
    """Ordering and ownership of resolved nodes."""

    def test_scene_and_objects(self, sample_document: Dict[str, Any], encode) -> None:
        """Test scene name and object count."""
        project = resolve(sample_document, encode)

        assert len(project.scenes) == 1
        scene = project.scenes[0]
        assert scene.name == "Main"
        assert [obj.name for obj in scene.objects] == ["Object O1", "Idle"]

    def test_object_attributes_are_parsed(self, sample_document: Dict[str, Any], encode) -> None:
        """Test that object geometry text becomes floats."""
        obj = resolve(sample_document, encode).scenes[0].objects[0]

        assert obj.object_type == 1.0
        assert obj.filename == "text-object.png"
        assert obj.width == 120.0
        assert obj.height == 80.0
        assert obj.x_position == 10.0
        assert obj.y_position == 20.5
        assert obj.resize_scale == 2.0
        assert obj.rotation == 45.0

    def test_blocks_and_rules(self, sample_document: Dict[str, Any], encode) -> None:
        """Test pre-game blocks and rule contents."""
        obj = resolve(sample_document, encode).scenes[0].objects[0]

        assert [b.type_tag for b in obj.before_game_starts_blocks] == [120.0, 69.0]
        assert len(obj.rules) == 2
        first, second = obj.rules
        assert first.event == Block(ArbitraryID(7000))
        assert [b.type_tag for b in first.blocks] == [69.0, 55.0]
        assert second.event == Block(ArbitraryID(69))
        assert second.blocks == []

    def test_object_without_ability_has_no_pre_game_blocks(
        self, sample_document: Dict[str, Any], encode
    ) -> None:
        """Test an object with no abilityID."""
        obj = resolve(sample_document, encode).scenes[0].objects[1]
        assert obj.before_game_starts_blocks == []
        assert obj.rules == []

    def test_objects_follow_scene_order_not_collection_order(self, encode) -> None:
        """Test that scene order wins over the objects array."""
        document = make_document(
            scenes=[
                {"name": "A", "id": "S1", "objects": ["O2"]},
                {"name": "B", "id": "S2", "objects": ["O1", "O2"]},
            ],
            objects=[make_object("O1"), make_object("O2")],
        )
        project = resolve(document, encode)

        assert [s.name for s in project.scenes] == ["A", "B"]
        assert [o.name for o in project.scenes[0].objects] == ["Object O2"]
        assert [o.name for o in project.scenes[1].objects] == ["Object O1", "Object O2"]

    def test_each_resolution_owns_its_nodes(self, encode) -> None:
        """Test that shared wire records give separate tree nodes."""
        document = make_document(
            scenes=[{"name": "A", "id": "S1", "objects": ["O1", "O1"]}],
            objects=[make_object("O1")],
        )
        scene = resolve(document, encode).scenes[0]
        assert scene.objects[0] == scene.objects[1]
        assert scene.objects[0] is not scene.objects[1]


class TestPlaceholders:
    """Dangling references are absorbed, not raised."""

    def test_missing_object_becomes_placeholder(self, encode, caplog) -> None:
        """Test the placeholder object and its warning."""
        document = make_document(
            scenes=[{"name": "Main", "id": "S1", "objects": ["O1", "GONE", "O2"]}],
            objects=[make_object("O1"), make_object("O2")],
        )
        with caplog.at_level(logging.WARNING, logger="hsproject"):
            objects = resolve(document, encode).scenes[0].objects

        assert len(objects) == 3
        placeholder = objects[1]
        assert placeholder == HSObject.placeholder()
        assert placeholder.filename == "monkey.png"
        assert placeholder.object_type == 0.0
        assert (placeholder.width, placeholder.height) == (150.0, 150.0)
        assert (placeholder.x_position, placeholder.y_position) == (0.0, 0.0)
        assert placeholder.resize_scale == 1.0
        assert placeholder.rotation == 0.0
        assert placeholder.name == ""
        assert "GONE" in caplog.text

    def test_missing_rule_becomes_empty_rule(self, encode) -> None:
        """Test the empty rule for a missing rule ID."""
        document = make_document(
            scenes=[{"name": "Main", "id": "S1", "objects": ["O1"]}],
            objects=[make_object("O1", rules=["R-missing"])],
        )
        obj = resolve(document, encode).scenes[0].objects[0]
        assert obj.rules == [Rule()]
        assert obj.rules[0].event is None

    def test_missing_ability_gives_no_blocks(self, encode) -> None:
        """Test missing pre-game and rule abilities."""
        document = make_document(
            scenes=[{"name": "Main", "id": "S1", "objects": ["O1"]}],
            objects=[make_object("O1", abilityID="A-missing", rules=["R1"])],
            rules=[{"id": "R1", "ruleBlockType": 7000, "abilityID": "A-gone", "parameters": []}],
        )
        obj = resolve(document, encode).scenes[0].objects[0]
        assert obj.before_game_starts_blocks == []
        assert obj.rules[0].event == Block.with_tag(7000)
        assert obj.rules[0].blocks == []


class TestNumericFallbacks:
    """Unreadable numbers fall back to defaults and sentinels."""

    @pytest.mark.parametrize(
        "field,attribute,expected",
        [
            ("xPosition", "x_position", 0.0),
            ("yPosition", "y_position", 0.0),
            ("width", "width", 150.0),
            ("height", "height", 150.0),
            ("resizeScale", "resize_scale", 1.0),
            ("rotation", "rotation", 0.0),
        ],
    )
    def test_non_numeric_geometry(self, encode, field: str, attribute: str, expected: float) -> None:
        """Test per-field geometry defaults."""
        document = make_document(
            scenes=[{"name": "Main", "id": "S1", "objects": ["O1"]}],
            objects=[make_object("O1", **{field: "abc"})],
        )
        obj = resolve(document, encode).scenes[0].objects[0]
        assert getattr(obj, attribute) == expected

    def test_non_finite_text_uses_default(self, encode) -> None:
        """Test that nan and inf text use the default."""
        document = make_document(
            scenes=[{"name": "Main", "id": "S1", "objects": ["O1"]}],
            objects=[make_object("O1", xPosition="nan", rotation="inf")],
        )
        obj = resolve(document, encode).scenes[0].objects[0]
        assert obj.x_position == 0.0
        assert obj.rotation == 0.0

    def test_unconvertible_tags_use_sentinel(self, encode) -> None:
        """Test the sentinel for unreadable block and rule types."""
        document = make_document(
            scenes=[{"name": "Main", "id": "S1", "objects": ["O1"]}],
            objects=[make_object("O1", abilityID="A1", rules=["R1"])],
            rules=[{"id": "R1", "ruleBlockType": "oops", "abilityID": "A1", "parameters": []}],
            abilities=[
                {
                    "abilityID": "A1",
                    "createdAt": 0,
                    "blocks": [make_block("comment"), make_block("23")],
                }
            ],
        )
        obj = resolve(document, encode).scenes[0].objects[0]

        assert [b.type_tag for b in obj.before_game_starts_blocks] == [UNRESOLVED_TYPE_TAG, 23.0]
        assert obj.rules[0].event == Block.with_tag(UNRESOLVED_TYPE_TAG)

    def test_unconvertible_object_type_uses_neutral_type(self, encode) -> None:
        """Test that an unreadable object type becomes 0."""
        document = make_document(
            scenes=[{"name": "Main", "id": "S1", "objects": ["O1"]}],
            objects=[make_object("O1", type="monkey")],
        )
        obj = resolve(document, encode).scenes[0].objects[0]
        assert obj.object_type == 0.0

    @pytest.mark.parametrize("text", [" 45", "45 ", "\t45\n", "1_000", "4_5"])
    def test_padded_or_separated_text_uses_default(self, encode, text: str) -> None:
        """Test that whitespace and digit separators are not read as numbers."""
        document = make_document(
            scenes=[{"name": "Main", "id": "S1", "objects": ["O1"]}],
            objects=[make_object("O1", abilityID="A1", rules=["R1"], rotation=text, width=text)],
            rules=[{"id": "R1", "ruleBlockType": text, "abilityID": "A1", "parameters": []}],
            abilities=[{"abilityID": "A1", "createdAt": 0, "blocks": [make_block(text)]}],
        )
        obj = resolve(document, encode).scenes[0].objects[0]

        assert obj.rotation == 0.0
        assert obj.width == 150.0
        assert obj.before_game_starts_blocks == [Block.with_tag(UNRESOLVED_TYPE_TAG)]
        assert obj.rules[0].event == Block.with_tag(UNRESOLVED_TYPE_TAG)
