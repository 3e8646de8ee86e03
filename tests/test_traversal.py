"""Tests for the mutable block traversal and block rewrites."""

from typing import Any, Dict

import orjson
import pytest

from hsproject import (
    ArbitraryID,
    Block,
    BlockType,
    HSObject,
    Project,
    Rule,
    Scene,
    parse,
    remap_block_types,
    serialize,
    traverse_mut,
)
from hsproject.project import block_type_tag, count_blocks, iter_blocks


class TestTraversalOrder:
    """Completeness and order of yielded blocks."""

    def test_sample_order(self, sample_document: Dict[str, Any], encode) -> None:
        """Test block order on the sample document."""
        project = parse(encode(sample_document))
        tags = [block.type_tag for block in traverse_mut(project)]
        assert tags == [120.0, 69.0, 7000.0, 69.0, 55.0, 69.0]

    def test_counts_pre_game_events_and_bodies(self) -> None:
        """Test that events and bodies are all visited."""
        project = Project(
            scenes=[
                Scene(
                    objects=[
                        HSObject(
                            before_game_starts_blocks=[Block.with_tag(1), Block.with_tag(2)],
                            rules=[
                                Rule(event=Block.with_tag(3), blocks=[Block.with_tag(4)]),
                                Rule(blocks=[Block.with_tag(5)]),
                            ],
                        ),
                        HSObject(rules=[Rule(event=Block.with_tag(6))]),
                    ]
                ),
                Scene(objects=[HSObject(before_game_starts_blocks=[Block.with_tag(7)])]),
            ]
        )
        # 3 pre-game blocks, 2 events, 2 body blocks; the event-less rule adds none
        assert count_blocks(project) == 7
        assert [b.type_tag for b in iter_blocks(project)] == [1, 2, 3, 4, 5, 6, 7]

    def test_yields_live_nodes(self) -> None:
        """Test that yielded blocks are the tree's own nodes."""
        event = Block.with_tag(3)
        body = Block.with_tag(4)
        project = Project(scenes=[Scene(objects=[HSObject(rules=[Rule(event=event, blocks=[body])])])])

        yielded = list(traverse_mut(project))
        assert yielded[0] is event
        assert yielded[1] is body

    def test_each_call_is_a_fresh_pass(self) -> None:
        """Test that every call starts from the first block."""
        obj = HSObject(before_game_starts_blocks=[Block.with_tag(1)])
        project = Project(scenes=[Scene(objects=[obj])])

        first = traverse_mut(project)
        assert next(first).type_tag == 1
        with pytest.raises(StopIteration):
            next(first)

        obj.before_game_starts_blocks.append(Block.with_tag(2))
        assert [b.type_tag for b in traverse_mut(project)] == [1, 2]

    def test_empty_project(self) -> None:
        """Test traversal of an empty project."""
        assert list(traverse_mut(Project())) == []


class TestMutation:
    """Changes made through yielded blocks reach the saved document."""

    def test_mutation_visible_in_serialize(self, sample_document: Dict[str, Any], encode, sequential_ids) -> None:
        """Test that changed blocks are saved."""
        project = parse(encode(sample_document))
        for block in traverse_mut(project):
            if block.type_tag == 55:
                block.block_type = ArbitraryID(56)

        data = orjson.loads(serialize(project, id_factory=sequential_ids, created_at=0))
        rule_ability = next(a for a in data["abilities"] if a["abilityID"] == "ID-2")
        assert [b["type"] for b in rule_ability["blocks"]] == [69, 56]

    def test_remap_block_types(self, sample_document: Dict[str, Any], encode) -> None:
        """Test remap_block_types result and count."""
        project = parse(encode(sample_document))

        rewritten = remap_block_types(project, {69: 22})

        assert rewritten == 3
        assert [b.type_tag for b in traverse_mut(project)] == [120, 22, 7000, 22, 55, 22]

    def test_remap_with_empty_mapping(self, sample_document: Dict[str, Any], encode) -> None:
        """Test that an empty mapping changes nothing."""
        project = parse(encode(sample_document))
        assert remap_block_types(project, {}) == 0

    def test_unhandled_variant_is_rejected(self) -> None:
        """Test that an unknown block type variant raises."""
        class KnownBlock(BlockType):
            pass

        project = Project(scenes=[Scene(objects=[HSObject(before_game_starts_blocks=[Block(KnownBlock())])])])

        with pytest.raises(TypeError, match="Unhandled block type variant"):
            remap_block_types(project, {69: 22})
        with pytest.raises(TypeError):
            block_type_tag(KnownBlock())
