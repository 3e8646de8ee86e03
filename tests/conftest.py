"""Shared fixtures: minimal Hopscotch documents and deterministic IDs."""

import logging
from typing import Any, Callable, Dict, Iterator, List

import orjson
import pytest


def make_block(block_type: Any, description: str = "block") -> Dict[str, Any]:
    return {
        "type": block_type,
        "description": description,
        "block_class": "method",
        "parameters": [],
    }


def make_object(object_id: str, **overrides: Any) -> Dict[str, Any]:
    obj: Dict[str, Any] = {
        "objectID": object_id,
        "type": 1,
        "filename": "text-object.png",
        "width": "120",
        "height": "80",
        "name": f"Object {object_id}",
        "rules": [],
        "xPosition": "10",
        "yPosition": "20.5",
        "resizeScale": "2",
        "rotation": "45",
    }
    obj.update(overrides)
    return obj


def make_document(
    scenes: List[Dict[str, Any]],
    objects: List[Dict[str, Any]],
    rules: List[Dict[str, Any]] | None = None,
    abilities: List[Dict[str, Any]] | None = None,
) -> Dict[str, Any]:
    return {
        "scenes": scenes,
        "stageSize": {"width": 768, "height": 1024},
        "playerVersion": "1.4.0",
        "version": 31,
        "abilities": abilities or [],
        "fontSize": 72,
        "customRules": [],
        "objects": objects,
        "variables": [],
        "customRuleInstances": [],
        "eventParameters": [],
        "sceneReferences": [],
        "requires_beta_editor": True,
        "rules": rules or [],
    }


@pytest.fixture()
def sample_document() -> Dict[str, Any]:
    """One scene, two objects; the first has pre-game blocks and two rules.

    Traversal order of block tags: 120, 69, 7000, 69, 55, 69.
    """
    return make_document(
        scenes=[{"name": "Main", "id": "S1", "objects": ["O1", "O2"]}],
        objects=[
            make_object("O1", abilityID="A-pre", rules=["R1", "R2"]),
            make_object("O2", name="Idle"),
        ],
        rules=[
            {
                "id": "R1",
                "ruleBlockType": 7000,
                "objectID": "O1",
                "abilityID": "A-r1",
                "parameters": [],
            },
            {
                "id": "R2",
                "ruleBlockType": 69,
                "objectID": "O1",
                "abilityID": "A-r2",
                "parameters": [],
            },
        ],
        abilities=[
            {
                "abilityID": "A-pre",
                "createdAt": 100.5,
                "blocks": [make_block(120), make_block(69, "comment")],
            },
            {
                "abilityID": "A-r1",
                "createdAt": 101,
                "blocks": [make_block(69, "comment"), make_block(55)],
            },
            {"abilityID": "A-r2", "name": "empty", "createdAt": 102, "blocks": []},
        ],
    )


@pytest.fixture()
def encode() -> Callable[[Dict[str, Any]], str]:
    """Encode a document mapping to JSON text."""

    def _encode(document: Dict[str, Any]) -> str:
        return orjson.dumps(document).decode("utf-8")

    return _encode


@pytest.fixture()
def sequential_ids() -> Callable[[], str]:
    """Identifier factory returning ID-1, ID-2, ..."""
    counter = iter(range(1, 1_000_000))

    def _next_id() -> str:
        return f"ID-{next(counter)}"

    return _next_id


@pytest.fixture(autouse=True)
def _restore_root_logging() -> Iterator[None]:
    """setup_logging replaces root handlers; put the originals back."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
