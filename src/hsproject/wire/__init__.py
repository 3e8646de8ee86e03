"""
Flat, ID-referenced representation of a Hopscotch project document.

Provides typed records for every wire collection, structural validation,
the orjson codec and identifier indices used during resolution.
"""

from .codec import dumps_project, loads_project
from .index import IdentifierIndex, ProjectIndex
from .models import (
    JsonNumber,
    WireAbility,
    WireBlock,
    WireCustomRule,
    WireCustomRuleInstance,
    WireEventParameter,
    WireMapping,
    WireObject,
    WireParameter,
    WireProject,
    WireRule,
    WireScene,
    WireSceneReference,
    WireStageSize,
    WireVariable,
)
from .schema import WireSchema

__all__ = [
    # Codec
    "loads_project",
    "dumps_project",
    # Validation
    "WireSchema",
    # Lookup
    "IdentifierIndex",
    "ProjectIndex",
    # Type aliases
    "JsonNumber",
    "WireMapping",
    # Records
    "WireProject",
    "WireStageSize",
    "WireScene",
    "WireObject",
    "WireRule",
    "WireAbility",
    "WireBlock",
    "WireParameter",
    "WireVariable",
    "WireCustomRule",
    "WireCustomRuleInstance",
    "WireEventParameter",
    "WireSceneReference",
]
