"""
Identifier lookup for flat wire collections.

Each collection gets a dict index built once per load, replacing a linear
scan per reference. When an identifier repeats, the first record in file
order wins.
"""

import logging
from typing import Callable, Dict, Generic, Iterable, Optional, TypeVar

from .models import WireAbility, WireObject, WireProject, WireRule

T = TypeVar("T")


class IdentifierIndex(Generic[T]):
    """Read-only map from identifier to record for one collection."""

    def __init__(self, records: Iterable[T], key: Callable[[T], str], kind: str = "record"):
        """Build the index.

        Args:
            records: Records in collection order
            key: Returns the identifier of a record
            kind: Collection name used in log messages
        """
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.kind = kind
        self._by_id: Dict[str, T] = {}

        for record in records:
            identifier = key(record)
            if identifier in self._by_id:
                self.logger.debug(f"Duplicate {kind} id {identifier!r}, keeping first")
                continue
            self._by_id[identifier] = record

    def get(self, identifier: Optional[str]) -> Optional[T]:
        """Return the record with ``identifier`` or None if not found."""
        if identifier is None:
            return None
        return self._by_id.get(identifier)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._by_id

    def __len__(self) -> int:
        return len(self._by_id)


class ProjectIndex:
    """Indices over the collections the resolver follows references into."""

    def __init__(self, project: WireProject):
        self.objects: IdentifierIndex[WireObject] = IdentifierIndex(
            project.objects, lambda o: o.object_id, "object"
        )
        self.rules: IdentifierIndex[WireRule] = IdentifierIndex(
            project.rules, lambda r: r.id, "rule"
        )
        self.abilities: IdentifierIndex[WireAbility] = IdentifierIndex(
            project.abilities, lambda a: a.ability_id, "ability"
        )

    def object_with_id(self, object_id: str) -> Optional[WireObject]:
        return self.objects.get(object_id)

    def rule_with_id(self, rule_id: str) -> Optional[WireRule]:
        return self.rules.get(rule_id)

    def ability_with_id(self, ability_id: Optional[str]) -> Optional[WireAbility]:
        return self.abilities.get(ability_id)
