"""Alias groups and the adjacency index derived from registry keys."""
from typing import Dict, FrozenSet, Iterable, List, Set, Tuple

from ..domain.format_ids import FormatId


def _merge_groups(groups: Iterable[Iterable[FormatId]]) -> List[FrozenSet[FormatId]]:
    """Merge overlapping groups so membership is transitive."""
    merged: List[Set[FormatId]] = []
    for group in groups:
        current = set(group)
        overlapping = [existing for existing in merged if existing & current]
        for existing in overlapping:
            current |= existing
            merged.remove(existing)
        merged.append(current)
    return [frozenset(group) for group in merged]


class AliasIndex:
    """
    Read-only view of which targets each format reaches.

    Built once from the registry keys. Targets registered under one spelling
    of an alias group are visible from every spelling, and every alias of a
    target is listed alongside it.
    """

    def __init__(
        self,
        keys: Iterable[Tuple[FormatId, FormatId]],
        alias_groups: Iterable[Iterable[FormatId]] = (),
    ):
        self._groups = _merge_groups(alias_groups)
        self._variants: Dict[FormatId, FrozenSet[FormatId]] = {}
        for group in self._groups:
            for member in group:
                self._variants[member] = group

        adjacency: Dict[FormatId, Set[FormatId]] = {}
        edge_count = 0
        for from_id, to_id in keys:
            adjacency.setdefault(from_id, set()).add(to_id)
            edge_count += 1
        self._edge_count = edge_count

        expanded: Dict[FormatId, FrozenSet[FormatId]] = {}
        for from_id in set(adjacency) | set(self._variants):
            targets: Set[FormatId] = set()
            for from_variant in self.variants(from_id):
                for to_id in adjacency.get(from_variant, ()):
                    targets.update(self.variants(to_id))
            targets.discard(from_id)
            if targets:
                expanded[from_id] = frozenset(targets)
        self._adjacency = expanded

    @property
    def groups(self) -> List[FrozenSet[FormatId]]:
        return list(self._groups)

    @property
    def edge_count(self) -> int:
        return self._edge_count

    def variants(self, format_id: FormatId) -> Tuple[FormatId, ...]:
        """The id itself first, then its aliases in a stable order."""
        others = sorted(
            (member for member in self._variants.get(format_id, ()) if member != format_id),
            key=lambda member: member.value,
        )
        return (format_id, *others)

    def are_aliases(self, first: FormatId, second: FormatId) -> bool:
        return first == second or second in self._variants.get(first, ())

    def targets(self, format_id: FormatId) -> FrozenSet[FormatId]:
        return self._adjacency.get(format_id, frozenset())

    def sources(self) -> List[FormatId]:
        return sorted(self._adjacency, key=lambda member: member.value)
