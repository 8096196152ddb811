"""Trait registry: (type, field) -> metadata bundle.

The owning type holds its own entries. A subtype without a declaration
for a field reads the nearest ancestor's entry (MRO order, root types
skipped); it never copies it, so a redeclaration on the ancestor stays
visible.

Column snapshots are the per-type merged view handed to the rendering
layer. A snapshot is rebuilt only when the registry changed since it was
built.
"""

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from enum_traits.models.bundle import MetadataBundle

if TYPE_CHECKING:
    from enum_traits.traits.members import EnumTrait

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TraitEntry:
    """Registry record for one declared field on one type."""

    owner: type
    field: str
    bundle: MetadataBundle
    trait: "EnumTrait[Any] | None" = None
    members: tuple[str, ...] = ()

    @property
    def exemplar(self) -> Any:
        return self.bundle.exemplar


@dataclass(frozen=True)
class EnumColumn:
    """Field metadata as seen by the rendering layer.

    ``bundle`` is None for a field that is not an enum on the inspected type.
    """

    name: str
    bundle: MetadataBundle | None = None
    owner: type | None = None

    @property
    def is_enum(self) -> bool:
        return self.bundle is not None

    @property
    def enum_options(self) -> list[tuple[str, Any]] | None:
        if self.bundle is None:
            return None
        return list(self.bundle.options)

    def enum_value(self, display: str) -> Any:
        """Canonical value shown as *display*, or None."""
        if self.bundle is None:
            return None
        try:
            return self.bundle.value_for_label(display)
        except KeyError:
            return None

    def enum_display(self, value: Any) -> str | None:
        """Display label for canonical *value*, or None."""
        if self.bundle is None or value is None:
            return None
        return self.bundle.label_for(value)


@dataclass(frozen=True)
class _ColumnSnapshot:
    generation: int
    columns: dict[str, EnumColumn]


class TraitRegistry:
    """Process-wide registry of enum trait declarations."""

    def __init__(self, roots: tuple[type, ...] = (object,)) -> None:
        self._entries: dict[type, dict[str, TraitEntry]] = {}
        self._roots: set[type] = set(roots)
        self._generation = 0
        self._snapshots: dict[type, _ColumnSnapshot] = {}

    # ----- Roots -----

    def add_root(self, root: type) -> None:
        """Exclude *root* from ancestor walks."""
        self._roots.add(root)

    def is_root(self, cls: type) -> bool:
        return cls in self._roots

    def _lineage(self, cls: type) -> Iterator[type]:
        yield cls
        for ancestor in cls.__mro__[1:]:
            if ancestor not in self._roots:
                yield ancestor

    # ----- Declaration -----

    def declare(
        self,
        owner: type,
        field: str,
        bundle: MetadataBundle,
        *,
        trait: "EnumTrait[Any] | None" = None,
        members: tuple[str, ...] = (),
    ) -> TraitEntry:
        """Store (or replace) *owner*'s entry for *field*."""
        entry = TraitEntry(
            owner=owner,
            field=field,
            bundle=bundle,
            trait=trait,
            members=members,
        )
        self._entries.setdefault(owner, {})[field] = entry
        self._generation += 1
        return entry

    # ----- Lookup -----

    def own_entry(self, owner: type, field: str) -> TraitEntry | None:
        """Entry declared on *owner* itself (no ancestor walk)."""
        return self._entries.get(owner, {}).get(field)

    def entry(self, cls: type, field: str) -> TraitEntry | None:
        """Nearest entry for *field*, walking ancestors."""
        for klass in self._lineage(cls):
            entry = self._entries.get(klass, {}).get(field)
            if entry is not None:
                return entry
        return None

    def lookup(self, cls: type, field: str) -> MetadataBundle | None:
        entry = self.entry(cls, field)
        return None if entry is None else entry.bundle

    def is_enum_field(self, cls: type, field: str) -> bool:
        return self.entry(cls, field) is not None

    def entries_for(self, cls: type) -> dict[str, TraitEntry]:
        """All entries visible from *cls*; nearest declaration wins."""
        merged: dict[str, TraitEntry] = {}
        for klass in self._lineage(cls):
            for field, entry in self._entries.get(klass, {}).items():
                merged.setdefault(field, entry)
        return merged

    def traits_for(self, cls: type) -> dict[str, MetadataBundle]:
        return {field: entry.bundle for field, entry in self.entries_for(cls).items()}

    # ----- Column snapshots -----

    def columns_for(self, cls: type) -> dict[str, EnumColumn]:
        """Merged enum column metadata for *cls* (cached per registry generation)."""
        snapshot = self._snapshots.get(cls)
        if snapshot is None or snapshot.generation != self._generation:
            columns = {
                field: EnumColumn(name=field, bundle=entry.bundle, owner=entry.owner)
                for field, entry in self.entries_for(cls).items()
            }
            snapshot = _ColumnSnapshot(generation=self._generation, columns=columns)
            self._snapshots[cls] = snapshot
            logger.debug(
                "Rebuilt enum column snapshot for %s (%d fields)",
                cls.__qualname__,
                len(columns),
            )
        return snapshot.columns

    def column_for(self, cls: type, field: str) -> EnumColumn:
        return self.columns_for(cls).get(field) or EnumColumn(name=field)


registry = TraitRegistry()
