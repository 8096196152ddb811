"""Canonical metadata bundle for one enum trait declaration.

Invariant: ``values``, ``aliases``, ``labels`` and ``options`` have the same
length and correspond positionally. Bundles are immutable once resolved.
"""

from typing import Any

from pydantic import Field, model_validator

from enum_traits.models.common import EnumTraitsBase, ValueKind, same_value, value_kind


class MetadataBundle(EnumTraitsBase, frozen=True):
    """Resolved ``{values, aliases, labels, options}`` for one (owner, field)."""

    field: str = Field(..., min_length=1)
    owner_name: str = Field(..., description="Underscored name of the declaring type.")
    values: tuple[Any, ...]
    aliases: tuple[str, ...]
    labels: tuple[str, ...]
    options: tuple[tuple[str, Any], ...]
    allow_nil: bool = True

    @model_validator(mode="after")
    def _parallel_sequences(self) -> "MetadataBundle":
        count = len(self.values)
        if not (len(self.aliases) == len(self.labels) == len(self.options) == count):
            msg = "values, aliases, labels and options must have the same length."
            raise ValueError(msg)
        return self

    # ----- Exemplar -----

    @property
    def exemplar(self) -> Any:
        """First declared value; its type drives coercion."""
        return self.values[0]

    @property
    def kind(self) -> ValueKind:
        return value_kind(self.exemplar)

    # ----- Positional lookups -----

    def index_of(self, value: Any) -> int | None:
        """Position of *value* among the canonical values, or None."""
        for idx, canonical in enumerate(self.values):
            if same_value(value, canonical):
                return idx
        return None

    def contains(self, value: Any) -> bool:
        return self.index_of(value) is not None

    def alias_for(self, value: Any) -> str | None:
        idx = self.index_of(value)
        return None if idx is None else self.aliases[idx]

    def label_for(self, value: Any) -> str | None:
        idx = self.index_of(value)
        return None if idx is None else self.labels[idx]

    def value_for_alias(self, alias: str) -> Any:
        """Canonical value for *alias*. Raises KeyError if unknown."""
        try:
            return self.values[self.aliases.index(alias)]
        except ValueError:
            raise KeyError(alias) from None

    def value_for_label(self, label: str) -> Any:
        """Canonical value for a display *label*. Raises KeyError if unknown."""
        try:
            return self.values[self.labels.index(label)]
        except ValueError:
            raise KeyError(label) from None
