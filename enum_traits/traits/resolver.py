"""Metadata resolver: trait declaration -> canonical metadata bundle.

Pure function of the declaration plus the label lookup adapter:

1. values   - already normalised by :class:`TraitDeclaration`
2. aliases  - explicit override, else an underscored token per value
3. labels   - explicit override, display text, display-map keys, label
              lookup per alias, humanised alias on a miss (first that applies)
4. options  - ``(label, value)`` pairs zipped positionally
"""

from enum import Enum
from typing import Any

from enum_traits._text_utils import humanize, underscore
from enum_traits.models.bundle import MetadataBundle
from enum_traits.models.common import same_value
from enum_traits.models.declaration import TraitDeclaration
from enum_traits.traits.labels import LabelLookup, get_label_lookup


def default_alias(value: Any) -> str:
    """Normalise a raw value into its alias token."""
    if isinstance(value, Enum):
        return underscore(value.name)
    return underscore(str(value))


def lookup_label(
    alias: str,
    scope: tuple[str, ...],
    lookup: LabelLookup,
) -> str:
    """Label for *alias* from the lookup, or the humanised alias on a miss."""
    result = lookup.lookup(alias, scope)
    if result.found:
        return result.label  # type: ignore[return-value]
    return humanize(alias)


def _display_text(display: dict[Any, str], value: Any) -> str | None:
    for key, text in display.items():
        if same_value(key, value):
            return text
    return None


def resolve(
    declaration: TraitDeclaration,
    *,
    owner_name: str,
    lookup: LabelLookup | None = None,
) -> MetadataBundle:
    """Resolve *declaration* for the type named *owner_name*.

    Args:
        declaration: Normalised declaration (lengths already validated).
        owner_name: Underscored name of the declaring type, used as the
            first label-lookup scope segment.
        lookup: Label lookup adapter; defaults to the process-wide one.
    """
    values = declaration.values

    if declaration.aliases is not None:
        aliases = tuple(declaration.aliases)
    else:
        aliases = tuple(default_alias(v) for v in values)

    if declaration.labels is not None:
        labels = tuple(declaration.labels)
    else:
        lookup = lookup or get_label_lookup()
        scope = (owner_name, declaration.field)
        resolved: list[str] = []
        for idx, value in enumerate(values):
            text = None
            if declaration.display is not None:
                text = _display_text(declaration.display, value)
            if text is None and declaration.map_labels is not None:
                text = declaration.map_labels[idx]
            if text is None:
                text = lookup_label(aliases[idx], scope, lookup)
            resolved.append(text)
        labels = tuple(resolved)

    options = tuple(zip(labels, values, strict=True))

    return MetadataBundle(
        field=declaration.field,
        owner_name=owner_name,
        values=values,
        aliases=aliases,
        labels=labels,
        options=options,
        allow_nil=declaration.allow_nil,
    )
