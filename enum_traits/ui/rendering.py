"""Rendering adapter: enum metadata -> selection widget contexts.

Options come from the caller (``enum_options=``) or, failing that, from
the field's column metadata. ``exclude`` and ``only`` filter by value;
values may be given canonically or in their form representation.
"""

import re
from collections.abc import Iterable, Sequence
from typing import Any

from enum_traits._text_utils import underscore
from enum_traits.models.common import form_value
from enum_traits.traits.registry import EnumColumn, TraitRegistry
from enum_traits.traits.registry import registry as default_registry
from enum_traits.ui.widgets import FieldContext, OptionContext, RadioGroupContext, SelectContext

_DOM_UNSAFE = re.compile(r"[^\w-]+")


class UnknownEnumOptions(ValueError):
    """No options were passed and the field carries no enum metadata."""


def _record_type(record: Any) -> type:
    return record if isinstance(record, type) else type(record)


def _current_value(record: Any, field: str) -> Any:
    if isinstance(record, type):
        return None
    return getattr(record, field, None)


def _dom_token(text: str) -> str:
    return _DOM_UNSAFE.sub("_", text).strip("_")


def _names(record: Any, field: str, object_name: str | None) -> tuple[str, str]:
    object_name = object_name or underscore(_record_type(record).__name__)
    return f"{object_name}[{field}]", _dom_token(f"{object_name}_{field}")


def _keep(value: Any, exclude: Iterable[Any] | None, only: Iterable[Any] | None) -> bool:
    # Select and radio both match on the value, never on the label.
    text = form_value(value)
    if exclude is not None and text in {form_value(v) for v in exclude}:
        return False
    if only is not None and text not in {form_value(v) for v in only}:
        return False
    return True


def _is_selected(current: Any, value: Any) -> bool:
    return current is not None and form_value(current) == form_value(value)


def column_for_attribute(
    record: Any,
    field: str,
    registry: TraitRegistry | None = None,
) -> EnumColumn:
    """Column metadata for *field* as seen from the record's type."""
    return (registry or default_registry).column_for(_record_type(record), field)


def enum_options_for(
    record: Any,
    field: str,
    *,
    enum_options: Sequence[tuple[str, Any]] | None = None,
    exclude: Iterable[Any] | None = None,
    only: Iterable[Any] | None = None,
    registry: TraitRegistry | None = None,
) -> list[tuple[str, Any]]:
    """Ordered ``(label, value)`` pairs for *field* after filtering.

    Raises:
        UnknownEnumOptions: If no options were given and the field is not
            an enum on the record's type.
    """
    if enum_options is None:
        column = column_for_attribute(record, field, registry)
        enum_options = column.enum_options
    if enum_options is None:
        msg = f"Can't find enum options for {_record_type(record).__name__}.{field}."
        raise UnknownEnumOptions(msg)
    exclude = list(exclude) if exclude is not None else None
    only = list(only) if only is not None else None
    return [(label, value) for label, value in enum_options if _keep(value, exclude, only)]


def enum_select(
    record: Any,
    field: str,
    *,
    object_name: str | None = None,
    enum_options: Sequence[tuple[str, Any]] | None = None,
    exclude: Iterable[Any] | None = None,
    only: Iterable[Any] | None = None,
    prompt: str | None = None,
    registry: TraitRegistry | None = None,
) -> SelectContext:
    """Drop-down context with one option per enum value."""
    pairs = enum_options_for(
        record, field, enum_options=enum_options, exclude=exclude, only=only, registry=registry,
    )
    name, dom_id = _names(record, field, object_name)
    current = _current_value(record, field)
    return SelectContext(
        name=name,
        dom_id=dom_id,
        prompt=prompt,
        options=[
            OptionContext(label=label, value=form_value(value), selected=_is_selected(current, value))
            for label, value in pairs
        ],
    )


def enum_radio(
    record: Any,
    field: str,
    *,
    object_name: str | None = None,
    enum_options: Sequence[tuple[str, Any]] | None = None,
    exclude: Iterable[Any] | None = None,
    only: Iterable[Any] | None = None,
    registry: TraitRegistry | None = None,
) -> RadioGroupContext:
    """Radio group context; each option gets ``{dom_id}_{value}`` as its id."""
    pairs = enum_options_for(
        record, field, enum_options=enum_options, exclude=exclude, only=only, registry=registry,
    )
    name, dom_id = _names(record, field, object_name)
    current = _current_value(record, field)
    return RadioGroupContext(
        name=name,
        dom_id=dom_id,
        options=[
            OptionContext(
                label=label,
                value=form_value(value),
                selected=_is_selected(current, value),
                dom_id=_dom_token(f"{dom_id}_{form_value(value)}"),
            )
            for label, value in pairs
        ],
    )


def field_widget(
    record: Any,
    field: str,
    *,
    object_name: str | None = None,
    registry: TraitRegistry | None = None,
    **options: Any,
) -> SelectContext | FieldContext:
    """Select context for enum fields, plain text context otherwise."""
    column = column_for_attribute(record, field, registry)
    if column.is_enum:
        return enum_select(record, field, object_name=object_name, registry=registry, **options)
    name, dom_id = _names(record, field, object_name)
    current = _current_value(record, field)
    return FieldContext(name=name, dom_id=dom_id, value="" if current is None else str(current))
