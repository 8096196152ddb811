"""Trait declaration input model.

Normalises the three declaration syntaxes into one shape before
resolution:

- expanded list: ``("male", "female")``, a single list/tuple, or an
  ``Enum`` subclass (its members in definition order)
- range: a single ``range`` (half-open, ``range(1, 6)`` is 1..5)
- display map: a single mapping of display label -> raw value

Declaration problems raise :class:`DeclarationError` at class-definition
time.
"""

from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any

from pydantic import Field, StrictBool, ValidationError, model_validator

from enum_traits.models.common import DeclarationForm, EnumTraitsBase, same_value


class DeclarationError(ValueError):
    """Malformed enum trait declaration (fatal, raised at declaration time)."""


def _check_string_sequence(name: str, items: object) -> list[str] | None:
    if items is None:
        return None
    if isinstance(items, (str, bytes)) or not isinstance(items, Sequence):
        msg = f"{name} must be specified as a list of strings."
        raise DeclarationError(msg)
    if not all(isinstance(item, str) for item in items):
        msg = f"{name} must be specified as a list of strings."
        raise DeclarationError(msg)
    return list(items)


def _invert_display_map(mapping: Mapping[str, Any]) -> tuple[tuple[Any, ...], tuple[str, ...]]:
    """Split a label -> value map into (values, labels).

    Two labels mapping to the same raw value collapse onto the first one.
    """
    values: list[Any] = []
    labels: list[str] = []
    for label, value in mapping.items():
        if any(same_value(value, seen) for seen in values):
            continue
        values.append(value)
        labels.append(str(label))
    return tuple(values), tuple(labels)


class TraitDeclaration(EnumTraitsBase, frozen=True):
    """A normalised enum trait declaration, ready for resolution."""

    field: str = Field(..., min_length=1)
    form: DeclarationForm
    values: tuple[Any, ...]
    map_labels: tuple[str, ...] | None = Field(
        default=None,
        description="Labels carried by a display-map declaration (map keys).",
    )
    aliases: list[str] | None = None
    labels: list[str] | None = None
    allow_nil: StrictBool = True
    display: dict[Any, str] | None = Field(
        default=None,
        description="Column-oriented display text keyed by raw value.",
    )

    @model_validator(mode="after")
    def _check_values(self) -> "TraitDeclaration":
        if not self.values:
            msg = f"Enum field '{self.field}' needs at least one value."
            raise ValueError(msg)
        if self.form != DeclarationForm.DISPLAY_MAP:
            for idx, value in enumerate(self.values):
                if any(same_value(value, other) for other in self.values[:idx]):
                    msg = f"Enum field '{self.field}' declares {value!r} more than once."
                    raise ValueError(msg)
        return self

    @model_validator(mode="after")
    def _check_lengths(self) -> "TraitDeclaration":
        count = len(self.values)
        if self.aliases is not None and len(self.aliases) != count:
            msg = (
                f"The aliases length ({len(self.aliases)}) doesn't equal "
                f"to enum values ({count})."
            )
            raise ValueError(msg)
        if self.labels is not None and len(self.labels) != count:
            msg = (
                f"The labels length ({len(self.labels)}) doesn't equal "
                f"to enum values ({count})."
            )
            raise ValueError(msg)
        return self

    @classmethod
    def from_args(
        cls,
        field: str,
        *spec: Any,
        aliases: Sequence[str] | None = None,
        labels: Sequence[str] | None = None,
        allow_nil: bool = True,
        display: Mapping[Any, str] | None = None,
    ) -> "TraitDeclaration":
        """Build a declaration from DSL arguments.

        Raises:
            DeclarationError: If the values or options are malformed.
        """
        map_labels: tuple[str, ...] | None = None
        if len(spec) == 1 and isinstance(spec[0], range):
            form = DeclarationForm.RANGE
            values: tuple[Any, ...] = tuple(spec[0])
        elif len(spec) == 1 and isinstance(spec[0], Mapping):
            form = DeclarationForm.DISPLAY_MAP
            values, map_labels = _invert_display_map(spec[0])
        elif len(spec) == 1 and isinstance(spec[0], type) and issubclass(spec[0], Enum):
            form = DeclarationForm.LIST
            values = tuple(spec[0])
        elif len(spec) == 1 and isinstance(spec[0], (list, tuple)):
            form = DeclarationForm.LIST
            values = tuple(spec[0])
        else:
            form = DeclarationForm.LIST
            values = tuple(spec)

        if display is not None and not isinstance(display, Mapping):
            msg = "display must be a mapping of enum value to display text."
            raise DeclarationError(msg)

        try:
            return cls(
                field=field,
                form=form,
                values=values,
                map_labels=map_labels,
                aliases=_check_string_sequence("aliases", aliases),
                labels=_check_string_sequence("labels", labels),
                allow_nil=allow_nil,
                display=dict(display) if display is not None else None,
            )
        except ValidationError as exc:
            raise DeclarationError(_first_message(exc)) from exc


def _first_message(exc: ValidationError) -> str:
    error = exc.errors()[0]
    ctx_error = error.get("ctx", {}).get("error")
    if ctx_error is not None:
        return str(ctx_error)
    location = ".".join(str(part) for part in error.get("loc", ()))
    return f"{location}: {error['msg']}" if location else error["msg"]
