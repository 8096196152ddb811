"""Inclusion validation for enum fields.

Coercion never rejects a value; membership is checked here instead.
Each declaration registers one :class:`InclusionRule` on its owning type.
:func:`validate_record` applies the nearest rule per field across the
MRO and reports failures as data (:class:`ValidationResult`).
"""

from dataclasses import dataclass, field
from typing import Any

from enum_traits.models.bundle import MetadataBundle

_RULES_ATTR = "__enum_validations__"

NOT_INCLUDED = "is not included in the list"
BLANK = "can't be blank"


@dataclass(frozen=True)
class FieldError:
    """One failed rule for one field."""

    field: str
    message: str
    value: Any = None


@dataclass
class ValidationResult:
    """Outcome of validating a record's enum fields."""

    errors: list[FieldError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def messages(self) -> dict[str, list[str]]:
        """Error messages grouped by field."""
        grouped: dict[str, list[str]] = {}
        for error in self.errors:
            grouped.setdefault(error.field, []).append(error.message)
        return grouped

    def __bool__(self) -> bool:
        return self.is_valid


@dataclass(frozen=True)
class InclusionRule:
    """Value must be one of the bundle's values (None allowed per ``allow_nil``)."""

    field: str
    bundle: MetadataBundle

    @property
    def allow_nil(self) -> bool:
        return self.bundle.allow_nil

    def check(self, value: Any) -> FieldError | None:
        if value is None:
            if self.allow_nil:
                return None
            return FieldError(field=self.field, message=BLANK, value=None)
        if not self.bundle.contains(value):
            return FieldError(field=self.field, message=NOT_INCLUDED, value=value)
        return None


def register_rule(owner: type, rule: InclusionRule) -> None:
    """Store *rule* on *owner*, replacing any rule for the same field."""
    rules = vars(owner).get(_RULES_ATTR)
    if rules is None:
        rules = {}
        setattr(owner, _RULES_ATTR, rules)
    rules[rule.field] = rule


def rules_for(cls: type) -> dict[str, InclusionRule]:
    """Rules visible from *cls*; the nearest declaration wins per field."""
    merged: dict[str, InclusionRule] = {}
    for klass in cls.__mro__:
        for name, rule in vars(klass).get(_RULES_ATTR, {}).items():
            merged.setdefault(name, rule)
    return merged


def validate_record(record: Any) -> ValidationResult:
    """Run every enum inclusion rule visible from ``type(record)``."""
    result = ValidationResult()
    for name, rule in rules_for(type(record)).items():
        error = rule.check(getattr(record, name, None))
        if error is not None:
            result.errors.append(error)
    return result


class RecordInvalid(ValueError):
    """Raised by hosts whose error channel is an exception (ORM flush)."""

    def __init__(self, record: Any, result: ValidationResult) -> None:
        self.record = record
        self.result = result
        details = "; ".join(f"{e.field} {e.message}" for e in result.errors)
        super().__init__(f"{type(record).__name__} is invalid: {details}")
