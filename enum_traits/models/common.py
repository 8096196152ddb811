"""Shared enums, helpers, and the base model used across enum-traits models."""

from enum import Enum, StrEnum
from typing import Any

from pydantic import BaseModel


# --- Shared enums ---


class DeclarationForm(StrEnum):
    """Syntax a trait declaration was written in."""

    LIST = "LIST"
    RANGE = "RANGE"
    DISPLAY_MAP = "DISPLAY_MAP"


class ValueKind(StrEnum):
    """Representation family of a canonical value (drives coercion)."""

    TOKEN = "TOKEN"
    TEXT = "TEXT"
    INTEGER = "INTEGER"
    OTHER = "OTHER"


def value_kind(value: Any) -> ValueKind:
    """Classify a value. ``Enum`` members are tokens; ``bool`` is OTHER."""
    if isinstance(value, Enum):
        return ValueKind.TOKEN
    if isinstance(value, bool):
        return ValueKind.OTHER
    if isinstance(value, int):
        return ValueKind.INTEGER
    if isinstance(value, str):
        return ValueKind.TEXT
    return ValueKind.OTHER


def same_value(candidate: Any, canonical: Any) -> bool:
    """Equality restricted to the canonical value's representation family.

    ``StrEnum`` members compare equal to plain strings and ``True == 1``,
    so plain ``==`` would let a write keep the wrong representation.
    """
    if isinstance(canonical, Enum):
        return candidate is canonical
    if value_kind(candidate) != value_kind(canonical):
        return False
    return candidate == canonical


def token_text(member: Enum) -> str:
    """String form of a token: the text of its value."""
    return str(member.value)


def form_value(value: Any) -> str:
    """Text used when a canonical value travels through a form field."""
    if isinstance(value, Enum):
        return token_text(value)
    return str(value)


# --- Base model ---


class EnumTraitsBase(BaseModel):
    """Base model with common configuration for all enum-traits Pydantic models."""

    model_config = {
        "populate_by_name": True,
        "arbitrary_types_allowed": True,
        "protected_namespaces": (),
    }
