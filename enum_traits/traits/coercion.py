"""Coercion engine: raw input -> canonical enum representation.

Policy, checked in order:

1. ``None`` passes through (``allow_nil`` is enforced by validation).
2. A value already equal to a declared value (same representation
   family) is returned unchanged.
3. Otherwise the exemplar's kind picks the target: token (``Enum``
   member), text, or integer. Tokens reach integers through their string
   form, never by reinterpreting the member.
4. A result outside the declared values is returned as is; membership
   is the validation layer's job.

Never raises.
"""

from enum import Enum
from typing import Any

from enum_traits.models.bundle import MetadataBundle
from enum_traits.models.common import ValueKind, token_text, value_kind


def _as_text(raw: Any) -> str:
    if isinstance(raw, Enum):
        return token_text(raw)
    return str(raw)


def _to_integer(raw: Any) -> Any:
    # Tokens first: an IntEnum member is also an int.
    if isinstance(raw, (str, Enum)):
        text = _as_text(raw).strip()
        try:
            return int(text)
        except ValueError:
            return raw
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, int):
        return int(raw)
    if isinstance(raw, float):
        return int(raw) if raw.is_integer() else raw
    return raw


def _to_token(raw: Any, enum_cls: type[Enum]) -> Any:
    if isinstance(raw, enum_cls):
        return raw
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, int) and not isinstance(raw, Enum):
        for member in enum_cls:
            if member.value == raw and not isinstance(member.value, bool):
                return member
        return raw

    text = _as_text(raw)
    if text in enum_cls.__members__:
        return enum_cls.__members__[text]
    for member in enum_cls:
        if token_text(member) == text:
            return member
    folded = text.strip().casefold()
    for name, member in enum_cls.__members__.items():
        if name.casefold() == folded or token_text(member).casefold() == folded:
            return member
    return text


def coerce(bundle: MetadataBundle, raw: Any) -> Any:
    """Convert *raw* to the canonical representation for *bundle*."""
    if raw is None:
        return None

    if bundle.contains(raw):
        return raw

    exemplar = bundle.exemplar
    kind = value_kind(exemplar)
    if kind == ValueKind.TOKEN:
        return _to_token(raw, type(exemplar))
    if kind == ValueKind.TEXT:
        return _as_text(raw)
    if kind == ValueKind.INTEGER:
        return _to_integer(raw)
    return raw
