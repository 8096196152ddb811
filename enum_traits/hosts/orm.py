"""SQLAlchemy host adapter for declarative mapped classes.

- Query filters are ``select(cls).where(cls.<field> == value)`` statements
  for the caller's session to execute.
- The mapped column's ``info`` dict records the declaring type's bundle
  under ``"enum_traits"``; the rendering layer reads the registry's merged
  snapshot, so subclasses see inherited metadata without touching the
  shared column.
- Optional flush guard: mapper ``before_insert`` / ``before_update``
  listeners raise :class:`RecordInvalid` for invalid enum values.
"""

import logging
from typing import Any

from sqlalchemy import event, select
from sqlalchemy import inspect as sa_inspect
from sqlalchemy.orm import DeclarativeBase, Mapper

from enum_traits.config.settings import get_settings
from enum_traits.hosts.base import HostAdapter
from enum_traits.models.bundle import MetadataBundle
from enum_traits.traits.registry import TraitRegistry
from enum_traits.traits.validation import RecordInvalid, validate_record

logger = logging.getLogger(__name__)

_FLUSH_MARKER = "__enum_flush_validation__"

COLUMN_INFO_KEY = "enum_traits"


def is_mapped(cls: type) -> bool:
    """True when *cls* is a SQLAlchemy mapped class."""
    return isinstance(sa_inspect(cls, raiseerr=False), Mapper)


def _validate_before_flush(mapper: Mapper, connection: Any, target: Any) -> None:  # noqa: ARG001
    result = validate_record(target)
    if not result.is_valid:
        raise RecordInvalid(target, result)


class OrmHost(HostAdapter):
    """Host adapter for SQLAlchemy 2.x declarative models."""

    name = "sqlalchemy"

    def __init__(self, *, validate_on_flush: bool | None = None) -> None:
        if validate_on_flush is None:
            validate_on_flush = get_settings().VALIDATE_ON_FLUSH
        self._validate_on_flush = validate_on_flush

    def prepare(self, owner: type, registry: TraitRegistry) -> None:
        registry.add_root(DeclarativeBase)
        for klass in owner.__mro__:
            if "registry" in vars(klass) and not is_mapped(klass):
                registry.add_root(klass)
        if self._validate_on_flush:
            self._install_flush_validation(owner)

    def supports_queries(self, owner: type) -> bool:
        return is_mapped(owner)

    def query_for(self, cls: type, field: str, value: Any) -> Any:
        return select(cls).where(getattr(cls, field) == value)

    def annotate_column(self, owner: type, field: str, bundle: MetadataBundle) -> None:
        column = self.column_for(owner, field)
        if column is None:
            logger.warning("%s.%s is not a mapped column", owner.__qualname__, field)
            return
        column.info.setdefault(COLUMN_INFO_KEY, {})[owner] = bundle

    def column_for(self, owner: type, field: str) -> Any:
        """The mapped ``Column`` for *field*, or None."""
        mapper = sa_inspect(owner, raiseerr=False)
        if not isinstance(mapper, Mapper):
            return None
        return mapper.columns.get(field)

    def _install_flush_validation(self, owner: type) -> None:
        if any(_FLUSH_MARKER in vars(klass) for klass in owner.__mro__):
            return
        event.listen(owner, "before_insert", _validate_before_flush, propagate=True)
        event.listen(owner, "before_update", _validate_before_flush, propagate=True)
        setattr(owner, _FLUSH_MARKER, True)
