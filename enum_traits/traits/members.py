"""Member generator: metadata bundle -> accessor, predicate and query members.

Every declaration gets one :class:`EnumTrait` carrying the typed
operations. :func:`build_members` then derives a closed set of named
members from (field, alias) pairs, each a thin delegate to that trait:

==========================  ==========================================
``Model.{fields}()``        canonical values
``Model.{field}_values()``  canonical values
``Model.{field}_aliases()`` aliases
``Model.{field}_labels()``  labels
``Model.{field}_options()`` ``(label, value)`` pairs
``record.{field}_alias()``  alias of the current value
``record.{field}_label()``  label of the current value
``record.{field}_display()`` label through the record's own type
``record.is_{alias}_{field}()`` predicate per alias
``Model.{alias}_{fields}()`` query filter per alias (ORM hosts only)
==========================  ==========================================
"""

import logging
from collections.abc import Callable
from inspect import getattr_static
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from enum_traits._text_utils import pluralize, underscore
from enum_traits.models.bundle import MetadataBundle

if TYPE_CHECKING:
    from enum_traits.hosts.base import HostAdapter
    from enum_traits.traits.registry import TraitRegistry

logger = logging.getLogger(__name__)

T = TypeVar("T")

_MEMBER_MARKER = "__enum_trait_member__"


class EnumTrait(Generic[T]):
    """Typed view over one declared enum field of ``owner``."""

    def __init__(
        self,
        owner: type,
        field: str,
        bundle: MetadataBundle,
        *,
        registry: "TraitRegistry",
        host: "HostAdapter",
    ) -> None:
        self._owner = owner
        self._field = field
        self._bundle = bundle
        self._registry = registry
        self._host = host

    def __repr__(self) -> str:
        return f"EnumTrait({self._owner.__qualname__}.{self._field}, aliases={list(self._bundle.aliases)})"

    @property
    def owner(self) -> type:
        return self._owner

    @property
    def field(self) -> str:
        return self._field

    @property
    def bundle(self) -> MetadataBundle:
        return self._bundle

    # ----- Type level -----

    def values(self) -> list[T]:
        return list(self._bundle.values)

    def aliases(self) -> list[str]:
        return list(self._bundle.aliases)

    def labels(self) -> list[str]:
        return list(self._bundle.labels)

    def options(self) -> list[tuple[str, T]]:
        return list(self._bundle.options)

    def value_for(self, alias: str) -> T:
        """Canonical value for *alias*. Raises KeyError if unknown."""
        return self._bundle.value_for_alias(alias)

    # ----- Instance level -----

    def current(self, record: Any) -> T | None:
        return self._host.read(record, self._field)

    def alias_of(self, record: Any) -> str | None:
        value = self.current(record)
        if value is None:
            return None
        return self._bundle.alias_for(value)

    def label_of(self, record: Any) -> str | None:
        value = self.current(record)
        if value is None:
            return None
        return self._bundle.label_for(value)

    def display_of(self, record: Any) -> str | None:
        """Label resolved through the bundle visible from ``type(record)``."""
        value = self.current(record)
        if value is None:
            return None
        bundle = self._registry.lookup(type(record), self._field) or self._bundle
        return bundle.label_for(value)

    def matches(self, record: Any, index: int) -> bool | None:
        """Whether the current value sits at *index*; None when unset."""
        value = self.current(record)
        if value is None:
            return None
        return self._bundle.index_of(value) == index

    def is_alias(self, record: Any, alias: str) -> bool | None:
        return self.matches(record, self._bundle.aliases.index(alias))

    # ----- Query filters -----

    def query(self, alias: str, cls: type | None = None) -> Any:
        """Host query selecting rows whose field equals *alias*'s value."""
        return self._host.query_for(cls or self._owner, self._field, self.value_for(alias))


# ---------------------------------------------------------------------------
# Member building
# ---------------------------------------------------------------------------


def _mark(func: Callable[..., Any], name: str) -> Callable[..., Any]:
    func.__name__ = name
    func.__qualname__ = name
    setattr(func, _MEMBER_MARKER, True)
    return func


def _is_generated(member: Any) -> bool:
    func = getattr(member, "__func__", member)
    return bool(getattr(func, _MEMBER_MARKER, False))


def _type_accessor(name: str, read: Callable[[], Any]) -> classmethod:
    def accessor(cls: type) -> Any:  # noqa: ARG001
        return read()

    return classmethod(_mark(accessor, name))


def _instance_accessor(name: str, read: Callable[[Any], Any]) -> Callable[[Any], Any]:
    def accessor(self: Any) -> Any:
        return read(self)

    return _mark(accessor, name)


def _predicate(name: str, trait: EnumTrait[Any], index: int) -> Callable[[Any], bool | None]:
    def predicate(self: Any) -> bool | None:
        return trait.matches(self, index)

    return _mark(predicate, name)


def _query_filter(name: str, trait: EnumTrait[Any], alias: str) -> classmethod:
    def query_filter(cls: type) -> Any:
        return trait.query(alias, cls)

    return classmethod(_mark(query_filter, name))


def build_members(trait: EnumTrait[Any], *, with_queries: bool) -> dict[str, Any]:
    """Derive the named members for *trait* (not yet attached)."""
    field = trait.field
    plural = pluralize(field)

    members: dict[str, Any] = {
        plural: _type_accessor(plural, trait.values),
        f"{field}_values": _type_accessor(f"{field}_values", trait.values),
        f"{field}_aliases": _type_accessor(f"{field}_aliases", trait.aliases),
        f"{field}_labels": _type_accessor(f"{field}_labels", trait.labels),
        f"{field}_options": _type_accessor(f"{field}_options", trait.options),
        f"{field}_alias": _instance_accessor(f"{field}_alias", trait.alias_of),
        f"{field}_label": _instance_accessor(f"{field}_label", trait.label_of),
        f"{field}_display": _instance_accessor(f"{field}_display", trait.display_of),
    }

    for index, alias in enumerate(trait.bundle.aliases):
        token = underscore(alias)
        name = f"is_{token}_{field}"
        members[name] = _predicate(name, trait, index)
        if with_queries:
            name = f"{token}_{plural}"
            members[name] = _query_filter(name, trait, alias)

    return members


def attach_members(
    owner: type,
    members: dict[str, Any],
    *,
    previous: tuple[str, ...] = (),
) -> tuple[str, ...]:
    """Attach *members* to *owner*, replacing members from a prior declaration.

    Attributes the library did not generate are left alone.
    """
    for name in previous:
        if name in vars(owner) and _is_generated(vars(owner)[name]):
            delattr(owner, name)

    attached: list[str] = []
    for name, member in members.items():
        existing = getattr_static(owner, name, None)
        if existing is not None and not _is_generated(existing):
            logger.warning(
                "Not generating %s.%s: attribute already defined",
                owner.__qualname__,
                name,
            )
            continue
        setattr(owner, name, member)
        attached.append(name)
    return tuple(attached)
