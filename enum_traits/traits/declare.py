"""Declaration DSL: ``declare_enum_trait`` and the ``acts_as_enum`` decorator.

Example::

    @acts_as_enum("gender", "male", "female")
    @acts_as_enum(
        "rank",
        range(1, 6),
        aliases=["bad", "common", "good", "excellent", "awesome"],
        labels=["Bad", "Common", "Good", "Excellent", "Awesome"],
        allow_nil=False,
    )
    class Product(Base):
        ...

Flow: declaration -> resolver -> registry -> members + validation rule +
column annotation -> write interceptor (once per type).
"""

from collections.abc import Callable, Mapping, Sequence
from typing import Any, TypeVar

from enum_traits._text_utils import underscore
from enum_traits.hosts.base import HostAdapter, PlainHost
from enum_traits.hosts.orm import OrmHost, is_mapped
from enum_traits.models.bundle import MetadataBundle
from enum_traits.models.declaration import TraitDeclaration
from enum_traits.observability.logging import get_logger
from enum_traits.traits.labels import LabelLookup
from enum_traits.traits.members import EnumTrait, attach_members, build_members
from enum_traits.traits.registry import TraitRegistry
from enum_traits.traits.registry import registry as default_registry
from enum_traits.traits.resolver import resolve
from enum_traits.traits.validation import InclusionRule

logger = get_logger(__name__)

C = TypeVar("C", bound=type)


def resolve_host(owner: type) -> HostAdapter:
    """Pick the host adapter for *owner* (SQLAlchemy mapped or plain)."""
    if is_mapped(owner):
        return OrmHost()
    return PlainHost()


def declare_enum_trait(
    owner: type,
    field: str,
    *spec: Any,
    aliases: Sequence[str] | None = None,
    labels: Sequence[str] | None = None,
    allow_nil: bool = True,
    display: Mapping[Any, str] | None = None,
    registry: TraitRegistry | None = None,
    label_lookup: LabelLookup | None = None,
    host: HostAdapter | None = None,
) -> EnumTrait[Any]:
    """Declare *field* on *owner* as an enum trait.

    Args:
        owner: The record class that owns the field.
        field: Attribute name.
        *spec: Values, a single list/tuple/``Enum`` class, a ``range``, or
            a mapping of display label -> value.
        aliases: Optional alias per value (same length as the values).
        labels: Optional label per value (same length as the values).
        allow_nil: Whether validation accepts ``None``.
        display: Optional display text keyed by raw value.

    Returns:
        The :class:`EnumTrait` for the declaration.

    Raises:
        DeclarationError: If the declaration is malformed.
    """
    registry = registry or default_registry
    host = host or resolve_host(owner)

    declaration = TraitDeclaration.from_args(
        field,
        *spec,
        aliases=aliases,
        labels=labels,
        allow_nil=allow_nil,
        display=display,
    )
    bundle = resolve(declaration, owner_name=underscore(owner.__name__), lookup=label_lookup)

    host.prepare(owner, registry)
    trait: EnumTrait[Any] = EnumTrait(owner, field, bundle, registry=registry, host=host)

    previous = registry.own_entry(owner, field)
    members = attach_members(
        owner,
        build_members(trait, with_queries=host.supports_queries(owner)),
        previous=previous.members if previous is not None else (),
    )
    registry.declare(owner, field, bundle, trait=trait, members=members)

    host.add_validation(owner, InclusionRule(field=field, bundle=bundle))
    host.annotate_column(owner, field, bundle)
    host.install_write_hook(owner, registry)

    logger.debug(
        "enum_trait_declared",
        owner=owner.__qualname__,
        field=field,
        form=declaration.form.value,
        host=host.name,
        values=len(bundle.values),
        redeclared=previous is not None,
    )
    return trait


def acts_as_enum(field: str, *spec: Any, **options: Any) -> Callable[[C], C]:
    """Class decorator form of :func:`declare_enum_trait`."""

    def decorator(cls: C) -> C:
        declare_enum_trait(cls, field, *spec, **options)
        return cls

    return decorator


# ---------------------------------------------------------------------------
# Introspection
# ---------------------------------------------------------------------------


def trait_for(cls: type, field: str, registry: TraitRegistry | None = None) -> EnumTrait[Any] | None:
    """The trait visible from *cls* for *field* (own or inherited)."""
    entry = (registry or default_registry).entry(cls, field)
    return None if entry is None else entry.trait


def is_enum_field(cls: type, field: str, registry: TraitRegistry | None = None) -> bool:
    return (registry or default_registry).is_enum_field(cls, field)


def enums_of(cls: type, registry: TraitRegistry | None = None) -> dict[str, MetadataBundle]:
    """Every enum bundle visible from *cls*, keyed by field."""
    return (registry or default_registry).traits_for(cls)
