"""Write interceptor: coerce enum attributes on every write.

Wraps the owning type's ``__setattr__`` once per hierarchy. The wrapper
looks the attribute up through ``type(self)``, so subclasses inherit the
interceptor and still see their own (or inherited) traits. A subclass
declared against another registry binds that registry to the inherited
wrapper instead of installing a second one; the wrapper consults every
bound registry in binding order.

Ordering: the wrapper delegates to whatever ``__setattr__`` existed when
it was installed. Hooks installed later wrap it in turn and run first,
so coercion is always the last step before storage.
"""

import logging
from collections.abc import Callable
from typing import Any

from enum_traits.traits.coercion import coerce
from enum_traits.traits.registry import TraitRegistry

logger = logging.getLogger(__name__)

_INTERCEPTOR_MARKER = "__enum_write_interceptor__"


def _bound_registries(cls: type) -> list[TraitRegistry] | None:
    """Registries of the nearest installed interceptor, or None."""
    for klass in cls.__mro__:
        if _INTERCEPTOR_MARKER in vars(klass):
            return vars(klass)[_INTERCEPTOR_MARKER]
    return None


def has_write_interceptor(cls: type, registry: TraitRegistry | None = None) -> bool:
    """True when *cls* or one of its ancestors already coerces writes.

    With *registry*, the interceptor must also consult that registry.
    """
    registries = _bound_registries(cls)
    if registries is None:
        return False
    return registry is None or any(bound is registry for bound in registries)


def install_write_interceptor(cls: type, registry: TraitRegistry) -> bool:
    """Make writes on *cls* coerce fields declared in *registry* (idempotent).

    Returns:
        True if a wrapper was installed or *registry* was bound to an
        inherited one, False if *registry* was already consulted.
    """
    registries = _bound_registries(cls)
    if registries is not None:
        if any(bound is registry for bound in registries):
            return False
        registries.append(registry)
        logger.debug("Bound another registry to the enum write interceptor of %s", cls.__qualname__)
        return True

    registries = [registry]
    original: Callable[[Any, str, Any], None] = cls.__setattr__

    def __setattr__(self: Any, name: str, value: Any) -> None:
        for bound in registries:
            bundle = bound.lookup(type(self), name)
            if bundle is not None:
                value = coerce(bundle, value)
                break
        original(self, name, value)

    __setattr__.__qualname__ = f"{cls.__qualname__}.__setattr__"
    cls.__setattr__ = __setattr__  # type: ignore[method-assign]
    setattr(cls, _INTERCEPTOR_MARKER, registries)
    logger.debug("Installed enum write interceptor on %s", cls.__qualname__)
    return True
