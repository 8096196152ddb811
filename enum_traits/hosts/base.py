"""Host adapter interface: what the enum-trait core needs from a record framework.

(a) read a named attribute, (b) a hook on every attribute write,
(c) register a validation rule, (d) build a named query filter,
(e) annotate the field's column metadata.

:class:`PlainHost` serves ordinary Python classes, which have no
persistent query capability and no column objects of their own.
"""

from abc import ABC, abstractmethod
from typing import Any

from enum_traits.models.bundle import MetadataBundle
from enum_traits.traits.interceptor import install_write_interceptor
from enum_traits.traits.registry import TraitRegistry
from enum_traits.traits.validation import InclusionRule, register_rule


class HostAdapter(ABC):
    """Bridge between the enum-trait core and one record framework."""

    name: str = "abstract"

    def prepare(self, owner: type, registry: TraitRegistry) -> None:
        """Per-declaration setup (e.g. registering framework root types)."""

    def read(self, record: Any, field: str) -> Any:
        return getattr(record, field, None)

    def install_write_hook(self, owner: type, registry: TraitRegistry) -> bool:
        return install_write_interceptor(owner, registry)

    def add_validation(self, owner: type, rule: InclusionRule) -> None:
        register_rule(owner, rule)

    def annotate_column(self, owner: type, field: str, bundle: MetadataBundle) -> None:
        """Record *bundle* on the framework's column object, if it has one."""

    @abstractmethod
    def supports_queries(self, owner: type) -> bool:
        ...

    @abstractmethod
    def query_for(self, cls: type, field: str, value: Any) -> Any:
        ...


class PlainHost(HostAdapter):
    """Plain Python classes: attribute storage only."""

    name = "plain"

    def supports_queries(self, owner: type) -> bool:  # noqa: ARG002
        return False

    def query_for(self, cls: type, field: str, value: Any) -> Any:
        msg = f"{cls.__name__} has no persistent query capability."
        raise TypeError(msg)
