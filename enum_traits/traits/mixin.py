"""Optional record mixin exposing enum traits and validation on the class."""

from typing import Any

from enum_traits.models.bundle import MetadataBundle
from enum_traits.traits.declare import declare_enum_trait
from enum_traits.traits.members import EnumTrait
from enum_traits.traits.registry import registry
from enum_traits.traits.validation import ValidationResult, validate_record


class EnumTraitsMixin:
    """Adds ``acts_as_enum``/``enums``/``validate`` to a record class.

    Works for plain classes and SQLAlchemy models alike::

        class Product(EnumTraitsMixin, Base):
            ...

        Product.acts_as_enum("rank", range(1, 6))
    """

    @classmethod
    def acts_as_enum(cls, field: str, *spec: Any, **options: Any) -> EnumTrait[Any]:
        return declare_enum_trait(cls, field, *spec, **options)

    @classmethod
    def enums(cls) -> dict[str, MetadataBundle]:
        """Enum bundles visible from this class, keyed by field."""
        return registry.traits_for(cls)

    @classmethod
    def is_enum(cls, field: str) -> bool:
        return registry.is_enum_field(cls, field)

    @classmethod
    def enum_trait(cls, field: str) -> EnumTrait[Any] | None:
        entry = registry.entry(cls, field)
        return None if entry is None else entry.trait

    def validate(self) -> ValidationResult:
        """Validate enum fields and remember the messages in :attr:`errors`."""
        result = validate_record(self)
        self._enum_errors = result.messages()
        return result

    def is_valid(self) -> bool:
        return self.validate().is_valid

    @property
    def errors(self) -> dict[str, list[str]]:
        """Messages from the last :meth:`validate` call, grouped by field.

        Empty (and owned by the caller) until the record is validated.
        """
        return vars(self).get("_enum_errors", {})


registry.add_root(EnumTraitsMixin)
