"""enum-traits: declare a record field as an enumerated trait.

One declaration per field yields the canonical values, aliases, labels
and ``(label, value)`` options, plus generated accessors, per-alias
predicates, per-alias query filters (SQLAlchemy models), inclusion
validation and write-time coercion.

Example::

    from enum_traits import acts_as_enum

    @acts_as_enum("gender", "male", "female")
    class Person:
        ...

    Person.genders()            # ["male", "female"]
    Person.gender_labels()      # ["Male", "Female"]
"""

from enum_traits.hosts.base import HostAdapter, PlainHost
from enum_traits.hosts.orm import OrmHost
from enum_traits.models.bundle import MetadataBundle
from enum_traits.models.declaration import DeclarationError, TraitDeclaration
from enum_traits.traits.coercion import coerce
from enum_traits.traits.declare import (
    acts_as_enum,
    declare_enum_trait,
    enums_of,
    is_enum_field,
    resolve_host,
    trait_for,
)
from enum_traits.traits.labels import (
    CatalogLabelLookup,
    LabelLookup,
    LabelLookupResult,
    NullLabelLookup,
    TranslatorLabelLookup,
    get_label_lookup,
    set_label_lookup,
)
from enum_traits.traits.members import EnumTrait
from enum_traits.traits.mixin import EnumTraitsMixin
from enum_traits.traits.registry import EnumColumn, TraitRegistry, registry
from enum_traits.traits.resolver import resolve
from enum_traits.traits.validation import RecordInvalid, ValidationResult, validate_record
from enum_traits.ui.rendering import (
    UnknownEnumOptions,
    column_for_attribute,
    enum_options_for,
    enum_radio,
    enum_select,
    field_widget,
)

__all__ = [
    "CatalogLabelLookup",
    "DeclarationError",
    "EnumColumn",
    "EnumTrait",
    "EnumTraitsMixin",
    "HostAdapter",
    "LabelLookup",
    "LabelLookupResult",
    "MetadataBundle",
    "NullLabelLookup",
    "OrmHost",
    "PlainHost",
    "RecordInvalid",
    "TraitDeclaration",
    "TraitRegistry",
    "TranslatorLabelLookup",
    "UnknownEnumOptions",
    "ValidationResult",
    "acts_as_enum",
    "coerce",
    "column_for_attribute",
    "declare_enum_trait",
    "enum_options_for",
    "enum_radio",
    "enum_select",
    "enums_of",
    "field_widget",
    "get_label_lookup",
    "is_enum_field",
    "registry",
    "resolve",
    "resolve_host",
    "set_label_lookup",
    "trait_for",
    "validate_record",
]
