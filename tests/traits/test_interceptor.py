"""Tests for the write interceptor installed on record types."""

from enum_traits.models.declaration import TraitDeclaration
from enum_traits.traits.declare import declare_enum_trait
from enum_traits.traits.interceptor import has_write_interceptor, install_write_interceptor
from enum_traits.traits.labels import NullLabelLookup
from enum_traits.traits.registry import TraitRegistry
from enum_traits.traits.resolver import resolve


def _registry_with(owner, field, *spec) -> TraitRegistry:
    reg = TraitRegistry()
    bundle = resolve(
        TraitDeclaration.from_args(field, *spec),
        owner_name="record",
        lookup=NullLabelLookup(),
    )
    reg.declare(owner, field, bundle)
    return reg


class TestInstall:
    def test_install_once(self) -> None:
        class Record:
            pass

        reg = _registry_with(Record, "rank", range(1, 4))
        assert not has_write_interceptor(Record)
        assert install_write_interceptor(Record, reg) is True
        assert has_write_interceptor(Record)
        assert install_write_interceptor(Record, reg) is False

    def test_subclass_inherits_interceptor(self) -> None:
        class Record:
            pass

        class Child(Record):
            pass

        reg = _registry_with(Record, "rank", range(1, 4))
        install_write_interceptor(Record, reg)
        assert has_write_interceptor(Child)
        assert install_write_interceptor(Child, reg) is False

        child = Child()
        child.rank = "2"
        assert child.rank == 2


class TestCoercionOnWrite:
    def test_enum_field_coerced(self) -> None:
        class Record:
            pass

        reg = _registry_with(Record, "rank", range(1, 4))
        install_write_interceptor(Record, reg)
        record = Record()
        record.rank = "3"
        assert record.rank == 3

    def test_other_fields_untouched(self) -> None:
        class Record:
            pass

        reg = _registry_with(Record, "rank", range(1, 4))
        install_write_interceptor(Record, reg)
        record = Record()
        record.note = "3"
        assert record.note == "3"

    def test_none_written_as_none(self) -> None:
        class Record:
            pass

        reg = _registry_with(Record, "rank", range(1, 4))
        install_write_interceptor(Record, reg)
        record = Record()
        record.rank = None
        assert record.rank is None

    def test_existing_setattr_sees_coerced_value(self) -> None:
        seen: list[object] = []

        class Record:
            def __setattr__(self, name, value):
                seen.append(value)
                super().__setattr__(name, value)

        reg = _registry_with(Record, "rank", range(1, 4))
        install_write_interceptor(Record, reg)
        record = Record()
        record.rank = "1"
        assert seen == [1]
        assert record.rank == 1

    def test_constructor_writes_are_coerced(self) -> None:
        class Record:
            def __init__(self, rank):
                self.rank = rank

        reg = _registry_with(Record, "rank", range(1, 4))
        install_write_interceptor(Record, reg)
        assert Record("2").rank == 2


class TestMixedRegistries:
    def test_subclass_registry_bound_to_inherited_wrapper(self) -> None:
        class Parent:
            pass

        class Child(Parent):
            pass

        parent_registry = _registry_with(Parent, "size", range(1, 3))
        child_registry = _registry_with(Child, "rank", range(1, 3))
        assert install_write_interceptor(Parent, parent_registry) is True
        assert install_write_interceptor(Child, child_registry) is True
        assert has_write_interceptor(Child, child_registry)
        assert install_write_interceptor(Child, child_registry) is False

        child = Child()
        child.size = "1"
        child.rank = "2"
        assert child.size == 1
        assert child.rank == 2

    def test_declarations_against_separate_registries(self) -> None:
        class Parent:
            pass

        class Child(Parent):
            pass

        declare_enum_trait(Parent, "size", 1, 2, registry=TraitRegistry(), label_lookup=NullLabelLookup())
        declare_enum_trait(Child, "rank", 1, 2, registry=TraitRegistry(), label_lookup=NullLabelLookup())

        child = Child()
        child.rank = "2"
        assert child.rank == 2
        child.size = "1"
        assert child.size == 1

    def test_unbound_registry_not_reported(self) -> None:
        class Record:
            pass

        install_write_interceptor(Record, _registry_with(Record, "rank", range(1, 3)))
        assert not has_write_interceptor(Record, TraitRegistry())
