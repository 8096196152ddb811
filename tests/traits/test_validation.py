"""Tests for inclusion validation of enum fields."""

import pytest

from enum_traits.models.declaration import TraitDeclaration
from enum_traits.traits.labels import NullLabelLookup
from enum_traits.traits.resolver import resolve
from enum_traits.traits.validation import (
    BLANK,
    NOT_INCLUDED,
    FieldError,
    InclusionRule,
    RecordInvalid,
    ValidationResult,
    register_rule,
    rules_for,
    validate_record,
)


def _rule(field, *spec, **options) -> InclusionRule:
    bundle = resolve(
        TraitDeclaration.from_args(field, *spec, **options),
        owner_name="record",
        lookup=NullLabelLookup(),
    )
    return InclusionRule(field=field, bundle=bundle)


# ---------------------------------------------------------------------------
# InclusionRule
# ---------------------------------------------------------------------------


class TestInclusionRule:
    def test_member_passes(self) -> None:
        assert _rule("rank", range(1, 4)).check(2) is None

    def test_non_member_fails(self) -> None:
        error = _rule("rank", range(1, 4)).check(7)
        assert error == FieldError(field="rank", message=NOT_INCLUDED, value=7)

    def test_wrong_representation_fails(self) -> None:
        assert _rule("rank", range(1, 4)).check("2") is not None

    def test_none_allowed_by_default(self) -> None:
        rule = _rule("rank", range(1, 4))
        assert rule.allow_nil
        assert rule.check(None) is None

    def test_none_rejected_when_not_allowed(self) -> None:
        error = _rule("rank", range(1, 4), allow_nil=False).check(None)
        assert error is not None
        assert error.message == BLANK


# ---------------------------------------------------------------------------
# Record validation
# ---------------------------------------------------------------------------


class TestValidateRecord:
    def test_valid_record(self) -> None:
        class Record:
            rank = 1

        register_rule(Record, _rule("rank", range(1, 4)))
        result = validate_record(Record())
        assert result.is_valid
        assert result
        assert result.messages() == {}

    def test_invalid_record(self) -> None:
        class Record:
            rank = 9
            gender = None

        register_rule(Record, _rule("rank", range(1, 4)))
        register_rule(Record, _rule("gender", "male", "female", allow_nil=False))
        result = validate_record(Record())
        assert not result.is_valid
        assert not result
        assert result.messages() == {"rank": [NOT_INCLUDED], "gender": [BLANK]}

    def test_unset_attribute_counts_as_none(self) -> None:
        class Record:
            pass

        register_rule(Record, _rule("rank", range(1, 4), allow_nil=False))
        assert validate_record(Record()).messages() == {"rank": [BLANK]}

    def test_rules_inherited_nearest_first(self) -> None:
        class Parent:
            pass

        class Child(Parent):
            pass

        register_rule(Parent, _rule("state", "a", "b"))
        register_rule(Child, _rule("state", "c"))
        assert rules_for(Parent)["state"].bundle.values == ("a", "b")
        assert rules_for(Child)["state"].bundle.values == ("c",)

    def test_rule_replaced_on_same_owner(self) -> None:
        class Record:
            pass

        register_rule(Record, _rule("state", "a"))
        register_rule(Record, _rule("state", "b"))
        assert rules_for(Record)["state"].bundle.values == ("b",)


class TestRecordInvalid:
    def test_message_lists_field_errors(self) -> None:
        class Ticket:
            pass

        result = ValidationResult(
            errors=[
                FieldError(field="state", message=NOT_INCLUDED, value="x"),
                FieldError(field="rank", message=BLANK),
            ]
        )
        exc = RecordInvalid(Ticket(), result)
        assert str(exc) == "Ticket is invalid: state is not included in the list; rank can't be blank"
        assert exc.result is result
        assert isinstance(exc, ValueError)

    def test_can_be_raised(self) -> None:
        with pytest.raises(RecordInvalid):
            raise RecordInvalid(object(), ValidationResult())
