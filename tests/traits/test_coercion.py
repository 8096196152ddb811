"""Tests for the coercion engine: raw input -> canonical representation."""

from enum import Enum, IntEnum, StrEnum

import pytest

from enum_traits.models.declaration import TraitDeclaration
from enum_traits.traits.coercion import coerce
from enum_traits.traits.labels import NullLabelLookup
from enum_traits.traits.resolver import resolve


class Gender(Enum):
    MALE = "male"
    FEMALE = "female"


class Level(IntEnum):
    LOW = 1
    HIGH = 2


class Size(StrEnum):
    SMALL = "s"
    LARGE = "l"


def _bundle(*spec):
    return resolve(
        TraitDeclaration.from_args("field", *spec),
        owner_name="record",
        lookup=NullLabelLookup(),
    )


# ---------------------------------------------------------------------------
# Pass-through
# ---------------------------------------------------------------------------


class TestPassThrough:
    @pytest.mark.parametrize("spec", [("a", "b"), (range(1, 3),), (Gender,)])
    def test_none(self, spec) -> None:
        assert coerce(_bundle(*spec), None) is None

    def test_declared_value_unchanged(self) -> None:
        bundle = _bundle(Gender)
        assert coerce(bundle, Gender.MALE) is Gender.MALE
        assert coerce(_bundle(range(1, 3)), 2) == 2

    def test_other_exemplar_returns_raw(self) -> None:
        bundle = _bundle(True, False)
        assert coerce(bundle, "yes") == "yes"


# ---------------------------------------------------------------------------
# Text
# ---------------------------------------------------------------------------


class TestTextExemplar:
    def test_integer_becomes_text(self) -> None:
        assert coerce(_bundle("1", "2"), 1) == "1"

    def test_token_becomes_its_text(self) -> None:
        assert coerce(_bundle("male", "female"), Gender.FEMALE) == "female"

    def test_str_enum_member_becomes_plain_text(self) -> None:
        result = coerce(_bundle("s", "l"), Size.SMALL)
        assert result == "s"
        assert type(result) is str

    def test_unknown_text_kept(self) -> None:
        assert coerce(_bundle("male", "female"), "other") == "other"


# ---------------------------------------------------------------------------
# Integer
# ---------------------------------------------------------------------------


class TestIntegerExemplar:
    def test_numeric_text(self) -> None:
        bundle = _bundle(range(1, 6))
        assert coerce(bundle, "3") == 3
        assert coerce(bundle, " 4 ") == 4

    def test_unparseable_text_returned_unchanged(self) -> None:
        assert coerce(_bundle(range(1, 6)), "three") == "three"

    def test_integral_float(self) -> None:
        bundle = _bundle(range(1, 6))
        assert coerce(bundle, 2.0) == 2
        assert coerce(bundle, 2.5) == 2.5

    def test_bool_is_not_an_integer(self) -> None:
        assert coerce(_bundle(range(0, 2)), True) is True

    def test_int_enum_member_goes_through_its_text(self) -> None:
        result = coerce(_bundle(range(1, 3)), Level.HIGH)
        assert result == 2
        assert type(result) is int

    def test_out_of_range_integer_kept(self) -> None:
        assert coerce(_bundle(range(1, 6)), "9") == 9


# ---------------------------------------------------------------------------
# Token
# ---------------------------------------------------------------------------


class TestTokenExemplar:
    def test_text_matches_value(self) -> None:
        assert coerce(_bundle(Gender), "male") is Gender.MALE

    def test_text_matches_member_name(self) -> None:
        assert coerce(_bundle(Gender), "FEMALE") is Gender.FEMALE

    def test_text_matches_case_insensitively(self) -> None:
        assert coerce(_bundle(Gender), " Female ") is Gender.FEMALE

    def test_round_trip_through_text(self) -> None:
        bundle = _bundle(Gender)
        for member in Gender:
            assert coerce(bundle, str(member.value)) is member

    def test_unknown_text_returned_as_text(self) -> None:
        assert coerce(_bundle(Gender), "other") == "other"

    def test_int_matches_int_enum_value(self) -> None:
        assert coerce(_bundle(Level), 2) is Level.HIGH

    def test_numeric_text_matches_int_enum(self) -> None:
        assert coerce(_bundle(Level), "1") is Level.LOW

    def test_unknown_int_kept(self) -> None:
        assert coerce(_bundle(Level), 7) == 7

    def test_plain_text_becomes_str_enum_member(self) -> None:
        result = coerce(_bundle(Size), "l")
        assert result is Size.LARGE

    def test_bool_kept(self) -> None:
        assert coerce(_bundle(Level), True) is True

    def test_member_of_other_enum_matches_by_text(self) -> None:
        class Sex(Enum):
            MALE = "male"

        assert coerce(_bundle(Gender), Sex.MALE) is Gender.MALE


# ---------------------------------------------------------------------------
# Idempotence
# ---------------------------------------------------------------------------


class TestIdempotence:
    @pytest.mark.parametrize(
        ("spec", "raw"),
        [
            (("male", "female"), "male"),
            (("male", "female"), "other"),
            (("male", "female"), Gender.FEMALE),
            (("1", "2"), 2),
            ((range(1, 6),), "3"),
            ((range(1, 6),), " 4 "),
            ((range(1, 6),), "three"),
            ((range(1, 6),), "9"),
            ((range(1, 6),), 2.5),
            ((range(1, 6),), True),
            ((range(1, 3),), Level.HIGH),
            ((Gender,), "male"),
            ((Gender,), " Female "),
            ((Gender,), "other"),
            ((Level,), 7),
            ((Level,), "1"),
            ((Size,), "l"),
            ((True, False), "yes"),
        ],
    )
    def test_coercing_twice_equals_coercing_once(self, spec, raw) -> None:
        bundle = _bundle(*spec)
        once = coerce(bundle, raw)
        twice = coerce(bundle, once)
        assert twice == once
        assert type(twice) is type(once)
