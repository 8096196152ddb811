"""Tests for MetadataBundle and the shared value helpers."""

from enum import Enum, StrEnum

import pytest
from pydantic import ValidationError

from enum_traits.models.bundle import MetadataBundle
from enum_traits.models.common import ValueKind, form_value, same_value, token_text, value_kind


class Size(StrEnum):
    SMALL = "s"
    LARGE = "l"


class Mood(Enum):
    HAPPY = 1


def _rank_bundle() -> MetadataBundle:
    return MetadataBundle(
        field="rank",
        owner_name="product",
        values=(1, 2, 3),
        aliases=("bad", "common", "good"),
        labels=("Bad", "Common", "Good"),
        options=(("Bad", 1), ("Common", 2), ("Good", 3)),
    )


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class TestValueKind:
    def test_kinds(self) -> None:
        assert value_kind(Size.SMALL) == ValueKind.TOKEN
        assert value_kind("s") == ValueKind.TEXT
        assert value_kind(3) == ValueKind.INTEGER
        assert value_kind(True) == ValueKind.OTHER
        assert value_kind(1.5) == ValueKind.OTHER


class TestSameValue:
    def test_str_enum_member_is_not_its_text(self) -> None:
        assert not same_value("s", Size.SMALL)
        assert same_value(Size.SMALL, Size.SMALL)

    def test_bool_is_not_int(self) -> None:
        assert not same_value(True, 1)
        assert not same_value(1, True)

    def test_same_family_compares_by_equality(self) -> None:
        assert same_value(3, 3)
        assert same_value("a", "a")

    def test_token_text_and_form_value(self) -> None:
        assert token_text(Mood.HAPPY) == "1"
        assert form_value(Size.LARGE) == "l"
        assert form_value(4) == "4"


# ---------------------------------------------------------------------------
# Bundle
# ---------------------------------------------------------------------------


class TestMetadataBundle:
    def test_parallel_lookups(self) -> None:
        bundle = _rank_bundle()
        assert bundle.exemplar == 1
        assert bundle.kind == ValueKind.INTEGER
        assert bundle.index_of(3) == 2
        assert bundle.alias_for(2) == "common"
        assert bundle.label_for(3) == "Good"
        assert bundle.value_for_alias("good") == 3
        assert bundle.value_for_label("Bad") == 1

    def test_unknown_value(self) -> None:
        bundle = _rank_bundle()
        assert bundle.index_of(9) is None
        assert not bundle.contains("1")
        assert bundle.alias_for(9) is None
        assert bundle.label_for(9) is None

    def test_unknown_alias_raises_key_error(self) -> None:
        with pytest.raises(KeyError):
            _rank_bundle().value_for_alias("awesome")

    def test_unknown_label_raises_key_error(self) -> None:
        with pytest.raises(KeyError):
            _rank_bundle().value_for_label("Awesome")

    def test_lengths_must_match(self) -> None:
        with pytest.raises(ValidationError, match="same length"):
            MetadataBundle(
                field="rank",
                owner_name="product",
                values=(1, 2),
                aliases=("a",),
                labels=("A", "B"),
                options=(("A", 1), ("B", 2)),
            )

    def test_frozen(self) -> None:
        bundle = _rank_bundle()
        with pytest.raises(ValidationError):
            bundle.allow_nil = False  # type: ignore[misc]
