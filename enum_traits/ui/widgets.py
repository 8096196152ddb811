"""View contexts for selection widgets.

Plain data for a template layer: names, DOM ids, and ordered options
with the selected flag already worked out. No markup is produced here.
"""

from enum import StrEnum

from pydantic import Field

from enum_traits.models.common import EnumTraitsBase


class WidgetKind(StrEnum):
    """Control a field renders as."""

    SELECT = "select"
    RADIO = "radio"
    TEXT = "text"


class OptionContext(EnumTraitsBase):
    """One selectable option."""

    label: str
    value: str  # form representation of the canonical value
    selected: bool = False
    dom_id: str | None = None  # radio buttons only


class SelectContext(EnumTraitsBase):
    """Context for a drop-down list."""

    kind: WidgetKind = WidgetKind.SELECT
    name: str
    dom_id: str
    options: list[OptionContext] = Field(default_factory=list)
    prompt: str | None = None  # blank first option when set

    @property
    def selected(self) -> OptionContext | None:
        return next((o for o in self.options if o.selected), None)


class RadioGroupContext(EnumTraitsBase):
    """Context for a set of radio buttons sharing one name."""

    kind: WidgetKind = WidgetKind.RADIO
    name: str
    dom_id: str
    options: list[OptionContext] = Field(default_factory=list)


class FieldContext(EnumTraitsBase):
    """Fallback context for a non-enum field."""

    kind: WidgetKind = WidgetKind.TEXT
    name: str
    dom_id: str
    value: str = ""
