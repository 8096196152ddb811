"""Label lookup adapter: boundary to an external text-resource service.

A lookup answers with an explicit found/miss result. Missing keys and
adapter exceptions are both a miss; the resolver falls back to a
humanised alias and never sees adapter-specific errors.
"""

import json
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Protocol

from enum_traits.config.settings import Settings, get_settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LabelLookupResult:
    """Outcome of one label lookup; ``label`` is None on a miss."""

    label: str | None = None

    @property
    def found(self) -> bool:
        return self.label is not None

    @classmethod
    def hit(cls, label: str) -> "LabelLookupResult":
        return cls(label=label)


MISS = LabelLookupResult()


class LabelLookup(Protocol):
    """Anything that can resolve a label for ``alias`` under ``scope``.

    ``scope`` is ``(owner_name, field)``, e.g. ``("product", "rank")``.
    """

    def lookup(self, alias: str, scope: tuple[str, ...]) -> LabelLookupResult:
        ...


class NullLabelLookup:
    """Lookup that never finds anything (every label falls back)."""

    def lookup(self, alias: str, scope: tuple[str, ...]) -> LabelLookupResult:  # noqa: ARG002
        return MISS


class CatalogLabelLookup:
    """Nested-mapping catalog rooted at a locale.

    Layout: ``{locale: {owner_name: {field: {alias: label}}}}``.
    """

    def __init__(self, catalog: Mapping[str, Any], locale: str = "en") -> None:
        self._catalog = catalog
        self._locale = locale

    @property
    def locale(self) -> str:
        return self._locale

    def lookup(self, alias: str, scope: tuple[str, ...]) -> LabelLookupResult:
        node: Any = self._catalog.get(self._locale)
        for key in (*scope, alias):
            if not isinstance(node, Mapping) or key not in node:
                return MISS
            node = node[key]
        if not isinstance(node, str) or not node:
            return MISS
        return LabelLookupResult.hit(node)


class TranslatorLabelLookup:
    """Adapter over a ``translate(key, scope) -> str`` callable.

    Whatever the translator raises is reported as a miss.
    """

    def __init__(self, translate: Callable[[str, tuple[str, ...]], str]) -> None:
        self._translate = translate

    def lookup(self, alias: str, scope: tuple[str, ...]) -> LabelLookupResult:
        try:
            label = self._translate(alias, scope)
        except Exception as exc:  # noqa: BLE001
            logger.debug("Label lookup miss for %s in %s: %s", alias, ".".join(scope), exc)
            return MISS
        if not isinstance(label, str) or not label:
            return MISS
        return LabelLookupResult.hit(label)


def load_catalog(path: str | Path) -> dict[str, Any]:
    """Load a JSON label catalog from *path*.

    Raises:
        FileNotFoundError: If *path* does not exist.
        ValueError: If the file is not a JSON object.
    """
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        msg = f"Label catalog {path} must contain a JSON object."
        raise ValueError(msg)
    return data


def build_label_lookup(settings: Settings | None = None) -> LabelLookup:
    """Build the lookup described by settings (catalog file or null)."""
    settings = settings or get_settings()
    if settings.LABEL_CATALOG_PATH:
        catalog = load_catalog(settings.LABEL_CATALOG_PATH)
        logger.info("Loaded label catalog from %s", settings.LABEL_CATALOG_PATH)
        return CatalogLabelLookup(catalog, locale=settings.LABEL_LOCALE)
    return NullLabelLookup()


# ---------------------------------------------------------------------------
# Process default
# ---------------------------------------------------------------------------

_default_lookup: LabelLookup | None = None


def get_label_lookup() -> LabelLookup:
    """Return the process-wide lookup, building it from settings on first use."""
    global _default_lookup
    if _default_lookup is None:
        _default_lookup = build_label_lookup()
    return _default_lookup


def set_label_lookup(lookup: LabelLookup | None) -> None:
    """Replace the process-wide lookup (None rebuilds from settings)."""
    global _default_lookup
    _default_lookup = lookup
