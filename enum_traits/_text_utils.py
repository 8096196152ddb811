"""Text inflection helpers for derived enum member names and labels.

Used by the metadata resolver (alias normalisation, fallback labels) and
the member generator (accessor names). Deterministic, ASCII-oriented.
"""

import re

# Irregular plurals that don't follow standard rules
_IRREGULAR_PLURALS = {
    "person": "people",
    "child": "children",
    "man": "men",
    "woman": "women",
    "datum": "data",
    "medium": "media",
    "criterion": "criteria",
    "index": "indices",
    "matrix": "matrices",
    "status": "statuses",
    "address": "addresses",
}

_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
_CAMEL_BOUNDARY = re.compile(r"([a-z\d])([A-Z])")
_SEPARATORS = re.compile(r"[\s\-]+")


def underscore(text: str) -> str:
    """Convert a word to a lowercase, underscore-separated token.

    - ``"GoodMan"`` → ``"good_man"``
    - ``"HTTPStatus"`` → ``"http_status"``
    - ``"on-hold"`` / ``"on hold"`` → ``"on_hold"``
    - ``"Admin::User"`` → ``"admin/user"``
    """
    word = text.replace("::", "/")
    word = _ACRONYM_BOUNDARY.sub(r"\1_\2", word)
    word = _CAMEL_BOUNDARY.sub(r"\1_\2", word)
    word = _SEPARATORS.sub("_", word.strip())
    return word.lower()


def humanize(text: str) -> str:
    """Turn an underscored token into a capitalised, space-separated label.

    Drops a trailing ``_id`` and leading underscores, so ``"on_hold"``
    becomes ``"On hold"`` and ``"author_id"`` becomes ``"Author"``.
    """
    word = text.lstrip("_")
    if word.endswith("_id"):
        word = word[:-3]
    word = word.replace("_", " ").strip().lower()
    if not word:
        return ""
    return word[0].upper() + word[1:]


def pluralize(word: str) -> str:
    """Convert a singular English word to its plural form.

    Handles -y (policy -> policies, key -> keys), sibilant endings
    (status -> statuses), and a short list of irregulars. Only the last
    underscore-separated segment is inflected: ``"work_order"`` ->
    ``"work_orders"``.
    """
    if not word:
        return word

    head, sep, last = word.rpartition("_")
    lower = last.lower()

    if lower in _IRREGULAR_PLURALS:
        plural = _IRREGULAR_PLURALS[lower]
        if last[:1].isupper():
            plural = plural.capitalize()
        return head + sep + plural

    if lower.endswith(("s", "x", "z", "ch", "sh")):
        return word + "es"
    if lower.endswith("y") and len(lower) > 1 and lower[-2] not in "aeiou":
        return word[:-1] + "ies"
    return word + "s"
