"""Naming-convention helpers for module base names.

Maps a base name such as ``BlogCategory`` to each of the sixteen case
variants that stub files refer to (``Module_``, ``modules-``, ``Module `` and
so on).  The string helpers mirror the framework conventions the stubs were
written against: ``ucsplit`` splits on uppercase letters, ``snake`` inserts a
delimiter before every uppercase letter, and ``headline`` produces a
space-separated, title-cased label.

English pluralisation is delegated to :mod:`inflect` so that irregular and
``-y`` nouns come out right (``Category`` -> ``Categories``, ``Person`` ->
``People``).  Words that are already plural or uncountable are left alone.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Callable

import inflect

__all__ = [
    "CaseVariant",
    "camel",
    "headline",
    "kebab",
    "plural",
    "plural_studly",
    "snake",
    "studly",
    "ucsplit",
    "variant",
    "variants",
]

_inflector = inflect.engine()

_UPPER_BOUNDARY = re.compile(r"(?=[A-Z])")
_SNAKE_BOUNDARY = re.compile(r"(.)(?=[A-Z])")
_WHITESPACE = re.compile(r"\s+")
_WORD_START = re.compile(r"(^|\s)(\S)")
_TRAILING_WORD = re.compile(r"([A-Z]?[a-z]+|[A-Z]+)$")

_UNCOUNTABLE = frozenset(
    {
        "audio",
        "data",
        "equipment",
        "feedback",
        "information",
        "media",
        "metadata",
        "money",
        "news",
        "series",
        "sheep",
        "software",
        "species",
        "staff",
    }
)
# inflect pluralises these as pronouns ("me" -> "us") rather than as nouns
_SINGULAR_PRONOUNS = frozenset(
    {"i", "me", "my", "mine", "he", "him", "his", "she", "her", "hers", "it", "its"}
)
_SINGULAR_ENDINGS = ("ss", "us", "is")


# ---------------------------------------------------------------------------
# Variant identifiers
# ---------------------------------------------------------------------------


class CaseVariant(str, Enum):
    """The sixteen case-variant placeholders a stub may reference.

    The member value is the literal identifier used inside stubs, either bare
    in file paths or wrapped as ``__<value>__``.
    """

    STUDLY_UNDERSCORE = "Module_"
    PLURAL_STUDLY_UNDERSCORE = "Modules_"
    SNAKE = "module_"
    PLURAL_SNAKE = "modules_"
    STUDLY = "Module"
    STUDLY_HYPHEN = "Module-"
    HEADLINE = "Module "
    PLURAL_STUDLY = "Modules"
    PLURAL_STUDLY_HYPHEN = "Modules-"
    PLURAL_HEADLINE = "Modules "
    CAMEL = "module"
    KEBAB = "module-"
    TITLE_SNAKE = "module "
    PLURAL_CAMEL = "modules"
    PLURAL_KEBAB = "modules-"
    PLURAL_TITLE_SNAKE = "modules "


# ---------------------------------------------------------------------------
# String helpers
# ---------------------------------------------------------------------------


def ucsplit(value: str) -> list[str]:
    """Split *value* in front of every uppercase letter.

    Examples::

        ucsplit("BlogCategory") -> ["Blog", "Category"]
        ucsplit("blog") -> ["blog"]
    """
    return [part for part in _UPPER_BOUNDARY.split(value) if part]


def _ucfirst(value: str) -> str:
    return value[:1].upper() + value[1:]


def _ucwords(value: str) -> str:
    return _WORD_START.sub(lambda m: m.group(1) + m.group(2).upper(), value)


def snake(value: str, delimiter: str = "_") -> str:
    """Convert *value* to snake case using *delimiter* between words.

    ``snake("BlogCategory")`` gives ``blog_category`` and
    ``snake("BlogCategory", " ")`` gives ``blog category``.  Values that are
    already entirely lowercase letters are returned unchanged.
    """
    if value.isalpha() and value.islower():
        return value
    collapsed = _WHITESPACE.sub("", _ucwords(value))
    return _SNAKE_BOUNDARY.sub(lambda m: m.group(1) + delimiter, collapsed).lower()


def kebab(value: str) -> str:
    """Convert *value* to kebab case (``blog-category``)."""
    return snake(value, "-")


def studly(value: str) -> str:
    """Convert ``blog-category`` or ``blog_category`` to ``BlogCategory``."""
    words = value.replace("-", " ").replace("_", " ").split(" ")
    return "".join(_ucfirst(word) for word in words)


def camel(value: str) -> str:
    """Convert *value* to camel case (``blogCategory``)."""
    result = studly(value)
    return result[:1].lower() + result[1:]


def headline(value: str) -> str:
    """Return a human readable, title-cased label for *value*.

    Examples::

        headline("BlogCategory") -> "Blog Category"
        headline("api-resource") -> "Api Resource"
    """
    parts = value.split(" ")
    if len(parts) > 1:
        parts = [part.title() for part in parts]
    else:
        parts = [part.title() for part in ucsplit("_".join(parts))]

    collapsed = "_".join(parts).replace("-", "_").replace(" ", "_")
    return " ".join(part for part in collapsed.split("_") if part)


def _match_case(word: str, result: str) -> str:
    if len(word) > 1 and word.isupper():
        return result.upper()
    if word[0].isupper():
        return _ucfirst(result)
    return result


def _is_plural(word: str) -> bool:
    # inflect strips the "s" of singular words such as status, class, analysis
    if word.endswith(_SINGULAR_ENDINGS):
        return False
    singular = _inflector.singular_noun(word)
    return bool(singular) and singular != word


def _pluralize_word(word: str) -> str:
    lowered = word.lower()
    if lowered in _UNCOUNTABLE:
        return word
    if lowered in _SINGULAR_PRONOUNS:
        return _match_case(word, lowered + "s")
    if _is_plural(lowered):
        return word
    return _match_case(word, _inflector.plural_noun(lowered))


def plural(value: str) -> str:
    """Pluralise the trailing word of *value*, keeping the rest untouched.

    The trailing word is the last uppercase-led hump or lowercase run, so
    ``blog_category``, ``blog category``, ``blogCategory`` and
    ``BlogCategory`` all pluralise their final ``category``.  Words that are
    already plural or uncountable (``Settings``, ``Equipment``) are kept as
    they are, and a value ending in a digit gets an ``s`` (``Post2s``).
    Values ending in anything else that is not a letter are returned
    unchanged.
    """
    if value[-1:].isdigit():
        return value + "s"
    match = _TRAILING_WORD.search(value)
    if match is None:
        return value
    return value[: match.start()] + _pluralize_word(match.group(0))


def plural_studly(value: str) -> str:
    """Pluralise the last StudlyCase segment of *value* (``BlogCategories``)."""
    parts = ucsplit(value)
    if not parts:
        return value
    parts[-1] = plural(parts[-1])
    return "".join(parts)


# ---------------------------------------------------------------------------
# Variant computation
# ---------------------------------------------------------------------------


_TRANSFORMS: dict[CaseVariant, Callable[[str], str]] = {
    CaseVariant.STUDLY_UNDERSCORE: lambda name: "_".join(ucsplit(name)),
    CaseVariant.PLURAL_STUDLY_UNDERSCORE: lambda name: "_".join(ucsplit(plural(name))),
    CaseVariant.SNAKE: lambda name: snake(name),
    CaseVariant.PLURAL_SNAKE: lambda name: plural(snake(name)),
    CaseVariant.STUDLY: lambda name: name,
    CaseVariant.STUDLY_HYPHEN: lambda name: "-".join(ucsplit(name)),
    CaseVariant.HEADLINE: headline,
    CaseVariant.PLURAL_STUDLY: plural_studly,
    CaseVariant.PLURAL_STUDLY_HYPHEN: lambda name: "-".join(ucsplit(plural(name))),
    CaseVariant.PLURAL_HEADLINE: lambda name: plural(headline(name)),
    CaseVariant.CAMEL: camel,
    CaseVariant.KEBAB: kebab,
    CaseVariant.TITLE_SNAKE: lambda name: snake(name, " "),
    CaseVariant.PLURAL_CAMEL: lambda name: plural(camel(name)),
    CaseVariant.PLURAL_KEBAB: lambda name: plural(kebab(name)),
    CaseVariant.PLURAL_TITLE_SNAKE: lambda name: plural(snake(name, " ")),
}


def _validate_base_name(base_name: str) -> str:
    if not base_name or not base_name.strip():
        raise ValueError("module name must not be empty")
    return base_name


def variant(base_name: str, variant_id: CaseVariant | str) -> str:
    """Return a single case variant of *base_name*.

    Args:
        base_name: The module base name, conventionally StudlyCase.
        variant_id: A :class:`CaseVariant` member or its literal identifier
            (e.g. ``"modules-"``).

    Raises:
        ValueError: If *base_name* is empty or *variant_id* is unknown.
    """
    return _TRANSFORMS[CaseVariant(variant_id)](_validate_base_name(base_name))


def variants(base_name: str) -> dict[CaseVariant, str]:
    """Return every case variant of *base_name*, in declaration order."""
    name = _validate_base_name(base_name)
    return {member: _TRANSFORMS[member](name) for member in CaseVariant}
