"""Word inflection and case helpers used when naming generated enum types."""

from __future__ import annotations

from typing import Callable

_IRREGULAR_PLURALS: dict[str, str] = {
    "man": "men",
    "woman": "women",
    "child": "children",
    "foot": "feet",
    "tooth": "teeth",
    "goose": "geese",
    "mouse": "mice",
    "ox": "oxen",
    "person": "people",
    "index": "indices",
    "matrix": "matrices",
    "vertex": "vertices",
    "datum": "data",
    "medium": "media",
    "analysis": "analyses",
    "crisis": "crises",
    "status": "statuses",
    "alias": "aliases",
    "basis": "bases",
    "criterion": "criteria",
    "phenomenon": "phenomena",
    "syllabus": "syllabi",
    "thesis": "theses",
    "bus": "buses",
    "glass": "glasses",
    "quiz": "quizzes",
}

_IRREGULAR_SINGULARS: dict[str, str] = {
    plural: singular for singular, plural in _IRREGULAR_PLURALS.items()
}

_VOWELS = frozenset("aeiou")


def split_by_space(text: str) -> tuple[str, str]:
    """Split at the first space that is not inside double quotes."""
    if '"' in text:
        in_quote = False
        for position, char in enumerate(text):
            if char == '"':
                in_quote = not in_quote
            elif char == " " and not in_quote:
                return text[:position], text[position + 1:]
        return text, ""
    before, _, after = text.partition(" ")
    return before, after


def _ends_like_plural(lower: str) -> bool:
    return lower.endswith("s") and not lower.endswith(("ss", "us", "is"))


def is_plural(word: str) -> bool:
    """Report whether a word (or the last part of a compound word) looks plural."""
    lower = word.lower()
    if word in _IRREGULAR_SINGULARS or lower in _IRREGULAR_SINGULARS:
        return True
    if lower in _IRREGULAR_PLURALS:
        return False
    for separator in ("_", "-", " "):
        if separator in word:
            if separator == " ":
                word = word.strip()
            last = word.split(separator)[-1].lower()
            return last in _IRREGULAR_SINGULARS or _ends_like_plural(last)
    return _ends_like_plural(lower)


def _case_applier(src: str) -> Callable[[str], str]:
    """Return a function that applies the casing pattern of ``src`` to a string."""
    if src == src.upper():
        return str.upper
    if src == src.lower():
        return str.lower
    if src[0].isupper() and src[1:] == src[1:].lower():
        return lambda s: s[:1].upper() + s[1:].lower()
    upper_positions = {i for i, char in enumerate(src) if char.isupper()}
    return lambda s: "".join(
        char.upper() if i in upper_positions else char for i, char in enumerate(s)
    )


def _drop_plural_suffix(word: str) -> str:
    word = word.strip()
    if word in _IRREGULAR_SINGULARS:
        return _IRREGULAR_SINGULARS[word]
    if len(word) > 1 and word.endswith("s"):
        return word[:-1]
    return word


def _singularise_last(parts: list[str], separator: str) -> str:
    *head, last = parts
    singular = _IRREGULAR_SINGULARS.get(last.lower()) or _drop_plural_suffix(last)
    return separator.join([*head, _case_applier(last)(singular)])


def singularise(word: str) -> str:
    """Return the singular form of a word, keeping its casing and separators."""
    if not word:
        return ""
    apply_case = _case_applier(word)
    if not is_plural(word):
        return word.strip()
    if "_" in word:
        return _singularise_last(word.split("_"), "_").strip()
    if " " in word:
        return _singularise_last(word.strip().split(" "), " ").strip()
    if "-" in word:
        return _singularise_last(word.split("-"), "-").strip()
    lower = word.lower()
    if lower in _IRREGULAR_SINGULARS:
        return apply_case(_IRREGULAR_SINGULARS[lower])
    return apply_case(_drop_plural_suffix(lower)).strip()


def _is_plural_form(word: str) -> bool:
    lower = word.lower()
    if lower in _IRREGULAR_SINGULARS:
        return True
    if len(word) < 2 or lower in _IRREGULAR_PLURALS:
        return False
    return _ends_like_plural(lower)


def _regular_plural(word: str) -> str:
    if not word:
        return word
    if len(word) == 1:
        return word + "s"
    last, second_last = word[-1], word[-2]
    if last == "y" and second_last not in _VOWELS:
        return word[:-1] + "ies"
    if last in "sxzo" or word.endswith(("ch", "sh", "ss")):
        return word + "es"
    return word + "s"


def _match_casing(src: str, dst: str) -> str:
    matched = "".join(
        d.upper() if s.isupper() else d.lower() for s, d in zip(src, dst)
    )
    return matched + dst[len(src):]


def _restore_case(src: str, dst: str) -> str:
    if src == src.upper():
        return dst.upper()
    if src == src.lower():
        return dst
    return _match_casing(src, dst)


def pluralise(word: str) -> str:
    """Return the plural form of a word, keeping its casing."""
    if not word:
        return ""
    if len(word) == 1:
        return word + "s"
    if _is_plural_form(word):
        return word
    lower = word.lower()
    if lower in _IRREGULAR_PLURALS:
        return _restore_case(word, _IRREGULAR_PLURALS[lower])
    return _restore_case(word, _regular_plural(lower))


def camel(text: str) -> str:
    """Upper-case the first character."""
    if not text:
        return ""
    return text[0].upper() + text[1:]


def lower_first(text: str) -> str:
    """Lower-case the first character."""
    if not text:
        return ""
    return text[0].lower() + text[1:]