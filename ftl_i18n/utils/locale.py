"""Locale identifier parsing.

Tags are checked for shape only (``en-US``, ``zh-Hant-TW``, ``de-CH-1996``);
whether CLDR knows the combination does not matter, and the tag is never
rewritten beyond case and separator normalization.
"""
from __future__ import annotations

from typing import NamedTuple, Optional

from babel.core import get_locale_identifier
from babel.core import parse_locale as _babel_parse_locale


class LocaleId(NamedTuple):
    language: str
    territory: Optional[str] = None
    script: Optional[str] = None
    variant: Optional[str] = None


def parse_locale(tag: str) -> LocaleId:
    """Parse a BCP-47 style tag such as ``en-US`` or ``zh_Hant_TW``.

    Raises ValueError for empty or malformed identifiers, including POSIX
    style ``.codeset`` and ``@modifier`` suffixes.
    """
    if not isinstance(tag, str) or not tag.strip():
        raise ValueError("empty locale identifier")
    normalized = tag.strip().replace("_", "-")
    if "." in normalized or "@" in normalized:
        raise ValueError(f"{tag!r} is not a valid locale identifier")

    language, territory, script, variant = _babel_parse_locale(normalized, sep="-")[:4]
    if not (2 <= len(language) <= 3 or 5 <= len(language) <= 8):
        raise ValueError(f"{tag!r} has an invalid language subtag")
    return LocaleId(language, territory, script, variant)


def locale_tag(locale: LocaleId) -> str:
    """Canonical hyphen separated tag for a parsed locale (``en-US``)."""
    return get_locale_identifier(
        (locale.language, locale.territory, locale.script, locale.variant), sep="-"
    )


def canonical_tag(tag: str) -> str:
    return locale_tag(parse_locale(tag))
