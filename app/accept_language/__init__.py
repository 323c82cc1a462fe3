"""Accept-Language header parsing and language intersection.

Parses the HTTP Accept-Language header into an ordered list of language
tags and intersects it with the languages an application supports.

Main components:
- models: LanguageTag and quality parsing
- parser: parse() for raw header values
- negotiation: intersection() and best_match() against supported languages

Example:
    from accept_language import intersection, parse

    user_languages = parse("en-US, en-GB;q=0.5")
    common_languages = intersection("en-US, en-GB;q=0.5", ["en-US", "de", "en-GB"])
"""

from accept_language.models import LanguageTag
from accept_language.negotiation import best_match, intersection
from accept_language.parser import parse

__all__ = [
    "LanguageTag",
    "parse",
    "intersection",
    "best_match",
]
