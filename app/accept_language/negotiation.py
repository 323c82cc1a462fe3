"""Matching user language preferences against supported languages.

Matching is exact and case-sensitive: "en" does not match "en-US".
"""

from typing import Iterable, List, Optional

from accept_language.configuration import get_settings
from accept_language.logging import get_module_logger
from accept_language.parser import parse

logger = get_module_logger(__name__)


def intersection(
    raw_languages: Optional[str],
    supported_languages: Iterable[str],
) -> List[str]:
    """Find the languages both requested by the user and supported by the application.

    Args:
        raw_languages: Accept-Language header value.
        supported_languages: Language identifiers the application supports.

    Returns:
        Requested languages that are supported, in the user's preference order.
        Empty if nothing overlaps.

    Example:
        >>> intersection("en-US, en-GB;q=0.5", ["en-US", "de", "en-GB"])
        ['en-US', 'en-GB']
    """
    supported = set(supported_languages)
    return [language for language in parse(raw_languages) if language in supported]


def best_match(
    raw_languages: Optional[str],
    supported_languages: Iterable[str],
    default: Optional[str] = None,
) -> Optional[str]:
    """Pick the most preferred supported language.

    Args:
        raw_languages: Accept-Language header value.
        supported_languages: Language identifiers the application supports.
        default: Returned when nothing overlaps. Falls back to the
            ACCEPT_LANGUAGE_DEFAULT setting when not given.

    Returns:
        The first language of ``intersection``, otherwise the default
        (None if neither is available).
    """
    common = intersection(raw_languages, supported_languages)
    if common:
        logger.debug("best_match_resolved", language=common[0])
        return common[0]

    fallback = default
    if fallback is None:
        fallback = get_settings().negotiation.default_language
    logger.debug("best_match_defaulted", default=fallback)
    return fallback
