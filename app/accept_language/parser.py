"""Accept-Language header parsing."""

from typing import List, Optional

from accept_language.models import LanguageTag


def parse(raw_languages: Optional[str]) -> List[str]:
    """Parse a raw Accept-Language header into language names.

    Spaces are removed anywhere in the header before it is split on commas.
    Entries are ordered by descending quality; entries sharing a quality
    keep their order from the header. Empty names are dropped.

    Args:
        raw_languages: Header value, e.g. "en-US, en-GB;q=0.5". None is
            treated as an empty header.

    Returns:
        Language names, most preferred first.

    Example:
        >>> parse("en-US, de;q=0.1, jp;q=0.7")
        ['en-US', 'jp', 'de']
    """
    if not raw_languages:
        return []

    segments = raw_languages.replace(" ", "").split(",")
    tags = [LanguageTag.from_segment(segment) for segment in segments]
    ranked = sorted(tags, key=LanguageTag.sort_key, reverse=True)

    return [tag.name for tag in ranked if tag.name]
