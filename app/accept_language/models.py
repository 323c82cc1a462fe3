"""Language tag model for Accept-Language parsing.

Defines the per-entry structure built from one comma-separated segment of
an Accept-Language header.
"""

import re
from dataclasses import dataclass

from accept_language.logging import get_module_logger

logger = get_module_logger(__name__)

DEFAULT_WEIGHT = 1.0
MALFORMED_WEIGHT = 0.0

# Length of the "q=" prefix dropped from a quality parameter
QUALITY_PREFIX_LENGTH = 2

# Leaves out "nan", which would make the weight ordering undefined
_NUMBER_RE = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?)",
    re.IGNORECASE | re.ASCII,
)


def parse_quality(raw_quality: str) -> float:
    """Parse a ``q=<number>`` parameter into a weight.

    The first two characters are taken to be the ``q=`` prefix and are
    dropped without being checked.

    Args:
        raw_quality: Parameter text, e.g. "q=0.5".

    Returns:
        The parsed number, or 0.0 when the remainder is not a number.
    """
    quality_str = raw_quality[QUALITY_PREFIX_LENGTH:]

    if _NUMBER_RE.fullmatch(quality_str):
        return float(quality_str)

    logger.debug("malformed_quality_value", raw_quality=raw_quality)
    return MALFORMED_WEIGHT


@dataclass(frozen=True)
class LanguageTag:
    """A single Accept-Language entry.

    Equality compares both fields; ordering by preference is done with
    ``sort_key`` rather than rich comparisons so that tags sharing a weight
    are never treated as equal.

    Attributes:
        name: Language identifier (e.g., "en-US"). Empty only for malformed segments.
        weight: Relative preference, higher is more preferred.
    """

    name: str
    weight: float = DEFAULT_WEIGHT

    @classmethod
    def from_segment(cls, segment: str) -> "LanguageTag":
        """Create a LanguageTag from one header segment.

        Only the first parameter after the name is read; any further
        ``;``-separated parameters are ignored.

        Args:
            segment: Whitespace-stripped segment (e.g., "en-US;q=0.7").

        Returns:
            LanguageTag instance.
        """
        parts = segment.split(";")
        if len(parts) == 1:
            return cls(name=parts[0])
        return cls(name=parts[0], weight=parse_quality(parts[1]))

    @staticmethod
    def sort_key(tag: "LanguageTag") -> float:
        """Key for ordering tags by preference."""
        return tag.weight
