"""Language negotiation settings."""

from typing import Optional

from pydantic import Field

from accept_language.configuration.base import ComponentSettings


class NegotiationSettings(ComponentSettings):
    """Language negotiation configuration.

    Environment Variables:
        ACCEPT_LANGUAGE_DEFAULT: Language returned by ``best_match`` when the
            header shares nothing with the supported languages and the caller
            gave no explicit default (default: unset)

    Example:
        ```python
        from accept_language.configuration import settings

        fallback = settings.negotiation.default_language
        ```
    """

    default_language: Optional[str] = Field(
        default=None,
        alias="ACCEPT_LANGUAGE_DEFAULT",
        description="Fallback language for best_match when nothing overlaps",
    )
