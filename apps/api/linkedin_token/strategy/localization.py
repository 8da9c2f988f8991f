"""Localized name resolution."""

from linkedin_token.schemas.linkedin import LocalizedName


def resolve_localized_name(name: LocalizedName) -> str:
    """Return the value stored under the preferred ``language_country`` key.

    No fallback locale is tried; a missing key raises ``KeyError``.
    """
    locale = name.preferred_locale
    return name.localized[f"{locale.language}_{locale.country}"]
