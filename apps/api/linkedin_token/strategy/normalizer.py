"""Builds ``NormalizedProfile`` records from LinkedIn documents."""

from __future__ import annotations

from typing import Any

from linkedin_token.schemas.linkedin import LinkedInEmailDocument, LinkedInProfileDocument
from linkedin_token.schemas.profile import NormalizedProfile, PersonName, ProfileValue
from linkedin_token.strategy.localization import resolve_localized_name


def _collect_emails(document: LinkedInEmailDocument) -> list[ProfileValue] | None:
    if document.elements is None:
        return None

    return [
        ProfileValue(value=element.resolved_handle.email_address)
        for element in document.elements
        if element is not None and element.resolved_handle is not None and element.resolved_handle.email_address
    ]


def _collect_photos(document: LinkedInProfileDocument) -> list[ProfileValue] | None:
    picture = document.profile_picture
    if picture is None or picture.display_image is None or not picture.display_image.elements:
        return None

    first_element = picture.display_image.elements[0]
    if first_element is None or not first_element.identifiers:
        return []

    return [
        ProfileValue(value=entry.identifier)
        for entry in first_element.identifiers
        if entry is not None and entry.identifier
    ]


def normalize_profile(parsed_profile: dict[str, Any], parsed_email: dict[str, Any], *, raw: str) -> NormalizedProfile:
    """Merge the parsed profile and email documents into one canonical profile.

    Raises ``pydantic.ValidationError`` when a required profile field is missing
    and ``KeyError`` when a name has no value for its preferred locale.
    """
    profile_document = LinkedInProfileDocument.model_validate(parsed_profile)
    email_document = LinkedInEmailDocument.model_validate(parsed_email)

    name = PersonName(
        given_name=resolve_localized_name(profile_document.first_name),
        family_name=resolve_localized_name(profile_document.last_name),
    )

    return NormalizedProfile(
        id=profile_document.id,
        name=name,
        display_name=f"{name.given_name} {name.family_name}",
        emails=_collect_emails(email_document),
        photos=_collect_photos(profile_document),
        raw=raw,
        parsed=parsed_profile,
    )
