"""Typed views of the LinkedIn v2 profile and email documents.

Only ``id``, ``firstName`` and ``lastName`` are required. Everything nested
below them is optional so sparse documents decode cleanly; unknown keys are
ignored.
"""

from pydantic import BaseModel, ConfigDict, Field


class _Document(BaseModel):
    # Fields decode from their LinkedIn aliases only.
    model_config = ConfigDict(extra="ignore")


class PreferredLocale(_Document):
    language: str
    country: str


class LocalizedName(_Document):
    localized: dict[str, str]
    preferred_locale: PreferredLocale = Field(alias="preferredLocale")


class ImageIdentifier(_Document):
    identifier: str | None = None


class DisplayImageElement(_Document):
    identifiers: list[ImageIdentifier | None] | None = None


class DisplayImage(_Document):
    elements: list[DisplayImageElement | None] | None = None


class ProfilePicture(_Document):
    display_image: DisplayImage | None = Field(default=None, alias="displayImage~")


class LinkedInProfileDocument(_Document):
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    id: str
    first_name: LocalizedName = Field(alias="firstName")
    last_name: LocalizedName = Field(alias="lastName")
    profile_picture: ProfilePicture | None = Field(default=None, alias="profilePicture")


class EmailHandle(_Document):
    email_address: str | None = Field(default=None, alias="emailAddress")


class EmailElement(_Document):
    resolved_handle: EmailHandle | None = Field(default=None, alias="handle~")


class LinkedInEmailDocument(_Document):
    elements: list[EmailElement | None] | None = None
