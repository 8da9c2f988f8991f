"""Provider-agnostic profile handed to verify callbacks."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict


class PersonName(BaseModel):
    model_config = ConfigDict(frozen=True)

    given_name: str
    family_name: str


class ProfileValue(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: str


class NormalizedProfile(BaseModel):
    """Canonical profile record.

    ``emails`` and ``photos`` are ``None`` when LinkedIn returned nothing to
    build them from, and an empty list when the surrounding structure was
    present but held no usable entries. Callers can rely on the difference.
    """

    model_config = ConfigDict(frozen=True)

    provider: Literal["linkedin"] = "linkedin"
    id: str
    name: PersonName
    display_name: str
    emails: list[ProfileValue] | None = None
    photos: list[ProfileValue] | None = None
    raw: str
    parsed: dict[str, Any]

    def as_dict(self) -> dict[str, Any]:
        """Render the camelCase shape used by other token strategies."""
        rendered: dict[str, Any] = {
            "provider": self.provider,
            "id": self.id,
            "name": {"givenName": self.name.given_name, "familyName": self.name.family_name},
            "displayName": self.display_name,
        }
        if self.emails is not None:
            rendered["emails"] = [{"value": item.value} for item in self.emails]
        if self.photos is not None:
            rendered["photos"] = [{"value": item.value} for item in self.photos]
        rendered["_raw"] = self.raw
        rendered["_json"] = self.parsed
        return rendered
