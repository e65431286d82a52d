from datetime import date
from pydantic import ConfigDict, Field, field_validator
from devconnector.dto.base_request_dto import BaseRequestDto
from devconnector.common.constants import SOCIAL_NETWORK_FIELDS


class ProfileRequestDto(BaseRequestDto):
    """
    Body of the create-or-update profile request.

    Only fields that were sent with a non-empty value reach the database, see
    `to_db_dict`. Social links arrive flat and are stored under `social`.
    """

    # Skill entries keep their leading space, see `split_skills`.
    model_config = ConfigDict(str_strip_whitespace=False)

    status: str
    skills: list[str]
    company: str | None = None
    website: str | None = None
    location: str | None = None
    bio: str | None = None
    githubusername: str | None = None
    youtube: str | None = None
    twitter: str | None = None
    facebook: str | None = None
    linkedin: str | None = None
    instagram: str | None = None

    @field_validator("skills", mode="before")
    @classmethod
    def split_skills(cls, value):
        """
        Accept either a list (kept as sent) or a comma separated string.

        "a, b,c" becomes [" a", " b", " c"]: every element is trimmed and then
        prefixed with a single space, which existing clients rely on.
        """
        if isinstance(value, str):
            return [" " + skill.strip() for skill in value.split(",")]
        return value

    def to_db_dict(self) -> dict:
        """
        Build the partial update for the profile document.

        Returns:
            dict: field name -> value for every present, non-empty field, with
            social links nested under "social".
        """
        fields = {name: value for name, value in super().to_db_dict().items() if value}
        social = {
            name: fields.pop(name) for name in SOCIAL_NETWORK_FIELDS if name in fields
        }
        if social:
            fields["social"] = social
        return fields


class ProfileEntryRequestDto(BaseRequestDto):
    """Fields shared by experience and education entries."""

    from_date: date = Field(alias="from")
    to_date: date | None = Field(default=None, alias="to")
    current: bool = False
    description: str | None = None

    @field_validator("to_date", mode="before")
    @classmethod
    def empty_to_date_is_open_ended(cls, value):
        return value or None

    @field_validator("current", mode="before")
    @classmethod
    def missing_current_is_false(cls, value):
        return bool(value)

    def to_entry(self) -> dict:
        """Serialize into the embedded document stored on the profile, minus its id."""
        return self.model_dump(mode="json", by_alias=True)


class ExperienceRequestDto(ProfileEntryRequestDto):
    title: str
    company: str
    location: str | None = None


class EducationRequestDto(ProfileEntryRequestDto):
    school: str
    degree: str
    fieldofstudy: str
