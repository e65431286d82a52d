from datetime import datetime
from pydantic import Field
from devconnector.dto.base_dto import BaseDto
from devconnector.dto.education_dto import EducationDto
from devconnector.dto.experience_dto import ExperienceDto
from devconnector.dto.social_dto import SocialDto
from devconnector.dto.user_summary_dto import UserSummaryDto


class ProfileDto(BaseDto):
    id: int
    user: UserSummaryDto | None = None
    status: str
    skills: list[str] = Field(default_factory=list)
    company: str | None = None
    website: str | None = None
    location: str | None = None
    bio: str | None = None
    githubusername: str | None = None
    social: SocialDto = Field(default_factory=SocialDto)
    experience: list[ExperienceDto] = Field(default_factory=list)
    education: list[EducationDto] = Field(default_factory=list)
    created_timestamp: datetime | None = None
    updated_timestamp: datetime | None = None
