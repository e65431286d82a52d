from devconnector.dto.profile_dto import ProfileDto
from devconnector.dto.user_summary_dto import UserSummaryDto
from devconnector.dto.social_dto import SocialDto
from devconnector.dto.experience_dto import ExperienceDto
from devconnector.dto.education_dto import EducationDto
from devconnector.entity.profile_entity import ProfileEntity
from devconnector.entity.users_entity import UsersEntity


class ProfileMapper:
    """
    Maps profile documents and their owners to response DTOs.
    """

    def map_to_profile_dto(
        self, profile: ProfileEntity, user: UsersEntity | None
    ) -> ProfileDto:
        """Assemble a ProfileDto joined with the owner's name and avatar."""
        return ProfileDto(
            id=profile.profile_id,
            user=self._map_user(user) if user else None,
            status=profile.status,
            skills=list(profile.skills or []),
            company=profile.company,
            website=profile.website,
            location=profile.location,
            bio=profile.bio,
            githubusername=profile.githubusername,
            social=SocialDto(**(profile.social or {})),
            experience=self._map_experience(profile.experience),
            education=self._map_education(profile.education),
            created_timestamp=profile.created_timestamp,
            updated_timestamp=profile.updated_timestamp,
        )

    def _map_user(self, entity: UsersEntity) -> UserSummaryDto:
        return UserSummaryDto(
            id=entity.user_id,
            name=entity.name,
            avatar=entity.avatar,
        )

    def _map_experience(self, items: list[dict] | None) -> list[ExperienceDto]:
        """Map embedded experience documents, keeping their stored order."""
        return [ExperienceDto.model_validate(item) for item in items or []]

    def _map_education(self, items: list[dict] | None) -> list[EducationDto]:
        """Map embedded education documents, keeping their stored order."""
        return [EducationDto.model_validate(item) for item in items or []]
