from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
from devconnector.dto.profile_dto import ProfileDto


class ProfileQueryService:
    """
    Read side of the profile domain: loads profile documents together with
    their owners and maps them to DTOs.
    """

    def __init__(self, users_repository, profile_repository, profile_mapper):
        """
        Initialize ProfileQueryService with required repositories.

        Args:
            users_repository: Repository handling UsersEntity.
            profile_repository: Repository handling ProfileEntity.
            profile_mapper: Mapper used to convert entities into ProfileDto.
        """
        self.users_repository = users_repository
        self.profile_repository = profile_repository
        self.profile_mapper = profile_mapper

    async def get_profile(
        self, session: AsyncSession, user_id: UUID
    ) -> ProfileDto | None:
        """
        Retrieve the profile owned by `user_id`, joined with the owner's summary.

        Args:
            session (AsyncSession): Active SQLAlchemy async session.
            user_id (UUID): Owner of the profile.

        Returns:
            ProfileDto | None: The profile, or None if the user has none.
        """
        profile_entity = await self.profile_repository.get_profile_by_user_id(
            session, user_id
        )
        if not profile_entity:
            return None

        users_entity = await self.users_repository.get_user_by_user_id(
            session, user_id
        )

        return self.profile_mapper.map_to_profile_dto(
            profile=profile_entity, user=users_entity
        )

    async def get_all_profiles(self, session: AsyncSession) -> list[ProfileDto]:
        """
        Retrieve every profile, each joined with its owner's summary.

        Owners are loaded with a single IN query rather than one query per profile.
        """
        profile_entities = await self.profile_repository.get_all_profiles(session)
        if not profile_entities:
            return []

        owners = await self.users_repository.get_all_by_ids(
            session, list({profile.user_id for profile in profile_entities})
        )
        owners_by_id = {owner.user_id: owner for owner in owners}

        return [
            self.profile_mapper.map_to_profile_dto(
                profile=profile, user=owners_by_id.get(profile.user_id)
            )
            for profile in profile_entities
        ]
