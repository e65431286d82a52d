from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from devconnector.common.constants import (
    NO_PROFILE_FOR_USER_MESSAGE,
    PROFILE_NOT_FOUND_MESSAGE,
    ProfileSection,
)
from devconnector.dto.profile_dto import ProfileDto
from devconnector.dto.user_context_dto import UserContextDto
from devconnector.profile.profile_query_service import ProfileQueryService
from devconnector.profile.profile_command_service import ProfileCommandService


class ProfileService:
    """
    Application service orchestrating profile reads and writes.

    This service:
    - Owns transaction boundaries (commits after every write)
    - Turns "no such profile" into client errors
    - Delegates all DB access to query/command services
    """

    def __init__(
        self,
        query_service: ProfileQueryService,
        command_service: ProfileCommandService,
        logger,
    ):
        """
        Initialize the ProfileService with its dependencies.

        Args:
            query_service (ProfileQueryService): Service responsible for reading profile data from the database.
            command_service (ProfileCommandService): Service responsible for writing profile data to the database.
            logger: The logger instance for logging messages.
        """
        self.query_service = query_service
        self.command_service = command_service
        self.logger = logger

    async def get_my_profile(
        self, session: AsyncSession, user_context: UserContextDto
    ) -> ProfileDto:
        """
        Retrieve the caller's own profile.

        Raises:
            ValueError: If the caller has no profile yet.
        """
        profile = await self.query_service.get_profile(session, user_context.user_id)
        if profile is None:
            raise ValueError(NO_PROFILE_FOR_USER_MESSAGE)
        return profile

    async def upsert_profile(
        self,
        session: AsyncSession,
        user_context: UserContextDto,
        profile_fields: dict,
    ) -> ProfileDto:
        """
        Create the caller's profile or update it in place.

        Args:
            session (AsyncSession): Active DB session.
            user_context (UserContextDto): Authenticated user context.
            profile_fields (dict): Present, non-empty fields of the request.

        Returns:
            ProfileDto: The stored profile after the write.
        """
        await self.command_service.upsert_profile(
            session, user_context.user_id, profile_fields
        )
        await session.commit()
        return await self.query_service.get_profile(session, user_context.user_id)

    async def get_all_profiles(self, session: AsyncSession) -> list[ProfileDto]:
        return await self.query_service.get_all_profiles(session)

    async def get_profile_by_user_id(
        self, session: AsyncSession, user_id: UUID
    ) -> ProfileDto:
        """
        Retrieve the profile owned by `user_id`.

        Raises:
            ValueError: If that user has no profile.
        """
        profile = await self.query_service.get_profile(session, user_id)
        if profile is None:
            raise ValueError(PROFILE_NOT_FOUND_MESSAGE)
        return profile

    async def delete_account(
        self, session: AsyncSession, user_context: UserContextDto
    ) -> None:
        """
        Delete the caller's posts, profile and user record, in that order.

        Each step is committed on its own. A failure part way through leaves
        the earlier deletions in place.
        """
        user_id = user_context.user_id

        await self.command_service.delete_posts(session, user_id)
        await session.commit()

        await self.command_service.delete_profile(session, user_id)
        await session.commit()

        await self.command_service.delete_user(session, user_id)
        await session.commit()

        self.logger.info("[ProfileService] account %s deleted", user_id)

    async def add_experience(
        self, session: AsyncSession, user_context: UserContextDto, entry: dict
    ) -> ProfileDto:
        return await self._add_entry(
            session, user_context, ProfileSection.EXPERIENCE, entry
        )

    async def remove_experience(
        self, session: AsyncSession, user_context: UserContextDto, exp_id: str
    ) -> ProfileDto:
        return await self._remove_entry(
            session, user_context, ProfileSection.EXPERIENCE, exp_id
        )

    async def add_education(
        self, session: AsyncSession, user_context: UserContextDto, entry: dict
    ) -> ProfileDto:
        return await self._add_entry(
            session, user_context, ProfileSection.EDUCATION, entry
        )

    async def remove_education(
        self, session: AsyncSession, user_context: UserContextDto, edu_id: str
    ) -> ProfileDto:
        return await self._remove_entry(
            session, user_context, ProfileSection.EDUCATION, edu_id
        )

    async def _add_entry(
        self,
        session: AsyncSession,
        user_context: UserContextDto,
        section: ProfileSection,
        entry: dict,
    ) -> ProfileDto:
        await self.command_service.add_entry(
            session, user_context.user_id, section, entry
        )
        await session.commit()
        return await self.query_service.get_profile(session, user_context.user_id)

    async def _remove_entry(
        self,
        session: AsyncSession,
        user_context: UserContextDto,
        section: ProfileSection,
        entry_id: str,
    ) -> ProfileDto:
        await self.command_service.remove_entry(
            session, user_context.user_id, section, entry_id
        )
        await session.commit()
        return await self.query_service.get_profile(session, user_context.user_id)
