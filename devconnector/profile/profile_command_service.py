import uuid
from datetime import datetime, timezone
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from devconnector.common.constants import NO_PROFILE_FOR_USER_MESSAGE, ProfileSection
from devconnector.entity.profile_entity import ProfileEntity


class ProfileCommandService:
    """
    Write side of the profile domain.

    Every method works on the profile document owned by one user and goes
    through the repositories; committing is left to the caller.
    """

    def __init__(self, users_repository, profile_repository, post_repository, logger):
        """
        Initialize the ProfileCommandService.

        Args:
            users_repository: Repository responsible for UsersEntity.
            profile_repository: Repository responsible for ProfileEntity.
            post_repository: Repository responsible for PostEntity.
            logger: The logger instance for logging messages.
        """
        self.users_repository = users_repository
        self.profile_repository = profile_repository
        self.post_repository = post_repository
        self.logger = logger

    async def upsert_profile(
        self, session: AsyncSession, user_id: UUID, profile_fields: dict
    ) -> ProfileEntity:
        """
        Create the user's profile, or update it in place if it already exists.

        Only the keys present in `profile_fields` are written. A nested "social"
        mapping is merged key by key into the stored one.

        Args:
            session (AsyncSession): Active database session.
            user_id (UUID): Owner of the profile.
            profile_fields (dict): Partial update, field name -> value.

        Returns:
            ProfileEntity: The persisted profile.
        """
        fields = dict(profile_fields)
        social_update = fields.pop("social", {})

        entity = await self.profile_repository.get_profile_by_user_id(session, user_id)
        if entity is None:
            self.logger.info(
                "[ProfileCommandService] no profile for user %s, creating one.", user_id
            )
            entity = ProfileEntity(
                user_id=user_id, skills=[], social={}, experience=[], education=[]
            )

        for attr, value in fields.items():
            setattr(entity, attr, value)
        if social_update:
            entity.social = {**(entity.social or {}), **social_update}
        entity.updated_timestamp = datetime.now(timezone.utc)

        try:
            saved = await self.profile_repository.upsert_profile(session, entity)
        except Exception as e:
            self.logger.error(
                "[ProfileCommandService] failed to save profile for user %s. Error: %s",
                user_id,
                str(e),
            )
            raise

        self.logger.info(
            "[ProfileCommandService] profile saved. ProfileID: %s, UserID: %s",
            saved.profile_id,
            user_id,
        )
        return saved

    async def add_entry(
        self,
        session: AsyncSession,
        user_id: UUID,
        section: ProfileSection,
        entry: dict,
    ) -> ProfileEntity:
        """
        Prepend a new embedded entry to the experience or education sequence.

        The entry receives a fresh id, unique within its sequence.

        Raises:
            ValueError: If the user has no profile.
        """
        entity = await self._require_profile(session, user_id)

        new_entry = {**entry, "id": uuid.uuid4().hex}
        setattr(entity, section.value, [new_entry, *getattr(entity, section.value)])
        entity.updated_timestamp = datetime.now(timezone.utc)

        saved = await self.profile_repository.upsert_profile(session, entity)
        self.logger.info(
            "[ProfileCommandService] %s entry %s added for user %s",
            section.value,
            new_entry["id"],
            user_id,
        )
        return saved

    async def remove_entry(
        self,
        session: AsyncSession,
        user_id: UUID,
        section: ProfileSection,
        entry_id: str,
    ) -> ProfileEntity:
        """
        Remove the embedded entry with `entry_id` from the given sequence.

        Raises:
            ValueError: If the user has no profile, or no entry has that id.
                Nothing is changed in either case.
        """
        entity = await self._require_profile(session, user_id)

        entries = getattr(entity, section.value)
        remaining = [item for item in entries if item.get("id") != entry_id]
        if len(remaining) == len(entries):
            self.logger.warning(
                "[ProfileCommandService] %s entry %s not found for user %s",
                section.value,
                entry_id,
                user_id,
            )
            raise ValueError(section.not_found_message)

        setattr(entity, section.value, remaining)
        entity.updated_timestamp = datetime.now(timezone.utc)

        saved = await self.profile_repository.upsert_profile(session, entity)
        self.logger.info(
            "[ProfileCommandService] %s entry %s removed for user %s",
            section.value,
            entry_id,
            user_id,
        )
        return saved

    async def delete_posts(self, session: AsyncSession, user_id: UUID) -> int:
        deleted = await self.post_repository.delete_posts_by_user_id(session, user_id)
        self.logger.info(
            "[ProfileCommandService] deleted %s posts of user %s", deleted, user_id
        )
        return deleted

    async def delete_profile(self, session: AsyncSession, user_id: UUID) -> int:
        deleted = await self.profile_repository.delete_profile_by_user_id(
            session, user_id
        )
        self.logger.info(
            "[ProfileCommandService] deleted %s profile of user %s", deleted, user_id
        )
        return deleted

    async def delete_user(self, session: AsyncSession, user_id: UUID) -> int:
        deleted = await self.users_repository.delete_user_by_user_id(session, user_id)
        self.logger.info("[ProfileCommandService] deleted user %s", user_id)
        return deleted

    async def _require_profile(
        self, session: AsyncSession, user_id: UUID
    ) -> ProfileEntity:
        entity = await self.profile_repository.get_profile_by_user_id(session, user_id)
        if entity is None:
            raise ValueError(NO_PROFILE_FOR_USER_MESSAGE)
        return entity
