from uuid import UUID
from devconnector.entity.profile_entity import ProfileEntity
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession


class ProfileRepository:
    """
    Repository for handling database operations related to ProfileEntity.

    A profile is keyed by its owner: `user_id` is unique across profiles.
    """

    async def get_profile_by_user_id(
        self, session: AsyncSession, user_id: UUID
    ) -> ProfileEntity | None:
        """
        Retrieve the ProfileEntity owned by a given user (1:1 relationship).
        """
        if not user_id:
            return None

        result = await session.execute(
            select(ProfileEntity).where(ProfileEntity.user_id == user_id)
        )

        return result.scalars().one_or_none()

    async def get_all_profiles(self, session: AsyncSession) -> list[ProfileEntity]:
        """
        Retrieve every profile, oldest first.
        """
        result = await session.execute(
            select(ProfileEntity).order_by(ProfileEntity.profile_id)
        )
        return list(result.scalars().all())

    async def upsert_profile(
        self, session: AsyncSession, entity: ProfileEntity
    ) -> ProfileEntity:
        """
        Inserts or updates a ProfileEntity in the database.

        Uses session.merge() to update the record if a matching primary key exists,
        or inserts a new one otherwise.

        Args:
            session (AsyncSession): The active async database session.
            entity (ProfileEntity): The profile document to persist.

        Returns:
            ProfileEntity: The merged entity instance synchronized with the session.
        """
        merged_entity = await session.merge(entity)
        await session.flush()

        return merged_entity

    async def delete_profile_by_user_id(
        self, session: AsyncSession, user_id: UUID
    ) -> int:
        """
        Delete the profile owned by the given user.

        Returns:
            int: Number of deleted rows (0 or 1).
        """
        result = await session.execute(
            delete(ProfileEntity).where(ProfileEntity.user_id == user_id)
        )
        return result.rowcount
