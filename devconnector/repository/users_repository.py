from uuid import UUID
from devconnector.entity.users_entity import UsersEntity
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession


class UsersRepository:
    """
    Repository for handling database operations related to UsersEntity.
    """

    async def get_user_by_user_id(
        self, session: AsyncSession, user_id: UUID
    ) -> UsersEntity | None:
        """
        Retrieve a users entity by its user ID.

        This method expects an externally managed AsyncSession, typically provided
        by the service layer within a transactional context.

        Args:
            session (AsyncSession): The active async database session.
            user_id (UUID): The ID of the user to retrieve.

        Returns:
            UsersEntity | None: The matching user entity if found; otherwise None.
        """
        result = await session.execute(
            select(UsersEntity).where(UsersEntity.user_id == user_id)
        )

        return result.scalars().one_or_none()

    async def get_all_by_ids(
        self, session: AsyncSession, user_ids: list[UUID]
    ) -> list[UsersEntity]:
        """
        Retrieve multiple users entities by a list of user IDs.

        Args:
            session (AsyncSession): The active async database session.
            user_ids (list[UUID]): A list of user IDs to retrieve.

        Returns:
            list[UsersEntity]: A list of matching user entities.
                               Returns an empty list if no matches are found.
        """
        if not user_ids:
            return []

        result = await session.execute(
            select(UsersEntity).where(UsersEntity.user_id.in_(user_ids))
        )
        return list(result.scalars().all())

    async def delete_user_by_user_id(self, session: AsyncSession, user_id: UUID) -> int:
        """
        Delete the user record with the given ID.

        Args:
            session (AsyncSession): The active async database session.
            user_id (UUID): The ID of the user to delete.

        Returns:
            int: Number of deleted rows (0 or 1).
        """
        result = await session.execute(
            delete(UsersEntity).where(UsersEntity.user_id == user_id)
        )
        return result.rowcount
