from uuid import UUID
from devconnector.entity.post_entity import PostEntity
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession


class PostRepository:
    """
    Repository for the posts table. Profiles only need to find and bulk-delete
    the posts of one owner.
    """

    async def get_posts_by_user_id(
        self, session: AsyncSession, user_id: UUID
    ) -> list[PostEntity]:
        result = await session.execute(
            select(PostEntity)
            .where(PostEntity.user_id == user_id)
            .order_by(PostEntity.post_id)
        )
        return list(result.scalars().all())

    async def delete_posts_by_user_id(
        self, session: AsyncSession, user_id: UUID
    ) -> int:
        """
        Delete all posts written by the given user.

        Returns:
            int: Number of deleted posts.
        """
        result = await session.execute(
            delete(PostEntity).where(PostEntity.user_id == user_id)
        )
        return result.rowcount
