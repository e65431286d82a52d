from devconnector.common.database import Database
from devconnector.common.base import Base
from devconnector.common.constants import DEV_USER_ID, DEV_USER_NAME, DEV_USER_EMAIL
from devconnector.entity.users_entity import UsersEntity
import asyncio
import pkgutil
import importlib
import devconnector.entity
from devconnector.common.logger import get_logger

logger = get_logger()


def load_all_entities():
    """
    Automatically scan and import all modules under devconnector.entity.

    Importing these modules ensures that all SQLAlchemy model classes
    and their associated Table objects are registered into Base.metadata.
    """
    package = devconnector.entity
    prefix = package.__name__ + "."

    for _, name, _ in pkgutil.iter_modules(package.__path__, prefix):
        logger.info(f"Auto importing model: {name}")
        importlib.import_module(name)


async def reset_database(database: Database):
    """
    Reset the database by:
    1. Importing all SQLAlchemy entity modules.
    2. Dropping and recreating every table defined in Base.metadata.
    3. Seeding the user the development runner authenticates as.
    """
    load_all_entities()

    engine = database.get_engine()
    async with engine.begin() as conn:
        logger.info("Dropping all tables from Base.metadata...")
        await conn.run_sync(Base.metadata.drop_all)

        logger.info("Creating all tables from Base.metadata...")
        await conn.run_sync(Base.metadata.create_all)

    async with database.session() as session:
        await session.merge(
            UsersEntity(user_id=DEV_USER_ID, name=DEV_USER_NAME, email=DEV_USER_EMAIL)
        )
        await session.commit()
    logger.info(f"Seeded dev user {DEV_USER_ID}")

    await database.close()
    logger.info("Database reset complete.")


def main():
    """
    Main entrypoint: run the async reset in its own event loop.

    The target database is read from the DATABASE_URL environment variable.
    """
    logger.info("Resetting database tables...")
    asyncio.run(reset_database(Database()))


if __name__ == "__main__":
    main()
