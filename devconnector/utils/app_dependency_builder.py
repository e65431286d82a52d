from devconnector.common.logger import get_logger
from devconnector.common.database import Database
from devconnector.common.json_schema_validator import JsonSchemaValidator
from devconnector.utils.fast_app_factory import FastAppFactory
from devconnector.authentication.authentication_service import AuthenticationService
from devconnector.repository.users_repository import UsersRepository
from devconnector.repository.profile_repository import ProfileRepository
from devconnector.repository.post_repository import PostRepository
from devconnector.profile.profile_mapper import ProfileMapper
from devconnector.profile.profile_query_service import ProfileQueryService
from devconnector.profile.profile_command_service import ProfileCommandService
from devconnector.profile.profile_service import ProfileService
from devconnector.profile.profile_controller import ProfileController
from devconnector.service.github_service import GithubService


class AppDependencyBuilder:
    """
    A builder class responsible for constructing all service and controller dependencies
    used throughout the application.

    This class acts as a centralized place for wiring together:
    - Logging and the database engine
    - Repositories and profile services
    - HTTP API controllers and the FastAPI factory

    Example:
        builder = AppDependencyBuilder()
        app = builder.fast_app_factory.create_app()
    """

    def __init__(self, database: Database | None = None):
        self.logger = get_logger()
        self.database = database or Database()
        self.json_schema_validator = JsonSchemaValidator(logger=self.logger)

        self.users_repository = UsersRepository()
        self.profile_repository = ProfileRepository()
        self.post_repository = PostRepository()
        self.profile_mapper = ProfileMapper()
        self.profile_query_service = ProfileQueryService(
            users_repository=self.users_repository,
            profile_repository=self.profile_repository,
            profile_mapper=self.profile_mapper,
        )
        self.profile_command_service = ProfileCommandService(
            users_repository=self.users_repository,
            profile_repository=self.profile_repository,
            post_repository=self.post_repository,
            logger=self.logger,
        )
        self.profile_service = ProfileService(
            query_service=self.profile_query_service,
            command_service=self.profile_command_service,
            logger=self.logger,
        )
        self.github_service = GithubService(logger=self.logger)
        self.profile_controller = ProfileController(
            profile_service=self.profile_service,
            github_service=self.github_service,
            json_schema_validator=self.json_schema_validator,
            database=self.database,
        )

        self.authentication_service = AuthenticationService(logger=self.logger)
        self.fast_app_factory = FastAppFactory(
            authentication_service=self.authentication_service,
            profile_controller=self.profile_controller,
        )
