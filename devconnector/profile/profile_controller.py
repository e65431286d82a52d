import asyncio
from uuid import UUID
from fastapi import APIRouter, Body

from devconnector.dto.profile_dto import ProfileDto
from devconnector.dto.user_context_dto import UserContextDto
from devconnector.dto.profile_request_dto import (
    ProfileRequestDto,
    ExperienceRequestDto,
    EducationRequestDto,
)
from devconnector.common.fast_api_response_wrapper import api_response
from devconnector.common.api_endpoints import (
    PROFILE_ENDPOINT,
    MY_PROFILE_ENDPOINT,
    PROFILE_BY_USER_ENDPOINT,
    PROFILE_EXPERIENCE_ENDPOINT,
    PROFILE_EXPERIENCE_ITEM_ENDPOINT,
    PROFILE_EDUCATION_ENDPOINT,
    PROFILE_EDUCATION_ITEM_ENDPOINT,
    PROFILE_GITHUB_ENDPOINT,
)
from devconnector.common.constants import (
    PROFILE_SCHEMA,
    EXPERIENCE_SCHEMA,
    EDUCATION_SCHEMA,
    USER_DELETED_MESSAGE,
)
from devconnector.utils.permission_decorators import authenticate


class ProfileController:
    """
    FastAPI controller exposing profile-related endpoints.

    Handles authentication, request validation, and session scoping,
    delegating all business logic to ProfileService.
    """

    def __init__(
        self, profile_service, github_service, json_schema_validator, database
    ):
        """
        Initialize the ProfileController with its dependencies and register routes.

        Args:
            profile_service (ProfileService): Service handling profile business logic.
            github_service (GithubService): Client for the public GitHub REST API.
            json_schema_validator (JsonSchemaValidator): Validates request bodies.
            database (Database): Database access object providing async session management.
        """
        self.router = APIRouter(tags=["profile"])
        self.profile_service = profile_service
        self.github_service = github_service
        self.json_schema_validator = json_schema_validator
        self.database = database

        self.router.add_api_route(
            MY_PROFILE_ENDPOINT,
            endpoint=authenticate()(self.get_my_profile),
            methods=["GET"],
            response_model=None,
        )
        self.router.add_api_route(
            PROFILE_ENDPOINT,
            endpoint=authenticate()(self.upsert_my_profile),
            methods=["POST"],
            response_model=None,
        )
        self.router.add_api_route(
            PROFILE_ENDPOINT,
            endpoint=self.get_all_profiles,
            methods=["GET"],
            response_model=None,
        )
        self.router.add_api_route(
            PROFILE_BY_USER_ENDPOINT,
            endpoint=self.get_profile_by_user_id,
            methods=["GET"],
            response_model=None,
        )
        self.router.add_api_route(
            PROFILE_ENDPOINT,
            endpoint=authenticate()(self.delete_my_account),
            methods=["DELETE"],
            response_model=None,
        )
        self.router.add_api_route(
            PROFILE_EXPERIENCE_ENDPOINT,
            endpoint=authenticate()(self.add_experience),
            methods=["PUT"],
            response_model=None,
        )
        self.router.add_api_route(
            PROFILE_EXPERIENCE_ITEM_ENDPOINT,
            endpoint=authenticate()(self.remove_experience),
            methods=["DELETE"],
            response_model=None,
        )
        self.router.add_api_route(
            PROFILE_EDUCATION_ENDPOINT,
            endpoint=authenticate()(self.add_education),
            methods=["PUT"],
            response_model=None,
        )
        self.router.add_api_route(
            PROFILE_EDUCATION_ITEM_ENDPOINT,
            endpoint=authenticate()(self.remove_education),
            methods=["DELETE"],
            response_model=None,
        )
        self.router.add_api_route(
            PROFILE_GITHUB_ENDPOINT,
            endpoint=self.get_github_repositories,
            methods=["GET"],
            response_model=None,
        )

    async def get_my_profile(self, current_user: UserContextDto):
        """
        Retrieve the profile of the currently authenticated user.

        Returns:
            A standardized API response containing the caller's profile,
            joined with the owner's name and avatar.

        Raises:
            ValueError: 400 if the caller has no profile yet.
        """
        async with self.database.session() as session:
            profile: ProfileDto = await self.profile_service.get_my_profile(
                session, current_user
            )

        return api_response(
            message="Profile retrieved successfully",
            data={"profile": profile},
        )

    async def upsert_my_profile(
        self,
        current_user: UserContextDto,
        body: dict | None = Body(default=None),
    ):
        """
        Create the caller's profile, or update it in place.

        Only the fields present with a non-empty value are written; social
        links are merged into the stored ones. `status` and `skills` are
        mandatory, and every missing or invalid field is reported at once.

        Args:
            current_user (UserContextDto): Authenticated user context.
            body (dict | None): Raw JSON body, checked against the profile schema.

        Returns:
            A standardized API response containing the stored profile.
        """
        payload = body or {}
        self.json_schema_validator.validate_data(payload, PROFILE_SCHEMA)
        request_dto = ProfileRequestDto.model_validate(payload)

        async with self.database.session() as session:
            profile: ProfileDto = await self.profile_service.upsert_profile(
                session, current_user, request_dto.to_db_dict()
            )

        return api_response(
            message="Profile saved successfully",
            data={"profile": profile},
        )

    async def get_all_profiles(self):
        async with self.database.session() as session:
            profiles: list[ProfileDto] = await self.profile_service.get_all_profiles(
                session
            )

        return api_response(
            message="Profiles retrieved successfully",
            data={"profiles": profiles},
        )

    async def get_profile_by_user_id(self, user_id: UUID):
        """
        Retrieve the profile owned by `user_id`.

        Malformed ids are rejected by FastAPI before this handler runs.
        """
        async with self.database.session() as session:
            profile: ProfileDto = await self.profile_service.get_profile_by_user_id(
                session, user_id
            )

        return api_response(
            message="Profile retrieved successfully",
            data={"profile": profile},
        )

    async def delete_my_account(self, current_user: UserContextDto):
        """
        Delete the caller's posts, profile and user account.
        """
        async with self.database.session() as session:
            await self.profile_service.delete_account(session, current_user)

        return api_response(message=USER_DELETED_MESSAGE)

    async def add_experience(
        self,
        current_user: UserContextDto,
        body: dict | None = Body(default=None),
    ):
        """
        Prepend an experience entry to the caller's profile.

        Args:
            current_user (UserContextDto): Authenticated user context.
            body (dict | None): Raw JSON body, checked against the experience schema.

        Returns:
            A standardized API response containing the updated profile.
        """
        payload = body or {}
        self.json_schema_validator.validate_data(payload, EXPERIENCE_SCHEMA)
        entry = ExperienceRequestDto.model_validate(payload).to_entry()

        async with self.database.session() as session:
            profile: ProfileDto = await self.profile_service.add_experience(
                session, current_user, entry
            )

        return api_response(
            message="Experience added successfully",
            data={"profile": profile},
        )

    async def remove_experience(self, current_user: UserContextDto, exp_id: str):
        async with self.database.session() as session:
            profile: ProfileDto = await self.profile_service.remove_experience(
                session, current_user, exp_id
            )

        return api_response(
            message="Experience removed successfully",
            data={"profile": profile},
        )

    async def add_education(
        self,
        current_user: UserContextDto,
        body: dict | None = Body(default=None),
    ):
        """
        Prepend an education entry to the caller's profile.

        Args:
            current_user (UserContextDto): Authenticated user context.
            body (dict | None): Raw JSON body, checked against the education schema.

        Returns:
            A standardized API response containing the updated profile.
        """
        payload = body or {}
        self.json_schema_validator.validate_data(payload, EDUCATION_SCHEMA)
        entry = EducationRequestDto.model_validate(payload).to_entry()

        async with self.database.session() as session:
            profile: ProfileDto = await self.profile_service.add_education(
                session, current_user, entry
            )

        return api_response(
            message="Education added successfully",
            data={"profile": profile},
        )

    async def remove_education(self, current_user: UserContextDto, edu_id: str):
        async with self.database.session() as session:
            profile: ProfileDto = await self.profile_service.remove_education(
                session, current_user, edu_id
            )

        return api_response(
            message="Education removed successfully",
            data={"profile": profile},
        )

    async def get_github_repositories(self, username: str):
        """
        List the latest public repositories of a GitHub user.

        The GitHub call is blocking and runs in a worker thread.

        Raises:
            GithubProfileNotFoundError: 404 if GitHub does not know the user.
            RuntimeError: 503 if GitHub cannot be reached.
        """
        repos = await asyncio.to_thread(
            self.github_service.get_user_repositories, username
        )

        return api_response(
            message="Github repositories retrieved successfully",
            data={"repos": repos},
        )
