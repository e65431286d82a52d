"""
Development ASGI entry point for the FastAPI backend application.

This script performs the following steps:
1. Builds application dependencies via AppDependencyBuilder.
2. Creates the FastAPI application instance with all controllers/services injected.
3. Runs the application using Uvicorn ASGI server.
"""

import uvicorn
from starlette.datastructures import Headers
from devconnector.utils.app_dependency_builder import AppDependencyBuilder
from devconnector.authentication.authentication_service import AuthenticationService
from devconnector.dto.user_context_dto import UserContextDto
from devconnector.common.constants import DEV_USER_ID


class DevAuthenticationService(AuthenticationService):
    """
    Authentication service used exclusively in development mode.

    This service skips token validation and always returns the seeded dev
    user (see tools/init_db.py). It should never be used in production.
    """

    def authenticate_request(self, headers: Headers) -> UserContextDto:
        return UserContextDto(user_id=DEV_USER_ID)


# Build application dependencies
builder = AppDependencyBuilder()

# Override the default authentication service with the development version.
dev_auth_service = DevAuthenticationService(logger=builder.logger)
builder.fast_app_factory.authentication_service = dev_auth_service

# Create FastAPI app with injected dependencies
app = builder.fast_app_factory.create_app()
# Run the ASGI server (development mode)
if __name__ == "__main__":
    uvicorn.run(
        "devconnector.fast_app_dev_runner:app", host="0.0.0.0", port=5001, reload=True
    )
