import functools
import inspect
from http import HTTPStatus
from starlette.requests import Request
from devconnector.common.fast_api_response_wrapper import api_response
from enum import Enum

USER_CONTEXT_MISSING_MESSAGE = "Unauthorized: User context missing"


class ApiParamName(str, Enum):
    REQUEST = "request"
    CURRENT_USER = "current_user"


def authenticate():
    """
    Login-required decorator for FastAPI endpoints.

    The decorator **rewrites the endpoint function signature**: `current_user`
    is removed and a `request: Request` parameter is added, so FastAPI injects
    the Request object while the caller stays out of the public signature.

    It performs the following:
    1. Rejects callers whose token could not be verified (401 "Token is not valid").
    2. Ensures a user object exists in `request.state.user` (401 otherwise).
    3. Passes that user as `current_user` if the endpoint declares it.

    Returns: The decorated async function.

    Example:
        class MyController:
            def __init__(self):
                self.router = APIRouter()
                self.router.add_api_route(
                    "/profile/me",
                    endpoint=authenticate()(self.get_my_profile),
                    methods=["GET"],
                )

            async def get_my_profile(self, current_user: UserContextDto):
                ...
    """

    def decorator(func):
        sig = inspect.signature(func)
        original_params = sig.parameters
        injects_user = ApiParamName.CURRENT_USER.value in original_params

        api_params = [
            p
            for name, p in original_params.items()
            if name != ApiParamName.CURRENT_USER.value
        ]

        # Ensure the signature includes `request` so that FastAPI can detect it
        # and inject the Starlette/FastAPI Request object automatically.
        api_params.insert(
            0,
            inspect.Parameter(
                ApiParamName.REQUEST.value,
                inspect.Parameter.POSITIONAL_OR_KEYWORD,
                annotation=Request,
            ),
        )

        @functools.wraps(func)
        async def wrapper(request: Request, *args, **kwargs):
            """
            Reject anonymous callers, then call the endpoint with the
            caller's context if it asked for one.
            """
            # Set by AuthMiddleware when a token was sent but did not verify
            auth_error = getattr(request.state, "auth_error", None)
            if auth_error:
                return api_response(
                    success=False,
                    message=auth_error,
                    status_code=HTTPStatus.UNAUTHORIZED,
                )

            # Set by AuthMiddleware; None for anonymous requests
            user = getattr(request.state, "user", None)
            if not user:
                return api_response(
                    success=False,
                    message=USER_CONTEXT_MISSING_MESSAGE,
                    status_code=HTTPStatus.UNAUTHORIZED,
                )

            if injects_user:
                kwargs[ApiParamName.CURRENT_USER.value] = user

            return await func(*args, **kwargs)

        wrapper.__signature__ = sig.replace(parameters=api_params)
        return wrapper

    return decorator
