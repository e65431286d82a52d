from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from devconnector.common.fast_api_response_wrapper import api_response
from http import HTTPStatus

INVALID_TOKEN_MESSAGE = "Token is not valid"


class AuthMiddleware(BaseHTTPMiddleware):
    """
    Middleware for authenticating incoming HTTP requests.

    Delegates token verification to `AuthenticationService` and stores the
    result in `request.state.user`: a `UserContextDto` for authenticated
    callers, None for anonymous ones. Whether anonymous access is allowed is
    decided per endpoint by the `authenticate()` decorator.

    Usage:
        app.add_middleware(AuthMiddleware, auth_service=auth_service)

    Exception Handling:
        - ValueError: The request continues anonymously with
          `request.state.auth_error` set to "Token is not valid"; protected
          endpoints answer 401 with that message, public ones ignore it.
        - Other exceptions: Returns HTTP 403 FORBIDDEN with "Authentication failed".
    """

    def __init__(self, app, auth_service):
        super().__init__(app)
        self.auth_service = auth_service

    async def dispatch(self, request: Request, call_next):
        """
        Resolve the caller of the request, then hand over to the next handler.

        Args:
            request (Request): The incoming FastAPI request object.
            call_next (Callable): The next middleware or route handler to call.

        Returns:
            Response: The response returned by the next handler, or an error response
                    if authentication could not be performed at all.
        """
        request.state.auth_error = None
        try:
            request.state.user = self.auth_service.authenticate_request(
                request.headers
            )

        except ValueError:
            request.state.user = None
            request.state.auth_error = INVALID_TOKEN_MESSAGE
        except Exception:
            return api_response(
                success=False,
                message="Authentication failed",
                status_code=HTTPStatus.FORBIDDEN,
            )

        return await call_next(request)
