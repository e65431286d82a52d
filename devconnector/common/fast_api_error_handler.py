from http import HTTPStatus
from devconnector.common.fast_api_response_wrapper import api_response
from devconnector.common.json_schema_validator import SchemaValidationError
from devconnector.common.logger import get_logger
from devconnector.service.github_service import GithubProfileNotFoundError
from fastapi import Request, FastAPI
from fastapi.exceptions import RequestValidationError

logger = get_logger()

GENERIC_SERVER_ERROR_MESSAGE = "Internal Server Error. Please contact support."


async def global_exception_handler(request: Request, exc: Exception):
    """
    Global exception handler used to convert Python exceptions into a unified API response.
    It also performs structured logging while preventing sensitive information from leaking
    to the client.

    Mapping:
        - SchemaValidationError -> 400 with the per-field error list in `data.errors`
        - ValueError / RequestValidationError -> 400
        - GithubProfileNotFoundError -> 404
        - RuntimeError -> 503
        - anything else -> 500
    """

    match exc:
        case ValueError() | RequestValidationError():
            status = HTTPStatus.BAD_REQUEST
        case GithubProfileNotFoundError():
            status = HTTPStatus.NOT_FOUND
        case RuntimeError():
            status = HTTPStatus.SERVICE_UNAVAILABLE
        case _:
            status = HTTPStatus.INTERNAL_SERVER_ERROR

    # /api/<resource>/... -> resource
    parts = request.url.path.strip("/").split("/")
    resource = parts[1] if len(parts) > 1 else "unknown"
    is_server_error = status >= 500

    log_msg = str(exc)
    data = None

    if is_server_error:
        user_message = GENERIC_SERVER_ERROR_MESSAGE
    elif isinstance(exc, SchemaValidationError):
        user_message = str(exc)
        data = {"errors": exc.errors}
    elif isinstance(exc, RequestValidationError):
        first_error = exc.errors()[0]
        user_message = (
            f"Validation Error: {first_error.get('loc', [])[-1]} - "
            f"{first_error.get('msg')}"
        )
    else:
        user_message = str(exc)

    # Full stack traces are logged only for server-side errors.
    log_method = logger.error if is_server_error else logger.warning
    log_method(
        "[%s] %s on resource [%s]: %s",
        "Server Error" if is_server_error else "Client Error",
        type(exc).__name__,
        resource,
        log_msg,
        exc_info=is_server_error,
    )

    return api_response(
        success=False,
        message=user_message,
        data=data,
        status_code=status,
    )


def register_exception_handlers(app: FastAPI):
    """
    Registers the global exception handlers on the provided FastAPI application.
    This ensures unexpected exceptions are consistently processed and returned
    in the standard API response format.
    """
    for exc_cls in (
        Exception,
        ValueError,
        GithubProfileNotFoundError,
        RuntimeError,
        RequestValidationError,
    ):
        app.add_exception_handler(exc_cls, global_exception_handler)
