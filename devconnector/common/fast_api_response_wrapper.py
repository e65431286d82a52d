from fastapi.responses import JSONResponse
from fastapi.encoders import jsonable_encoder
from http import HTTPStatus


def api_response(
    message: str,
    success: bool = True,
    data: dict | list | None = None,
    status_code: HTTPStatus = HTTPStatus.OK,
) -> JSONResponse:
    """
    Generate the JSON envelope shared by every profile API endpoint.

    The body always carries `success`, `message` and `data`. Pydantic DTOs
    inside `data` are serialized through `jsonable_encoder`, so their camelCase
    aliases end up on the wire.

    Args:
        message (str): Human readable outcome of the call.
        success (bool): False for any error response.
        data (dict | list | None): Optional payload, e.g. {"profile": ProfileDto}
            or {"errors": [...]} for validation failures.
        status_code (HTTPStatus): HTTP status of the response. Defaults to 200.

    Returns:
        JSONResponse: The serialized envelope.

    Example:
        return api_response(
            message="Profile retrieved successfully",
            data={"profile": profile},
        )
    """

    response_body = {
        "success": success,
        "message": message,
        "data": data,
    }

    return JSONResponse(
        status_code=status_code.value,
        content=jsonable_encoder(response_body),
    )
