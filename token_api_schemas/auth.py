"""
Login and Error Response Schemas

Request/response shapes for the wallet-signature login endpoint, the generic error
response returned by the authentication API, and JSON-string variants of each for
validating raw request or response bodies.
"""
from typing import Any, Optional

from pydantic import Field, StrictStr

from token_api_schemas.validation import JsonStringSchema, PayloadModel, optional_str


class LoginRequest(PayloadModel):
    """Signed login message submitted by a wallet."""

    message: StrictStr = Field(min_length=1)
    signature: StrictStr = Field(min_length=1)


class LoginSuccessResponse(PayloadModel):
    token: StrictStr


class ErrorResponse(PayloadModel):
    error: StrictStr
    message: optional_str() = None
    details: Optional[Any] = None


LoginRequestStringSchema = JsonStringSchema(LoginRequest)
LoginSuccessResponseStringSchema = JsonStringSchema(LoginSuccessResponse)
ErrorResponseStringSchema = JsonStringSchema(ErrorResponse)


def create_error_response(error: str, message: Optional[str] = None, details: Any = None) -> ErrorResponse:
    """
    Builds an ErrorResponse.

    ``message`` and ``details`` are included only when truthy, so an empty string,
    ``0`` or ``False`` is left out of the response entirely.

    Args:
        error: Short error identifier, always included.
        message: Optional human-readable description.
        details: Optional extra payload.

    Returns:
        The ErrorResponse, built without validation; ``to_dict()`` omits the
        fields that were dropped.
    """
    fields = {"error": error}
    if message:
        fields["message"] = message
    if details:
        fields["details"] = details
    return ErrorResponse.model_construct(**fields)
