"""Error Schemas — documents the error envelope in the OpenAPI schema.

Invariants:
    - Mirrors BookingError.to_response() and the validation handler output
"""

from pydantic import BaseModel


class ErrorDetail(BaseModel):
    field: str
    message: str
    type: str


class ErrorBody(BaseModel):
    code: str
    message: str
    category: str
    severity: str
    timestamp: str | None = None
    context: dict | None = None
    details: list[ErrorDetail] | None = None


class ErrorResponse(BaseModel):
    error: ErrorBody
