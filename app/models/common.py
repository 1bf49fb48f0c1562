from pydantic import BaseModel


class ErrorResponse(BaseModel):
    detail: str


class RejectionResponse(ErrorResponse):
    """Body returned when submitted input fails URL validation."""

    code: str
