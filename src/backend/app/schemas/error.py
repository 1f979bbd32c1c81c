"""Pydantic schemas for error payloads.

Error is a fully resolved error: code, message and description. ErrorResponse
is the body carried by an APIError; it is assembled from an Error with
ErrorResponseBuilder, which can log the response (and the exception behind it)
as it is built. UpstreamErrorBody validates error bodies returned by the
organization management service.
"""

import logging

from pydantic import BaseModel, ConfigDict, Field

from app.middleware import get_request_id


class Error(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: str
    message: str
    description: str


class ErrorResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: str
    message: str
    description: str
    ref: str | None = None


class ErrorResponseBuilder:
    def __init__(self) -> None:
        self._code = ""
        self._message = ""
        self._description = ""

    def with_code(self, code: str) -> "ErrorResponseBuilder":
        self._code = code
        return self

    def with_message(self, message: str) -> "ErrorResponseBuilder":
        self._message = message
        return self

    def with_description(self, description: str) -> "ErrorResponseBuilder":
        self._description = description
        return self

    def build(
        self,
        log: logging.Logger | None = None,
        message: str | None = None,
        exc: BaseException | None = None,
    ) -> ErrorResponse:
        """Build the response, tagging it with the current request ID.

        When a logger is given the response is logged: at ERROR with the
        exception attached if exc is set, otherwise at DEBUG with the
        description only.
        """
        if not self._code or not self._message:
            raise ValueError("An error response requires a code and a message")

        response = ErrorResponse(
            code=self._code,
            message=self._message,
            description=self._description,
            ref=get_request_id() or None,
        )
        if log is not None:
            entry = "errorCode: %s | message: %s | description: %s | ref: %s"
            args = (response.code, response.message, message or response.description, response.ref)
            if exc is not None:
                log.error(entry, *args, exc_info=exc)
            else:
                log.debug(entry, *args)
        return response


class UpstreamErrorBody(BaseModel):
    """Error body returned by the organization management service."""

    model_config = ConfigDict(extra="ignore")

    code: str = Field(min_length=1)
    message: str = Field(min_length=1)
    description: str | None = ""
