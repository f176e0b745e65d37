from __future__ import annotations

from typing import Any

from pydantic import ValidationError as PydanticValidationError


class Astro7TimerError(RuntimeError):
    """Base class for errors raised by the 7Timer client."""


class ValidationError(Astro7TimerError, ValueError):
    """Raised when request parameters or client settings are invalid."""

    def __init__(self, message: str, errors: list[tuple[str, str]] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []

    @classmethod
    def from_pydantic(cls, exc: PydanticValidationError) -> ValidationError:
        errors: list[tuple[str, str]] = []
        for error in exc.errors():
            field = ".".join(str(part) for part in error.get("loc", ()))
            cause = error.get("ctx", {}).get("error")
            message = str(cause) if isinstance(cause, Exception) else error.get("msg", "invalid value")
            errors.append((field, message))
        return cls("; ".join(message for _, message in errors), errors)


class RequestFailedError(Astro7TimerError):
    """Raised when the 7Timer API answers with a non-success status."""

    def __init__(self, status_line: str, response: Any = None) -> None:
        super().__init__(status_line)
        self.status_line = status_line
        self.response = response


class ReportDecodeError(Astro7TimerError):
    """Raised when a forecast body cannot be decoded."""
