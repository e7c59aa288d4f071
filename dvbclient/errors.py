"""Exceptions raised by the DVB client."""


class DvbError(Exception):
    """Base class for all errors raised by this package."""


class ApiError(DvbError):
    """The API answered with a non-success HTTP status."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(status_code, message)
        self.status_code = status_code
        self.message = message

    def __str__(self) -> str:
        return f"API error {self.status_code}: {self.message}"