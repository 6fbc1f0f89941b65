from fastapi import status


class AssignMateError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(AssignMateError):
    """Required request input is missing or empty."""

    status_code = status.HTTP_400_BAD_REQUEST


class GenerationError(AssignMateError):
    """The text-generation backend failed or produced no text."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
