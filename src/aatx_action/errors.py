"""Exceptions raised by the AATX action."""


class ActionError(Exception):
    """Base exception for the action."""


class ConfigurationError(ActionError):
    """An input or the runner context is missing or unparseable."""


class ValidationCallError(ActionError):
    """The validation API could not be reached or answered with an error status."""

    def __init__(self, message: str, status_code: int | None = None, body: str | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class MalformedResponseError(ActionError):
    """The validation API answered with something other than a result object."""


class ReviewPublishError(ActionError):
    """Creating the pull request review failed."""

    def __init__(self, message: str, status_code: int | None = None, body: str | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body
