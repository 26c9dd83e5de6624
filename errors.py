"""Failure kinds raised by the services and flow, with the HTTP status each maps to.

Routes catch ``FlowError`` and answer with ``status`` and ``public_message``;
the exception's own message is for the log.
"""


class FlowError(Exception):
    status = 500
    public_message = "internal server error"

    def __init__(self, message: str = "", public_message: str | None = None):
        super().__init__(message)
        if public_message is not None:
            self.public_message = public_message


class TransportError(FlowError):
    """The upstream could not be reached (connection refused, timeout, ...)."""


class DecodeError(FlowError):
    """The upstream answered with something that isn't the JSON we expect."""


class NotFound(FlowError):
    status = 404
    public_message = "not found"


class UpstreamRejected(FlowError):
    """The upstream answered with a status we can't continue from."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class ValidationError(FlowError):
    status = 400
    public_message = "bad request"


class BotDetected(FlowError):
    status = 401
    public_message = "unauthorized"


class DuplicateResource(FlowError):
    status = 400
    public_message = "user already exists"


class RiskAssessmentError(FlowError):
    pass


class InvalidToken(RiskAssessmentError):
    pass


class ActionMismatch(RiskAssessmentError):
    pass
