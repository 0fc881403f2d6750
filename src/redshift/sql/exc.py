import json


### PEP-249 style base classes ###
# https://peps.python.org/pep-0249/#exceptions
class Error(Exception):
    """Base class for all exceptions raised by the connector.
    `message`: An optional user-friendly error message. It should be short, actionable and stable
    `context`: Optional extra context about the error. MUST be JSON serializable
    """

    def __init__(self, message=None, context=None, *args, **kwargs):
        super().__init__(message, *args, **kwargs)
        self.message = message
        self.context = context or {}

    def __str__(self):
        return self.message

    def message_with_context(self):
        return self.message + ": " + json.dumps(self.context, default=str)


class InterfaceError(Error):
    pass


class DatabaseError(Error):
    pass


class OperationalError(DatabaseError):
    pass


class DataError(DatabaseError):
    pass


### Custom error classes ###
class ValidationError(InterfaceError):
    """Thrown if a statement cannot be rendered because a required option is missing"""

    pass


class OperationCancelledError(InterfaceError):
    """Thrown if the caller's cancel event was set before or while waiting on a statement.
    Its context will have the following keys:
    "statement-id": The statement being watched (if one was submitted)
    """

    pass


class RequestError(OperationalError):
    """Thrown if there was an error during a request to the Data API.
    Its context will have the following keys:
    "method": The Data API operation that failed
    "statement-id": The statement id (if available)
    "error-code": The service error code (if available)
    "original-exception": The Python level original exception
    """

    pass


class SubmissionError(RequestError):
    """Thrown if ExecuteStatement was rejected by the service"""


class PollTransportError(RequestError):
    """Thrown if DescribeStatement failed while waiting on a statement"""


class FetchError(RequestError):
    """Thrown if GetStatementResult failed after the statement finished"""


class MaxWaitDurationError(OperationalError):
    """Thrown if a statement did not reach a terminal state within max_wait_seconds"""


class ServerOperationError(DatabaseError):
    """Thrown if the statement moved to the ABORTED or FAILED state, for example when there
    was a syntax error.
    Its context will have the following keys:
    "statement-id": The statement id
    "state": The terminal state reported by the service
    "diagnostic-info": The error text reported by the service
    """

    pass


class DecodingError(DataError):
    """Thrown in strict mode if a result field carries no recognised value tag"""


class EncodingError(DataError):
    """Thrown if result rows cannot be mapped onto the column list or serialized"""
