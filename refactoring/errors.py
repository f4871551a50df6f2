from enum import Enum


class ErrorKind(Enum):
    CONFIGURATION = "configuration"
    METHOD_NOT_ALLOWED = "method_not_allowed"
    VALIDATION = "validation"
    UPSTREAM_PROTOCOL = "upstream_protocol"
    UPSTREAM_RUNTIME = "upstream_runtime"


HTTP_STATUS = {
    ErrorKind.CONFIGURATION: 500,
    ErrorKind.METHOD_NOT_ALLOWED: 405,
    ErrorKind.VALIDATION: 400,
    ErrorKind.UPSTREAM_PROTOCOL: 500,
    ErrorKind.UPSTREAM_RUNTIME: 500,
}


class RefactorError(Exception):
    """A request failure tagged with its kind. The message is sent as the response body."""

    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    @property
    def status(self) -> int:
        return HTTP_STATUS[self.kind]

    def __repr__(self):
        return f"RefactorError({self.kind.name}, {self.message!r})"
