"""Error taxonomy for dataset clients."""


class DatasetError(Exception):
    """Base class for every failure a dataset client can report."""

    kind = "error"

    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.message = message
        if cause is not None:
            self.__cause__ = cause

    @property
    def cause(self) -> BaseException | None:
        return self.__cause__


class NetworkError(DatasetError):
    """The request never produced a response (connection, DNS, timeout)."""

    kind = "network"


class ServerError(DatasetError):
    """The backend answered with a non-success status."""

    kind = "server"

    def __init__(self, status_code: int, message: str | None = None):
        super().__init__(message or f"backend returned HTTP {status_code}")
        self.status_code = status_code


class DecodeError(DatasetError):
    """The response body could not be turned into the expected entity."""

    kind = "decode"


class ValidationError(DatasetError):
    """Required local input is missing or malformed."""

    kind = "validation"
