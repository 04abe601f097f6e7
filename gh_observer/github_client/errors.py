"""Errors raised by issue sources."""


class FetchError(Exception):
    """An issue source could not deliver issues or comments.

    Covers transport failures (network, CLI exit status, timeouts) and
    payloads that do not match the expected schema.
    """

    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.cause = cause
