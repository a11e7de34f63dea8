from typing import Any


class UpstreamError(Exception):
    """A call to the drive provider failed.

    ``status_code`` and ``body`` mirror the provider's response when there was
    one; both are ``None`` for transport-level failures.
    """

    def __init__(self, message: str, status_code: int | None = None, body: Any = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body
