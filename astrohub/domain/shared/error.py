"""Error hierarchy for AstroHub.

Error layers:
- AstroHubError: Base class for all AstroHub errors
- InvalidIdentifierError: A path identifier broke its precondition (raised before any request)
- InvalidStateError: An upload state transition was applied out of order
- ClientError: A remote call failed (transport, HTTP status, decode, upload batch)

Every error carries a non-empty, human-readable ``message`` so the presentation
layer can show it verbatim.
"""

from typing import Any


class AstroHubError(Exception):
    """Base class for all AstroHub errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message or "Unknown error"
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class InvalidIdentifierError(AstroHubError):
    """Identifier cannot be embedded in a resource path."""

    def __init__(self, message: str, identifier: str | None = None) -> None:
        super().__init__(message, code="INVALID_IDENTIFIER")
        self.identifier = identifier


class InvalidStateError(AstroHubError):
    """Operation not allowed in current state."""


# =============================================================================
# Client Errors (failures of a remote call)
# =============================================================================


class ClientError(AstroHubError):
    """Base class for failures of a call against the backend."""


class TransportError(ClientError):
    """The request could not be completed or its response could not be read. No status code."""

    status_code: int | None = None


class HttpStatusError(ClientError):
    """Backend answered with a non-2xx status."""

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message, code=f"HTTP_{status_code}")
        self.status_code = status_code


class NotFoundError(HttpStatusError):
    """Backend answered 404."""


class DecodeError(ClientError):
    """A 2xx response body did not match the expected envelope or shape."""

    def __init__(self, message: str, body: str | None = None) -> None:
        super().__init__(message, code="DECODE_ERROR")
        self.body = body


class UploadBatchError(ClientError):
    """A file in an upload batch failed; later files were never attempted.

    Files before ``failed_index`` were uploaded and stay persisted on the
    backend; they are listed in ``uploaded``.
    """

    def __init__(
        self,
        message: str,
        *,
        failed_index: int,
        uploaded: list[Any],
        cause: ClientError,
    ) -> None:
        super().__init__(message, code="UPLOAD_BATCH_FAILED")
        self.failed_index = failed_index
        self.uploaded = uploaded
        self.cause = cause
