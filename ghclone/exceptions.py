"""ghclone exception classes."""

from pathlib import Path


class GhCloneError(Exception):
    """Base exception for all ghclone errors."""

    def __init__(
        self, code: str, message: str, request_id: str | None = None
    ) -> None:
        self.code = code
        self.message = message
        self.request_id = request_id
        super().__init__(f"[{code}] {message}")


class ConfigurationError(GhCloneError):
    """Raised when client or CLI configuration is invalid."""

    def __init__(self, message: str) -> None:
        super().__init__("CONFIGURATION_ERROR", message)


class TransportError(GhCloneError):
    """Raised when a request fails before any response is received."""

    def __init__(self, message: str) -> None:
        super().__init__("CONNECTION_ERROR", message)


class HttpStatusError(GhCloneError):
    """Raised when the platform answers with a 4xx or 5xx status."""

    def __init__(
        self,
        status_code: int,
        body: str,
        message: str | None = None,
        request_id: str | None = None,
    ) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(
            f"HTTP_{status_code}", message or f"HTTP {status_code}", request_id
        )


class AuthenticationError(HttpStatusError):
    """Raised when the token is missing or rejected (401)."""

    pass


class AuthorizationError(HttpStatusError):
    """Raised when access is denied (403)."""

    pass


class NotFoundError(HttpStatusError):
    """Raised when the account does not exist (404)."""

    pass


class RateLimitedError(HttpStatusError):
    """Raised when the request quota is exhausted."""

    def __init__(
        self,
        status_code: int,
        body: str,
        retry_after: int,
        message: str | None = None,
        request_id: str | None = None,
    ) -> None:
        super().__init__(status_code, body, message, request_id)
        self.retry_after = retry_after


class ServerError(HttpStatusError):
    """Raised on server errors (5xx)."""

    pass


class MalformedRecordError(GhCloneError):
    """Raised when a page body or repository record breaks the listing contract."""

    def __init__(self, message: str, page: int, index: int | None = None) -> None:
        self.page = page
        self.index = index
        super().__init__("MALFORMED_RECORD", message)


class DestinationExistsError(GhCloneError):
    """Raised when the clone destination root is already present."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__("DESTINATION_EXISTS", f"Destination already exists: {path}")


class DestinationCreateError(GhCloneError):
    """Raised when the clone destination root cannot be created."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(
            "DESTINATION_CREATE_FAILED", f"Cannot create {path}: {reason}"
        )


class CloneError(GhCloneError):
    """Raised by GitHelper when ``git clone`` exits unsuccessfully."""

    def __init__(
        self, url: str, path: Path, returncode: int, stderr: str
    ) -> None:
        self.url = url
        self.path = path
        self.returncode = returncode
        self.stderr = stderr
        detail = stderr.strip().splitlines()[-1] if stderr.strip() else "no output"
        super().__init__(
            "CLONE_FAILED", f"git clone exited with {returncode}: {detail}"
        )
