"""
Gateway module exceptions.
"""

from typing import Optional

from shoplist.shared.exceptions import ExternalServiceError


class RemoteRequestError(ExternalServiceError):
    """Raised when a call to the remote data store fails for any reason."""

    def __init__(
        self,
        message: str,
        method: str,
        path: str,
        status_code: Optional[int] = None,
    ):
        super().__init__(
            message,
            service="remote-store",
            code="REMOTE_REQUEST_FAILED",
            details={
                "method": method,
                "path": path,
                "status_code": status_code,
            },
        )
        self.status_code = status_code
