from typing import Any, Dict, Optional


class ItemsApiError(Exception):
    """Base exception for all items API errors.

    Every error the operations raise knows how it is rendered: ``status_code``
    is the HTTP status and ``response_body`` the plain-text body returned to
    the caller. Subclasses override either when their response differs from
    a 500 carrying the message.

    Attributes:
        message: Error text, returned to the caller unless overridden
        original_error: The original exception that caused this error (if any)
        context: Structured details for logging, never sent to the caller
    """

    status_code = 500

    def __init__(self, message: str, original_error: Optional[Exception] = None, context: Optional[Dict[str, Any]] = None):
        self.message = message
        self.original_error = original_error
        self.context = context or {}
        super().__init__(message)

    @property
    def response_body(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(status_code={self.status_code}, message={self.message!r}, context={self.context!r})"
