"""
Result normalization for tool calls.

The backend payload is passed through untouched; only failures are reshaped
into a message the calling agent can read.
"""

from dataclasses import dataclass
from typing import Optional, Union

from .errors import AdapterError, ErrorKind


@dataclass
class CallResult:
    """Outcome of one tool call as returned to the protocol layer."""

    ok: bool
    payload: str = ""
    error_message: Optional[str] = None
    error_kind: Optional[ErrorKind] = None
    elapsed_ms: Optional[float] = None

    def to_text(self) -> str:
        """Text handed back to the agent: the payload, or the error message."""
        if self.ok:
            return self.payload
        return self.error_message or ""


def error_kind_of(error: BaseException) -> ErrorKind:
    if isinstance(error, AdapterError):
        return error.kind
    return ErrorKind.INTERNAL


def error_text_of(error: BaseException) -> str:
    if isinstance(error, AdapterError):
        return error.message
    text = str(error).strip()
    return text or type(error).__name__


class ResultWrapper:
    """Convert a transport outcome into a CallResult. Never raises."""

    @staticmethod
    def wrap(
        payload: Optional[Union[bytes, str]],
        error: Optional[BaseException],
        context: Optional[str] = None,
    ) -> CallResult:
        """
        Wrap a payload or an error.

        Args:
            payload: Raw response body from the transport
            error: Failure raised by the transport, if any
            context: Prefix for the error message, e.g. "Failed to delete user"

        Returns:
            CallResult with ok set accordingly
        """
        if error is not None:
            return ResultWrapper.failure(error, context)

        if payload is None:
            text = ""
        elif isinstance(payload, bytes):
            text = payload.decode("utf-8", errors="replace")
        else:
            text = payload
        return CallResult(ok=True, payload=text)

    @staticmethod
    def failure(error: BaseException, context: Optional[str] = None) -> CallResult:
        message = error_text_of(error)
        if context:
            message = f"{context}: {message}"
        return CallResult(ok=False, error_message=message, error_kind=error_kind_of(error))
