"""
Result - Represents the outcome of an event execution.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Result:
    """
    Immutable outcome of an event, a middleware stack, or a whole chain.

    ``error`` is a string if and only if ``success`` is False. Build instances
    through :meth:`ok` and :meth:`fail` rather than the constructor.
    """

    success: bool
    error: Optional[str] = None

    def __post_init__(self):
        if self.success and self.error is not None:
            raise ValueError("A successful Result cannot carry an error")
        if not self.success and self.error is None:
            object.__setattr__(self, 'error', '')

    @staticmethod
    def ok():
        """Create a successful result."""
        return Result(True)

    @staticmethod
    def fail(error):
        """
        Create a failed result.

        Args:
            error: Error message, or an exception whose text becomes the
                message. An exception without text is named by its class.
                None becomes an empty message; the chain reports that as an
                unknown error in the failing event.

        Returns:
            Result instance indicating failure
        """
        if error is None:
            return Result(False, '')
        message = str(error)
        if not message and isinstance(error, BaseException):
            message = type(error).__name__
        return Result(False, message)

    def is_success(self):
        """Return True if the result indicates success."""
        return self.success

    def is_failure(self):
        """Return True if the result indicates failure."""
        return not self.success

    def __bool__(self):
        return self.success

    def __repr__(self):
        if self.success:
            return "Result.ok()"
        return f"Result.fail({self.error!r})"

    def __str__(self):
        if self.success:
            return "Success"
        return f"Failure: {self.error}"
