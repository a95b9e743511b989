"""
Railway-style result values.

A Result holds either a value or an error. Steps are chained with ``then`` and
the chain stops at the first failure, carrying its diagnostic along.
"""

from typing import Any, Callable, Generic, Optional, TypeVar

T = TypeVar("T")


class ResultError(Exception):
    """Raised by get_value_or_raise when a failed Result carries a plain message."""


class Result(Generic[T]):
    """Either a successful value or an error."""

    __slots__ = ("_value", "_error", "_is_success")

    def __init__(self, value: Optional[T] = None, error: Any = None, is_success: bool = True):
        self._value = value
        self._error = error
        self._is_success = is_success

    @classmethod
    def ok(cls, value: Optional[T] = None) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def fail(cls, error: Any) -> "Result[T]":
        if error is None:
            raise ValueError("A failed Result needs an error")
        return cls(error=error, is_success=False)

    @classmethod
    def of(cls, func: Callable[[], T], error_message: Optional[str] = None) -> "Result[T]":
        """
        Run ``func`` and capture any exception it raises as a failure.

        Args:
            func: Zero-argument callable producing the value
            error_message: Optional prefix for the error text

        Returns:
            Result wrapping the return value or the error
        """
        try:
            return cls.ok(func())
        except Exception as e:
            if error_message:
                return cls.fail(f"{error_message}. {e}")
            return cls.fail(str(e))

    @property
    def is_success(self) -> bool:
        return self._is_success

    @property
    def value(self) -> Optional[T]:
        return self._value

    @property
    def error(self) -> Any:
        return self._error

    @property
    def error_message(self) -> Optional[str]:
        return None if self._is_success else str(self._error)

    def then(self, func: Callable[[T], Any]) -> "Result":
        """Apply ``func`` to the value on success; pass failures through untouched."""
        if not self._is_success:
            return self
        outcome = func(self._value)
        if isinstance(outcome, Result):
            return outcome
        return Result.ok(outcome)

    def on_fail(self, func: Callable[[Any], Any]) -> "Result[T]":
        if not self._is_success:
            func(self._error)
        return self

    def refine_error(self, message: str) -> "Result[T]":
        """Prefix the error with ``message``; successes are returned unchanged."""
        if self._is_success:
            return self
        return Result.fail(f"{message}. {self._error}")

    def get_value_or_raise(self) -> T:
        if self._is_success:
            return self._value
        if isinstance(self._error, Exception):
            raise self._error
        raise ResultError(self._error)

    def __repr__(self) -> str:
        if self._is_success:
            return f"Result.ok({self._value!r})"
        return f"Result.fail({self._error!r})"
