"""Result types for the environment check pipeline.

A check run ends in one of three outcomes:
- Ok: the pipeline ran and produced a value (a CheckReport)
- Pass: the pipeline was skipped on purpose (gated off, nothing to check)
- Err: something went wrong; carries a message and an error code

The public entry point folds every outcome into a successful return value,
so callers never see an exception from the check.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, Optional, TypeVar, cast

T = TypeVar("T")
U = TypeVar("U")


class Result(ABC, Generic[T]):
    """Base class for check outcomes."""

    @abstractmethod
    def is_ok(self) -> bool:
        """Return True if this is an Ok result."""
        pass

    @abstractmethod
    def is_err(self) -> bool:
        """Return True if this is an Err result."""
        pass

    @abstractmethod
    def is_pass(self) -> bool:
        """Return True if this is a Pass result."""
        pass

    @abstractmethod
    def unwrap(self) -> T:
        """Return the value from Ok, or raise ValueError.

        Raises:
            ValueError: If this is not an Ok result.
        """
        pass

    @abstractmethod
    def unwrap_or(self, default: T) -> T:
        """Return the value from Ok, or default otherwise."""
        pass


class Ok(Result[T]):
    """The pipeline ran to completion."""

    def __init__(self, value: T):
        self._value = value

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def is_pass(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self._value

    def unwrap_or(self, default: T) -> T:
        return self._value

    def __repr__(self) -> str:
        return f"Ok({self._value!r})"

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Ok):
            return False
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(("Ok", self._value))


class Err(Result[T]):
    """The pipeline failed; the failure is reported, never raised."""

    def __init__(self, error: str, code: Optional[str] = None):
        """Initialize Err with error information.

        Args:
            error: Message describing what went wrong.
            code: Optional error code for categorization.
        """
        self.error = error
        self.code = code

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def is_pass(self) -> bool:
        return False

    def unwrap(self) -> T:
        """Raise ValueError with error message."""
        raise ValueError(self.error)

    def unwrap_or(self, default: T) -> T:
        return default

    def __repr__(self) -> str:
        if self.code:
            return f"Err({self.error!r}, code={self.code!r})"
        return f"Err({self.error!r})"

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Err):
            return False
        return self.error == other.error and self.code == other.code

    def __hash__(self) -> int:
        return hash(("Err", self.error, self.code))


class Pass(Result[T]):
    """The pipeline was skipped; message says why."""

    def __init__(self, message: Optional[str] = None):
        self.message = message

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return False

    def is_pass(self) -> bool:
        return True

    def unwrap(self) -> T:
        """Raise ValueError."""
        raise ValueError("Cannot unwrap Pass result")

    def unwrap_or(self, default: T) -> T:
        return default

    def __repr__(self) -> str:
        if self.message:
            return f"Pass({self.message!r})"
        return "Pass()"

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Pass):
            return False
        return self.message == other.message

    def __hash__(self) -> int:
        return hash(("Pass", self.message))


def fold(
    result: Result[T],
    on_ok: Callable[[T], U],
    on_err: Callable[[str], U],
    on_pass: Optional[Callable[[Optional[str]], U]] = None,
) -> U:
    """Fold a Result to a single value.

    Applies the appropriate function based on result type:
    - If Ok, calls on_ok(value)
    - If Err, calls on_err(error)
    - If Pass, calls on_pass(message) if provided, else on_ok(None)

    Example:
        >>> fold(Err("boom"), on_ok=lambda r: True, on_err=lambda e: True)
        True
    """
    if result.is_ok():
        return on_ok(result.unwrap())
    elif result.is_err():
        err_result = cast(Any, result)
        return on_err(err_result.error)
    else:  # Pass
        if on_pass is not None:
            pass_result = cast(Any, result)
            return on_pass(pass_result.message)
        return on_ok(None)  # type: ignore
