"""Result type for functional error handling.

This module implements a two-variant Result type (``Success`` / ``Failure``)
that makes expected failures explicit in type signatures instead of relying on
``None`` returns or exceptions for control flow.

Neither variant accepts ``None`` as its payload, so ``get_data()`` and
``get_error()`` can use ``None`` to mean "absent".
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type
U = TypeVar("U")  # Map target type


class UnwrapError(RuntimeError):
    """Raised when the value of a failure result is forced out with get_or_throw()."""

    def __init__(self, error: Any) -> None:
        super().__init__(f"Result is failure: {error}")
        self.error = error


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful result containing a value."""

    data: T

    def __post_init__(self) -> None:
        if self.data is None:
            raise ValueError("Success data cannot be None")

    def is_success(self) -> bool:
        """Check if this is a success result."""
        return True

    def is_failure(self) -> bool:
        """Check if this is a failure result."""
        return False

    def get_data(self) -> T | None:
        """Get the value (present because this is Success)."""
        return self.data

    def get_error(self) -> None:
        """Get the error (absent because this is Success)."""
        return None

    def map(self, func: Callable[[T], U]) -> "Result[U, Any]":
        """Transform the success value."""
        return Success(func(self.data))

    def flat_map(self, func: "Callable[[T], Result[U, E]]") -> "Result[U, E]":
        """Chain a fallible transformation of the success value."""
        return func(self.data)

    def get_or_else(self, default: T) -> T:
        """Get the value or default (returns value because this is Success)."""
        return self.data

    def get_or_throw(self) -> T:
        """Get the value (safe because this is Success)."""
        return self.data

    def __repr__(self) -> str:
        return f"Success({self.data!r})"


@dataclass(frozen=True)
class Failure(Generic[E]):
    """Failure result containing an error."""

    error: E

    def __post_init__(self) -> None:
        if self.error is None:
            raise ValueError("Failure error cannot be None")

    def is_success(self) -> bool:
        """Check if this is a success result."""
        return False

    def is_failure(self) -> bool:
        """Check if this is a failure result."""
        return True

    def get_data(self) -> None:
        """Get the value (absent because this is Failure)."""
        return None

    def get_error(self) -> E | None:
        """Get the error (present because this is Failure)."""
        return self.error

    def map(self, func: Callable[[Any], Any]) -> "Failure[E]":
        """Transform the success value (does nothing for Failure)."""
        return self

    def flat_map(self, func: Callable[[Any], Any]) -> "Failure[E]":
        """Chain a fallible transformation (short-circuits for Failure)."""
        return self

    def get_or_else(self, default: T) -> T:
        """Get the value or default (returns default because this is Failure)."""
        return default

    def get_or_throw(self) -> Any:
        """Get the value (raises UnwrapError because this is Failure).

        Only call this at a boundary that cannot itself return a Result.
        """
        cause = self.error if isinstance(self.error, BaseException) else None
        raise UnwrapError(self.error) from cause

    def __repr__(self) -> str:
        return f"Failure({self.error!r})"


# Type alias for clearer function signatures
Result = Union[Success[T], Failure[E]]


def success(data: T) -> Success[T]:
    """Create a success result. Raises ValueError if data is None."""
    return Success(data)


def failure(error: E) -> Failure[E]:
    """Create a failure result. Raises ValueError if error is None."""
    return Failure(error)
