"""Success/failure container for parse outcomes."""
from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar, Union

T = TypeVar('T')
U = TypeVar('U')


@dataclass(frozen=True)
class Success(Generic[T]):
    """A successful outcome carrying a value."""
    value: T

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False

    def get(self) -> T:
        return self.value

    def get_or(self, default: T) -> T:
        return self.value

    def map(self, fn: Callable[[T], U]) -> 'Success[U]':
        return Success(fn(self.value))


@dataclass(frozen=True)
class Failure:
    """A failed outcome. Each failure is a distinct value."""
    reason: Optional[str] = None

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True

    def get(self):
        raise ValueError(
            f"Cannot get value from a failure: {self.reason or 'no value'}"
        )

    def get_or(self, default):
        return default

    def map(self, fn: Callable) -> 'Failure':
        return self


Result = Union[Success[T], Failure]
