from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

from core.errors import NetworkError

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    value: T

    @property
    def is_success(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True, slots=True)
class Failure:
    error: NetworkError

    @property
    def is_success(self) -> bool:
        return False

    def unwrap(self):
        raise self.error


Result: TypeAlias = Success[T] | Failure

__all__ = ["Failure", "Result", "Success"]
