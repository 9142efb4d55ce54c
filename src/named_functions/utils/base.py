"""
Result type for the macro entry point.

Rust Pattern: core::result::Result
"""

from typing import Callable, Generic, TypeVar, Union
from dataclasses import dataclass
from enum import Enum

T = TypeVar('T')
E = TypeVar('E')


class ResultTag(Enum):
    """Result discriminant"""
    OK = "ok"
    ERR = "err"


@dataclass
class Result(Generic[T, E]):
    """Result type: Ok(T) | Err(E)"""
    tag: ResultTag
    value: Union[T, E]

    @classmethod
    def ok(cls, value: T) -> 'Result[T, E]':
        """Create successful result"""
        return cls(ResultTag.OK, value)

    @classmethod
    def err(cls, error: E) -> 'Result[T, E]':
        """Create error result"""
        return cls(ResultTag.ERR, error)

    def is_ok(self) -> bool:
        return self.tag == ResultTag.OK

    def is_err(self) -> bool:
        return self.tag == ResultTag.ERR

    def unwrap(self) -> T:
        """Extract Ok value (throws if Err)"""
        if self.is_err():
            raise ValueError(f"Called unwrap() on Err: {self.value}")
        return self.value

    def unwrap_err(self) -> E:
        """Extract Err value (throws if Ok)"""
        if self.is_ok():
            raise ValueError(f"Called unwrap_err() on Ok: {self.value}")
        return self.value

    def unwrap_or_else(self, func: Callable[[E], T]) -> T:
        """Extract Ok value or compute one from the error"""
        if self.is_ok():
            return self.value
        return func(self.value)

    def __str__(self) -> str:
        if self.is_ok():
            return f"Ok({self.value})"
        return f"Err({self.value})"

    def __repr__(self) -> str:
        return self.__str__()
