from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    List, Tuple
)

T = TypeVar('T')
U = TypeVar('U')
R = TypeVar('R')

Predicate = Callable[[T], bool]
Transform = Callable[[T], U]
Accumulator = Callable[[R, T], R]
Action = Callable[[T], Any]


class AbsentValueError(ValueError):
    """raised when none would end up as an element of a sequence"""
    pass


class _Null:
    """explicit placeholder for 'nothing here', storable where none is not"""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool: return False

    def __repr__(self) -> str: return "NULL"

    def __reduce__(self):
        return (_Null, ())


NULL = _Null()


def is_null(value: Any) -> bool:
    """true if value is the NULL placeholder"""
    return value is NULL
