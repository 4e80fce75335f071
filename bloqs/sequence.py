from __future__ import annotations

from abc import ABC, abstractmethod
from .types import *

# --- block operations ---
from .extensions.core import _BlockOperations

# --- accessors ---
from .extensions.terminal import TerminalAccessor

# --- abstract base class ---

class ISeq(ABC, Generic[T]):
    @abstractmethod
    def _get_data(self) -> Tuple[T, ...]:
        """get the underlying data as a tuple"""
        pass

# --- base sequence implementation ---

class _BaseSeq(ISeq[T]):
    def __init__(self, items: Iterable[T] = ()):
        """materialize items once; the result is never mutated afterwards"""
        data = tuple(items)
        for index, item in enumerate(data):
            if item is None:
                raise AbsentValueError(
                    f"sequences cannot hold None (index {index}); store NULL instead")
        self._data = data

    def _get_data(self) -> Tuple[T, ...]:
        return self._data

    def __iter__(self) -> Iterator[T]:
        return iter(self._get_data())

    def __len__(self) -> int:
        return self.to.count()

    def __contains__(self, item: Any) -> bool:
        return item in self._get_data()

    def __getitem__(self, index: Union[int, slice]):
        if isinstance(index, slice):
            return type(self)(self._get_data()[index])
        return self._get_data()[index]

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, _BaseSeq):
            return self._get_data() == other._get_data()
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._get_data())

    def __repr__(self) -> str:
        return f"Seq({list(self._get_data())!r})"

# --- main sequence class ---

class Seq(
    _BaseSeq[T],
    _BlockOperations[T]
):
    """an ordered, immutable sequence with block-style traversal operations."""
    def __init__(self, items: Iterable[T] = ()):
        super().__init__(items)
        self.to = TerminalAccessor(self)
