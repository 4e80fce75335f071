import typing
from .types import *

if typing.TYPE_CHECKING:
    from .sequence import Seq

def from_iterable(data: Iterable[T]) -> 'Seq[T]':
    """create a sequence from an iterable; a sequence is returned as-is"""
    from .sequence import Seq
    if isinstance(data, Seq): return data
    return Seq(data)

def of(*items: T) -> 'Seq[T]':
    """create a sequence from the arguments"""
    from .sequence import Seq
    return Seq(items)

def empty() -> 'Seq[Any]':
    """create empty sequence"""
    from .sequence import Seq
    return Seq()

def from_range(start: int, count: int) -> 'Seq[int]':
    """create sequence of count consecutive integers"""
    from .sequence import Seq
    if count < 0: raise ValueError(f"count must be non-negative, got {count}")
    return Seq(range(start, start + count))

def repeat(item: T, count: int) -> 'Seq[T]':
    """create sequence with repeated item"""
    from .sequence import Seq
    if count < 0: raise ValueError(f"count must be non-negative, got {count}")
    return Seq([item] * count)

# --- aliases ---
seq = from_iterable
S = from_iterable
