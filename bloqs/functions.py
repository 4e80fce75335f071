"""
free-function forms of the block operations.

every function accepts any finite iterable, materialized once with from_iterable
(a Seq passes through untouched), and delegates to the Seq method.

a Seq never holds None, so an input containing None raises AbsentValueError
before any callback runs: bloqs.match([None, 1], f) fails rather than
skipping the None. replace such entries with NULL first.
"""
import typing
from .types import *
from .factories import from_iterable

if typing.TYPE_CHECKING:
    from .sequence import Seq


def each(sequence: Iterable[T], action: Action[T]) -> None:
    """call action once per element, in order"""
    from_iterable(sequence).each(action)


def match(sequence: Iterable[T], predicate: Predicate[T]) -> Optional[T]:
    """first element satisfying predicate, or None"""
    return from_iterable(sequence).match(predicate)


def select(sequence: Iterable[T], predicate: Predicate[T]) -> 'Seq[T]':
    return from_iterable(sequence).select(predicate)


def reject(sequence: Iterable[T], predicate: Predicate[T]) -> 'Seq[T]':
    return from_iterable(sequence).reject(predicate)


def partition(sequence: Iterable[T], predicate: Predicate[T]) -> Tuple['Seq[T]', 'Seq[T]']:
    """(select, reject) in one pass"""
    return from_iterable(sequence).partition(predicate)


def map(sequence: Iterable[T], transform: Transform[T, U]) -> 'Seq[U]':
    """transform each element; None results raise AbsentValueError"""
    return from_iterable(sequence).map(transform)


def reduce(sequence: Iterable[T], initial: R, accumulator: Accumulator[R, T]) -> R:
    """left fold of accumulator over sequence, starting from initial"""
    return from_iterable(sequence).reduce(initial, accumulator)
