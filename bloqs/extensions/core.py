from __future__ import annotations
import typing
import logging
from functools import reduce
from ..types import *

if typing.TYPE_CHECKING:
    from ..sequence import Seq

logger = logging.getLogger(__name__)


class _BlockOperations(Generic[T]):
    def each(self: 'Seq[T]', action: Action[T]) -> None:
        """call action once per element, in order"""
        for index, item in enumerate(self._get_data()):
            try:
                action(item)
            except Exception:
                logger.debug(f"each stopped at index {index}")
                raise

    def match(self: 'Seq[T]', predicate: Predicate[T]) -> Optional[T]:
        """first element satisfying the predicate, or None"""
        for item in self._get_data():
            if predicate(item): return item
        return None

    def select(self: 'Seq[T]', predicate: Predicate[T]) -> 'Seq[T]':
        """keep elements satisfying the predicate"""
        from ..sequence import Seq
        data = self._get_data()
        kept = [x for x in data if predicate(x)]
        logger.debug(f"select kept {len(kept)} of {len(data)} elements")
        return Seq(kept)

    def reject(self: 'Seq[T]', predicate: Predicate[T]) -> 'Seq[T]':
        """drop elements satisfying the predicate"""
        from ..sequence import Seq
        data = self._get_data()
        kept = [x for x in data if not predicate(x)]
        logger.debug(f"reject dropped {len(data) - len(kept)} of {len(data)} elements")
        return Seq(kept)

    def partition(self: 'Seq[T]', predicate: Predicate[T]) -> Tuple['Seq[T]', 'Seq[T]']:
        """split into (selected, rejected) with one predicate call per element"""
        from ..sequence import Seq
        selected, rejected = [], []
        for item in self._get_data():
            (selected if predicate(item) else rejected).append(item)
        return Seq(selected), Seq(rejected)

    def map(self: 'Seq[T]', transform: Transform[T, U]) -> 'Seq[U]':
        """
        transform every element, keeping positions.
        the transform must produce a value for every element; returning None
        raises AbsentValueError. map to NULL and reject(is_null) to drop items.
        """
        from ..sequence import Seq
        result = []
        for index, item in enumerate(self._get_data()):
            try:
                value = transform(item)
            except Exception:
                logger.debug(f"map failed at index {index}")
                raise
            if value is None:
                raise AbsentValueError(
                    f"transform returned None for element at index {index}; return NULL instead")
            result.append(value)
        return Seq(result)

    def reduce(self: 'Seq[T]', initial: R, accumulator: Accumulator[R, T]) -> R:
        """left fold starting from initial"""
        data = self._get_data()
        logger.debug(f"reducing {len(data)} elements")
        return reduce(accumulator, data, initial)
