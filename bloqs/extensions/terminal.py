from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *

if typing.TYPE_CHECKING:
    from ..sequence import Seq

class TerminalAccessor(Generic[T]):
    def __init__(self, seq_instance: 'Seq[T]'):
        self._seq = seq_instance

    def list(self) -> List[T]:
        """convert to a new list"""
        return list(self._seq._get_data())

    def tuple(self) -> Tuple[T, ...]:
        """the underlying tuple"""
        return self._seq._get_data()

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self._seq._get_data())

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(list(self._seq._get_data()))

    def df(self) -> pd.DataFrame:
        """convert a sequence of records to a pandas dataframe"""
        return pd.DataFrame(list(self._seq._get_data()))

    def count(self, predicate: Optional[Predicate[T]] = None) -> int:
        """count elements"""
        if predicate is None: return len(self._seq._get_data())
        return sum(1 for x in self._seq._get_data() if predicate(x))
