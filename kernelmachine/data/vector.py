"""Named, immutable, homogeneously typed columns."""

from collections.abc import Iterator
from typing import Iterable, Union
import numpy as np
import pandas as pd

from ..exceptions import UnsupportedOperationError


class BaseVector:
    """
    Capability set shared by all typed columns.
    
    Every typed getter fails by default; a concrete column kind overrides
    the getters its element type supports without loss.
    
    Parameters:
        name: Column name
        data: Array of the column's dtype, copied into a read-only backing array
    """
    
    def __init__(self, name: str, data: np.ndarray):
        data = np.array(data, copy=True)
        data.setflags(write=False)
        self._name = name
        self._data = data
    
    @property
    def name(self) -> str:
        return self._name
    
    def type(self) -> np.dtype:
        """Element type of the column."""
        return self._data.dtype
    
    def size(self) -> int:
        return self._data.shape[0]
    
    def __len__(self) -> int:
        return self.size()
    
    def __iter__(self):
        return (self.get(i) for i in range(self.size()))
    
    def array(self) -> np.ndarray:
        """The read-only backing array, in original order."""
        return self._data
    
    def get(self, i: int):
        return self._data[i].item()
    
    def __getitem__(self, i: int):
        return self.get(i)
    
    def _unsupported(self, target: str) -> UnsupportedOperationError:
        return UnsupportedOperationError(f"cast {self.type()} to {target}")
    
    def get_byte(self, i: int) -> int:
        raise self._unsupported("byte")
    
    def get_short(self, i: int) -> int:
        raise self._unsupported("short")
    
    def get_int(self, i: int) -> int:
        raise self._unsupported("int")
    
    def get_long(self, i: int) -> int:
        raise self._unsupported("long")
    
    def get_float(self, i: int) -> float:
        raise self._unsupported("float")
    
    def get_double(self, i: int) -> float:
        raise self._unsupported("double")
    
    def to_list(self) -> list:
        return self._data.tolist()
    
    def to_series(self) -> pd.Series:
        """Copy the column into a pandas Series named after it."""
        return pd.Series(self._data.copy(), name=self._name)
    
    def to_string(self, n: int) -> str:
        """
        Bounded preview of the column.
        
        Parameters:
            n: Number of leading elements to show
        
        Returns:
            e.g. "[1.0, 2.0, 3.0, ... 2 more]"
        """
        if n < 0:
            raise ValueError("n must be non-negative")
        size = self.size()
        suffix = "]" if n >= size else f", ... {size - n:,} more]"
        return "[" + ", ".join(repr(self.get(i)) for i in range(min(n, size))) + suffix
    
    def __str__(self) -> str:
        return self.to_string(10)
    
    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._name!r}, {self.to_string(10)})"


class DoubleVector(BaseVector):
    """
    An immutable float64 column.
    
    Only the native double accessor succeeds: a float64 cannot be narrowed
    losslessly, so byte/short/int/long/float reads raise
    UnsupportedOperationError.
    """
    
    @classmethod
    def of(cls, name: str, data: Union[np.ndarray, Iterable[float]]) -> "DoubleVector":
        """
        Create a named double vector.
        
        Parameters:
            name: Name of the vector
            data: A sequence or array of floats (copied), or a one-shot
                iterator of floats (drained eagerly)
        
        Returns:
            DoubleVector backed by a read-only float64 array
        """
        if isinstance(data, Iterator):
            array = np.fromiter(data, dtype=np.float64)
        else:
            array = np.asarray(data, dtype=np.float64)
            if array.ndim != 1:
                raise ValueError(f"Expected a 1-D sequence, got shape {array.shape}")
        return cls(name, array)
    
    def get_double(self, i: int) -> float:
        return float(self._data[i])
    
    def get(self, i: int) -> float:
        return self.get_double(i)
