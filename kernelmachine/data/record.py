"""Tabular records: one row of named, typed fields."""

from typing import Any, Protocol, Sequence, Tuple, Union, runtime_checkable
import numpy as np
import pandas as pd


@runtime_checkable
class Record(Protocol):
    """Protocol for tabular records that can be materialized as a float64 vector."""
    
    def to_array(self) -> np.ndarray:
        ...


class Row:
    """
    An immutable, ordered collection of named fields.
    
    Fields are accessible by position (``row[0]``) or by name
    (``row["age"]``).
    
    Parameters:
        names: Field names, in order
        values: Field values, one per name
    """
    
    __slots__ = ("_names", "_values", "_index")
    
    def __init__(self, names: Sequence[str], values: Sequence[Any]):
        names = tuple(str(name) for name in names)
        values = tuple(values)
        if len(names) != len(values):
            raise ValueError(
                f"Row has {len(names)} names but {len(values)} values"
            )
        self._names = names
        self._values = values
        self._index = {name: i for i, name in enumerate(names)}
    
    @classmethod
    def from_series(cls, series: pd.Series) -> "Row":
        """Build a row from a pandas Series, using its index as field names."""
        return cls(list(series.index), series.tolist())
    
    @property
    def names(self) -> Tuple[str, ...]:
        return self._names
    
    def get(self, i: int) -> Any:
        """Value of the i-th field."""
        return self._values[i]
    
    def index_of(self, name: str) -> int:
        """Position of the named field."""
        try:
            return self._index[name]
        except KeyError:
            raise KeyError(f"Row has no field named '{name}'") from None
    
    def __getitem__(self, key: Union[int, str]) -> Any:
        if isinstance(key, str):
            return self._values[self.index_of(key)]
        return self._values[key]
    
    def __len__(self) -> int:
        return len(self._values)
    
    def __iter__(self):
        return iter(self._values)
    
    def to_array(self) -> np.ndarray:
        """
        Materialize the row as a float64 vector.
        
        Raises:
            ValueError: If a field cannot be converted to float
        """
        try:
            return np.array(self._values, dtype=np.float64)
        except (TypeError, ValueError) as e:
            raise ValueError(f"Row cannot be converted to a numeric array: {e}") from e
    
    def __eq__(self, other) -> bool:
        if not isinstance(other, Row):
            return NotImplemented
        return self._names == other._names and self._values == other._values
    
    def __hash__(self) -> int:
        return hash((self._names, self._values))
    
    def __repr__(self) -> str:
        fields = ", ".join(f"{n}: {v!r}" for n, v in zip(self._names, self._values))
        return f"Row({fields})"
