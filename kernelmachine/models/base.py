"""Generic prediction surface shared by regression models."""

from typing import Any, Iterable
import numpy as np
import pandas as pd

from ..data.record import Row
from ..exceptions import UnsupportedOperationError


class Regression:
    """
    Base class for fitted regression models.
    
    Subclasses implement ``predict`` for their native instance type and may
    override ``predict_tuple`` when they can interpret tabular records.
    """
    
    def predict(self, x: Any) -> float:
        raise NotImplementedError
    
    def predict_tuple(self, record) -> float:
        """Predict from a tabular record. Unsupported unless overridden."""
        raise UnsupportedOperationError(
            f"{type(self).__name__} cannot predict from a tabular record"
        )
    
    def predict_all(self, xs: Iterable[Any]) -> np.ndarray:
        """
        Predict each instance in order.
        
        Parameters:
            xs: Iterable of native instances
        
        Returns:
            Array of predictions, shape (n,)
        """
        return np.array([self.predict(x) for x in xs], dtype=np.float64)
    
    def predict_frame(self, df: pd.DataFrame) -> np.ndarray:
        """
        Predict every row of a DataFrame through ``predict_tuple``.
        
        Parameters:
            df: DataFrame whose columns are the model's input fields
        
        Returns:
            Array of predictions, shape (len(df),)
        """
        names = [str(c) for c in df.columns]
        return np.array(
            [self.predict_tuple(Row(names, values)) for values in df.itertuples(index=False, name=None)],
            dtype=np.float64,
        )
