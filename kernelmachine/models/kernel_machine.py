"""Kernel machine: a weighted sum of kernel evaluations over stored instances."""

import enum
import warnings
from typing import Any, Optional, Sequence, Tuple, Union
import jax
import numpy as np
import pandas as pd

from .base import Regression
from ..data.record import Record, Row
from ..exceptions import UnsupportedOperationError
from ..kernels.base import MercerKernel


class InstanceKind(enum.Enum):
    """How a kernel machine's instances are represented."""
    RAW_VECTOR = "raw_vector"
    OPAQUE = "opaque"


def _is_array(x: Any) -> bool:
    return isinstance(x, (np.ndarray, jax.Array))


def _is_float_array(x: Any, ndim: int) -> bool:
    return (
        _is_array(x)
        and x.ndim == ndim
        and np.issubdtype(x.dtype, np.floating)
    )


def _is_raw_vector(x: Any) -> bool:
    if _is_array(x):
        return _is_float_array(x, 1)
    if isinstance(x, (list, tuple)):
        return len(x) > 0 and all(isinstance(v, float) for v in x)
    return False


def infer_instance_kind(instances: Any) -> InstanceKind:
    """
    Decide whether instances are raw numeric vectors.

    Raw vectors are a 2-D floating array (numpy or jax), or a non-empty
    sequence whose elements are all 1-D floating arrays or non-empty
    lists/tuples of floats. Everything else, including an empty list, is opaque.
    """
    if _is_array(instances):
        if _is_float_array(instances, 2):
            return InstanceKind.RAW_VECTOR
        return InstanceKind.OPAQUE
    if len(instances) > 0 and all(_is_raw_vector(x) for x in instances):
        return InstanceKind.RAW_VECTOR
    return InstanceKind.OPAQUE


class KernelMachine(Regression):
    """
    Instance-based regression model built on a kernel.
    
    Support vector regression, Gaussian process posterior means and kernel
    ridge regression all predict with the same form:
    
        f(x) = b + Σ_i w_i k(x, x_i)
    
    where x_i are the stored instances (e.g. support vectors), w_i their
    weights and b the intercept. This class holds an already fitted model
    and evaluates it; it does not train.
    
    Instances may be of any type the kernel understands. When they are raw
    numeric vectors, tabular records can also be predicted by materializing
    them as float64 arrays.
    
    Parameters:
        kernel: Kernel function with a ``k(x, y)`` method
        instances: The instances of the model, e.g. support vectors
        weights: One weight per instance
        intercept: Additive bias
        kind: Instance representation; inferred from ``instances`` if None
    """
    
    def __init__(
        self,
        kernel: MercerKernel,
        instances: Union[np.ndarray, Sequence[Any]],
        weights: Union[np.ndarray, Sequence[float]],
        intercept: float = 0.0,
        kind: Optional[InstanceKind] = None
    ):
        weights = np.array(weights, dtype=np.float64)
        if weights.ndim != 1:
            raise ValueError(f"weights must be 1-D, got shape {weights.shape}")
        if len(weights) != len(instances):
            raise ValueError(
                f"weights and instances must have the same length, "
                f"got {len(weights)} weights and {len(instances)} instances"
            )
        
        if kind is None:
            kind = infer_instance_kind(instances)
        
        if kind is InstanceKind.RAW_VECTOR:
            try:
                stored = np.array(instances, dtype=np.float64)
            except (TypeError, ValueError) as e:
                raise ValueError(f"instances are not raw numeric vectors: {e}") from e
            if stored.size == 0 and stored.ndim == 1:
                stored = stored.reshape(0, 0)
            if stored.ndim != 2:
                raise ValueError(
                    f"raw vector instances must form a 2-D array, got shape {stored.shape}"
                )
            stored.setflags(write=False)
        else:
            stored = tuple(instances)
        weights.setflags(write=False)
        
        if len(weights) == 0:
            warnings.warn("Kernel machine has no instances; every prediction is the intercept")
        
        self._kernel = kernel
        self._instances = stored
        self._weights = weights
        self._intercept = float(intercept)
        self._kind = kind
    
    @property
    def kernel(self) -> MercerKernel:
        """The kernel function."""
        return self._kernel
    
    @property
    def instances(self) -> Union[np.ndarray, Tuple[Any, ...]]:
        """The instances of the model, read-only."""
        return self._instances
    
    @property
    def weights(self) -> np.ndarray:
        """The weights of instances, read-only."""
        return self._weights
    
    @property
    def intercept(self) -> float:
        return self._intercept
    
    bias = intercept
    
    @property
    def kind(self) -> InstanceKind:
        return self._kind
    
    @property
    def instance_is_raw_vector(self) -> bool:
        return self._kind is InstanceKind.RAW_VECTOR
    
    @property
    def supports_tuple(self) -> bool:
        """True if ``predict_tuple`` can interpret tabular records."""
        return self.instance_is_raw_vector
    
    def __len__(self) -> int:
        return len(self._weights)
    
    def predict(self, x: Any) -> float:
        """
        Predict the response of an instance.
        
        Terms are accumulated in instance order. Tabular records (anything
        with ``to_array``, or a pandas Series) are routed to ``predict_tuple``.
        
        Parameters:
            x: Instance of the kernel's type, or a tabular record
        
        Returns:
            b + Σ_i w_i k(x, x_i)
        """
        if isinstance(x, (Record, pd.Series)):
            return self.predict_tuple(x)
        
        f = self._intercept
        for w, instance in zip(self._weights, self._instances):
            f += float(w) * self._kernel.k(x, instance)
        return f
    
    def predict_tuple(self, record: Union[Record, pd.Series]) -> float:
        """
        Predict from a tabular record.
        
        Only defined when the instances are raw numeric vectors.
        
        Raises:
            UnsupportedOperationError: If instances are opaque
        """
        if not self.instance_is_raw_vector:
            raise UnsupportedOperationError(
                "cannot predict from a tabular record: instances are not raw numeric vectors"
            )
        if isinstance(record, pd.Series):
            record = Row.from_series(record)
        return self.predict(record.to_array())
    
    def __str__(self) -> str:
        return (
            f"Kernel Machine ({self._kernel}): {len(self._weights)} vectors, "
            f"intercept = {self._intercept:.4f}"
        )
