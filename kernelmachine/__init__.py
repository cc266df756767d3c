"""
kernelmachine - Evaluation of fitted kernel machines

Kernel machines predict with a weighted sum of kernel evaluations over
stored instances. Typed columns and tabular records bridge generic row
data into the raw vectors the kernels consume.
"""

__version__ = "0.1.0"

# Exceptions
from .exceptions import UnsupportedOperationError

# Data structures
from .data.formats import SampleCollection
from .data.record import Record, Row
from .data.vector import BaseVector, DoubleVector

# Kernels
from .kernels.base import MercerKernel
from .kernels.linear import LinearKernel, PolynomialKernel
from .kernels.rbf import GaussianKernel
from .kernels.distribution import MeanEmbeddingKernel

# Models
from .models.base import Regression
from .models.kernel_machine import InstanceKind, KernelMachine

__all__ = [
    # Version
    "__version__",
    # Exceptions
    "UnsupportedOperationError",
    # Data structures
    "SampleCollection",
    "Record",
    "Row",
    "BaseVector",
    "DoubleVector",
    # Kernels
    "MercerKernel",
    "LinearKernel",
    "PolynomialKernel",
    "GaussianKernel",
    "MeanEmbeddingKernel",
    # Models
    "Regression",
    "InstanceKind",
    "KernelMachine",
]
