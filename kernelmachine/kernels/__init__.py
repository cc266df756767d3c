"""Kernel implementations for kernelmachine."""

from .base import MercerKernel
from .linear import LinearKernel, PolynomialKernel
from .rbf import GaussianKernel
from .distribution import MeanEmbeddingKernel

__all__ = [
    "MercerKernel",
    "LinearKernel",
    "PolynomialKernel",
    "GaussianKernel",
    "MeanEmbeddingKernel",
]
