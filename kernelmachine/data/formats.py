"""Structured instance types for kernel machines."""

from dataclasses import dataclass
from typing import Dict, Optional
import jax.numpy as jnp
from jaxtyping import Array, Float


@dataclass(frozen=True)
class SampleCollection:
    """
    A bag of samples drawn from one location or entity.
    
    Used as an instance type for distribution kernels. It is not a raw
    numeric vector, so models built on it accept only native instances.
    
    Attributes:
        samples: Array of shape (n_samples, n_features)
        id: Identifier for this collection
        metadata: Optional dict for additional info (coordinates, etc.)
    """
    samples: Float[Array, "n_samples n_features"]
    id: str
    metadata: Optional[Dict] = None
    
    @property
    def n_samples(self) -> int:
        """Number of samples in this collection."""
        return self.samples.shape[0]
    
    @property
    def n_features(self) -> int:
        """Number of features per sample."""
        return self.samples.shape[1]
    
    def mean_embedding(self) -> Float[Array, "n_features"]:
        """Compute the empirical mean of samples."""
        return jnp.mean(self.samples, axis=0)
