"""Distribution-level kernels via mean embeddings."""

import jax.numpy as jnp
from typing import List, Union
from jaxtyping import Array, Float

from .linear import LinearKernel, PolynomialKernel
from .rbf import GaussianKernel
from ..data.formats import SampleCollection


class MeanEmbeddingKernel:
    """
    Kernel on distributions via mean embeddings.
    
    Given two sets of samples X = {x_1, ..., x_m} and Y = {y_1, ..., y_n},
    computes similarity as:
    
    K(X, Y) = (1/mn) Σ_i Σ_j k(x_i, y_j)
    
    This is equivalent to the inner product of mean embeddings in RKHS:
    <μ_X, μ_Y>_H where μ_X = (1/m) Σ_i φ(x_i)
    
    Instances of this kernel are SampleCollection objects rather than raw
    vectors, so a kernel machine built on it cannot bridge tabular records.
    
    Parameters:
        base_kernel: The point-level kernel, evaluated as a matrix
    """
    
    def __init__(
        self, 
        base_kernel: Union[GaussianKernel, LinearKernel, PolynomialKernel],
    ):
        self.base_kernel = base_kernel
    
    def __call__(
        self,
        X: Float[Array, "m d"],
        Y: Float[Array, "n d"]
    ) -> float:
        """
        Compute distribution similarity between sample sets X and Y.
        
        Parameters:
            X: First set of samples, shape (m, d)
            Y: Second set of samples, shape (n, d)
        
        Returns:
            Scalar similarity value
        """
        K = self.base_kernel(jnp.asarray(X), jnp.asarray(Y))  # (m, n)
        return float(jnp.mean(K))
    
    def k(self, x: SampleCollection, y: SampleCollection) -> float:
        """Similarity between two sample collections."""
        return self(x.samples, y.samples)
    
    def build_similarity_matrix(
        self,
        collections: List[SampleCollection]
    ) -> Float[Array, "N N"]:
        """
        Build the N×N similarity matrix between all collections.
        
        Parameters:
            collections: List of SampleCollection objects
        
        Returns:
            Similarity matrix of shape (N, N) where N = len(collections)
        """
        n = len(collections)
        
        if n == 0:
            return jnp.array([]).reshape(0, 0)
        
        K = jnp.zeros((n, n))
        
        for i in range(n):
            for j in range(i, n):
                k_ij = self.k(collections[i], collections[j])
                K = K.at[i, j].set(k_ij)
                if i != j:
                    K = K.at[j, i].set(k_ij)  # Symmetry
        
        return K
    
    def __str__(self) -> str:
        return f"Mean Embedding Kernel ({self.base_kernel})"
