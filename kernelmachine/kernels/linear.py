"""Linear and polynomial kernels."""

import jax.numpy as jnp
import numpy as np
from jax import jit
from functools import partial
from jaxtyping import Array, Float


class LinearKernel:
    """
    Linear kernel, the plain inner product.
    
    k(x, y) = <x, y>
    """
    
    def k(self, x, y) -> float:
        """Inner product of two vectors in double precision."""
        return float(np.dot(np.asarray(x, dtype=np.float64), np.asarray(y, dtype=np.float64)))
    
    @partial(jit, static_argnums=(0,))
    def __call__(
        self,
        X: Float[Array, "n d"],
        Y: Float[Array, "m d"]
    ) -> Float[Array, "n m"]:
        """
        Compute the Gram matrix X Yᵀ.
        
        Parameters:
            X: First set of points, shape (n, d)
            Y: Second set of points, shape (m, d)
        
        Returns:
            Kernel matrix of shape (n, m)
        """
        return jnp.dot(X, Y.T)
    
    def __str__(self) -> str:
        return "Linear Kernel"


class PolynomialKernel:
    """
    Polynomial kernel.
    
    k(x, y) = (scale * <x, y> + offset) ^ degree
    
    Parameters:
        degree: Degree of the polynomial, a positive integer
        scale: Multiplier of the inner product
        offset: Additive constant, non-negative
    """
    
    def __init__(self, degree: int, scale: float = 1.0, offset: float = 0.0):
        if int(degree) != degree or degree <= 0:
            raise ValueError("degree must be a positive integer")
        if scale <= 0:
            raise ValueError("scale must be positive")
        if offset < 0:
            raise ValueError("offset must be non-negative")
        self._degree = int(degree)
        self._scale = scale
        self._offset = offset
    
    @property
    def degree(self) -> int:
        return self._degree
    
    @property
    def scale(self) -> float:
        return self._scale
    
    @property
    def offset(self) -> float:
        return self._offset
    
    def k(self, x, y) -> float:
        dot = np.dot(np.asarray(x, dtype=np.float64), np.asarray(y, dtype=np.float64))
        return float((self._scale * dot + self._offset) ** self._degree)
    
    @partial(jit, static_argnums=(0,))
    def __call__(
        self,
        X: Float[Array, "n d"],
        Y: Float[Array, "m d"]
    ) -> Float[Array, "n m"]:
        return (self._scale * jnp.dot(X, Y.T) + self._offset) ** self._degree
    
    def __str__(self) -> str:
        return (
            f"Polynomial Kernel (degree = {self._degree}, "
            f"scale = {self._scale:.4f}, offset = {self._offset:.4f})"
        )
