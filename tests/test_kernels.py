"""Tests for kernel implementations."""

import math

import pytest
import jax.numpy as jnp
import numpy as np

from kernelmachine.kernels.base import MercerKernel
from kernelmachine.kernels.linear import LinearKernel, PolynomialKernel
from kernelmachine.kernels.rbf import GaussianKernel
from kernelmachine.kernels.distribution import MeanEmbeddingKernel


def test_kernels_satisfy_protocol():
    """All kernels expose k(x, y)."""
    assert isinstance(LinearKernel(), MercerKernel)
    assert isinstance(PolynomialKernel(2), MercerKernel)
    assert isinstance(GaussianKernel(1.0), MercerKernel)
    assert isinstance(MeanEmbeddingKernel(GaussianKernel(1.0)), MercerKernel)


def test_gaussian_kernel_properties(gaussian_kernel, sample_data_2d):
    """Gaussian kernel should satisfy kernel properties."""
    X, _ = sample_data_2d
    K = gaussian_kernel(X, X)
    
    # Symmetric
    assert jnp.allclose(K, K.T, atol=1e-6)
    
    # Positive semi-definite (eigenvalues >= 0)
    eigenvalues = jnp.linalg.eigvalsh(K)
    assert jnp.all(eigenvalues >= -1e-5)
    
    # Diagonal is 1
    assert jnp.allclose(jnp.diag(K), 1.0, atol=1e-6)


def test_gaussian_kernel_diagonal(gaussian_kernel, sample_data_2d):
    """Gaussian kernel diagonal should be all ones."""
    X, _ = sample_data_2d
    diag = gaussian_kernel.diagonal(X)
    assert jnp.allclose(diag, 1.0)


def test_gaussian_kernel_scalar_values():
    """Scalar evaluation matches the closed form."""
    kernel = GaussianKernel(sigma=2.0)
    assert kernel.k([0.0, 0.0], [0.0, 0.0]) == 1.0
    assert kernel.k([0.0, 0.0], [3.0, 4.0]) == pytest.approx(math.exp(-25.0 / 8.0))


def test_gaussian_kernel_scalar_matches_matrix(gaussian_kernel, sample_data_2d):
    """Scalar and matrix paths agree."""
    X, Y = sample_data_2d
    K = np.asarray(gaussian_kernel(X, Y))
    X, Y = np.asarray(X), np.asarray(Y)
    for i in range(X.shape[0]):
        for j in range(Y.shape[0]):
            assert gaussian_kernel.k(X[i], Y[j]) == pytest.approx(K[i, j], abs=1e-5)


def test_gaussian_kernel_rejects_bad_sigma():
    with pytest.raises(ValueError):
        GaussianKernel(sigma=0.0)
    with pytest.raises(ValueError):
        GaussianKernel(sigma=-1.0)


def test_linear_kernel_values(linear_kernel, sample_data_2d):
    """Linear kernel is the inner product."""
    assert linear_kernel.k([1.0, 2.0, 3.0], [4.0, 5.0, 6.0]) == 32.0
    
    X, Y = sample_data_2d
    assert jnp.allclose(linear_kernel(X, Y), X @ Y.T, atol=1e-5)


def test_polynomial_kernel_values():
    kernel = PolynomialKernel(degree=2, scale=0.5, offset=1.0)
    # (0.5 * 4 + 1) ** 2
    assert kernel.k([2.0], [2.0]) == 9.0
    
    X = jnp.array([[1.0, 0.0], [0.0, 2.0]])
    expected = jnp.array([[2.25, 1.0], [1.0, 9.0]])
    assert jnp.allclose(kernel(X, X), expected)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"degree": 0},
        {"degree": 1.5},
        {"degree": 2, "scale": 0.0},
        {"degree": 2, "offset": -1.0},
    ],
)
def test_polynomial_kernel_rejects_bad_parameters(kwargs):
    with pytest.raises(ValueError):
        PolynomialKernel(**kwargs)


def test_kernel_descriptions():
    assert str(LinearKernel()) == "Linear Kernel"
    assert str(GaussianKernel(0.5)) == "Gaussian Kernel (sigma = 0.5000)"
    assert str(PolynomialKernel(3)) == (
        "Polynomial Kernel (degree = 3, scale = 1.0000, offset = 0.0000)"
    )
    assert str(MeanEmbeddingKernel(LinearKernel())) == "Mean Embedding Kernel (Linear Kernel)"


def test_distribution_kernel_symmetry(sample_collections):
    """Distribution kernel should be symmetric."""
    coll_a = sample_collections[0]
    coll_b = sample_collections[1]
    
    kernel = MeanEmbeddingKernel(GaussianKernel(sigma=1.0))
    
    assert jnp.isclose(kernel.k(coll_a, coll_b), kernel.k(coll_b, coll_a), atol=1e-6)


def test_linear_mean_embedding_is_dot_of_means(sample_collections):
    """With a linear base kernel, similarity is the dot product of mean embeddings."""
    coll_a, coll_b = sample_collections[0], sample_collections[2]
    kernel = MeanEmbeddingKernel(LinearKernel())
    
    expected = float(jnp.dot(coll_a.mean_embedding(), coll_b.mean_embedding()))
    assert kernel.k(coll_a, coll_b) == pytest.approx(expected, rel=1e-4, abs=1e-5)


def test_distribution_kernel_matrix_shape(sample_collections):
    """Similarity matrix should have correct shape."""
    kernel = MeanEmbeddingKernel(GaussianKernel(sigma=1.0))
    
    K = kernel.build_similarity_matrix(sample_collections)
    
    n = len(sample_collections)
    assert K.shape == (n, n)
    assert jnp.allclose(K, K.T)  # Symmetric


def test_distribution_kernel_empty_matrix():
    kernel = MeanEmbeddingKernel(GaussianKernel(sigma=1.0))
    assert kernel.build_similarity_matrix([]).shape == (0, 0)
