"""Shared fixtures for tests."""

import pytest
import jax.random as random
import numpy as np

from kernelmachine.data.formats import SampleCollection
from kernelmachine.kernels.linear import LinearKernel
from kernelmachine.kernels.rbf import GaussianKernel
from kernelmachine.models.kernel_machine import KernelMachine


@pytest.fixture
def rng_key():
    """Random number generator key."""
    return random.PRNGKey(42)


@pytest.fixture
def sample_data_2d(rng_key):
    """Sample 2D data for testing."""
    key1, key2 = random.split(rng_key)
    X = random.normal(key1, (10, 5))
    Y = random.normal(key2, (8, 5))
    return X, Y


@pytest.fixture
def sample_collections():
    """Sample collections for testing."""
    key = random.PRNGKey(123)
    collections = []
    
    for i in range(4):
        key, subkey = random.split(key)
        samples = random.normal(subkey, (15, 3)) + i
        collections.append(SampleCollection(samples=samples, id=f"loc_{i}"))
    
    return collections


@pytest.fixture
def gaussian_kernel():
    """Gaussian kernel for testing."""
    return GaussianKernel(sigma=1.0)


@pytest.fixture
def linear_kernel():
    """Linear kernel for testing."""
    return LinearKernel()


@pytest.fixture
def linear_machine(linear_kernel):
    """Two-instance linear kernel machine with a unit intercept."""
    instances = np.array([[1.0], [2.0]])
    weights = np.array([0.5, 0.5])
    return KernelMachine(linear_kernel, instances, weights, intercept=1.0)


@pytest.fixture
def gaussian_machine(gaussian_kernel):
    """Gaussian kernel machine over 3-D vectors."""
    rng = np.random.default_rng(7)
    instances = rng.normal(size=(6, 3))
    weights = rng.normal(size=6)
    return KernelMachine(gaussian_kernel, instances, weights, intercept=-0.25)
