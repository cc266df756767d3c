"""Base kernel protocol."""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class MercerKernel(Protocol):
    """
    Protocol for kernel functions consumed by a kernel machine.

    A kernel is a similarity measure between two instances. It must be pure;
    symmetry and positive definiteness are expected by convention but not
    checked here.
    """

    def k(self, x: Any, y: Any) -> float:
        """
        Evaluate the kernel on a pair of instances.

        Parameters:
            x: First instance
            y: Second instance

        Returns:
            Scalar similarity value
        """
        ...
