"""Model implementations for kernelmachine."""

from .base import Regression
from .kernel_machine import InstanceKind, KernelMachine, infer_instance_kind

__all__ = ["Regression", "InstanceKind", "KernelMachine", "infer_instance_kind"]
