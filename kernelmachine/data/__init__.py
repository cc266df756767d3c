"""Data structures for kernelmachine."""

from .formats import SampleCollection
from .record import Record, Row
from .vector import BaseVector, DoubleVector

__all__ = ["SampleCollection", "Record", "Row", "BaseVector", "DoubleVector"]
