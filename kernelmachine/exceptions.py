"""Exceptions raised by kernelmachine."""


class UnsupportedOperationError(TypeError):
    """
    Raised when an operation is not defined for the receiving object.

    Examples are reading a float64 column through a narrowing accessor, or
    asking a model over opaque instances to interpret a tabular record.
    """
