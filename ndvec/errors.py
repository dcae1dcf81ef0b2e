"""Exceptions raised by ndvec."""


class CastError(ValueError):
    """A component could not be represented in the requested element type."""


class UnsupportedOperationError(TypeError):
    """The vector's element type lacks the capability an operation requires."""
