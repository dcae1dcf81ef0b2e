"""
Library-wide defaults.
"""


class Settings:
    """
    Defaults consulted when a vector is built without an explicit element type.
    Values are read at call time, so changing them affects later constructions only.
    """

    DEFAULT_INTEGER_TYPE: str = "i32"
    """Element type inferred for all-integer components (and for the ``int`` builtin)."""

    DEFAULT_FLOAT_TYPE: str = "f64"
    """Element type inferred when any component is a float, for empty vectors, and for ``float``."""
