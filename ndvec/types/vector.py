import functools
import itertools
import logging
import numbers
import operator
from typing import Iterable, Iterator, Optional

from ndvec.errors import UnsupportedOperationError
from ndvec.types.element import ElementType, element_type, infer_element_type

logger = logging.getLogger(__name__)


def _binary_op(kernel: str):
    """Builds an operator applying an element kernel pairwise (vector operand) or against a scalar."""
    def method(self, other):
        apply = getattr(self._dtype, kernel)
        if isinstance(other, Vector):
            self._check_compatible(other)
            return self._new([apply(a, b) for a, b in zip(self._components, other._components)])
        scalar = self._scalar(other)
        if scalar is NotImplemented:
            return NotImplemented
        return self._new([apply(a, scalar) for a in self._components])
    return method


def _assign_op(kernel: str):
    """Builds an in-place operator. The receiver is only updated once every component succeeded."""
    def method(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_compatible(other)
        apply = getattr(self._dtype, kernel)
        self._components[:] = [apply(a, b) for a, b in zip(self._components, other._components)]
        return self
    return method


class Vector:
    """
    A fixed-length vector of homogeneous numeric components.

    The length is set at construction and never changes. The element type
    (see ElementType) decides which operations are available: integer vectors
    lack magnitude/normalize/distance, unsigned vectors lack abs/signum, and
    floats lack the ordering-based min/max helpers.
    """
    __slots__ = ("_components", "_dtype")

    DIMENSION: Optional[int] = None
    """Fixed length enforced by subclasses (Vec2, Vec3); None accepts any length."""

    def __init__(self, components: Iterable, dtype=None):
        self._dtype, self._components = self._prepare(list(components), dtype)

    @classmethod
    def _prepare(cls, values: list, dtype) -> tuple[ElementType, list]:
        if cls.DIMENSION is not None and len(values) != cls.DIMENSION:
            raise ValueError(f"{cls.__name__} requires exactly {cls.DIMENSION} components, got {len(values)}.")
        dtype = element_type(dtype) if dtype is not None else infer_element_type(values)
        return dtype, [dtype.coerce(v) for v in values]

    @classmethod
    def _from_trusted(cls, components: list, dtype: ElementType) -> "Vector":
        vec = object.__new__(cls)
        vec._components = components
        vec._dtype = dtype
        return vec

    @classmethod
    def _dimension(cls, n: Optional[int]) -> int:
        if cls.DIMENSION is not None:
            if n is not None and n != cls.DIMENSION:
                raise ValueError(f"{cls.__name__} has dimension {cls.DIMENSION}, not {n}.")
            return cls.DIMENSION
        if n is None:
            raise TypeError(f"{cls.__name__} needs an explicit dimension n.")
        n = operator.index(n)
        if n < 0:
            raise ValueError(f"Vector dimension must be non-negative, got {n}.")
        return n

    def _new(self, components: list, dtype: Optional[ElementType] = None) -> "Vector":
        return type(self)._from_trusted(components, dtype if dtype is not None else self._dtype)

    # --- Construction ---

    @classmethod
    def zero(cls, n: Optional[int] = None, dtype=float) -> "Vector":
        """Creates a vector with every component set to the additive identity."""
        dtype = element_type(dtype)
        return cls._from_trusted([dtype.zero] * cls._dimension(n), dtype)

    @classmethod
    def default(cls, n: Optional[int] = None, dtype=float) -> "Vector":
        dtype = element_type(dtype)
        return cls._from_trusted([dtype.default() for _ in range(cls._dimension(n))], dtype)

    @classmethod
    def from_iter(cls, iterable: Iterable, n: Optional[int] = None, dtype=None) -> "Vector":
        """
        Creates a vector from the first n items of an iterable.
        Missing trailing components are zero-filled; items past the n-th are never consumed.
        """
        size = cls._dimension(n)
        values = list(itertools.islice(iterable, size))
        dtype = element_type(dtype) if dtype is not None else infer_element_type(values)
        values.extend([dtype.zero] * (size - len(values)))
        dtype, components = cls._prepare(values, dtype)
        return cls._from_trusted(components, dtype)

    # --- Access ---

    @property
    def dtype(self) -> ElementType:
        return self._dtype

    def as_slice(self) -> tuple:
        """Returns the components, in order, as a read-only tuple."""
        return tuple(self._components)

    def copy(self) -> "Vector":
        return self._new(list(self._components))

    __copy__ = copy

    def __deepcopy__(self, memo) -> "Vector":
        return self.copy()

    def __len__(self) -> int:
        return len(self._components)

    def __iter__(self) -> Iterator:
        return iter(tuple(self._components))

    def __getitem__(self, index):
        if isinstance(index, slice):
            return tuple(self._components[index])
        return self._components[index]

    def _named(self, index: int, allowed: tuple, name: str):
        if len(self._components) not in allowed:
            raise AttributeError(f"'{name}' is only available on vectors of dimension {' or '.join(map(str, allowed))}.")
        return self._components[index]

    @property
    def x(self):
        return self._named(0, (2, 3), "x")

    @property
    def y(self):
        return self._named(1, (2, 3), "y")

    @property
    def z(self):
        return self._named(2, (3,), "z")

    # --- Operand checks ---

    def _check_compatible(self, other: "Vector") -> None:
        if other._dtype != self._dtype:
            raise TypeError(f"Element types differ: {self._dtype.name} and {other._dtype.name}.")
        if len(other._components) != len(self._components):
            raise ValueError(f"Dimensions differ: {len(self._components)} and {len(other._components)}.")

    def _scalar(self, other):
        if isinstance(other, bool) or not isinstance(other, numbers.Real):
            return NotImplemented
        return self._dtype.coerce(other)

    def _require(self, capability: str, operation: str) -> None:
        if not getattr(self._dtype, capability):
            raise UnsupportedOperationError(f"{operation}() is not supported for {self._dtype.name} vectors.")

    # --- Arithmetic ---

    __add__ = _binary_op("add")
    __sub__ = _binary_op("sub")
    __truediv__ = _binary_op("div")
    __mod__ = _binary_op("rem")

    __iadd__ = _assign_op("add")
    __isub__ = _assign_op("sub")
    __itruediv__ = _assign_op("div")
    __imod__ = _assign_op("rem")

    def __mul__(self, scalar) -> "Vector":
        # Scaling only; use hadamard_product for component-wise products.
        scalar = self._scalar(scalar)
        if scalar is NotImplemented:
            return NotImplemented
        return self._new([self._dtype.mul(a, scalar) for a in self._components])

    def __rmul__(self, scalar) -> "Vector":
        return self.__mul__(scalar)

    def __neg__(self) -> "Vector":
        """Replaces every component with zero minus the component."""
        return self._new([self._dtype.neg(a) for a in self._components])

    # --- Products & Reductions ---

    def hadamard_product(self, other: "Vector") -> "Vector":
        """Component-wise product of two vectors."""
        self._check_compatible(other)
        return self._new([self._dtype.mul(a, b) for a, b in zip(self._components, other._components)])

    def dot(self, other: "Vector"):
        """Calculates the dot product with another vector."""
        self._check_compatible(other)
        products = (self._dtype.mul(a, b) for a, b in zip(self._components, other._components))
        return functools.reduce(self._dtype.add, products, self._dtype.zero)

    def sum(self):
        """Sums the components left to right, starting from zero."""
        return functools.reduce(self._dtype.add, self._components, self._dtype.zero)

    def magnitude_squared(self):
        """Returns the sum of the squared components."""
        return self.dot(self)

    def magnitude(self):
        """Returns the Euclidean length of the vector."""
        self._require("is_real", "magnitude")
        return self._dtype.sqrt(self.magnitude_squared())

    def normalize(self) -> "Vector":
        """
        Returns the vector divided by its magnitude.
        A zero vector is not special-cased and normalizes to NaN components.
        """
        return self / self.magnitude()

    def distance(self, other: "Vector"):
        """Euclidean distance to another vector."""
        self._require("is_real", "distance")
        return (self - other).magnitude()

    def manhattan_distance(self, other: "Vector"):
        """Sum of the absolute component differences."""
        self._require("is_signed", "manhattan_distance")
        self._check_compatible(other)
        dt = self._dtype
        diffs = (dt.abs(dt.sub(a, b)) for a, b in zip(self._components, other._components))
        return functools.reduce(dt.add, diffs, dt.zero)

    # --- Extrema & Sign ---

    def min(self, other: "Vector") -> "Vector":
        """Takes the minimum of each pair of components."""
        self._require("is_totally_ordered", "min")
        self._check_compatible(other)
        return self._new([min(a, b) for a, b in zip(self._components, other._components)])

    def max(self, other: "Vector") -> "Vector":
        """Takes the maximum of each pair of components."""
        self._require("is_totally_ordered", "max")
        self._check_compatible(other)
        return self._new([max(a, b) for a, b in zip(self._components, other._components)])

    def min_component(self):
        """Smallest component. Raises ValueError for an empty vector."""
        self._require("is_totally_ordered", "min_component")
        if not self._components:
            raise ValueError("min_component() of an empty vector")
        return min(self._components)

    def max_component(self):
        """Largest component. Raises ValueError for an empty vector."""
        self._require("is_totally_ordered", "max_component")
        if not self._components:
            raise ValueError("max_component() of an empty vector")
        return max(self._components)

    def abs(self) -> "Vector":
        self._require("is_signed", "abs")
        return self._new([self._dtype.abs(a) for a in self._components])

    def opposite(self) -> "Vector":
        """The vector with every component negated."""
        self._require("is_signed", "opposite")
        return -self

    def signum(self) -> "Vector":
        """-1, 0 or 1 per component, following the component's sign. NaN stays NaN."""
        self._require("is_signed", "signum")
        return self._new([self._dtype.signum(a) for a in self._components])

    # --- Casting ---

    def num_cast(self, dtype) -> Optional["Vector"]:
        """
        Converts every component with a permissive numeric conversion
        (e.g. u32 -> f32, or f64 -> i32 truncating toward zero).
        Returns None if any component is not representable in the target type.
        """
        target = element_type(dtype)
        components = []
        for index, value in enumerate(self._components):
            converted = target.num_convert(value, self._dtype)
            if converted is None:
                logger.debug(f"num_cast {self._dtype.name} -> {target.name} failed at component {index} ({value!r}).")
                return None
            components.append(converted)
        return self._new(components, target)

    def try_cast(self, dtype) -> "Vector":
        """
        Converts every component with a range-checked conversion (e.g. u32 -> u8).
        Raises CastError for the first component that does not fit.
        """
        target = element_type(dtype)
        if not target.can_try_convert_from(self._dtype):
            raise UnsupportedOperationError(f"No checked conversion from {self._dtype.name} to {target.name}; use num_cast().")
        return self._new([target.try_convert(v, self._dtype) for v in self._components], target)

    def cast(self, dtype) -> "Vector":
        """Converts every component with a conversion that cannot fail (e.g. u8 -> i16, i32 -> f64)."""
        target = element_type(dtype)
        if not target.can_convert_from(self._dtype):
            logger.debug(f"cast {self._dtype.name} -> {target.name} rejected as lossy.")
            raise UnsupportedOperationError(f"Conversion from {self._dtype.name} to {target.name} may lose information; use try_cast() or num_cast().")
        return self._new([target.convert(v, self._dtype) for v in self._components], target)

    # --- Equality, Hashing, Formatting ---

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return (self._dtype == other._dtype
                and len(self._components) == len(other._components)
                and all(a == b for a, b in zip(self._components, other._components)))

    def __hash__(self) -> int:
        return hash((self._dtype.name, tuple(self._components)))

    def __str__(self) -> str:
        return f"({', '.join(str(c) for c in self._components)})"

    def __repr__(self) -> str:
        args = ", ".join(repr(c) for c in self._components)
        if self.DIMENSION is None:
            args = f"[{args}]"
        return f"{type(self).__name__}({args}, dtype='{self._dtype.name}')"


class Vec2(Vector):
    """A 2D vector with x and y components."""
    __slots__ = ()
    DIMENSION = 2

    def __init__(self, x, y, dtype=None):
        super().__init__((x, y), dtype)


class Vec3(Vector):
    """A 3D vector with x, y and z components."""
    __slots__ = ()
    DIMENSION = 3

    def __init__(self, x, y, z, dtype=None):
        super().__init__((x, y, z), dtype)
