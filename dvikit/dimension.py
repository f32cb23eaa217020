"""Fixed-point dimensions measured in scaled points, plus infinite glue amounts."""

from __future__ import annotations

import enum
import functools
from dataclasses import dataclass
from typing import Union

SCALED_PER_POINT = 65536
DIMEN_MAX = (1 << 30) - 1
DIMEN_MIN = 1 - (1 << 30)


class DimensionError(ValueError):
    """Raised when a dimension falls outside the representable range."""


def _trunc_div(a: int, b: int) -> int:
    """Integer division that truncates toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


class Unit(enum.Enum):
    """Physical units, each given as a (numerator, denominator) of scaled points per unit."""

    POINT = (65536.0, 1.0)
    PICA = (12.0 * 65536.0, 1.0)
    INCH = (65536.0 * 7227.0, 100.0)
    BIG_POINT = (65536.0 * 7227.0, 72.0 * 100.0)
    CENTIMETER = (65536.0 * 7227.0, 254.0)
    MILLIMETER = (65536.0 * 7227.0, 2540.0)
    DIDOT_POINT = (65536.0 * 1238.0, 1157.0)
    CICERO = (65536.0 * 1238.0 * 12.0, 1157.0)
    SCALED_POINT = (1.0, 1.0)

    @property
    def scale(self) -> tuple[float, float]:
        return self.value


@functools.total_ordering
@dataclass(frozen=True)
class Dimen:
    """A length stored as an integer number of scaled points."""

    sp: int

    def __post_init__(self) -> None:
        if not DIMEN_MIN <= self.sp <= DIMEN_MAX:
            raise DimensionError("Dimension too large")

    @classmethod
    def zero(cls) -> Dimen:
        return cls(0)

    @classmethod
    def from_unit(cls, num: float, unit: Unit) -> Dimen:
        numerator, denominator = unit.scale
        return cls(int(num * numerator / denominator))

    @classmethod
    def from_scaled_points(cls, sp: int) -> Dimen:
        return cls(sp)

    def to_unit(self, unit: Unit) -> float:
        """Return how many of ``unit`` this dimension measures."""
        numerator, denominator = unit.scale
        return self.sp * denominator / numerator

    def scale(self, num: int, den: int) -> Dimen:
        """Return ``self * num / den`` computed without intermediate rounding."""
        return Dimen(_trunc_div(self.sp * num, den))

    def ratio(self, other: Dimen | FilDimen) -> float:
        """Return the floating-point quotient of this dimension and ``other``."""
        if isinstance(other, FilDimen):
            return self.sp / other.value
        return self.sp / other.sp

    def __add__(self, other: Dimen) -> Dimen:
        if not isinstance(other, Dimen):
            return NotImplemented
        return Dimen(self.sp + other.sp)

    def __sub__(self, other: Dimen) -> Dimen:
        if not isinstance(other, Dimen):
            return NotImplemented
        return Dimen(self.sp - other.sp)

    def __mul__(self, factor: int) -> Dimen:
        if not isinstance(factor, int):
            return NotImplemented
        return Dimen(self.sp * factor)

    __rmul__ = __mul__

    def __floordiv__(self, divisor: int) -> Dimen:
        """Divide by an integer, truncating toward zero."""
        if not isinstance(divisor, int):
            return NotImplemented
        return Dimen(_trunc_div(self.sp, divisor))

    def __neg__(self) -> Dimen:
        return Dimen(-self.sp)

    def __abs__(self) -> Dimen:
        return -self if self.sp < 0 else self

    def __lt__(self, other: Dimen) -> bool:
        if not isinstance(other, Dimen):
            return NotImplemented
        return self.sp < other.sp


class FilKind(enum.IntEnum):
    """Orders of infinity for glue stretch and shrink."""

    FIL = 1
    FILL = 2
    FILLL = 3


@dataclass(frozen=True)
class FilDimen:
    """An infinite amount of a given order, in 1/65536 units of that order."""

    kind: FilKind
    value: int

    @classmethod
    def new(cls, kind: FilKind, value: float) -> FilDimen:
        return cls(kind, int(value * SCALED_PER_POINT))

    def __add__(self, other: FilDimen) -> FilDimen:
        if not isinstance(other, FilDimen):
            return NotImplemented
        if self.kind == other.kind:
            return FilDimen(self.kind, self.value + other.value)
        # A higher order of infinity swallows any amount of a lower one.
        return self if self.kind > other.kind else other

    def __mul__(self, factor: int) -> FilDimen:
        if not isinstance(factor, int):
            return NotImplemented
        return FilDimen(self.kind, self.value * factor)

    __rmul__ = __mul__


Spring = Union[Dimen, FilDimen]


def add_spring(a: Spring, b: Spring) -> Spring:
    """Add two stretch or shrink amounts; any infinite part dominates a finite one."""
    if isinstance(a, Dimen) and isinstance(b, Dimen):
        return a + b
    if isinstance(a, FilDimen) and isinstance(b, FilDimen):
        return a + b
    return a if isinstance(a, FilDimen) else b


def scale_spring(spring: Spring, factor: int) -> Spring:
    """Multiply a stretch or shrink amount by an integer."""
    return spring * factor


@dataclass(frozen=True)
class MuDimen:
    """A math dimension in units of 1/65536 mu; 18 mu make one em."""

    value: int

    @classmethod
    def zero(cls) -> MuDimen:
        return cls(0)

    @classmethod
    def new(cls, num: float) -> MuDimen:
        return cls(int(num * SCALED_PER_POINT))

    def to_dimen(self, quad: Dimen) -> Dimen:
        """Convert to a plain dimension given a font's quad width."""
        # Done in two steps, losing precision the same way TeX does.
        return (quad // 18).scale(self.value, SCALED_PER_POINT)