"""Horizontal and vertical boxes, their list elements, and glue set ratios."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field
from typing import Optional, Union

from dvikit.dimension import SCALED_PER_POINT, Dimen, FilDimen, FilKind, Spring
from dvikit.font import Font
from dvikit.glue import Glue


def _round_half_away(value: float) -> int:
    """Round to the nearest integer, with halves going away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _trunc_div(a: int, b: int) -> int:
    """Integer division that truncates toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


class GlueSetRatioKind(enum.Enum):
    """Which order of glue a set ratio stretches or shrinks."""

    FINITE = "finite"
    FIL = "fil"
    FILL = "fill"
    FILLL = "filll"

    @classmethod
    def from_fil_kind(cls, fil_kind: FilKind) -> GlueSetRatioKind:
        """Return the ratio kind matching an order of infinity."""
        return _FIL_KIND_TO_RATIO_KIND[FilKind(fil_kind)]


_FIL_KIND_TO_RATIO_KIND = {
    FilKind.FIL: GlueSetRatioKind.FIL,
    FilKind.FILL: GlueSetRatioKind.FILL,
    FilKind.FILLL: GlueSetRatioKind.FILLL,
}

_RATIO_KIND_TO_FIL_KIND = {
    ratio_kind: fil_kind for fil_kind, ratio_kind in _FIL_KIND_TO_RATIO_KIND.items()
}


@dataclass(frozen=True)
class GlueSetRatio:
    """How far each glue of a given order stretches (positive) or shrinks (negative).

    ``stretch`` is measured in 1/65536 of a unit per unit of glue stretch.
    """

    kind: GlueSetRatioKind
    stretch: int

    @classmethod
    def from_ratio(cls, kind: GlueSetRatioKind, ratio: float) -> GlueSetRatio:
        return cls(kind, _round_half_away(ratio * SCALED_PER_POINT))

    def _multiply_spring(self, spring: Spring) -> Dimen:
        if self.kind is GlueSetRatioKind.FINITE:
            if isinstance(spring, Dimen):
                return spring.scale(self.stretch, SCALED_PER_POINT)
            return Dimen.zero()
        if isinstance(spring, FilDimen) and spring.kind == _RATIO_KIND_TO_FIL_KIND[self.kind]:
            return Dimen.from_scaled_points(
                _trunc_div(spring.value * self.stretch, SCALED_PER_POINT)
            )
        return Dimen.zero()

    def apply_to_glue(self, glue: Glue) -> Dimen:
        """Return the size a glue takes once this ratio is applied to it."""
        if self.stretch < 0:
            return glue.space + self._multiply_spring(glue.shrink)
        return glue.space + self._multiply_spring(glue.stretch)


@dataclass(frozen=True)
class CharElem:
    """A single character set in a font."""

    chr: str
    font: Font


@dataclass(frozen=True)
class HSkip:
    """Horizontal glue."""

    glue: Glue


@dataclass(frozen=True)
class VSkip:
    """Vertical glue."""

    glue: Glue


@dataclass(frozen=True)
class BoxElem:
    """A box placed in a list, shifted perpendicular to the list's direction."""

    tex_box: TeXBox
    shift: Dimen = Dimen.zero()


HorizontalListElem = Union[CharElem, HSkip, BoxElem]
VerticalListElem = Union[VSkip, BoxElem]


@dataclass
class HorizontalBox:
    """A box whose contents are laid out left to right."""

    height: Dimen
    depth: Dimen
    width: Dimen
    contents: list[HorizontalListElem] = field(default_factory=list)
    glue_set_ratio: Optional[GlueSetRatio] = None

    @classmethod
    def empty(cls) -> HorizontalBox:
        """Return an empty box of zero size."""
        return cls(Dimen.zero(), Dimen.zero(), Dimen.zero())

    def to_chars(self) -> list[str]:
        """Flatten the box into its characters, with spaces for glue."""
        # An empty box with positive width is an indent; show it as a space.
        if not self.contents and self.width > Dimen.zero():
            return [" "]

        chars: list[str] = []
        for elem in self.contents:
            match elem:
                case CharElem(chr=ch):
                    chars.append(ch)
                case HSkip():
                    chars.append(" ")
                case BoxElem(tex_box=inner):
                    chars.extend(inner.to_chars())
                case _:
                    raise TypeError(f"not a horizontal list element: {elem!r}")
        return chars


@dataclass
class VerticalBox:
    """A box whose contents are stacked top to bottom."""

    height: Dimen
    depth: Dimen
    width: Dimen
    contents: list[VerticalListElem] = field(default_factory=list)
    glue_set_ratio: Optional[GlueSetRatio] = None

    def to_chars(self) -> list[str]:
        """Flatten the box into its characters, one line per inner box."""
        chars: list[str] = []
        for elem in self.contents:
            match elem:
                case VSkip():
                    pass
                case BoxElem(tex_box=inner):
                    chars.extend(inner.to_chars())
                    chars.append("\n")
                case _:
                    raise TypeError(f"not a vertical list element: {elem!r}")
        return chars


TeXBox = Union[HorizontalBox, VerticalBox]