"""Glue: space with stretch and shrink components."""

from __future__ import annotations

from dataclasses import dataclass

from dvikit.dimension import Dimen, MuDimen, Spring, add_spring, scale_spring


@dataclass(frozen=True)
class Glue:
    """A natural space that may stretch or shrink by finite or infinite amounts."""

    space: Dimen
    stretch: Spring
    shrink: Spring

    @classmethod
    def zero(cls) -> Glue:
        return cls.from_dimen(Dimen.zero())

    @classmethod
    def from_dimen(cls, dimen: Dimen) -> Glue:
        return cls(dimen, Dimen.zero(), Dimen.zero())

    def __add__(self, other: Glue) -> Glue:
        if not isinstance(other, Glue):
            return NotImplemented
        return Glue(
            self.space + other.space,
            add_spring(self.stretch, other.stretch),
            add_spring(self.shrink, other.shrink),
        )

    def __sub__(self, other: Glue) -> Glue:
        if not isinstance(other, Glue):
            return NotImplemented
        negated = Glue(
            other.space * -1,
            scale_spring(other.stretch, -1),
            scale_spring(other.shrink, -1),
        )
        return self + negated


@dataclass(frozen=True)
class MuGlue:
    """Glue measured in math units."""

    space: MuDimen
    stretch: MuDimen
    shrink: MuDimen

    def to_glue(self, quad: Dimen) -> Glue:
        """Convert to ordinary glue given a font's quad width."""
        return Glue(
            self.space.to_dimen(quad),
            self.stretch.to_dimen(quad),
            self.shrink.to_dimen(quad),
        )