"""Font identity: a font file name at a given size."""

from dataclasses import dataclass

from dvikit.dimension import Dimen


@dataclass(frozen=True)
class Font:
    """A named font loaded at a particular scale."""

    font_name: str
    scale: Dimen