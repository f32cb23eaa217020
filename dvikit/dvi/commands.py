"""The commands that make up a DVI file, and the file as a sequence of them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

_OPERAND_SIZES = (1, 2, 3, 4)


def _check_size(size: int) -> None:
    if size not in _OPERAND_SIZES:
        raise ValueError(f"operand size must be 1 to 4 bytes, not {size}")


class DVICommand:
    """Base of all DVI commands: one opcode byte followed by operands."""

    def _operand_size(self) -> int:
        return 0

    def byte_size(self) -> int:
        """Return the number of bytes the command takes in a file."""
        return 1 + self._operand_size()


@dataclass(frozen=True)
class SetChar(DVICommand):
    """Typeset a character 0-127 and move right by its width."""

    char: int

    def __post_init__(self) -> None:
        if not 0 <= self.char <= 127:
            raise ValueError(f"set_char takes 0-127, not {self.char}")


@dataclass(frozen=True)
class _CharWithSize(DVICommand):
    char: int
    size: int = 1

    def __post_init__(self) -> None:
        _check_size(self.size)

    def _operand_size(self) -> int:
        return self.size


@dataclass(frozen=True)
class Set(_CharWithSize):
    """Typeset a character given in 1-4 bytes and move right."""


@dataclass(frozen=True)
class Put(_CharWithSize):
    """Typeset a character given in 1-4 bytes without moving."""


@dataclass(frozen=True)
class _Rule(DVICommand):
    height: int
    width: int

    def _operand_size(self) -> int:
        return 8


@dataclass(frozen=True)
class SetRule(_Rule):
    """Draw a rule and move right by its width."""


@dataclass(frozen=True)
class PutRule(_Rule):
    """Draw a rule without moving."""


@dataclass(frozen=True)
class Nop(DVICommand):
    """Do nothing."""


@dataclass(frozen=True)
class Bop(DVICommand):
    """Begin a page, with ten counters and a pointer to the previous page."""

    cs: tuple[int, ...]
    pointer: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "cs", tuple(self.cs))
        if len(self.cs) != 10:
            raise ValueError(f"bop needs 10 counters, got {len(self.cs)}")

    def _operand_size(self) -> int:
        return 44


@dataclass(frozen=True)
class Eop(DVICommand):
    """End a page."""


@dataclass(frozen=True)
class Push(DVICommand):
    """Save the current position and spacing registers."""


@dataclass(frozen=True)
class Pop(DVICommand):
    """Restore the most recently saved position and spacing registers."""


@dataclass(frozen=True)
class _Move(DVICommand):
    amount: int
    size: int = 4

    def __post_init__(self) -> None:
        _check_size(self.size)

    def _operand_size(self) -> int:
        return self.size


@dataclass(frozen=True)
class Right(_Move):
    """Move right by an amount given in 1-4 bytes."""


@dataclass(frozen=True)
class Down(_Move):
    """Move down by an amount given in 1-4 bytes."""


@dataclass(frozen=True)
class _Spacing(DVICommand):
    """A move by a spacing register; with no amount, the register's value is used."""

    amount: Optional[int] = None
    size: int = 0

    def __post_init__(self) -> None:
        if self.amount is None:
            if self.size != 0:
                raise ValueError("a spacing command with no amount has size 0")
        else:
            _check_size(self.size)

    def _operand_size(self) -> int:
        return self.size


@dataclass(frozen=True)
class W(_Spacing):
    """Move right by, and possibly set, the w register."""


@dataclass(frozen=True)
class X(_Spacing):
    """Move right by, and possibly set, the x register."""


@dataclass(frozen=True)
class Y(_Spacing):
    """Move down by, and possibly set, the y register."""


@dataclass(frozen=True)
class Z(_Spacing):
    """Move down by, and possibly set, the z register."""


@dataclass(frozen=True)
class FntNum(DVICommand):
    """Select font 0-63."""

    num: int

    def __post_init__(self) -> None:
        if not 0 <= self.num <= 63:
            raise ValueError(f"fnt_num takes 0-63, not {self.num}")


@dataclass(frozen=True)
class Fnt(DVICommand):
    """Select a font whose number is given in 1-4 bytes."""

    font_num: int
    size: int = 4

    def __post_init__(self) -> None:
        _check_size(self.size)

    def _operand_size(self) -> int:
        return self.size


@dataclass(frozen=True)
class XXX(DVICommand):
    """A special: arbitrary bytes whose length is given in 1-4 bytes."""

    data: bytes
    size: int = 1

    def __post_init__(self) -> None:
        _check_size(self.size)
        object.__setattr__(self, "data", bytes(self.data))

    def _operand_size(self) -> int:
        return self.size + len(self.data)


@dataclass(frozen=True)
class FntDef(DVICommand):
    """Define a font number, given in 1-4 bytes, for a font file."""

    font_num: int
    checksum: int
    scale: int
    design_size: int
    area: int
    length: int
    font_name: str
    size: int = 4

    def __post_init__(self) -> None:
        _check_size(self.size)

    def _operand_size(self) -> int:
        return self.size + 14 + len(self.font_name.encode("utf-8"))


@dataclass(frozen=True)
class Pre(DVICommand):
    """The preamble: format, units, magnification and a comment."""

    format: int
    num: int
    den: int
    mag: int
    comment: bytes = b""

    def __post_init__(self) -> None:
        object.__setattr__(self, "comment", bytes(self.comment))

    def _operand_size(self) -> int:
        return 14 + len(self.comment)


@dataclass(frozen=True)
class Post(DVICommand):
    """The postamble, summarising the pages of the file."""

    pointer: int
    num: int
    den: int
    mag: int
    max_page_height: int
    max_page_width: int
    max_stack_depth: int
    num_pages: int

    def _operand_size(self) -> int:
        return 28


@dataclass(frozen=True)
class PostPost(DVICommand):
    """The end of the file: a pointer to the postamble and padding bytes."""

    post_pointer: int
    format: int
    tail: int

    def _operand_size(self) -> int:
        return 5 + self.tail


@dataclass
class DVIFile:
    """A DVI file as the commands it holds, with no interpretation of them."""

    commands: list[DVICommand] = field(default_factory=list)

    def byte_size(self) -> int:
        """Return the size of the file in bytes."""
        return sum(command.byte_size() for command in self.commands)