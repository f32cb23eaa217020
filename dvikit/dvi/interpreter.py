"""Placing the characters of a DVI file at their positions on each page."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Callable, Iterable, Iterator, Optional

from dvikit.dimension import Dimen
from dvikit.dvi.commands import (
    Bop,
    Down,
    DVICommand,
    DVIFile,
    Eop,
    Fnt,
    FntDef,
    FntNum,
    Pop,
    Post,
    Pre,
    Push,
    Right,
    SetChar,
    W,
    X,
    Y,
    Z,
)
from dvikit.font import Font

DEFAULT_NUM = 25400000
DEFAULT_DEN = 473628672
DEFAULT_MAG = 1000

WidthFunction = Callable[[Font, int], Dimen]
PageOutput = dict[tuple[int, int], set["CharacterElement"]]


class DVIInterpretError(ValueError):
    """Raised when the commands of a DVI file do not form valid pages."""


@dataclass(frozen=True)
class CharacterElement:
    """A character code set in the named font."""

    char: int
    font: str


@dataclass
class _Registers:
    h: int = 0
    v: int = 0
    w: int = 0
    x: int = 0
    y: int = 0
    z: int = 0


@dataclass
class _State:
    fonts: dict[int, Font] = field(default_factory=dict)
    current_font: Optional[int] = None
    stack: list[_Registers] = field(default_factory=lambda: [_Registers()])

    @property
    def top(self) -> _Registers:
        return self.stack[-1]

    def font(self) -> Font:
        if self.current_font is None:
            raise DVIInterpretError("No font selected")
        try:
            return self.fonts[self.current_font]
        except KeyError:
            raise DVIInterpretError(
                f"Font {self.current_font} was never defined"
            ) from None

    def reset(self) -> None:
        self.current_font = None
        self.stack = [_Registers()]

    def push(self) -> None:
        self.stack.append(dataclasses.replace(self.top))

    def pop(self) -> None:
        if len(self.stack) == 1:
            raise DVIInterpretError("Cannot pop without corresponding push")
        self.stack.pop()


def _next_command(commands: Iterator[DVICommand], what: str) -> DVICommand:
    command = next(commands, None)
    if command is None:
        raise DVIInterpretError(f"Missing {what}")
    return command


def _apply_spacing(regs: _Registers, register: str, command: W | X | Y | Z) -> None:
    if command.amount is not None:
        setattr(regs, register, command.amount)
    amount = getattr(regs, register)
    if register in ("w", "x"):
        regs.h += amount
    else:
        regs.v += amount


def _run_page(
    state: _State, commands: Iterator[DVICommand], width_of: WidthFunction
) -> PageOutput:
    """Interpret the commands of a page whose bop has already been read."""
    page: PageOutput = {}
    state.reset()

    while True:
        command = _next_command(commands, "Eop")
        regs = state.top
        match command:
            case Eop():
                return page
            case Push():
                state.push()
            case Pop():
                state.pop()
            case Right(amount=amount):
                regs.h += amount
            case Down(amount=amount):
                regs.v += amount
            case W():
                _apply_spacing(regs, "w", command)
            case X():
                _apply_spacing(regs, "x", command)
            case Y():
                _apply_spacing(regs, "y", command)
            case Z():
                _apply_spacing(regs, "z", command)
            case FntDef(font_num=font_num, font_name=font_name, scale=scale):
                state.fonts[font_num] = Font(
                    font_name, Dimen.from_scaled_points(scale)
                )
            case FntNum(num=num):
                state.current_font = num
            case Fnt(font_num=font_num):
                state.current_font = font_num
            case SetChar(char=char):
                font = state.font()
                page.setdefault((regs.h, regs.v), set()).add(
                    CharacterElement(char, font.font_name)
                )
                regs.h += width_of(font, char).sp
            case _:
                raise DVIInterpretError(f"unknown command: {command!r}")


def interpret_page(
    commands: Iterable[DVICommand], width_of: WidthFunction
) -> PageOutput:
    """Interpret one page, from its bop to its eop, starting with no fonts.

    ``width_of`` gives the width of a character code in a font.
    """
    iterator = iter(commands)
    first = _next_command(iterator, "Bop")
    if not isinstance(first, Bop):
        raise DVIInterpretError(f"Expecting Bop, got {first!r}")
    return _run_page(_State(), iterator, width_of)


def interpret_dvi_file(
    dvi_file: DVIFile, width_of: WidthFunction
) -> list[PageOutput]:
    """Interpret every page of a file into the characters placed on it.

    Fonts defined on one page remain defined on the pages after it.
    """
    commands = iter(dvi_file.commands)

    pre = _next_command(commands, "Pre")
    if not isinstance(pre, Pre):
        raise DVIInterpretError("First command must be pre!")
    if pre.format != 2:
        raise DVIInterpretError(f"Unknown format: {pre.format}")
    if pre.num != DEFAULT_NUM or pre.den != DEFAULT_DEN:
        raise DVIInterpretError("Only handling default num/den")
    if pre.mag != DEFAULT_MAG:
        raise DVIInterpretError("Only handling default mag (1000)")

    state = _State()
    pages: list[PageOutput] = []
    while True:
        command = _next_command(commands, "Post")
        if isinstance(command, Post):
            return pages
        if not isinstance(command, Bop):
            raise DVIInterpretError(f"Expecting Bop, got {command!r}")
        pages.append(_run_page(state, commands, width_of))