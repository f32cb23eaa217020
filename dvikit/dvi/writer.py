"""Writing DVI commands and files as bytes."""

from __future__ import annotations

import io
from typing import BinaryIO

from dvikit.dvi.commands import (
    XXX,
    Bop,
    Down,
    DVICommand,
    DVIFile,
    Eop,
    Fnt,
    FntDef,
    FntNum,
    Nop,
    Pop,
    Post,
    PostPost,
    Pre,
    Push,
    Put,
    PutRule,
    Right,
    Set,
    SetChar,
    SetRule,
    W,
    X,
    Y,
    Z,
)

_POST_POST_FILL = 223

# Opcode of the size-0 (or size-1 minus one) form of each family of commands.
_SPACING_BASE = {W: 147, X: 152, Y: 161, Z: 166}
_MOVE_BASE = {Right: 142, Down: 156}


class DVIWriter:
    """Wraps a binary stream and writes values the way a DVI file stores them."""

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream

    def _write_int(self, value: int, size: int) -> None:
        # Keep only the low ``size`` bytes, as a two's-complement truncation.
        masked = value % (1 << (8 * size))
        self._stream.write(masked.to_bytes(size, "big", signed=False))

    def write_unsigned(self, value: int, size: int) -> None:
        """Write the low ``size`` bytes of ``value`` in big-endian order."""
        self._write_int(value, size)

    def write_signed(self, value: int, size: int) -> None:
        """Write ``value`` as a two's-complement big-endian integer of ``size`` bytes."""
        self._write_int(value, size)

    def write_bytes(self, value: bytes, size: int) -> None:
        """Write exactly ``size`` bytes: ``value`` truncated or padded with zeros."""
        data = bytes(value[:size])
        self._stream.write(data + bytes(size - len(data)))

    def write_string(self, value: str, size: int) -> None:
        """Write a string's UTF-8 bytes into a field of ``size`` bytes."""
        self.write_bytes(value.encode("utf-8"), size)

    def _write_opcode(self, opcode: int) -> None:
        self.write_unsigned(opcode, 1)

    def _write_sized_operand(self, value: int, size: int) -> None:
        # One to three byte operands are unsigned, four byte ones signed.
        if size == 4:
            self.write_signed(value, 4)
        else:
            self.write_unsigned(value, size)

    def write_command(self, command: DVICommand) -> None:
        """Write one command, opcode first."""
        match command:
            case SetChar(char=char):
                self._write_opcode(char)
            case Set(char=char, size=size):
                self._write_opcode(127 + size)
                self._write_sized_operand(char, size)
            case Put(char=char, size=size):
                self._write_opcode(132 + size)
                self._write_sized_operand(char, size)
            case SetRule(height=height, width=width):
                self._write_opcode(132)
                self.write_signed(height, 4)
                self.write_signed(width, 4)
            case PutRule(height=height, width=width):
                self._write_opcode(137)
                self.write_signed(height, 4)
                self.write_signed(width, 4)
            case Nop():
                self._write_opcode(138)
            case Bop(cs=cs, pointer=pointer):
                self._write_opcode(139)
                for counter in cs:
                    self.write_signed(counter, 4)
                self.write_signed(pointer, 4)
            case Eop():
                self._write_opcode(140)
            case Push():
                self._write_opcode(141)
            case Pop():
                self._write_opcode(142)
            case Right() | Down():
                self._write_opcode(_MOVE_BASE[type(command)] + command.size)
                self.write_signed(command.amount, command.size)
            case W() | X() | Y() | Z():
                base = _SPACING_BASE[type(command)]
                if command.amount is None:
                    self._write_opcode(base)
                else:
                    self._write_opcode(base + command.size)
                    self.write_signed(command.amount, command.size)
            case FntNum(num=num):
                self._write_opcode(171 + num)
            case Fnt(font_num=font_num, size=size):
                self._write_opcode(234 + size)
                self._write_sized_operand(font_num, size)
            case XXX(data=data, size=size):
                self._write_opcode(238 + size)
                self.write_unsigned(len(data), size)
                self.write_bytes(data, len(data))
            case FntDef():
                self._write_opcode(242 + command.size)
                self._write_sized_operand(command.font_num, command.size)
                self.write_unsigned(command.checksum, 4)
                self.write_unsigned(command.scale, 4)
                self.write_unsigned(command.design_size, 4)
                self.write_unsigned(command.area, 1)
                self.write_unsigned(command.length, 1)
                self.write_string(command.font_name, command.area + command.length)
            case Pre(format=format_id, num=num, den=den, mag=mag, comment=comment):
                self._write_opcode(247)
                self.write_unsigned(format_id, 1)
                self.write_unsigned(num, 4)
                self.write_unsigned(den, 4)
                self.write_unsigned(mag, 4)
                self.write_unsigned(len(comment), 1)
                self.write_bytes(comment, len(comment))
            case Post():
                self._write_opcode(248)
                self.write_unsigned(command.pointer, 4)
                self.write_unsigned(command.num, 4)
                self.write_unsigned(command.den, 4)
                self.write_unsigned(command.mag, 4)
                self.write_unsigned(command.max_page_height, 4)
                self.write_unsigned(command.max_page_width, 4)
                self.write_unsigned(command.max_stack_depth, 2)
                self.write_unsigned(command.num_pages, 2)
            case PostPost(post_pointer=post_pointer, format=format_id, tail=tail):
                self._write_opcode(249)
                self.write_unsigned(post_pointer, 4)
                self.write_unsigned(format_id, 1)
                self._stream.write(bytes([_POST_POST_FILL]) * tail)
            case _:
                raise TypeError(f"not a DVI command: {command!r}")


def write_dvi(dvi_file: DVIFile, stream: BinaryIO) -> None:
    """Write every command of a DVI file to a binary stream."""
    writer = DVIWriter(stream)
    for command in dvi_file.commands:
        writer.write_command(command)


def dvi_to_bytes(dvi_file: DVIFile) -> bytes:
    """Return the bytes of a whole DVI file."""
    buffer = io.BytesIO()
    write_dvi(dvi_file, buffer)
    return buffer.getvalue()