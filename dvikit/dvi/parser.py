"""Parsing DVI files into their commands."""

from __future__ import annotations

import io
from typing import BinaryIO, Optional

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
    PostPost,
    Pre,
    Push,
    Right,
    SetChar,
    W,
    X,
    Y,
)
from dvikit.dvi.reader import DVIReader


class DVIParseError(ValueError):
    """Raised when the bytes of a DVI file cannot be read as commands."""


def _read_font_def(reader: DVIReader, size: int) -> FntDef:
    if size == 4:
        font_num = reader.read_signed(4)
    else:
        font_num = reader.read_unsigned(size)
    checksum = reader.read_unsigned(4)
    scale = reader.read_unsigned(4)
    design_size = reader.read_unsigned(4)
    area = reader.read_unsigned(1)
    length = reader.read_unsigned(1)
    font_name = reader.read_string(area + length)
    return FntDef(
        font_num=font_num,
        checksum=checksum,
        scale=scale,
        design_size=design_size,
        area=area,
        length=length,
        font_name=font_name,
        size=size,
    )


def _read_pre(reader: DVIReader) -> Pre:
    format_id = reader.read_unsigned(1)
    if format_id != 2:
        raise DVIParseError(f"Unknown DVI format: {format_id}")
    num = reader.read_unsigned(4)
    den = reader.read_unsigned(4)
    mag = reader.read_unsigned(4)
    comment_length = reader.read_unsigned(1)
    comment = reader.read_bytes(comment_length)
    return Pre(format=format_id, num=num, den=den, mag=mag, comment=comment)


def _read_post(reader: DVIReader) -> Post:
    return Post(
        pointer=reader.read_unsigned(4),
        num=reader.read_unsigned(4),
        den=reader.read_unsigned(4),
        mag=reader.read_unsigned(4),
        max_page_height=reader.read_unsigned(4),
        max_page_width=reader.read_unsigned(4),
        max_stack_depth=reader.read_unsigned(2),
        num_pages=reader.read_unsigned(2),
    )


def _read_post_post(reader: DVIReader) -> PostPost:
    post_pointer = reader.read_unsigned(4)
    format_id = reader.read_unsigned(1)
    tail = 0
    while True:
        try:
            reader.read_unsigned(1)
        except EOFError:
            break
        tail += 1
    return PostPost(post_pointer=post_pointer, format=format_id, tail=tail)


def _read_operands(reader: DVIReader, opcode: int) -> DVICommand:
    if opcode <= 127:
        return SetChar(opcode)
    if 171 <= opcode <= 234:
        return FntNum(opcode - 171)

    match opcode:
        case 139:
            cs = tuple(reader.read_signed(4) for _ in range(10))
            return Bop(cs=cs, pointer=reader.read_signed(4))
        case 140:
            return Eop()
        case 141:
            return Push()
        case 142:
            return Pop()
        case 144 | 145 | 146:
            size = opcode - 142
            return Right(reader.read_signed(size), size)
        case 147:
            return W()
        case 149 | 150:
            size = opcode - 147
            return W(reader.read_signed(size), size)
        case 152:
            return X()
        case 154 | 155:
            size = opcode - 152
            return X(reader.read_signed(size), size)
        case 158 | 159 | 160:
            size = opcode - 156
            return Down(reader.read_signed(size), size)
        case 161:
            return Y()
        case 164:
            return Y(reader.read_signed(3), 3)
        case 238:
            return Fnt(reader.read_signed(4), 4)
        case 243:
            return _read_font_def(reader, 1)
        case 246:
            return _read_font_def(reader, 4)
        case 247:
            return _read_pre(reader)
        case 248:
            return _read_post(reader)
        case 249:
            return _read_post_post(reader)

    if opcode <= 249:
        raise DVIParseError(f"Unimplemented opcode: {opcode}")
    raise DVIParseError(f"Invalid opcode: {opcode}")


def read_command(reader: DVIReader) -> Optional[DVICommand]:
    """Read one command, or return None when the stream is already exhausted."""
    try:
        opcode = reader.read_unsigned(1)
    except EOFError:
        return None
    try:
        return _read_operands(reader, opcode)
    except EOFError as err:
        raise DVIParseError(f"Truncated command with opcode {opcode}") from err


def read_dvi(stream: BinaryIO) -> DVIFile:
    """Read every command from a binary stream into a DVIFile."""
    reader = DVIReader(stream)
    commands: list[DVICommand] = []
    while (command := read_command(reader)) is not None:
        commands.append(command)
    return DVIFile(commands)


def parse_dvi_bytes(data: bytes) -> DVIFile:
    """Parse the bytes of a whole DVI file."""
    return read_dvi(io.BytesIO(data))