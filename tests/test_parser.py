import io

import pytest

from dvikit.dvi.commands import (
    Bop,
    Down,
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
from dvikit.dvi.parser import DVIParseError, parse_dvi_bytes, read_command, read_dvi
from dvikit.dvi.reader import DVIReader

FONT_DEF_BYTES = [
    243,
    0,
    0x12, 0x34, 0x56, 0x78,
    0, 10, 0, 0,
    0, 10, 0, 0,
    0,
    5,
    *b"cmr10",
]

TEST_BYTES = bytes(
    [
        # pre
        247, 2, 1, 131, 146, 192, 28, 59, 0, 0, 0, 0, 3, 232, 2, *b"hi",
        # bop
        139,
        0, 0, 0, 1,
        *([0] * 36),
        0xFF, 0xFF, 0xFF, 0xFF,
        # push, pop
        141,
        142,
        *FONT_DEF_BYTES,
        # fnt_num 63, fnt_num 0
        234,
        171,
        # set_char 0, set_char 127
        0,
        127,
        # right2, right3, right4
        144, 138, 208,
        145, 255, 21, 160,
        146, 248, 164, 50, 235,
        # w0, w2, w3
        147,
        149, 138, 208,
        150, 255, 21, 160,
        # down2, down3, down4
        158, 138, 208,
        159, 255, 21, 160,
        160, 248, 164, 50, 235,
        # y0, y3
        161,
        164, 255, 21, 160,
        # eop
        140,
        # post
        248,
        0, 0, 0, 18,
        1, 131, 146, 192,
        28, 59, 0, 0,
        0, 0, 3, 232,
        0, 1, 0, 0,
        0, 1, 0, 0,
        0, 1,
        0, 1,
        *FONT_DEF_BYTES,
        # post_post
        249, 0, 0, 0, 128, 2, 223, 223, 223, 223, 223, 223,
    ]
)

FONT_DEF = FntDef(
    font_num=0,
    checksum=305419896,
    scale=655360,
    design_size=655360,
    area=0,
    length=5,
    font_name="cmr10",
    size=1,
)

EXPECTED = DVIFile(
    [
        Pre(format=2, num=25400000, den=473628672, mag=1000, comment=b"hi"),
        Bop(cs=(1, 0, 0, 0, 0, 0, 0, 0, 0, 0), pointer=-1),
        Push(),
        Pop(),
        FONT_DEF,
        FntNum(63),
        FntNum(0),
        SetChar(0),
        SetChar(127),
        Right(-30000, 2),
        Right(-60000, 3),
        Right(-123456789, 4),
        W(),
        W(-30000, 2),
        W(-60000, 3),
        Down(-30000, 2),
        Down(-60000, 3),
        Down(-123456789, 4),
        Y(),
        Y(-60000, 3),
        Eop(),
        Post(
            pointer=18,
            num=25400000,
            den=473628672,
            mag=1000,
            max_page_height=65536,
            max_page_width=65536,
            max_stack_depth=1,
            num_pages=1,
        ),
        FONT_DEF,
        PostPost(post_pointer=128, format=2, tail=6),
    ]
)


def test_parses_dvis():
    assert parse_dvi_bytes(TEST_BYTES) == EXPECTED


def test_read_dvi_from_stream_matches_bytes():
    assert read_dvi(io.BytesIO(TEST_BYTES)) == EXPECTED


def test_parsed_byte_size_matches_input_length():
    assert parse_dvi_bytes(TEST_BYTES).byte_size() == len(TEST_BYTES)


def test_empty_input_gives_no_commands():
    assert parse_dvi_bytes(b"").commands == []


def test_read_command_returns_none_at_end():
    reader = DVIReader(io.BytesIO(bytes([141])))
    assert read_command(reader) == Push()
    assert read_command(reader) is None


def test_parses_x_and_fnt4_and_fnt_def4():
    data = bytes(
        [
            152,
            154, 138, 208,
            155, 255, 21, 160,
            238, 0, 0, 0, 7,
            246, 0, 0, 0, 3, 0, 0, 0, 1, 0, 7, 0, 0, 0, 7, 0, 0, 0, 4, *b"cmr7",
        ]
    )
    assert parse_dvi_bytes(data).commands == [
        X(),
        X(-30000, 2),
        X(-60000, 3),
        Fnt(7, 4),
        FntDef(
            font_num=3,
            checksum=1,
            scale=7 * 65536,
            design_size=7 * 65536,
            area=0,
            length=4,
            font_name="cmr7",
            size=4,
        ),
    ]


def test_post_post_counts_tail_bytes():
    data = bytes([249, 0, 0, 0, 61, 2, 223, 223, 223, 223])
    assert parse_dvi_bytes(data).commands == [PostPost(post_pointer=61, format=2, tail=4)]


def test_unknown_pre_format_raises():
    data = bytes([247, 3, 1, 131, 146, 192, 28, 59, 0, 0, 0, 0, 3, 232, 0])
    with pytest.raises(DVIParseError, match="Unknown DVI format: 3"):
        parse_dvi_bytes(data)


@pytest.mark.parametrize("opcode", [128, 143, 148, 165, 235, 239, 244])
def test_unimplemented_opcode_raises(opcode):
    with pytest.raises(DVIParseError, match=f"Unimplemented opcode: {opcode}"):
        parse_dvi_bytes(bytes([opcode]))


@pytest.mark.parametrize("opcode", [250, 255])
def test_invalid_opcode_raises(opcode):
    with pytest.raises(DVIParseError, match=f"Invalid opcode: {opcode}"):
        parse_dvi_bytes(bytes([opcode]))


def test_truncated_command_raises():
    with pytest.raises(DVIParseError, match="Truncated"):
        parse_dvi_bytes(bytes([146, 0, 0]))