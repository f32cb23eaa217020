import pytest

from dvikit.boxes import (
    BoxElem,
    CharElem,
    GlueSetRatio,
    GlueSetRatioKind,
    HorizontalBox,
    HSkip,
    VerticalBox,
    VSkip,
)
from dvikit.dimension import Dimen, FilDimen, FilKind, Unit
from dvikit.font import Font
from dvikit.glue import Glue

CMR10 = Font("cmr10", Dimen.from_unit(10.0, Unit.POINT))


def pt(value):
    return Dimen.from_unit(value, Unit.POINT)


def test_it_parses_to_chars():
    zero = Dimen.zero()
    inner_hbox = HorizontalBox(
        width=zero,
        height=zero,
        depth=zero,
        contents=[
            CharElem("a", CMR10),
            HSkip(Glue.from_dimen(zero)),
            BoxElem(
                HorizontalBox(
                    width=zero,
                    height=zero,
                    depth=zero,
                    contents=[CharElem("b", CMR10), HSkip(Glue.from_dimen(zero))],
                ),
                zero,
            ),
            CharElem("c", CMR10),
        ],
    )
    test_box = VerticalBox(
        width=zero,
        height=zero,
        depth=zero,
        contents=[
            BoxElem(inner_hbox, zero),
            VSkip(Glue.from_dimen(zero)),
            BoxElem(inner_hbox, zero),
        ],
    )

    assert test_box.to_chars() == [
        "a", " ", "b", " ", "c", "\n",
        "a", " ", "b", " ", "c", "\n",
    ]


def test_empty_box_has_no_chars_and_zero_size():
    box = HorizontalBox.empty()
    assert box.to_chars() == []
    assert (box.width, box.height, box.depth) == (Dimen.zero(),) * 3
    assert box.glue_set_ratio is None


def test_indent_box_shows_as_space():
    box = HorizontalBox(height=Dimen.zero(), depth=Dimen.zero(), width=pt(15))
    assert box.to_chars() == [" "]


def test_wrong_element_in_vertical_box_is_rejected():
    box = VerticalBox(
        height=Dimen.zero(),
        depth=Dimen.zero(),
        width=Dimen.zero(),
        contents=[CharElem("a", CMR10)],
    )
    with pytest.raises(TypeError):
        box.to_chars()


@pytest.mark.parametrize(
    "fil_kind, expected",
    [
        (FilKind.FIL, GlueSetRatioKind.FIL),
        (FilKind.FILL, GlueSetRatioKind.FILL),
        (FilKind.FILLL, GlueSetRatioKind.FILLL),
    ],
)
def test_ratio_kind_from_fil_kind(fil_kind, expected):
    assert GlueSetRatioKind.from_fil_kind(fil_kind) is expected


def test_ratio_is_stored_in_sixty_fourths_of_a_thousandth():
    assert GlueSetRatio.from_ratio(GlueSetRatioKind.FINITE, 1.5).stretch == 98304
    assert GlueSetRatio.from_ratio(GlueSetRatioKind.FIL, -0.5).stretch == -32768


FINITE_STRETCH = Glue(pt(2), pt(3), Dimen.zero())
FINITE_SHRINK = Glue(pt(4), Dimen.zero(), pt(2))
FIL_STRETCH = Glue(pt(2), FilDimen.new(FilKind.FIL, 3.0), Dimen.zero())
FIL_SHRINK = Glue(pt(6), Dimen.zero(), FilDimen.new(FilKind.FIL, 2.0))


@pytest.mark.parametrize(
    "glue, kind, ratio, expected",
    [
        (Glue.from_dimen(pt(2)), GlueSetRatioKind.FINITE, 2.0, 2 * 65536),
        (FINITE_STRETCH, GlueSetRatioKind.FINITE, 1.5, 2 * 65536 + 3 * 3 * 65536 // 2),
        (FINITE_STRETCH, GlueSetRatioKind.FIL, 2.0, 2 * 65536),
        (FINITE_STRETCH, GlueSetRatioKind.FINITE, -1.5, 2 * 65536),
        (FINITE_SHRINK, GlueSetRatioKind.FINITE, -0.5, 4 * 65536 - 2 * 65536 // 2),
        (FINITE_SHRINK, GlueSetRatioKind.FIL, -1.5, 4 * 65536),
        (FINITE_SHRINK, GlueSetRatioKind.FINITE, 1.5, 4 * 65536),
        (FIL_STRETCH, GlueSetRatioKind.FIL, 1.5, 2 * 65536 + 3 * 3 * 65536 // 2),
        (FIL_STRETCH, GlueSetRatioKind.FINITE, 1.5, 2 * 65536),
        (FIL_STRETCH, GlueSetRatioKind.FILL, 1.5, 2 * 65536),
        (FIL_STRETCH, GlueSetRatioKind.FIL, -0.5, 2 * 65536),
        (FIL_SHRINK, GlueSetRatioKind.FIL, -1.5, 6 * 65536 - 3 * 65536),
        (FIL_SHRINK, GlueSetRatioKind.FINITE, -0.5, 6 * 65536),
        (FIL_SHRINK, GlueSetRatioKind.FILL, -1.5, 6 * 65536),
        (FIL_SHRINK, GlueSetRatioKind.FIL, 1.5, 6 * 65536),
    ],
)
def test_applies_ratio_to_glue(glue, kind, ratio, expected):
    set_ratio = GlueSetRatio.from_ratio(kind, ratio)
    assert set_ratio.apply_to_glue(glue) == Dimen.from_scaled_points(expected)