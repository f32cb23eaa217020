# dvikit

Building blocks for a TeX-style typesetter, and tools for the DVI
("device independent") output format. Pure Python, no dependencies.

## What is inside

- `dvikit.dimension`
  - `Dimen`: a length held as an integer number of scaled points
    (65536 per point). Values outside ±(2³⁰−1) raise `DimensionError`.
    Build one with `Dimen.zero()`, `Dimen.from_unit(num, unit)` or
    `Dimen.from_scaled_points(sp)`; convert back with `to_unit(unit)`.
    Supports `+`, `-`, `*` by an integer, `//` by an integer (truncating
    toward zero), unary `-`, `abs()` and ordering. `scale(num, den)`
    computes `self * num / den` without intermediate rounding and
    `ratio(other)` gives a float quotient.
  - `Unit`: `POINT`, `PICA`, `INCH`, `BIG_POINT`, `CENTIMETER`,
    `MILLIMETER`, `DIDOT_POINT`, `CICERO`, `SCALED_POINT`.
  - `FilKind` (`FIL`, `FILL`, `FILLL`) and `FilDimen` for infinite
    stretch and shrink. Adding two `FilDimen`s of different orders keeps
    the higher order.
  - `add_spring(a, b)` and `scale_spring(spring, factor)` work on either a
    `Dimen` or a `FilDimen`; an infinite amount swallows a finite one.
  - `MuDimen`, a math-unit length, with `to_dimen(quad)`.
- `dvikit.glue`: `Glue` (space, stretch, shrink) with `zero()`,
  `from_dimen()`, `+` and `-`; `MuGlue` with `to_glue(quad)`.
- `dvikit.category`: `Category`, the sixteen character category codes.
- `dvikit.font`: `Font`, a font name at a scale.
- `dvikit.boxes`
  - `HorizontalBox` and `VerticalBox`, holding `height`, `depth`,
    `width`, a `contents` list and an optional `glue_set_ratio`.
    `to_chars()` flattens a box to a list of characters (spaces for glue,
    a newline after each box in a vertical list).
  - List elements `CharElem`, `HSkip`, `VSkip` and `BoxElem` (a box with
    an optional `shift`).
  - `GlueSetRatio.from_ratio(kind, ratio)` and `apply_to_glue(glue)`,
    which give the size a glue takes once a box is set. Negative ratios
    shrink, positive ones stretch, and only glue of the ratio's
    `GlueSetRatioKind` is affected.
- `dvikit.dvi.commands`: one class per DVI command: `SetChar`, `Set`,
  `Put`, `SetRule`, `PutRule`, `Nop`, `Bop`, `Eop`, `Push`, `Pop`,
  `Right`, `Down`, `W`, `X`, `Y`, `Z`, `FntNum`, `Fnt`, `XXX`, `FntDef`,
  `Pre`, `Post`, `PostPost`. Every command has `byte_size()`. Commands
  that come in 1–4 byte forms take a `size` argument. `DVIFile` holds a
  list of commands and has `byte_size()` too.
- `dvikit.dvi.reader`: `DVIReader`, reading big-endian integers, byte
  arrays and UTF-8 strings from a binary stream.
- `dvikit.dvi.parser`: `read_dvi(stream)` and `parse_dvi_bytes(data)`
  return a `DVIFile`. `read_command(reader)` reads one command. Malformed
  or truncated input raises `DVIParseError`.
- `dvikit.dvi.writer`: `DVIWriter`, plus `write_dvi(dvi_file, stream)`
  and `dvi_to_bytes(dvi_file)` to serialise a `DVIFile`.
- `dvikit.dvi.interpreter`: `interpret_dvi_file(dvi_file, width_of)` and
  `interpret_page(commands, width_of)` work out which characters land
  where. Each page comes back as a dict from `(h, v)` positions to sets of
  `CharacterElement(char, font)`. Bad structure raises
  `DVIInterpretError`.

## Example

```python
from dvikit.dimension import Dimen, Unit
from dvikit.dvi.interpreter import interpret_dvi_file
from dvikit.dvi.parser import parse_dvi_bytes
from dvikit.dvi.writer import dvi_to_bytes

with open("paper.dvi", "rb") as fh:
    data = fh.read()

dvi = parse_dvi_bytes(data)
print(dvi.byte_size(), "bytes in", len(dvi.commands), "commands")
print(dvi_to_bytes(dvi) == data)

# width_of(font, char_code) -> Dimen; font is a dvikit.font.Font
def width_of(font, code):
    return Dimen.from_unit(5.0, Unit.POINT)

for page in interpret_dvi_file(dvi, width_of):
    for (h, v), chars in sorted(page.items()):
        print(h, v, chars)
```

## What it does not do

- It does not read font metric (TFM) files. The interpreter asks the
  `width_of` callable you pass in for each character's width.
- It has no typesetter: nothing turns boxes into DVI commands, and there
  is no command-line tool.
- The parser reads only `set_char`, `bop`, `eop`, `push`, `pop`,
  `right2`–`right4`, `w0`, `w2`, `w3`, `x0`, `x2`, `x3`, `down2`–`down4`,
  `y0`, `y3`, `fnt_num`, `fnt4`, `fnt_def1`, `fnt_def4`, `pre`, `post` and
  `post_post`; any other opcode raises `DVIParseError`. The writer can
  write every command class.
- The interpreter only places characters set with `SetChar`; rules,
  specials and the `Set`/`Put` forms raise `DVIInterpretError`. It accepts
  only format 2 files with the standard units and a magnification of 1000.

## Tests

```
pip install -e .[test]
pytest
```