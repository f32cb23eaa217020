"""TeX dimensions, glue and boxes, with DVI reading, writing and interpretation."""

__version__ = "0.1.0"