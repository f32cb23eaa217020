"""DVI commands, with parsing, writing and page interpretation."""

__all__ = ["commands", "reader", "parser", "writer", "interpreter"]