"""A small regular expression engine: parser, Thompson NFA compiler and matcher."""

__version__ = "0.1.0"