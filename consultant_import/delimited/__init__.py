"""Byte decoding, tokenizing and header mapping for delimited text files."""

from .encoding import decode_bytes
from .reader import EmptyFileError, HeaderMap, RawRow, Table, read_table
from .tokenizer import tokenize

__all__ = [
    "decode_bytes",
    "tokenize",
    "read_table",
    "EmptyFileError",
    "HeaderMap",
    "RawRow",
    "Table",
]
