"""Trace parsing - raw Carp stack traces to CallFrame records."""

from stackredact.parser.carp import (
    decode_argument,
    parse,
    parse_arguments,
    split_arguments,
)

__all__ = [
    "decode_argument",
    "parse",
    "parse_arguments",
    "split_arguments",
]
