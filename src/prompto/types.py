"""
Ready-made conversion targets.

The fixed-width integers parse the way a strict integer parser does: an
optional sign followed by ASCII digits, nothing else, and the value must fit
the width. ``int("3_2")`` and ``int(" 32 ")`` succeed; ``Int32.from_str``
rejects both.
"""

from __future__ import annotations

import re
from typing import NamedTuple, Type

_SIGNED_RE = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_RE = re.compile(r"\+?[0-9]+")
_HEX_COLOR_RE = re.compile(r"#[0-9A-Fa-f]{6}")


class FixedWidthInt(int):
    bits = 0
    signed = True

    @classmethod
    def min_value(cls) -> int:
        return -(1 << (cls.bits - 1)) if cls.signed else 0

    @classmethod
    def max_value(cls) -> int:
        return (1 << (cls.bits - 1)) - 1 if cls.signed else (1 << cls.bits) - 1

    @classmethod
    def from_str(cls, text: str) -> "FixedWidthInt":
        pattern = _SIGNED_RE if cls.signed else _UNSIGNED_RE
        if not pattern.fullmatch(text):
            raise ValueError(f"invalid digit found in {text!r}")
        value = int(text)
        if not cls.min_value() <= value <= cls.max_value():
            raise OverflowError(f"{text} out of range for {cls.__name__}")
        return cls(value)


def _fixed_width(name: str, bits: int, signed: bool) -> Type[FixedWidthInt]:
    return type(name, (FixedWidthInt,), {"bits": bits, "signed": signed, "__module__": __name__})


Int8 = _fixed_width("Int8", 8, True)
Int16 = _fixed_width("Int16", 16, True)
Int32 = _fixed_width("Int32", 32, True)
Int64 = _fixed_width("Int64", 64, True)
UInt8 = _fixed_width("UInt8", 8, False)
UInt16 = _fixed_width("UInt16", 16, False)
UInt32 = _fixed_width("UInt32", 32, False)
UInt64 = _fixed_width("UInt64", 64, False)


class Rgb(NamedTuple):
    """A colour as three bytes, parsed from ``#rrggbb``."""

    r: int
    g: int
    b: int

    @classmethod
    def from_str(cls, hex_code: str) -> "Rgb":
        if not _HEX_COLOR_RE.fullmatch(hex_code):
            raise ValueError(f"not a #rrggbb colour: {hex_code!r}")
        return cls(
            r=int(hex_code[1:3], 16),
            g=int(hex_code[3:5], 16),
            b=int(hex_code[5:7], 16),
        )

    @classmethod
    def default(cls) -> "Rgb":
        return cls(0, 0, 0)


__all__ = [
    "FixedWidthInt",
    "Int8",
    "Int16",
    "Int32",
    "Int64",
    "UInt8",
    "UInt16",
    "UInt32",
    "UInt64",
    "Rgb",
]
