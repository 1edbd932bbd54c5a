from __future__ import annotations
import math
import struct
from dataclasses import dataclass
from typing import Dict

U64_MAX = (1 << 64) - 1


@dataclass(frozen=True)
class IntKind:
    name: str
    size: int  # bytes
    signed: bool

    @property
    def bits(self) -> int: return self.size * 8

    @property
    def min(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    def contains(self, v: int) -> bool:
        return self.min <= v <= self.max


INT8 = IntKind("int8", 1, True)
UINT8 = IntKind("uint8", 1, False)
INT16 = IntKind("int16", 2, True)
UINT16 = IntKind("uint16", 2, False)
INT32 = IntKind("int32", 4, True)
UINT32 = IntKind("uint32", 4, False)
INT64 = IntKind("int64", 8, True)
UINT64 = IntKind("uint64", 8, False)

INT_KINDS: Dict[str, IntKind] = {
    k.name: k for k in (INT8, UINT8, INT16, UINT16, INT32, UINT32, INT64, UINT64)
}


def to_f32(x: float) -> float:
    """Round a double to the nearest IEEE-754 single; overflow gives signed inf."""
    try:
        return struct.unpack("<f", struct.pack("<f", x))[0]
    except OverflowError:
        return math.copysign(math.inf, x)


@dataclass(frozen=True)
class FloatKind:
    name: str
    size: int  # bytes

    @property
    def max(self) -> float:
        return float.fromhex("0x1.fffffep+127") if self.size == 4 else float.fromhex("0x1.fffffffffffffp+1023")

    @property
    def lowest(self) -> float: return -self.max

    @property
    def probability_kind(self) -> IntKind:
        # narrower float => narrower integer source
        return UINT32 if self.size <= 4 else UINT64

    def round(self, x: float) -> float:
        return to_f32(x) if self.size == 4 else float(x)


FLOAT32 = FloatKind("float32", 4)
FLOAT64 = FloatKind("float64", 8)

FLOAT_KINDS: Dict[str, FloatKind] = {k.name: k for k in (FLOAT32, FLOAT64)}


def range_width(lo: int, hi: int) -> int:
    """Unsigned 64-bit width of ``[lo, hi]``."""
    return (hi - lo) & U64_MAX


def bytes_for_width(width: int, size: int) -> int:
    """Number of tail bytes needed to cover ``width``, capped at ``size``."""
    n = 0
    while n < size and (width >> (n * 8)) > 0:
        n += 1
    return n
