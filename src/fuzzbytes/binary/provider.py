from __future__ import annotations

import logging
import math
from enum import Enum
from typing import List, Optional, Sequence, Type, TypeVar

from .codecs.cursor import Cursor
from .codecs.escaped_string import read_escaped
from .numeric import (
    FLOAT64,
    INT64,
    U64_MAX,
    UINT8,
    UINT32,
    UINT64,
    FloatKind,
    IntKind,
    bytes_for_width,
    range_width,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")
E = TypeVar("E", bound=Enum)

# Latin-1 maps each byte to one code point, so text results round-trip exactly.
TEXT_CODEC = "latin-1"


class Provider:
    """
    Deterministic decoder of typed values from a fuzzer-supplied byte buffer.

    Bulk data (bytes, strings) is read from the front of the buffer; range
    bounded scalars (integers, bools, enum and array picks, probabilities) are
    read from the back. Running out of data never raises: every operation
    degrades to a fixed default built from the bytes that were left.

    The buffer is borrowed, not copied, and must not change while the
    provider is in use. Instances are not thread-safe.
    """

    def __init__(self, data: bytes | bytearray | memoryview):
        self._cur = Cursor(data)

    @property
    def cursor(self) -> Cursor:
        return self._cur

    def remaining_bytes(self) -> int:
        return self._cur.remaining()

    # -----------------------------
    # Front: raw bytes and strings
    # -----------------------------

    def consume_bytes(self, n: int) -> bytes:
        if n > self._cur.remaining():
            logger.debug("consume_bytes(%d) truncated to %d", n, self._cur.remaining())
        return self._cur.take(n)

    def consume_bytes_with_terminator(self, n: int, terminator: int = 0) -> bytes:
        """One slot of ``n`` is reserved for ``terminator``, so ``n - 1`` bytes are read."""
        if not 0 <= terminator <= 0xFF:
            raise ValueError(f"terminator {terminator} is not a byte value")
        out = bytearray(self.consume_bytes(max(n - 1, 0)))
        out.append(terminator)
        return bytes(out)

    def consume_bytes_as_string(self, n: int) -> str:
        return self.consume_bytes(n).decode(TEXT_CODEC)

    def consume_remaining_bytes(self) -> bytes:
        return self._cur.take_rest()

    def consume_remaining_bytes_as_string(self) -> str:
        return self.consume_remaining_bytes().decode(TEXT_CODEC)

    def consume_data(self, destination, max_size: int) -> int:
        """Copy up to ``max_size`` bytes into ``destination``; returns the count copied."""
        if max_size > len(memoryview(destination).cast("B")):
            raise ValueError(f"max_size {max_size} exceeds destination length")
        return self._cur.take_into(destination, max_size)

    def consume_random_length_string(self, max_length: Optional[int] = None) -> str:
        if max_length is None:
            max_length = self._cur.remaining()
        return read_escaped(self._cur, max_length).decode(TEXT_CODEC)

    # -----------------------------
    # Back: bounded integers
    # -----------------------------

    def _consume_tail_uint(self, width: int, size: int) -> int:
        # Big-endian accumulation of bytes popped off the back; missing bytes
        # (exhausted buffer) are treated as zero high-order bytes.
        acc = 0
        for _ in range(bytes_for_width(width, size)):
            if self._cur.remaining() == 0:
                break
            acc = (acc << 8) | self._cur.take_back_byte()
        return acc

    def consume_integral_in_range(self, min: int, max: int, kind: IntKind = INT64) -> int:
        if min > max:
            raise ValueError(f"min {min} > max {max}")
        if not (kind.contains(min) and kind.contains(max)):
            raise ValueError(f"[{min}, {max}] outside {kind.name}")
        if min == max:
            return min

        width = range_width(min, max)
        acc = self._consume_tail_uint(width, kind.size)
        if width != U64_MAX:
            acc %= width + 1
        return min + acc

    def consume_integral(self, kind: IntKind = INT64) -> int:
        return self.consume_integral_in_range(kind.min, kind.max, kind)

    def consume_bool(self) -> bool:
        return bool(1 & self.consume_integral(UINT8))

    def pick_value_in_array(self, values: Sequence[T]) -> T:
        if len(values) == 0:
            raise ValueError("cannot pick from an empty sequence")
        return values[self.consume_integral_in_range(0, len(values) - 1, UINT64)]

    def consume_enum(self, enum_cls: Type[E]) -> E:
        members = list(enum_cls)
        if not members:
            raise ValueError(f"{enum_cls.__name__} has no members")
        return members[self.consume_integral_in_range(0, len(members) - 1, UINT32)]

    # -----------------------------
    # Floating point
    # -----------------------------

    def consume_probability(self, kind: FloatKind = FLOAT64) -> float:
        src = kind.probability_kind
        num = kind.round(float(self.consume_integral(src)))
        return kind.round(num / kind.round(float(src.max)))

    def consume_floating_point_in_range(self, min: float, max: float, kind: FloatKind = FLOAT64) -> float:
        if min > max:
            raise ValueError(f"min {min} > max {max}")
        if not (math.isfinite(min) and math.isfinite(max) and kind.lowest <= min and max <= kind.max):
            raise ValueError(f"[{min}, {max}] outside finite {kind.name}")
        r = kind.round
        lo, hi = r(min), r(max)
        if lo == hi:
            return lo

        start = lo
        if hi > 0.0 and lo < 0.0 and hi > r(lo + kind.max):
            # max - min is not representable; split around the midpoint and
            # let one bool pick the half.
            width = r(r(hi / 2.0) - r(lo / 2.0))
            if self.consume_bool():
                start = r(start + width)
        else:
            width = r(hi - lo)

        value = r(start + r(width * self.consume_probability(kind)))
        if value < lo:
            return lo
        if value > hi:
            return hi
        return value

    def consume_floating_point(self, kind: FloatKind = FLOAT64) -> float:
        return self.consume_floating_point_in_range(kind.lowest, kind.max, kind)

    # -----------------------------
    # Lists
    # -----------------------------

    def consume_integral_list(self, count: int, kind: IntKind = INT64) -> List[int]:
        _check_count(count)
        return [self.consume_integral(kind) for _ in range(count)]

    def consume_integral_list_in_range(self, count: int, min: int, max: int, kind: IntKind = INT64) -> List[int]:
        _check_count(count)
        return [self.consume_integral_in_range(min, max, kind) for _ in range(count)]

    def consume_floating_point_list(self, count: int, kind: FloatKind = FLOAT64) -> List[float]:
        _check_count(count)
        return [self.consume_floating_point(kind) for _ in range(count)]

    def consume_bool_list(self, count: int) -> List[bool]:
        _check_count(count)
        return [self.consume_bool() for _ in range(count)]


def _check_count(count: int) -> None:
    if count < 0:
        raise ValueError(f"negative count {count}")
