from __future__ import annotations
from enum import Enum
from .cursor import Cursor

BACKSLASH = 0x5C


class ScanState(Enum):
    PLAIN = "plain"
    SAW_ESCAPE = "saw_escape"


def read_escaped(cur: Cursor, max_length: int) -> bytes:
    """
    Read up to ``max_length`` output bytes from the front of ``cur``.

    ``\\\\`` yields one literal backslash. A backslash followed by any other
    byte (or by end of buffer) ends the string: the backslash is consumed and
    dropped, the byte after it is left for the next read.
    """
    if max_length < 0:
        raise ValueError(f"negative max_length {max_length}")
    out = bytearray()
    state = ScanState.PLAIN

    while True:
        if state is ScanState.PLAIN:
            if len(out) >= max_length or cur.remaining() == 0:
                break
            b = cur.take_byte()
            if b == BACKSLASH:
                state = ScanState.SAW_ESCAPE
            else:
                out.append(b)
        else:
            # lone backslash: terminator
            if cur.remaining() == 0 or cur.peek_byte() != BACKSLASH:
                break
            cur.take_byte()
            out.append(BACKSLASH)
            state = ScanState.PLAIN

    return bytes(out)
