from __future__ import annotations

class Cursor:
    """Dual-ended cursor over a borrowed byte view.

    The remaining region is ``buf[front:back]``. Bulk reads advance ``front``;
    bounded scalar reads pull single bytes off ``back``. The two offsets only
    move towards each other.
    """
    __slots__ = ("buf", "front", "back")

    def __init__(self, data: bytes | bytearray | memoryview):
        self.buf = memoryview(data).cast("B")
        self.front = 0
        self.back = len(self.buf)

    def remaining(self) -> int: return self.back - self.front
    def span(self) -> tuple[int, int]: return self.front, self.back

    def _check(self) -> None:
        if not (0 <= self.front <= self.back <= len(self.buf)):
            raise ValueError(f"cursor ends crossed: front {self.front}, back {self.back}")

    # front (forward) reads, clamped to what is left
    def take(self, n: int) -> bytes:
        if n < 0: raise ValueError(f"negative read size {n}")
        end = self.front + min(n, self.remaining())
        out = self.buf[self.front:end].tobytes()
        self.front = end
        self._check()
        return out

    def take_into(self, dest, n: int) -> int:
        if n < 0: raise ValueError(f"negative read size {n}")
        n = min(n, self.remaining())
        view = memoryview(dest).cast("B")
        view[:n] = self.buf[self.front:self.front + n]
        self.front += n
        self._check()
        return n

    def take_byte(self) -> int:
        if self.remaining() <= 0: raise ValueError("front underrun")
        b = self.buf[self.front]
        self.front += 1
        return b

    def peek_byte(self) -> int:
        if self.remaining() <= 0: raise ValueError("peek underrun")
        return self.buf[self.front]

    def take_rest(self) -> bytes:
        return self.take(self.remaining())

    # back (tail) reads
    def take_back_byte(self) -> int:
        if self.remaining() <= 0: raise ValueError("back underrun")
        self.back -= 1
        self._check()
        return self.buf[self.back]
