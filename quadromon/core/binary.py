from __future__ import annotations


class ReportTruncatedError(ValueError):
    def __init__(self, field: str, needed: int, remaining: int, offset: int) -> None:
        self.field = field
        self.needed = needed
        self.remaining = remaining
        self.offset = offset
        super().__init__(
            f"Report truncated at offset {offset}: '{field}' needs {needed} bytes, only {remaining} left"
        )


def be_to_int(data: bytes, signed: bool = False) -> int:
    return int.from_bytes(data, byteorder="big", signed=signed)


def int_to_be(value: int, width: int, signed: bool = False) -> bytes:
    try:
        return value.to_bytes(width, byteorder="big", signed=signed)
    except OverflowError as exc:
        kind = "signed" if signed else "unsigned"
        raise ValueError(f"{value} does not fit in {width} byte(s) {kind}") from exc


class ByteCursor:
    """
    Sequential reader over an immutable byte buffer.

    Every read checks that enough bytes remain before advancing. A short buffer
    raises ``ReportTruncatedError`` and leaves the cursor where it was.
    """

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self._offset = 0

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def remaining(self) -> int:
        return len(self._data) - self._offset

    def read_bytes(self, count: int, field: str = "bytes") -> bytes:
        if count < 0:
            raise ValueError("count must be non-negative")
        if count > self.remaining:
            raise ReportTruncatedError(field, count, self.remaining, self._offset)
        chunk = self._data[self._offset: self._offset + count]
        self._offset += count
        return chunk

    def skip(self, count: int, field: str = "reserved") -> bytes:
        return self.read_bytes(count, field)

    def read_u8(self, field: str = "u8") -> int:
        return self.read_bytes(1, field)[0]

    def read_u16(self, field: str = "u16") -> int:
        return be_to_int(self.read_bytes(2, field))

    def read_i16(self, field: str = "i16") -> int:
        return be_to_int(self.read_bytes(2, field), signed=True)

    def read_u32(self, field: str = "u32") -> int:
        return be_to_int(self.read_bytes(4, field))
