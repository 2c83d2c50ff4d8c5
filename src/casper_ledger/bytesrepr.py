import struct
from typing import Iterable


class BytesreprError(ValueError):
    pass


def u8(value: int) -> bytes:
    return struct.pack("<B", value)


def u32(value: int) -> bytes:
    return struct.pack("<I", value)


def u64(value: int) -> bytes:
    return struct.pack("<Q", value)


def i32(value: int) -> bytes:
    return struct.pack("<i", value)


def i64(value: int) -> bytes:
    return struct.pack("<q", value)


def big_uint(value: int, max_bytes: int) -> bytes:
    """U128, U256 and U512: one length byte followed by the minimal little-endian magnitude."""
    if value < 0:
        raise BytesreprError(f"Negative value {value} for an unsigned integer")
    size = (value.bit_length() + 7) // 8
    if size > max_bytes:
        raise BytesreprError(f"Value {value} does not fit in {max_bytes} bytes")
    return u8(size) + value.to_bytes(size, "little")


def string(value: str) -> bytes:
    encoded = value.encode("utf8")
    return u32(len(encoded)) + encoded


def byte_vec(value: bytes) -> bytes:
    return u32(len(value)) + bytes(value)


def sequence(items: Iterable[bytes]) -> bytes:
    items = list(items)
    return u32(len(items)) + b"".join(items)


class Reader:
    def __init__(self, data: bytes):
        self._data = bytes(data)
        self._offset = 0

    def take(self, size: int) -> bytes:
        if self._offset + size > len(self._data):
            raise BytesreprError(
                f"Early end of stream: wanted {size} bytes, {len(self._data) - self._offset} left"
            )
        chunk = self._data[self._offset:self._offset + size]
        self._offset += size
        return chunk

    def _unpack(self, fmt: str) -> int:
        return struct.unpack(fmt, self.take(struct.calcsize(fmt)))[0]

    def u8(self) -> int:
        return self._unpack("<B")

    def u32(self) -> int:
        return self._unpack("<I")

    def u64(self) -> int:
        return self._unpack("<Q")

    def i32(self) -> int:
        return self._unpack("<i")

    def i64(self) -> int:
        return self._unpack("<q")

    def big_uint(self, max_bytes: int) -> int:
        size = self.u8()
        if size > max_bytes:
            raise BytesreprError(f"Length {size} exceeds the {max_bytes} bytes of the type")
        return int.from_bytes(self.take(size), "little")

    def bool(self) -> bool:
        value = self.u8()
        if value > 1:
            raise BytesreprError(f"Invalid boolean byte 0x{value:02x}")
        return value == 1

    def string(self) -> str:
        raw = self.take(self.u32())
        try:
            return raw.decode("utf8")
        except UnicodeDecodeError as e:
            raise BytesreprError("Invalid utf8 string") from e

    def byte_vec(self) -> bytes:
        return self.take(self.u32())

    def finish(self) -> None:
        if self._offset != len(self._data):
            raise BytesreprError(f"{len(self._data) - self._offset} trailing bytes left")
