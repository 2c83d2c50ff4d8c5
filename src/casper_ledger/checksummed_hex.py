"""
Hexadecimal encoding with mixed-case checksums.

The scheme follows the idea of EIP-55, with a few differences:
  - works on any length of data, not only 20-byte addresses
  - uses blake2b-256 rather than keccak
  - uses the bits of the hash rather than its nibbles

Inputs longer than SMALL_BYTES_COUNT are encoded as plain lowercase
hexadecimal, no checksum is carried for them.
"""
import hashlib
from itertools import cycle
from typing import Iterator

# The number of input bytes, at or below which the output carries a checksum.
SMALL_BYTES_COUNT = 75

HEX_CHARS = "0123456789abcdefABCDEF"


class ChecksumError(ValueError):
    pass


def blake2b(data: bytes) -> bytes:
    return hashlib.blake2b(data, digest_size=32).digest()


def bytes_to_nibbles(data: bytes) -> Iterator[int]:
    for byte in data:
        yield (byte >> 4) & 0x0F
        yield byte & 0x0F


def bytes_to_bits_cycle(data: bytes) -> Iterator[bool]:
    """Infinite stream of the bits of `data`, least significant bit of each byte first."""
    for byte in cycle(data):
        for offset in range(8):
            yield (byte >> offset) & 0x01 == 0x01


def _encode_iter(data: bytes) -> Iterator[str]:
    hash_bits = bytes_to_bits_cycle(blake2b(data))
    for nibble in bytes_to_nibbles(data):
        # one bit per nibble, digits included
        upper = next(hash_bits)
        if nibble >= 10 and upper:
            # HEX_CHARS[10] == 'a', HEX_CHARS[16] == 'A'
            nibble += 6
        yield HEX_CHARS[nibble]


def encode(data: bytes) -> str:
    data = bytes(data)
    if len(data) > SMALL_BYTES_COUNT:
        return data.hex()
    return "".join(_encode_iter(data))


def decode(text: str) -> bytes:
    """
    Decodes a hexadecimal string, checking the casing of small inputs.

    Raises ChecksumError when the string is not hexadecimal or when a small
    input does not carry the expected mixed-case checksum.
    """
    try:
        data = bytes.fromhex(text)
    except ValueError as e:
        raise ChecksumError(f"'{text}' is not valid hexadecimal") from e
    if len(data) <= SMALL_BYTES_COUNT and encode(data) != text:
        raise ChecksumError(f"Checksum mismatch for '{text}'")
    return data


def verify(text: str) -> bool:
    try:
        decode(text)
    except ChecksumError:
        return False
    return True
