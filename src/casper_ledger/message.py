from dataclasses import dataclass

from .checksummed_hex import blake2b

MESSAGE_PREFIX = b"Casper Message:\n"


@dataclass(frozen=True)
class CasperMessage:
    """
    An off-chain message to sign.

    The prefix keeps a signed message from ever being a valid deploy.
    """
    data: bytes

    @classmethod
    def new(cls, message: bytes) -> "CasperMessage":
        return cls(MESSAGE_PREFIX + bytes(message))

    @classmethod
    def raw(cls, data: bytes) -> "CasperMessage":
        return cls(bytes(data))

    @property
    def inner(self) -> bytes:
        return self.data

    def hashed(self) -> bytes:
        return blake2b(self.data)
