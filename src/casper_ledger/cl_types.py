import re
import struct
from dataclasses import dataclass
from enum import IntEnum, IntFlag
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

from . import bytesrepr
from .bytesrepr import BytesreprError, Reader

ADDRESS_LENGTH = 32
SIGNATURE_LENGTH = 64


class CLTypeTag(IntEnum):
    BOOL = 0
    I32 = 1
    I64 = 2
    U8 = 3
    U32 = 4
    U64 = 5
    U128 = 6
    U256 = 7
    U512 = 8
    UNIT = 9
    STRING = 10
    KEY = 11
    UREF = 12
    OPTION = 13
    LIST = 14
    BYTE_ARRAY = 15
    RESULT = 16
    MAP = 17
    TUPLE1 = 18
    TUPLE2 = 19
    TUPLE3 = 20
    ANY = 21
    PUBLIC_KEY = 22


CL_TYPE_NAMES = {
    CLTypeTag.BOOL: "Bool",
    CLTypeTag.I32: "I32",
    CLTypeTag.I64: "I64",
    CLTypeTag.U8: "U8",
    CLTypeTag.U32: "U32",
    CLTypeTag.U64: "U64",
    CLTypeTag.U128: "U128",
    CLTypeTag.U256: "U256",
    CLTypeTag.U512: "U512",
    CLTypeTag.UNIT: "Unit",
    CLTypeTag.STRING: "String",
    CLTypeTag.KEY: "Key",
    CLTypeTag.UREF: "URef",
    CLTypeTag.OPTION: "Option",
    CLTypeTag.LIST: "List",
    CLTypeTag.BYTE_ARRAY: "ByteArray",
    CLTypeTag.RESULT: "Result",
    CLTypeTag.MAP: "Map",
    CLTypeTag.TUPLE1: "Tuple1",
    CLTypeTag.TUPLE2: "Tuple2",
    CLTypeTag.TUPLE3: "Tuple3",
    CLTypeTag.ANY: "Any",
    CLTypeTag.PUBLIC_KEY: "PublicKey",
}

BIG_UINT_BYTES = {
    CLTypeTag.U128: 16,
    CLTypeTag.U256: 32,
    CLTypeTag.U512: 64,
}

INNER_TYPES_COUNT = {
    CLTypeTag.OPTION: 1,
    CLTypeTag.LIST: 1,
    CLTypeTag.RESULT: 2,
    CLTypeTag.MAP: 2,
    CLTypeTag.TUPLE1: 1,
    CLTypeTag.TUPLE2: 2,
    CLTypeTag.TUPLE3: 3,
}


@dataclass(frozen=True)
class CLType:
    tag: CLTypeTag
    inner: Tuple["CLType", ...] = ()
    # ByteArray only
    length: int = 0

    @classmethod
    def option(cls, inner: "CLType") -> "CLType":
        return cls(CLTypeTag.OPTION, (inner,))

    @classmethod
    def list_of(cls, inner: "CLType") -> "CLType":
        return cls(CLTypeTag.LIST, (inner,))

    @classmethod
    def byte_array(cls, length: int) -> "CLType":
        return cls(CLTypeTag.BYTE_ARRAY, (), length)

    @classmethod
    def result(cls, ok: "CLType", err: "CLType") -> "CLType":
        return cls(CLTypeTag.RESULT, (ok, err))

    @classmethod
    def map_of(cls, key: "CLType", value: "CLType") -> "CLType":
        return cls(CLTypeTag.MAP, (key, value))

    @classmethod
    def tuple_of(cls, *items: "CLType") -> "CLType":
        tags = {1: CLTypeTag.TUPLE1, 2: CLTypeTag.TUPLE2, 3: CLTypeTag.TUPLE3}
        if len(items) not in tags:
            raise ValueError(f"Tuples hold 1 to 3 items, not {len(items)}")
        return cls(tags[len(items)], tuple(items))

    def to_bytes(self) -> bytes:
        data = bytesrepr.u8(self.tag)
        if self.tag == CLTypeTag.BYTE_ARRAY:
            data += bytesrepr.u32(self.length)
        for inner in self.inner:
            data += inner.to_bytes()
        return data

    @classmethod
    def from_reader(cls, reader: Reader) -> "CLType":
        raw_tag = reader.u8()
        try:
            tag = CLTypeTag(raw_tag)
        except ValueError as e:
            raise BytesreprError(f"Unknown CLType tag 0x{raw_tag:02x}") from e
        if tag == CLTypeTag.BYTE_ARRAY:
            return cls.byte_array(reader.u32())
        inner = tuple(cls.from_reader(reader) for _ in range(INNER_TYPES_COUNT.get(tag, 0)))
        return cls(tag, inner)

    def __str__(self):
        name = CL_TYPE_NAMES[self.tag]
        if self.tag == CLTypeTag.BYTE_ARRAY:
            return f"{name}({self.length})"
        if self.inner:
            return f"{name}({', '.join(str(inner) for inner in self.inner)})"
        return name


BOOL = CLType(CLTypeTag.BOOL)
I32 = CLType(CLTypeTag.I32)
I64 = CLType(CLTypeTag.I64)
U8 = CLType(CLTypeTag.U8)
U32 = CLType(CLTypeTag.U32)
U64 = CLType(CLTypeTag.U64)
U128 = CLType(CLTypeTag.U128)
U256 = CLType(CLTypeTag.U256)
U512 = CLType(CLTypeTag.U512)
UNIT = CLType(CLTypeTag.UNIT)
STRING = CLType(CLTypeTag.STRING)
KEY = CLType(CLTypeTag.KEY)
UREF = CLType(CLTypeTag.UREF)
ANY = CLType(CLTypeTag.ANY)
PUBLIC_KEY = CLType(CLTypeTag.PUBLIC_KEY)


class AccessRights(IntFlag):
    NONE = 0
    READ = 1
    WRITE = 2
    ADD = 4
    READ_WRITE = 3
    READ_ADD = 5
    ADD_WRITE = 6
    READ_ADD_WRITE = 7


@dataclass(frozen=True)
class URef:
    addr: bytes
    access_rights: AccessRights = AccessRights.NONE

    def __post_init__(self):
        if len(self.addr) != ADDRESS_LENGTH:
            raise ValueError(f"URef address must be {ADDRESS_LENGTH} bytes, not {len(self.addr)}")

    def to_bytes(self) -> bytes:
        return bytes(self.addr) + bytesrepr.u8(self.access_rights)

    @classmethod
    def from_reader(cls, reader: Reader) -> "URef":
        addr = reader.take(ADDRESS_LENGTH)
        raw_rights = reader.u8()
        if raw_rights > AccessRights.READ_ADD_WRITE:
            raise BytesreprError(f"Invalid access rights 0x{raw_rights:02x}")
        return cls(addr, AccessRights(raw_rights))

    def to_formatted_string(self) -> str:
        return f"uref-{self.addr.hex()}-{int(self.access_rights):03o}"


class KeyTag(IntEnum):
    ACCOUNT = 0
    HASH = 1
    UREF = 2
    TRANSFER = 3
    DEPLOY_INFO = 4
    ERA_INFO = 5
    BALANCE = 6
    BID = 7
    WITHDRAW = 8
    DICTIONARY = 9


KEY_PREFIXES = {
    KeyTag.ACCOUNT: "account-hash-",
    KeyTag.HASH: "hash-",
    KeyTag.UREF: "uref-",
    KeyTag.TRANSFER: "transfer-",
    KeyTag.DEPLOY_INFO: "deploy-",
    KeyTag.ERA_INFO: "era-",
    KeyTag.BALANCE: "balance-",
    KeyTag.BID: "bid-",
    KeyTag.WITHDRAW: "withdraw-",
    KeyTag.DICTIONARY: "dictionary-",
}

UREF_FORMATTED_RE = re.compile(r"^uref-([0-9a-fA-F]{64})-([0-7]{3})$")
ADDRESS_HEX_RE = re.compile(r"^[0-9a-fA-F]{64}$")


@dataclass(frozen=True)
class Key:
    tag: KeyTag
    # 32 address bytes, a URef for KeyTag.UREF, an era number for KeyTag.ERA_INFO
    value: Any

    def __post_init__(self):
        if self.tag == KeyTag.UREF:
            if not isinstance(self.value, URef):
                raise ValueError("URef keys wrap a URef")
        elif self.tag == KeyTag.ERA_INFO:
            if not isinstance(self.value, int):
                raise ValueError("EraInfo keys wrap an era number")
        elif len(self.value) != ADDRESS_LENGTH:
            raise ValueError(f"{self.tag.name} keys wrap {ADDRESS_LENGTH} bytes, not {len(self.value)}")

    @classmethod
    def account(cls, account_hash: bytes) -> "Key":
        return cls(KeyTag.ACCOUNT, bytes(account_hash))

    @classmethod
    def hash(cls, addr: bytes) -> "Key":
        return cls(KeyTag.HASH, bytes(addr))

    @classmethod
    def uref(cls, uref: URef) -> "Key":
        return cls(KeyTag.UREF, uref)

    @classmethod
    def era_info(cls, era_id: int) -> "Key":
        return cls(KeyTag.ERA_INFO, era_id)

    @property
    def address(self) -> Optional[bytes]:
        if self.tag == KeyTag.UREF:
            return self.value.addr
        if self.tag == KeyTag.ERA_INFO:
            return None
        return self.value

    def to_bytes(self) -> bytes:
        if self.tag == KeyTag.UREF:
            payload = self.value.to_bytes()
        elif self.tag == KeyTag.ERA_INFO:
            payload = bytesrepr.u64(self.value)
        else:
            payload = bytes(self.value)
        return bytesrepr.u8(self.tag) + payload

    @classmethod
    def from_reader(cls, reader: Reader) -> "Key":
        raw_tag = reader.u8()
        try:
            tag = KeyTag(raw_tag)
        except ValueError as e:
            raise BytesreprError(f"Unknown Key tag 0x{raw_tag:02x}") from e
        if tag == KeyTag.UREF:
            return cls(tag, URef.from_reader(reader))
        if tag == KeyTag.ERA_INFO:
            return cls(tag, reader.u64())
        return cls(tag, reader.take(ADDRESS_LENGTH))

    def to_formatted_string(self) -> str:
        if self.tag == KeyTag.UREF:
            return self.value.to_formatted_string()
        if self.tag == KeyTag.ERA_INFO:
            return f"{KEY_PREFIXES[self.tag]}{self.value}"
        return f"{KEY_PREFIXES[self.tag]}{self.value.hex()}"

    @classmethod
    def from_formatted_str(cls, text: str) -> "Key":
        match = UREF_FORMATTED_RE.match(text)
        if match:
            addr, rights = match.groups()
            return cls.uref(URef(bytes.fromhex(addr), AccessRights(int(rights, 8))))
        for tag, prefix in KEY_PREFIXES.items():
            if tag == KeyTag.UREF or not text.startswith(prefix):
                continue
            remainder = text[len(prefix):]
            if tag == KeyTag.ERA_INFO:
                if remainder.isdigit():
                    return cls.era_info(int(remainder))
            elif ADDRESS_HEX_RE.match(remainder):
                return cls(tag, bytes.fromhex(remainder))
        raise ValueError(f"'{text}' is not a formatted key")


class PublicKeyTag(IntEnum):
    SYSTEM = 0
    ED25519 = 1
    SECP256K1 = 2


PUBLIC_KEY_LENGTHS = {
    PublicKeyTag.SYSTEM: 0,
    PublicKeyTag.ED25519: 32,
    PublicKeyTag.SECP256K1: 33,
}

SIGNATURE_LENGTHS = {
    PublicKeyTag.SYSTEM: 0,
    PublicKeyTag.ED25519: SIGNATURE_LENGTH,
    PublicKeyTag.SECP256K1: SIGNATURE_LENGTH,
}


def _read_tag(reader: Reader) -> PublicKeyTag:
    raw_tag = reader.u8()
    try:
        return PublicKeyTag(raw_tag)
    except ValueError as e:
        raise BytesreprError(f"Unknown asymmetric key tag 0x{raw_tag:02x}") from e


@dataclass(frozen=True)
class PublicKey:
    tag: PublicKeyTag
    raw: bytes = b""

    def __post_init__(self):
        expected = PUBLIC_KEY_LENGTHS[self.tag]
        if len(self.raw) != expected:
            raise ValueError(f"{self.tag.name} public keys are {expected} bytes, not {len(self.raw)}")

    @classmethod
    def system(cls) -> "PublicKey":
        return cls(PublicKeyTag.SYSTEM)

    @classmethod
    def ed25519(cls, raw: bytes) -> "PublicKey":
        return cls(PublicKeyTag.ED25519, bytes(raw))

    @classmethod
    def secp256k1(cls, raw: bytes) -> "PublicKey":
        return cls(PublicKeyTag.SECP256K1, bytes(raw))

    @classmethod
    def from_hex(cls, text: str) -> "PublicKey":
        data = bytes.fromhex(text)
        reader = Reader(data)
        key = cls.from_reader(reader)
        reader.finish()
        return key

    @classmethod
    def from_reader(cls, reader: Reader) -> "PublicKey":
        tag = _read_tag(reader)
        return cls(tag, reader.take(PUBLIC_KEY_LENGTHS[tag]))

    def to_bytes(self) -> bytes:
        return bytesrepr.u8(self.tag) + self.raw

    def to_hex(self) -> str:
        return self.to_bytes().hex()


@dataclass(frozen=True)
class Signature:
    tag: PublicKeyTag
    raw: bytes = b""

    def __post_init__(self):
        expected = SIGNATURE_LENGTHS[self.tag]
        if len(self.raw) != expected:
            raise ValueError(f"{self.tag.name} signatures are {expected} bytes, not {len(self.raw)}")

    @classmethod
    def from_reader(cls, reader: Reader) -> "Signature":
        tag = _read_tag(reader)
        return cls(tag, reader.take(SIGNATURE_LENGTHS[tag]))

    def to_bytes(self) -> bytes:
        return bytesrepr.u8(self.tag) + self.raw


@dataclass(frozen=True)
class Ok:
    value: Any


@dataclass(frozen=True)
class Err:
    value: Any


def map_items(value: Any) -> List[Tuple[Any, Any]]:
    """Maps are held as lists of (key, value) pairs since keys may be lists or maps."""
    if isinstance(value, dict):
        return list(value.items())
    return list(value)


def serialize(cl_type: CLType, value: Any) -> bytes:
    tag = cl_type.tag
    if tag == CLTypeTag.BOOL:
        return bytesrepr.u8(1 if value else 0)
    if tag == CLTypeTag.I32:
        return bytesrepr.i32(value)
    if tag == CLTypeTag.I64:
        return bytesrepr.i64(value)
    if tag == CLTypeTag.U8:
        return bytesrepr.u8(value)
    if tag == CLTypeTag.U32:
        return bytesrepr.u32(value)
    if tag == CLTypeTag.U64:
        return bytesrepr.u64(value)
    if tag in BIG_UINT_BYTES:
        return bytesrepr.big_uint(value, BIG_UINT_BYTES[tag])
    if tag == CLTypeTag.UNIT:
        return b""
    if tag == CLTypeTag.STRING:
        return bytesrepr.string(value)
    if tag in (CLTypeTag.KEY, CLTypeTag.UREF, CLTypeTag.PUBLIC_KEY):
        return value.to_bytes()
    if tag == CLTypeTag.OPTION:
        if value is None:
            return bytesrepr.u8(0)
        return bytesrepr.u8(1) + serialize(cl_type.inner[0], value)
    if tag == CLTypeTag.LIST:
        return bytesrepr.sequence(serialize(cl_type.inner[0], item) for item in value)
    if tag == CLTypeTag.BYTE_ARRAY:
        if len(value) != cl_type.length:
            raise BytesreprError(f"Expected {cl_type.length} bytes, got {len(value)}")
        return bytes(value)
    if tag == CLTypeTag.RESULT:
        if isinstance(value, Ok):
            return bytesrepr.u8(1) + serialize(cl_type.inner[0], value.value)
        return bytesrepr.u8(0) + serialize(cl_type.inner[1], value.value)
    if tag == CLTypeTag.MAP:
        key_type, value_type = cl_type.inner
        return bytesrepr.sequence(
            serialize(key_type, k) + serialize(value_type, v) for k, v in map_items(value)
        )
    if tag in (CLTypeTag.TUPLE1, CLTypeTag.TUPLE2, CLTypeTag.TUPLE3):
        return b"".join(serialize(inner, item) for inner, item in zip(cl_type.inner, value))
    if tag == CLTypeTag.ANY:
        return bytes(value)
    raise NotImplementedError(f"No serializer for {cl_type}")


def deserialize(cl_type: CLType, reader: Reader) -> Any:
    tag = cl_type.tag
    if tag == CLTypeTag.BOOL:
        return reader.bool()
    if tag == CLTypeTag.I32:
        return reader.i32()
    if tag == CLTypeTag.I64:
        return reader.i64()
    if tag == CLTypeTag.U8:
        return reader.u8()
    if tag == CLTypeTag.U32:
        return reader.u32()
    if tag == CLTypeTag.U64:
        return reader.u64()
    if tag in BIG_UINT_BYTES:
        return reader.big_uint(BIG_UINT_BYTES[tag])
    if tag == CLTypeTag.UNIT:
        return None
    if tag == CLTypeTag.STRING:
        return reader.string()
    if tag == CLTypeTag.KEY:
        return Key.from_reader(reader)
    if tag == CLTypeTag.UREF:
        return URef.from_reader(reader)
    if tag == CLTypeTag.PUBLIC_KEY:
        return PublicKey.from_reader(reader)
    if tag == CLTypeTag.OPTION:
        if reader.bool():
            return deserialize(cl_type.inner[0], reader)
        return None
    if tag == CLTypeTag.LIST:
        return [deserialize(cl_type.inner[0], reader) for _ in range(reader.u32())]
    if tag == CLTypeTag.BYTE_ARRAY:
        return reader.take(cl_type.length)
    if tag == CLTypeTag.RESULT:
        if reader.bool():
            return Ok(deserialize(cl_type.inner[0], reader))
        return Err(deserialize(cl_type.inner[1], reader))
    if tag == CLTypeTag.MAP:
        key_type, value_type = cl_type.inner
        items = []
        for _ in range(reader.u32()):
            k = deserialize(key_type, reader)
            items.append((k, deserialize(value_type, reader)))
        return items
    if tag in (CLTypeTag.TUPLE1, CLTypeTag.TUPLE2, CLTypeTag.TUPLE3):
        return tuple(deserialize(inner, reader) for inner in cl_type.inner)
    raise BytesreprError(f"Values of type {cl_type} cannot be deserialized")


def to_parsed(cl_type: CLType, value: Any) -> Any:
    """JSON-like form of a deserialized value, the way node RPC would show it."""
    tag = cl_type.tag
    if tag in BIG_UINT_BYTES:
        return str(value)
    if tag in (CLTypeTag.KEY, CLTypeTag.UREF):
        return value.to_formatted_string()
    if tag == CLTypeTag.PUBLIC_KEY:
        return value.to_hex()
    if tag == CLTypeTag.BYTE_ARRAY:
        return value.hex()
    if tag == CLTypeTag.OPTION:
        return None if value is None else to_parsed(cl_type.inner[0], value)
    if tag == CLTypeTag.LIST:
        return [to_parsed(cl_type.inner[0], item) for item in value]
    if tag == CLTypeTag.RESULT:
        if isinstance(value, Ok):
            return {"Ok": to_parsed(cl_type.inner[0], value.value)}
        return {"Err": to_parsed(cl_type.inner[1], value.value)}
    if tag == CLTypeTag.MAP:
        key_type, value_type = cl_type.inner
        return [
            {"key": to_parsed(key_type, k), "value": to_parsed(value_type, v)}
            for k, v in map_items(value)
        ]
    if tag in (CLTypeTag.TUPLE1, CLTypeTag.TUPLE2, CLTypeTag.TUPLE3):
        return [to_parsed(inner, item) for inner, item in zip(cl_type.inner, value)]
    if tag == CLTypeTag.ANY:
        return None
    return value


@dataclass(frozen=True)
class CLValue:
    cl_type: CLType
    data: bytes

    @classmethod
    def from_t(cls, value: Any, cl_type: CLType) -> "CLValue":
        try:
            return cls(cl_type, serialize(cl_type, value))
        except (struct.error, AttributeError, TypeError) as e:
            raise BytesreprError(f"Cannot serialize {value!r} as {cl_type}") from e

    def to_t(self) -> Any:
        reader = Reader(self.data)
        value = deserialize(self.cl_type, reader)
        reader.finish()
        return value

    def parsed(self) -> Any:
        return to_parsed(self.cl_type, self.to_t())

    def to_bytes(self) -> bytes:
        return bytesrepr.byte_vec(self.data) + self.cl_type.to_bytes()

    @classmethod
    def from_reader(cls, reader: Reader) -> "CLValue":
        data = reader.byte_vec()
        return cls(CLType.from_reader(reader), data)


class RuntimeArgs:
    """Named arguments, kept in insertion order. Instances are never modified."""

    def __init__(self, named_args: Iterable[Tuple[str, CLValue]] = ()):
        self._args: Dict[str, CLValue] = {}
        for name, value in named_args:
            self._args[name] = value

    def get(self, name: str) -> Optional[CLValue]:
        return self._args.get(name)

    def items(self) -> List[Tuple[str, CLValue]]:
        return list(self._args.items())

    def sorted_items(self) -> List[Tuple[str, CLValue]]:
        return sorted(self._args.items(), key=lambda item: item[0])

    def with_arg(self, name: str, value: CLValue) -> "RuntimeArgs":
        return RuntimeArgs(self.items() + [(name, value)])

    def without(self, *names: str) -> "RuntimeArgs":
        return RuntimeArgs((name, value) for name, value in self._args.items() if name not in names)

    def to_bytes(self) -> bytes:
        return bytesrepr.sequence(
            bytesrepr.string(name) + value.to_bytes() for name, value in self._args.items()
        )

    @classmethod
    def from_reader(cls, reader: Reader) -> "RuntimeArgs":
        count = reader.u32()
        return cls((reader.string(), CLValue.from_reader(reader)) for _ in range(count))

    def __contains__(self, name: object) -> bool:
        return name in self._args

    def __iter__(self) -> Iterator[str]:
        return iter(self._args)

    def __len__(self) -> int:
        return len(self._args)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RuntimeArgs):
            return NotImplemented
        return self.items() == other.items()

    def __hash__(self):
        return hash(tuple(self.items()))

    def __repr__(self):
        return f"RuntimeArgs({', '.join(f'{name}: {value.cl_type}' for name, value in self._args.items())})"
