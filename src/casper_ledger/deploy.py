from dataclasses import dataclass, replace
from enum import IntEnum
from typing import Optional, Sequence, Tuple

from . import bytesrepr
from .checksummed_hex import blake2b
from .cl_types import PublicKey, RuntimeArgs, Signature


class ItemTag(IntEnum):
    MODULE_BYTES = 0
    STORED_CONTRACT_BY_HASH = 1
    STORED_CONTRACT_BY_NAME = 2
    STORED_VERSIONED_CONTRACT_BY_HASH = 3
    STORED_VERSIONED_CONTRACT_BY_NAME = 4
    TRANSFER = 5


def _optional_version(version: Optional[int]) -> bytes:
    if version is None:
        return bytesrepr.u8(0)
    return bytesrepr.u8(1) + bytesrepr.u32(version)


class ExecutableDeployItem:
    tag: ItemTag
    args: RuntimeArgs
    entry_point: Optional[str]

    @property
    def is_transfer(self) -> bool:
        return self.tag == ItemTag.TRANSFER

    def payload_bytes(self) -> bytes:
        return b""

    def to_bytes(self) -> bytes:
        return bytesrepr.u8(self.tag) + self.payload_bytes() + self.args.to_bytes()


@dataclass(frozen=True)
class ModuleBytes(ExecutableDeployItem):
    module_bytes: bytes
    args: RuntimeArgs
    tag = ItemTag.MODULE_BYTES
    entry_point = None

    def payload_bytes(self) -> bytes:
        return bytesrepr.byte_vec(self.module_bytes)


@dataclass(frozen=True)
class StoredContractByHash(ExecutableDeployItem):
    hash: bytes
    entry_point: str
    args: RuntimeArgs
    tag = ItemTag.STORED_CONTRACT_BY_HASH

    def payload_bytes(self) -> bytes:
        return bytes(self.hash) + bytesrepr.string(self.entry_point)


@dataclass(frozen=True)
class StoredContractByName(ExecutableDeployItem):
    name: str
    entry_point: str
    args: RuntimeArgs
    tag = ItemTag.STORED_CONTRACT_BY_NAME

    def payload_bytes(self) -> bytes:
        return bytesrepr.string(self.name) + bytesrepr.string(self.entry_point)


@dataclass(frozen=True)
class StoredVersionedContractByHash(ExecutableDeployItem):
    hash: bytes
    version: Optional[int]
    entry_point: str
    args: RuntimeArgs
    tag = ItemTag.STORED_VERSIONED_CONTRACT_BY_HASH

    def payload_bytes(self) -> bytes:
        return bytes(self.hash) + _optional_version(self.version) + bytesrepr.string(self.entry_point)


@dataclass(frozen=True)
class StoredVersionedContractByName(ExecutableDeployItem):
    name: str
    version: Optional[int]
    entry_point: str
    args: RuntimeArgs
    tag = ItemTag.STORED_VERSIONED_CONTRACT_BY_NAME

    def payload_bytes(self) -> bytes:
        return bytesrepr.string(self.name) + _optional_version(self.version) + bytesrepr.string(self.entry_point)


@dataclass(frozen=True)
class Transfer(ExecutableDeployItem):
    args: RuntimeArgs
    tag = ItemTag.TRANSFER
    entry_point = None


@dataclass(frozen=True)
class DeployHeader:
    account: PublicKey
    # milliseconds since the unix epoch
    timestamp: int
    # milliseconds
    ttl: int
    gas_price: int
    body_hash: bytes
    dependencies: Tuple[bytes, ...]
    chain_name: str

    def to_bytes(self) -> bytes:
        return b"".join([
            self.account.to_bytes(),
            bytesrepr.u64(self.timestamp),
            bytesrepr.u64(self.ttl),
            bytesrepr.u64(self.gas_price),
            bytes(self.body_hash),
            bytesrepr.sequence(bytes(dependency) for dependency in self.dependencies),
            bytesrepr.string(self.chain_name),
        ])

    def hash(self) -> bytes:
        return blake2b(self.to_bytes())


@dataclass(frozen=True)
class Approval:
    signer: PublicKey
    signature: Signature

    def to_bytes(self) -> bytes:
        return self.signer.to_bytes() + self.signature.to_bytes()


def body_hash(payment: ExecutableDeployItem, session: ExecutableDeployItem) -> bytes:
    return blake2b(payment.to_bytes() + session.to_bytes())


@dataclass(frozen=True)
class Deploy:
    hash: bytes
    header: DeployHeader
    payment: ExecutableDeployItem
    session: ExecutableDeployItem
    approvals: Tuple[Approval, ...] = ()

    @classmethod
    def new(cls,
            account: PublicKey,
            timestamp: int,
            ttl: int,
            gas_price: int,
            dependencies: Sequence[bytes],
            chain_name: str,
            payment: ExecutableDeployItem,
            session: ExecutableDeployItem) -> "Deploy":
        header = DeployHeader(
            account=account,
            timestamp=timestamp,
            ttl=ttl,
            gas_price=gas_price,
            body_hash=body_hash(payment, session),
            dependencies=tuple(dependencies),
            chain_name=chain_name,
        )
        return cls(header.hash(), header, payment, session)

    def with_approval(self, approval: Approval) -> "Deploy":
        return replace(self, approvals=self.approvals + (approval,))

    def has_valid_hashes(self) -> bool:
        return (self.header.body_hash == body_hash(self.payment, self.session)
                and self.hash == self.header.hash())

    def to_bytes(self) -> bytes:
        return b"".join([
            self.header.to_bytes(),
            bytes(self.hash),
            self.payment.to_bytes(),
            self.session.to_bytes(),
            bytesrepr.sequence(approval.to_bytes() for approval in self.approvals),
        ])
