from dataclasses import dataclass
from typing import List, Optional

from ..cl_types import (
    KEY,
    PUBLIC_KEY,
    U32,
    U64,
    U512,
    UREF,
    AccessRights,
    CLType,
    CLValue,
    Key,
    PublicKey,
    RuntimeArgs,
    URef,
)
from ..deploy import ExecutableDeployItem, Transfer
from ..sample import Sample

U512_MAX = 2 ** 512 - 1
U64_MAX = 2 ** 64 - 1


@dataclass(frozen=True)
class TransferTarget:
    label: str
    value: CLValue

    @classmethod
    def raw_bytes(cls) -> "TransferTarget":
        return cls("target:bytes", CLValue.from_t(bytes([1] * 32), CLType.byte_array(32)))

    @classmethod
    def uref(cls) -> "TransferTarget":
        uref = URef(bytes([33] * 32), AccessRights.READ_ADD_WRITE)
        return cls("target:uref", CLValue.from_t(uref, UREF))

    @classmethod
    def key(cls) -> "TransferTarget":
        return cls("target:key-account-hash", CLValue.from_t(Key.account(bytes([33] * 32)), KEY))

    @classmethod
    def public_key(cls) -> "TransferTarget":
        key = PublicKey.ed25519(bytes([1] * 32))
        return cls("target:public-key", CLValue.from_t(key, PUBLIC_KEY))


@dataclass(frozen=True)
class NativeTransfer:
    target: TransferTarget
    amount: int
    id: int
    source: Optional[URef]

    def to_args(self) -> RuntimeArgs:
        args = [
            ("amount", CLValue.from_t(self.amount, U512)),
            ("id", CLValue.from_t(self.id, CLType.option(U64))),
        ]
        if self.source is not None:
            args.append(("source", CLValue.from_t(self.source, CLType.option(UREF))))
        args.append(("target", self.target.value))
        return RuntimeArgs(args)


def _source_label(source: Optional[URef]) -> str:
    return "source:none" if source is None else "source:uref"


def valid() -> List[Sample[ExecutableDeployItem]]:
    amounts = [0, 100_000_000, U512_MAX]
    ids = [0, U64_MAX]
    targets = [
        TransferTarget.raw_bytes(),
        TransferTarget.uref(),
        TransferTarget.key(),
        TransferTarget.public_key(),
    ]
    access_rights = [
        AccessRights.READ,
        AccessRights.WRITE,
        AccessRights.ADD,
        AccessRights.READ_ADD,
        AccessRights.READ_WRITE,
        AccessRights.READ_ADD_WRITE,
    ]
    sources = [URef(bytes([2] * 32), rights) for rights in access_rights] + [None]

    samples = []
    for amount in amounts:
        for transfer_id in ids:
            for target in targets:
                for source in sources:
                    transfer = NativeTransfer(target, amount, transfer_id, source)
                    label = f"native_transfer-{target.label}-{_source_label(source)}"
                    samples.append(Sample(label, Transfer(transfer.to_args()), True))
    return samples


def invalid() -> List[Sample[ExecutableDeployItem]]:
    target = CLValue.from_t(URef(bytes([1] * 32), AccessRights.READ), UREF)
    amount = CLValue.from_t(100_000_000, U512)
    transfer_id = CLValue.from_t(1, U64)

    invalid_args = [
        ("missing:amount", RuntimeArgs([("id", transfer_id), ("target", target)])),
        ("missing:target", RuntimeArgs([("amount", amount), ("id", transfer_id)])),
        ("invalid_type:amount", RuntimeArgs([
            ("amount", CLValue.from_t(10_000, U32)),
            ("target", target),
            ("id", transfer_id),
        ])),
    ]
    return [
        Sample(f"native_transfer-{label}", Transfer(args), False)
        for label, args in invalid_args
    ]
