import random
from typing import Any, List, Tuple

from ..cl_types import (
    BOOL,
    I32,
    I64,
    KEY,
    PUBLIC_KEY,
    STRING,
    U8,
    U32,
    U64,
    U128,
    U256,
    U512,
    UNIT,
    UREF,
    AccessRights,
    CLType,
    CLValue,
    Err,
    Key,
    KeyTag,
    Ok,
    PublicKey,
    RuntimeArgs,
    URef,
)
from ..deploy import ExecutableDeployItem
from ..sample import Sample
from .commons import UREF_ADDR, sample_executables

ENTRY_POINT = "generic-txn-entrypoint"
ARGS_SAMPLES_COUNT = 15

SECP256K1_KEY = PublicKey.secp256k1(
    bytes.fromhex("026e1b7a8e3243f5ff14e825b0fde15103588bb61e6ae99084968b017118e0504f")
)
ED25519_KEY = PublicKey.ed25519(bytes([1] * 32))


def valid(rng: random.Random) -> List[Sample[ExecutableDeployItem]]:
    samples = []
    for args in sample_args(rng):
        samples.extend(sample_executables(ENTRY_POINT, args, None, True))
    return samples


def _typed(cl_type: CLType, values: List[Any]) -> List[Tuple[CLType, Any]]:
    return [(cl_type, value) for value in values]


def sample_urefs() -> List[URef]:
    return [URef(UREF_ADDR, rights) for rights in (
        AccessRights.NONE,
        AccessRights.READ,
        AccessRights.ADD,
        AccessRights.WRITE,
        AccessRights.READ_ADD,
        AccessRights.READ_ADD_WRITE,
        AccessRights.READ_WRITE,
        AccessRights.ADD_WRITE,
    )]


def sample_keys() -> List[Key]:
    addr = bytes([1] * 32)
    return [
        Key.account(addr),
        Key.hash(addr),
        Key(KeyTag.BALANCE, addr),
        Key(KeyTag.BID, addr),
        Key(KeyTag.DEPLOY_INFO, addr),
        Key(KeyTag.DICTIONARY, addr),
        Key.era_info(0),
        Key(KeyTag.TRANSFER, addr),
        Key.uref(URef(addr, AccessRights.READ_ADD_WRITE)),
        Key(KeyTag.WITHDRAW, addr),
    ]


def sample_values() -> List[Tuple[CLType, Any]]:
    """One entry per interesting value of every argument type."""
    return [
        *_typed(BOOL, [True, False]),
        *_typed(I32, [-2 ** 31, 0, 2 ** 31 - 1]),
        *_typed(I64, [-2 ** 63, 0, 2 ** 63 - 1]),
        *_typed(U8, [0, 2 ** 8 - 1]),
        *_typed(U32, [0, 2 ** 32 - 1]),
        *_typed(U64, [0, 2 ** 64 - 1]),
        *_typed(U128, [0, 2 ** 128 - 1]),
        *_typed(U256, [0, 2 ** 256 - 1]),
        *_typed(U512, [0, 2 ** 512 - 1]),
        *_typed(KEY, sample_keys()),
        *_typed(UREF, sample_urefs()),
        (UNIT, None),
        (STRING, "sample-string"),
        *_typed(PUBLIC_KEY, [PublicKey.system(), ED25519_KEY, SECP256K1_KEY]),
        *_typed(CLType.option(U8), [100, None]),
        *_typed(CLType.list_of(PUBLIC_KEY), [[], [ED25519_KEY, SECP256K1_KEY]]),
        (CLType.byte_array(0), b""),
        (CLType.byte_array(32), bytes([1] * 32)),
        (CLType.byte_array(64), bytes([1] * 64)),
        *_typed(CLType.result(BOOL, I32), [Ok(False), Err(-10)]),
        (CLType.map_of(STRING, U64), {"one": 1, "two": 2}),
        (CLType.tuple_of(U8), (11,)),
        (CLType.tuple_of(U8, U64), (11, 1111)),
        (CLType.tuple_of(U8, BOOL, STRING), (0, True, "tuple3")),
    ]


def sample_args(rng: random.Random) -> List[RuntimeArgs]:
    # argument names must be unique, several values share a type
    named_args = [
        (f"{str(cl_type).lower()}-{idx}", CLValue.from_t(value, cl_type))
        for idx, (cl_type, value) in enumerate(sample_values())
    ]
    out = []
    for _ in range(ARGS_SAMPLES_COUNT):
        rng.shuffle(named_args)
        count = rng.randrange(2, len(named_args))
        out.append(RuntimeArgs(named_args[:count]))
    return out
