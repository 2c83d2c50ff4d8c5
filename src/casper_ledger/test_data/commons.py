import random
from typing import List, Optional, Tuple

from .. import keys
from ..cl_types import PublicKeyTag, RuntimeArgs
from ..deploy import (
    Deploy,
    ExecutableDeployItem,
    ModuleBytes,
    StoredContractByHash,
    StoredContractByName,
    StoredVersionedContractByHash,
    StoredVersionedContractByName,
)
from ..sample import Sample

UREF_ADDR = bytes([
    74, 207, 207, 108, 104, 76, 88, 202, 246, 179, 41, 110, 58, 151, 196, 160, 74, 250, 247, 123,
    184, 117, 202, 154, 64, 164, 93, 178, 84, 233, 74, 117,
])

CONTRACT_HASH = bytes([1] * 32)
CONTRACT_PACKAGE_HASH = bytes([1] * 32)
CONTRACT_VERSION = 1

CHAIN_NAMES = ("casper-test", "mainnet", "casper-net-1")
# milliseconds
TTLS = (30 * 60 * 1000, 60 * 60 * 1000, 24 * 60 * 60 * 1000, 123_456_789)


def sample_executables(entry_point: str,
                       args: RuntimeArgs,
                       base_label: Optional[str] = None,
                       valid: bool = True) -> List[Sample[ExecutableDeployItem]]:
    """One sample per kind of stored contract call, all calling `entry_point` with `args`."""
    contract_name = f"{entry_point}-contract"
    items = [
        Sample("type:by-hash",
               StoredContractByHash(CONTRACT_HASH, entry_point, args),
               valid),
        Sample("type:by-name",
               StoredContractByName(contract_name, entry_point, args),
               valid),
        Sample("type:versioned-by-hash",
               StoredVersionedContractByHash(CONTRACT_PACKAGE_HASH, CONTRACT_VERSION, entry_point, args),
               valid),
        Sample("type:versioned-by-name",
               StoredVersionedContractByName(contract_name, CONTRACT_VERSION, entry_point, args),
               valid),
    ]
    if base_label is None:
        return items
    return [sample.add_label(base_label) for sample in items]


def sample_module_bytes(args: RuntimeArgs, valid: bool = True) -> Sample[ExecutableDeployItem]:
    # module bytes calls are too different from stored calls to share the logic above
    return Sample("type:module-bytes", ModuleBytes(b"", args), valid)


def prepend_label(sample: Sample[ExecutableDeployItem], prefix: str) -> Sample[ExecutableDeployItem]:
    label, item, valid = sample.destructure()
    return Sample(f"{prefix}-{label}", item, valid)


def random_account(rng: random.Random) -> Tuple[PublicKeyTag, bytes]:
    tag = rng.choice((PublicKeyTag.ED25519, PublicKeyTag.SECP256K1))
    return tag, rng.randbytes(32)


def sample_deploy(rng: random.Random,
                  payment: Sample[ExecutableDeployItem],
                  session: Sample[ExecutableDeployItem]) -> Sample[Deploy]:
    """Wraps `payment` and `session` in a deploy signed by a random account."""
    tag, secret = random_account(rng)
    deploy = Deploy.new(
        account=keys.public_key(tag, secret),
        timestamp=rng.randint(1_600_000_000_000, 1_700_000_000_000),
        ttl=rng.choice(TTLS),
        gas_price=rng.randint(1, 10),
        dependencies=[rng.randbytes(32) for _ in range(rng.randint(0, 3))],
        chain_name=rng.choice(CHAIN_NAMES),
        payment=payment.sample,
        session=session.sample,
    )
    return Sample(
        f"{session.label}-{payment.label}",
        keys.approve(deploy, tag, secret),
        payment.valid and session.valid,
    )
