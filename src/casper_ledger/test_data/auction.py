"""
Samples of calls to the auction contract.

| method       | arguments                                                    |
|--------------|--------------------------------------------------------------|
| `delegate`   | `delegator: PublicKey`, `validator: PublicKey`, `amount: U512` |
| `undelegate` | `delegator: PublicKey`, `validator: PublicKey`, `amount: U512` |
| `redelegate` | as above plus `new_validator: PublicKey`                     |
"""
from typing import List, Tuple

from ..cl_types import PUBLIC_KEY, STRING, U32, U512, CLValue, PublicKey, RuntimeArgs
from ..deploy import ExecutableDeployItem
from ..sample import Sample
from .commons import prepend_label, sample_executables, sample_module_bytes

DELEGATOR = PublicKey.ed25519(bytes([1] * 32))
VALIDATOR = PublicKey.ed25519(bytes([3] * 32))
NEW_VALIDATOR = PublicKey.ed25519(bytes([6] * 32))

AMOUNTS = (0, 100_000_000, 2 ** 512 - 1)
INVALID_AMOUNT = 100_000_000


def _key(key: PublicKey) -> CLValue:
    return CLValue.from_t(key, PUBLIC_KEY)


def _amount(amount: int) -> CLValue:
    return CLValue.from_t(amount, U512)


def delegation_args(amount: int) -> RuntimeArgs:
    return RuntimeArgs([
        ("delegator", _key(DELEGATOR)),
        ("validator", _key(VALIDATOR)),
        ("amount", _amount(amount)),
    ])


def redelegation_args(amount: int) -> RuntimeArgs:
    return RuntimeArgs([
        ("delegator", _key(DELEGATOR)),
        ("validator", _key(VALIDATOR)),
        ("new_validator", _key(NEW_VALIDATOR)),
        ("amount", _amount(amount)),
    ])


def _valid(method: str, all_args: List[RuntimeArgs]) -> List[Sample[ExecutableDeployItem]]:
    samples = []
    for args in all_args:
        for sample in sample_executables(method, args):
            samples.append(prepend_label(sample, method))
        with_auction = args.with_arg("auction", CLValue.from_t(method, STRING))
        samples.append(prepend_label(sample_module_bytes(with_auction), method))
    return samples


def _invalid(method: str,
             valid_args: RuntimeArgs,
             invalid_args: List[Tuple[str, RuntimeArgs, bool]]) -> List[Sample[ExecutableDeployItem]]:
    """
    Calls that are not recognized as `method`, they fall back to generic contract calls.

    Most of them stay valid: a dApp can call its own contract with similar arguments
    and the device must still accept it.
    """
    samples = []
    for label, args, valid in invalid_args:
        samples.extend(sample_executables(method, args, label, valid))
        samples.extend(sample_executables("invalid", valid_args, "invalid:entrypoint", True))
    return [prepend_label(sample, method) for sample in samples]


def _invalid_delegation(method: str) -> List[Sample[ExecutableDeployItem]]:
    valid_args = delegation_args(INVALID_AMOUNT)
    return _invalid(method, valid_args, [
        ("missing:amount", valid_args.without("amount"), True),
        ("missing:delegator", valid_args.without("delegator"), True),
        ("missing:validator", valid_args.without("validator"), True),
        ("invalid_type:amount",
         valid_args.without("amount").with_arg("amount", CLValue.from_t(100_000, U32)),
         True),
    ])


def delegate_valid() -> List[Sample[ExecutableDeployItem]]:
    return _valid("delegate", [delegation_args(amount) for amount in AMOUNTS])


def delegate_invalid() -> List[Sample[ExecutableDeployItem]]:
    return _invalid_delegation("delegate")


def undelegate_valid() -> List[Sample[ExecutableDeployItem]]:
    return _valid("undelegate", [delegation_args(amount) for amount in AMOUNTS])


def undelegate_invalid() -> List[Sample[ExecutableDeployItem]]:
    return _invalid_delegation("undelegate")


def redelegate_valid() -> List[Sample[ExecutableDeployItem]]:
    return _valid("redelegate", [redelegation_args(amount) for amount in AMOUNTS])


def redelegate_invalid() -> List[Sample[ExecutableDeployItem]]:
    valid_args = redelegation_args(INVALID_AMOUNT)
    return _invalid("redelegate", valid_args, [
        ("missing:amount", valid_args.without("amount"), True),
        ("missing:delegator", valid_args.without("delegator"), True),
        ("missing:validator", valid_args.without("validator"), True),
        ("missing:new_validator", valid_args.without("new_validator"), False),
        ("invalid_type:amount",
         valid_args.without("amount").with_arg("amount", CLValue.from_t(100_000, U32)),
         True),
    ])
