from ..cl_types import U512, CLValue, RuntimeArgs
from ..deploy import ExecutableDeployItem, ModuleBytes
from ..sample import Sample


def valid() -> Sample[ExecutableDeployItem]:
    payment = ModuleBytes(b"", RuntimeArgs([("amount", CLValue.from_t(1_000_000_000, U512))]))
    return Sample("payment:system", payment, True)


def invalid() -> Sample[ExecutableDeployItem]:
    payment = ModuleBytes(b"", RuntimeArgs([("paying", CLValue.from_t(1_000_000_000, U512))]))
    return Sample("payment:system-missing:amount", payment, False)
