from typing import List, Optional

from .. import checksummed_hex
from ..base import Field, TxnPhase
from ..checksummed_hex import blake2b
from ..deploy import (
    ExecutableDeployItem,
    ModuleBytes,
    StoredContractByHash,
    StoredContractByName,
    StoredVersionedContractByHash,
    StoredVersionedContractByName,
    Transfer,
)


def is_system_payment(phase: TxnPhase, item: ExecutableDeployItem) -> bool:
    """Payment is a system payment when the module bytes are empty."""
    return phase.is_payment and isinstance(item, ModuleBytes) and len(item.module_bytes) == 0


def entrypoint(entry_point: str) -> Field:
    return Field.expert("Entry-point", entry_point)


def parse_version(version: Optional[int]) -> Field:
    return Field.expert("Version", "latest" if version is None else str(version))


def deploy_type(phase: TxnPhase, item: ExecutableDeployItem) -> List[Field]:
    """
    Fields telling what kind of code runs in the phase and where it lives:
    raw contract bytes, a call by name or by hash, versioned or not.

    Does NOT parse the arguments.
    """
    label = str(phase)
    if isinstance(item, ModuleBytes):
        if is_system_payment(phase, item):
            # the built-in payment is not worth a pane, like on other chains
            return []
        return [
            Field.regular(label, "contract"),
            Field.regular("Cntrct hash", checksummed_hex.encode(blake2b(item.module_bytes))),
        ]
    if isinstance(item, StoredContractByHash):
        return [
            Field.regular(label, "by-hash"),
            Field.regular("Address", checksummed_hex.encode(item.hash)),
            entrypoint(item.entry_point),
        ]
    if isinstance(item, StoredContractByName):
        return [
            Field.regular(label, "by-name"),
            Field.regular("Name", item.name),
            entrypoint(item.entry_point),
        ]
    if isinstance(item, StoredVersionedContractByHash):
        return [
            Field.regular(label, "by-hash-versioned"),
            Field.regular("Address", checksummed_hex.encode(item.hash)),
            entrypoint(item.entry_point),
            parse_version(item.version),
        ]
    if isinstance(item, StoredVersionedContractByName):
        return [
            Field.regular(label, "by-name-versioned"),
            Field.regular("Name", item.name),
            entrypoint(item.entry_point),
            parse_version(item.version),
        ]
    if isinstance(item, Transfer):
        # already covered by the `Type` pane
        return []
    raise NotImplementedError(f"Unknown executable item {type(item).__name__}")
