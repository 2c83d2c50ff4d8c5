import logging
from typing import List, Sequence

from .. import checksummed_hex, display
from ..base import Field, TxnPhase
from ..cl_types import RuntimeArgs
from ..deploy import Approval, Deploy, DeployHeader, ExecutableDeployItem, Transfer
from . import auction
from .items import deploy_type, is_system_payment
from .runtime_args import (
    ARG_AMOUNT,
    TRANSFER_ARGS,
    parse_fee,
    parse_optional_amount,
    parse_runtime_args,
    parse_transfer_args,
)

TRANSFER = "Transfer"
CONTRACT_EXECUTION = "Contract execution"


def txn_type(item: ExecutableDeployItem) -> str:
    """Name of the operation a human is approving, decided by the session item."""
    if item.is_transfer:
        return TRANSFER
    rule = auction.recognize(item)
    if rule is not None:
        return rule.label
    return CONTRACT_EXECUTION


def parse_txn_hash(deploy: Deploy) -> Field:
    return Field.regular("Txn hash", checksummed_hex.encode(deploy.hash))


def parse_deploy_header(header: DeployHeader) -> List[Field]:
    return [
        Field.regular("Chain ID", header.chain_name),
        Field.regular("Account", display.public_key(header.account)),
        Field.expert("Timestamp", display.timestamp(header.timestamp)),
        Field.expert("Ttl", display.duration(header.ttl)),
        Field.expert("Gas price", str(header.gas_price)),
        Field.expert("Deps #", str(len(header.dependencies))),
    ]


def parse_system_payment(args: RuntimeArgs) -> List[Field]:
    fields = [parse_fee(args)]
    fields.extend(parse_runtime_args(args.without(ARG_AMOUNT)))
    return fields


def parse_transfer(item: Transfer) -> List[Field]:
    fields = parse_transfer_args(item.args)
    fields.extend(parse_runtime_args(item.args.without(*TRANSFER_ARGS)))
    return fields


def parse_contract_args(args: RuntimeArgs) -> List[Field]:
    fields = []
    amount = parse_optional_amount(args)
    if amount is not None:
        fields.append(amount)
    fields.extend(parse_runtime_args(args.without(ARG_AMOUNT)))
    return fields


def parse_phase(phase: TxnPhase, item: ExecutableDeployItem) -> List[Field]:
    if isinstance(item, Transfer):
        return parse_transfer(item)
    if is_system_payment(phase, item):
        return parse_system_payment(item.args)
    rule = auction.recognize(item)
    if rule is not None:
        logging.debug("%s phase recognized as '%s'", phase, rule.method)
        return rule.parse(item, phase)
    return deploy_type(phase, item) + parse_contract_args(item.args)


def parse_approvals(approvals: Sequence[Approval]) -> Field:
    return Field.expert("Approvals #", str(len(approvals)))
