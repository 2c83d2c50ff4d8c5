from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..base import Field, TxnPhase, UnexpectedItemError
from ..deploy import ExecutableDeployItem, ModuleBytes
from ..utils import cl_value_to_string
from .items import deploy_type
from .runtime_args import ARG_AMOUNT, parse_amount, parse_required_arg

ARG_AUCTION = "auction"
ARG_DELEGATOR = "delegator"
ARG_VALIDATOR = "validator"
ARG_NEW_VALIDATOR = "new_validator"


@dataclass(frozen=True)
class AuctionRule:
    """
    Recognizes one auction operation.

    A call is that operation when its entry point is literally the method
    name, or when it is raw module bytes carrying an `auction` argument equal
    to the method name. Either way all the required arguments must be there.
    """
    method: str
    label: str
    # (argument name, pane label), in display order
    keys: Tuple[Tuple[str, str], ...]

    @property
    def required_args(self) -> Tuple[str, ...]:
        return tuple(name for name, _ in self.keys) + (ARG_AMOUNT,)

    def matches_entry_point(self, item: ExecutableDeployItem) -> bool:
        return item.entry_point == self.method

    def matches_auction_arg(self, item: ExecutableDeployItem) -> bool:
        if not isinstance(item, ModuleBytes):
            return False
        value = item.args.get(ARG_AUCTION)
        return value is not None and cl_value_to_string(value).lower() == self.method

    def has_required_args(self, item: ExecutableDeployItem) -> bool:
        return all(name in item.args for name in self.required_args)

    def is_recognized(self, item: ExecutableDeployItem) -> bool:
        if item.is_transfer:
            return False
        signal = self.matches_entry_point(item) or self.matches_auction_arg(item)
        return signal and self.has_required_args(item)

    def parse(self, item: ExecutableDeployItem, phase: TxnPhase = TxnPhase.SESSION) -> List[Field]:
        if item.is_transfer:
            raise UnexpectedItemError(f"A transfer cannot be parsed as '{self.method}'")
        # the contract call mechanics are secondary, keep them for experts
        fields = [field.as_expert() for field in deploy_type(phase, item)]
        for name, label in self.keys:
            fields.append(parse_required_arg(item.args, name, label))
        fields.append(parse_amount(item.args))
        return fields


DELEGATE = AuctionRule(
    method="delegate",
    label="Delegate",
    keys=((ARG_DELEGATOR, "Delegator"), (ARG_VALIDATOR, "Validator")),
)

UNDELEGATE = AuctionRule(
    method="undelegate",
    label="Undelegate",
    keys=((ARG_DELEGATOR, "Delegator"), (ARG_VALIDATOR, "Validator")),
)

REDELEGATE = AuctionRule(
    method="redelegate",
    label="Redelegate",
    keys=((ARG_DELEGATOR, "Delegator"), (ARG_VALIDATOR, "Old"), (ARG_NEW_VALIDATOR, "New")),
)

AUCTION_RULES = (DELEGATE, UNDELEGATE, REDELEGATE)


def recognize(item: ExecutableDeployItem) -> Optional[AuctionRule]:
    for rule in AUCTION_RULES:
        if rule.is_recognized(item):
            return rule
    return None


def is_delegate(item: ExecutableDeployItem) -> bool:
    return DELEGATE.is_recognized(item)


def is_undelegate(item: ExecutableDeployItem) -> bool:
    return UNDELEGATE.is_recognized(item)


def is_redelegate(item: ExecutableDeployItem) -> bool:
    return REDELEGATE.is_recognized(item)


def parse_delegation(item: ExecutableDeployItem) -> List[Field]:
    return DELEGATE.parse(item)


def parse_undelegation(item: ExecutableDeployItem) -> List[Field]:
    return UNDELEGATE.parse(item)
