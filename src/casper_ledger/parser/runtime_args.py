from typing import Callable, List, Optional

from ..base import Field, InvalidArgumentError, MissingArgumentError
from ..cl_types import RuntimeArgs
from ..display import motes
from ..utils import cl_value_to_string

ARG_AMOUNT = "amount"
ARG_TO = "to"
ARG_SOURCE = "source"
ARG_TARGET = "target"
ARG_ID = "id"

TRANSFER_ARGS = (ARG_TO, ARG_SOURCE, ARG_TARGET, ARG_AMOUNT, ARG_ID)


def identity(value: str) -> str:
    return value


def parse_runtime_args(args: RuntimeArgs) -> List[Field]:
    """
    Parses all arguments into pairs of expert fields:
        arg-n-name: <name>
        arg-n-val: <val>
    where n is the position of the argument once sorted by name.
    """
    fields = []
    for idx, (name, value) in enumerate(args.sorted_items()):
        fields.append(Field.expert(f"arg-{idx}-name", name))
        fields.append(Field.expert(f"arg-{idx}-val", cl_value_to_string(value)))
    return fields


def parse_optional_arg(args: RuntimeArgs,
                       key: str,
                       label: str,
                       expert: bool = False,
                       f: Callable[[str], str] = identity) -> Optional[Field]:
    cl_value = args.get(key)
    if cl_value is None:
        return None
    value = f(cl_value_to_string(cl_value))
    return Field.expert(label, value) if expert else Field.regular(label, value)


def parse_required_arg(args: RuntimeArgs,
                       key: str,
                       label: str,
                       expert: bool = False,
                       f: Callable[[str], str] = identity) -> Field:
    field = parse_optional_arg(args, key, label, expert, f)
    if field is None:
        raise MissingArgumentError(f"Required argument '{key}' is missing")
    return field


def motes_from_str(amount: str) -> str:
    if not (amount.isascii() and amount.isdigit()):
        raise InvalidArgumentError(f"'{amount}' is not an amount of motes")
    return motes(int(amount))


def motes_or_raw(amount: str) -> str:
    try:
        return motes_from_str(amount)
    except InvalidArgumentError:
        return amount


def parse_fee(args: RuntimeArgs) -> Field:
    return parse_required_arg(args, ARG_AMOUNT, "Fee", f=motes_from_str)


def parse_amount(args: RuntimeArgs) -> Field:
    return parse_required_arg(args, ARG_AMOUNT, "Amount", f=motes_from_str)


def parse_optional_amount(args: RuntimeArgs) -> Optional[Field]:
    # dApps may pass anything under `amount`, show it as is when it is not a number
    return parse_optional_arg(args, ARG_AMOUNT, "Amount", f=motes_or_raw)


def parse_transfer_args(args: RuntimeArgs) -> List[Field]:
    """
    Required arguments of a native transfer:
        * target
        * amount
    Optional ones:
        * to
        * source
        * id
    """
    fields = []
    recipient = parse_optional_arg(args, ARG_TO, "Recipient")
    if recipient is not None:
        fields.append(recipient)
    source = parse_optional_arg(args, ARG_SOURCE, "From", expert=True)
    if source is not None:
        fields.append(source)
    fields.append(parse_required_arg(args, ARG_TARGET, "Target"))
    fields.append(parse_amount(args))
    transfer_id = parse_optional_arg(args, ARG_ID, "Id", expert=True)
    if transfer_id is not None:
        fields.append(transfer_id)
    return fields
