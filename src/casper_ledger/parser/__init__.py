from typing import List

from ..base import Field, TxnPhase
from ..deploy import Deploy
from ..message import CasperMessage
from .deploy import (
    parse_approvals,
    parse_deploy_header,
    parse_phase,
    parse_txn_hash,
    txn_type,
)
from .items import deploy_type


def parse_deploy(deploy: Deploy) -> List[Field]:
    """
    Everything shown on the device before approving `deploy`, in display order.

    Raises a LedgerError when the deploy cannot be shown faithfully.
    """
    fields = [
        parse_txn_hash(deploy),
        Field.regular("Type", txn_type(deploy.session)),
    ]
    fields.extend(parse_deploy_header(deploy.header))
    fields.extend(parse_phase(TxnPhase.PAYMENT, deploy.payment))
    fields.extend(parse_phase(TxnPhase.SESSION, deploy.session))
    fields.append(parse_approvals(deploy.approvals))
    return fields


def parse_message(message: CasperMessage) -> List[Field]:
    # the message itself may be anything, only its hash is shown
    return [Field.regular("Msg hash", message.hashed().hex())]


__all__ = ["deploy_type", "parse_deploy", "parse_message"]
