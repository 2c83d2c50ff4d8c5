from casper_ledger.ledger import LedgerView, from_deploy, from_message
from casper_ledger.parser import parse_deploy, parse_message

__all__ = ["LedgerView", "from_deploy", "from_message", "parse_deploy", "parse_message"]
