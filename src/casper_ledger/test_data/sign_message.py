from typing import List

from ..message import CasperMessage
from ..sample import Sample

SAMPLE_MESSAGE = b"Please sign this CSPR token donation"

# almost the expected prefix, but not quite
INVALID_PREFIXES = (
    b"Casper:",
    b"CasperMessage:",
    b"Casper:\n",
    b"casper message:\n",
    b"Casper message:\n",
)


def valid() -> List[Sample[CasperMessage]]:
    return [Sample("valid-casper-message", CasperMessage.new(SAMPLE_MESSAGE), True)]


def invalid() -> List[Sample[CasperMessage]]:
    return [
        Sample("invalid-casper-message", CasperMessage.raw(prefix + SAMPLE_MESSAGE), False)
        for prefix in INVALID_PREFIXES
    ]
