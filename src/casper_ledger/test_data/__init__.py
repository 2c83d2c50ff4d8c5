import random
from typing import List

from ..deploy import Deploy
from ..message import CasperMessage
from ..sample import Sample
from . import auction, generic, native_transfer, sign_message, system_payment
from .commons import sample_deploy


def valid_samples(rng: random.Random) -> List[Sample[Deploy]]:
    """
    All the deploys of the test vectors, in a stable order for a given seed.

    Every session is paid with the standard system payment. Samples flagged
    invalid are still produced: showing them must be refused or fail.
    """
    payment = system_payment.valid()
    sessions = [
        *native_transfer.valid(),
        *native_transfer.invalid(),
        *auction.delegate_valid(),
        *auction.delegate_invalid(),
        *auction.undelegate_valid(),
        *auction.undelegate_invalid(),
        *auction.redelegate_valid(),
        *auction.redelegate_invalid(),
        *generic.valid(rng),
    ]
    samples = [sample_deploy(rng, payment, session) for session in sessions]
    # a transfer paid without the required payment amount
    samples.append(sample_deploy(rng, system_payment.invalid(), native_transfer.valid()[0]))
    return samples


def message_samples() -> List[Sample[CasperMessage]]:
    return sign_message.valid() + sign_message.invalid()
