#!/usr/bin/env python3

import json
import logging
import os
import random
from argparse import ArgumentParser, RawTextHelpFormatter
from pathlib import Path
from typing import Iterable, List

from casper_ledger import ledger
from casper_ledger.base import LedgerError
from casper_ledger.deploy import Deploy
from casper_ledger.message import CasperMessage
from casper_ledger.sample import Sample
from casper_ledger.test_data import message_samples, valid_samples

SEED_ENV_VARIABLE = "CL_TEST_SEED"
# Changing the seed changes every generated vector
DEFAULT_SEED = "c954046e102bdfb7c954046e102bdfb7"


def init_parser() -> ArgumentParser:
    parser = ArgumentParser(description="Generation of the Ledger test vectors for Casper deploys",
                            formatter_class=RawTextHelpFormatter)
    parser.add_argument("--seed",
                        default=os.environ.get(SEED_ENV_VARIABLE, DEFAULT_SEED),
                        help=f"Seed of the sample generator (default: ${SEED_ENV_VARIABLE} or {DEFAULT_SEED})")
    parser.add_argument("--output", metavar="PATH",
                        help="The file to write the vectors into (default: stdout)",
                        type=Path)
    parser.add_argument("--messages", action="store_true",
                        help="Generate message signing vectors instead of deploys")
    return parser


def deploy_vectors(samples: Iterable[Sample[Deploy]]) -> List[ledger.JsonRepr]:
    vectors = []
    for sample in samples:
        label, deploy, valid = sample.destructure()
        try:
            vectors.append(ledger.from_deploy(len(vectors), label, deploy, valid))
        except LedgerError as e:
            logging.exception(e)
            logging.warning("Skipping sample '%s'", label)
    return vectors


def message_vectors(samples: Iterable[Sample[CasperMessage]]) -> List[ledger.JsonRepr]:
    return [
        ledger.from_message(index, sample.label, sample.sample, sample.valid)
        for index, sample in enumerate(samples)
    ]


def main():
    logging.root.setLevel(logging.INFO)

    parser = init_parser()
    args = parser.parse_args()

    if args.messages:
        logging.info("Generating message vectors")
        vectors = message_vectors(message_samples())
    else:
        logging.info("Generating deploy vectors with seed %s", args.seed)
        vectors = deploy_vectors(valid_samples(random.Random(args.seed)))
    logging.info("%d vectors generated", len(vectors))

    output = json.dumps([vector.to_dict() for vector in vectors], indent=2)
    if args.output is None:
        print(output)
    else:
        output_file = args.output.resolve()
        logging.info("Writing to %s", output_file)
        with output_file.open("w", encoding="utf8") as f:
            f.write(output)
            f.write("\n")


if __name__ == '__main__':
    main()
