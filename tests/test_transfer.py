import pytest

from casper_ledger import checksummed_hex
from casper_ledger.base import MissingArgumentError, TxnPhase
from casper_ledger.cl_types import (
    STRING,
    U64,
    U512,
    UREF,
    AccessRights,
    CLType,
    CLValue,
    RuntimeArgs,
    URef,
)
from casper_ledger.deploy import Transfer
from casper_ledger.parser.deploy import parse_phase

ZERO_TARGET = CLValue.from_t(bytes(32), CLType.byte_array(32))
AMOUNT = CLValue.from_t(100_000_000, U512)


def regular(fields):
    return [(field.name, field.value) for field in fields if not field.is_expert]


def expert(fields):
    return [(field.name, field.value) for field in fields if field.is_expert]


def test_required_fields_only():
    args = RuntimeArgs([("amount", AMOUNT), ("target", ZERO_TARGET)])
    fields = parse_phase(TxnPhase.SESSION, Transfer(args))
    assert regular(fields) == [("Target", "0" * 64), ("Amount", "100 000 000 motes")]
    assert expert(fields) == []


def test_optional_id_without_source():
    args = RuntimeArgs([
        ("amount", AMOUNT),
        ("id", CLValue.from_t(999, CLType.option(U64))),
        ("target", ZERO_TARGET),
    ])
    fields = parse_phase(TxnPhase.SESSION, Transfer(args))
    assert [field.name for field in fields] == ["Target", "Amount", "Id"]
    assert expert(fields) == [("Id", "999")]
    assert "From" not in [field.name for field in fields]


def test_all_fields_in_order():
    source = URef(bytes([2] * 32), AccessRights.READ)
    args = RuntimeArgs([
        ("to", CLValue.from_t(bytes([0xab] * 32), CLType.byte_array(32))),
        ("amount", AMOUNT),
        ("id", CLValue.from_t(1, U64)),
        ("source", CLValue.from_t(source, UREF)),
        ("target", ZERO_TARGET),
    ])
    fields = parse_phase(TxnPhase.SESSION, Transfer(args))
    assert [(field.name, field.is_expert) for field in fields] == [
        ("Recipient", False),
        ("From", True),
        ("Target", False),
        ("Amount", False),
        ("Id", True),
    ]
    assert fields[0].value == checksummed_hex.encode(bytes([0xab] * 32))
    assert fields[1].value == checksummed_hex.encode(bytes([2] * 32))


def test_extra_arguments_follow_reserved_ones():
    args = RuntimeArgs([
        ("zeta", CLValue.from_t("last", STRING)),
        ("amount", AMOUNT),
        ("target", ZERO_TARGET),
        ("alpha", CLValue.from_t(7, U64)),
    ])
    fields = parse_phase(TxnPhase.SESSION, Transfer(args))
    assert expert(fields) == [
        ("arg-0-name", "alpha"),
        ("arg-0-val", "7"),
        ("arg-1-name", "zeta"),
        ("arg-1-val", "last"),
    ]


def test_transfer_does_not_mutate_args():
    args = RuntimeArgs([("amount", AMOUNT), ("target", ZERO_TARGET)])
    parse_phase(TxnPhase.SESSION, Transfer(args))
    assert list(args) == ["amount", "target"]


@pytest.mark.parametrize("missing", ["amount", "target"])
def test_missing_required_argument(missing):
    args = RuntimeArgs([("amount", AMOUNT), ("target", ZERO_TARGET)]).without(missing)
    with pytest.raises(MissingArgumentError):
        parse_phase(TxnPhase.SESSION, Transfer(args))
