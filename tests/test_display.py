import pytest

from casper_ledger import checksummed_hex, display
from casper_ledger.cl_types import PublicKey


def test_public_key_zero_ed25519():
    # no letters, so no checksum casing
    assert display.public_key(PublicKey.ed25519(bytes(32))) == "01" + "0" * 64


def test_public_key_secp256k1():
    raw = bytes.fromhex("026e1b7a8e3243f5ff14e825b0fde15103588bb61e6ae99084968b017118e0504f")
    assert display.public_key(PublicKey.secp256k1(raw)) == "02" + checksummed_hex.encode(raw)


def test_public_key_system():
    assert display.public_key(PublicKey.system()) == "00"


@pytest.mark.parametrize("amount, expected", [
    (0, "0 motes"),
    (999, "999 motes"),
    (1000, "1 000 motes"),
    (100_000_000, "100 000 000 motes"),
    (24_500_000_000, "24 500 000 000 motes"),
])
def test_motes(amount, expected):
    assert display.motes(amount) == expected


@pytest.mark.parametrize("millis, expected", [
    (0, "1970-01-01T00:00:00Z"),
    (999, "1970-01-01T00:00:00Z"),
    (1_000_999, "1970-01-01T00:16:40Z"),
    (1_600_000_000_000, "2020-09-13T12:26:40Z"),
])
def test_timestamp(millis, expected):
    assert display.timestamp(millis) == expected


@pytest.mark.parametrize("millis, expected", [
    (0, "0s"),
    (5, "5ms"),
    (1000, "1s"),
    (1_800_000, "30m"),
    (3_600_000, "1h"),
    (86_400_000, "1day"),
    (2 * 86_400_000, "2days"),
    (90_061_001, "1day 1h 1m 1s 1ms"),
    (31_557_600_000, "1year"),
    (2_630_016_000 * 2, "2months"),
])
def test_duration(millis, expected):
    assert display.duration(millis) == expected


def test_line_formats():
    assert display.page_str("Amount", "1 motes") == "Amount : 1 motes"
    assert display.multi_page_str("Target", 1, 2, "ab") == "Target [1/2] : ab"
    assert display.line_str(3, "Amount : 1 motes") == "3 | Amount : 1 motes"
